from revisionable.naming import ID_SUFFIX, strip_suffix


class Revision(object):
    '''One change to one field of one revisionable record.

    A revision is written once, when the change happens, and never updated
    afterwards. Values are stored as text (or None) exactly as they were,
    see `revisionable.resolver` for turning them into something readable.
    '''
    class Which(object):
        OLD = 'old'
        NEW = 'new'

    def __init__(self, revisionable_type=None, revisionable_id=None,
            key=None, old_value=None, new_value=None, user_id=None,
            created_at=None, updated_at=None):
        self.revisionable_type = revisionable_type
        self.revisionable_id = revisionable_id
        self.key = key
        self.old_value = old_value
        self.new_value = new_value
        self.user_id = user_id
        self.created_at = created_at
        self.updated_at = updated_at

    def value(self, which=Which.NEW):
        '''Raw stored value on the `which` ('old' or 'new') side.'''
        if which == self.Which.OLD:
            return self.old_value
        if which == self.Which.NEW:
            return self.new_value
        raise ValueError('which must be %r or %r, not %r' %
                (self.Which.OLD, self.Which.NEW, which))

    def field_name(self, suffix=ID_SUFFIX):
        '''Field that was updated.

        In the case that it is a foreign key, denoted by the id suffix, the
        suffix is simply stripped.
        '''
        return strip_suffix(self.key, suffix)

    def __repr__(self):
        return '<Revision %s#%s %s>' % (self.revisionable_type,
                self.revisionable_id, self.key)
