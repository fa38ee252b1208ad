'''Mixin for domain objects taking part in revision history.

Subclassing `RevisionableMixin` is how a type tells both sides of the
package how to treat it:

  * the write side (which fields to record, whether to record creation);
  * the read side (placeholders, identifiable name, per-field mutators
    and formatting) used by `revisionable.resolver`.
'''
from revisionable.naming import mutator_name

DEFAULT_NULL_STRING = 'nothing'
DEFAULT_UNKNOWN_STRING = 'unknown'


class RevisionableMixin(object):

    __revisionable__ = True

    # shown when a foreign key pointing at this type was empty
    revision_null_string = DEFAULT_NULL_STRING
    # shown when a foreign key points at a record of this type that is gone
    revision_unknown_string = DEFAULT_UNKNOWN_STRING

    revision_enabled = True
    revision_creations_enabled = False
    # None means every column
    keep_revision_of = None
    dont_keep_revision_of = ()

    def identifiable_name(self):
        '''Human readable name of this record, override as needed.'''
        return str(getattr(self, 'id', None))

    @classmethod
    def mutator_for(cls, key):
        '''Return the callable formatting values of field `key`, or None.

        By convention this is a classmethod (or staticmethod) called
        `get_<field>_attribute`, e.g. `get_status_attribute` for key
        `status`. Mutators format stored text and get no record to work on.
        '''
        mutator = getattr(cls, mutator_name(key), None)
        if callable(mutator):
            return mutator
        return None

    @classmethod
    def format_revision_value(cls, key, value):
        '''Last formatting step for values of field `key` on this type.'''
        return value

    @classmethod
    def is_revision_tracked(cls, key):
        if key in cls.dont_keep_revision_of:
            return False
        if cls.keep_revision_of is not None:
            return key in cls.keep_revision_of
        return True
