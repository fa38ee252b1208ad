from datetime import datetime

import sqlalchemy
from sqlalchemy import event
from sqlalchemy.orm import object_session

from .sqla import SQLAlchemySession

import logging
logger = logging.getLogger('revisionable')


def as_text(value):
    if value is None:
        return None
    return str(value)


class Revisioner(object):
    '''Record revisions of revisionable objects.

    In essence we keep a change log: on every update of a tracked object
    one revision row per changed column is written. On insert a single
    'created_at' revision is written if the model asks for it.

    NB: rows are inserted directly on the flush connection. Working with
    Revision objects is no good here as objects added during a flush only
    get saved at the next flush.

    NB: the old value is taken from attribute history. If the attribute
    was expired before being changed there is no old value to be had and
    None is recorded.
    '''

    CREATED_KEY = 'created_at'

    def __init__(self, revision_table, registry):
        self.revision_table = revision_table
        self.registry = registry

    def listen(self, model):
        event.listen(model, 'after_insert', self.after_insert)
        event.listen(model, 'after_update', self.after_update)

    def revisioning_disabled(self, instance):
        if not getattr(instance, 'revision_enabled', True):
            return True
        sess = object_session(instance)
        return SQLAlchemySession.revisioning_disabled(sess)

    def changes(self, mapper, instance):
        '''List of (key, old, new) for each changed, tracked column.'''
        state = sqlalchemy.inspect(instance)
        out = []
        for prop in mapper.column_attrs:
            key = prop.key
            if not instance.is_revision_tracked(key):
                continue
            history = state.attrs[key].history
            if not history.has_changes():
                continue
            old = as_text(history.deleted[0]) if history.deleted else None
            new = as_text(history.added[0]) if history.added else None
            if old == new:
                continue
            out.append((key, old, new))
        return out

    def make_row(self, mapper, instance, key, old, new):
        pk = mapper.primary_key_from_instance(instance)
        return {
            'revisionable_type': self.registry.type_name_of(instance.__class__),
            'revisionable_id': pk[0],
            'user_id': SQLAlchemySession.get_user(object_session(instance)),
            'key': key,
            'old_value': old,
            'new_value': new,
            }

    def save(self, connection, rows):
        if not rows:
            return
        logger.debug('Creating revisions: %s' % rows)
        connection.execute(self.revision_table.insert(), rows)

    def after_update(self, mapper, connection, instance):
        if self.revisioning_disabled(instance):
            return
        rows = [ self.make_row(mapper, instance, key, old, new)
            for key, old, new in self.changes(mapper, instance) ]
        self.save(connection, rows)

    def after_insert(self, mapper, connection, instance):
        if self.revisioning_disabled(instance):
            return
        if not getattr(instance, 'revision_creations_enabled', False):
            return
        created = getattr(instance, self.CREATED_KEY, None) or datetime.now()
        row = self.make_row(mapper, instance, self.CREATED_KEY, None,
                as_text(created))
        self.save(connection, [row])
