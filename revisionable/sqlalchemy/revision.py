from datetime import datetime

from sqlalchemy import Column, DateTime, Index, Integer, String, Table, Text

from revisionable.revision import Revision as _Revision
from .sqla import SQLAlchemyMixin


class Revision(_Revision, SQLAlchemyMixin):

    @classmethod
    def youngest(self, session):
        '''Get the youngest (most recent) revision.'''
        q = session.query(self).order_by(self.id.desc())
        return q.first()

    @classmethod
    def history_for(self, session, type_name, record_id):
        '''All revisions of one record, youngest first.'''
        q = session.query(self).filter_by(
                revisionable_type=type_name,
                revisionable_id=record_id,
                ).order_by(self.id.desc())
        return q.all()


def make_revision_table(metadata, name='revision'):
    '''Revision table.

    Column names are those of the established revision schema, attributes
    (column keys) are snake case.
    '''
    revision_table = Table(name, metadata,
            Column('id', Integer, primary_key=True),
            Column('revisionableType', String(255), key='revisionable_type',
                nullable=False),
            Column('revisionableId', Integer, key='revisionable_id',
                nullable=False),
            Column('userId', Integer, key='user_id', nullable=True),
            Column('key', String(255), nullable=False),
            Column('oldValue', Text, key='old_value', nullable=True),
            Column('newValue', Text, key='new_value', nullable=True),
            Column('created_at', DateTime, default=datetime.now),
            Column('updated_at', DateTime, default=datetime.now,
                onupdate=datetime.now),
            )
    Index('%s_revisionable_id_revisionable_type_index' % name,
            revision_table.c.revisionable_id,
            revision_table.c.revisionable_type)
    return revision_table


def setup_revision(metadata, mapper):
    '''Map the Revision domain object to a new revision table.

    @param mapper: mapping function, e.g. `registry().map_imperatively`.
    :return: the revision table.
    '''
    revision_table = make_revision_table(metadata)
    mapper(Revision, revision_table)
    return revision_table
