'''Various useful tools for working with revision history.

Primarily organized within a `Repository` object.
'''
from sqlalchemy import create_engine
from sqlalchemy.orm import object_mapper, scoped_session

from revisionable.base import RevisionableMixin
from revisionable.resolver import RevisionResolver
from .registry import MapperRegistry
from .revision import Revision, setup_revision
from .revisioner import Revisioner
from .sqla import SQLAlchemySession
from .store import SessionStore

import logging
logger = logging.getLogger('revisionable')


class Repository(object):
    def __init__(self, our_metadata, our_session, mapper, dburi=None,
            settings=None):
        '''
        @param mapper: mapping function used to map Revision, e.g.
            `registry().map_imperatively`.
        @param dburi: sqlalchemy dburi. If supplied will create engine and bind
            it to the session.
        @param settings: RevisionSettings for the resolver.
        '''
        self.metadata = our_metadata
        self.session = our_session
        self.dburi = dburi
        self.have_scoped_session = isinstance(self.session, scoped_session)
        self.engine = None
        if self.dburi:
            self.engine = create_engine(dburi)
            self.session.configure(bind=self.engine)
        self.revision_table = setup_revision(self.metadata, mapper)
        self.registry = MapperRegistry()
        self.store = SessionStore(self.session)
        self.revisioner = Revisioner(self.revision_table, self.registry)
        self.resolver = RevisionResolver(self.registry, self.store, settings)

    @property
    def bind(self):
        if self.engine is not None:
            return self.engine
        sess = self.session() if self.have_scoped_session else self.session
        return sess.get_bind()

    def rebuild_db(self):
        logger.info('Rebuilding DB')
        self.metadata.drop_all(bind=self.bind)
        self.metadata.create_all(bind=self.bind)

    def commit(self, remove=True):
        self.session.commit()
        if remove and self.have_scoped_session:
            self.session.remove()

    def register(self, model, name=None, relations=None):
        '''Make `model` known to resolution without recording its changes.'''
        return self.registry.register(model, name=name, relations=relations)

    def make_revisionable(self, model, name=None, relations=None):
        '''Register `model` and record revisions of it from now on.'''
        if not issubclass(model, RevisionableMixin):
            msg = '%s must use RevisionableMixin to be revisioned' % model
            raise ValueError(msg)
        self.register(model, name=name, relations=relations)
        self.revisioner.listen(model)
        return model

    def set_user(self, user_id):
        '''Attribute changes in the current session to `user_id`.'''
        SQLAlchemySession.set_user(self.session, user_id)

    def history(self, obj):
        '''Revisions of `obj`, youngest first.'''
        type_name = self.registry.type_name_of(obj.__class__)
        record_id = object_mapper(obj).primary_key_from_instance(obj)[0]
        return Revision.history_for(self.session, type_name, record_id)
