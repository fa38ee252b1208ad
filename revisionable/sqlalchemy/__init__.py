'''SQLAlchemy revision history extension.

For general information see the root revisionable package docstring.

Implementation Notes
====================

Revisions are recorded by mapper events (`after_update`, `after_insert`)
on each revisionable model, see `Revisioner`. The user responsible for a
change is held on the session (`SQLAlchemySession.set_user`) as that is
what a mapper event has access to.

Relations between models are taken from their mappers (`MapperRegistry`):
a revision with key `categoryId` on a `Post` resolves through the scalar
relationship `Post.category`.
'''
from .tools import Repository
from .revision import Revision, make_revision_table, setup_revision
from .registry import MapperRegistry
from .revisioner import Revisioner
from .sqla import SQLAlchemyMixin, SQLAlchemySession
from .store import SessionStore
