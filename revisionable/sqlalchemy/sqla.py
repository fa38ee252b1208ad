'''Generic sqlalchemy code (not specifically related to revisions).
'''
import sqlalchemy
from sqlalchemy.orm import scoped_session


class SQLAlchemyMixin(object):
    def __init__(self, **kw):
        for k, v in kw.items():
            setattr(self, k, v)

    def __repr__(self):
        repr = '<%s' % self.__class__.__name__
        table = sqlalchemy.inspect(self.__class__).local_table
        for col in table.c:
            repr += ' %s=%s' % (col.key, getattr(self, col.key, None))
        repr += '>'
        return repr


class SQLAlchemySession(object):
    '''Handle setting/getting revision attributes on the SQLAlchemy session.

    Attributes live in `session.info` so they travel with the session that
    is flushing, which is what mapper events get to see.
    '''

    @classmethod
    def setattr(self, session, attr, value):
        # check if we are being given the scoped session (threadlocal case)
        # if so set on the current session as that is what object_session
        # returns
        if isinstance(session, scoped_session):
            session = session()
        session.info[attr] = value

    @classmethod
    def getattr(self, session, attr, default=None):
        if session is None:
            return default
        if isinstance(session, scoped_session):
            session = session()
        return session.info.get(attr, default)

    # make explicit to avoid errors from typos
    @classmethod
    def set_user(self, session, user_id):
        self.setattr(session, 'revision_user_id', user_id)

    @classmethod
    def get_user(self, session):
        '''Get id of the user making changes in this session.

        NB: will return None if not set
        '''
        return self.getattr(session, 'revision_user_id')

    @classmethod
    def disable_revisioning(self, session, disabled=True):
        self.setattr(session, 'revisioning_disabled', disabled)

    @classmethod
    def revisioning_disabled(self, session):
        return self.getattr(session, 'revisioning_disabled', False)
