'''Settings for revision resolution.

Values come from keyword arguments or from `REVISIONABLE_*` environment
variables, e.g.::

    REVISIONABLE_AUTH_MODEL=User
    REVISIONABLE_ID_SUFFIX=_id
'''
from pydantic_settings import BaseSettings, SettingsConfigDict

from revisionable.base import DEFAULT_NULL_STRING, DEFAULT_UNKNOWN_STRING
from revisionable.naming import ID_SUFFIX


class RevisionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='REVISIONABLE_',
            extra='ignore')

    # registered type name of the user model, checked in this order
    auth_model: str = ''
    auth_providers_users_model: str = ''

    id_suffix: str = ID_SUFFIX

    # placeholders for related types not using RevisionableMixin
    null_string: str = DEFAULT_NULL_STRING
    unknown_string: str = DEFAULT_UNKNOWN_STRING

    def user_model_name(self):
        '''First configured user type name, or None.'''
        for name in (self.auth_model, self.auth_providers_users_model):
            if name:
                return name
        return None
