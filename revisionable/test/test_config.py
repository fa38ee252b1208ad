from revisionable.config import RevisionSettings


class TestRevisionSettings:
    def test_defaults(self, monkeypatch):
        for name in ('AUTH_MODEL', 'AUTH_PROVIDERS_USERS_MODEL', 'ID_SUFFIX'):
            monkeypatch.delenv('REVISIONABLE_' + name, raising=False)
        settings = RevisionSettings()
        assert settings.user_model_name() is None
        assert settings.id_suffix == 'Id'
        assert settings.null_string == 'nothing'
        assert settings.unknown_string == 'unknown'

    def test_user_model_fallback_order(self):
        settings = RevisionSettings(auth_model='Member',
                auth_providers_users_model='User')
        assert settings.user_model_name() == 'Member'
        settings = RevisionSettings(auth_model='',
                auth_providers_users_model='User')
        assert settings.user_model_name() == 'User'

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv('REVISIONABLE_AUTH_MODEL', 'Account')
        monkeypatch.setenv('REVISIONABLE_ID_SUFFIX', '_id')
        settings = RevisionSettings()
        assert settings.user_model_name() == 'Account'
        assert settings.id_suffix == '_id'
