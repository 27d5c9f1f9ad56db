"""Tests for settings loading."""

from socialhub.config import Settings


class TestSettings:
    """SUT: Settings"""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.port == 8000
        assert settings.jwt_algorithm == "HS256"
        assert settings.auth_cookie_name == "token"
        assert settings.allow_user_id_handshake is False

    def test_env_override(self, monkeypatch):
        """Environment variables override defaults, case-insensitively."""
        monkeypatch.setenv("JWT_EXPIRE_HOURS", "2")
        monkeypatch.setenv("allow_user_id_handshake", "true")
        settings = Settings(_env_file=None)
        assert settings.jwt_expire_hours == 2
        assert settings.allow_user_id_handshake is True

    def test_cors_origins_split(self):
        """Comma separated origins become a trimmed list."""
        settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test,,")
        assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]
