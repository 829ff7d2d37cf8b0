"""Tests for admin authentication and settings."""

import hashlib

from golfleague.auth import (
    AuthGate,
    check_credentials,
    make_session_token,
    session_token_from_cookie,
)
from golfleague.config import Settings, get_settings, settings_from_env


class TestSessionToken:
    def test_token_is_salted_sha256(self):
        expected = hashlib.sha256(b'admin:golf:golf-league-salt').hexdigest()
        assert make_session_token('admin', 'golf') == expected

    def test_token_depends_on_password(self):
        assert make_session_token('admin', 'golf') != make_session_token('admin', 'putt')


class TestCredentials:
    def test_default_credentials(self):
        assert check_credentials('admin', 'golf')
        assert not check_credentials('admin', 'wrong')
        assert not check_credentials('', '')

    def test_configured_credentials(self):
        settings = Settings(auth_username='captain', auth_password='fore')
        assert check_credentials('captain', 'fore', settings)
        assert not check_credentials('admin', 'golf', settings)


class TestAuthGate:
    """Tests for the write gate."""

    def test_valid_session(self):
        assert AuthGate(make_session_token('admin', 'golf')).is_authorized()

    def test_missing_session(self):
        assert not AuthGate(None).is_authorized()
        assert not AuthGate('').is_authorized()

    def test_stale_session_after_password_change(self):
        token = make_session_token('admin', 'golf')
        settings = Settings(auth_password='new-password')
        assert not AuthGate(token, settings).is_authorized()

    def test_non_ascii_token(self):
        assert not AuthGate('ünïcode').is_authorized()


class TestCookies:
    def test_reads_session_cookie(self):
        assert session_token_from_cookie('theme=dark; session=abc123') == 'abc123'

    def test_no_session_cookie(self):
        assert session_token_from_cookie('theme=dark') is None
        assert session_token_from_cookie(None) is None
        assert session_token_from_cookie('') is None


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self):
        settings = get_settings()
        assert settings.auth_username == 'admin'
        assert settings.auth_password == 'golf'
        assert not settings.has_kv_store
        assert settings.data_file is None

    def test_from_env(self, tmp_path):
        settings = settings_from_env(
            {
                'AUTH_PASSWORD': 'fore',
                'UPSTASH_REDIS_REST_URL': 'https://kv.example.com',
                'UPSTASH_REDIS_REST_TOKEN': 'tok',
                'GOLF_LEAGUE_DATA_FILE': str(tmp_path / 'league.json'),
                'GOLF_LEAGUE_STORE_TIMEOUT': '2.5',
                'GOLF_LEAGUE_ENV': 'production',
            }
        )
        assert settings.auth_password == 'fore'
        assert settings.has_kv_store
        assert settings.data_file == tmp_path / 'league.json'
        assert settings.store_timeout == 2.5
        assert settings.secure_cookies

    def test_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv('AUTH_USERNAME', 'someone')
        assert get_settings() is first
