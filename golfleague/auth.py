"""Admin authentication for writes.

Reads are always public. Writes need a session token derived from the admin
credentials.
"""

import hashlib
import hmac
from http.cookies import CookieError, SimpleCookie
from typing import Optional

from .config import Settings, get_settings
from .constants import SESSION_COOKIE_NAME, SESSION_SALT


def make_session_token(username: str, password: str) -> str:
    """Hex SHA-256 digest identifying a logged-in admin session."""
    return hashlib.sha256(f'{username}:{password}:{SESSION_SALT}'.encode()).hexdigest()


def check_credentials(username: str, password: str, settings: Optional[Settings] = None) -> bool:
    """True if the username and password match the configured admin."""
    settings = settings or get_settings()
    username_ok = hmac.compare_digest(username.encode(), settings.auth_username.encode())
    password_ok = hmac.compare_digest(password.encode(), settings.auth_password.encode())
    return username_ok and password_ok


def expected_session_token(settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    return make_session_token(settings.auth_username, settings.auth_password)


class AuthGate:
    """Decides whether the current request may write league data."""

    def __init__(self, session_token: Optional[str], settings: Optional[Settings] = None):
        self.session_token = session_token
        self.settings = settings or get_settings()

    def is_authorized(self) -> bool:
        if not self.session_token:
            return False
        expected = expected_session_token(self.settings)
        return hmac.compare_digest(self.session_token.encode(), expected.encode())


def session_token_from_cookie(cookie_header: Optional[str]) -> Optional[str]:
    """Extract the session token from a Cookie request header."""
    if not cookie_header:
        return None
    cookies = SimpleCookie()
    try:
        cookies.load(cookie_header)
    except CookieError:
        return None
    morsel = cookies.get(SESSION_COOKIE_NAME)
    return morsel.value if morsel else None
