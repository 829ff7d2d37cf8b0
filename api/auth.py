"""Serverless function for admin login, logout and session checks."""

import json
import logging
from http.cookies import SimpleCookie
from http.server import BaseHTTPRequestHandler

from golfleague.auth import (
    AuthGate,
    check_credentials,
    make_session_token,
    session_token_from_cookie,
)
from golfleague.config import get_settings
from golfleague.constants import SESSION_COOKIE_NAME, SESSION_MAX_AGE

logger = logging.getLogger('golfleague.api.auth')


def session_cookie(token: str, max_age: int = SESSION_MAX_AGE) -> str:
    """Set-Cookie header value for the admin session."""
    cookie = SimpleCookie()
    cookie[SESSION_COOKIE_NAME] = token
    morsel = cookie[SESSION_COOKIE_NAME]
    morsel['httponly'] = True
    morsel['samesite'] = 'Lax'
    morsel['max-age'] = max_age
    morsel['path'] = '/'
    if get_settings().secure_cookies:
        morsel['secure'] = True
    return morsel.OutputString()


def handle_login(body: bytes) -> tuple[int, dict, str | None]:
    """Check credentials; on success return the session cookie to set."""
    try:
        data = json.loads(body.decode()) if body else {}
    except (UnicodeDecodeError, json.JSONDecodeError):
        return 400, {'error': 'Invalid JSON'}, None
    if not isinstance(data, dict):
        return 400, {'error': 'Expected a JSON object'}, None

    username = str(data.get('username') or '')
    password = str(data.get('password') or '')
    if not check_credentials(username, password):
        logger.warning('Failed admin login attempt')
        return 401, {'error': 'Invalid credentials'}, None

    return 200, {'ok': True}, session_cookie(make_session_token(username, password))


def handle_logout() -> tuple[int, dict, str]:
    return 200, {'ok': True}, session_cookie('', max_age=0)


def handle_status(session_token: str | None) -> tuple[int, dict]:
    if AuthGate(session_token).is_authorized():
        return 200, {'authenticated': True}
    return 401, {'authenticated': False}


class handler(BaseHTTPRequestHandler):
    def do_POST(self):
        try:
            content_length = int(self.headers.get('Content-Length', 0))
            status, data, cookie = handle_login(self.rfile.read(content_length))
            self._send_json(status, data, cookie)
        except Exception as e:
            logger.exception('Login failed')
            self._send_json(500, {'error': str(e)})

    def do_DELETE(self):
        self._send_json(*handle_logout())

    def do_GET(self):
        self._send_json(*handle_status(session_token_from_cookie(self.headers.get('Cookie'))))

    def _send_json(self, status_code: int, data: dict, cookie: str | None = None):
        payload = json.dumps(data).encode()
        self.send_response(status_code)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        if cookie:
            self.send_header('Set-Cookie', cookie)
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        """Route access logs through the package logger."""
        logger.debug(format % args)
