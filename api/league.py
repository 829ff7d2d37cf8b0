"""Serverless function for reading and saving the league snapshot."""

import json
import logging
from http.server import BaseHTTPRequestHandler

from pydantic import ValidationError

from golfleague.auth import AuthGate, session_token_from_cookie
from golfleague.schemas import LeagueData
from golfleague.service import LeagueService, StoreWriteError, UnauthorizedError
from golfleague.store import get_store

logger = logging.getLogger('golfleague.api.league')


def build_service(cookie_header: str | None) -> LeagueService:
    return LeagueService(get_store(), AuthGate(session_token_from_cookie(cookie_header)))


def handle_get(service: LeagueService) -> tuple[int, dict]:
    """Public read of the whole league."""
    return 200, service.load().to_json_dict()


def handle_put(service: LeagueService, body: bytes) -> tuple[int, dict]:
    """Replace the stored league with the request body (admin only)."""
    if not service.gate.is_authorized():
        return 401, {'error': 'Unauthorized'}

    try:
        league = LeagueData.model_validate(json.loads(body.decode() or 'null'))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return 400, {'error': 'Invalid JSON'}
    except ValidationError as e:
        details = json.loads(e.json(include_url=False))
        return 400, {'error': 'Invalid league data', 'details': details}

    try:
        service.save(league)
    except UnauthorizedError:
        return 401, {'error': 'Unauthorized'}
    except StoreWriteError as e:
        return 500, {'error': str(e)}

    return 200, {'ok': True}


class handler(BaseHTTPRequestHandler):
    def do_OPTIONS(self):
        """Handle CORS preflight - no auth needed."""
        self.send_response(200)
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Access-Control-Allow-Methods', 'GET, PUT, OPTIONS')
        self.send_header('Access-Control-Allow-Headers', 'Content-Type')
        self.send_header('Access-Control-Max-Age', '86400')
        self.send_header('Content-Length', '0')
        self.end_headers()

    def do_GET(self):
        service = build_service(self.headers.get('Cookie'))
        self._send_json(*handle_get(service))

    def do_PUT(self):
        try:
            content_length = int(self.headers.get('Content-Length', 0))
            body = self.rfile.read(content_length)
            service = build_service(self.headers.get('Cookie'))
            self._send_json(*handle_put(service, body))
        except Exception as e:
            logger.exception('League save failed')
            self._send_json(500, {'error': str(e)})

    def _send_json(self, status_code: int, data: dict):
        """Send JSON response with CORS headers."""
        payload = json.dumps(data).encode()
        self.send_response(status_code)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        self.send_header('Access-Control-Allow-Origin', '*')
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        """Route access logs through the package logger."""
        logger.debug(format % args)
