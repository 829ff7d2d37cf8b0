"""League snapshot storage.

The whole league lives under a single key and is read and written as one
snapshot. Stores never raise on transient failures: a failed read falls back
to the default league and a failed write reports False. Concurrent writers are
not coordinated; the last write wins.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Optional, Protocol

import requests
from pydantic import ValidationError

from .config import Settings, get_settings
from .constants import LEAGUE_KEY
from .schemas import LeagueData
from .utils import load_json, save_json

logger = logging.getLogger('golfleague.store')


class LeagueStore(Protocol):
    """Get/set store for the league snapshot."""

    def read(self) -> LeagueData: ...

    def write(self, league: LeagueData) -> bool: ...


class MemoryStore:
    """In-process store; contents are lost when the process exits."""

    def __init__(self, league: Optional[LeagueData] = None):
        self._league = league
        self._lock = threading.Lock()

    def read(self) -> LeagueData:
        with self._lock:
            return self._league if self._league is not None else LeagueData.default()

    def write(self, league: LeagueData) -> bool:
        with self._lock:
            self._league = league
        return True


class JsonFileStore:
    """Store backed by a single JSON file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read(self) -> LeagueData:
        if not self.path.exists():
            logger.debug(f'No league file at {self.path}; using default league')
            return LeagueData.default()
        try:
            return load_json(self.path, schema=LeagueData)
        except (OSError, ValueError) as e:
            # JSONDecodeError is a ValueError
            logger.error(f'Could not read league from {self.path}: {e}')
            return LeagueData.default()

    def write(self, league: LeagueData) -> bool:
        try:
            save_json(self.path, league)
        except (OSError, TypeError) as e:
            logger.error(f'Could not write league to {self.path}: {e}')
            return False
        return True


class UpstashStore:
    """Store backed by the Upstash Redis REST API."""

    def __init__(
        self,
        url: str,
        token: str,
        key: str = LEAGUE_KEY,
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
    ):
        self.url = url.rstrip('/')
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Authorization': f'Bearer {token}'})

    def read(self) -> LeagueData:
        try:
            response = self.session.get(f'{self.url}/get/{self.key}', timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f'League store unavailable, using default league: {e}')
            return LeagueData.default()

        if not isinstance(payload, dict):
            logger.error(f'Unexpected store response {payload!r}; using default league')
            return LeagueData.default()
        result = payload.get('result')

        if result is None:
            logger.debug(f'Key {self.key} not set; using default league')
            return LeagueData.default()

        try:
            data = json.loads(result) if isinstance(result, str) else result
            return LeagueData.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f'Stored league under {self.key} is invalid, using default league: {e}')
            return LeagueData.default()

    def write(self, league: LeagueData) -> bool:
        body = json.dumps(league.to_json_dict())
        try:
            response = self.session.post(
                f'{self.url}/set/{self.key}', data=body, timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f'Failed to write league to store: {e}')
            return False

        if payload.get('error'):
            logger.error(f'League store rejected write: {payload["error"]}')
            return False
        return True


_memory_store = MemoryStore()


def get_store(settings: Optional[Settings] = None) -> LeagueStore:
    """
    Pick the store for the current settings.

    Upstash when a REST URL and token are configured, else a JSON file when a
    data file is configured, else the process-wide in-memory store.
    """
    settings = settings or get_settings()
    if settings.has_kv_store:
        return UpstashStore(
            settings.kv_rest_api_url,  # type: ignore[arg-type]
            settings.kv_rest_api_token,  # type: ignore[arg-type]
            timeout=settings.store_timeout,
        )
    if settings.data_file is not None:
        return JsonFileStore(settings.data_file)
    logger.debug('No league store configured; using in-memory store')
    return _memory_store
