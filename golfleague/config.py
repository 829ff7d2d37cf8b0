"""Application settings management."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .constants import DEFAULT_AUTH_PASSWORD, DEFAULT_AUTH_USERNAME


class Settings(BaseModel):
    """Runtime settings for the store and auth boundary."""

    auth_username: str = Field(DEFAULT_AUTH_USERNAME, min_length=1)
    auth_password: str = Field(DEFAULT_AUTH_PASSWORD, min_length=1)
    kv_rest_api_url: Optional[str] = None
    kv_rest_api_token: Optional[str] = None
    data_file: Optional[Path] = None
    store_timeout: float = Field(5.0, gt=0)
    secure_cookies: bool = False

    @property
    def has_kv_store(self) -> bool:
        return bool(self.kv_rest_api_url and self.kv_rest_api_token)

    class Config:
        extra = 'forbid'


def settings_from_env(environ: Optional[dict[str, str]] = None) -> Settings:
    """
    Build settings from environment variables.

    Recognised variables:
        AUTH_USERNAME, AUTH_PASSWORD
        KV_REST_API_URL, KV_REST_API_TOKEN
            (or UPSTASH_REDIS_REST_URL, UPSTASH_REDIS_REST_TOKEN)
        GOLF_LEAGUE_DATA_FILE
        GOLF_LEAGUE_STORE_TIMEOUT
        GOLF_LEAGUE_ENV ('production' marks session cookies Secure)

    Raises:
        ValidationError: If a variable has an invalid value
    """
    env = os.environ if environ is None else environ
    values = {
        'auth_username': env.get('AUTH_USERNAME'),
        'auth_password': env.get('AUTH_PASSWORD'),
        'kv_rest_api_url': env.get('KV_REST_API_URL') or env.get('UPSTASH_REDIS_REST_URL'),
        'kv_rest_api_token': env.get('KV_REST_API_TOKEN') or env.get('UPSTASH_REDIS_REST_TOKEN'),
        'data_file': env.get('GOLF_LEAGUE_DATA_FILE'),
        'store_timeout': env.get('GOLF_LEAGUE_STORE_TIMEOUT'),
        'secure_cookies': env.get('GOLF_LEAGUE_ENV') == 'production',
    }
    return Settings(**{key: value for key, value in values.items() if value is not None})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from the process environment.

    Settings are cached after first load.

    Example:
        from golfleague.config import get_settings
        settings = get_settings()
        print(f"Data file: {settings.data_file}")
    """
    return settings_from_env()


def clear_settings_cache() -> None:
    """
    Clear the settings cache.

    Use this after changing environment variables at runtime.
    """
    get_settings.cache_clear()
