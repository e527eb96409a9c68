"""Settings — environment-driven client configuration via pydantic-settings.

Invariants:
    - The API password only ever comes from the environment or an explicit
      argument, never from a default
    - Every variable is prefixed ``WISTIA_`` (``WISTIA_API_PASSWORD`` …)
"""
from __future__ import annotations

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._request import DEFAULT_BASE_URL, DebugMode

__all__ = ["Settings"]


class Settings(BaseSettings):
    """Client settings read from ``WISTIA_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(env_prefix="WISTIA_", env_file=".env", extra="ignore")

    api_password: SecretStr
    base_url: str = DEFAULT_BASE_URL
    debug_mode: DebugMode = DebugMode.OFF

    # Transport
    timeout: float = 60
    max_workers: int = 8

    @field_validator("debug_mode", mode="before")
    @classmethod
    def lower_debug_mode(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v
