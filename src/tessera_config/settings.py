"""Settings for the Tessera identity service.

Values come from, highest priority first:

1. OS environment variables
2. The file named by ``TESSERA_ENV_FILE`` (absolute, or relative to the
   project root)
3. ``config/.env.dev`` for local development
4. ``config/.env`` for deployments
5. Field defaults

Only ``JWT_SECRET_KEY`` has no default.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE_VAR = "TESSERA_ENV_FILE"
_ENV_FILE_NAMES = (".env.dev", ".env")


def _find_project_root() -> Path:
    """Walk up from this file to the first directory with config/ or pyproject.toml."""
    here = Path(__file__).resolve().parent

    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate

    return here.parents[1]


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    explicit = os.environ.get(_ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in _ENV_FILE_NAMES:
        path = config_dir / name
        if path.exists():
            return path

    return None


class Settings(BaseSettings):
    """Runtime configuration for the identity API.

    Attributes
    ----------
    jwt_secret_key
        HMAC key used to sign access and refresh tokens
    database_url
        SQLAlchemy async URL; SQLite files get their directory created
    jwt_access_token_expire_seconds
        Lifetime of access tokens
    jwt_refresh_token_expire_days
        Lifetime of refresh tokens
    password_hash_rounds
        bcrypt work factor (log2 of iterations)
    api_cors_origins
        Comma-separated list of allowed origins; empty disables CORS
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret_key: SecretStr

    app_name: str = "Tessera"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///./data/tessera.db"

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    api_cors_origins: str = ""

    jwt_access_token_expire_seconds: int = Field(default=3600, gt=0)
    jwt_refresh_token_expire_days: int = Field(default=7, gt=0)

    # bcrypt accepts work factors 4 through 31
    password_hash_rounds: int = Field(default=12, ge=4, le=31)

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, (list, tuple)):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Forget cached settings so the next ``get_settings`` reloads them."""
    get_settings.cache_clear()
