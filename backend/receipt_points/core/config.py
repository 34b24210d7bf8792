"""Configuration management.

This module defines a ``Settings`` class that reads configuration
values from environment variables and provides sensible defaults.
``.env`` support is implemented by loading files from the repository
root in a defined order.  You can override any value via environment
variables.  Nothing here is persisted; the service keeps no state
beyond the process lifetime.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from dotenv import load_dotenv, find_dotenv

# -----------------------------------------------------------------------------
# .env loading
#
# Prefer a .env in the repository root but allow fallback to whatever
# python-dotenv discovers from the current working directory.  Files are
# loaded in order without overriding already-set variables.

_THIS_FILE = Path(__file__).resolve()
_REPO_ROOT = _THIS_FILE.parents[3]
_ROOT_ENV = _REPO_ROOT / ".env"

_candidate_envs: list[str] = []
if _ROOT_ENV.exists():
    _candidate_envs.append(str(_ROOT_ENV))

_FOUND_ENV = find_dotenv(usecwd=True)
if _FOUND_ENV and _FOUND_ENV not in _candidate_envs:
    _candidate_envs.append(_FOUND_ENV)

for _env_path in _candidate_envs:
    load_dotenv(dotenv_path=_env_path, override=False)


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from the environment with sensible defaults.  Any
    attribute defined here can be overridden by setting the corresponding
    environment variable.
    """

    model_config = SettingsConfigDict(
        env_file=tuple(_candidate_envs) if _candidate_envs else (".env",),
        case_sensitive=True,
        extra="ignore",
    )

    # API Settings
    PROJECT_NAME: str = "Receipt Points API"
    ENVIRONMENT: str = Field(default="development")

    # Server
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080)

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
    )

    # Sentry
    SENTRY_DSN: Optional[str] = Field(default=None)
    SENTRY_TRACES_SAMPLE_RATE: float = Field(default=0.0)
    SENTRY_PROFILES_SAMPLE_RATE: float = Field(default=0.0)
    # Optional release name to tag events consistently across deploys
    SENTRY_RELEASE: Optional[str] = Field(default=None)


# Instantiate global settings
settings = Settings()
