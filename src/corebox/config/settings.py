from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from corebox.kit.errors import ConfigError

LEVELS = ('trace', 'debug', 'info', 'warn', 'error', 'fatal')

LevelName = Literal['trace', 'debug', 'info', 'warn', 'error', 'fatal']


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='COREBOX_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    env: str = 'development'

    # Log facade defaults
    log_level: str = 'info'
    log_history: bool = False
    log_ts: bool = False
    log_backend: str = 'logging'

    # Event facade ceiling, 0 disables the check
    max_listeners: int = Field(10, ge=0)

    exit_status: int = 1

    @field_validator('log_history', 'log_ts', mode='before')
    def _boolify(cls, v):  # type: ignore
        if isinstance(v, bool):
            return v
        return str(v).lower() in {'1', 'true', 'yes', 'on'}

    @field_validator('log_level')
    def _known_level(cls, v):  # type: ignore
        if v not in LEVELS:
            raise ValueError(f"unknown log level '{v}', expected one of {', '.join(LEVELS)}")
        return v

    @field_validator('exit_status')
    def _failing_status(cls, v):  # type: ignore
        if v == 0:
            raise ValueError('exit_status must be non-zero, fatal() never exits with success')
        return v


class LogConfig(BaseModel):
    """Options accepted by :class:`corebox.facades.log.Log`."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = ''
    level: LevelName = 'info'
    history: bool = False
    ts: bool = False
    backend: Any = None

    @field_validator('ts', mode='before')
    def _strict_ts(cls, v):  # type: ignore
        # only a real boolean turns timestamps on
        return v is True


def load_settings() -> Settings:
    """Read settings from the environment and ``.env``.

    Called once per facade construction; nothing caches the result.
    """
    try:
        return Settings()
    except ValueError as exc:
        raise ConfigError(f"Invalid settings: {exc}") from exc


def env() -> str:
    return load_settings().env


def load_profile(path: str | Path | None) -> Dict[str, Any]:
    """Load a YAML profile with optional ``log``, ``event`` and ``state`` sections.

    A missing file yields an empty profile.
    """
    if path is None:
        return {}
    p = Path(path)
    if not p.exists():
        return {}
    with p.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Profile {p} must be a mapping, got {type(data).__name__}")
    for section in ('log', 'event', 'state'):
        value: Optional[Any] = data.get(section)
        if value is not None and not isinstance(value, dict):
            raise ConfigError(f"Profile section '{section}' must be a mapping")
    return data
