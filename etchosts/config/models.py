"""
etchosts Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

import codecs
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from etchosts.config.constants import DEFAULT_ENCODING, ENV_PREFIX
from etchosts.core.exceptions import ConfigurationError


class ReaderConfig(BaseModel):
    """Hosts file reader settings."""

    hosts_path: Path | None = Field(
        default=None, description="Hosts file to read (default: platform hosts file)"
    )
    encoding: str = Field(default=DEFAULT_ENCODING, description="Text encoding of the hosts file")
    strict: bool = Field(default=False, description="Stop at the first malformed line")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value!r}") from e
        return value


def load_config() -> ReaderConfig:
    """
    Load reader configuration from ETCHOSTS_* environment variables.

    Raises:
        ConfigurationError: A variable holds an invalid value.
    """
    env_mappings = {
        f"{ENV_PREFIX}HOSTS_PATH": "hosts_path",
        f"{ENV_PREFIX}ENCODING": "encoding",
        f"{ENV_PREFIX}STRICT": "strict",
    }
    data = {}
    for env_var, key in env_mappings.items():
        value = os.environ.get(env_var)
        if value:
            data[key] = value

    try:
        return ReaderConfig(**data)
    except ValidationError as e:
        raise ConfigurationError("Invalid reader configuration", {"errors": e.errors()}) from e


def get_config() -> ReaderConfig:
    """Get the current reader configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reset_config() -> None:
    """Reset the cached configuration."""
    global _cached_config
    _cached_config = None


# Cached config instance
_cached_config: ReaderConfig | None = None
