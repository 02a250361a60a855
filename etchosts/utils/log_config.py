"""
Logging configuration for etchosts.

Provides:
- Console and file verbosity levels
- Optional log file with rotation and retention
- Plain or JSON file format
- JSON file and environment overrides
"""
import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar, Dict, Optional

from etchosts.config.constants import CONFIG_DIR
from etchosts.core.exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Log verbosity levels."""
    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Parse log level from string (case-insensitive)."""
        level = level.upper()
        try:
            return cls(level)
        except ValueError:
            aliases = {
                "WARN": cls.WARNING,
                "ERR": cls.ERROR,
                "CRIT": cls.CRITICAL,
                "FATAL": cls.CRITICAL,
            }
            if level in aliases:
                return aliases[level]
            raise ValueError(f"Unknown log level: {level}") from None


@dataclass
class LogConfig:
    """
    Configuration for etchosts logging.

    Attributes:
        console_level: Log level for console output
        file_level: Log level for file output
        log_file: Path of the log file; no file sink when empty
        rotation_size: Max size before rotation (e.g., "10 MB", "100 KB")
        retention: How long to keep old logs (e.g., "7 days", "4 weeks")
        compression: Compress rotated files (zip, gz, or None)
        json_logs: Use JSON format for file logs
        include_caller: Include caller info (file:function:line)
        use_emoji: Use emoji prefixes in messages
    """
    console_level: str = "WARNING"
    file_level: str = "DEBUG"

    log_file: str = ""
    rotation_size: str = "10 MB"
    retention: str = "1 week"
    compression: Optional[str] = None

    json_logs: bool = False
    include_caller: bool = True
    use_emoji: bool = True

    _VALID_COMPRESSION: ClassVar[frozenset] = frozenset({"zip", "gz", None})

    def __post_init__(self):
        """Validate settings."""
        try:
            LogLevel.from_string(self.console_level)
        except ValueError as e:
            raise ValueError(f"Invalid console_level: {e}") from e

        try:
            LogLevel.from_string(self.file_level)
        except ValueError as e:
            raise ValueError(f"Invalid file_level: {e}") from e

        if self.compression not in self._VALID_COMPRESSION:
            raise ValueError(
                f"compression must be one of {set(self._VALID_COMPRESSION)}, "
                f"got: {self.compression!r}"
            )

        self._validate_size_format(self.rotation_size)

    def _validate_size_format(self, size_str: str) -> None:
        """Validate size format like '10 MB' or '100 KB'."""
        parts = size_str.strip().split()
        if len(parts) != 2:
            raise ValueError(f"Invalid size format: {size_str!r} (expected: '10 MB')")

        try:
            value = float(parts[0])
        except ValueError as e:
            raise ValueError(f"Invalid size value: {parts[0]!r}") from e
        if value <= 0:
            raise ValueError(f"Size must be positive: {size_str!r}")

        valid_units = {"B", "KB", "MB", "GB", "TB"}
        if parts[1].upper() not in valid_units:
            raise ValueError(f"Invalid size unit: {parts[1]!r} (valid: {valid_units})")

    @property
    def log_path(self) -> Optional[Path]:
        """Full path to the log file, if file logging is enabled."""
        return Path(self.log_file).expanduser() if self.log_file else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """Create from dictionary, ignoring unknown keys."""
        known_fields = {
            "console_level", "file_level", "log_file",
            "rotation_size", "retention", "compression",
            "json_logs", "include_caller", "use_emoji",
        }
        filtered = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered)


# Config file location
CONFIG_FILE = CONFIG_DIR / "log_config.json"


def load_log_config() -> LogConfig:
    """
    Load logging configuration.

    Priority:
    1. Environment variables (ETCHOSTS_LOG_*)
    2. Config file (~/.etchosts/log_config.json)
    3. Defaults

    Raises:
        ConfigurationError: A loaded value is invalid.
    """
    config_data: Dict[str, Any] = {}

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE) as f:
                config_data = json.load(f)
        except (json.JSONDecodeError, OSError):
            pass  # Use defaults

    env_mappings = {
        "ETCHOSTS_LOG_LEVEL": "console_level",
        "ETCHOSTS_LOG_FILE_LEVEL": "file_level",
        "ETCHOSTS_LOG_FILE": "log_file",
        "ETCHOSTS_LOG_ROTATION_SIZE": "rotation_size",
        "ETCHOSTS_LOG_RETENTION": "retention",
        "ETCHOSTS_LOG_COMPRESSION": "compression",
        "ETCHOSTS_LOG_JSON": "json_logs",
        "ETCHOSTS_LOG_EMOJI": "use_emoji",
    }

    for env_var, config_key in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            if config_key in ("json_logs", "use_emoji"):
                config_data[config_key] = value.lower() in ("1", "true", "yes", "on")
            elif config_key == "compression":
                config_data[config_key] = value if value.lower() not in ("none", "") else None
            else:
                config_data[config_key] = value

    try:
        return LogConfig.from_dict(config_data)
    except (ValueError, TypeError) as e:
        raise ConfigurationError("Invalid log configuration", {"reason": str(e)}) from e


def get_log_config() -> LogConfig:
    """Get the current logging configuration (cached)."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_log_config()
    return _cached_config


def reset_log_config() -> None:
    """Reset the cached configuration."""
    global _cached_config
    _cached_config = None


# Cached config instance
_cached_config: Optional[LogConfig] = None
