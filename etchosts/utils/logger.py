"""
Centralized logging for etchosts.

The library logs through loguru but stays disabled until an application
calls setup_logger(). Configuration is loaded from
~/.etchosts/log_config.json or environment variables; see log_config.py.
"""
import json
import sys
from typing import Optional

from loguru import logger

from etchosts.utils.log_config import LogConfig, LogLevel, get_log_config

PACKAGE = "etchosts"


def use_emoji_logs() -> bool:
    """
    Check if emoji prefixes should be used in log messages.

    Follows LogConfig.use_emoji, set with ETCHOSTS_LOG_EMOJI=0 or the
    log_config.json file.
    """
    return get_log_config().use_emoji


_EMOJI_TO_ASCII = {
    "⚠️": "[WARN]",
    "✅": "[OK]",
    "❌": "[ERROR]",
    "📁": "[FILE]",
    "📊": "[STATS]",
}


def log_prefix(emoji: str) -> str:
    """
    Return the emoji, or its ASCII equivalent when emoji logs are disabled.

    Unknown emoji map to an empty string in ASCII mode.
    """
    if use_emoji_logs():
        return emoji
    return _EMOJI_TO_ASCII.get(emoji, "")


def _format_record(config: LogConfig):
    """Build a loguru format function for the file sink."""

    def format_record(record):
        if config.json_logs:
            log_entry = {
                "timestamp": record["time"].isoformat(),
                "level": record["level"].name,
                "message": record["message"],
                "module": record["name"],
                "function": record["function"],
                "line": record["line"],
            }
            # Returned text is a loguru template; pass the JSON through extra
            record["extra"]["serialized"] = json.dumps(log_entry)
            return "{extra[serialized]}\n"
        if config.include_caller:
            return (
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                "{name}:{function}:{line} - {message}\n"
            )
        return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}\n"

    return format_record


def setup_logger(verbose: bool = False, config: Optional[LogConfig] = None) -> None:
    """
    Configure loguru sinks and enable etchosts logging.

    Rules:
    1. FILE: Only when config.log_file is set, rotated by size.
    2. CONSOLE: DEBUG+ to stderr if verbose, otherwise config.console_level.

    Args:
        verbose: Log everything from DEBUG up to stderr
        config: Optional LogConfig override (for testing)
    """
    logger.remove()
    logger.enable(PACKAGE)

    if config is None:
        config = get_log_config()

    log_path = config.log_path
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation=config.rotation_size,
            retention=config.retention,
            level=LogLevel.from_string(config.file_level).value,
            format=_format_record(config),
            compression=config.compression,
        )

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        format=console_format,
        level="DEBUG" if verbose else LogLevel.from_string(config.console_level).value,
        colorize=True,
    )


def disable_logger() -> None:
    """Silence etchosts logging again."""
    logger.disable(PACKAGE)
