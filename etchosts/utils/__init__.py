"""
etchosts Utils - Logging setup and configuration.
"""

from etchosts.utils.log_config import LogConfig, LogLevel, get_log_config, reset_log_config
from etchosts.utils.logger import disable_logger, log_prefix, setup_logger

__all__ = [
    "LogConfig",
    "LogLevel",
    "disable_logger",
    "get_log_config",
    "log_prefix",
    "reset_log_config",
    "setup_logger",
]
