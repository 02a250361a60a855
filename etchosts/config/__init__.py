"""
etchosts Config - Configuration management.
"""

from etchosts.config.models import ReaderConfig, get_config, load_config, reset_config

__all__ = [
    "ReaderConfig",
    "get_config",
    "load_config",
    "reset_config",
]
