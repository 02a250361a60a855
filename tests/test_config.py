"""
Tests for reader and log configuration.
"""
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from etchosts.config.models import ReaderConfig, get_config, load_config, reset_config
from etchosts.core.exceptions import ConfigurationError
from etchosts.utils import log_config
from etchosts.utils.log_config import (
    LogConfig,
    LogLevel,
    get_log_config,
    load_log_config,
)


class TestReaderConfig:
    """Tests for ReaderConfig and its loaders."""

    def test_defaults(self):
        """Defaults read the platform hosts file as UTF-8, leniently."""
        config = load_config()
        assert config.hosts_path is None
        assert config.encoding == "utf-8"
        assert config.strict is False

    def test_env_overrides(self, monkeypatch):
        """ETCHOSTS_* variables are applied."""
        monkeypatch.setenv("ETCHOSTS_HOSTS_PATH", "/tmp/hosts")
        monkeypatch.setenv("ETCHOSTS_ENCODING", "latin-1")
        monkeypatch.setenv("ETCHOSTS_STRICT", "true")
        config = load_config()
        assert config.hosts_path == Path("/tmp/hosts")
        assert config.encoding == "latin-1"
        assert config.strict is True

    def test_unknown_encoding(self, monkeypatch):
        """Unknown encodings are a configuration error."""
        monkeypatch.setenv("ETCHOSTS_ENCODING", "klingon-8")
        with pytest.raises(ConfigurationError, match="Invalid reader configuration"):
            load_config()

    def test_bad_boolean(self, monkeypatch):
        """Unparseable booleans are a configuration error."""
        monkeypatch.setenv("ETCHOSTS_STRICT", "sometimes")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_cached(self, monkeypatch):
        """get_config caches until reset."""
        first = get_config()
        monkeypatch.setenv("ETCHOSTS_STRICT", "1")
        assert get_config() is first
        reset_config()
        assert get_config().strict is True

    def test_direct_model(self):
        """The model validates direct construction too."""
        assert ReaderConfig(encoding="ascii").encoding == "ascii"


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_valid_levels(self):
        """Test valid log levels."""
        assert LogLevel.from_string("debug") == LogLevel.DEBUG
        assert LogLevel.from_string("WARNING") == LogLevel.WARNING

    def test_level_aliases(self):
        """Test log level aliases."""
        assert LogLevel.from_string("WARN") == LogLevel.WARNING
        assert LogLevel.from_string("FATAL") == LogLevel.CRITICAL

    def test_invalid_level(self):
        """Test invalid log level raises error."""
        with pytest.raises(ValueError, match="Unknown log level"):
            LogLevel.from_string("INVALID")


class TestLogConfig:
    """Tests for LogConfig dataclass."""

    def test_default_values(self):
        """Test default configuration values."""
        config = LogConfig()
        assert config.console_level == "WARNING"
        assert config.file_level == "DEBUG"
        assert config.log_file == ""
        assert config.log_path is None
        assert config.json_logs is False

    def test_log_path(self, tmp_path):
        """log_path follows log_file."""
        config = LogConfig(log_file=str(tmp_path / "etchosts.log"))
        assert config.log_path == tmp_path / "etchosts.log"

    def test_invalid_console_level(self):
        """Test invalid console level raises error."""
        with pytest.raises(ValueError, match="Invalid console_level"):
            LogConfig(console_level="LOUD")

    def test_invalid_compression(self):
        """Test invalid compression raises error."""
        with pytest.raises(ValueError, match="compression must be one of"):
            LogConfig(compression="bz2")

    def test_invalid_rotation_size(self):
        """Test invalid rotation size values raise errors."""
        with pytest.raises(ValueError, match="Invalid size format"):
            LogConfig(rotation_size="10MB")
        with pytest.raises(ValueError, match="Size must be positive"):
            LogConfig(rotation_size="-10 MB")
        with pytest.raises(ValueError, match="Invalid size unit"):
            LogConfig(rotation_size="10 XB")

    def test_from_dict_ignores_unknown_fields(self):
        """Test that from_dict ignores unknown fields."""
        config = LogConfig.from_dict({"file_level": "INFO", "unknown_field": "value"})
        assert config.file_level == "INFO"
        assert not hasattr(config, "unknown_field")

    def test_env_overrides(self, monkeypatch, tmp_path):
        """ETCHOSTS_LOG_* variables are applied."""
        with patch.object(log_config, "CONFIG_FILE", tmp_path / "missing.json"):
            monkeypatch.setenv("ETCHOSTS_LOG_LEVEL", "DEBUG")
            monkeypatch.setenv("ETCHOSTS_LOG_JSON", "yes")
            config = load_log_config()
        assert config.console_level == "DEBUG"
        assert config.json_logs is True

    def test_load_from_file(self, tmp_path):
        """Settings in log_config.json are read."""
        config_file = tmp_path / "log_config.json"
        config_file.write_text(json.dumps({"console_level": "ERROR", "use_emoji": False}))
        with patch.object(log_config, "CONFIG_FILE", config_file):
            assert load_log_config().console_level == "ERROR"
            assert get_log_config().use_emoji is False

    def test_emoji_env(self, monkeypatch):
        """ETCHOSTS_LOG_EMOJI drives use_emoji."""
        monkeypatch.setenv("ETCHOSTS_LOG_EMOJI", "0")
        assert load_log_config().use_emoji is False
        monkeypatch.setenv("ETCHOSTS_LOG_EMOJI", "on")
        assert load_log_config().use_emoji is True

    def test_invalid_env_is_configuration_error(self, monkeypatch):
        """A bad ETCHOSTS_LOG_* value surfaces as ConfigurationError."""
        monkeypatch.setenv("ETCHOSTS_LOG_LEVEL", "loud")
        with pytest.raises(ConfigurationError, match="Invalid log configuration"):
            load_log_config()
