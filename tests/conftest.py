"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from etchosts.config.models import reset_config
from etchosts.utils import log_config
from etchosts.utils.log_config import reset_log_config

PRETTY = """\
# basic ones
127.0.0.1  localhost localhost.localdomain
0.0.0.0  allzeros  # nonstandard

# others
8.8.8.8  gdns  # this is the more common one
8.8.4.4  gdns2  # this is the less common one

# comment by itself
"""

PLAIN = """\
127.0.0.1  localhost localhost.localdomain
0.0.0.0  allzeros
8.8.8.8  gdns
8.8.4.4  gdns2
"""

BIG = """\
127.0.0.1  localhost
::1  localhost.localdomain
::1  lh
127.0.0.1  lh
0.0.0.0  allzeros
8.8.8.8  gdns
0.0.0.0  lotsazeros
8.8.4.4  gdns2
8.8.8.8  google-dns
"""

SMALL = """\
0.0.0.0  allzeros lotsazeros
8.8.4.4  gdns2
8.8.8.8  gdns google-dns
127.0.0.1  lh localhost
::1  lh localhost.localdomain
"""

BROKEN = """\
127.0.0.1  localhost
localhost ::1
# fine
10.0.0.1  web 10.0.0.2
10.0.0.3  db db.internal
"""


@pytest.fixture
def pretty() -> str:
    """Hosts text with comments and blank lines."""
    return PRETTY


@pytest.fixture
def plain() -> str:
    """The records of PRETTY without comments."""
    return PLAIN


@pytest.fixture
def big() -> str:
    """Records repeating addresses, before minification."""
    return BIG


@pytest.fixture
def small() -> str:
    """BIG after minification."""
    return SMALL


@pytest.fixture
def broken() -> str:
    """Hosts text with two malformed lines (2 and 4)."""
    return BROKEN


@pytest.fixture
def hosts_path(tmp_path: Path) -> Path:
    """PRETTY written to a temporary hosts file."""
    path = tmp_path / "hosts"
    path.write_text(PRETTY)
    return path


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Isolate tests from ETCHOSTS_* variables, ~/.etchosts and cached configuration."""
    for var in (
        "ETCHOSTS_HOSTS_PATH",
        "ETCHOSTS_ENCODING",
        "ETCHOSTS_STRICT",
        "ETCHOSTS_LOG_LEVEL",
        "ETCHOSTS_LOG_FILE_LEVEL",
        "ETCHOSTS_LOG_FILE",
        "ETCHOSTS_LOG_ROTATION_SIZE",
        "ETCHOSTS_LOG_RETENTION",
        "ETCHOSTS_LOG_COMPRESSION",
        "ETCHOSTS_LOG_JSON",
        "ETCHOSTS_LOG_EMOJI",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(log_config, "CONFIG_FILE", tmp_path / "log_config.json")
    reset_config()
    reset_log_config()
    yield
    reset_config()
    reset_log_config()
