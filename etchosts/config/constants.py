"""
etchosts Configuration Constants.

Centralized constants for the hosts file grammar and default locations.
"""
import os
from pathlib import Path

# Characters which aren't allowed in URL hosts (WHATWG host parsing)
INVALID_ALIAS_CHARS = (
    "\0", "\t", "\n", "\r", " ",
    "#", "%", "/", ":", "?", "@", "[", "\\", "]",
)

COMMENT_CHAR = "#"

# Serialized spacing
ALIAS_SEPARATOR = " "
COMMENT_SEPARATOR = "  # "
COMMENT_PREFIX = "# "

DEFAULT_ENCODING = "utf-8"

# Hosts file locations
POSIX_HOSTS_PATH = Path("/etc/hosts")
WINDOWS_HOSTS_PATH = (
    Path(os.environ.get("SystemRoot", r"C:\Windows")) / "System32" / "drivers" / "etc" / "hosts"
)

# Environment
ENV_PREFIX = "ETCHOSTS_"
CONFIG_DIR = Path.home() / ".etchosts"
