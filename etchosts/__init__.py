"""
etchosts - Parse, validate, normalize and re-serialize hosts files.

Raw text goes in, structured records come out; records go in, well-formed
text comes out.
"""
from importlib.metadata import PackageNotFoundError, version

from loguru import logger

from etchosts.core.exceptions import (
    AddressParseError,
    AliasIsAddressError,
    DataParseError,
    EtcHostsError,
    InvalidAliasCharacterError,
    LineIOError,
    LineParseError,
    LineReadError,
    NoInternalSpaceError,
)
from etchosts.hosts_file import (
    HostsFile,
    Lines,
    Pairs,
    ParseResult,
    Records,
    default_hosts_path,
    format_lines,
)
from etchosts.line import Line
from etchosts.record import Record, is_valid_alias, minify_lines, validate_alias

try:
    __version__ = version("etchosts")
except PackageNotFoundError:
    # Package not installed, fallback to pyproject.toml
    __version__ = "0.1.0"

# Library stays quiet unless an application calls utils.logger.setup_logger()
logger.disable("etchosts")

__all__ = [
    "AddressParseError",
    "AliasIsAddressError",
    "DataParseError",
    "EtcHostsError",
    "HostsFile",
    "InvalidAliasCharacterError",
    "Line",
    "LineIOError",
    "LineParseError",
    "LineReadError",
    "Lines",
    "NoInternalSpaceError",
    "Pairs",
    "ParseResult",
    "Record",
    "Records",
    "default_hosts_path",
    "format_lines",
    "is_valid_alias",
    "minify_lines",
    "validate_alias",
]
