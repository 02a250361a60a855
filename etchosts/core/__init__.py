"""
etchosts Core - Error hierarchy.
"""

from etchosts.core.exceptions import (
    AddressParseError,
    AliasIsAddressError,
    ConfigurationError,
    DataParseError,
    EtcHostsError,
    InvalidAliasCharacterError,
    LineIOError,
    LineParseError,
    LineReadError,
    NoInternalSpaceError,
)

__all__ = [
    "AddressParseError",
    "AliasIsAddressError",
    "ConfigurationError",
    "DataParseError",
    "EtcHostsError",
    "InvalidAliasCharacterError",
    "LineIOError",
    "LineParseError",
    "LineReadError",
    "NoInternalSpaceError",
]
