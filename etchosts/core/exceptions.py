"""
Core Exceptions - Unified error hierarchy for etchosts.

Record-level parse errors describe what is wrong with one data portion.
Line-level read errors add the physical line number and wrap either an
I/O failure or a parse error.
"""
from __future__ import annotations

from ipaddress import IPv4Address


class EtcHostsError(Exception):
    """Base exception for all etchosts errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Record Parse Errors
# =============================================================================

class DataParseError(EtcHostsError):
    """The data portion of a line could not be parsed."""
    pass


class NoInternalSpaceError(DataParseError):
    """The line had no whitespace between the address and the aliases.

    Any line without an internal space lands here; neither half is checked.
    """

    def __init__(self):
        super().__init__("line had no space between IP and hosts")


class AliasIsAddressError(DataParseError):
    """An IPv4 address was given where an alias should have been."""

    def __init__(self, address: IPv4Address):
        super().__init__(
            f"the IP {address} was given instead of a domain",
            {"address": str(address)}
        )
        self.address = address


class InvalidAliasCharacterError(DataParseError):
    """An alias contained a character that is not allowed in a host name."""

    def __init__(self, char: str, alias: str):
        super().__init__(
            f"the host {alias!r} is invalid because it contains {char!r}",
            {"char": char, "alias": alias}
        )
        self.char = char
        self.alias = alias


class AddressParseError(DataParseError):
    """The address field did not parse as an IPv4 or IPv6 address."""

    def __init__(self, raw: str, cause: Exception | None = None):
        super().__init__(f"could not parse {raw!r} as an IP")
        self.raw = raw
        self.cause = cause
        self.__cause__ = cause


# =============================================================================
# Line Read Errors
# =============================================================================

class LineReadError(EtcHostsError):
    """A line of a hosts file could not be read or parsed.

    The reader has already moved past the line when this is raised.
    """

    def __init__(self, line_number: int, message: str, details: dict | None = None):
        super().__init__(
            f"line {line_number}: {message}",
            {**(details or {})}
        )
        self.line_number = line_number


class LineIOError(LineReadError):
    """The underlying source failed to produce the line."""

    def __init__(self, line_number: int, cause: Exception):
        super().__init__(line_number, f"read failed: {cause}")
        self.cause = cause
        self.__cause__ = cause


class LineParseError(LineReadError):
    """The line was read but its data portion is malformed."""

    def __init__(self, line_number: int, error: DataParseError):
        super().__init__(line_number, error.message, error.details)
        self.error = error
        self.__cause__ = error


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(EtcHostsError):
    """Invalid configuration value."""
    pass
