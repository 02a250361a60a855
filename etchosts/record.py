"""
Records - the data portion of a hosts file line.

A record is one IP address followed by the aliases that resolve to it.
"""
from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Union

from loguru import logger

from etchosts.config.constants import ALIAS_SEPARATOR, INVALID_ALIAS_CHARS
from etchosts.core.exceptions import (
    AddressParseError,
    AliasIsAddressError,
    InvalidAliasCharacterError,
    NoInternalSpaceError,
)

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_WHITESPACE = re.compile(r"\s+")


def validate_alias(alias: str) -> str:
    """
    Check that a token can be used as a host alias.

    Args:
        alias: A single whitespace-free token.

    Returns:
        The alias, unchanged.

    Raises:
        InvalidAliasCharacterError: The alias contains a character that is not
            allowed in a URL host. The first such character is reported.
        AliasIsAddressError: The alias is itself a dotted-quad IPv4 address.
    """
    for char in alias:
        if char in INVALID_ALIAS_CHARS:
            raise InvalidAliasCharacterError(char, alias)

    try:
        address = ipaddress.IPv4Address(alias)
    except ValueError:
        return alias
    raise AliasIsAddressError(address)


def is_valid_alias(alias: str) -> bool:
    """Return True if the alias passes validate_alias."""
    try:
        validate_alias(alias)
    except (InvalidAliasCharacterError, AliasIsAddressError):
        return False
    return True


def address_key(address: IPAddress) -> tuple:
    """Total order over mixed IPv4/IPv6 values: version, then bytes."""
    return (address.version, address.packed, getattr(address, "scope_id", None) or "")


@total_ordering
@dataclass(frozen=True)
class Record:
    """
    One address and its aliases.

    Aliases keep their order of appearance, duplicates included; use
    minify_lines() to merge and deduplicate. Records are immutable and
    ordered by address first, then by alias sequence.
    """

    address: IPAddress
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        address = self.address
        if not isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            address = _parse_address(str(address))
            object.__setattr__(self, "address", address)
        if isinstance(self.aliases, str):
            raise TypeError("aliases must be an iterable of strings, not a single str")
        aliases = tuple(self.aliases)
        for alias in aliases:
            validate_alias(alias)
        object.__setattr__(self, "aliases", aliases)

    @classmethod
    def parse(cls, text: str) -> Record:
        """
        Parse the data portion of a line.

        The address is everything before the first whitespace run; the rest
        is split on whitespace into aliases. Validation stops at the first
        bad alias.

        Raises:
            NoInternalSpaceError: No whitespace after trimming.
            AddressParseError: The address field is not an IP address.
            InvalidAliasCharacterError: See validate_alias.
            AliasIsAddressError: See validate_alias.
        """
        parts = _WHITESPACE.split(text.strip(), maxsplit=1)
        if len(parts) < 2:
            raise NoInternalSpaceError()

        raw_address, alias_field = parts
        return cls(_parse_address(raw_address), alias_field.split())

    def hosts(self) -> Iterator[str]:
        """Iterate over the aliases on this record."""
        return iter(self.aliases)

    def pairs(self) -> Iterator[tuple[str, IPAddress]]:
        """Expand this record into (alias, address) pairs, in order."""
        address = self.address
        return ((alias, address) for alias in self.aliases)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (address_key(self.address), self.aliases) < (
            address_key(other.address),
            other.aliases,
        )

    def __str__(self) -> str:
        # "<address> " then " <alias>" per alias: two spaces before the first
        return f"{self.address} " + "".join(f"{ALIAS_SEPARATOR}{alias}" for alias in self.aliases)


def _parse_address(raw: str) -> IPAddress:
    try:
        return ipaddress.ip_address(raw)
    except ValueError as e:
        raise AddressParseError(raw, e) from e


def minify_lines(records: Iterable[Record]) -> list[Record]:
    """
    Merge records by address.

    Each distinct address ends up with a single record holding the sorted,
    deduplicated union of its aliases. Records are returned sorted by
    address. An alias listed under several addresses stays under each.

    Args:
        records: Any iterable of records; it is consumed, not modified.

    Returns:
        New list of minified records.
    """
    grouped: dict[IPAddress, set[str]] = {}
    count = 0
    for record in records:
        count += 1
        grouped.setdefault(record.address, set()).update(record.aliases)

    minified = [
        Record(address, sorted(aliases))
        for address, aliases in sorted(grouped.items(), key=lambda item: address_key(item[0]))
    ]
    logger.debug(f"Minified {count} records into {len(minified)}")
    return minified
