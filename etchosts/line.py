"""
Lines - one full line of a hosts file: an optional record plus an optional comment.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from etchosts.config.constants import COMMENT_CHAR, COMMENT_PREFIX, COMMENT_SEPARATOR
from etchosts.record import IPAddress, Record


@dataclass(frozen=True)
class Line:
    """A formatted line in a hosts file."""

    record: Optional[Record] = None
    comment: Optional[str] = None

    @classmethod
    def parse(cls, line: str) -> Line:
        """
        Parse one raw line, without its terminator.

        The comment is whatever follows the first '#', with leading
        whitespace removed and trailing whitespace kept. The data portion
        before it is parsed as a Record unless it is blank.

        Raises:
            DataParseError: The data portion is malformed, even when a
                comment is present.
        """
        data, sep, comment = line.partition(COMMENT_CHAR)
        data = data.rstrip()
        return cls(
            record=Record.parse(data) if data else None,
            comment=comment.lstrip() if sep else None,
        )

    @classmethod
    def empty(cls) -> Line:
        return cls()

    @classmethod
    def from_comment(cls, comment: str) -> Line:
        return cls(comment=comment)

    @classmethod
    def from_record(cls, record: Record, comment: Optional[str] = None) -> Line:
        return cls(record=record, comment=comment)

    @property
    def address(self) -> Optional[IPAddress]:
        """The record's address, if the line has one."""
        return self.record.address if self.record is not None else None

    @property
    def is_blank(self) -> bool:
        return self.record is None and self.comment is None

    def hosts(self) -> Iterator[str]:
        """Iterate over the aliases on this line; empty without a record."""
        if self.record is None:
            return iter(())
        return self.record.hosts()

    def into_record(self) -> Optional[Record]:
        """Strip the comment from the line."""
        return self.record

    def into_owned(self) -> Line:
        # str is immutable and always owned; kept for callers detaching lines
        return Line(self.record, self.comment)

    def __str__(self) -> str:
        if self.record is not None and self.comment is not None:
            return f"{self.record}{COMMENT_SEPARATOR}{self.comment}"
        if self.comment is not None:
            return f"{COMMENT_PREFIX}{self.comment}"
        if self.record is not None:
            return str(self.record)
        return ""
