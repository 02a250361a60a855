"""
Streaming reader over hosts files.

HostsFile wraps any line-buffered source and exposes three lazy, single-pass
views of it: raw lines, records, and flattened (alias, address) pairs.

Every view raises a LineReadError subclass from __next__ when one physical
line fails. The cursor has already moved past that line, so a loop that
catches the error and calls next() again picks up at the following line:

    records = HostsFile.from_text(text).records()
    while True:
        try:
            record = next(records)
        except StopIteration:
            break
        except LineReadError as e:
            print(e)
            continue
        ...
"""
from __future__ import annotations

import io
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Optional, Union

from loguru import logger

from etchosts.config.constants import DEFAULT_ENCODING, POSIX_HOSTS_PATH, WINDOWS_HOSTS_PATH
from etchosts.core.exceptions import DataParseError, LineIOError, LineParseError, LineReadError
from etchosts.line import Line
from etchosts.record import IPAddress, Record

RawLine = Union[str, bytes]


def default_hosts_path() -> Path:
    """Location of the system hosts file for this platform."""
    if sys.platform.startswith("win"):
        return WINDOWS_HOSTS_PATH
    return POSIX_HOSTS_PATH


def _strip_terminator(text: str) -> str:
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


class HostsFile:
    """
    A hosts file being read line by line.

    The source may yield str or bytes lines; bytes are decoded one line at a
    time so a bad byte sequence only fails its own line. A text-mode source
    decodes in chunks instead: when it raises UnicodeDecodeError the error is
    reported as a LineIOError, but the lines sharing that chunk may be lost
    and numbering can drift. Open files in binary mode (as load() does) to
    keep one error per bad line. All views share one cursor and the file
    cannot be rewound: build a new HostsFile to read again.
    """

    def __init__(
        self,
        source: Iterable[RawLine],
        encoding: str = DEFAULT_ENCODING,
        name: Optional[str] = None,
        owns_source: bool = False,
    ):
        self._source = source
        self._lines = iter(source)
        self._owns_source = owns_source
        self.encoding = encoding
        self.name = name or getattr(source, "name", None) or "<stream>"
        self.line_number = 0

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def read(cls, source: Iterable[RawLine], encoding: str = DEFAULT_ENCODING) -> HostsFile:
        """
        Read from an already line-buffered source (file object, list of lines...).

        Pass binary sources where decoding may fail: a text-mode file that
        raises UnicodeDecodeError can drop the rest of its decoded chunk.
        """
        return cls(source, encoding=encoding)

    @classmethod
    def read_buffered(cls, raw: IO[bytes], encoding: str = DEFAULT_ENCODING) -> HostsFile:
        """Read from a binary stream, adding a buffer if it has none."""
        if not isinstance(raw, io.BufferedIOBase):
            raw = io.BufferedReader(raw)
        return cls(raw, encoding=encoding)

    @classmethod
    def from_text(cls, text: str) -> HostsFile:
        """Read from an in-memory string."""
        return cls(io.StringIO(text), name="<string>")

    @classmethod
    def load(cls, path: Union[str, Path, None] = None, encoding: Optional[str] = None) -> HostsFile:
        """
        Open a hosts file from disk.

        Args:
            path: File to open. Defaults to the configured hosts_path, then
                to the platform hosts file.
            encoding: Text encoding. Defaults to the configured encoding.

        Raises:
            OSError: The file could not be opened.
        """
        from etchosts.config.models import get_config

        config = get_config()
        if path is None:
            path = config.hosts_path or default_hosts_path()
        path = Path(path)

        handle = open(path, "rb")
        logger.debug(f"Opened hosts file {path}")
        return cls(handle, encoding=encoding or config.encoding, name=str(path), owns_source=True)

    # ------------------------------------------------------------------
    # Resource handling
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the underlying stream if this reader opened it."""
        if self._owns_source and hasattr(self._source, "close"):
            self._source.close()
            logger.debug(f"Closed hosts file {self.name}")

    def __enter__(self) -> HostsFile:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def next_raw(self) -> tuple[int, str]:
        """
        Advance to the next physical line.

        Returns:
            (line_number, text) with the line terminator removed.

        Raises:
            StopIteration: The source is exhausted.
            LineIOError: The source or the decoder failed on this line.
        """
        try:
            raw = next(self._lines)
        except (OSError, UnicodeDecodeError) as e:
            self.line_number += 1
            raise LineIOError(self.line_number, e) from e

        self.line_number += 1
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise LineIOError(self.line_number, e) from e
        return self.line_number, _strip_terminator(raw)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def lines(self) -> Lines:
        """Iterate over every line in the file."""
        return Lines(self)

    def records(self) -> Records:
        """Iterate over the lines carrying a record."""
        return Records(self.lines())

    data_lines = records

    def pairs(self) -> Pairs:
        """Iterate over (alias, address) for every alias in the file."""
        return Pairs(self.records())

    def collect(self) -> ParseResult:
        """
        Drain the remaining records, carrying on past bad lines.

        Returns:
            ParseResult with the valid records and one error per bad line.
        """
        records: list[Record] = []
        errors: list[LineReadError] = []
        remaining = self.records()
        while True:
            try:
                record = next(remaining)
            except StopIteration:
                break
            except LineReadError as e:
                logger.warning(f"{self.name}: {e.message}")
                errors.append(e)
                continue
            records.append(record)

        logger.debug(f"{self.name}: {len(records)} records, {len(errors)} errors")
        return ParseResult(records=records, errors=errors, source_name=self.name)


class Lines(Iterator[Line]):
    """Iterator over the lines of a hosts file."""

    def __init__(self, hosts_file: HostsFile):
        self._file = hosts_file

    def __iter__(self) -> Lines:
        return self

    def __next__(self) -> Line:
        line_number, text = self._file.next_raw()
        try:
            return Line.parse(text)
        except DataParseError as e:
            raise LineParseError(line_number, e) from e


class Records(Iterator[Record]):
    """Iterator over the records of a hosts file, skipping blank and comment lines."""

    def __init__(self, lines: Lines):
        self._lines = lines

    def __iter__(self) -> Records:
        return self

    def __next__(self) -> Record:
        while True:
            line = next(self._lines)
            if line.record is not None:
                return line.record


class Pairs(Iterator[tuple[str, IPAddress]]):
    """
    Iterator over the (alias, address) pairs of a hosts file.

    Holds the pairs left on the current record and pulls the next record
    only once those run dry.
    """

    def __init__(self, records: Records):
        self._records = records
        self._current: Iterator[tuple[str, IPAddress]] = iter(())

    def __iter__(self) -> Pairs:
        return self

    def __next__(self) -> tuple[str, IPAddress]:
        while True:
            pair = next(self._current, None)
            if pair is not None:
                return pair
            self._current = next(self._records).pairs()


@dataclass
class ParseResult:
    """Result of reading a whole hosts file."""

    records: list[Record]
    errors: list[LineReadError] = field(default_factory=list)
    source_name: Optional[str] = None

    @property
    def success(self) -> bool:
        """True when no line failed."""
        return len(self.errors) == 0


def format_lines(lines: Iterable[Union[Line, Record]]) -> str:
    """Render lines or records as hosts file text, one per line."""
    return "".join(f"{line}\n" for line in lines)
