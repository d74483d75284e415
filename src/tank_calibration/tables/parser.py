"""
Parser for tank calibration tables.

Auto-detects one of three textual dialects and returns a typed table:

- Tagged ATG tank tables: a sentinel line, a whitespace-separated header
  line and whitespace-separated data lines.
- Delimited tables with a header row (``,`` or ``;``).
- Headerless delimited tables, read as ``Height``/``Volume`` pairs.
"""

import re
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from tank_calibration.config import get_settings
from tank_calibration.core.exceptions import (
    EmptyInputError,
    MalformedDialectError,
    NoDataRowsError,
)
from tank_calibration.core.logging import get_logger
from tank_calibration.core.types import Cell, TableDialect

logger = get_logger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_WHITESPACE_RE = re.compile(r"\s+")


def parse_number(text: str) -> Optional[float]:
    """Parse a trimmed decimal floating-point literal, or return None."""
    text = text.strip()
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    return None


def to_cell(field: str) -> Cell:
    """Convert a raw field to a number when possible, else trimmed text."""
    number = parse_number(field)
    return number if number is not None else field.strip()


@dataclass(frozen=True)
class HeaderedTable:
    """Delimited table whose first line is a header row."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]
    delimiter: str
    dialect: ClassVar[TableDialect] = TableDialect.HEADERED


@dataclass(frozen=True)
class HeaderlessTable:
    """Delimited table of bare numbers with synthesized headers."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]
    delimiter: str
    dialect: ClassVar[TableDialect] = TableDialect.HEADERLESS


@dataclass(frozen=True)
class TaggedTable:
    """Whitespace-separated table introduced by a sentinel line."""

    headers: tuple[str, ...]
    rows: tuple[tuple[Cell, ...], ...]
    sentinel: str
    dialect: ClassVar[TableDialect] = TableDialect.TAGGED

    @property
    def delimiter(self) -> None:
        return None


ParsedTable = Union[HeaderedTable, HeaderlessTable, TaggedTable]


class TableParser:
    """
    Dialect-detecting parser for calibration and validation tables.

    Input is text already read into memory; the parser performs no I/O.
    """

    def __init__(
        self,
        sentinel: Optional[str] = None,
        default_headers: Optional[tuple[str, ...]] = None,
    ):
        """Initialize the parser.

        Args:
            sentinel: Tagged-table sentinel line. Defaults to settings.
            default_headers: Headers synthesized for headerless files.
                Defaults to settings.
        """
        settings = get_settings().parser
        self.sentinel = (sentinel or settings.tagged_table_sentinel).strip().upper()
        self.default_headers = tuple(default_headers or settings.default_headers)

    def parse_string(self, text: str) -> ParsedTable:
        """
        Parse table content from a string.

        Args:
            text: Raw file content.

        Returns:
            HeaderedTable, HeaderlessTable or TaggedTable.

        Raises:
            EmptyInputError: If the text is blank.
            MalformedDialectError: If a tagged table lacks header or data lines.
            NoDataRowsError: If no data rows follow the header.
        """
        if not text or not text.strip():
            raise EmptyInputError(operation="parse")

        lines = [line for line in _LINE_SPLIT_RE.split(text.strip()) if line.strip()]

        if lines[0].strip().upper() == self.sentinel:
            table = self._parse_tagged(lines)
        else:
            delimiter = ";" if ";" in lines[0] else ","
            if any(parse_number(field) is None for field in lines[0].split(delimiter)):
                table = self._parse_headered(lines, delimiter)
            else:
                table = self._parse_headerless(lines, delimiter)

        logger.debug(
            f"Parsed {table.dialect.value} table: {len(table.headers)} columns, "
            f"{len(table.rows)} rows"
        )
        return table

    def _parse_tagged(self, lines: list[str]) -> TaggedTable:
        if len(lines) < 3:
            raise MalformedDialectError(operation="parse", details={"lines": len(lines)})

        headers = tuple(_WHITESPACE_RE.split(lines[1].strip()))
        rows = tuple(
            tuple(to_cell(field) for field in _WHITESPACE_RE.split(line.strip()))
            for line in lines[2:]
        )
        return TaggedTable(headers=headers, rows=rows, sentinel=lines[0].strip())

    def _parse_headered(self, lines: list[str], delimiter: str) -> HeaderedTable:
        if len(lines) < 2:
            raise NoDataRowsError(
                "CSV file must have at least one data row.", operation="parse"
            )

        headers = tuple(h.strip() for h in lines[0].split(delimiter))
        rows = tuple(
            tuple(to_cell(field) for field in line.split(delimiter)) for line in lines[1:]
        )
        return HeaderedTable(headers=headers, rows=rows, delimiter=delimiter)

    def _parse_headerless(self, lines: list[str], delimiter: str) -> HeaderlessTable:
        width = len(self.default_headers)
        rows = tuple(
            tuple(to_cell(field) for field in line.split(delimiter)[:width]) for line in lines
        )
        if not rows:
            raise NoDataRowsError("No data rows found in the file.", operation="parse")
        return HeaderlessTable(headers=self.default_headers, rows=rows, delimiter=delimiter)


def parse_table(text: str) -> ParsedTable:
    """
    Parse table text with the default parser.

    Args:
        text: Raw file content.

    Returns:
        The parsed table.
    """
    return TableParser().parse_string(text)
