from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum

"""Character-level parser for the topic/prompt CSV format.

The parser is forgiving by construction: any text produces a table, malformed
quoting included. Quoted fields may contain the delimiter, line feeds and
doubled quotes (""). Carriage returns outside quotes are discarded, which
normalizes CRLF and lone CR input.

tokenize() returns every row as scanned; parse_csv() additionally drops the
wholly blank rows at the end of the table.
"""

__all__ = [
    "QUOTE",
    "ParserState",
    "RawRow",
    "RawTable",
    "check_delimiter",
    "is_blank_row",
    "parse_csv",
    "tokenize",
    "trim_trailing_blank_rows",
]

logger = logging.getLogger(__name__)

QUOTE = '"'
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"

RawRow = list[str]
RawTable = list[RawRow]


class ParserState(Enum):
    NORMAL = "normal"
    IN_QUOTES = "in_quotes"


def check_delimiter(delimiter: str) -> None:
    """Reject delimiters that would collide with quoting or line handling.

    Raises:
        ValueError: If delimiter is not a single character, or is a quote,
            line feed or carriage return.
    """
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character: {delimiter!r}")
    if delimiter in (QUOTE, LINE_FEED, CARRIAGE_RETURN):
        raise ValueError(f"delimiter not allowed: {delimiter!r}")


def tokenize(text: str, delimiter: str = ",") -> RawTable:
    """Split text into rows of raw field strings.

    Single left-to-right scan with one character of lookahead. The last
    in-progress field is always flushed, so input without a trailing line
    terminator still yields its final row, and an unterminated quote simply
    closes at end of input.

    Args:
        text: Decoded file contents
        delimiter: Field separator (single character)

    Returns:
        Rows in source order; row lengths may differ
    """
    check_delimiter(delimiter)

    rows: RawTable = []
    row: RawRow = []
    field: list[str] = []
    state = ParserState.NORMAL
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]
        if state is ParserState.IN_QUOTES:
            if ch == QUOTE:
                if i + 1 < n and text[i + 1] == QUOTE:
                    # "" -> 文字としての "
                    field.append(QUOTE)
                    i += 2
                    continue
                state = ParserState.NORMAL
            else:
                field.append(ch)
        elif ch == QUOTE:
            state = ParserState.IN_QUOTES
        elif ch == delimiter:
            row.append("".join(field))
            field = []
        elif ch == LINE_FEED:
            row.append("".join(field))
            field = []
            rows.append(row)
            row = []
        elif ch == CARRIAGE_RETURN:
            pass
        else:
            field.append(ch)
        i += 1

    row.append("".join(field))
    rows.append(row)

    if state is ParserState.IN_QUOTES:
        logger.debug("unterminated quote at end of input closed implicitly")
    return rows


def is_blank_row(row: Sequence[str]) -> bool:
    """True when every field is empty or whitespace only."""
    return all(cell.strip() == "" for cell in row)


def trim_trailing_blank_rows(table: RawTable) -> RawTable:
    """Drop wholly blank rows from the end of the table.

    Scanning stops at the first non-blank row from the end; interior blank rows
    are kept so the row validator can drop them individually.
    """
    end = len(table)
    while end > 0 and is_blank_row(table[end - 1]):
        end -= 1
    return table[:end]


def parse_csv(text: str, delimiter: str = ",") -> RawTable:
    """Tokenize text and trim trailing blank rows."""
    table = trim_trailing_blank_rows(tokenize(text, delimiter))
    logger.debug("parsed rows=%d", len(table))
    return table
