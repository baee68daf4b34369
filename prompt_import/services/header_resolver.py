from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from ..errors import MissingRequiredColumnsError
from ..models.column_map import ColumnMap

"""Header row normalization and column resolution.

Header cells are normalized to column keys (trimmed, lowercased, whitespace
runs collapsed to "_") and each semantic field takes the position of the first
alias that matches. Duplicate keys are allowed; the first occurrence wins.
"""

__all__ = [
    "COLUMN_ALIASES",
    "map_columns",
    "normalize_header",
    "resolve_header",
]

logger = logging.getLogger(__name__)

# 優先順 (先頭一致が採用される)
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "topic": ("topic",),
    "prompt": ("prompt", "query", "query_text"),
    "country": ("country", "country_code"),
    "locale": ("locale",),
}

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_header(cell: str) -> str:
    """Convert a raw header cell to its column key.

    >>> normalize_header("  Query   Text ")
    'query_text'
    """
    return _WHITESPACE_RUN.sub("_", cell.strip().lower())


def _index_of(keys: list[str], candidates: Sequence[str]) -> int | None:
    for candidate in candidates:
        if candidate in keys:
            return keys.index(candidate)
    return None


def map_columns(header_row: Sequence[str]) -> ColumnMap:
    """Resolve every semantic field against the header; never fails."""
    keys = [normalize_header(c) for c in header_row]
    positions = {name: _index_of(keys, aliases) for name, aliases in COLUMN_ALIASES.items()}
    return ColumnMap(**positions)


def resolve_header(header_row: Sequence[str]) -> ColumnMap:
    """Resolve the header, requiring topic and prompt columns.

    Raises:
        MissingRequiredColumnsError: If topic or prompt matched no alias
    """
    column_map = map_columns(header_row)
    if not column_map.is_complete:
        raise MissingRequiredColumnsError(column_map.missing_required)
    logger.debug("resolved columns %s", column_map)
    return column_map
