from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..models.coercion_result import CoercionResult
from ..models.column_map import ColumnMap
from ..models.import_record import ImportRecord, RecordDefaults

"""Row validation and coercion into ImportRecord.

Rows are read by the positions in a ColumnMap. A position beyond the end of a
short row reads as an empty cell. Rows whose trimmed topic or prompt is empty
are dropped without error; the caller decides whether an all-dropped table is
a failure.
"""

__all__ = [
    "cell_at",
    "coerce_row",
    "coerce_rows",
    "coerce_rows_with_diagnostics",
]

logger = logging.getLogger(__name__)

_DEFAULTS = RecordDefaults()


def cell_at(row: Sequence[str], index: int | None) -> str:
    """Trimmed cell value, or "" when the column is absent or out of range."""
    if index is None or index >= len(row):
        return ""
    return row[index].strip()


def coerce_row(
    row: Sequence[str], column_map: ColumnMap, defaults: RecordDefaults | None = None
) -> ImportRecord | None:
    """Build one record, or None when topic or prompt is empty."""
    defaults = defaults or _DEFAULTS
    topic = cell_at(row, column_map.topic)
    prompt = cell_at(row, column_map.prompt)
    if not topic or not prompt:
        return None
    return ImportRecord(
        topic=topic,
        prompt=prompt,
        country=cell_at(row, column_map.country) or defaults.country,
        locale=cell_at(row, column_map.locale) or defaults.locale,
    )


def coerce_rows_with_diagnostics(
    rows: Iterable[Sequence[str]],
    column_map: ColumnMap,
    defaults: RecordDefaults | None = None,
    first_row_number: int = 2,
) -> CoercionResult:
    """Coerce data rows, keeping the numbers of dropped rows.

    Args:
        rows: Data rows (header excluded)
        column_map: Resolved column positions
        defaults: country/locale fallback values
        first_row_number: Table row number of the first data row

    Returns:
        CoercionResult with records in source order
    """
    records: list[ImportRecord] = []
    dropped: list[int] = []
    for row_number, row in enumerate(rows, start=first_row_number):
        record = coerce_row(row, column_map, defaults)
        if record is None:
            dropped.append(row_number)
            continue
        records.append(record)
    if dropped:
        logger.debug("dropped rows without topic/prompt: %s", dropped)
    return CoercionResult(records=records, dropped_rows=dropped)


def coerce_rows(
    rows: Iterable[Sequence[str]],
    column_map: ColumnMap,
    defaults: RecordDefaults | None = None,
) -> list[ImportRecord]:
    return coerce_rows_with_diagnostics(rows, column_map, defaults).records
