from __future__ import annotations

from dataclasses import dataclass, field

from .import_record import ImportRecord

"""CoercionResult model: records produced from data rows plus drop diagnostics.

Row numbers are 1-based positions in the parsed table, the header being row 1,
so the first data row is row 2. A quoted field spanning several physical lines
still counts as one row.
"""

__all__ = [
    "CoercionResult",
]


@dataclass(frozen=True)
class CoercionResult:
    records: list[ImportRecord]
    dropped_rows: list[int] = field(default_factory=list)  # topic/prompt 欠落で除外した行番号

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped_rows)
