from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

"""Batch processing result models for the CLI.

FileStat describes one imported file; ProcessingResult aggregates a directory
run and feeds the SUMMARY line.
"""

__all__ = [
    "FileStat",
    "ProcessingResult",
]


@dataclass(frozen=True)
class FileStat:
    """Per-file import statistics."""
    file_name: str  # ファイル名
    status: str  # success/failed
    records: int  # 出力レコード数 (失敗時 0)
    dropped_rows: int  # topic/prompt 欠落で除外した行数
    elapsed_seconds: float
    error: str | None = None  # 失敗理由 (ErrorKind 名)
    output_path: str | None = None


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregated results of one CLI run."""
    success_files: int
    failed_files: int
    total_records: int
    total_dropped_rows: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_records_per_sec: float
    file_stats: list[FileStat] | None = None

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
