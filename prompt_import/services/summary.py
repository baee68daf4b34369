from __future__ import annotations

from ..models.processing_result import ProcessingResult

"""SUMMARY line rendering for the importer CLI.

Format:
SUMMARY files={total}/{total} success={success} failed={failed} records={records}
dropped_rows={dropped} elapsed_sec={elapsed} throughput_rps={throughput}
"""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # 指数表記回避
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(result: ProcessingResult) -> str:
    """Render the SUMMARY line of a run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> result = ProcessingResult(
        ...     success_files=1, failed_files=1, total_records=12,
        ...     total_dropped_rows=2, start_time=t, end_time=t,
        ...     elapsed_seconds=2.0, throughput_records_per_sec=6.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY files=2/2 success=1 failed=1 records=12 dropped_rows=2 elapsed_sec=2 throughput_rps=6'
    """
    total = result.total_files
    return (
        f"SUMMARY files={total}/{total} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"records={result.total_records} "
        f"dropped_rows={result.total_dropped_rows} "
        f"elapsed_sec={_format_number(result.elapsed_seconds)} "
        f"throughput_rps={_format_number(result.throughput_records_per_sec)}"
    )
