from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ImportConfig
from ..csvfile.writer import render_records
from ..errors import TopicImportError
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import LOGGER_NAME
from ..models.error_record import FILE_LEVEL_ROW, ErrorRecord
from ..models.processing_result import FileStat, ProcessingResult
from .importer import import_file
from .progress import ProgressTracker

"""Directory run orchestration for the importer CLI.

Scans the configured source directory for .csv files, runs the import
pipeline on each one, writes the normalized records of each file into the
output directory and aggregates a ProcessingResult. A failed file never stops
the run; it is logged, written to the error log and counted.
"""

__all__ = [
    "OUTPUT_SUFFIX",
    "ProcessingError",
    "output_path_for",
    "process_all",
    "scan_csv_files",
]

logger = logging.getLogger(LOGGER_NAME)

OUTPUT_SUFFIX = ".normalized.csv"


class ProcessingError(Exception):
    """Fatal error that prevents the run from starting."""
    pass


def scan_csv_files(directory: Path) -> list[Path]:
    """List .csv files in directory (non-recursive, sorted by name).

    Raises:
        ProcessingError: If directory doesn't exist or can't be read
    """
    if not directory.exists():
        raise ProcessingError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise ProcessingError(f"Path is not a directory: {directory}")

    try:
        return sorted(
            p for p in directory.iterdir()
            if p.is_file() and p.suffix.lower() == ".csv" and not p.name.endswith(OUTPUT_SUFFIX)
        )
    except OSError as e:
        raise ProcessingError(f"Error reading directory {directory}: {e}") from e


def output_path_for(source: Path, output_directory: Path) -> Path:
    return output_directory / f"{source.stem}{OUTPUT_SUFFIX}"


def _failed(file_path: Path, started: datetime, error_type: str) -> FileStat:
    return FileStat(
        file_name=file_path.name,
        status="failed",
        records=0,
        dropped_rows=0,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        error=error_type,
    )


def _process_single_file(
    file_path: Path,
    config: ImportConfig,
    output_directory: Path,
    error_log: ErrorLogBuffer,
) -> FileStat:
    started = datetime.now(UTC)
    try:
        result = import_file(
            file_path,
            delimiter=config.delimiter,
            encoding=config.encoding,
            defaults=config.defaults,
        )
    except TopicImportError as e:
        logger.error(f"{file_path.name}: {e}")
        error_log.append(ErrorRecord.create(file_path.name, FILE_LEVEL_ROW, e.error_type, str(e)))
        return _failed(file_path, started, e.error_type)
    except OSError as e:
        logger.error(f"{file_path.name}: cannot read file: {e}")
        error_log.append(ErrorRecord.create(file_path.name, FILE_LEVEL_ROW, "FILE_READ_ERROR", str(e)))
        return _failed(file_path, started, "FILE_READ_ERROR")

    for row in result.dropped_rows:
        error_log.append(
            ErrorRecord.create(
                file_path.name, row, "MISSING_TOPIC_OR_PROMPT", "row skipped: topic or prompt is empty"
            )
        )
    if result.dropped_rows:
        logger.warning(f"{file_path.name}: skipped {result.dropped_count} row(s) without topic/prompt")

    out_path = output_path_for(file_path, output_directory)
    try:
        out_path.write_text(render_records(result.records, config.delimiter), encoding="utf-8")
    except OSError as e:
        logger.error(f"{file_path.name}: cannot write {out_path}: {e}")
        error_log.append(ErrorRecord.create(file_path.name, FILE_LEVEL_ROW, "OUTPUT_WRITE_ERROR", str(e)))
        return _failed(file_path, started, "OUTPUT_WRITE_ERROR")

    logger.info(f"{file_path.name}: records={result.record_count} -> {out_path}")
    return FileStat(
        file_name=file_path.name,
        status="success",
        records=result.record_count,
        dropped_rows=result.dropped_count,
        elapsed_seconds=(datetime.now(UTC) - started).total_seconds(),
        output_path=str(out_path),
    )


def process_all(config: ImportConfig, error_log: ErrorLogBuffer | None = None) -> ProcessingResult:
    """Import every CSV file of the configured source directory.

    Args:
        config: Loaded import configuration
        error_log: Buffer receiving failure records (a fresh one by default)

    Returns:
        ProcessingResult with aggregated metrics and file stats

    Raises:
        ProcessingError: Source directory missing/unreadable or output
            directory cannot be created
    """
    start_time = datetime.now(UTC)
    error_log = error_log if error_log is not None else ErrorLogBuffer()

    file_paths = scan_csv_files(Path(config.source_directory))

    output_directory = Path(config.output_directory)
    try:
        output_directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ProcessingError(f"cannot create output directory {output_directory}: {e}") from e

    file_stats: list[FileStat] = []
    success_count = 0
    failed_count = 0
    total_records = 0
    total_dropped = 0

    with ProgressTracker(len(file_paths)) as progress:
        for file_path in file_paths:
            progress.start_file(file_path)
            stat = _process_single_file(file_path, config, output_directory, error_log)
            if stat.status == "success":
                success_count += 1
                total_records += stat.records
                total_dropped += stat.dropped_rows
            else:
                failed_count += 1
            progress.set_postfix(success=success_count, failed=failed_count, records=total_records)
            progress.finish_file()
            file_stats.append(stat)

    # エラーログは実行単位で一括書き出し
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"cannot write error log: {e}")
    else:
        if log_path is not None and (failed_count or total_dropped):
            logger.info(f"error log: {log_path}")

    end_time = datetime.now(UTC)
    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput = total_records / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return ProcessingResult(
        success_files=success_count,
        failed_files=failed_count,
        total_records=total_records,
        total_dropped_rows=total_dropped,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_records_per_sec=throughput,
        file_stats=file_stats,
    )
