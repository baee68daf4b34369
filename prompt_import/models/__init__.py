"""Domain models for the topic/prompt CSV importer.

This package contains the record types produced by the import pipeline and the
bookkeeping models used by the CLI (error log entries, batch results).
"""

from .coercion_result import CoercionResult
from .column_map import REQUIRED_FIELDS, ColumnMap
from .error_record import ErrorRecord
from .import_record import DEFAULT_COUNTRY, DEFAULT_LOCALE, ImportRecord, RecordDefaults
from .processing_result import FileStat, ProcessingResult

__all__ = [
    # Pipeline models
    "ColumnMap",
    "CoercionResult",
    "ImportRecord",
    "RecordDefaults",
    "REQUIRED_FIELDS",
    "DEFAULT_COUNTRY",
    "DEFAULT_LOCALE",
    # Bookkeeping models
    "ErrorRecord",
    "FileStat",
    "ProcessingResult",
]
