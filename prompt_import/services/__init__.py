"""Import pipeline services and CLI orchestration."""

from .header_resolver import map_columns, normalize_header, resolve_header
from .importer import decode_bytes, import_file, import_topics, run_import
from .row_coercer import coerce_rows, coerce_rows_with_diagnostics

__all__ = [
    "coerce_rows",
    "coerce_rows_with_diagnostics",
    "decode_bytes",
    "import_file",
    "import_topics",
    "map_columns",
    "normalize_header",
    "resolve_header",
    "run_import",
]
