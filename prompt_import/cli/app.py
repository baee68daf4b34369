from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, ImportConfig, load_config, resolve_config_path
from ..csvfile.parser import parse_csv
from ..csvfile.writer import TEMPLATE_FILENAME, generate_template
from ..logging.init import enable_debug, log_summary, setup_logging
from ..services.header_resolver import map_columns
from ..services.importer import decode_bytes
from ..services.orchestrator import ProcessingError, process_all, scan_csv_files
from ..services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- ``--template PATH``: write the sample CSV and exit
- load .env (override) and the YAML config
- import every .csv of source_directory into output_directory
- print the SUMMARY line and exit with the run's exit code
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env; its values win over the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Topic/prompt CSV importer")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument(
        "--inspect-data",
        action="store_true",
        help="Print resolved columns & first rows of each file then exit",
    )
    p.add_argument(
        "--template",
        metavar="PATH",
        nargs="?",
        const=TEMPLATE_FILENAME,
        help=f"Write the sample template (default: {TEMPLATE_FILENAME}) then exit",
    )
    p.add_argument("--config", type=Path, help="Config file (default: config/import.yml)")
    return p.parse_args(argv)


def _write_template(path: Path, logger: logging.Logger) -> int:
    try:
        path.write_text(generate_template(), encoding="utf-8")
    except OSError as e:
        logger.error(f"template: {e}")
        return EXIT_FATAL
    logger.info(f"template written: {path}")
    return EXIT_SUCCESS_ALL


def _inspect_data(cfg: ImportConfig) -> int:
    try:
        files = scan_csv_files(Path(cfg.source_directory))
    except ProcessingError as e:
        print(f"inspect: {e}")
        return EXIT_FATAL
    if not files:
        print("inspect: no .csv files")
        return EXIT_SUCCESS_ALL
    for f in files:
        print(f"FILE: {f.name}")
        try:
            text = decode_bytes(f.read_bytes(), cfg.encoding)
        except OSError as e:
            print(f"  read_error: {e}")
            continue
        table = parse_csv(text, cfg.delimiter)
        if not table:
            print("  (empty)")
            continue
        column_map = map_columns(table[0])
        print(f"  rows={len(table) - 1} header={table[0]}")
        print(
            f"  columns topic={column_map.topic} prompt={column_map.prompt} "
            f"country={column_map.country} locale={column_map.locale}"
        )
        if column_map.missing_required:
            print(f"  missing_required={column_map.missing_required}")
        print("    sample_rows=", table[1:1 + INSPECT_SAMPLE_ROWS])
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # NOTE: [] が渡された場合に sys.argv (pytest の引数) を読まないよう None のみ判定
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        enable_debug(logger)
        logger.debug("debug mode enabled")

    if args.template is not None:
        return _write_template(Path(args.template), logger)

    _load_env_file(Path(".env"), override=True)
    config_path = resolve_config_path(args.config)
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    directory = Path(cfg.source_directory)
    if not directory.exists():
        logger.error(f"directory not found: {directory}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(cfg)

    logger.info(f"Processing files from: {directory}")
    try:
        result = process_all(cfg)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    # log_summary が "SUMMARY " を付与するので除去して渡す
    summary_line = render_summary_line(result)
    log_summary(summary_line.removeprefix("SUMMARY "))

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
