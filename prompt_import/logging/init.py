from __future__ import annotations

import logging
import sys

"""Logging initialization with labeled prefixes.

Console output of the importer CLI is one line per message, prefixed with a
label: INFO|WARN|ERROR|DEBUG|SUMMARY. The SUMMARY level sits between INFO and
WARNING so that the final summary survives a WARNING threshold but is not an
error. Library modules log through logging.getLogger(__name__) and stay
silent unless a handler is configured.

Structured per-file failures go to logging.error_log, not here.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "enable_debug",
    "get_logger",
    "log_summary",
    "reset_logging",
    "setup_logging",
]

LOGGER_NAME = "prompt_importer"

# Custom SUMMARY level (between INFO=20 and WARNING=30)
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Formatter rendering ``<LABEL> <message>``."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        level_label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{level_label} {record.getMessage()}"


def setup_logging() -> logging.Logger:
    """Configure the application logger (idempotent).

    Returns:
        The logger writing labeled lines to stdout
    """
    global _logger

    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # ハンドラ重複防止
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate output
    logger.propagate = False

    _logger = logger
    return logger


def enable_debug(logger: logging.Logger) -> None:
    """Lower the application logger and its handlers to DEBUG.

    The package loggers (prompt_import.*) are routed to the same handlers so
    pipeline diagnostics show up with the same labels.
    """
    logger.setLevel(logging.DEBUG)
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    pkg_logger = logging.getLogger("prompt_import")
    pkg_logger.setLevel(logging.DEBUG)
    for h in logger.handlers:
        if h not in pkg_logger.handlers:
            pkg_logger.addHandler(h)
    pkg_logger.propagate = False


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
    pkg_logger = logging.getLogger("prompt_import")
    for h in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(h)
    pkg_logger.setLevel(logging.NOTSET)
    pkg_logger.propagate = True
