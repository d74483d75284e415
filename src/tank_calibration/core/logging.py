"""
Centralized logging configuration for the tank calibration engine.

Provides structured logging with JSON formatting support, a timing
context manager for pipeline operations, and lazy configuration.

Usage:
    from tank_calibration.core.logging import get_logger, setup_logging

    # Setup logging (typically at application startup)
    setup_logging(level="DEBUG", json_format=True)

    # Get a logger for your module
    logger = get_logger(__name__)
    logger.debug("Parsed table", extra={"rows": 42})
"""

import json
import logging
import sys
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterator

PACKAGE_LOGGER = "tank_calibration"

# Attributes present on every LogRecord; anything else came in via ``extra``
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs logs as JSON objects with consistent fields for easy parsing
    by log aggregation systems.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON.

        Args:
            record: The log record to format.

        Returns:
            JSON-formatted string.
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
            log_data["exception_type"] = record.exc_info[0].__name__ if record.exc_info[0] else None

        return json.dumps(log_data, default=str)


_logging_configured = False


def setup_logging(
    level: str | None = None,
    log_file: Path | None = None,
    json_format: bool = False,
) -> None:
    """Configure package logging.

    Should be called once at application startup. Subsequent calls
    will update the configuration.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        log_file: Optional file path for log output.
        json_format: Use JSON formatting for structured logs.
    """
    global _logging_configured

    # Import here to avoid circular imports
    from tank_calibration.config import get_settings

    level = level or get_settings().log_level

    root_logger = logging.getLogger(PACKAGE_LOGGER)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    if json_format:
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())  # Always JSON for files
        root_logger.addHandler(file_handler)

    _logging_configured = True
    root_logger.debug(f"Logging configured: level={level}, file={log_file}, json={json_format}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Automatically ensures logging is configured before returning.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured logger instance.
    """
    if not _logging_configured:
        setup_logging()

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
) -> Iterator[None]:
    """Log operation start/end with timing.

    Failures are logged and re-raised unchanged.

    Example:
        with log_operation(logger, "process_chart"):
            ...
    """
    start = time.perf_counter()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        logger.log(
            level,
            f"Failed: {operation}",
            extra={
                "duration_seconds": round(time.perf_counter() - start, 4),
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        raise
    logger.log(
        level,
        f"Completed: {operation}",
        extra={"duration_seconds": round(time.perf_counter() - start, 4)},
    )
