"""
Centralized structured logging for the member search service.
Uses Python's standard logging with JSON formatting for production.

Level and output format come from ``Settings.log_level`` and
``Settings.log_format``. ``sql_echo`` routes SQLAlchemy's statement log
through the same handler.
"""

import json
import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any

from shared.config.settings import Settings, settings


class StructuredFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    Outputs logs in a format easily parseable by log aggregation tools.
    """

    def __init__(self, include_source: bool = False):
        super().__init__()
        self.include_source = include_source

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if getattr(record, "extra_data", None):
            log_data["data"] = record.extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if self.include_source:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_data, default=str)


class DevelopmentFormatter(logging.Formatter):
    """
    Human-readable formatter for development.
    """

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.now().strftime("%H:%M:%S")

        message = f"{color}[{timestamp}] {record.levelname:8}{self.RESET} {record.name}: {record.getMessage()}"

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            data_str = " | ".join(f"{k}={v}" for k, v in extra_data.items())
            message += f" ({data_str})"

        if record.exc_info:
            message += f"\n{self.formatException(record.exc_info)}"

        return message


class StructuredLogger(logging.Logger):
    """
    Custom logger that supports structured data.

    Keyword arguments passed to the log methods are attached to the record
    as ``extra_data`` and rendered by both formatters.
    """

    def _log_with_data(
        self,
        level: int,
        msg: str,
        args: tuple,
        exc_info: Any = None,
        extra: dict | None = None,
        **kwargs: Any,
    ) -> None:
        """Log with optional structured data."""
        if not self.isEnabledFor(level):
            return
        if extra is None:
            extra = {}
        extra["extra_data"] = kwargs if kwargs else None
        super()._log(level, msg, args, exc_info=exc_info, extra=extra)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log_with_data(logging.DEBUG, msg, args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log_with_data(logging.INFO, msg, args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._log_with_data(logging.WARNING, msg, args, **kwargs)

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        exc_info = kwargs.pop("exc_info", None)
        self._log_with_data(logging.ERROR, msg, args, exc_info=exc_info, **kwargs)


# Set custom logger class
logging.setLoggerClass(StructuredLogger)


def resolve_log_level(config: Settings) -> int:
    """Numeric level from ``log_level``, falling back to DEBUG/INFO by ``debug``."""
    if config.log_level:
        level = logging.getLevelName(config.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {config.log_level}")
        return level
    return logging.DEBUG if config.debug else logging.INFO


def build_formatter(config: Settings) -> logging.Formatter:
    """JSON output for ``log_format="json"`` or production, coloured text otherwise."""
    log_format = config.log_format or ("json" if config.environment == "production" else "text")
    if log_format == "json":
        return StructuredFormatter(include_source=config.debug)
    if log_format == "text":
        return DevelopmentFormatter()
    raise ValueError(f"Unknown log format: {config.log_format}")


def setup_logging(config: Settings | None = None) -> None:
    """
    Configure logging for the application.
    Call this once at application startup.
    """
    config = config or settings
    log_level = resolve_log_level(config)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(build_formatter(config))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # SQL statements are only shown when explicitly requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if config.sql_echo else logging.WARNING
    )


@contextmanager
def log_duration(logger: logging.Logger, msg: str, **data: Any) -> Iterator[dict[str, Any]]:
    """
    Log ``msg`` at DEBUG with the elapsed milliseconds once the block exits.

    The yielded dict is merged into the logged data, so the block can add
    values it only knows at the end (row counts, totals).

    Usage:
        with log_duration(logger, "Count query executed", offset=0) as data:
            data["total"] = run_count()
    """
    start = time.perf_counter()
    try:
        yield data
    finally:
        data["elapsed_ms"] = round((time.perf_counter() - start) * 1000, 3)
        logger.debug(msg, **data)


def get_logger(name: str) -> StructuredLogger:
    """
    Get a logger instance with the given name.

    Usage:
        from shared.config.logging import get_logger
        logger = get_logger(__name__)

        logger.info("Members found", count=4, username="member1")
        logger.error("Search failed", exc_info=True)
    """
    return logging.getLogger(name)  # type: ignore


# Pre-configured loggers for common modules
api_logger = get_logger("search_api")
