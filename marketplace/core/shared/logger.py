"""
Shared Logger

Logging setup for the service. Every record carries the correlation id of
the HTTP request being served (or "-" outside a request), so checkout and
settlement lines can be traced back to the call that caused them.
"""

import copy
import json
import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="-")

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


class CorrelationIdFilter(logging.Filter):
    """Stamps the current request's correlation id on each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get()
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line; ContextLogger fields go under `extra`."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "correlation_id": getattr(record, "correlation_id", correlation_id_var.get()),
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["extra"] = extra_data
        return json.dumps(log_data, default=str)


class ColoredFormatter(logging.Formatter):
    """Console formatter; appends ContextLogger fields as key=value pairs."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers share the record
        record = copy.copy(record)
        record.levelname = f"{self.COLORS.get(record.levelname, self.RESET)}{record.levelname}{self.RESET}"
        message = super().format(record)
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            message += " | " + " ".join(f"{key}={value}" for key, value in extra_data.items())
        return message


class ContextLogger:
    """
    Logger bound to a set of fields (order id, settlement reference, ...)
    that are attached to every record it emits.
    """

    def __init__(self, name: str, context: dict[str, Any] | None = None):
        self._logger = logging.getLogger(name)
        self._context = context or {}

    def with_context(self, **kwargs) -> "ContextLogger":
        return ContextLogger(self._logger.name, {**self._context, **kwargs})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs) -> None:
        self._logger.log(level, message, exc_info=exc_info, extra={"extra_data": {**self._context, **kwargs}})

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)


def configure_logging(
    level: str = "INFO",
    format_type: str = "colored",
    log_file: str | None = None,
) -> None:
    """
    Configure root logging.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'colored', 'json' or 'plain' for the console handler
        log_file: optional path; the file always receives JSON lines
    """
    numeric_level = getattr(logging, level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    if format_type == "json":
        console_formatter: logging.Formatter = JSONFormatter()
    elif format_type == "colored":
        console_formatter = ColoredFormatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    else:
        console_formatter = logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    handlers[0].setFormatter(console_formatter)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.addFilter(CorrelationIdFilter())
        root_logger.addHandler(handler)

    # SQLAlchemy echoes through its own logger when DB_ECHO is enabled
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str, context: dict[str, Any] | None = None) -> ContextLogger:
    return ContextLogger(name, context)


def get_service_logger(service_name: str) -> ContextLogger:
    """Logger for an application service, e.g. `get_service_logger("settlement")`."""
    return get_logger(f"service.{service_name}", {"service": service_name})
