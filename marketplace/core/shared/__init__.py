"""
Shared utilities module

Domain-agnostic helpers used across the service.
"""

from .logger import (
    ColoredFormatter,
    ContextLogger,
    CorrelationIdFilter,
    JSONFormatter,
    configure_logging,
    correlation_id_var,
    get_logger,
    get_service_logger,
)

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "CorrelationIdFilter",
    "JSONFormatter",
    "configure_logging",
    "correlation_id_var",
    "get_logger",
    "get_service_logger",
]
