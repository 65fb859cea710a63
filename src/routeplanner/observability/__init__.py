"""Observability - structured logging."""

from .logger import (
    TRACE,
    VERBOSE,
    LogContext,
    configure_logging,
    current_context,
    get_log_level,
    get_logger,
    trace,
    verbose,
)

__all__ = [
    "TRACE",
    "VERBOSE",
    "LogContext",
    "configure_logging",
    "current_context",
    "get_log_level",
    "get_logger",
    "trace",
    "verbose",
]
