"""Structured logging configuration with custom verbosity levels.

Levels used by the planner:
- INFO (20): Planning entry/exit and the final route (default)
- VERBOSE (15): Phase detail (graph built, route ordered)
- DEBUG (10): Every destination and dependency registered
- TRACE (5): Every insertion step of the orderer (extremely verbose)
"""

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import structlog

# Context variables for per-plan tracing
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

TRACE = 5  # Below DEBUG, for extremely verbose output
VERBOSE = 15  # Between DEBUG and INFO, for phase-level detail

logging.addLevelName(TRACE, "TRACE")
logging.addLevelName(VERBOSE, "VERBOSE")


class LogContext:
    """
    Context manager for adding context to logs.

    Usage:
        with LogContext(plan_id="1a2b3c4d", source="trip.txt"):
            planner.plan_route(definitions)
    """

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize log context.

        Args:
            **kwargs: Key-value pairs to add to log context
        """
        self.new_context = kwargs
        self.token = None

    def __enter__(self) -> "LogContext":
        """Enter context and merge new values."""
        current = _log_context.get().copy()
        current.update(self.new_context)
        self.token = _log_context.set(current)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context and restore previous values."""
        if self.token:
            _log_context.reset(self.token)


def get_logger(name: str) -> Any:
    """
    Get a structlog logger backed by the stdlib logger `name`.

    Events are filtered by stdlib levels even before configure_logging() runs,
    so library callers that never configure logging see only warnings and
    errors (on stderr, through the stdlib last-resort handler).

    Args:
        name: Logger name, usually the module `__name__`

    Returns:
        Lazily bound structlog logger
    """
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def current_context() -> dict[str, Any]:
    """Return a copy of the active log context."""
    return _log_context.get().copy()


def trace(logger: Any, event: str, **kwargs: Any) -> None:
    """Log at TRACE level (extremely verbose)."""
    if logging.getLogger().isEnabledFor(TRACE):
        logger.debug(event, verbosity="trace", **kwargs)


def verbose(logger: Any, event: str, **kwargs: Any) -> None:
    """Log at VERBOSE level (phase-level detail)."""
    if logging.getLogger().isEnabledFor(VERBOSE):
        logger.info(event, verbosity="verbose", **kwargs)


def _component_filter(components: list[str]) -> Any:
    """
    Build a processor that drops debug/info events from other components.

    Warnings and errors always pass.

    Args:
        components: Logger name fragments to keep (e.g., ["graph", "orderer"])

    Returns:
        Structlog processor
    """

    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        if method_name in ("debug", "info"):
            name = event_dict.get("logger") or ""
            if not any(comp in name for comp in components):
                raise structlog.DropEvent
        return event_dict

    return processor


def _context_processor(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Structlog processor to inject context variables.

    Args:
        logger: Logger instance
        method_name: Logging method name
        event_dict: Event dictionary

    Returns:
        Updated event dictionary with context
    """
    context = _log_context.get()
    if context:
        event_dict.update(context)
    return event_dict


LOG_LEVELS = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "VERBOSE": VERBOSE,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level(level: str) -> int:
    """
    Get numeric log level from string.

    Args:
        level: Level name (TRACE, DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Numeric log level, INFO for unknown names
    """
    return LOG_LEVELS.get(level.upper(), logging.INFO)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    log_file: str | Path | None = None,
    log_filter: str | None = None,
) -> None:
    """
    Configure structured logging with custom verbosity levels.

    Args:
        level: Logging level (TRACE, DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output logs in JSON format
        log_file: Optional path to write logs to file
        log_filter: Comma-separated component names to keep (e.g., "graph,orderer")
    """
    log_level = get_log_level(level)

    # stderr keeps stdout free for the rendered route
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(file_path))

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True,
    )
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
    ]

    if log_filter:
        components = [c.strip() for c in log_filter.split(",") if c.strip()]
        processors.append(_component_filter(components))

    processors += [
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _context_processor,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
