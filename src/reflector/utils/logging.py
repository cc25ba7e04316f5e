"""Structured logging for Cluster Reflector.

structlog renders the application's own events. The Azure SDK logs through the
standard library, so the root logger gets a single handler on the same stream
and the ``azure`` logger is held at WARNING or above.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

HANDLER_NAME = "reflector"
SDK_LOGGER = "azure"

_SHARED_PROCESSORS = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _renderers(format: str) -> list[Any]:
    if format == "json":
        return [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer()]


def _configure_stdlib(level: int, stream: TextIO) -> None:
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger(SDK_LOGGER).setLevel(max(level, logging.WARNING))


def setup_logging(level: str = "INFO", format: str = "json", output: str = "stderr") -> None:
    """Configure structured logging.

    Safe to call more than once: the handler installed by a previous call is
    replaced and handlers installed by anything else are left alone.

    Args:
        level: Log level name, case-insensitive (unknown names mean INFO)
        format: Log format (json or console)
        output: Output destination (stdout or stderr)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    stream = sys.stdout if output == "stdout" else sys.stderr

    _configure_stdlib(log_level, stream)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, *_renderers(format)],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def log_error(
    logger: structlog.BoundLogger,
    error: Exception,
    operation: str | None = None,
    **kwargs: Any,
) -> None:
    """Log a failure summary as a single ``error_occurred`` event.

    Only the error type and message are logged, never a traceback.

    Args:
        logger: Logger instance
        error: Exception instance
        operation: Operation name (optional)
        **kwargs: Additional context fields
    """
    context = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        **kwargs,
    }

    if operation:
        context["operation"] = operation

    logger.error("error_occurred", **context)
