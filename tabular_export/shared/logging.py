"""
Tabular Export - Structured Logging Module

Structured logging through structlog. Importing the engine configures
nothing: applications embedding it keep their own logging setup, and the
command-line entry point calls setup_logging() itself.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.types import Processor

from tabular_export.shared.config import settings

PACKAGE_LOGGER = "tabular_export"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr


def _renderer(json_output: bool) -> list[Processor]:
    if json_output:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=True)]


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Route the engine's structured logs to a stream.

    Only the "tabular_export" logger hierarchy is touched; the root logger
    and its handlers are left alone. Calling this again replaces the handler
    installed by the previous call.

    Args:
        level: Log level name (default: settings.app.log_level)
        json_output: Render JSON lines (default: in production)
        stream: Destination (default: stderr, keeping stdout for CLI output)

    Returns:
        The configured package logger
    """
    if level is None:
        level = settings.app.log_level
    if json_output is None:
        json_output = settings.app.is_production

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_tabular_export", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._tabular_export = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False
    return package_logger


def get_logger(name: str | None = None, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with optional initial context.

    Args:
        name: Logger name (usually __name__)
        **initial_context: Key-value pairs to bind to the logger

    Example:
        >>> logger = get_logger(__name__, format="delimited")
        >>> logger.info("Encoding rows", rows=120)
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


class LoggerMixin:
    """Gives a class a `logger` named after its module and class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        if not hasattr(self, "_logger"):
            cls = type(self)
            self._logger = get_logger(f"{cls.__module__}.{cls.__qualname__}")
        return self._logger
