"""
Structured logging for Cadence.

Every record emitted through ``ContextLogger`` carries a ``context`` attribute
rendered as ``key=value`` pairs, e.g.::

    2025-06-16 09:00:00 - cadence - INFO - [job_name=weekly-report] - Running routine job

Handlers installed by ``setup_logger`` fill in an empty context for records
that come from plain ``logging`` calls, so the format string never fails.
"""

import logging
from collections.abc import Mapping
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(context)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ContextDefault(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = ""
        return True


def format_context(context: Mapping[str, Any]) -> str:
    """Render context as ``k1=v1, k2=v2`` in insertion order."""
    return ", ".join(f"{key}={value}" for key, value in context.items())


def setup_logger(name: str = "cadence", level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the named logger with one context-aware stream handler.

    Calling this again for the same name only updates the level.

    Args:
        name: Logger name
        level: Logging level, as a number or a name such as ``"DEBUG"``

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if any(isinstance(f, _ContextDefault) for h in logger.handlers for f in h.filters):
        return logger

    handler = logging.StreamHandler()
    handler.addFilter(_ContextDefault())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger


class ContextLogger:
    """
    Thin wrapper around a ``logging.Logger`` that attaches ``key=value`` context.

    Bound context (from the constructor or ``with_context``) comes first;
    per-call keyword arguments are appended and win on a name clash.
    """

    def __init__(self, logger: logging.Logger, context: Mapping[str, Any] | None = None) -> None:
        self.logger = logger
        self.context = dict(context or {})

    def _log(
        self, level: int, message: str, exc_info: bool, extra_context: dict[str, Any]
    ) -> None:
        if not self.logger.isEnabledFor(level):
            return
        self.logger.log(
            level,
            message,
            exc_info=exc_info,
            extra={"context": format_context({**self.context, **extra_context})},
            # Attribute the record to the caller of info()/error(), not to this wrapper
            stacklevel=3,
        )

    def debug(self, message: str, **extra_context: Any) -> None:
        self._log(logging.DEBUG, message, False, extra_context)

    def info(self, message: str, **extra_context: Any) -> None:
        self._log(logging.INFO, message, False, extra_context)

    def warning(self, message: str, **extra_context: Any) -> None:
        self._log(logging.WARNING, message, False, extra_context)

    def error(self, message: str, exc_info: bool = False, **extra_context: Any) -> None:
        self._log(logging.ERROR, message, exc_info, extra_context)

    def with_context(self, **context: Any) -> "ContextLogger":
        """Child logger with extra bound context; this one is left unchanged."""
        return ContextLogger(self.logger, {**self.context, **context})


def get_logger(name: str = "cadence", **context: Any) -> ContextLogger:
    """Return a ContextLogger over ``setup_logger(name)`` with ``context`` bound."""
    return ContextLogger(setup_logger(name), context)
