"""Logging utilities for appatlas.

This module provides centralised logging configuration and helpers for
structured, contextual logging throughout the project. Log output always goes
to stderr so that rendered reports on stdout stay machine-readable.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator


# ---------------------------------------------------------------------------
# Context variables for structured logging
# ---------------------------------------------------------------------------

_log_context: ContextVar[dict[str, Any]] = ContextVar(
    "log_context", default={})

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ContextualFormatter(logging.Formatter):
    """Formatter that appends context fields to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = getattr(record, "context", None) or _log_context.get()
        if ctx:
            ctx_str = " ".join(f"{k}={v}" for k, v in ctx.items())
            record.msg = f"{record.msg} [{ctx_str}]"
        return super().format(record)


class _ContextFilter(logging.Filter):
    """Capture the context at emit time.

    Records logged from worker threads carry the context of the thread that
    created them, so it is copied onto the record before formatting.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = dict(_log_context.get())
        return True


@contextmanager
def log_context(**fields: Any) -> Iterator[None]:
    """Temporarily add context fields to all log messages.

    Usage::

        with log_context(app="my-app"):
            logger.info("Describing application")  # message includes context

    Fields are merged with any existing context and restored on exit.
    ``asyncio.to_thread`` copies the current context, so fields set around a
    fan-out are visible inside the worker threads too.
    """
    current = _log_context.get()
    merged = {**current, **fields}
    token = _log_context.set(merged)
    try:
        yield
    finally:
        _log_context.reset(token)


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

_configured = False
_fallback_loggers: set[str] = set()


def configure_logging(
    level: int = logging.INFO,
    third_party_level: int = logging.WARNING,
) -> None:
    """Configure application-wide logging.

    Call this once at startup (CLI entry point) to set up consistent logging
    across the application.

    Args:
        level: Log level for application loggers (default INFO).
        third_party_level: Log level for third-party libraries (default WARNING).
    """
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger()
    root.setLevel(level)

    # Remove any existing handlers to avoid duplicates
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    # Drop the per-logger fallbacks installed before configuration
    for name in _fallback_loggers:
        fallback = logging.getLogger(name)
        for handler in fallback.handlers[:]:
            fallback.removeHandler(handler)
        fallback.setLevel(logging.NOTSET)
    _fallback_loggers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.addFilter(_ContextFilter())
    handler.setFormatter(ContextualFormatter(_DEFAULT_FORMAT))
    root.addHandler(handler)

    # Quieten noisy third-party loggers
    for name in ("urllib3", "requests", "asyncio"):
        logging.getLogger(name).setLevel(third_party_level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given name.

    If configure_logging() has not been called, a basic fallback configuration
    is applied to ensure warnings and errors are still visible.

    Args:
        name: Name of the logger (typically __name__).

    Returns:
        A logging.Logger instance.
    """
    logger = logging.getLogger(name)
    # Fallback if configure_logging was not called
    if not _configured and not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.addFilter(_ContextFilter())
        handler.setFormatter(ContextualFormatter(_DEFAULT_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _fallback_loggers.add(name)
    return logger


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------


def log_exception(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log an exception with context fields at DEBUG level, traceback included.

    Args:
        logger: Logger instance.
        message: Human-readable message describing the error.
        exc: The exception that was raised.
        **context: Additional context fields to include.
    """
    with log_context(**context):
        logger.debug(f"{message}: {exc}", exc_info=exc)
