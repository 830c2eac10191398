"""Structured logging for the catalog service.

Usage:
    import logging

    logger = logging.getLogger(__name__)
    logger.info("Movie created", extra={"movie_id": movie.id})

Call ``setup_logging()`` once at startup. Per-request fields such as
``request_id`` are attached with ``set_log_context`` and appear on every
record emitted while handling that request.
"""

from movie_catalog.infra.logging.config import configure_logging, setup_logging, shutdown
from movie_catalog.infra.logging.context import (
    ContextInjectingFilter,
    clear_log_context,
    get_log_context,
    set_log_context,
)
from movie_catalog.infra.logging.formatters import JSONFormatter
from movie_catalog.infra.logging.lazy import LazyLoggerAdapter, get_lazy_logger

__all__ = [
    "ContextInjectingFilter",
    "JSONFormatter",
    "LazyLoggerAdapter",
    "clear_log_context",
    "configure_logging",
    "get_lazy_logger",
    "get_log_context",
    "set_log_context",
    "setup_logging",
    "shutdown",
]
