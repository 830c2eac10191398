"""Logging configuration setup.

Uses dictConfig for the root logger and a QueueHandler + QueueListener
pair so handlers doing I/O never block the event loop. All handlers sit
behind the listener; application loggers propagate to root.
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING

from movie_catalog.infra.logging.context import ContextInjectingFilter
from movie_catalog.infra.logging.formatters import JSONFormatter

if TYPE_CHECKING:
    from movie_catalog.core.settings.logging_ import LoggingSettings

logger = logging.getLogger(__name__)

_TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_listener: QueueListener | None = None
_LOGGING_INITIALIZED = False


def shutdown() -> None:
    """Stop the queue listener, flushing pending records."""
    global _listener

    if _listener is not None:
        _listener.stop()
        _listener = None


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    service_name: str = "movie-catalog",
    force: bool = False,
) -> None:
    """Configure logging once across entrypoints.

    Args:
        log_settings: Settings to apply. Loaded from the environment if omitted.
        service_name: Static ``service`` field added to JSON records.
        force: Reconfigure even if logging was already initialized.
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from movie_catalog.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    configure_logging(
        log_level=log_settings.level,
        json_logs=log_settings.json_logs,
        console_enabled=log_settings.console_enabled,
        file_path=log_settings.log_file,
        file_max_bytes=log_settings.max_bytes,
        file_backup_count=log_settings.backup_count,
        include_uvicorn=log_settings.include_uvicorn,
        service_name=service_name,
    )
    _LOGGING_INITIALIZED = True


def configure_logging(
    log_level: str = "INFO",
    *,
    json_logs: bool = True,
    console_enabled: bool = True,
    file_path: str | Path | None = None,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    include_uvicorn: bool = True,
    service_name: str = "movie-catalog",
) -> None:
    """Apply a root logging configuration.

    Example:
        configure_logging(log_level="DEBUG", json_logs=False)
    """
    global _listener

    shutdown()
    logging.captureWarnings(True)

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "root": {"level": log_level.upper(), "handlers": []},
        }
    )

    handlers = _build_handlers(
        json_logs=json_logs,
        console_enabled=console_enabled,
        file_path=Path(file_path) if file_path else None,
        file_max_bytes=file_max_bytes,
        file_backup_count=file_backup_count,
        service_name=service_name,
    )

    root = logging.getLogger()
    if handlers:
        log_queue: Queue[logging.LogRecord] = Queue()
        _listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
        _listener.start()
        atexit.register(shutdown)
        queue_handler = QueueHandler(log_queue)
        # Logger filters skip propagated records; handler filters do not
        queue_handler.addFilter(ContextInjectingFilter())
        root.addHandler(queue_handler)

    if include_uvicorn:
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            uvicorn_logger = logging.getLogger(name)
            uvicorn_logger.handlers.clear()
            uvicorn_logger.propagate = True

    logger.debug("Logging configured", extra={"json_logs": json_logs, "level": log_level})


def _build_handlers(
    *,
    json_logs: bool,
    console_enabled: bool,
    file_path: Path | None,
    file_max_bytes: int,
    file_backup_count: int,
    service_name: str,
) -> list[logging.Handler]:
    def formatter() -> logging.Formatter:
        if json_logs:
            return JSONFormatter(static={"service": service_name})
        return logging.Formatter(fmt=_TEXT_FORMAT, datefmt=_DATE_FORMAT)

    handlers: list[logging.Handler] = []

    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter())
        handlers.append(console_handler)

    if file_path:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=file_max_bytes,
            backupCount=file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter())
        handlers.append(file_handler)

    return handlers


__all__ = ["configure_logging", "setup_logging", "shutdown"]
