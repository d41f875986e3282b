"""logroll — Structured logging configuration.

Uses structlog for structured, levelled logging with consistent key names
across the package.  All log entries include:
    - timestamp (ISO-8601)
    - level
    - module (Python logger name)
    - appender / log_path (set by RollingPolicy while it evaluates a file)

Debug records from the per-write hot path are dropped by level before any
rendering work happens.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator

import structlog
from structlog.types import EventDict, WrappedLogger

# Context variables — automatically injected into log records when set.
_ctx_appender: ContextVar[str | None] = ContextVar("appender", default=None)
_ctx_log_path: ContextVar[str | None] = ContextVar("log_path", default=None)


@contextmanager
def log_context(
    appender: str | None = None,
    log_path: str | None = None,
) -> Iterator[None]:
    """Tag every record emitted inside the block with the active appender.

    Previous values are restored on exit, so nested blocks and concurrent
    writers on other threads never see each other's context.
    """
    appender_token = _ctx_appender.set(appender)
    path_token = _ctx_log_path.set(log_path)
    try:
        yield
    finally:
        _ctx_log_path.reset(path_token)
        _ctx_appender.reset(appender_token)


# ---------------------------------------------------------------------------
# Custom processors
# ---------------------------------------------------------------------------


def _inject_context_vars(
    _logger: WrappedLogger, _method: str, event_dict: EventDict
) -> EventDict:
    """Add ContextVar values to every log record."""
    if (appender := _ctx_appender.get()) is not None:
        event_dict["appender"] = appender
    if (log_path := _ctx_log_path.get()) is not None:
        event_dict["log_path"] = log_path
    return event_dict


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def configure_logging(
    level: str = "info",
    format: str = "console",
    log_file: str | None = None,
) -> None:
    """Configure structlog and stdlib logging.

    Call once at application startup, before any log statements.

    Args:
        level:    One of debug, info, warning, error, critical.
        format:   ``"console"`` for human-readable output, ``"json"`` for
                  machine-readable structured logs.
        log_file: Optional path to write logs to in addition to stdout.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        _inject_context_vars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers: list[logging.Handler] = []

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(level.upper())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger for *name*.

    Usage::

        log = get_logger(__name__)
        log.info("log_rolled", path="/var/log/app.log", trigger="compound")
    """
    return structlog.get_logger(name)
