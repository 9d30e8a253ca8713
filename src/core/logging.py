"""Structured logging configuration using structlog.

Development runs get coloured console output, production runs emit one JSON
object per line. Standard library loggers (uvicorn, fastapi) are routed
through the same handler so every line has the same shape.

Usage:
    from src.core.logging import configure_logging, get_logger, log_context

    configure_logging()  # reads ENVIRONMENT and LOG_LEVEL

    logger = get_logger(__name__)
    with log_context(request_path="/pages/cwe-327"):
        logger.info("page_resolved", kind="cwe")
"""

import logging
import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from os import getenv
from typing import Any, cast

import structlog
from structlog.types import Processor

# Loggers that are only interesting when something goes wrong
QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def _is_development() -> bool:
    return getenv("ENVIRONMENT", "development").lower() != "production"


def configure_logging(
    development: bool | None = None,
    log_level: str | None = None,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure structured logging for the application.

    Args:
        development: Pretty console output if True, JSON if False. Defaults to
            the ENVIRONMENT env var (anything but "production" is development).
        log_level: DEBUG, INFO, WARNING or ERROR. Defaults to the LOG_LEVEL
            env var, then INFO.
        quiet_loggers: Standard library loggers capped at WARNING.
    """
    if development is None:
        development = _is_development()
    level_name = (log_level or getenv("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if development:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=True,
    )
    logging.getLogger().setLevel(level)
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically with ``__name__``."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def bind_contextvars(**kwargs: Any) -> None:
    """Bind values that are added to every log line in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_contextvars() -> None:
    structlog.contextvars.clear_contextvars()


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind context values for the duration of a ``with`` block.

    Values bound by the block are removed again on exit, even when the body
    raises; values bound outside the block are left alone.
    """
    structlog.contextvars.bind_contextvars(**kwargs)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*kwargs)
