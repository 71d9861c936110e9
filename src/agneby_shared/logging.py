"""
logging.py — structlog configuration for the back office.

Every event is a snake_case name plus key-value context, rendered as JSON
(production) or for the console (local work) per settings.log_format.
Call configure_logging() once at process startup; the application factory
and the CLI both do.

Usage:
    from agneby_shared.logging import configure_logging

    configure_logging()
    log = structlog.get_logger(__name__).bind(collection="pharmacies")
    log.info("document_created", id="...")
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Final

import structlog
from structlog.typing import EventDict

from agneby_shared.config import settings

SERVICE_NAME: Final[str] = "agneby-admin"

# Stdlib loggers of the Supabase client stack; they log every HTTP request at INFO.
CHATTY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore", "hpack", "postgrest", "gotrue")


def add_service(_logger: Any, _method: str, event_dict: EventDict) -> EventDict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging(
    log_level: str | None = None,
    log_format: str | None = None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Idempotent. The Supabase HTTP stack is held at WARNING unless the
    process itself runs at DEBUG.

    Args:
        log_level:  Override settings.log_level ("DEBUG", "INFO", …).
        log_format: Override settings.log_format ("json" | "console").
    """
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)
    fmt = log_format or settings.log_format

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    chatty_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)

    if fmt == "json":
        renderer: Any = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            add_service,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
