"""structlog setup. Request-scoped context (request id, page, per) rides on contextvars."""

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from pagekit.core.pagination import PageRequest


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Console output in debug, one JSON object per line otherwise. `level` overrides the debug default."""
    log_level = logging.getLevelName(level.upper()) if level else (logging.DEBUG if debug else logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    if debug:
        renderers = [structlog.dev.ConsoleRenderer()]
    else:
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            *renderers,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    structlog.contextvars.bind_contextvars(request_id=request_id)


def bind_page_request(page_request: "PageRequest") -> None:
    """Tag every later log line of this request with the page being served."""
    structlog.contextvars.bind_contextvars(page=page_request.number, per=page_request.size)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
