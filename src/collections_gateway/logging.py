"""
Centralized logging configuration using structlog
"""

import base64
import logging
import re
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# Client-supplied request ids are logged and echoed, so keep them short and URL-safe
_CLIENT_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9_-]{1,64}")


def add_request_id(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor that tags events with the current request id."""
    request_id = request_id_ctx.get()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def _resolve_level(debug: bool, log_level: str | None) -> int:
    if not log_level:
        return logging.DEBUG if debug else logging.INFO
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(debug: bool = False, log_level: str | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        debug: Render human-readable console output instead of JSON lines.
        log_level: Level name; defaults to DEBUG when debugging, INFO otherwise.
    """
    logging.basicConfig(
        level=_resolve_level(debug, log_level),
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.dev.ConsoleRenderer(colors=True)
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_id,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger, typically with ``__name__``."""
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Microsecond timestamp plus two random bytes, as 14 URL-safe base64 chars."""
    payload = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(payload).decode("ascii").rstrip("=")


def set_request_context(client_request_id: str | None = None) -> str:
    """Bind a request id for the current request and return it.

    A client-supplied id is kept only if it is 1-64 URL-safe characters;
    otherwise a fresh id is generated.
    """
    if client_request_id and _CLIENT_REQUEST_ID_RE.fullmatch(client_request_id):
        request_id = client_request_id
    else:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
