"""
EdgeWorkers Logging

Opt-in structlog setup for scripts using the client. Library modules only
call structlog.get_logger() and never configure logging themselves.
"""

import logging
from typing import Any

import structlog

from .config import get_settings

_REDACT_KEYS = frozenset({"client_secret", "client_token", "access_token", "authorization"})
_REDACTED = "[REDACTED]"


def redact_credentials(logger: Any, method: str, event_dict: dict) -> dict:
    """Mask EdgeGrid credentials in log records"""
    for key in list(event_dict):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


def configure_logging(level: str | None = None, json: bool = False) -> None:
    """
    Configure structlog for console or JSON output

    Args:
        level: Log level name, defaults to Settings.log_level
        json: Render JSON lines instead of the console format
    """
    level_name = (level or get_settings().log_level).upper()
    renderer: Any = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            redact_credentials,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level_name, logging.INFO)),
        cache_logger_on_first_use=False,
    )
