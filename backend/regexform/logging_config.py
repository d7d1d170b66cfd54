"""Structured logging setup shared by every caller of the validation engine."""

import logging
from typing import Optional

import structlog

from regexform.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog once for the embedding process.

    Debug mode renders human-readable console lines, otherwise one JSON object
    per event. Events below ``LOG_LEVEL`` are dropped before any processor runs.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
