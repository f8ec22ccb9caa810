# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Structured logging configuration using structlog.

structlog is layered over the standard library: application loggers are
stdlib loggers wrapped by structlog, and a single stdout handler renders
both those events and plain stdlib records (uvicorn, starlette) with the
same processor chain. Output is JSON or colored console text depending on
``Settings.use_json_logs``.

Example:
    >>> from mxy_ai.utils.logging import setup_logging, get_logger
    >>> setup_logging(settings)
    >>> logger = get_logger(__name__)
    >>> logger.info("Application started", application="mxy-ai-graph-examples")
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from mxy_ai.core.config.settings import Settings

# Third-party loggers kept at WARNING to reduce noise
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "asyncio",
    "urllib3",
)

# Server loggers following the application's level
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _event_processors() -> list[Processor]:
    """Processors applied to every event, structlog or stdlib."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _renderer(settings: "Settings") -> list[Processor]:
    if settings.use_json_logs:
        return [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())]


def setup_logging(settings: "Settings") -> logging.Handler:
    """Configure structured logging for the application.

    Installs one stdout handler on the root logger, replacing any existing
    handlers, and points structlog at the standard library.

    Args:
        settings: Application settings containing log_level and log_format.

    Returns:
        The installed root handler.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_event_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderer(settings),
        ],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    logging.basicConfig(handlers=[handler], level=log_level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_event_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
    for logger_name in (*SERVER_LOGGERS, "mxy_ai"):
        logging.getLogger(logger_name).setLevel(log_level)

    return handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given module name.

    Args:
        name: Usually __name__ of the calling module.

    Returns:
        A bound structlog logger instance.
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind values to every log event of the current request or task.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop everything bound with bind_context."""
    structlog.contextvars.clear_contextvars()
