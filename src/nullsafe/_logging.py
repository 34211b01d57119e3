"""Structured logging for nullsafe.

The library never configures logging on import. Applications opt in through
``nullsafe.init()`` or ``configure_logging()``; until then nothing is emitted.

``configure_logging`` routes structlog through the stdlib ``nullsafe`` logger
and attaches one handler to it. The root logger and any handlers the host
application installed are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'HANDLER_NAME',
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
    'logging_configured',
]

LOGGER_NAME = 'nullsafe'
HANDLER_NAME = 'nullsafe'


def _get_structlog_processors() -> list[Any]:
    return [
        # Drops debug events (suppressed_error) before any rendering work.
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def _build_handler(json_output: bool) -> logging.Handler:
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    return handler


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Configure structlog and the ``nullsafe`` stdlib logger.

    Calling this again replaces the handler it installed earlier rather than
    adding a second one.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    structlog.configure(
        processors=_get_structlog_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = logging.getLogger(LOGGER_NAME)
    for handler in [h for h in logger.handlers if h.get_name() == HANDLER_NAME]:
        logger.removeHandler(handler)
    logger.addHandler(_build_handler(json_output))
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Args:
        name: Logger name, usually the calling module's ``__name__``.

    Returns:
        A structlog BoundLogger proxy.
    """
    return structlog.get_logger(name)


def logging_configured() -> bool:
    """True once structlog has been configured, by us or by the host application."""
    return structlog.is_configured()
