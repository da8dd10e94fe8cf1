"""Logging for the cleanurl package.

Module loggers are structlog wrappers around stdlib loggers under
``cleanurl``, so whatever the host application configures for that logger
decides what is emitted. Until then a NullHandler keeps the package silent.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from cleanurl.config import settings

PACKAGE_LOGGER = "cleanurl"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that emits through ``logging.getLogger(name)``.

    Events below the stdlib logger's effective level are dropped before any
    processing; the rest become plain records whose message is the event name
    and whose ``extra`` holds the bound key/values.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    environment: str | None = None,
    log_level: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Attach a structlog-rendering handler to the ``cleanurl`` logger.

    For applications that do not route the package's records themselves. The
    root logger and the global structlog configuration are left alone.

    Args:
        environment: ``"production"`` renders JSON lines; anything else a
                     console format. Defaults to ``settings.environment``.
        log_level:   Standard level name. Defaults to ``settings.log_level``.
        stream:      Where to write; stderr by default.

    Returns:
        The installed handler.
    """
    environment = environment or settings.environment
    level = getattr(logging, (log_level or settings.log_level).upper(), logging.INFO)

    if environment == "production":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.ExtraAdder(),
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler
