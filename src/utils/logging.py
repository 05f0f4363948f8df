"""Structured logging setup using structlog.

Dual renderer: the same processor chain (context vars, level, timestamp,
exception info) ends in a coloured console renderer while developing and
in a JSON renderer in production, so log shippers get one event per line.

Standard-library ``logging`` is bridged through the same formatter so that
uvicorn and httpx output is rendered identically.  Their chattiest loggers
are raised to WARNING because every filter request would otherwise log an
access line and an httpx line on top of our own ``venues_filtered`` event.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog

_NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def configure_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    app_env: str | None = None,
    stream: TextIO | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib bridge.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR).
        json_output: Force the JSON renderer.
        app_env: Deployment environment; falls back to ``APP_ENV``.
            ``"production"`` selects JSON.
        stream: Where log lines go; stdout by default.  The CLI passes
            stderr so its JSON output stays clean.

    Returns:
        The root structlog logger.
    """
    env = app_env or os.environ.get("APP_ENV", "development")
    use_json = json_output or env == "production"
    level = logging.getLevelName(log_level.upper())
    out = stream or sys.stdout

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    renderer: structlog.types.Processor
    if use_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=out),
        # Uncached so a later configure_logging() call (the CLI redirecting
        # to stderr) reaches module-level loggers too.
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound to *name*.

    Configures logging with defaults on first use so modules can log at
    import time in tests and scripts.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
