"""Structured logging for ferrum's boundary layers.

Only `init()` and the @safe / @result decorators log, and the decorators do
so through plain stdlib loggers under the ``ferrum`` namespace, so nothing is
emitted until an application opts in. `configure_logging` attaches a single
structlog-rendered handler to the ``ferrum`` logger; the root logger and the
host application's handlers are left untouched.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = ['LOGGER_NAME', 'configure_logging', 'get_logger']

LOGGER_NAME = 'ferrum'


def _pre_chain() -> list[Any]:
    """Processors applied to every record, structlog or stdlib."""
    import structlog

    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _formatter(json_output: bool) -> logging.Formatter:
    import structlog

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_pre_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> logging.Logger:
    """Route ferrum's records through structlog at the given level.

    Calling this again replaces the previous handler, so repeated `init()`
    calls never duplicate output.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...).
        json_output: Render JSON lines if True, console output otherwise.

    Returns:
        The configured ``ferrum`` stdlib logger.
    """
    import structlog

    structlog.configure(
        processors=[
            *_pre_chain(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(json_output))

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> Any:
    """Return a structlog BoundLogger; name should sit under ``ferrum``."""
    import structlog

    return structlog.get_logger(name or LOGGER_NAME)
