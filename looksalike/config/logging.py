"""Structured logging for the command line tool."""

import logging
import sys
from typing import TextIO

import structlog

# Log records of the library all live under this stdlib logger.
PACKAGE_LOGGER = "looksalike"


def _pick_renderer(stream: TextIO, json_output: bool) -> structlog.types.Processor:
    if json_output or not stream.isatty():
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    log_level: str = "INFO",
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route the library's structlog events to ``stream`` (stderr by default).

    Only the ``looksalike`` logger gets a handler, so stdout stays free for
    the comparison verdict and the root logger of an embedding program is
    left alone. The library itself never calls this.
    """
    stream = stream or sys.stderr
    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _pick_renderer(stream, json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [handler]
    package_logger.setLevel(level)
    package_logger.propagate = False
