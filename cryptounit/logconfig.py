"""structlog setup for command-line entry points.

The library itself only calls structlog.get_logger(); configuration is left
to the application. Scripts and the CLI call configure_logging() once.
"""

import logging
import os

import structlog

LOG_LEVEL_ENV = "CRYPTOUNIT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(verbose: bool = False) -> int:
    """Pick the log level: DEBUG if verbose, else CRYPTOUNIT_LOG_LEVEL.

    Unknown level names fall back to WARNING.
    """
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(verbose)),
    )
