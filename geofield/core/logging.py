"""Logging configuration module."""

from logging import CRITICAL, DEBUG, ERROR, INFO, WARNING, Logger, StreamHandler, getLogger
from typing import Any, cast

import structlog
from structlog import dev, stdlib
from structlog.processors import JSONRenderer, KeyValueRenderer, TimeStamper, dict_tracebacks
from structlog.stdlib import BoundLogger

# Names accepted by LOG_LEVEL, lower-cased
LOG_LEVELS: dict[str, int] = {
    "debug": DEBUG,
    "info": INFO,
    "warning": WARNING,
    "error": ERROR,
    "critical": CRITICAL,
}


def configure_logging(testing: bool = False, level: str | None = None) -> None:
    """Configure structured logging for geofield.

    geofield events go through structlog; records from geopy and urllib3 go
    through the same handler so provider HTTP failures show up alongside them.

    Args:
        testing: Render human readable lines instead of JSON
        level: Optional log level name, defaults to INFO
    """
    log_level = LOG_LEVELS.get((level or "info").lower(), INFO)

    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
        dict_tracebacks,
    ]

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            KeyValueRenderer() if testing else JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = StreamHandler()
    handler.setLevel(log_level)
    handler.setFormatter(
        stdlib.ProcessorFormatter(
            processor=dev.ConsoleRenderer() if testing else JSONRenderer(),
            foreign_pre_chain=shared_processors,
        )
    )

    # Replace handlers so repeated configuration does not duplicate output
    for logger in (getLogger(), getLogger("geofield")):
        logger.setLevel(log_level)
        logger.handlers = [handler]

    package_logger: Logger = getLogger("geofield")
    package_logger.propagate = False


def get_logger(**context: Any) -> BoundLogger:
    """Get a configured logger instance.

    Args:
        **context: Optional key/value pairs to bind to every entry

    Returns:
        A structured logger instance.
    """
    return cast(BoundLogger, structlog.get_logger(**context))
