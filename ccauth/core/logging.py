"""structlog configuration for ccauth.

Loggers wrap standard library loggers under the ``ccauth`` namespace, so
library calls stay silent until the host application or ``setup_logging``
attaches a handler.
"""

import logging
from typing import Any

import structlog


__all__ = ["setup_logging", "get_logger", "PACKAGE_LOGGER_NAME"]


PACKAGE_LOGGER_NAME = "ccauth"


def setup_logging(json_logs: bool = False, log_level_name: str = "INFO") -> None:
    """Configure structlog and the ``ccauth`` logger to render to stderr.

    Args:
        json_logs: Render events as JSON lines instead of console output
        log_level_name: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level = getattr(logging, log_level_name.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by a standard library logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Bound structlog logger
    """
    return structlog.wrap_logger(  # type: ignore[no-any-return]
        logging.getLogger(name or PACKAGE_LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
