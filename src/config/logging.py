"""Structured logging setup.

Console rendering in dev, JSON everywhere else. The stdlib root logger is
set to the same level so engine modules' ``logging.getLogger`` output
follows ``LOG_LEVEL`` too.

Call ``configure_logging`` once at startup. ``CalculatorService`` calls it
itself when structlog has not been configured yet.
"""

import logging

import structlog

from src.config.settings import Environment, Settings

_LOG_NAME_TO_LEVEL: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root level from settings."""
    level = _LOG_NAME_TO_LEVEL[settings.LOG_LEVEL.value]

    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.ENVIRONMENT == Environment.DEV
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
