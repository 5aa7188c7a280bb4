"""
Logging configuration.

Configures the standard library ``logging`` tree once at startup.  Modules
log through ``logging.getLogger(__name__)``.
"""

import logging.config

from app.core.config import settings

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "app": {"handlers": ["console"], "level": settings.LOG_LEVEL, "propagate": False},
        "sqlalchemy.engine": {"level": "INFO" if settings.DEBUG else "WARNING"},
    },
}


def setup_logging() -> None:
    """Apply :data:`LOGGING_CONFIG`."""
    logging.config.dictConfig(LOGGING_CONFIG)
