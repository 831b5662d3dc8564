from logging.config import dictConfig
import logging

from app.config import settings


class SafeCorrelationIDFormatter(logging.Formatter):
    """
    A formatter that safely handles missing correlation_id attributes.
    """

    def format(self, record):
        if not hasattr(record, 'correlation_id'):
            record.correlation_id = '-'
        return super().format(record)


# Central logging configuration
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "()": SafeCorrelationIDFormatter,
            "format": "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] - %(message)s",
        },
        "simple": {
            "()": SafeCorrelationIDFormatter,
            "format": "%(asctime)s - %(levelname)s - [%(correlation_id)s] - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "level": "DEBUG" if settings.DEBUG else "INFO",
        "handlers": ["console"],
    },
    "loggers": {
        "app": {  # Catch-all logger for all app modules
            "level": "DEBUG" if settings.DEBUG else "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
        "sqlalchemy.engine": {
            "level": "INFO" if settings.DEBUG else "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
        "geopy": {
            "level": "WARNING",
            "handlers": ["console"],
            "propagate": False,
        },
    },
}

def configure_logging():
    """Configure logging for the application."""
    dictConfig(LOGGING_CONFIG)
