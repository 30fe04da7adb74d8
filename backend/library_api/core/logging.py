import copy
import logging
from logging.config import dictConfig

LOGGER_NAMESPACE = "library_api"

# Application records go through the "library_api" logger; uvicorn keeps its
# own access log and SQLAlchemy stays at WARNING unless echo is on.
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "library": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "library_console": {
            "class": "logging.StreamHandler",
            "formatter": "library",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        LOGGER_NAMESPACE: {
            "handlers": ["library_console"],
            "level": "INFO",
            "propagate": True,
        },
        "sqlalchemy.engine": {"level": "WARNING"},
        "uvicorn.error": {"level": "INFO"},
    },
}


def build_logging_config(level: str = "INFO") -> dict:
    """Return a copy of ``LOGGING_CONFIG`` with the library loggers at ``level``."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"][LOGGER_NAMESPACE]["level"] = level.upper()
    return config


def setup_logging(level: str = "INFO") -> None:
    dictConfig(build_logging_config(level))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
