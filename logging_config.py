"""
Logging setup for the task API and the uvicorn server it runs under

Both `python main.py` and `uvicorn main:create_app --factory` go through
create_app, which calls configure_logging once.
"""

import logging
import logging.config
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class HealthCheckFilter(logging.Filter):
    """Drop health check lines from the uvicorn access log."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name != "uvicorn.access":
            return True
        message = record.getMessage()
        return not ("GET" in message and "/health" in message)


def _server_logger(handler: str, level: str) -> Dict[str, Any]:
    return {"handlers": [handler], "level": level, "propagate": False}


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """dictConfig mapping: app loggers go to root, uvicorn keeps its own handlers"""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "health_check_filter": {"()": HealthCheckFilter},
        },
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "access": {"format": "%(message)s"},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "access": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
                "filters": ["health_check_filter"],
            },
        },
        "loggers": {
            "uvicorn": _server_logger("default", level),
            "uvicorn.error": _server_logger("default", level),
            "uvicorn.access": _server_logger("access", level),
        },
        "root": {"level": level, "handlers": ["default"]},
    }


def configure_logging(level: str = "INFO"):
    """Apply the logging config for the given level"""
    logging.config.dictConfig(get_logging_config(level.upper()))
