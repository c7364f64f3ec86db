"""
Logging configuration for the xeimport CLI.

Log records go to stderr so that outcome records on stdout stay parseable.
"""

import logging
import logging.config
from typing import Any, Dict


class ConnectorNoiseFilter(logging.Filter):
    """Drop DEBUG chatter from third-party connector loggers."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("xeimport"):
            return True
        return record.levelno > logging.DEBUG


def get_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Get logging configuration for the given level."""
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "connector_noise_filter": {
                "()": ConnectorNoiseFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
                "filters": ["connector_noise_filter"]
            }
        },
        "loggers": {
            "xeimport": {
                "level": level
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig(get_logging_config(level))
