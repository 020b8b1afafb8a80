"""Structured JSON logging configuration for Cloud Run.

Configures Python stdlib logging to emit JSON with GCP-compatible field names.
Cloud Run auto-extracts `severity`, `message`, and other fields from JSON on stdout.

Usage:
    from faq_bot.logging_config import configure_logging
    configure_logging("INFO")
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "faq-bot",
            },
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str = "INFO") -> None:
    """Apply structured JSON logging configuration.

    Call once at application startup (in the FastAPI lifespan). The root
    level comes from ``Settings.log_level``; unknown names fall back to INFO.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    level = level.upper()
    config["root"]["level"] = level if level in logging.getLevelNamesMapping() else "INFO"
    logging.config.dictConfig(config)
