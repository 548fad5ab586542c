"""Logging configuration for the service."""
# Standard library imports
import logging.config
from typing import Any, Dict

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "INFO", log_format: str = "json") -> None:
    """
    Initialize logging configuration for the whole process.
    
    Structured fields passed through ``extra=`` are rendered as JSON keys
    when ``log_format`` is ``"json"``; the text format prints the message only.
    
    Args:
        level: Root log level name (e.g. "INFO", "DEBUG")
        log_format: "json" or "text"
    """
    formatter = "json" if log_format == "json" else "default"
    log_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": _TEXT_FORMAT,
            },
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": _JSON_FORMAT,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": formatter,
            },
        },
        "root": {"level": level, "handlers": ["console"]},
    }

    # Sets logging configuration across modules
    logging.config.dictConfig(log_config)
