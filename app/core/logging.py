import logging.config
from typing import Any, Dict

def logging_config(level: str = "INFO") -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "std": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "formatter": "std"},
        },
        "loggers": {
            "app": {"handlers": ["console"], "level": level.upper(), "propagate": False},
        },
    }

def configure_logging(level: str = "INFO") -> None:
    """Install the console handler for everything under the ``app`` logger."""
    logging.config.dictConfig(logging_config(level))
