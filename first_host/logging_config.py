"""
Process-wide logging setup.

Call setup_logging() once at startup, then use:
    logger = logging.getLogger(__name__)

Environment variables:
    LOG_LEVEL=DEBUG|INFO|WARNING|ERROR|CRITICAL (default INFO)
"""

import logging
import logging.config

from .config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger with a single stdout handler."""
    if level is None:
        level = get_log_level()

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {"level": level, "handlers": ["stdout"]},
        }
    )
