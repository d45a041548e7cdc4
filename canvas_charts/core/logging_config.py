"""Logging setup for canvas_charts.

Chart code only ever calls ``get_logger(__name__)``; the CLI calls
``setup_logging`` once, which sends human-readable (or JSON) records to
stderr and always keeps a rotating JSON log of render activity.
"""

import logging
import logging.config
import os
from typing import Any

PACKAGE_LOGGER = "canvas_charts"
LOG_FILE_NAME = "canvas_charts.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logging_config(
    json_output: bool = False, log_level: str = "INFO", log_dir: str = "logs"
) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for the given CLI options."""
    level = (log_level or "INFO").upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": "pythonjsonlogger.json.JsonFormatter",
                "format": JSON_FORMAT,
                "datefmt": "%Y-%m-%dT%H:%M:%S%z",
            },
            "console": {"format": CONSOLE_FORMAT, "datefmt": "%H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if json_output else "console",
                "stream": "ext://sys.stderr",
            },
            "render_log": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "json",
                "filename": os.path.join(log_dir, LOG_FILE_NAME),
                "maxBytes": LOG_FILE_MAX_BYTES,
                "backupCount": LOG_FILE_BACKUPS,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {
                "level": level,
                "handlers": ["console", "render_log"],
                "propagate": False,
            },
            # font discovery chatter from the raster surface
            "matplotlib": {"level": "WARNING"},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logging(
    json_output: bool = False, log_level: str = "INFO", log_dir: str = "logs"
) -> None:
    """Configure logging for the CLI.

    Args:
        json_output: Emit console records as JSON instead of plain lines
        log_level: Level for the package logger and console handler
        log_dir: Directory for the rotating JSON render log
    """
    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(json_output, log_level, log_dir))


def get_logger(name: str) -> logging.Logger:
    """Return the module logger; pass ``__name__`` so records nest under canvas_charts."""
    return logging.getLogger(name)
