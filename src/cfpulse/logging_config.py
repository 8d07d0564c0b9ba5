"""Process-wide logging for the CF Pulse server and CLI.

Records go to a rotating ``cfpulse.log`` under ``LOG_DIR`` and to a rich
console on stderr. Stdout is never used: it carries the MCP stdio transport
and the JSON printed by ``cfpulse call``.
"""

import logging
import logging.config
import os
import sys
from typing import Any, Dict, Tuple

from dotenv import load_dotenv
from rich.console import Console

load_dotenv()

LOG_FILE_NAME = "cfpulse.log"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Chatty third-party loggers and the lowest level they are allowed to emit at
QUIET_LOGGERS = {
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
}


def resolve_level(raw: str) -> Tuple[int, bool]:
    """Map a LOG_LEVEL value to a logging level.

    Returns the level and whether ``raw`` was recognised; unknown values
    resolve to INFO.
    """
    name = (raw or "").strip().upper()
    if name in LOG_LEVELS:
        return logging.getLevelName(name), True
    return logging.INFO, False


def build_logging_config(log_dir: str, level: int) -> Dict[str, Any]:
    """dictConfig schema for the file and console handlers."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": "%(message)s"},
            "file": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": os.path.join(log_dir, LOG_FILE_NAME),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "formatter": "file",
                "level": level,
            },
            "console": {
                "class": "rich.logging.RichHandler",
                "console": Console(file=sys.stderr),
                "rich_tracebacks": True,
                "show_path": False,
                "formatter": "console",
                "level": level,
            },
        },
        "loggers": {
            name: {"level": max(level, floor)} for name, floor in QUIET_LOGGERS.items()
        },
        "root": {"level": level, "handlers": ["file", "console"]},
    }


def setup_logging():
    """Configure logging from LOG_DIR (default ``logs``) and LOG_LEVEL (default INFO)."""
    log_dir = os.getenv("LOG_DIR", "logs")
    raw_level = os.getenv("LOG_LEVEL", "INFO")
    level, recognised = resolve_level(raw_level)

    if not recognised:
        print(
            f"Warning: Invalid LOG_LEVEL '{raw_level}'. "
            f"Valid values: {', '.join(LOG_LEVELS)}. Using INFO.",
            file=sys.stderr,
        )

    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, level))
    logging.getLogger(__name__).debug(
        f"Logging to {os.path.join(log_dir, LOG_FILE_NAME)} at {logging.getLevelName(level)}"
    )
