"""Logging setup for the debt tracker API server.

Writes to stdout and to a log file. The level comes from LOG_LEVEL
(default INFO); unknown names fall back to INFO.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from debt_tracker.config import get_settings

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level_name: Optional[str] = None) -> int:
    """Translate a level name into a logging constant.

    Args:
        level_name: Level name such as "DEBUG"; defaults to the configured level

    Returns:
        Logging level constant (INFO when the name is not recognised)
    """
    name = (level_name or get_settings().log_level).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def setup_server_logging(log_file: Optional[str] = None) -> None:
    """Configure the root logger with a stdout handler and a file handler.

    Args:
        log_file: Path to the log file (default: LOG_FILE setting)
    """
    log_path = Path(log_file or get_settings().log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    log_level = resolve_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_path)):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)


__all__ = ["setup_server_logging", "resolve_log_level", "LOG_FORMAT"]
