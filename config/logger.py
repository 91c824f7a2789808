"""Logging setup for the Atgest dashboard."""

import logging
import sys
from typing import Optional

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Top-level packages whose module loggers share the handler below
APP_PACKAGES = ("config", "controllers", "models", "services", "views")

_HANDLER_NAME = "atgest"


def setup_logging(level: Optional[str] = None) -> None:
    """
    Attach the stderr handler to the application loggers.

    Streamlit re-executes page scripts on every interaction, so this is
    safe to call repeatedly; the handler is only added once.

    Args:
        level: Log level name. Defaults to Settings.log_level.
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    for package in APP_PACKAGES:
        log = logging.getLogger(package)
        log.setLevel(numeric_level)
        if any(h.get_name() == _HANDLER_NAME for h in log.handlers):
            continue

        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)
        log.propagate = False
