"""Logging configuration for the dashboard.

Log level is read from the BUDGET_LOG_LEVEL environment variable.
Default: INFO. Set DEBUG to trace every ledger mutation.
"""

from __future__ import annotations

import logging
import sys

try:
    from .config import get_log_level_name
except ImportError:
    from config import get_log_level_name

# Map string level names to logging constants
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level() -> int:
    """Get logging level from the environment (default: INFO)."""
    return LOG_LEVEL_MAP.get(get_log_level_name(), logging.INFO)


def setup_logging() -> None:
    """Configure the root logger to write to stdout.

    Streamlit re-runs the page script on every interaction, so existing
    handlers are replaced rather than stacked.
    """
    log_level = get_log_level()
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(log_level)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)
