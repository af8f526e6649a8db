"""Configuration management for the budget dashboard.

This module centralizes all configuration values including the currency
label, seed income, month label, logging level and the defaults file,
with environment variable overrides.
"""

from __future__ import annotations

import math
import os
from datetime import date
from pathlib import Path
from typing import Optional

# Package directory - assumes this file is in budget_dashboard/
_PACKAGE_DIR = Path(__file__).parent.resolve()

DEFAULT_CURRENCY_LABEL = "RM"
DEFAULT_INCOME = 2800.0
DEFAULT_LOG_LEVEL = "INFO"

# Seed commitments and savings goals shipped with the package
DEFAULTS_FILE = _PACKAGE_DIR / "defaults.json"


def get_currency_label() -> str:
    """Get the label shown in front of every amount (e.g. ``RM``)."""
    return os.getenv("BUDGET_CURRENCY_LABEL", DEFAULT_CURRENCY_LABEL)


def get_default_income() -> float:
    """Get the seed income, falling back to the default on malformed input."""
    raw = os.getenv("BUDGET_DEFAULT_INCOME")
    if raw is None:
        return DEFAULT_INCOME
    try:
        income = float(raw)
    except ValueError:
        return DEFAULT_INCOME
    return income if math.isfinite(income) else DEFAULT_INCOME


def get_month_label(today: Optional[date] = None) -> str:
    """Get the month label, defaulting to the current month name."""
    override = os.getenv("BUDGET_MONTH")
    if override:
        return override
    return (today or date.today()).strftime("%B")


def get_log_level_name() -> str:
    return os.getenv("BUDGET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_defaults_path() -> Path:
    """Get the seed defaults file, honouring ``BUDGET_DEFAULTS_FILE``."""
    return Path(os.getenv("BUDGET_DEFAULTS_FILE", DEFAULTS_FILE)).resolve()
