"""Formatting utilities for currency display."""

from __future__ import annotations

from typing import Optional, Union

try:
    from .config import get_currency_label
except ImportError:
    from config import get_currency_label


def format_currency(
    amount: Union[float, int],
    label: Optional[str] = None,
    decimals: int = 0,
) -> str:
    """Format a currency amount with the currency label and thousands separators.

    Args:
        amount: The amount to format
        label: Currency label; defaults to the configured label
        decimals: Number of decimal places to show

    Returns:
        Formatted currency string (e.g., "RM 1,148")

    Example:
        >>> format_currency(1148, label="RM")
        'RM 1,148'
        >>> format_currency(-50, label="RM")
        '-RM 50'
        >>> format_currency(12.5, label="RM", decimals=2)
        'RM 12.50'
    """
    label = get_currency_label() if label is None else label
    value = round(float(amount), decimals)
    sign = "-" if value < 0 else ""
    prefix = f"{label} " if label else ""
    return f"{sign}{prefix}{abs(value):,.{decimals}f}"
