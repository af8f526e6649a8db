"""Budget aggregation and chart projection utilities.

This module provides the pure functions behind the dashboard figures:
coercing raw amount input, computing budget targets from income,
summing each record collection, reconciling targets against actuals,
and projecting the results into chart-ready rows.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence

import numpy as np
import pandas as pd

TRANSACTION_CATEGORIES = ("Makan", "Belanja", "Hutang", "Minyak", "Other")
DEFAULT_CATEGORY = TRANSACTION_CATEGORIES[0]

# Chart label and colour per budget category
CATEGORY_LABELS = {
    'commitments': 'Commitments',
    'savings': 'Savings',
    'expenses': 'Belanja',
}
CATEGORY_COLORS = {
    'commitments': '#ef4444',
    'savings': '#22c55e',
    'expenses': '#3b82f6',
}
CATEGORY_ORDER = ('commitments', 'savings', 'expenses')


@dataclass(frozen=True)
class AllocationPolicy:
    """Fractions of income allotted to each budget category."""

    commitments: float = 0.41
    savings: float = 0.36
    expenses: float = 0.23

    def percent_label(self, category: str) -> str:
        """Return the category share as a whole percentage, e.g. ``'41%'``."""
        return f"{round_half_up(getattr(self, category) * 100)}%"


DEFAULT_POLICY = AllocationPolicy()


@dataclass(frozen=True)
class BudgetTarget:
    commitments: int
    savings: int
    expenses: int


@dataclass(frozen=True)
class Totals:
    commitments: float
    savings: float
    expenses: float

    @property
    def grand_total(self) -> float:
        return self.commitments + self.savings + self.expenses


@dataclass(frozen=True)
class Balance:
    commitments: float
    savings: float
    expenses: float
    overall: float

    @property
    def over_budget(self) -> bool:
        """True when spending has exceeded income."""
        return self.overall < 0


@dataclass(frozen=True)
class PieSegment:
    label: str
    value: float
    color: str


@dataclass(frozen=True)
class BarEntry:
    label: str
    budget_value: float
    actual_value: float


def coerce_amount(value: Any) -> float:
    """Convert raw amount input into a number for aggregation.

    Anything that does not read as a finite number counts as zero, so a
    half-typed or garbled entry never breaks the totals.

    Args:
        value: Raw amount as entered (number, string, ``None``)

    Returns:
        The numeric amount, or ``0.0`` when the input is not numeric

    Example:
        >>> coerce_amount(" 12.5 ")
        12.5
        >>> coerce_amount("abc")
        0.0
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
    if not np.isfinite(number):
        return 0.0
    return number


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (``2.5 -> 3``)."""
    return int(math.floor(value + 0.5))


def _amount_of(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record.get('amount')
    return getattr(record, 'amount', None)


def _sum_amounts(records: Iterable[Any]) -> float:
    return float(sum(coerce_amount(_amount_of(record)) for record in records))


def compute_budget(income: Any, policy: AllocationPolicy = DEFAULT_POLICY) -> BudgetTarget:
    """Compute the per-category budget targets for an income.

    Each category is rounded independently, so the three targets may not
    add up to the rounded income.

    Example:
        >>> compute_budget(2800)
        BudgetTarget(commitments=1148, savings=1008, expenses=644)
    """
    amount = coerce_amount(income)
    return BudgetTarget(
        commitments=round_half_up(amount * policy.commitments),
        savings=round_half_up(amount * policy.savings),
        expenses=round_half_up(amount * policy.expenses),
    )


def compute_totals(
    commitments: Iterable[Any],
    savings: Iterable[Any],
    transactions: Iterable[Any],
) -> Totals:
    """Sum the amounts of each collection.

    Records may be ledger dataclasses or plain mappings with an ``amount``
    key. Missing or non-numeric amounts contribute zero.
    """
    return Totals(
        commitments=_sum_amounts(commitments),
        savings=_sum_amounts(savings),
        expenses=_sum_amounts(transactions),
    )


def compute_balances(budget: BudgetTarget, totals: Totals, income: Any) -> Balance:
    """Reconcile budget targets against actual totals."""
    return Balance(
        commitments=budget.commitments - totals.commitments,
        savings=budget.savings - totals.savings,
        expenses=budget.expenses - totals.expenses,
        overall=coerce_amount(income) - totals.grand_total,
    )


def project_pie_segments(totals: Totals) -> List[PieSegment]:
    """Project totals into pie chart segments, dropping empty categories."""
    segments = [
        PieSegment(CATEGORY_LABELS[key], getattr(totals, key), CATEGORY_COLORS[key])
        for key in CATEGORY_ORDER
    ]
    return [segment for segment in segments if segment.value > 0]


def project_bar_series(budget: BudgetTarget, totals: Totals) -> List[BarEntry]:
    """Project budget and actual figures into bar chart rows.

    Unlike :func:`project_pie_segments`, all three categories are always
    present, including those with zero values.
    """
    return [
        BarEntry(CATEGORY_LABELS[key], getattr(budget, key), getattr(totals, key))
        for key in CATEGORY_ORDER
    ]


def progress_percentage(current: float, maximum: float) -> float:
    """Return progress of ``current`` toward ``maximum`` clamped to 0-100.

    A zero ``maximum`` reads as full when anything has been spent and empty
    otherwise.

    Example:
        >>> progress_percentage(50, 200)
        25.0
        >>> progress_percentage(10, 0)
        100.0
    """
    current = coerce_amount(current)
    maximum = coerce_amount(maximum)
    if maximum == 0:
        return 100.0 if current > 0 else 0.0
    return float(np.clip(current / maximum * 100, 0, 100))


def transactions_frame(transactions: Sequence[Any]) -> pd.DataFrame:
    """Build a display table of transactions, most recent first.

    Args:
        transactions: Transactions in insertion order

    Returns:
        DataFrame with ``id``, ``date``, ``item``, ``category`` and ``amount``
        columns; empty (with those columns) when there are no transactions
    """
    columns = ['id', 'date', 'item', 'category', 'amount']
    if not transactions:
        return pd.DataFrame(columns=columns)
    rows = [
        {
            'id': t.id,
            'date': t.date,
            'item': t.item,
            'category': t.category,
            'amount': coerce_amount(t.amount),
        }
        for t in reversed(list(transactions))
    ]
    return pd.DataFrame(rows, columns=columns).reset_index(drop=True)


def expense_breakdown(transactions: Sequence[Any]) -> pd.Series:
    """Sum transaction amounts per category in the fixed category order.

    Categories outside the standard list are grouped after the standard
    ones. Categories with no spending are dropped.
    """
    frame = transactions_frame(transactions)
    if frame.empty:
        return pd.Series(dtype=float, name='amount')
    summed = frame.groupby('category')['amount'].sum()
    extra = sorted(c for c in summed.index if c not in TRANSACTION_CATEGORIES)
    ordered = summed.reindex(list(TRANSACTION_CATEGORIES) + extra).fillna(0.0)
    ordered.index.name = 'category'
    return ordered[ordered > 0].astype(float)
