"""Budget ledger holding one month of income, commitments, savings and expenses.

``BudgetLedger`` is the single owner of the dashboard state. Every user
action maps onto one ledger method; the budget targets, totals, balances and
chart projections are derived from the current records each time they are
read, so they always reflect the latest mutation.
"""

from __future__ import annotations

import itertools
import logging
import math
import time
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterable, List, Mapping, Optional, Union

from .calculations import (
    DEFAULT_CATEGORY,
    DEFAULT_POLICY,
    AllocationPolicy,
    Balance,
    BarEntry,
    BudgetTarget,
    PieSegment,
    Totals,
    coerce_amount,
    compute_balances,
    compute_budget,
    compute_totals,
    project_bar_series,
    project_pie_segments,
)

logger = logging.getLogger(__name__)

NEW_COMMITMENT_NAME = "New Commitment"
NEW_SAVINGS_GOAL_NAME = "New Goal"


@dataclass
class CommitmentItem:
    """A fixed monthly commitment. ``amount`` keeps the raw input."""

    id: int
    name: str
    amount: Any = 0
    paid: bool = False


@dataclass
class SavingsGoal:
    """A savings allocation. ``amount`` keeps the raw input."""

    id: int
    name: str
    amount: Any = 0


@dataclass(frozen=True)
class Transaction:
    id: int
    item: str
    amount: float
    category: str
    date: str


def _today() -> str:
    return date.today().isoformat()


@dataclass
class TransactionDraft:
    """Pending entry in the add-transaction form."""

    item: str = ""
    amount: Any = ""
    category: str = DEFAULT_CATEGORY
    date: str = field(default_factory=_today)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return False


def _as_date_string(value: Any) -> str:
    if value is None or value == "":
        return _today()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _as_draft(candidate: Union[TransactionDraft, Mapping[str, Any]]) -> TransactionDraft:
    if isinstance(candidate, TransactionDraft):
        return candidate
    return TransactionDraft(
        item=candidate.get('item') or "",
        amount=candidate.get('amount', ""),
        category=candidate.get('category') or DEFAULT_CATEGORY,
        date=_as_date_string(candidate.get('date')),
    )


def _coerce_record(record: Any, cls: type) -> Any:
    if isinstance(record, cls):
        return replace(record)
    return cls(**dict(record))


class BudgetLedger:
    """Single-month budget model.

    Args:
        income: Monthly net income
        month: Display label for the month being budgeted
        policy: Income split across commitments, savings and expenses
        commitments: Seed commitments (dataclasses or mappings with ``id``)
        savings: Seed savings goals (dataclasses or mappings with ``id``)

    Ids are drawn from per-collection counters that only move forward, so
    an id is never handed out twice even after the record holding it is
    deleted.
    """

    def __init__(
        self,
        income: Any = 0,
        month: str = "",
        policy: AllocationPolicy = DEFAULT_POLICY,
        commitments: Optional[Iterable[Any]] = None,
        savings: Optional[Iterable[Any]] = None,
    ):
        self.income = income
        self.month = month
        self.policy = policy
        self._commitments: List[CommitmentItem] = [
            _coerce_record(c, CommitmentItem) for c in (commitments or [])
        ]
        self._savings: List[SavingsGoal] = [
            _coerce_record(s, SavingsGoal) for s in (savings or [])
        ]
        self._transactions: List[Transaction] = []
        self.draft = TransactionDraft()
        self._commitment_ids = itertools.count(self._next_after(self._commitments))
        self._savings_ids = itertools.count(self._next_after(self._savings))
        self._last_transaction_id = 0

    @classmethod
    def from_defaults(
        cls,
        defaults: Mapping[str, Any],
        income: Any = 0,
        month: str = "",
        policy: AllocationPolicy = DEFAULT_POLICY,
    ) -> "BudgetLedger":
        """Create a ledger seeded with the commitments and savings in ``defaults``."""
        return cls(
            income=income,
            month=month,
            policy=policy,
            commitments=defaults.get('commitments', []),
            savings=defaults.get('savings', []),
        )

    @staticmethod
    def _next_after(records: List[Any]) -> int:
        return max((r.id for r in records), default=0) + 1

    # --- Reads ---

    @property
    def commitments(self) -> List[CommitmentItem]:
        return list(self._commitments)

    @property
    def savings(self) -> List[SavingsGoal]:
        return list(self._savings)

    @property
    def transactions(self) -> List[Transaction]:
        return list(self._transactions)

    def recent_transactions(self) -> List[Transaction]:
        """Transactions ordered most recent first, for display."""
        return list(reversed(self._transactions))

    @property
    def budget(self) -> BudgetTarget:
        return compute_budget(self.income, self.policy)

    @property
    def totals(self) -> Totals:
        return compute_totals(self._commitments, self._savings, self._transactions)

    @property
    def balances(self) -> Balance:
        return compute_balances(self.budget, self.totals, self.income)

    def pie_segments(self) -> List[PieSegment]:
        return project_pie_segments(self.totals)

    def bar_series(self) -> List[BarEntry]:
        return project_bar_series(self.budget, self.totals)

    def paid_commitments_total(self) -> float:
        """Sum of the commitments already marked as paid."""
        return float(sum(coerce_amount(c.amount) for c in self._commitments if c.paid))

    # --- Income ---

    def set_income(self, value: Any) -> None:
        """Replace the income. Negative values are accepted as-is."""
        self.income = value

    def set_month(self, label: str) -> None:
        self.month = label

    # --- Commitments ---

    def add_commitment(self) -> CommitmentItem:
        item = CommitmentItem(id=next(self._commitment_ids), name=NEW_COMMITMENT_NAME)
        self._commitments.append(item)
        logger.debug("Added commitment %s", item.id)
        return item

    def update_commitment_field(self, item_id: int, field_name: str, value: Any = None) -> None:
        """Update one field of a commitment.

        Args:
            item_id: Id of the commitment to edit
            field_name: ``'name'``, ``'amount'`` or ``'paid'``; ``'paid'``
                toggles the flag and ignores ``value``
            value: New value for ``name`` or ``amount``. Amounts are stored
                exactly as given and only coerced when totals are computed.

        Raises:
            ValueError: If ``field_name`` is not an editable field

        An unknown ``item_id`` leaves the ledger unchanged.
        """
        if field_name not in ('name', 'amount', 'paid'):
            raise ValueError(f"Unsupported commitment field: {field_name}")
        item = self._find(self._commitments, item_id)
        if item is None:
            logger.debug("Commitment %s not found; update ignored", item_id)
            return
        if field_name == 'paid':
            item.paid = not item.paid
        else:
            setattr(item, field_name, value)

    def toggle_commitment_paid(self, item_id: int) -> None:
        self.update_commitment_field(item_id, 'paid')

    def delete_commitment(self, item_id: int) -> None:
        self._remove(self._commitments, item_id, "commitment")

    # --- Savings ---

    def add_savings_goal(self) -> SavingsGoal:
        goal = SavingsGoal(id=next(self._savings_ids), name=NEW_SAVINGS_GOAL_NAME)
        self._savings.append(goal)
        logger.debug("Added savings goal %s", goal.id)
        return goal

    def update_savings_field(self, item_id: int, field_name: str, value: Any) -> None:
        """Update the ``name`` or ``amount`` of a savings goal.

        Raises:
            ValueError: If ``field_name`` is not an editable field
        """
        if field_name not in ('name', 'amount'):
            raise ValueError(f"Unsupported savings field: {field_name}")
        goal = self._find(self._savings, item_id)
        if goal is None:
            logger.debug("Savings goal %s not found; update ignored", item_id)
            return
        setattr(goal, field_name, value)

    def delete_savings_goal(self, item_id: int) -> None:
        self._remove(self._savings, item_id, "savings goal")

    # --- Transactions ---

    def add_transaction(
        self, candidate: Optional[Union[TransactionDraft, Mapping[str, Any]]] = None
    ) -> Optional[Transaction]:
        """Record an expense from ``candidate`` or from the current draft.

        Submissions without an item or an amount are dropped and the draft
        is left as it was so it can be corrected. On success the draft is
        reset to blank defaults.

        Returns:
            The new transaction, or ``None`` if the submission was dropped
        """
        entry = _as_draft(candidate if candidate is not None else self.draft)
        if _is_missing(entry.item) or _is_missing(entry.amount):
            logger.debug("Dropped incomplete transaction: item=%r amount=%r", entry.item, entry.amount)
            return None
        transaction = Transaction(
            id=self._next_transaction_id(),
            item=entry.item,
            amount=coerce_amount(entry.amount),
            category=entry.category,
            date=_as_date_string(entry.date),
        )
        self._transactions.append(transaction)
        self.draft = TransactionDraft()
        logger.debug("Added transaction %s (%s %.2f)", transaction.id, transaction.category, transaction.amount)
        return transaction

    def delete_transaction(self, item_id: int) -> None:
        self._remove(self._transactions, item_id, "transaction")

    def _next_transaction_id(self) -> int:
        stamp = int(time.time() * 1000)
        self._last_transaction_id = max(stamp, self._last_transaction_id + 1)
        return self._last_transaction_id

    # --- Helpers ---

    @staticmethod
    def _find(records: List[Any], item_id: int) -> Optional[Any]:
        return next((r for r in records if r.id == item_id), None)

    @staticmethod
    def _remove(records: List[Any], item_id: int, kind: str) -> None:
        for index, record in enumerate(records):
            if record.id == item_id:
                del records[index]
                logger.debug("Deleted %s %s", kind, item_id)
                return
        logger.debug("No %s with id %s; delete ignored", kind, item_id)
