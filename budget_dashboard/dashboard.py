"""Budget Dashboard UI components and layout.

This module renders the single-page budgeting dashboard: the income
header, one summary card per budget category, the commitments and
savings editors, the summary charts and the daily expense log.  All
figures come from the :class:`BudgetLedger` kept in
``st.session_state``; widgets only forward user edits to it.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any, MutableMapping, Optional, Tuple

import streamlit as st
from streamlit.errors import StreamlitAPIException

try:
    from . import config
    from .calculations import TRANSACTION_CATEGORIES, coerce_amount, expense_breakdown, progress_percentage
    from .defaults import load_defaults
    from .formatting import format_currency
    from .ledger import BudgetLedger, TransactionDraft
    from .logging_setup import setup_logging
    from .visualization import (
        create_allocation_pie_chart,
        create_budget_vs_actual_chart,
        create_expense_category_chart,
    )
except ImportError:
    # Fallback for direct execution
    import config
    from calculations import TRANSACTION_CATEGORIES, coerce_amount, expense_breakdown, progress_percentage
    from defaults import load_defaults
    from formatting import format_currency
    from ledger import BudgetLedger, TransactionDraft
    from logging_setup import setup_logging
    from visualization import (
        create_allocation_pie_chart,
        create_budget_vs_actual_chart,
        create_expense_category_chart,
    )

logger = logging.getLogger(__name__)

LEDGER_KEY = 'ledger'
ERROR_KEY = 'transaction_error'

# Widget keys for the add-transaction form
ITEM_KEY = 'draft_item'
AMOUNT_KEY = 'draft_amount'
CATEGORY_KEY = 'draft_category'
DATE_KEY = 'draft_date'

# key, title, target label, words for a balance that is left / exceeded
_CARDS = (
    ('commitments', 'Commitments', 'Budget', ('remaining', 'over budget')),
    ('savings', 'Savings', 'Target', ('to go', 'above target')),
    ('expenses', 'Belanja', 'Budget', ('available', 'overspent')),
)

_PAGE_CONFIGURED = False


def setup_page_config() -> None:
    """Configure Streamlit page settings once per process."""
    global _PAGE_CONFIGURED
    if _PAGE_CONFIGURED:
        return
    try:
        st.set_page_config(
            page_title="Dashboard Gaji",
            page_icon="💰",
            layout="wide",
        )
    except StreamlitAPIException:
        # Already configured upstream; avoid raising to keep reruns smooth.
        pass
    finally:
        _PAGE_CONFIGURED = True


def ensure_ledger(state: Optional[MutableMapping[str, Any]] = None) -> BudgetLedger:
    """Return the session ledger, creating it on the first run.

    The new ledger is seeded from the defaults file and the configured
    income and month.  An unreadable defaults file yields an empty ledger.
    """
    state = st.session_state if state is None else state
    if LEDGER_KEY not in state:
        try:
            defaults = load_defaults()
        except (FileNotFoundError, json.JSONDecodeError) as exc:
            logger.warning("Could not load seed defaults: %s", exc)
            defaults = {}
        state[LEDGER_KEY] = BudgetLedger.from_defaults(
            defaults,
            income=config.get_default_income(),
            month=config.get_month_label(),
        )
        logger.info("Created budget ledger for %s", state[LEDGER_KEY].month)
    return state[LEDGER_KEY]


def _sync_draft_widgets(draft: TransactionDraft) -> None:
    state = st.session_state
    state[ITEM_KEY] = draft.item
    state[AMOUNT_KEY] = str(draft.amount)
    state[CATEGORY_KEY] = draft.category
    try:
        state[DATE_KEY] = date.fromisoformat(draft.date)
    except ValueError:
        state[DATE_KEY] = date.today()


def _submit_transaction(ledger: BudgetLedger) -> None:
    """Form callback: copy the widget values into the draft and record it."""
    state = st.session_state
    entered_date = state.get(DATE_KEY)
    ledger.draft = TransactionDraft(
        item=state.get(ITEM_KEY, ""),
        amount=state.get(AMOUNT_KEY, ""),
        category=state.get(CATEGORY_KEY) or TRANSACTION_CATEGORIES[0],
        date=entered_date.isoformat() if isinstance(entered_date, date) else str(entered_date or ""),
    )
    if ledger.add_transaction() is None:
        state[ERROR_KEY] = "Item and amount are required to add a transaction."
        return
    state[ERROR_KEY] = None
    _sync_draft_widgets(ledger.draft)


def _on_income_change(ledger: BudgetLedger) -> None:
    ledger.set_income(st.session_state['income_input'])


def _on_month_change(ledger: BudgetLedger) -> None:
    ledger.set_month(st.session_state['month_input'])


def _on_commitment_edit(ledger: BudgetLedger, item_id: int, field_name: str, key: str) -> None:
    ledger.update_commitment_field(item_id, field_name, st.session_state[key])


def _on_savings_edit(ledger: BudgetLedger, item_id: int, field_name: str, key: str) -> None:
    ledger.update_savings_field(item_id, field_name, st.session_state[key])


def balance_caption(balance: float, directions: Tuple[str, str]) -> str:
    """Describe a category balance as an absolute amount plus a direction word."""
    left, exceeded = directions
    return f"{format_currency(abs(balance))} {left if balance >= 0 else exceeded}"


def amount_display(amount: Any) -> str:
    """Text for an amount input; a zero amount shows as an empty field."""
    if isinstance(amount, (int, float)) and not isinstance(amount, bool) and amount == 0:
        return ""
    return str(amount)


def render_header(ledger: BudgetLedger) -> None:
    """Render the title, income input and overall balance."""
    label = config.get_currency_label()
    col1, col2, col3 = st.columns([2, 1, 1])

    with col1:
        st.title("💰 Dashboard Gaji")
        st.caption(f"Overview for {ledger.month} {date.today().year}")
        st.text_input("Month", value=ledger.month, key='month_input',
                      on_change=_on_month_change, args=(ledger,))

    with col2:
        st.number_input(
            f"Gaji Bersih ({label})",
            value=coerce_amount(ledger.income),
            step=50.0,
            key='income_input',
            on_change=_on_income_change,
            args=(ledger,),
        )

    with col3:
        balances = ledger.balances
        st.metric(label="Current Balance", value=format_currency(balances.overall))
        if balances.over_budget:
            st.error("Over budget")
        else:
            st.success("Within income")


def render_summary_cards(ledger: BudgetLedger) -> None:
    """Render one card per category with actual, target and progress."""
    budget, totals, balances = ledger.budget, ledger.totals, ledger.balances
    columns = st.columns(len(_CARDS))

    for column, (key, title, target_label, directions) in zip(columns, _CARDS):
        actual = getattr(totals, key)
        target = getattr(budget, key)
        with column:
            st.metric(
                label=f"{title} ({ledger.policy.percent_label(key)})",
                value=format_currency(actual),
                help=f"{target_label}: {format_currency(target)}",
            )
            st.caption(f"{target_label}: {format_currency(target)} · {balance_caption(getattr(balances, key), directions)}")
            st.progress(progress_percentage(actual, target) / 100)


def render_commitments(ledger: BudgetLedger) -> None:
    """Render the commitments table with paid toggles."""
    st.subheader("📌 Commitments")
    st.caption(
        f"Paid {format_currency(ledger.paid_commitments_total())} "
        f"of {format_currency(ledger.totals.commitments)}"
    )

    for item in ledger.commitments:
        paid_col, name_col, amount_col, delete_col = st.columns([1, 4, 2, 1])
        with paid_col:
            st.checkbox(
                "Paid?",
                value=item.paid,
                key=f"commitment_paid_{item.id}",
                on_change=ledger.toggle_commitment_paid,
                args=(item.id,),
                label_visibility="collapsed",
            )
        with name_col:
            name_key = f"commitment_name_{item.id}"
            st.text_input("Item", value=item.name, key=name_key, on_change=_on_commitment_edit,
                          args=(ledger, item.id, 'name', name_key), label_visibility="collapsed")
        with amount_col:
            amount_key = f"commitment_amount_{item.id}"
            st.text_input("Amount", value=amount_display(item.amount), key=amount_key, on_change=_on_commitment_edit,
                          args=(ledger, item.id, 'amount', amount_key), label_visibility="collapsed")
        with delete_col:
            st.button("🗑️", key=f"commitment_delete_{item.id}",
                      on_click=ledger.delete_commitment, args=(item.id,))

    st.button("➕ Add commitment", on_click=ledger.add_commitment)


def render_savings(ledger: BudgetLedger) -> None:
    """Render the savings goals list."""
    st.subheader("🐷 Savings")

    for goal in ledger.savings:
        name_col, amount_col, delete_col = st.columns([4, 2, 1])
        with name_col:
            name_key = f"savings_name_{goal.id}"
            st.text_input("Goal", value=goal.name, key=name_key, on_change=_on_savings_edit,
                          args=(ledger, goal.id, 'name', name_key), label_visibility="collapsed")
        with amount_col:
            amount_key = f"savings_amount_{goal.id}"
            st.text_input("Amount", value=amount_display(goal.amount), key=amount_key, on_change=_on_savings_edit,
                          args=(ledger, goal.id, 'amount', amount_key), label_visibility="collapsed")
        with delete_col:
            st.button("🗑️", key=f"savings_delete_{goal.id}",
                      on_click=ledger.delete_savings_goal, args=(goal.id,))

    st.button("➕ Add goal", on_click=ledger.add_savings_goal)


def render_charts(ledger: BudgetLedger) -> None:
    """Render the allocation pie and the budget vs actual bars."""
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(create_allocation_pie_chart(ledger.pie_segments()), use_container_width=True)
    with col2:
        st.plotly_chart(create_budget_vs_actual_chart(ledger.bar_series()), use_container_width=True)


def render_transactions(ledger: BudgetLedger) -> None:
    """Render the add-transaction form and the expense history."""
    st.subheader("🧾 Belanja Harian")

    if ITEM_KEY not in st.session_state:
        _sync_draft_widgets(ledger.draft)

    with st.form("add_transaction_form"):
        st.markdown("**Add Transaction**")
        col1, col2, col3, col4 = st.columns([3, 2, 2, 2])
        with col1:
            st.text_input("Item", key=ITEM_KEY)
        with col2:
            st.text_input("Amount", key=AMOUNT_KEY, placeholder=f"{config.get_currency_label()} Amount")
        with col3:
            st.selectbox("Category", options=list(TRANSACTION_CATEGORIES), key=CATEGORY_KEY)
        with col4:
            st.date_input("Date", key=DATE_KEY)
        st.form_submit_button("Add", on_click=_submit_transaction, args=(ledger,))

    error = st.session_state.get(ERROR_KEY)
    if error:
        st.error(error)

    recent = ledger.recent_transactions()
    if not recent:
        st.info("No transactions yet.")
        return

    for transaction in recent:
        text_col, amount_col, delete_col = st.columns([5, 2, 1])
        with text_col:
            st.markdown(f"**{transaction.item}**")
            st.caption(f"{transaction.date} · {transaction.category}")
        with amount_col:
            st.markdown(f"**{format_currency(transaction.amount, decimals=2)}**")
        with delete_col:
            st.button("🗑️", key=f"transaction_delete_{transaction.id}",
                      on_click=ledger.delete_transaction, args=(transaction.id,))

    st.plotly_chart(create_expense_category_chart(expense_breakdown(ledger.transactions)), use_container_width=True)


def main() -> None:
    """Main entry point for the budget dashboard."""
    setup_page_config()
    setup_logging()
    ledger = ensure_ledger()

    render_header(ledger)
    st.divider()
    render_summary_cards(ledger)
    st.divider()

    left, right = st.columns(2)
    with left:
        render_commitments(ledger)
        st.divider()
        render_savings(ledger)
    with right:
        render_charts(ledger)
        st.divider()
        render_transactions(ledger)
