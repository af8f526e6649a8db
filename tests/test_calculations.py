"""Unit tests for budget_dashboard.calculations."""

from __future__ import annotations

import random

import pandas as pd

from budget_dashboard import calculations as calc
from budget_dashboard.ledger import Transaction


def test_budget_for_seed_income() -> None:
    budget = calc.compute_budget(2800)
    assert budget == calc.BudgetTarget(commitments=1148, savings=1008, expenses=644)


def test_budget_rounds_each_category_independently() -> None:
    for income in [0, 1, 99, 1001, 2345.5, 3333, 12345]:
        budget = calc.compute_budget(income)
        expected = (
            calc.round_half_up(income * 0.41)
            + calc.round_half_up(income * 0.36)
            + calc.round_half_up(income * 0.23)
        )
        assert budget.commitments + budget.savings + budget.expenses == expected


def test_budget_drift_is_not_corrected() -> None:
    # 0.41 * 7 = 2.87, 0.36 * 7 = 2.52, 0.23 * 7 = 1.61 -> 3 + 3 + 2 = 8
    budget = calc.compute_budget(7)
    assert (budget.commitments, budget.savings, budget.expenses) == (3, 3, 2)


def test_round_half_up() -> None:
    assert calc.round_half_up(2.5) == 3
    assert calc.round_half_up(3.5) == 4
    assert calc.round_half_up(2.49) == 2
    assert calc.round_half_up(-2.5) == -2


def test_coerce_amount() -> None:
    assert calc.coerce_amount("12.5") == 12.5
    assert calc.coerce_amount(" 40 ") == 40.0
    assert calc.coerce_amount(7) == 7.0
    assert calc.coerce_amount("") == 0.0
    assert calc.coerce_amount("abc") == 0.0
    assert calc.coerce_amount(None) == 0.0
    assert calc.coerce_amount(float("nan")) == 0.0
    assert calc.coerce_amount(float("inf")) == 0.0
    assert calc.coerce_amount([1, 2]) == 0.0


def test_totals_from_mappings() -> None:
    totals = calc.compute_totals([{'amount': 100}, {'amount': 50}], [], [])
    assert totals == calc.Totals(commitments=150.0, savings=0.0, expenses=0.0)
    assert totals.grand_total == 150.0


def test_totals_treat_bad_amounts_as_zero() -> None:
    totals = calc.compute_totals(
        [{'amount': '100'}, {'amount': 'oops'}, {}],
        [{'amount': '25.5'}, {'amount': None}],
        [{'amount': 10}],
    )
    assert totals.commitments == 100.0
    assert totals.savings == 25.5
    assert totals.expenses == 10.0
    assert totals.grand_total == 135.5


def test_totals_ignore_record_order() -> None:
    records = [{'amount': a} for a in (1.25, 300, '42', 'x', 0.5, 1000, 17)]
    baseline = calc.compute_totals(records, records, records)
    rng = random.Random(7)
    for _ in range(5):
        shuffled = records[:]
        rng.shuffle(shuffled)
        assert calc.compute_totals(shuffled, shuffled, shuffled) == baseline


def test_balances() -> None:
    budget = calc.compute_budget(2800)
    totals = calc.compute_totals([{'amount': 100}, {'amount': 50}], [], [])
    balances = calc.compute_balances(budget, totals, 2800)
    assert balances.commitments == 998
    assert balances.savings == 1008
    assert balances.expenses == 644
    assert balances.overall == 2650
    assert not balances.over_budget


def test_balances_can_go_negative() -> None:
    budget = calc.compute_budget(100)
    totals = calc.compute_totals([{'amount': 500}], [], [])
    balances = calc.compute_balances(budget, totals, 100)
    assert balances.commitments == 41 - 500
    assert balances.overall == -400
    assert balances.over_budget


def test_pie_segments_drop_zero_categories() -> None:
    totals = calc.Totals(commitments=150.0, savings=0.0, expenses=0.0)
    segments = calc.project_pie_segments(totals)
    assert segments == [calc.PieSegment('Commitments', 150.0, '#ef4444')]


def test_bar_series_always_has_three_entries() -> None:
    budget = calc.compute_budget(0)
    totals = calc.Totals(commitments=0.0, savings=0.0, expenses=0.0)
    series = calc.project_bar_series(budget, totals)
    assert [entry.label for entry in series] == ['Commitments', 'Savings', 'Belanja']
    assert calc.project_pie_segments(totals) == []


def test_progress_percentage_is_clamped() -> None:
    assert calc.progress_percentage(50, 200) == 25.0
    assert calc.progress_percentage(500, 200) == 100.0
    assert calc.progress_percentage(-10, 200) == 0.0
    assert calc.progress_percentage(10, 0) == 100.0
    assert calc.progress_percentage(0, 0) == 0.0
    assert calc.progress_percentage(10, -100) == 0.0


def test_percent_label() -> None:
    assert calc.DEFAULT_POLICY.percent_label('commitments') == '41%'
    assert calc.DEFAULT_POLICY.percent_label('expenses') == '23%'


def _transactions():
    return [
        Transaction(id=1, item='Lunch', amount=12.5, category='Makan', date='2025-11-01'),
        Transaction(id=2, item='Petrol', amount=50.0, category='Minyak', date='2025-11-02'),
        Transaction(id=3, item='Dinner', amount=20.0, category='Makan', date='2025-11-03'),
    ]


def test_transactions_frame_is_most_recent_first() -> None:
    frame = calc.transactions_frame(_transactions())
    assert list(frame['id']) == [3, 2, 1]
    assert list(frame.columns) == ['id', 'date', 'item', 'category', 'amount']


def test_transactions_frame_empty() -> None:
    frame = calc.transactions_frame([])
    assert frame.empty
    assert list(frame.columns) == ['id', 'date', 'item', 'category', 'amount']


def test_expense_breakdown_uses_category_order() -> None:
    breakdown = calc.expense_breakdown(_transactions())
    assert list(breakdown.index) == ['Makan', 'Minyak']
    assert breakdown['Makan'] == 32.5
    assert breakdown['Minyak'] == 50.0


def test_expense_breakdown_empty() -> None:
    breakdown = calc.expense_breakdown([])
    assert isinstance(breakdown, pd.Series)
    assert breakdown.empty
