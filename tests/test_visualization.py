import pandas as pd

from budget_dashboard import calculations as calc
from budget_dashboard import visualization as viz


def test_pie_chart_uses_segment_colours():
    segments = calc.project_pie_segments(calc.Totals(commitments=150.0, savings=40.0, expenses=0.0))
    fig = viz.create_allocation_pie_chart(segments)
    pie = fig.data[0]
    assert list(pie.labels) == ['Commitments', 'Savings']
    assert list(pie.marker.colors) == ['#ef4444', '#22c55e']


def test_pie_chart_empty():
    fig = viz.create_allocation_pie_chart([])
    assert len(fig.data) == 0
    assert fig.layout.title.text == 'No data to display'


def test_budget_vs_actual_chart_has_two_traces():
    series = calc.project_bar_series(calc.compute_budget(2800), calc.Totals(0.0, 0.0, 0.0))
    fig = viz.create_budget_vs_actual_chart(series)
    assert [trace.name for trace in fig.data] == ['Budget', 'Actual']
    assert list(fig.data[0].y) == [1148, 1008, 644]
    assert fig.layout.barmode == 'group'


def test_expense_category_chart():
    breakdown = pd.Series({'Makan': 32.5, 'Minyak': 50.0})
    fig = viz.create_expense_category_chart(breakdown)
    assert len(fig.data) == 1
    assert viz.create_expense_category_chart(pd.Series(dtype=float)).layout.title.text == 'No data to display'
