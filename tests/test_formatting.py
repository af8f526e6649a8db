from budget_dashboard.formatting import format_currency


def test_format_currency_uses_thousands_separator():
    assert format_currency(1148, label='RM') == 'RM 1,148'
    assert format_currency(1234567.891, label='RM', decimals=2) == 'RM 1,234,567.89'


def test_format_currency_negative():
    assert format_currency(-50, label='RM') == '-RM 50'


def test_format_currency_default_label(monkeypatch):
    monkeypatch.setenv('BUDGET_CURRENCY_LABEL', 'SGD')
    assert format_currency(12.5, decimals=2) == 'SGD 12.50'


def test_format_currency_without_label():
    assert format_currency(1000, label='') == '1,000'
