from datetime import date
from pathlib import Path

import pytest

from budget_dashboard import config
from budget_dashboard.defaults import load_defaults


def test_currency_label_override(monkeypatch):
    monkeypatch.delenv('BUDGET_CURRENCY_LABEL', raising=False)
    assert config.get_currency_label() == 'RM'
    monkeypatch.setenv('BUDGET_CURRENCY_LABEL', 'USD')
    assert config.get_currency_label() == 'USD'


def test_default_income_falls_back_on_bad_value(monkeypatch):
    monkeypatch.delenv('BUDGET_DEFAULT_INCOME', raising=False)
    assert config.get_default_income() == 2800.0
    monkeypatch.setenv('BUDGET_DEFAULT_INCOME', 'lots')
    assert config.get_default_income() == 2800.0
    monkeypatch.setenv('BUDGET_DEFAULT_INCOME', '4100.5')
    assert config.get_default_income() == 4100.5


def test_month_label(monkeypatch):
    monkeypatch.delenv('BUDGET_MONTH', raising=False)
    assert config.get_month_label(date(2025, 11, 3)) == 'November'
    monkeypatch.setenv('BUDGET_MONTH', 'Disember')
    assert config.get_month_label(date(2025, 11, 3)) == 'Disember'


def test_defaults_path_override(monkeypatch, tmp_path):
    monkeypatch.delenv('BUDGET_DEFAULTS_FILE', raising=False)
    assert config.get_defaults_path() == config.DEFAULTS_FILE.resolve()
    target = tmp_path / 'seed.json'
    monkeypatch.setenv('BUDGET_DEFAULTS_FILE', str(target))
    assert config.get_defaults_path() == Path(target).resolve()


def test_packaged_defaults(monkeypatch):
    monkeypatch.delenv('BUDGET_DEFAULTS_FILE', raising=False)
    defaults = load_defaults()
    assert len(defaults['commitments']) == 8
    assert all(c['amount'] == 0 and c['paid'] is False for c in defaults['commitments'])
    assert [s['name'] for s in defaults['savings']] == ['ASB', 'Gold', 'Tabung Haji']


def test_load_defaults_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_defaults(tmp_path / 'missing.json')


def test_load_defaults_ignores_malformed_sections(tmp_path):
    target = tmp_path / 'seed.json'
    target.write_text('{"commitments": {"id": 1}, "savings": null}', encoding='utf-8')
    assert load_defaults(target) == {'commitments': [], 'savings': []}


def test_default_income_rejects_non_finite(monkeypatch):
    for raw in ('nan', 'inf', '-inf'):
        monkeypatch.setenv('BUDGET_DEFAULT_INCOME', raw)
        assert config.get_default_income() == 2800.0


def test_load_defaults_skips_bad_records(tmp_path):
    target = tmp_path / 'seed.json'
    target.write_text(
        '{"commitments": ['
        '{"name": "Rent", "amount": 0},'
        '{"id": 1, "name": "Parents", "amount": 100, "paid": 0, "note": "x"},'
        '"Netflix",'
        '{"id": true, "name": "Flag"},'
        '{"id": 2, "amount": 5}'
        '], "savings": [{"id": 3, "name": "Gold", "amount": 10, "paid": true}, 7]}',
        encoding='utf-8',
    )
    defaults = load_defaults(target)
    assert defaults['commitments'] == [{'id': 1, 'name': 'Parents', 'amount': 100, 'paid': False}]
    assert defaults['savings'] == [{'id': 3, 'name': 'Gold', 'amount': 10}]
