"""
🧪 test_chart_renderer.py — історія пари → серія для бекенду графіка

Перевіряє:
- Порожня історія → clear() із заголовком порожнього стану
- Підписи, значення повної точності, підписи точок
- Після swap рендер іде у новий ключ пари
"""

import pytest

from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.interfaces import ConversionRecord, PairSelection
from currency_bot.infrastructure.chart.chart_renderer import EMPTY_TITLE, ChartRenderer


def _record(amount, rate):
    return ConversionRecord(amount=amount, converted=amount * rate, rate=rate, time="Just now", created_at=0.0)


@pytest.fixture
def history():
    return HistoryStore()


def test_empty_history_clears_chart(history, chart_backend):
    renderer = ChartRenderer(history, chart_backend)

    renderer.render("EUR_USD", "EUR", "USD")

    assert chart_backend.cleared == [EMPTY_TITLE]
    assert chart_backend.series == []
    frame = renderer.snapshot()
    assert frame.is_empty
    assert frame.title == EMPTY_TITLE


def test_series_built_from_records_in_order(history, chart_backend):
    history.append("USD_INR", _record(100, 83.1234))
    history.append("USD_INR", _record(12.5, 83.0))
    renderer = ChartRenderer(history, chart_backend)

    renderer.render("USD_INR", "USD", "INR")

    series = chart_backend.series[-1]
    assert series["labels"] == ["100 USD", "12.5 USD"]
    assert series["values"] == [100 * 83.1234, 12.5 * 83.0]
    assert series["point_labels"] == ["8312.34 INR", "1037.50 INR"]
    assert series["x_title"] == "Amount in USD"
    assert series["y_title"] == "Converted in INR"
    assert not renderer.snapshot().is_empty


def test_swap_targets_new_pair_key(history, chart_backend):
    history.append("USD_INR", _record(1, 83.0))
    selection = PairSelection("usd", "inr")
    renderer = ChartRenderer(history, chart_backend)

    selection.swap()
    renderer.render(selection.pair_key, selection.from_code, selection.to_code)

    assert (selection.from_code, selection.to_code) == ("INR", "USD")
    assert selection.pair_key == "INR_USD"
    assert chart_backend.cleared == [EMPTY_TITLE]
    assert chart_backend.series == []
