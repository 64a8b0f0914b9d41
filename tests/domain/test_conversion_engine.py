"""
🧪 test_conversion_engine.py — рушій конвертації

Перевіряє:
- converted == round(amount * rate, 2), повна точність в історії
- Невалідна сума → AmountValidationError без мережі, історія незмінна
- Збій курсу → історія незмінна
- Refresh додає новий запис і змінює текст тосту
- Перемальовка графіка та тост після успіху (тост можна відкласти)
- Збій тосту не скасовує конвертацію
"""

import math
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram.error import NetworkError

from currency_bot.bot.ui import static_messages as msg
from currency_bot.bot.ui.toast import ToastNotifier
from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.services import ConversionEngine, parse_amount
from currency_bot.errors.custom_errors import AmountValidationError, RateFetchError
from currency_bot.infrastructure.chart.chart_renderer import ChartRenderer


@pytest.fixture
def history():
    return HistoryStore()


@pytest.fixture
def engine(rate_client, history):
    return ConversionEngine(rate_client, history, clock=lambda: 1_000.0)


@pytest.mark.asyncio
async def test_usd_to_inr_scenario(rate_client, history, chart_backend):
    notifier = MagicMock()
    notifier.notify = AsyncMock()
    engine = ConversionEngine(rate_client, history, ChartRenderer(history, chart_backend), notifier)

    result = await engine.convert("USD", "INR", 100)

    assert result.converted == 8312.34
    assert result.converted_display == "8312.34"
    assert result.pair_key == "USD_INR"
    assert result.rate_info == "1 USD = 83.1234 INR"
    assert len(history.get("USD_INR")) == 1
    assert chart_backend.series[-1]["point_labels"] == ["8312.34 INR"]
    assert chart_backend.series[-1]["title"] == "Conversion Chart (USD → INR)"
    notifier.notify.assert_awaited_once_with(msg.TOAST_CONVERTED)


@pytest.mark.asyncio
@pytest.mark.parametrize("amount,rate", [(1, 0.3333), (12.5, 83.1234), (999.99, 1.0001), (0.01, 3.14159)])
async def test_converted_is_rounded_product(make_rate_client, history, amount, rate):
    engine = ConversionEngine(make_rate_client({("EUR", "USD"): rate}), history)

    result = await engine.convert("EUR", "USD", amount)

    assert result.converted == round(amount * rate, 2)
    stored = history.get("EUR_USD")[0]
    assert math.isclose(stored.converted, amount * rate)
    assert stored.rate == rate
    assert stored.amount == amount


@pytest.mark.asyncio
@pytest.mark.parametrize("bad", [0, -5, "0", "-1", "abc", "", "  ", None, float("nan"), float("inf"), "1e999", True])
async def test_invalid_amount_never_touches_network_or_history(engine, rate_client, history, bad):
    with pytest.raises(AmountValidationError):
        await engine.convert("USD", "INR", bad)

    assert rate_client.calls == []
    assert len(history) == 0


@pytest.mark.asyncio
async def test_failed_rate_fetch_leaves_history_untouched(engine, history):
    await engine.convert("USD", "INR", 5)

    with pytest.raises(RateFetchError):
        await engine.convert("USD", "JPY", 5)

    assert len(history) == 1
    assert history.get("USD_JPY") == []


@pytest.mark.asyncio
async def test_two_refreshes_append_two_records(rate_client, history):
    notifier = MagicMock()
    notifier.notify = AsyncMock()
    engine = ConversionEngine(rate_client, history, notifier=notifier)
    await engine.convert("USD", "INR", 10)

    first = await engine.convert("USD", "INR", 10, is_refresh=True)
    await engine.convert("USD", "INR", 10, is_refresh=True)

    assert first.is_refresh is True
    assert len(history.get("USD_INR")) == 3
    notifier.notify.assert_awaited_with(msg.TOAST_REFRESHED)


@pytest.mark.asyncio
async def test_codes_are_upper_cased(engine, rate_client, history):
    result = await engine.convert(" usd", "inr ", "7")
    assert rate_client.calls == [("USD", "INR")]
    assert result.pair_key == "USD_INR"
    assert history.get("USD_INR")[0].time == "Just now"


@pytest.mark.parametrize("raw,expected", [("100", 100.0), (" 12,5 ", 12.5), (3, 3.0), ("0.01", 0.01)])
def test_parse_amount_accepts_user_text(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.asyncio
async def test_announce_can_be_deferred(rate_client, history):
    notifier = MagicMock()
    notifier.notify = AsyncMock()
    engine = ConversionEngine(rate_client, history, notifier=notifier)

    result = await engine.convert("USD", "INR", 1, announce=False)
    notifier.notify.assert_not_awaited()

    await engine.announce(result)
    notifier.notify.assert_awaited_once_with(msg.TOAST_CONVERTED)


@pytest.mark.asyncio
async def test_failing_toast_keeps_conversion(rate_client, history):
    bot = MagicMock()
    bot.send_message = AsyncMock(side_effect=NetworkError("telegram down"))
    engine = ConversionEngine(rate_client, history, notifier=ToastNotifier(bot, 1, lifetime=60))

    result = await engine.convert("USD", "INR", 100)

    assert result.converted == 8312.34
    assert len(history) == 1
