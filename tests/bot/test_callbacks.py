"""
🧪 test_callbacks.py — CallbackData, реєстр і централізований callback-хендлер
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from currency_bot.bot.handlers.callback_handler import CallbackHandler
from currency_bot.bot.services.callback_data import CallbackData
from currency_bot.bot.services.callback_registry import CallbackRegistry
from currency_bot.bot.ui.keyboards import build_converter_keyboard
from currency_bot.config.setup.constants import CONST


class _Feature:
    def __init__(self, mapping):
        self._mapping = mapping

    def get_callback_handlers(self):
        return self._mapping


def _query_update(data):
    update = MagicMock()
    update.callback_query = MagicMock()
    update.callback_query.data = data
    update.callback_query.answer = AsyncMock()
    return update


def test_callback_data_roundtrip_and_validation():
    key = CallbackData.parse("fx:swap")
    assert key == CONST.CALLBACKS.FX_SWAP
    assert key.key == "fx:swap"
    for raw in ("", "fxswap", ":swap", "fx:"):
        with pytest.raises(ValueError):
            CallbackData.parse(raw)


def test_registry_rejects_sync_handlers():
    registry = CallbackRegistry()
    with pytest.raises(TypeError):
        registry.register(_Feature({CONST.CALLBACKS.FX_SWAP: lambda u, c: None}))
    with pytest.raises(TypeError):
        registry.register(_Feature({"fx:swap": AsyncMock()}))


@pytest.mark.asyncio
async def test_handler_dispatches_registered_callback():
    calls = []

    async def on_swap(update, context):
        calls.append(update)

    registry = CallbackRegistry()
    registry.register(_Feature({CONST.CALLBACKS.FX_SWAP: on_swap}))
    eh = MagicMock()
    eh.handle = AsyncMock()
    update = _query_update("fx:swap")

    await CallbackHandler(registry, eh).handle(update, MagicMock())

    update.callback_query.answer.assert_awaited_once()
    assert calls == [update]
    eh.handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_handler_ignores_unknown_or_malformed_payload():
    registry = CallbackRegistry()
    eh = MagicMock()
    eh.handle = AsyncMock()
    handler = CallbackHandler(registry, eh)

    await handler.handle(_query_update("fx:unknown"), MagicMock())
    await handler.handle(_query_update("garbage"), MagicMock())

    eh.handle.assert_not_awaited()


@pytest.mark.asyncio
async def test_handler_errors_go_to_exception_service():
    async def broken(update, context):
        raise RuntimeError("boom")

    registry = CallbackRegistry()
    registry.register(_Feature({CONST.CALLBACKS.FX_CLEAR: broken}))
    eh = MagicMock()
    eh.handle = AsyncMock()
    update = _query_update("fx:clear")

    await CallbackHandler(registry, eh).handle(update, MagicMock())

    error, passed_update = eh.handle.await_args.args
    assert isinstance(error, RuntimeError)
    assert passed_update is update


def test_converter_keyboard_layout():
    markup = build_converter_keyboard(CONST)
    buttons = [btn for row in markup.inline_keyboard for btn in row]
    assert [b.callback_data for b in buttons] == ["fx:swap", "fx:refresh", "fx:clear"]
    assert [b.text for b in buttons] == [
        CONST.UI.INLINE_BUTTONS.SWAP,
        CONST.UI.INLINE_BUTTONS.REFRESH,
        CONST.UI.INLINE_BUTTONS.CLEAR,
    ]
