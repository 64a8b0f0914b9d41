"""
🧪 test_toast.py — тости у чаті

Перевіряє:
- Новий тост видаляє попередній
- Тост зникає сам після lifetime
- Збої надсилання, видалення й таймера лише логуються
"""

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram.error import BadRequest, NetworkError

from currency_bot.bot.ui.toast import ToastNotifier


def _bot():
    bot = MagicMock()
    counter = iter(range(100, 200))
    bot.send_message = AsyncMock(side_effect=lambda chat_id, text: MagicMock(message_id=next(counter)))
    bot.delete_message = AsyncMock()
    return bot


@pytest.mark.asyncio
async def test_new_toast_replaces_previous():
    bot = _bot()
    toast = ToastNotifier(bot, 1, lifetime=60)

    await toast.notify("first")
    await toast.notify("second")

    bot.delete_message.assert_awaited_once_with(1, 100)
    assert toast.message_id == 101
    await toast.dismiss()


@pytest.mark.asyncio
async def test_toast_expires_after_lifetime():
    bot = _bot()
    toast = ToastNotifier(bot, 1, lifetime=0.01)

    await toast.notify("hello")
    await asyncio.sleep(0.05)

    bot.delete_message.assert_awaited_once_with(1, 100)
    assert toast.message_id is None


@pytest.mark.asyncio
async def test_delete_failure_is_swallowed():
    bot = _bot()
    bot.delete_message = AsyncMock(side_effect=BadRequest("Message to delete not found"))
    toast = ToastNotifier(bot, 1, lifetime=60)

    await toast.notify("a")
    await toast.notify("b")

    assert toast.message_id == 101
    await toast.dismiss()


@pytest.mark.asyncio
async def test_send_failure_is_logged_not_raised(caplog):
    bot = _bot()
    bot.send_message = AsyncMock(side_effect=NetworkError("telegram down"))
    toast = ToastNotifier(bot, 1, lifetime=60)

    with caplog.at_level(logging.WARNING, logger="currency_bot"):
        await toast.notify("hello")

    assert toast.message_id is None
    assert "Тост не надіслано" in caplog.text


@pytest.mark.asyncio
async def test_expiry_crash_is_logged(caplog):
    bot = _bot()
    bot.delete_message = AsyncMock(side_effect=RuntimeError("boom"))
    toast = ToastNotifier(bot, 1, lifetime=0.01)

    with caplog.at_level(logging.ERROR, logger="currency_bot"):
        await toast.notify("hello")
        await asyncio.sleep(0.05)

    assert "Таймер тосту впав" in caplog.text
