# 🍞 currency_bot/bot/ui/toast.py
"""
🍞 ToastNotifier — короткоживучі повідомлення у чаті.

🔹 Новий тост прибирає попередній (показується лише один).
🔹 Кожен тост видаляється через `lifetime` секунд фоновою задачею.
🔹 Збої надсилання й видалення лише логуються, як і падіння таймера.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot
from telegram.error import TelegramError

# 🔠 Системні імпорти
import asyncio
import logging
from typing import Optional

# 🧩 Внутрішні модулі проєкту
from currency_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)


class ToastNotifier:
    """Реалізує `INotifier` для одного чату."""

    def __init__(self, bot: Bot, chat_id: int, *, lifetime: float = 2.0) -> None:
        self._bot = bot
        self._chat_id = chat_id
        self._lifetime = max(0.0, float(lifetime))
        self._message_id: Optional[int] = None
        self._expiry: Optional[asyncio.Task] = None

    @property
    def message_id(self) -> Optional[int]:
        return self._message_id

    async def notify(self, message: str) -> None:
        """Показує тост; збій Telegram лише логується, стан сесії від тосту не залежить."""
        await self.dismiss()
        try:
            sent = await self._bot.send_message(self._chat_id, message)
        except TelegramError as exc:
            logger.warning("🍞 Тост не надіслано у чат %s: %s", self._chat_id, exc)
            return
        self._message_id = sent.message_id
        self._expiry = asyncio.create_task(self._expire(sent.message_id))
        self._expiry.add_done_callback(self._log_expiry_failure)

    async def dismiss(self) -> None:
        """Прибирає поточний тост (якщо є) і скасовує його таймер."""
        expiry, self._expiry = self._expiry, None
        if expiry is not None and not expiry.done():
            expiry.cancel()
        message_id, self._message_id = self._message_id, None
        if message_id is not None:
            await self._delete(message_id)

    async def _expire(self, message_id: int) -> None:
        await asyncio.sleep(self._lifetime)
        if self._message_id == message_id:
            self._message_id = None
            self._expiry = None
        await self._delete(message_id)

    async def _delete(self, message_id: int) -> None:
        try:
            await self._bot.delete_message(self._chat_id, message_id)
        except TelegramError as exc:
            logger.debug("🍞 Тост %s не видалено: %s", message_id, exc)

    @staticmethod
    def _log_expiry_failure(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("🍞 Таймер тосту впав: %s", exc, exc_info=exc)


__all__ = ["ToastNotifier"]
