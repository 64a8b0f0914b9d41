# 🛡️ currency_bot/errors/exception_handler_service.py
"""
🛡️ Центральний сервіс обробки помилок для Telegram-бота.

🔹 Конвертує будь-які винятки в доменні `AppError`, використовуючи передані стратегії.
🔹 `UserVisibleError` показується як є (аналог блокуючого alert), решта — уніфікований fallback.
🔹 Логує повний контекст (user_id, код помилки, payload) і ніколи не валить хендлер.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update											# 🤖 Telegram DTO

# 🔠 Системні імпорти
import asyncio														# ⏱️ CancelledError
import logging														# 🧾 Логування кроків
from typing import Any, List, Mapping, Optional					# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.ui import static_messages as msg				# 💬 Стандартні повідомлення
from currency_bot.shared.utils.logger import LOG_NAME				# 🏷️ Спільний неймспейс логів
from .custom_errors import AppError, UserVisibleError				# ⚠️ Доменні винятки
from .strategies import IErrorHandlingStrategy						# 🧠 Конвертери винятків


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(LOG_NAME)


# ================================
# 🧠 СЕРВІС ОБРОБКИ ПОМИЛОК
# ================================
class ExceptionHandlerService:
    """🧠 Глобальний диспетчер помилок для асинхронних Telegram-хендлерів."""

    def __init__(self, strategies: List[IErrorHandlingStrategy]) -> None:
        self._strategies = list(strategies)							# 📦 Копія списку, щоб уникнути мутацій
        logger.info("🛡️ ExceptionHandlerService init", extra={"strategies": len(self._strategies)})

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    async def handle(self, error: Exception, update: Optional[Update]) -> None:
        """
        Головна точка входу. Нічого не піднімає, окрім CancelledError.
        """
        if isinstance(error, asyncio.CancelledError):
            logger.info("⏹️ CancelledError passthrough")
            raise error

        domain_error = self._convert_error(error)
        user_id = self._extract_user_id(update)

        if isinstance(domain_error, UserVisibleError):
            logger.warning(
                "⚠️ UserVisibleError for user=%s: %s",
                user_id,
                domain_error,
                extra=self._extract_extra(domain_error),
            )
            await self._safe_reply(update, domain_error.message)
            return

        logger.error("🔥 Unhandled exception for user=%s", user_id, exc_info=error)
        await self._safe_reply(update, msg.ERROR_CRITICAL)

    # ================================
    # 🛠️ ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _convert_error(self, error: Exception) -> Optional[AppError]:
        """🔄 Пропускає виняток через стратегії й повертає `AppError`, якщо можливо."""
        if isinstance(error, AppError):
            return error
        for strategy in self._strategies:
            try:
                converted = strategy.handle(error)
            except Exception as exc:									# noqa: BLE001
                logger.exception("🔥 Strategy failed: %r", strategy, exc_info=exc)
                continue
            if converted:
                logger.debug("🔁 Strategy converted error via %r", strategy)
                return converted
        return None

    @staticmethod
    def _extract_user_id(update: Optional[Update]) -> str:
        """🆔 Витягує user_id для логів, навіть якщо update None."""
        user = getattr(update, "effective_user", None) if update else None
        return str(user.id) if user else "N/A"

    @staticmethod
    def _extract_extra(error: AppError) -> Optional[Mapping[str, Any]]:
        """📦 Payload `to_log_extra()` для structured-логів."""
        try:
            return dict(error.to_log_extra())
        except Exception:											# noqa: BLE001
            logger.debug("⚠️ to_log_extra failed", exc_info=True)
            return None

    async def _safe_reply(self, update: Optional[Update], text: str) -> None:
        """💬 Тихо намагається відповісти користувачу, не валячи обробник."""
        if not update:
            logger.debug("ℹ️ _safe_reply: update is None")
            return

        message = getattr(update, "effective_message", None) or getattr(update, "message", None)
        if not message:
            logger.debug("ℹ️ _safe_reply: no message object")
            return

        try:
            await message.reply_text(text)
        except Exception as send_err:								# noqa: BLE001
            logger.warning("⚠️ Failed to send error message: %s", send_err)


__all__ = ["ExceptionHandlerService"]
