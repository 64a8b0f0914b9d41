# 📜 currency_bot/errors/strategies.py
"""
📜 Стратегії конвертації сторонніх винятків у доменні `AppError`.

🔹 Виносять логіку із `ExceptionHandlerService`, щоб сервіс залишався простим DI-клієнтом.
🔹 Можна додавати нові стратегії, не змінюючи ядро.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)
from telegram.error import RetryAfter, TelegramError					# 🤖 Telegram винятки

# 🔠 Системні імпорти
import logging															# 🧾 Логування стратегій
from typing import Optional, Protocol									# 📐 Типи

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.ui import static_messages as msg					# 💬 Повідомлення
from .custom_errors import AppError, RateNetworkError, UserVisibleError	# ⚠️ Доменні помилки


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("currency_bot.errors.strategies")


# ================================
# 🧠 КОНТРАКТ СТРАТЕГІЙ
# ================================
class IErrorHandlingStrategy(Protocol):
    """🧠 Контракт, що визначає єдиний метод `handle`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        """Вертає `AppError`, якщо виняток розпізнано, або None."""


# ================================
# 🌐 HTTPX-СТРАТЕГІЯ
# ================================
class HttpxErrorStrategy(IErrorHandlingStrategy):
    """🌐 Сирі винятки httpx (поза клієнтом курсів) → `RateNetworkError`."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if not isinstance(error, httpx.HTTPError):
            return None
        status_code = None
        url = None
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            url = str(error.request.url)
        logger.debug("🌐 httpx error converted", extra={"status_code": status_code})
        return RateNetworkError(msg.ERROR_FETCH_RATE, details=str(error), url=url, status_code=status_code)


# ================================
# 🤖 TELEGRAM-СТРАТЕГІЯ
# ================================
class TelegramErrorStrategy(IErrorHandlingStrategy):
    """🤖 Flood-control Telegram → зрозуміле повідомлення з паузою."""

    def handle(self, error: Exception) -> Optional[AppError]:
        if isinstance(error, RetryAfter):
            retry_after = error.retry_after
            seconds = int(retry_after.total_seconds()) if hasattr(retry_after, "total_seconds") else int(retry_after)
            logger.debug("🚦 Telegram RetryAfter", extra={"retry_after_s": seconds})
            return UserVisibleError(f"⏳ Забагато запитів. Спробуйте за {seconds} с.", details=str(error))
        if isinstance(error, TelegramError):
            logger.debug("🤖 Telegram general error: %s", error)
            return None
        return None


__all__ = ["IErrorHandlingStrategy", "HttpxErrorStrategy", "TelegramErrorStrategy"]
