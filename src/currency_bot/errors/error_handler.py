# 🛠️ currency_bot/errors/error_handler.py
"""
🛠️ Фабрика декораторів для безпечного виконання async-хендлерів Telegram-бота.

🔹 Не змінює сигнатуру функції, працює з будь-якими *args/**kwargs.
🔹 Коректно пропускає `asyncio.CancelledError`, щоб не ламати зупинку задач.
🔹 Шукає обʼєкт `Update` серед аргументів і делегує винятки `ExceptionHandlerService`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update											# 🤖 Telegram DTO

# 🔠 Системні імпорти
import asyncio														# ⏱️ CancelledError
import functools													# 🧱 wraps для збереження метаданих
import logging														# 🧾 Логи обробки помилок
from typing import Any, Callable, Coroutine, Optional				# 📐 Типи для сигнатур

# 🧩 Внутрішні модулі проєкту
from .exception_handler_service import ExceptionHandlerService		# 🛡️ Центральний сервіс обробки винятків


logger = logging.getLogger("currency_bot.errors.error_handler")

AsyncHandler = Callable[..., Coroutine[Any, Any, Any]]


def make_error_handler(service: ExceptionHandlerService) -> Callable[[AsyncHandler], AsyncHandler]:
    """
    Створює декоратор, замкнений на `ExceptionHandlerService`.

    Args:
        service: Сервіс, який отримує винятки і `Update`.

    Returns:
        Callable, що обгортає async-хендлери, додаючи централізовану обробку.
    """

    def decorator(func: AsyncHandler) -> AsyncHandler:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except asyncio.CancelledError:
                logger.info("⏹️ error_handler.cancelled", extra={"handler": func.__name__})
                raise
            except Exception as exc:									# noqa: BLE001
                update: Optional[Update] = kwargs.get("update")
                if update is None:
                    update = next((arg for arg in args if isinstance(arg, Update)), None)
                logger.debug(
                    "🔥 error_handler.exception",
                    extra={"handler": func.__name__, "has_update": update is not None},
                )
                await service.handle(exc, update)
                return None

        return wrapper

    return decorator


__all__ = ["make_error_handler"]
