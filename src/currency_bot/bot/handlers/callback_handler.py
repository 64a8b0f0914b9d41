# 🎛️ currency_bot/bot/handlers/callback_handler.py
"""
🎛️ callback_handler.py — централізований обробник для всіх inline‑кнопок (callback_query).

Призначення:
- Приймає натискання на inline‑кнопки.
- Безпечно парсить payload через `CallbackData`.
- Делегує виконання зареєстрованому хендлеру з `CallbackRegistry`.
- Всі помилки йдуть у централізований `ExceptionHandlerService`.
"""

# ==========================
# 🌐 ЗОВНІШНІ БІБЛІОТЕКИ
# ==========================
from telegram import Update													# 📦 Тип апдейту Telegram

# ==========================
# 🔠 СИСТЕМНІ ІМПОРТИ
# ==========================
import asyncio														# 🔄 CancelledError
import logging														# 🧾 Логування

# ==========================
# 🧩 ВНУТРІШНІ МОДУЛІ
# ==========================
from currency_bot.bot.services.callback_data import CallbackData			# 🧩 Парсинг payload
from currency_bot.bot.services.callback_registry import CallbackRegistry	# 📚 Реєстр колбек‑хендлерів
from currency_bot.bot.services.types import BotContext						# 🧱 Тип контексту PTB
from currency_bot.errors.exception_handler_service import ExceptionHandlerService	# 🚑 Централізована обробка помилок
from currency_bot.shared.utils.logger import LOG_NAME						# 🏷️ Імʼя логера проєкту

logger = logging.getLogger(LOG_NAME)


class CallbackHandler:
    """
    🎛️ Централізовано обробляє натискання на inline‑кнопки.

    Клас не містить бізнес‑логіки; тільки парсинг і делегування.
    """

    def __init__(self, registry: CallbackRegistry, exception_handler: ExceptionHandlerService) -> None:
        self.registry = registry
        self._eh = exception_handler

    async def handle(self, update: Update, context: BotContext) -> None:
        """Приймає callback_query, парсить дані та викликає відповідний обробник."""
        query = update.callback_query
        if not query or not query.data:
            return

        try:
            # Прибрати «годинник» на кнопці
            try:
                await query.answer()
            except Exception as e:  # noqa: BLE001
                logger.debug("Callback answer failed (non‑critical): %s", e, exc_info=True)

            raw_data = query.data
            logger.info("👆 Callback received: %s", raw_data)

            try:
                key = CallbackData.parse(raw_data)
            except ValueError as e:
                logger.warning("⚠️ Failed to parse callback_data '%s': %s", raw_data, e)
                return

            handler = self.registry.get_handler(key)
            if not handler:
                logger.warning("⚠️ Handler for callback '%s' not found.", key.key)
                return

            await handler(update, context)

        except asyncio.CancelledError:
            logger.warning("Callback handling cancelled.")
            raise
        except Exception as e:  # noqa: BLE001
            await self._eh.handle(e, update)
