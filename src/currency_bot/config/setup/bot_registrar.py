# 🧾 currency_bot/config/setup/bot_registrar.py
"""
🧾 bot_registrar.py — реєстрація всіх обробників у додатку.

🔹 Клас `BotRegistrar`:
- Ініціалізується додатком (Application) та контейнером залежностей (Container).
- Реєструє обробники команд з модулів "фіч".
- Реєструє глобальний обробник inline-кнопок.
"""

# 🌐 Зовнішні бібліотеки
from telegram.ext import Application, CallbackQueryHandler

# 🔠 Системні імпорти
import logging

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.setup.container import Container      # 📦 DI-контейнер усіх залежностей
from currency_bot.shared.utils.logger import LOG_NAME          # 🧾 Логер для інфо-повідомлень

logger = logging.getLogger(LOG_NAME)


class BotRegistrar:
    """
    🔌 Реєструє всі обробники (хендлери) в Telegram Application.
    """

    def __init__(self, application: Application, container: Container):
        self.app = application
        self.container = container

    def register_handlers(self) -> None:
        """
        🔗 Реєструє всі обробники: спочатку з модулів фіч, потім глобальні.
        """
        logger.info("--- Починаю реєстрацію фіч ---")
        for feature in self.container.features:
            feature.register_handlers(self.app)
            logger.info("✅ Фіча '%s' успішно зареєстрована.", feature.__class__.__name__)
        logger.info("--- Усі фічі зареєстровано ---")

        # Обробник для всіх натискань на inline-кнопки
        self.app.add_handler(CallbackQueryHandler(self.container.callback_handler.handle))
