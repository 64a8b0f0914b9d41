# 📦 currency_bot/config/setup/container.py
"""
📦 Контейнер залежностей бота-конвертера.

🔹 Створює сервіси в правильному порядку DI
🔹 Інкапсулює конфігурацію клієнта курсів, шрифтів і сесій
🔹 Дає єдину точку доступу до фіч, callback-хендлера та хуків старту/зупинки
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                           # 🧾 Базові засоби логування
from typing import Any                                                   # 🧮 Допоміжні типи

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.commands.converter_feature import ConverterFeature  # 💱 Команди конвертера
from currency_bot.bot.handlers.callback_handler import CallbackHandler   # 🔄 Централізований callback-хендлер
from currency_bot.bot.services.callback_registry import CallbackRegistry  # 📚 Реєстр callback-ів
from currency_bot.bot.services.session import ConverterSessionFactory, SessionRegistry  # 🗃️ Сесії чатів
from currency_bot.config.config_service import ConfigService             # ⚙️ Конфігурація
from currency_bot.config.setup.constants import CONST, AppConstants      # ⚙️ Глобальні константи
from currency_bot.domain.currency.catalog import CurrencyCatalog         # 📋 Список валют
from currency_bot.errors.custom_errors import RateFetchError             # ⚠️ Збій API курсів
from currency_bot.errors.error_handler import make_error_handler         # 🚨 Обгортка обробки помилок
from currency_bot.errors.exception_handler_service import ExceptionHandlerService  # 🛡️ Менеджер винятків
from currency_bot.errors.strategies import HttpxErrorStrategy, TelegramErrorStrategy  # 🧱 Стратегії помилок
from currency_bot.infrastructure.currency.rate_client import ExchangeRateClient  # 🌐 Клієнт exchangerate-api
from currency_bot.infrastructure.image_generation.font_service import FontService  # ✍️ Шрифти графіка
from currency_bot.shared.utils.logger import LOG_NAME, init_logging_from_config  # 🧾 Конфіг логування

logger = logging.getLogger(LOG_NAME)


def _int_or_default(value: Any, default: int) -> int:
    """
    Повертає ціле число або запасне значення, якщо каст неможливий.
    """
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def bootstrap_logging() -> logging.Logger:
    """
    Зчитує конфіг логування і запускає кореневий логер.
    """
    cfg = ConfigService()
    node = cfg.get("logging", {}) or {}
    return init_logging_from_config(node)


# ================================
# 🏛️ КОНТЕЙНЕР ЗАЛЕЖНОСТЕЙ
# ================================
class Container:
    """
    Координує ініціалізацію інфраструктурних, доменних та бот-сервісів.
    """

    def __init__(self, config: ConfigService):
        self.config = config
        self.constants: AppConstants = CONST
        logger.info("🚀 Стартуємо побудову контейнера залежностей")
        self._setup_error_handlers()
        self._setup_infrastructure()
        self._setup_sessions()
        self._setup_features_and_handlers()
        logger.info("✅ Контейнер ініціалізовано успішно")

    # ================================
    # 🛡️ ОБРОБКА ПОМИЛОК
    # ================================
    def _setup_error_handlers(self) -> None:
        strategies = [
            HttpxErrorStrategy(),                                        # 🌐 HTTP-рівень
            TelegramErrorStrategy(),                                     # ✉️ Telegram Bot API
        ]
        self.exception_handler_service = ExceptionHandlerService(strategies=strategies)
        self.error_handler = make_error_handler(self.exception_handler_service)
        logger.debug("🛡️ ExceptionHandlerService активовано (%d стратегій)", len(strategies))

    # ================================
    # 🧰 ІНФРАСТРУКТУРА
    # ================================
    def _setup_infrastructure(self) -> None:
        self.rate_client = ExchangeRateClient.from_config(self.config)   # 🌐 Спільний для всіх сесій
        self.font_service = FontService(self.config)                     # ✍️ Кеш шрифтів
        self.currency_catalog = CurrencyCatalog(                          # 📋 Заповнюється у startup()
            code_length=self.constants.LOGIC.CURRENCY_CODE_LENGTH,
        )

    def _setup_sessions(self) -> None:
        factory = ConverterSessionFactory(
            self.rate_client,
            self.font_service,
            self.config,
            default_pair=self.constants.LOGIC.DEFAULT_PAIR,
        )
        self.session_registry = SessionRegistry(factory)

    # ================================
    # 📚 ФІЧІ
    # ================================
    def _setup_features_and_handlers(self) -> None:
        self.callback_registry = CallbackRegistry()
        self.converter_feature = ConverterFeature(
            sessions=self.session_registry,
            catalog=self.currency_catalog,
            registry=self.callback_registry,
            constants=self.constants,
            exception_handler=self.exception_handler_service,
            reveal_delay_ms=_int_or_default(self.config.get("ui.reveal_delay_ms"), 50),
            history_limit=_int_or_default(self.config.get("ui.history_limit"), 10),
        )
        self.features = [self.converter_feature]
        self.callback_handler = CallbackHandler(
            registry=self.callback_registry,
            exception_handler=self.exception_handler_service,
        )
        logger.debug("📚 Фічі ініціалізовані (%d)", len(self.features))

    # ================================
    # 🔄 ЖИТТЄВИЙ ЦИКЛ
    # ================================
    async def startup(self) -> None:
        """Відкриває HTTP-клієнт і один раз завантажує список валют."""
        await self.rate_client.initialize()
        try:
            await self.currency_catalog.load(self.rate_client)
        except RateFetchError as exc:
            logger.error("📋 Список валют не завантажено: %s", exc.message, extra=exc.to_log_extra())

    async def shutdown(self) -> None:
        await self.rate_client.close()
        logger.info("🛑 Контейнер зупинено")


__all__ = ["Container", "bootstrap_logging"]
