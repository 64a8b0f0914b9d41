# 🤖 currency_bot/bot/main.py
"""
🤖 Entry-point Telegram-бота конвертера валют.

🔹 Ініціалізує логування, DI-контейнер та Application PTB.
🔹 Хуки старту/зупинки: список валют і закриття HTTP-клієнта.
🔹 Реєструє всі обробники й глобальний error-handler, запускає `run_polling`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from dotenv import load_dotenv											# 🌱 Змінні оточення з .env
from telegram.ext import Application, ApplicationBuilder					# 🤖 PTB Application API

# 🔠 Системні імпорти
import logging															# 🧾 Логування подій запуску
import os																# 🌍 Робота з оточенням/ENV
from typing import Optional												# 🧮 Анотації Optional

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.config_service import ConfigService				# ⚙️ Завантаження конфігів
from currency_bot.config.setup.bot_registrar import BotRegistrar			# 📋 Реєстрація хендлерів
from currency_bot.config.setup.container import Container, bootstrap_logging	# 🚀 Логування + DI-контейнер
from currency_bot.shared.utils.logger import LOG_NAME						# 🏷️ Ім'я кореневого логера

logger = logging.getLogger(LOG_NAME)


# ================================
# 🧩 DI / APPLICATION BUILDER
# ================================
def build_application(token: str, container: Optional[Container] = None) -> Application:
    """
    Створює та повертає PTB Application із зареєстрованими обробниками.
    """
    if container is None:
        logger.debug("🧱 Створюємо DI-контейнер")
        container = Container(ConfigService())

    async def _post_init(application: Application) -> None:
        await container.startup()

    async def _post_shutdown(application: Application) -> None:
        await container.shutdown()

    application = (
        ApplicationBuilder()
        .token(token)
        .concurrent_updates(True)												# 🔀 Кожен апдейт — окрема задача
        .post_init(_post_init)
        .post_shutdown(_post_shutdown)
        .build()
    )
    application.bot_data["container"] = container

    registrar = BotRegistrar(application, container)
    logger.info("🧾 Реєструємо обробники Telegram")
    registrar.register_handlers()

    async def _on_error(update, context) -> None:
        """
        Глобальний error-handler PTB: відправляє винятки у централізований сервіс.
        """
        err: Optional[Exception] = getattr(context, "error", None)
        if err is None:
            logger.debug("ℹ️ _on_error викликано без context.error")
            return
        logger.error("🔥 Виняток у PTB: %s", err, exc_info=err)
        try:
            await container.exception_handler_service.handle(err, update)
        except Exception as nested:  # noqa: BLE001
            logger.exception("💥 Global error handler failed: %s", nested)

    application.add_error_handler(_on_error)
    logger.info("✅ Application готовий до запуску")
    return application


def _resolve_token(config: ConfigService) -> Optional[str]:
    return (
        os.getenv("TELEGRAM_TOKEN")
        or os.getenv("BOT_TOKEN")
        or config.get("telegram.bot_token")
    )


# ================================
# 🚀 ENTRYPOINT
# ================================
def run() -> None:
    """
    Основна точка входу: читає токен і запускає бота.
    """
    load_dotenv()
    bootstrap_logging()

    token = _resolve_token(ConfigService())
    if not token:
        logger.critical("🚨 Не знайдено токен Telegram")
        raise RuntimeError("Set TELEGRAM_TOKEN (or BOT_TOKEN) in environment.")

    application = build_application(token)
    logger.info("🤖 Bot is starting…")
    application.run_polling()
    logger.info("👋 Bot stopped")


if __name__ == "__main__":
    run()
