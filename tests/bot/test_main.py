"""
🧪 test_main.py — збірка Application та DI-контейнера

Перевіряє:
- Контейнер створює фічі, реєстр callback-ів і спільний клієнт курсів
- build_application реєструє команди, callback-хендлер і error-handler
- startup() завантажує список валют, а збій API лише логується
- Токен береться з TELEGRAM_TOKEN, потім BOT_TOKEN
"""

from unittest.mock import AsyncMock

import pytest
from telegram.ext import CallbackQueryHandler, CommandHandler, MessageHandler

from currency_bot.bot.main import _resolve_token, build_application
from currency_bot.config.config_service import ConfigService
from currency_bot.config.setup.container import Container
from currency_bot.errors.custom_errors import RateApiError, UnknownCurrencyError


@pytest.fixture
def container():
    return Container(ConfigService())


def test_container_wiring(container):
    assert container.features == [container.converter_feature]
    assert len(container.callback_registry) == 3
    assert container.converter_feature.catalog is container.currency_catalog
    assert not container.currency_catalog.is_loaded


def test_build_application_registers_handlers(container):
    application = build_application("123456:TEST-TOKEN", container)

    handlers = [h for group in application.handlers.values() for h in group]
    assert sum(isinstance(h, CommandHandler) for h in handlers) == 8
    assert sum(isinstance(h, MessageHandler) for h in handlers) == 1
    assert sum(isinstance(h, CallbackQueryHandler) for h in handlers) == 1
    assert application.error_handlers
    assert application.bot_data["container"] is container


@pytest.mark.asyncio
async def test_startup_loads_catalog(container, rate_client):
    container.rate_client = rate_client
    rate_client.initialize = AsyncMock()

    await container.startup()

    assert container.currency_catalog.codes == ["EUR", "INR", "UAH", "USD"]


@pytest.mark.asyncio
async def test_startup_survives_catalog_failure(container):
    container.rate_client = AsyncMock()
    container.rate_client.list_currencies.side_effect = RateApiError(api_result="invalid-key")

    await container.startup()

    assert not container.currency_catalog.is_loaded


def test_resolve_token_precedence(monkeypatch):
    monkeypatch.delenv("TELEGRAM_TOKEN", raising=False)
    monkeypatch.setenv("BOT_TOKEN", "from-bot-token")
    assert _resolve_token(ConfigService()) == "from-bot-token"

    monkeypatch.setenv("TELEGRAM_TOKEN", "from-telegram-token")
    assert _resolve_token(ConfigService()) == "from-telegram-token"


def test_container_catalog_uses_code_length_constant(container):
    assert container.currency_catalog.validate("uah") == "UAH"
    with pytest.raises(UnknownCurrencyError):
        container.currency_catalog.validate("USDT")
