# 🌐 currency_bot/infrastructure/currency/rate_client.py
"""
🌐 ExchangeRateClient — тонка обгортка над двома endpoint-ами exchangerate-api (v6).

🎯 Призначення:
    • `list_currencies()` — коди валют з `/latest/{BASE}`;
    • `get_pair_rate()` — курс пари з `/pair/{FROM}/{TO}`.

⚙️ Нотатки:
    • одна спроба на виклик: без retry/backoff;
    • будь-який транспортний збій → `RateNetworkError`, `result` ≠ "success" → `RateApiError`;
    • HTTP-клієнт ліниво створюється в `initialize()` і закривається в `close()`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Асинхронний HTTP-клієнт

# 🔠 Системні імпорти
import asyncio                                                      # 🔐 Лок ініціалізації
import logging                                                      # 🧾 Логи сервісу
import math                                                         # ♾️ Перевірка курсу
from typing import Any, Dict, Optional, Set, cast                   # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.ui import static_messages as msg              # 💬 Тексти помилок
from currency_bot.config.config_service import ConfigService        # ⚙️ Конфіги застосунку
from currency_bot.errors.custom_errors import RateApiError, RateNetworkError
from currency_bot.shared.utils.logger import LOG_NAME               # 🏷️ Імʼя логера

logger = logging.getLogger(LOG_NAME)

_SUCCESS = "success"                                                # ✅ Значення поля `result` при успіху


class ExchangeRateClient:
    """
    🏦 Клієнт API курсів. Реалізує `IRateClient`.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        base_currency: str = "USD",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise ValueError("Config 'exchange_api.base_url' is required.")
        self._base_url = base_url.rstrip("/")                       # 🌐 Корінь API без «/» у кінці
        self._api_key = api_key or ""                               # 🔑 Ключ доступу
        self._base_currency = base_currency.strip().upper()         # 💱 База для списку валют
        self._timeout = timeout                                     # ⏱️ None — без таймауту
        self._transport = transport                                 # 🧪 Підміна транспорту в тестах
        self._client: Optional[httpx.AsyncClient] = None
        self._init_lock = asyncio.Lock()
        if not self._api_key:
            logger.warning("⚠️ EXCHANGE_API_KEY не задано — API відповідатиме помилкою")

    @classmethod
    def from_config(cls, config: ConfigService) -> "ExchangeRateClient":
        """⚙️ Збирає клієнт із розділу `exchange_api` конфігів."""
        raw_timeout = config.get("exchange_api.timeout_sec")
        return cls(
            base_url=cast(str, config.get("exchange_api.base_url", "")),
            api_key=cast(str, config.get("exchange_api.api_key", "") or ""),
            base_currency=cast(str, config.get("exchange_api.base_currency", "USD") or "USD"),
            timeout=float(raw_timeout) if raw_timeout else None,
        )

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    async def initialize(self) -> None:
        """Створює HTTP-клієнт (один раз)."""
        async with self._init_lock:
            if self._client is None or self._client.is_closed:
                self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
                logger.info("🔧 ExchangeRateClient ініціалізовано (%s)", self._base_url)

    async def close(self) -> None:
        """Акуратно закриває HTTP-клієнт."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            logger.info("🔌 HTTP-клієнт API курсів закрито.")

    async def list_currencies(self) -> Set[str]:
        """📋 Множина кодів валют, відомих API (відносно базової валюти)."""
        data = await self._get_json(f"latest/{self._base_currency}", error_message=msg.ERROR_LOAD_CURRENCIES)
        rates = data.get("conversion_rates")
        if not isinstance(rates, dict) or not rates:
            raise RateApiError(
                msg.ERROR_LOAD_CURRENCIES,
                api_result=str(data.get("result")),
                details="conversion_rates missing",
            )
        codes = {str(code).upper() for code in rates}
        logger.info("📋 Отримано %d валют", len(codes))
        return codes

    async def get_pair_rate(self, from_code: str, to_code: str) -> float:
        """💱 Курс: скільки `to_code` за одиницю `from_code`."""
        src, dst = from_code.strip().upper(), to_code.strip().upper()
        data = await self._get_json(f"pair/{src}/{dst}", error_message=msg.ERROR_FETCH_RATE)
        raw_rate = data.get("conversion_rate")
        try:
            rate = float(raw_rate)
        except (TypeError, ValueError):
            raise RateApiError(details=f"conversion_rate={raw_rate!r}", api_result=str(data.get("result"))) from None
        if not math.isfinite(rate) or rate <= 0:
            raise RateApiError(details=f"conversion_rate={raw_rate!r}", api_result=str(data.get("result")))
        logger.debug("💱 Курс %s→%s = %s", src, dst, rate)
        return rate

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    async def _get_json(self, path: str, *, error_message: str) -> Dict[str, Any]:
        """
        Одна спроба GET + перевірка `result == "success"`.

        URL логується без API-ключа.
        """
        if self._client is None or self._client.is_closed:
            await self.initialize()
        client = cast(httpx.AsyncClient, self._client)
        url = f"{self._base_url}/{self._api_key}/{path}"
        safe_url = f"{self._base_url}/***/{path}"

        try:
            response = await client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("❌ API курсів: HTTP %s для %s", e.response.status_code, safe_url)
            raise RateNetworkError(
                error_message, url=safe_url, status_code=e.response.status_code, details=str(e),
            ) from e
        except httpx.HTTPError as e:
            logger.error("❌ API курсів: мережевий збій для %s — %s", safe_url, e)
            raise RateNetworkError(error_message, url=safe_url, details=str(e)) from e
        except ValueError as e:
            logger.error("❌ API курсів: відповідь не JSON (%s)", safe_url)
            raise RateNetworkError(error_message, url=safe_url, details=str(e)) from e

        if not isinstance(payload, dict):
            raise RateApiError(error_message, url=safe_url, details=f"payload={type(payload).__name__}")
        result = payload.get("result")
        if result != _SUCCESS:
            logger.warning("⚠️ API курсів повернуло result=%r error=%r", result, payload.get("error-type"))
            raise RateApiError(
                error_message,
                url=safe_url,
                api_result=str(payload.get("error-type") or result),
            )
        return payload


__all__ = ["ExchangeRateClient"]
