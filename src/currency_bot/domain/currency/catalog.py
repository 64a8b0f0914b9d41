# 📋 currency_bot/domain/currency/catalog.py
"""
📋 CurrencyCatalog — набір кодів валют, отриманий один раз при старті.

🔹 Поки список не завантажено, перевіряється лише форма коду (3 літери).
🔹 Після `load()` невідомі коди відхиляються `UnknownCurrencyError`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
from typing import FrozenSet, List

# 🧩 Внутрішні модулі проєкту
from currency_bot.domain.currency.interfaces import IRateClient
from currency_bot.errors.custom_errors import UnknownCurrencyError
from currency_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)


class CurrencyCatalog:
    def __init__(self, *, code_length: int = 3) -> None:
        self._code_length = code_length                            # 🔤 ISO 4217 — три літери
        self._codes: FrozenSet[str] = frozenset()

    @property
    def is_loaded(self) -> bool:
        return bool(self._codes)

    @property
    def codes(self) -> List[str]:
        return sorted(self._codes)

    async def load(self, rate_client: IRateClient) -> None:
        """Завантажує список через клієнт; помилка клієнта летить далі, старий список лишається."""
        codes = await rate_client.list_currencies()
        self._codes = frozenset(code.upper() for code in codes)
        logger.info("📋 Завантажено %d валют", len(self._codes))

    def validate(self, code: str) -> str:
        """Нормалізує код і перевіряє його наявність у каталозі."""
        normalized = (code or "").strip().upper()
        if len(normalized) != self._code_length or not normalized.isalpha():
            raise UnknownCurrencyError(normalized or code)
        if self._codes and normalized not in self._codes:
            raise UnknownCurrencyError(normalized)
        return normalized

    def __contains__(self, code: str) -> bool:
        return code.upper() in self._codes


__all__ = ["CurrencyCatalog"]
