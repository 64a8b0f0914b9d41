# ⚠️ currency_bot/errors/__init__.py
"""
⚠️ Доменні винятки та сервіси їх обробки.

🔹 `AppError` / `UserVisibleError` — база ієрархії.
🔹 `AmountValidationError`, `UnknownCurrencyError`, `RateFetchError` — помилки конвертера.
"""

from __future__ import annotations

from .custom_errors import (
    AmountValidationError,
    AppError,
    RateApiError,
    RateFetchError,
    RateNetworkError,
    UnknownCurrencyError,
    UserVisibleError,
)

__all__ = [
    "AmountValidationError",
    "AppError",
    "RateApiError",
    "RateFetchError",
    "RateNetworkError",
    "UnknownCurrencyError",
    "UserVisibleError",
]
