# 🌐 currency_bot/infrastructure/currency/__init__.py
"""🌐 Клієнт exchangerate-api (v6)."""

from __future__ import annotations

from .rate_client import ExchangeRateClient

__all__ = ["ExchangeRateClient"]
