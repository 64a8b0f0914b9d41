# 💱 currency_bot/domain/currency/__init__.py
"""
💱 Доменна логіка конвертації.

🔹 `ConversionEngine` — валідація суми, курс, запис в історію.
🔹 `HistoryStore` — історія по парах у памʼяті сесії.
🔹 `CurrencyCatalog` — відомі коди валют.
"""

from __future__ import annotations

from .catalog import CurrencyCatalog
from .history_store import HistoryStore
from .interfaces import ConversionRecord, ConversionResult, PairSelection, make_pair_key
from .services import ConversionEngine, parse_amount

__all__ = [
    "ConversionEngine",
    "ConversionRecord",
    "ConversionResult",
    "CurrencyCatalog",
    "HistoryStore",
    "PairSelection",
    "make_pair_key",
    "parse_amount",
]
