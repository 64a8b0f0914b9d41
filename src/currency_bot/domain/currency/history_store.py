# 📜 currency_bot/domain/currency/history_store.py
"""
📜 HistoryStore — памʼять сесії про всі конвертації, згруповані за парою.

🔹 Ключ — `FROM_TO`, значення — список записів у порядку додавання (найстаріші першими).
🔹 Список пари створюється ліниво при першому `append`; `clear()` стирає всі пари.
🔹 Без обмеження розміру та без збереження на диск: живе рівно стільки, скільки сесія.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи змін історії
from typing import Dict, List, Tuple                                # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.domain.currency.interfaces import ConversionRecord   # 🧱 Запис історії
from currency_bot.shared.utils.logger import LOG_NAME                  # 🏷️ Імʼя логера

logger = logging.getLogger(LOG_NAME)


class HistoryStore:
    """🗃️ Append-only історія конвертацій по парах валют."""

    def __init__(self) -> None:
        self._records: Dict[str, List[ConversionRecord]] = {}       # 📦 pair_key → записи

    def append(self, pair_key: str, record: ConversionRecord) -> None:
        """➕ Додає запис у кінець історії пари (створює її за потреби)."""
        self._records.setdefault(pair_key, []).append(record)
        logger.debug("📜 %s: +1 запис (усього %d)", pair_key, len(self._records[pair_key]))

    def get(self, pair_key: str) -> List[ConversionRecord]:
        """🔍 Копія записів пари; порожній список, якщо пари ще немає."""
        return list(self._records.get(pair_key, ()))

    def clear(self) -> None:
        """🧹 Очищає історію всіх пар, а не лише поточної."""
        total = len(self)
        self._records.clear()
        logger.info("🧹 Історію очищено (видалено %d записів)", total)

    def pair_keys(self) -> List[str]:
        return list(self._records)

    def all_records(self) -> List[Tuple[str, ConversionRecord]]:
        """🗂️ Записи всіх пар як (pair_key, record), від найстаріших за `created_at`."""
        entries = [(key, record) for key in self.pair_keys() for record in self._records[key]]
        entries.sort(key=lambda entry: entry[1].created_at)          # 🔁 Стабільне: в межах пари порядок додавання
        return entries

    def __len__(self) -> int:
        return sum(len(items) for items in self._records.values())


__all__ = ["HistoryStore"]
