# 🏷️ currency_bot/bot/services/callback_data.py
"""
🏷️ CallbackData — типобезпечний ключ inline-кнопки у форматі `ns:name`.

🔹 Імутабельний і хешований, тож служить ключем у `CallbackRegistry`.
🔹 `parse()` валідує сирий payload із Telegram і піднімає ValueError на сміття.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass									# 🧱 Імутабельна структура
from typing import ClassVar											# 🧮 Константи класу


@dataclass(frozen=True, slots=True)
class CallbackData:
    """Пара (простір імен, дія), напр. `fx:swap`."""

    ns: str
    name: str

    SEPARATOR: ClassVar[str] = ":"
    MAX_LENGTH: ClassVar[int] = 64									# 📏 Ліміт Telegram на callback_data

    def __post_init__(self) -> None:
        if not self.ns or not self.name:
            raise ValueError("CallbackData requires non-empty ns and name")
        if self.SEPARATOR in self.ns or self.SEPARATOR in self.name:
            raise ValueError(f"'{self.SEPARATOR}' is not allowed inside ns/name")
        if len(self.key) > self.MAX_LENGTH:
            raise ValueError(f"callback_data longer than {self.MAX_LENGTH} chars: {self.key!r}")

    @property
    def key(self) -> str:
        """Рядок, що йде у `InlineKeyboardButton.callback_data`."""
        return f"{self.ns}{self.SEPARATOR}{self.name}"

    @classmethod
    def parse(cls, raw: str) -> "CallbackData":
        """
        Розбирає payload кнопки.

        Raises:
            ValueError: payload порожній або не має форми `ns:name`.
        """
        ns, sep, name = (raw or "").partition(cls.SEPARATOR)
        if not sep:
            raise ValueError(f"Malformed callback_data: {raw!r}")
        return cls(ns=ns, name=name)


__all__ = ["CallbackData"]
