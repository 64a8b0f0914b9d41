# ⏱️ currency_bot/shared/utils/time_formatter.py
"""
⏱️ Людиночитний «відносний час» для записів історії конвертацій.

🔹 Лише хвилини та години: сесія короткоживуча, днів/місяців не буває.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import math                                                 # 🧮 floor для хвилин/годин
import time                                                 # ⏱️ Поточний unix-час
from typing import Optional                                 # 🧰 Типізація


def format_relative_minutes(minutes: float) -> str:
    """
    Повертає «Just now» / «N minutes ago» / «N hour(s) ago».

    Args:
        minutes: Скільки хвилин минуло (дробові значення округлюються вниз).
    """
    mins = math.floor(minutes)
    if mins < 1:
        return "Just now"
    if mins == 1:
        return "1 minute ago"
    if mins < 60:
        return f"{mins} minutes ago"
    hours = mins // 60
    return f"{hours} hour{'s' if hours > 1 else ''} ago"


def format_relative_time(moment: float, now: Optional[float] = None) -> str:
    """Форматує різницю між `now` (за замовчуванням — зараз) і `moment` (unix-секунди)."""
    current = time.time() if now is None else now
    return format_relative_minutes((current - moment) / 60)


__all__ = ["format_relative_minutes", "format_relative_time"]
