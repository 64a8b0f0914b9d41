# 🧱 currency_bot/bot/services/types.py
"""🧱 Спільні аліаси типів і протоколи для callback-інфраструктури."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Update
from telegram.ext import ContextTypes

# 🔠 Системні імпорти
from typing import Awaitable, Callable, Dict, Protocol

# 🧩 Внутрішні модулі проєкту
from .callback_data import CallbackData

BotContext = ContextTypes.DEFAULT_TYPE
CallbackHandlerType = Callable[[Update, BotContext], Awaitable[None]]


class Registrable(Protocol):
    """Фіча, що публікує свої callback-обробники."""

    def get_callback_handlers(self) -> Dict[CallbackData, CallbackHandlerType]: ...


__all__ = ["BotContext", "CallbackHandlerType", "Registrable"]
