# 🏛️ currency_bot/bot/commands/base.py
"""🏛️ Базовий контракт фічі: реєстрація команд і публікація callback-ів."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram.ext import Application

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from typing import Dict

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.services.callback_data import CallbackData
from currency_bot.bot.services.types import CallbackHandlerType


class BaseFeature(ABC):
    @abstractmethod
    def register_handlers(self, application: Application) -> None:
        """Додає CommandHandler/MessageHandler фічі у застосунок."""

    def get_callback_handlers(self) -> Dict[CallbackData, CallbackHandlerType]:
        return {}


__all__ = ["BaseFeature"]
