# 📖 currency_bot/config/setup/constants.py
"""
📖 Типобезпечні константи бота-конвертера.

🔹 Централізує команди, тексти inline-кнопок і callback-ключі
🔹 Гарантує імутабельність через `dataclass(slots=True, frozen=True)`
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                         # 🧾 Логування ініціалізації констант
from dataclasses import dataclass                                      # 🧱 Опис імутабельних структур
from functools import lru_cache                                        # ♻️ Кешування побудови callback-ів
from typing import TYPE_CHECKING, Final, Tuple                         # 🧮 Типізація

# 🧩 Внутрішні модулі проєкту
if TYPE_CHECKING:                                                      # 🧪 Імпорт лише для типізації
    from currency_bot.bot.services.callback_data import CallbackData

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("currency_bot.config.constants")


# ================================
# 🧰 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
@lru_cache(maxsize=None)
def _build_callback(ns: str, name: str) -> "CallbackData":
    """
    Створює та кешує CallbackData для вказаного неймспейсу і ключа.
    """
    from currency_bot.bot.services.callback_data import CallbackData  # 🧭 Локальний імпорт проти циклів

    logger.debug("🧱 Створюємо CallbackData ns=%s name=%s", ns, name)
    return CallbackData(ns=ns, name=name)


# ================================
# 🏛️ СТРУКТУРА КОНСТАНТ (UI)
# ================================
@dataclass(frozen=True, slots=True)
class _InlineButtons:
    """Тексти для InlineKeyboardButton під результатом."""

    SWAP: Final[str] = "↔️ Поміняти"                                    # ↔️ Обмін валют місцями
    REFRESH: Final[str] = "🔄 Оновити курс"                              # 🔄 Повтор останньої конвертації
    CLEAR: Final[str] = "🧹 Очистити історію"                            # 🧹 Скидання всієї історії


class _Callbacks:
    """Ліниві ключі для callback-запитів (використовує кеш _build_callback)."""

    __slots__ = ()

    @property
    def FX_SWAP(self) -> "CallbackData":
        return _build_callback("fx", "swap")

    @property
    def FX_REFRESH(self) -> "CallbackData":
        return _build_callback("fx", "refresh")

    @property
    def FX_CLEAR(self) -> "CallbackData":
        return _build_callback("fx", "clear")


@dataclass(frozen=True, slots=True)
class _UIConstants:
    """Константи UI (parse mode та кнопки)."""

    DEFAULT_PARSE_MODE: Final[str] = "HTML"                              # 📝 Форматування повідомлень
    INLINE_BUTTONS: Final[_InlineButtons] = _InlineButtons()


# ================================
# ⚙️ СТРУКТУРА КОНСТАНТ (LOGIC)
# ================================
@dataclass(frozen=True, slots=True)
class _Commands:
    """Ідентифікатори команд Telegram-бота (без префікса '/')."""

    START: Final[str] = "start"                                          # ▶️ /start
    HELP: Final[str] = "help"                                            # ℹ️ /help (синонім /start)
    CONVERT: Final[str] = "convert"                                      # 💱 /convert 100
    PAIR: Final[str] = "pair"                                            # 🔁 /pair USD EUR
    SWAP: Final[str] = "swap"                                            # ↔️ /swap
    REFRESH: Final[str] = "refresh"                                      # 🔄 /refresh
    CLEAR: Final[str] = "clear"                                          # 🧹 /clear
    HISTORY: Final[str] = "history"                                      # 📜 /history
    CURRENCIES: Final[str] = "currencies"                                # 📋 /currencies


@dataclass(frozen=True, slots=True)
class _LogicConstants:
    """Константи, що визначають логіку (команди, дефолти)."""

    COMMANDS: Final[_Commands] = _Commands()
    DEFAULT_PAIR: Final[Tuple[str, str]] = ("USD", "INR")                # 💱 Пара, якщо конфіг мовчить
    CURRENCY_CODE_LENGTH: Final[int] = 3                                 # 🔤 ISO 4217
    HISTORY_ALL_ARG: Final[str] = "all"                                  # 📜 /history all — усі пари


# ================================
# 🌍 ГОЛОВНИЙ ОБʼЄКТ КОНСТАНТ
# ================================
@dataclass(frozen=True, slots=True)
class AppConstants:
    """Єдина точка доступу до всіх констант проєкту (UI, LOGIC, CALLBACKS)."""

    UI: Final[_UIConstants] = _UIConstants()
    LOGIC: Final[_LogicConstants] = _LogicConstants()
    CALLBACKS: Final[_Callbacks] = _Callbacks()


CONST = AppConstants()                                                  # 🧱 Єдиний екземпляр констант
logger.debug("📖 AppConstants initialised")


__all__ = ["AppConstants", "CONST"]
