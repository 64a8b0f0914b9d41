# 🗂️ currency_bot/bot/services/callback_registry.py
"""
🗂️ callback_registry.py — центральний реєстр для обробників inline‑кнопок.

🎯 Призначення:
    • Зберігає відповідності між ключем (CallbackData) і async‑обробником
    • Надає API реєстрації/отримання обробників
    • Пише діагностичні логи (конфлікти, джерела реєстрації)
"""

# 🔠 Системні імпорти
import inspect													# 🔎 Перевірка корутин
import logging													# 🧾 Логування
from typing import Dict, Optional								# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.shared.utils.logger import LOG_NAME			# 🏷️ Імʼя проєктного логера
from .callback_data import CallbackData							# 🧩 Ключ callback‑даних
from .types import CallbackHandlerType, Registrable				# 🧱 Протоколи/аліаси типів


# ==========================
# 🧾 ЛОГЕР
# ==========================
logger = logging.getLogger(LOG_NAME)

__all__ = ["CallbackRegistry"]


# ==========================
# 🏛️ РЕЄСТР CALLBACK-ОБРОБНИКІВ
# ==========================
class CallbackRegistry:
    """
    🗂️ Реєстр callback'ів: зберігає звʼязок між ключем `CallbackData` та async‑обробником.

    Використання:
        1) Фіча реалізує `Registrable` і надає `get_callback_handlers()`
        2) `CallbackRegistry.register(feature_instance)` реєструє всі пари (key → handler)
        3) `get_handler(key)` повертає обробник або `None`
    """

    def __init__(self) -> None:
        self._handlers: Dict[CallbackData, CallbackHandlerType] = {}

    # ==========================
    # ➕ РЕЄСТРАЦІЯ
    # ==========================
    def register(self, feature_instance: Registrable) -> None:
        """
        Реєструє всі обробники, що повертає `feature_instance.get_callback_handlers()`.

        Raises:
            TypeError: якщо ключ не `CallbackData` або обробник не async‑функція.
        """
        origin = feature_instance.__class__.__name__
        for key, handler in feature_instance.get_callback_handlers().items():
            self._register_pair(key, handler, origin_hint=origin)

    # ==========================
    # 🔍 ОТРИМАННЯ
    # ==========================
    def get_handler(self, key: CallbackData) -> Optional[CallbackHandlerType]:
        return self._handlers.get(key)

    def clear(self) -> None:
        """Повністю очищає реєстр (зручно для тестів)."""
        count = len(self._handlers)
        self._handlers.clear()
        logger.info("🧹 Реєстр callback‑обробників очищено (видалено %d).", count)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, key: CallbackData) -> bool:
        return key in self._handlers

    # ==========================
    # 🔒 ВНУТРІШНЯ РЕЄСТРАЦІЯ ПАРИ
    # ==========================
    def _register_pair(self, key: CallbackData, handler: CallbackHandlerType, *, origin_hint: str) -> None:
        if not isinstance(key, CallbackData):
            raise TypeError(f"Ключ для callback‑обробника має бути типу CallbackData, а не {type(key)}")

        if not inspect.iscoroutinefunction(handler):
            raise TypeError(f"Обробник для '{key.key}' має бути async‑функцією (async def).")

        # Конфлікт ключів — попереджаємо, але перезаписуємо
        if key in self._handlers:
            logger.warning("⚠️ Обробник для '%s' перезаписано (джерело: %s).", key.key, origin_hint)

        self._handlers[key] = handler
        logger.info("✅ Обробник для callback '%s' зареєстровано (джерело: %s).", key.key, origin_hint)
