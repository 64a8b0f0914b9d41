# 🚨 currency_bot/errors/custom_errors.py
"""
🚨 Ієрархія доменних винятків конвертера.

🔹 `AppError` — базовий виняток застосунку, `UserVisibleError` — текст можна показати користувачу.
🔹 `AmountValidationError` — невалідна сума (до будь-якого мережевого запиту).
🔹 `RateFetchError` → `RateNetworkError` / `RateApiError` — збій API курсів (для користувача однаковий).
🔹 `to_log_extra()` дає структурований payload для `logger.*(extra=...)`.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.ui import static_messages as msg				# 💬 Тексти для користувача


# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger("currency_bot.errors.custom_errors")		# 🧾 Локальний логер


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Категорії помилок для логів."""

    VALIDATION = "validation_error"									# ✏️ Невалідне введення
    NETWORK = "network_error"										# 🌐 Мережеві збої
    API = "api_error"												# 🏦 API відповів не "success"
    UNKNOWN = "unknown_error"										# ❓ Резервний код


# ================================
# 🧱 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧱 Базовий виняток застосунку."""

    error_code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 💬 Основний текст
        self.details = details										# 🔍 Технічні деталі для логів

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для логів."""
        extra: Dict[str, object] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra


class UserVisibleError(AppError):
    """👀 Помилка, текст якої показується користувачу як є."""


# ================================
# ✏️ ВАЛІДАЦІЯ
# ================================
class AmountValidationError(UserVisibleError):
    """✏️ Сума не є скінченним числом > 0."""

    error_code = ErrorCode.VALIDATION

    def __init__(self, raw_amount: object, *, message: str = msg.INVALID_AMOUNT) -> None:
        super().__init__(message, details=f"raw_amount={raw_amount!r}")
        self.raw_amount = raw_amount


class UnknownCurrencyError(UserVisibleError):
    """🔤 Код валюти відсутній у завантаженому списку."""

    error_code = ErrorCode.VALIDATION

    def __init__(self, code: str) -> None:
        super().__init__(msg.UNKNOWN_CURRENCY.format(code=code), details=f"code={code!r}")
        self.code = code


# ================================
# 🌐 ЗБОЇ API КУРСІВ
# ================================
class RateFetchError(UserVisibleError):
    """🌐 Спільний предок мережевих та API-помилок сервісу курсів."""

    error_code = ErrorCode.NETWORK

    def __init__(
        self,
        message: str = msg.ERROR_FETCH_RATE,
        *,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.url = url												# 🔗 URL запиту
        self.status_code = status_code								# 🔢 HTTP-код, якщо був
        logger.debug("🌐 %s created", type(self).__name__, extra={"url": url, "status_code": status_code})

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


class RateNetworkError(RateFetchError):
    """📡 Транспортний збій: зʼєднання, не-2xx статус або не-JSON відповідь."""


class RateApiError(RateFetchError):
    """🏦 API відповів, але `result` ≠ "success" або формат неочікуваний."""

    error_code = ErrorCode.API

    def __init__(self, message: str = msg.ERROR_FETCH_RATE, *, api_result: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.api_result = api_result								# 🏷️ Значення поля `result` / `error-type`

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.api_result is not None:
            extra["api_result"] = self.api_result
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "AppError",
    "UserVisibleError",
    "AmountValidationError",
    "UnknownCurrencyError",
    "RateFetchError",
    "RateNetworkError",
    "RateApiError",
]
