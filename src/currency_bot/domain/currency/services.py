# 💱 currency_bot/domain/currency/services.py
"""
💱 ConversionEngine — оркестрація однієї конвертації.

🔁 Кроки:
    • валідація суми (до будь-якого мережевого запиту);
    • курс пари через `IRateClient`;
    • `converted = round(amount * rate, 2)` для показу, повний добуток — в історію;
    • запис у `HistoryStore`, перемальовка графіка, тост.

⚙️ Нотатки:
    • `is_refresh` лише змінює текст тосту й прапорець у результаті — запис в історію додається завжди;
    • `announce=False` відкладає тост: UI спершу показує результат, потім викликає `announce()`;
    • при будь-якій помилці історія не змінюється, виняток летить далі.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи конвертацій
import math                                                         # ♾️ Перевірка скінченності
import time                                                         # ⏱️ Мітки часу записів
from typing import Callable, Optional, Union                        # 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.ui import static_messages as msg
from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.interfaces import (
    ConversionRecord,
    ConversionResult,
    IChartRenderer,
    INotifier,
    IRateClient,
    make_pair_key,
)
from currency_bot.errors.custom_errors import AmountValidationError
from currency_bot.shared.utils.logger import LOG_NAME
from currency_bot.shared.utils.time_formatter import format_relative_time

logger = logging.getLogger(LOG_NAME)

AmountInput = Union[str, int, float]


def parse_amount(raw: Optional[AmountInput]) -> float:
    """
    🔢 Перетворює введення користувача на суму > 0.

    Приймає числа та рядки («100», « 12,5 »). Все, що не є скінченним
    додатним числом, — `AmountValidationError`.
    """
    if raw is None or isinstance(raw, bool):
        raise AmountValidationError(raw)
    if isinstance(raw, str):
        normalized = raw.strip().replace(",", ".")
        try:
            value = float(normalized)
        except ValueError:
            raise AmountValidationError(raw) from None
    else:
        try:
            value = float(raw)
        except (TypeError, ValueError):
            raise AmountValidationError(raw) from None
    if not math.isfinite(value) or value <= 0:
        raise AmountValidationError(raw)
    return value


class ConversionEngine:
    """🧠 Конвертує суму між двома валютами та веде історію сесії."""

    def __init__(
        self,
        rate_client: IRateClient,
        history: HistoryStore,
        chart_renderer: Optional[IChartRenderer] = None,
        notifier: Optional[INotifier] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._rates = rate_client
        self._history = history
        self._chart = chart_renderer
        self._notifier = notifier
        self._clock = clock

    @property
    def history(self) -> HistoryStore:
        return self._history

    async def convert(
        self,
        from_code: str,
        to_code: str,
        amount: AmountInput,
        is_refresh: bool = False,
        *,
        announce: bool = True,
    ) -> ConversionResult:
        """
        Виконує конвертацію та повертає результат для показу.

        Raises:
            AmountValidationError: сума не є числом > 0 (мережа не викликається).
            RateFetchError: мережевий збій або API повернуло не "success".
        """
        value = parse_amount(amount)                                # ✏️ Валідація до мережі
        src = from_code.strip().upper()
        dst = to_code.strip().upper()

        rate = await self._rates.get_pair_rate(src, dst)            # 🌐 Єдина точка призупинення
        exact = value * rate
        now = self._clock()
        record = ConversionRecord(
            amount=value,
            converted=exact,
            rate=rate,
            time=format_relative_time(now, now),
            created_at=now,
        )
        pair_key = make_pair_key(src, dst)
        self._history.append(pair_key, record)

        result = ConversionResult(
            from_code=src,
            to_code=dst,
            amount=value,
            rate=rate,
            converted=round(exact, 2),
            pair_key=pair_key,
            record=record,
            is_refresh=is_refresh,
        )
        logger.info(
            "💱 %s %s → %s %s (rate=%s, refresh=%s)",
            result.amount_display, src, result.converted_display, dst, rate, is_refresh,
        )

        if self._chart is not None:
            self._chart.render(pair_key, src, dst)                  # 📊 Перемальовуємо графік пари
        if announce:
            await self.announce(result)
        return result

    async def announce(self, result: ConversionResult) -> None:
        """🍞 Тост про успішну конвертацію (текст залежить від `is_refresh`)."""
        if self._notifier is not None:
            await self._notifier.notify(msg.TOAST_REFRESHED if result.is_refresh else msg.TOAST_CONVERTED)


__all__ = ["ConversionEngine", "parse_amount"]
