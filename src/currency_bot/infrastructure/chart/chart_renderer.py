# 📊 currency_bot/infrastructure/chart/chart_renderer.py
"""
📊 ChartRenderer — з історії пари будує дані для бекенду графіка.

🔹 Порожня історія → `backend.clear(...)` із заголовком порожнього стану.
🔹 Інакше: підписи «<сума> FROM», значення — повна точність `converted`, у порядку додавання.
🔹 Підпис точки (аналог tooltip) — «<converted:.2f> TO».
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging

# 🧩 Внутрішні модулі проєкту
from currency_bot.domain.chart.interfaces import ChartFrame, IChartBackend
from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.interfaces import format_amount
from currency_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)

EMPTY_TITLE = "No conversions yet for this pair"


def chart_title(from_code: str, to_code: str) -> str:
    return f"Conversion Chart ({from_code} → {to_code})"


def point_label(value: float, to_code: str) -> str:
    """Текст підказки точки: значення з 2 знаками + код цільової валюти."""
    return f"{value:.2f} {to_code}"


class ChartRenderer:
    """🖼️ Реалізує `IChartRenderer` поверх будь-якого `IChartBackend`."""

    def __init__(self, history: HistoryStore, backend: IChartBackend) -> None:
        self._history = history
        self._backend = backend

    def render(self, pair_key: str, from_code: str, to_code: str) -> None:
        records = self._history.get(pair_key)
        if not records:
            self._backend.clear(EMPTY_TITLE)
            logger.debug("📊 %s: історія порожня, графік очищено", pair_key)
            return

        self._backend.render_series(
            [f"{format_amount(r.amount)} {from_code}" for r in records],
            [r.converted for r in records],
            chart_title(from_code, to_code),
            point_labels=[point_label(r.converted, to_code) for r in records],
            x_title=f"Amount in {from_code}",
            y_title=f"Converted in {to_code}",
        )
        logger.debug("📊 %s: графік перемальовано (%d точок)", pair_key, len(records))

    def snapshot(self) -> ChartFrame:
        return self._backend.snapshot()


__all__ = ["ChartRenderer", "EMPTY_TITLE", "chart_title", "point_label"]
