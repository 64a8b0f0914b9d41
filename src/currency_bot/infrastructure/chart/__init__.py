# 📊 currency_bot/infrastructure/chart/__init__.py
"""
📊 Рендеринг графіка історії.

🔹 `ChartRenderer` — історія пари → дані серії.
🔹 `PillowChartBackend` — PNG-бекенд на Pillow.
"""

from __future__ import annotations

from .chart_renderer import EMPTY_TITLE, ChartRenderer
from .pillow_backend import PillowChartBackend

__all__ = ["ChartRenderer", "EMPTY_TITLE", "PillowChartBackend"]
