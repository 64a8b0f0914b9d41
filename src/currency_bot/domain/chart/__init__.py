# 📈 currency_bot/domain/chart/__init__.py
"""
📈 Контракти графіка.

🔹 `IChartBackend` — вузький інтерфейс рендерингу серії (`render_series` / `clear` / `snapshot`).
🔹 `ChartFrame` — знімок останнього стану графіка.
"""

from __future__ import annotations

from .interfaces import ChartFrame, FontType, IChartBackend, IFontService

__all__ = ["ChartFrame", "FontType", "IChartBackend", "IFontService"]
