# 🔤 currency_bot/infrastructure/image_generation/__init__.py
"""🔤 Шрифти для растрових зображень."""

from __future__ import annotations

from .font_service import FontService

__all__ = ["FontService"]
