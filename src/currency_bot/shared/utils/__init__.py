# 🧰 currency_bot/shared/utils/__init__.py
"""
🧰 Логування та форматування часу.
"""

from __future__ import annotations

from .logger import LOG_NAME, init_logging_from_config
from .time_formatter import format_relative_minutes, format_relative_time

__all__ = [
    "LOG_NAME",
    "format_relative_minutes",
    "format_relative_time",
    "init_logging_from_config",
]
