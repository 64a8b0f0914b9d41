# 💱 currency_bot/__init__.py
"""💱 Telegram-бот конвертера валют з історією конвертацій і графіком."""

__version__ = "0.1.0"
