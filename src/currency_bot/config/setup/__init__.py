# 🧱 currency_bot/config/setup/__init__.py
"""🧱 Константи, DI-контейнер і реєстратор хендлерів."""
