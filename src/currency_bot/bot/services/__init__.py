# 🧩 currency_bot/bot/services/__init__.py
"""🧩 Callback-інфраструктура та сесії чатів."""
