# 🧰 currency_bot/shared/__init__.py
"""🧰 Спільні утиліти."""
