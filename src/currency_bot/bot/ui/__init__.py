# 🎨 currency_bot/bot/ui/__init__.py
"""🎨 Тексти, клавіатури та тости."""
