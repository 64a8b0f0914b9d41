# 🧭 currency_bot/bot/commands/__init__.py
"""🧭 Telegram-фічі (набори команд і callback-ів)."""
