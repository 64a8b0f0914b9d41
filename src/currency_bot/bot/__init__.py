# 🤖 currency_bot/bot/__init__.py
"""🤖 Шар Telegram: фічі, хендлери, сесії та UI-тексти."""
