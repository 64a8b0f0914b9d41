# 🎛️ currency_bot/bot/handlers/__init__.py
"""🎛️ Глобальні хендлери апдейтів."""
