# 🏗️ currency_bot/infrastructure/__init__.py
"""🏗️ Інфраструктура: HTTP-клієнт курсів, рендеринг графіка, шрифти."""
