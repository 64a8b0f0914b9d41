# 🏭 currency_bot/domain/__init__.py
"""🏭 Доменний шар: конвертація, історія, контракти графіка."""
