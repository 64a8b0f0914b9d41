# ⚙️ currency_bot/config/__init__.py
"""⚙️ Конфігурація (YAML + .env) та композиція застосунку."""
