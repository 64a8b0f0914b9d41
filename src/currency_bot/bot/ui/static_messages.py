# 📝 currency_bot/bot/ui/static_messages.py
"""
📝 Статичні тексти бота-конвертера (HTML parse mode).
"""

# ================================
# 👋 ВІТАННЯ / ДОВІДКА
# ================================
START_TEXT = (
    "💱 <b>Конвертер валют</b>\n\n"
    "Надішліть суму числом або <code>/convert 100</code>.\n"
    "🔁 <code>/pair USD EUR</code> — обрати пару\n"
    "↔️ <code>/swap</code> — поміняти валюти місцями\n"
    "🔄 <code>/refresh</code> — оновити курс для останньої суми\n"
    "📜 <code>/history</code> — історія по поточній парі, <code>/history all</code> — по всіх\n"
    "🧹 <code>/clear</code> — очистити всю історію\n"
    "📋 <code>/currencies</code> — список валют\n\n"
    "Поточна пара: <b>{from_code} → {to_code}</b>"
)

# ================================
# 🍞 ТОСТИ
# ================================
TOAST_CONVERTED = "✅ Конвертацію виконано!"
TOAST_REFRESHED = "✅ Курси оновлено!"
TOAST_REFRESHING = "🔄 Оновлюю актуальні курси..."
TOAST_SWAPPED = "↔️ Валюти поміняно місцями"
TOAST_HISTORY_CLEARED = "🧹 Історію очищено"

# ================================
# 💱 РЕЗУЛЬТАТ
# ================================
RESULT_PLACEHOLDER = "⏳ …"
RESULT_TEXT = "💰 <b>{amount} {from_code}</b> = <b>{converted} {to_code}</b>\n<i>{rate_info}</i>"
PAIR_SELECTED = "🔁 Поточна пара: <b>{from_code} → {to_code}</b>"
PAIR_USAGE = "ℹ️ Формат: <code>/pair USD EUR</code>"
CONVERT_USAGE = "ℹ️ Формат: <code>/convert 100</code>"

# ================================
# 📜 ІСТОРІЯ / ВАЛЮТИ
# ================================
HISTORY_HEADER = "📜 <b>Історія {from_code} → {to_code}</b>"
HISTORY_LINE = "{time} — {amount} {from_code} = {converted} {to_code}"
HISTORY_EMPTY = "📭 Для цієї пари ще немає конвертацій"
HISTORY_ALL_HEADER = "📜 <b>Уся історія конвертацій</b>"
HISTORY_ALL_EMPTY = "📭 Історія конвертацій порожня"
CURRENCIES_HEADER = "📋 <b>Доступні валюти ({count}):</b>\n"

# ================================
# 🚨 ПОМИЛКИ
# ================================
INVALID_AMOUNT = "⚠️ Введіть коректну суму!"
NOTHING_TO_REFRESH = "⚠️ Спочатку введіть суму для конвертації."
UNKNOWN_CURRENCY = "⚠️ Невідома валюта: {code}"
ERROR_FETCH_RATE = "⚠️ Помилка отримання даних конвертації!"
ERROR_LOAD_CURRENCIES = "⚠️ Не вдалося завантажити список валют. Перевірте API-ключ або зʼєднання."
ERROR_CRITICAL = "❌ Критична помилка! Повідом адміністратора."
