# ⌨️ currency_bot/bot/ui/keyboards.py
"""⌨️ Inline-клавіатура під результатом конвертації."""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.setup.constants import AppConstants


def build_converter_keyboard(constants: AppConstants) -> InlineKeyboardMarkup:
    """Два ряди: «поміняти / оновити» та «очистити історію»."""
    buttons = constants.UI.INLINE_BUTTONS
    callbacks = constants.CALLBACKS
    return InlineKeyboardMarkup(
        [
            [
                InlineKeyboardButton(buttons.SWAP, callback_data=callbacks.FX_SWAP.key),
                InlineKeyboardButton(buttons.REFRESH, callback_data=callbacks.FX_REFRESH.key),
            ],
            [InlineKeyboardButton(buttons.CLEAR, callback_data=callbacks.FX_CLEAR.key)],
        ]
    )


__all__ = ["build_converter_keyboard"]
