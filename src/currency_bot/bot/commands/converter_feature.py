# 💱 currency_bot/bot/commands/converter_feature.py
"""
💱 ConverterFeature — команди та кнопки конвертера валют.

🔹 Реєструє `/start`, `/convert`, `/pair`, `/swap`, `/refresh`, `/clear`, `/history`, `/currencies`
🔹 Число, надіслане звичайним повідомленням, — це теж конвертація
🔹 Після кожної дії надсилає актуальний графік пари (або заголовок порожнього стану)
🔹 Усі обробники обгорнуті `make_error_handler` → `ExceptionHandlerService`
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot, Update                                          # ✉️ Подія від Telegram
from telegram.error import TelegramError                                  # 🤖 Збої Bot API
from telegram.ext import Application, CommandHandler, MessageHandler, filters  # 🤖 Реєстрація хендлерів

# 🔠 Системні імпорти
import asyncio                                                            # ⏱️ Пауза перед показом результату
import logging                                                            # 🧾 Логування операцій
import time                                                               # ⏱️ "Зараз" для відносного часу в історії
from typing import Callable, Dict, Optional, Union, cast                  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.bot.commands.base import BaseFeature                    # 🏛️ Базовий контракт фічі
from currency_bot.bot.services.callback_data import CallbackData          # 🏷️ Ключі callback-ів
from currency_bot.bot.services.callback_registry import CallbackRegistry  # 📚 Реєстр callback-обробників
from currency_bot.bot.services.session import ConverterSession, SessionRegistry  # 🗃️ Сесії чатів
from currency_bot.bot.services.types import BotContext, CallbackHandlerType  # 🔗 Сигнатури
from currency_bot.bot.ui import static_messages as msg                    # 📝 Статичні повідомлення
from currency_bot.bot.ui.keyboards import build_converter_keyboard        # ⌨️ Кнопки під результатом
from currency_bot.config.setup.constants import AppConstants              # ⚙️ Константи застосунку
from currency_bot.domain.currency.catalog import CurrencyCatalog          # 📋 Відомі коди валют
from currency_bot.domain.currency.interfaces import ConversionResult, format_amount  # 💱 Результат конвертації
from currency_bot.errors.custom_errors import AmountValidationError       # ⚠️ Помилка суми
from currency_bot.errors.error_handler import make_error_handler          # 🛡️ Обгортка для безпечного виклику
from currency_bot.errors.exception_handler_service import ExceptionHandlerService  # 🚑 Централізована обробка
from currency_bot.shared.utils.logger import LOG_NAME                     # 🏷️ Ім'я кореневого логера
from currency_bot.shared.utils.time_formatter import format_relative_time  # 🕒 "5 minutes ago"

logger = logging.getLogger(LOG_NAME)


class ConverterFeature(BaseFeature):
    """
    💱 Привʼязує дії користувача до рушія конвертації, історії та графіка сесії.
    """

    def __init__(
        self,
        sessions: SessionRegistry,
        catalog: CurrencyCatalog,
        registry: CallbackRegistry,
        constants: AppConstants,
        exception_handler: ExceptionHandlerService,
        *,
        reveal_delay_ms: int = 50,
        history_limit: int = 10,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.sessions = sessions
        self.catalog = catalog
        self.registry = registry
        self.const = constants
        self._reveal_delay = max(0, int(reveal_delay_ms)) / 1000
        self._history_limit = max(1, int(history_limit))
        self._clock = clock

        safe_wrapper = make_error_handler(exception_handler)
        self._safe_start = cast(CallbackHandlerType, safe_wrapper(self.start))
        self._safe_convert = cast(CallbackHandlerType, safe_wrapper(self.convert_command))
        self._safe_amount = cast(CallbackHandlerType, safe_wrapper(self.amount_message))
        self._safe_pair = cast(CallbackHandlerType, safe_wrapper(self.select_pair))
        self._safe_swap = cast(CallbackHandlerType, safe_wrapper(self.swap))
        self._safe_refresh = cast(CallbackHandlerType, safe_wrapper(self.refresh))
        self._safe_clear = cast(CallbackHandlerType, safe_wrapper(self.clear_history))
        self._safe_history = cast(CallbackHandlerType, safe_wrapper(self.show_history))
        self._safe_currencies = cast(CallbackHandlerType, safe_wrapper(self.list_currencies))

        self.registry.register(self)
        logger.info("💱 ConverterFeature initialised and registered")

    # ================================
    # 🔌 РЕЄСТРАЦІЯ
    # ================================
    def register_handlers(self, application: Application) -> None:
        commands = self.const.LOGIC.COMMANDS
        application.add_handler(CommandHandler([commands.START, commands.HELP], self._safe_start))
        application.add_handler(CommandHandler(commands.CONVERT, self._safe_convert))
        application.add_handler(CommandHandler(commands.PAIR, self._safe_pair))
        application.add_handler(CommandHandler(commands.SWAP, self._safe_swap))
        application.add_handler(CommandHandler(commands.REFRESH, self._safe_refresh))
        application.add_handler(CommandHandler(commands.CLEAR, self._safe_clear))
        application.add_handler(CommandHandler(commands.HISTORY, self._safe_history))
        application.add_handler(CommandHandler(commands.CURRENCIES, self._safe_currencies))
        # Будь-який інший текст трактується як сума
        application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, self._safe_amount))
        logger.info("📝 Converter commands registered")

    def get_callback_handlers(self) -> Dict[CallbackData, CallbackHandlerType]:
        callbacks = self.const.CALLBACKS
        return {
            callbacks.FX_SWAP: self._safe_swap,
            callbacks.FX_REFRESH: self._safe_refresh,
            callbacks.FX_CLEAR: self._safe_clear,
        }

    # ================================
    # 👋 СТАРТ
    # ================================
    async def start(self, update: Update, context: BotContext) -> None:
        session = self._session(update, context)
        await self._reply(
            update,
            msg.START_TEXT.format(from_code=session.selection.from_code, to_code=session.selection.to_code),
            with_keyboard=True,
        )

    # ================================
    # 💱 КОНВЕРТАЦІЯ
    # ================================
    async def convert_command(self, update: Update, context: BotContext) -> None:
        args = list(context.args or [])
        if not args:
            await self._reply(update, msg.CONVERT_USAGE)
            return
        await self._convert(update, context, args[0])

    async def amount_message(self, update: Update, context: BotContext) -> None:
        message = update.effective_message
        if message is None or message.text is None:
            return
        await self._convert(update, context, message.text)

    async def refresh(self, update: Update, context: BotContext) -> None:
        """Повторює останню конвертацію з актуальним курсом (новий запис в історії)."""
        session = self._session(update, context)
        if session.last_amount is None:
            raise AmountValidationError(None, message=msg.NOTHING_TO_REFRESH)
        await session.toast.notify(msg.TOAST_REFRESHING)
        await self._convert(update, context, session.last_amount, is_refresh=True)

    async def _convert(
        self,
        update: Update,
        context: BotContext,
        amount: Union[str, float],
        *,
        is_refresh: bool = False,
    ) -> None:
        session = self._session(update, context)
        selection = session.selection
        result = await session.engine.convert(
            selection.from_code, selection.to_code, amount, is_refresh=is_refresh, announce=False,
        )
        session.last_amount = result.amount
        await self._show_result(session, context.bot, result)
        await self._send_chart(session, context.bot)
        await session.engine.announce(result)                        # 🍞 Тост — після результату

    # ================================
    # 🔁 ПАРА ВАЛЮТ
    # ================================
    async def select_pair(self, update: Update, context: BotContext) -> None:
        args = list(context.args or [])
        if len(args) != 2:
            await self._reply(update, msg.PAIR_USAGE)
            return
        from_code = self.catalog.validate(args[0])
        to_code = self.catalog.validate(args[1])

        session = self._session(update, context)
        session.selection.select(from_code, to_code)
        session.redraw()
        logger.info("🔁 Чат %s обрав пару %s", session.chat_id, session.selection.pair_key)
        await self._reply(update, msg.PAIR_SELECTED.format(from_code=from_code, to_code=to_code))
        await self._send_chart(session, context.bot)

    async def swap(self, update: Update, context: BotContext) -> None:
        session = self._session(update, context)
        session.selection.swap()
        session.redraw()
        await session.toast.notify(msg.TOAST_SWAPPED)
        await self._reply(
            update,
            msg.PAIR_SELECTED.format(from_code=session.selection.from_code, to_code=session.selection.to_code),
        )
        await self._send_chart(session, context.bot)

    # ================================
    # 📜 ІСТОРІЯ
    # ================================
    async def clear_history(self, update: Update, context: BotContext) -> None:
        session = self._session(update, context)
        session.history.clear()
        session.redraw()
        await session.toast.notify(msg.TOAST_HISTORY_CLEARED)
        await self._send_chart(session, context.bot)

    async def show_history(self, update: Update, context: BotContext) -> None:
        """
        `/history` — поточна пара; `/history all` — усі пари разом.
        Найновіші зверху, час рахується заново від `created_at`.
        """
        session = self._session(update, context)
        args = [arg.lower() for arg in (context.args or [])]

        if self.const.LOGIC.HISTORY_ALL_ARG in args:
            entries = session.history.all_records()
            header, empty = msg.HISTORY_ALL_HEADER, msg.HISTORY_ALL_EMPTY
        else:
            selection = session.selection
            entries = [(selection.pair_key, record) for record in session.history.get(selection.pair_key)]
            header = msg.HISTORY_HEADER.format(from_code=selection.from_code, to_code=selection.to_code)
            empty = msg.HISTORY_EMPTY

        if not entries:
            await self._reply(update, empty)
            return

        now = self._clock()
        lines = [header]
        for pair_key, record in reversed(entries[-self._history_limit:]):   # 🔽 Найновіші зверху
            from_code, _, to_code = pair_key.partition("_")
            lines.append(
                msg.HISTORY_LINE.format(
                    time=format_relative_time(record.created_at, now),
                    amount=format_amount(record.amount),
                    from_code=from_code,
                    converted=f"{record.converted:.2f}",
                    to_code=to_code,
                )
            )
        await self._reply(update, "\n".join(lines))

    # ================================
    # 📋 ВАЛЮТИ
    # ================================
    async def list_currencies(self, update: Update, context: BotContext) -> None:
        if not self.catalog.is_loaded:
            await self._reply(update, msg.ERROR_LOAD_CURRENCIES)
            return
        codes = self.catalog.codes
        body = ", ".join(f"<code>{code}</code>" for code in codes)
        await self._reply(update, msg.CURRENCIES_HEADER.format(count=len(codes)) + body)

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _session(self, update: Update, context: BotContext) -> ConverterSession:
        chat = update.effective_chat
        if chat is None:
            raise RuntimeError("Update has no chat")
        return self.sessions.get_or_create(chat.id, context.bot)

    async def _reply(self, update: Update, text: str, *, with_keyboard: bool = False) -> None:
        message = update.effective_message
        if message is None:
            logger.debug("ℹ️ _reply: no message object")
            return
        await message.reply_text(
            text,
            parse_mode=self.const.UI.DEFAULT_PARSE_MODE,
            reply_markup=build_converter_keyboard(self.const) if with_keyboard else None,
        )

    async def _show_result(self, session: ConverterSession, bot: Bot, result: ConversionResult) -> None:
        """
        Показ результату: звичайна конвертація — заглушка, пауза, потім редагування
        (ефект появи навіть для однакових результатів); оновлення — одразу текст.
        """
        text = msg.RESULT_TEXT.format(
            amount=result.amount_display,
            from_code=result.from_code,
            converted=result.converted_display,
            to_code=result.to_code,
            rate_info=result.rate_info,
        )
        parse_mode = self.const.UI.DEFAULT_PARSE_MODE
        keyboard = build_converter_keyboard(self.const)

        if result.is_refresh:
            if session.result_message_id is not None:
                try:
                    await bot.edit_message_text(
                        text,
                        chat_id=session.chat_id,
                        message_id=session.result_message_id,
                        parse_mode=parse_mode,
                        reply_markup=keyboard,
                    )
                    return
                except TelegramError as exc:
                    logger.debug("✏️ Результат не відредаговано, надсилаю новий: %s", exc)
            sent = await bot.send_message(session.chat_id, text, parse_mode=parse_mode, reply_markup=keyboard)
            session.result_message_id = sent.message_id
            return

        placeholder = await bot.send_message(session.chat_id, msg.RESULT_PLACEHOLDER)
        await asyncio.sleep(self._reveal_delay)
        await bot.edit_message_text(
            text,
            chat_id=session.chat_id,
            message_id=placeholder.message_id,
            parse_mode=parse_mode,
            reply_markup=keyboard,
        )
        session.result_message_id = placeholder.message_id

    async def _send_chart(self, session: ConverterSession, bot: Bot) -> None:
        """Замінює попереднє повідомлення з графіком актуальним знімком."""
        frame = session.chart.snapshot()
        previous: Optional[int] = session.chart_message_id
        session.chart_message_id = None
        if previous is not None:
            try:
                await bot.delete_message(session.chat_id, previous)
            except TelegramError as exc:
                logger.debug("📊 Старий графік %s не видалено: %s", previous, exc)

        if frame.is_empty:
            sent = await bot.send_message(session.chat_id, f"📊 {frame.title}")
        else:
            sent = await bot.send_photo(session.chat_id, photo=frame.image, caption=frame.title)
        session.chart_message_id = sent.message_id


__all__ = ["ConverterFeature"]
