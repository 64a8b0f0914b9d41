# 🗃️ currency_bot/bot/services/session.py
"""
🗃️ Сесії конвертера: один чат — одна «сторінка».

🔹 `ConverterSession` тримає пару, історію, графік, тост і рушій конвертації чату.
🔹 `ConverterSessionFactory` збирає нову сесію зі спільного клієнта курсів і конфіга.
🔹 `SessionRegistry` лениво створює сесію при першому зверненні чату.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from telegram import Bot

# 🔠 Системні імпорти
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.config_service import ConfigService
from currency_bot.domain.chart.interfaces import IFontService
from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.interfaces import IRateClient, PairSelection
from currency_bot.domain.currency.services import ConversionEngine
from currency_bot.bot.ui.toast import ToastNotifier
from currency_bot.infrastructure.chart.chart_renderer import ChartRenderer
from currency_bot.infrastructure.chart.pillow_backend import PillowChartBackend
from currency_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)


@dataclass
class ConverterSession:
    chat_id: int
    selection: PairSelection
    history: HistoryStore
    chart: ChartRenderer
    engine: ConversionEngine
    toast: ToastNotifier
    last_amount: Optional[float] = None                 # 🔄 Сума для /refresh
    result_message_id: Optional[int] = None             # 💬 Останній показаний результат
    chart_message_id: Optional[int] = None              # 📊 Останнє повідомлення з графіком

    def redraw(self) -> None:
        """Перемальовує графік для поточної пари."""
        selection = self.selection
        self.chart.render(selection.pair_key, selection.from_code, selection.to_code)


class ConverterSessionFactory:
    """🏭 Збирає сесію; кожна має власну історію та власне полотно графіка."""

    def __init__(
        self,
        rate_client: IRateClient,
        font_service: IFontService,
        config: ConfigService,
        *,
        default_pair: Tuple[str, str] = ("USD", "INR"),
    ) -> None:
        self._rates = rate_client
        self._fonts = font_service
        self._config = config
        self._default_from = str(config.get("converter.default_from", default_pair[0]))
        self._default_to = str(config.get("converter.default_to", default_pair[1]))
        self._toast_seconds = float(config.get("ui.toast_seconds", 2) or 0)

    def __call__(self, chat_id: int, bot: Bot) -> ConverterSession:
        history = HistoryStore()
        chart = ChartRenderer(history, PillowChartBackend.from_config(self._fonts, self._config))
        toast = ToastNotifier(bot, chat_id, lifetime=self._toast_seconds)
        engine = ConversionEngine(self._rates, history, chart_renderer=chart, notifier=toast)
        return ConverterSession(
            chat_id=chat_id,
            selection=PairSelection(self._default_from, self._default_to),
            history=history,
            chart=chart,
            engine=engine,
            toast=toast,
        )


class SessionRegistry:
    """📚 chat_id → ConverterSession, живе разом із процесом."""

    def __init__(self, factory: Callable[[int, Bot], ConverterSession]) -> None:
        self._factory = factory
        self._sessions: Dict[int, ConverterSession] = {}

    def get_or_create(self, chat_id: int, bot: Bot) -> ConverterSession:
        session = self._sessions.get(chat_id)
        if session is None:
            session = self._factory(chat_id, bot)
            self._sessions[chat_id] = session
            logger.info("🆕 Нова сесія для чату %s (%s)", chat_id, session.selection.pair_key)
        return session

    def get(self, chat_id: int) -> Optional[ConverterSession]:
        return self._sessions.get(chat_id)

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["ConverterSession", "ConverterSessionFactory", "SessionRegistry"]
