# 📊 currency_bot/domain/chart/interfaces.py
"""
📊 Контракти рендерингу графіків.

🔹 `IChartBackend` — вузький інтерфейс «намалюй серію / очисти», будь-яка бібліотека за ним.
🔹 `ChartFrame` — знімок поточного стану полотна (заголовок + PNG або порожній стан).
🔹 `FontType` / `IFontService` — шрифти для растрових бекендів.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import ImageFont	# 🔤 Тип шрифту Pillow

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

FontLike = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


class FontType(Enum):
    """🔤 Начертання шрифту."""
    REGULAR = "regular"
    BOLD = "bold"


class IFontService(ABC):
    """✍️ Пошук та кешування шрифтів."""

    @abstractmethod
    def get_font(self, font_type: FontType, size: int) -> FontLike:
        """Повертає шрифт заданого типу/розміру."""

    @abstractmethod
    def get_text_width(self, text: str, font: FontLike) -> int:
        """Ширина тексту в пікселях."""


@dataclass(frozen=True)
class ChartFrame:
    """🖼️ Поточний вміст полотна."""
    title: str
    image: Optional[bytes] = None           # PNG; None — нічого не намальовано
    points: int = 0

    @property
    def is_empty(self) -> bool:
        return self.image is None


class IChartBackend(ABC):
    """
    📈 Бекенд лінійного графіка з однією серією.

    Кожен `render_series` замінює попередній графік повністю: старе полотно
    звільняється до створення нового.
    """

    @abstractmethod
    def render_series(
        self,
        labels: Sequence[str],
        values: Sequence[float],
        title: str,
        *,
        point_labels: Sequence[str] = (),
        x_title: str = "",
        y_title: str = "",
    ) -> None:
        """Малює серію `values` з підписами осі X `labels`."""

    @abstractmethod
    def clear(self, title: str) -> None:
        """Очищає полотно й показує лише заголовок порожнього стану."""

    @abstractmethod
    def snapshot(self) -> ChartFrame:
        """Повертає поточний стан полотна."""


__all__ = ["ChartFrame", "FontLike", "FontType", "IChartBackend", "IFontService"]
