# 🖼️ currency_bot/infrastructure/chart/pillow_backend.py
"""
🖼️ PillowChartBackend — малює лінійний графік однієї серії у PNG.

🔹 Кожен `render_series` закриває попереднє зображення й створює нове (instance-per-redraw).
🔹 Сітка, підписи осей, напівпрозора заливка під лінією та підпис значення над кожною точкою.
🔹 `snapshot()` віддає `ChartFrame` із PNG-байтами для надсилання у чат.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import Image, ImageColor, ImageDraw	# 🖼️ Полотно та примітиви

# 🔠 Системні імпорти
import io	# 💾 PNG у памʼяті
import logging	# 🧾 Логи рендерингу
from typing import Any, List, Optional, Sequence, Tuple	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.config_service import ConfigService
from currency_bot.domain.chart.interfaces import ChartFrame, FontType, IChartBackend, IFontService
from currency_bot.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)

RGBA = Tuple[int, int, int, int]

_Y_TICKS = 5	# 📏 Кількість горизонтальних ліній сітки
_POINT_RADIUS = 5
_MAX_X_LABELS = 8	# 🏷️ Далі підписи X проріджуються


def _to_rgba(value: Any, default: str) -> RGBA:
    """🎨 "#rrggbb" / [r, g, b(, a)] → RGBA."""
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    try:
        rgb = ImageColor.getrgb(str(value))
    except ValueError:
        rgb = ImageColor.getrgb(default)
    if len(rgb) == 4:
        return rgb  # type: ignore[return-value]
    return (rgb[0], rgb[1], rgb[2], 255)


class PillowChartBackend(IChartBackend):
    """📈 Растровий бекенд графіка на Pillow."""

    def __init__(
        self,
        font_service: IFontService,
        *,
        width: int = 900,
        height: int = 500,
        padding: int = 70,
        background: Any = "#1e1b4b",
        line_color: Any = "#6366f1",
        fill_color: Any = (139, 92, 246, 40),
        point_color: Any = "#8b5cf6",
        text_color: Any = "#ffffff",
        grid_color: Any = "#3730a3",
    ) -> None:
        self._fonts = font_service
        self._width = int(width)
        self._height = int(height)
        self._padding = int(padding)
        self._background = _to_rgba(background, "#1e1b4b")
        self._line = _to_rgba(line_color, "#6366f1")
        self._fill = _to_rgba(fill_color, "#8b5cf6")
        self._point = _to_rgba(point_color, "#8b5cf6")
        self._text = _to_rgba(text_color, "#ffffff")
        self._grid = _to_rgba(grid_color, "#3730a3")

        self._image: Optional[Image.Image] = None	# 🖼️ Поточне полотно
        self._frame = ChartFrame(title="")	# 📸 Останній знімок

    @classmethod
    def from_config(cls, font_service: IFontService, config: ConfigService) -> "PillowChartBackend":
        node = config.get("chart", {}) or {}
        keys = ("width", "height", "padding", "background", "line_color", "fill_color", "point_color", "text_color", "grid_color")
        return cls(font_service, **{k: node[k] for k in keys if k in node})

    # ================================
    # 📣 ПУБЛІЧНЕ API
    # ================================
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
        if len(labels) != len(values):
            raise ValueError("labels and values must have the same length")
        self._release()

        image = Image.new("RGBA", (self._width, self._height), self._background)
        draw = ImageDraw.Draw(image)
        self._draw_title(draw, title)

        left, top = self._padding + 20, self._padding
        right, bottom = self._width - self._padding // 2, self._height - self._padding
        lo, hi = self._value_range(values)
        points = self._project(values, (left, top, right, bottom), lo, hi)

        self._draw_grid(draw, (left, top, right, bottom), lo, hi)
        image = self._draw_fill(image, points, bottom)
        draw = ImageDraw.Draw(image)
        if len(points) > 1:
            draw.line(points, fill=self._line, width=3, joint="curve")
        self._draw_points(draw, points, point_labels)
        self._draw_x_labels(draw, points, labels, bottom)
        self._draw_axis_titles(draw, x_title, y_title)

        self._image = image
        self._frame = ChartFrame(title=title, image=self._encode(image), points=len(values))
        logger.debug("🖼️ Графік '%s' намальовано (%d точок)", title, len(values))

    def clear(self, title: str) -> None:
        self._release()
        self._frame = ChartFrame(title=title)

    def snapshot(self) -> ChartFrame:
        return self._frame

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    def _release(self) -> None:
        """🧹 Звільняє попереднє полотно до створення нового."""
        if self._image is not None:
            self._image.close()
            self._image = None

    @staticmethod
    def _value_range(values: Sequence[float]) -> Tuple[float, float]:
        lo, hi = min(values), max(values)
        if lo == hi:
            pad = abs(lo) * 0.1 or 1.0
            return lo - pad, hi + pad
        pad = (hi - lo) * 0.1
        return lo - pad, hi + pad

    @staticmethod
    def _project(
        values: Sequence[float], box: Tuple[int, int, int, int], lo: float, hi: float,
    ) -> List[Tuple[float, float]]:
        left, top, right, bottom = box
        count = len(values)
        step = (right - left) / (count - 1) if count > 1 else 0.0
        points = []
        for index, value in enumerate(values):
            x = left + step * index if count > 1 else (left + right) / 2
            y = bottom - (value - lo) / (hi - lo) * (bottom - top)
            points.append((x, y))
        return points

    def _draw_title(self, draw: ImageDraw.ImageDraw, title: str) -> None:
        font = self._fonts.get_font(FontType.BOLD, 24)
        width = self._fonts.get_text_width(title, font)
        draw.text(((self._width - width) / 2, 16), title, font=font, fill=self._text)

    def _draw_grid(
        self, draw: ImageDraw.ImageDraw, box: Tuple[int, int, int, int], lo: float, hi: float,
    ) -> None:
        left, top, right, bottom = box
        font = self._fonts.get_font(FontType.REGULAR, 13)
        for tick in range(_Y_TICKS + 1):
            y = bottom - (bottom - top) * tick / _Y_TICKS
            value = lo + (hi - lo) * tick / _Y_TICKS
            draw.line([(left, y), (right, y)], fill=self._grid, width=1)
            text = f"{value:,.2f}"
            draw.text((left - 8 - self._fonts.get_text_width(text, font), y - 8), text, font=font, fill=self._text)
        draw.line([(left, top), (left, bottom), (right, bottom)], fill=self._text, width=2)

    def _draw_fill(self, image: Image.Image, points: List[Tuple[float, float]], bottom: int) -> Image.Image:
        """🌫️ Напівпрозора заливка під лінією (окремий шар + alpha_composite)."""
        if len(points) < 2:
            return image
        overlay = Image.new("RGBA", image.size, (0, 0, 0, 0))
        polygon = [(points[0][0], bottom), *points, (points[-1][0], bottom)]
        ImageDraw.Draw(overlay).polygon(polygon, fill=self._fill)
        composed = Image.alpha_composite(image, overlay)
        image.close()
        overlay.close()
        return composed

    def _draw_points(
        self, draw: ImageDraw.ImageDraw, points: List[Tuple[float, float]], point_labels: Sequence[str],
    ) -> None:
        font = self._fonts.get_font(FontType.REGULAR, 13)
        for index, (x, y) in enumerate(points):
            draw.ellipse(
                [x - _POINT_RADIUS, y - _POINT_RADIUS, x + _POINT_RADIUS, y + _POINT_RADIUS],
                fill=self._point,
                outline=self._text,
            )
            if index < len(point_labels):
                label = point_labels[index]
                width = self._fonts.get_text_width(label, font)
                draw.text((x - width / 2, y - _POINT_RADIUS - 20), label, font=font, fill=self._text)

    def _draw_x_labels(
        self, draw: ImageDraw.ImageDraw, points: List[Tuple[float, float]], labels: Sequence[str], bottom: int,
    ) -> None:
        font = self._fonts.get_font(FontType.REGULAR, 13)
        stride = max(1, -(-len(labels) // _MAX_X_LABELS))	# ⌈n / max⌉
        for index in range(0, len(labels), stride):
            x, _ = points[index]
            width = self._fonts.get_text_width(labels[index], font)
            draw.text((x - width / 2, bottom + 8), labels[index], font=font, fill=self._text)

    def _draw_axis_titles(self, draw: ImageDraw.ImageDraw, x_title: str, y_title: str) -> None:
        font = self._fonts.get_font(FontType.BOLD, 14)
        if x_title:
            width = self._fonts.get_text_width(x_title, font)
            draw.text(((self._width - width) / 2, self._height - 28), x_title, font=font, fill=self._text)
        if y_title:
            draw.text((12, self._padding - 28), y_title, font=font, fill=self._text)

    @staticmethod
    def _encode(image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        image.convert("RGB").save(buffer, format="PNG")
        return buffer.getvalue()


__all__ = ["PillowChartBackend"]
