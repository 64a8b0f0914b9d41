# 🔤 currency_bot/infrastructure/image_generation/font_service.py
"""
🔤 FontService — шукає та кешує шрифти для генерації графіків.

🔹 Пріоритет джерел: конфіг → системні дефолти → Pillow fallback.
🔹 Кешує пари `(FontType, size)` у памʼяті, аби уникнути зайвих дискових звернень.
🔹 Надає утиліту для вимірювання ширини тексту вибраним шрифтом.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from PIL import Image, ImageDraw, ImageFont	# 🖼️ Робота зі шрифтами та вимірюваннями

# 🔠 Системні імпорти
import logging	# 🧾 Логування fallback-ів
from pathlib import Path	# 📂 Операції з шляхами
from typing import Dict, Iterable, List, Optional, Sequence, Tuple	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.config.config_service import ConfigService	# ⚙️ Конфігураційний сервіс
from currency_bot.domain.chart.interfaces import FontLike, FontType, IFontService	# ✍️ Доменні контракти
from currency_bot.shared.utils.logger import LOG_NAME	# 🏷️ Імʼя базового логера

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(LOG_NAME)

DEFAULT_BOLD_PATHS: Sequence[str] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",	# 🐧 Linux
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",	# 🐧 Liberation
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",	# 🍎 macOS Arial
    r"C:\Windows\Fonts\arialbd.ttf",	# 🪟 Arial Bold
)
DEFAULT_REGULAR_PATHS: Sequence[str] = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",	# 🐧 Linux
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",	# 🐧 Liberation
    "/System/Library/Fonts/Supplemental/Arial.ttf",	# 🍎 macOS Arial
    r"C:\Windows\Fonts\arial.ttf",	# 🪟 Arial
)


# ================================
# 🏛️ СЕРВІС ШРИФТІВ
# ================================
class FontService(IFontService):
    """✍️ Реалізація `IFontService` із ручним кешем і fallback-ами."""

    def __init__(self, config_service: Optional[ConfigService] = None) -> None:
        self._config = config_service or ConfigService()

        self._search: Dict[FontType, List[Path]] = {
            FontType.BOLD: self._chain_paths(
                [Path(p) for p in self._get_cfg_list("chart.font_paths.bold")],
                [Path(p) for p in DEFAULT_BOLD_PATHS],
            ),
            FontType.REGULAR: self._chain_paths(
                [Path(p) for p in self._get_cfg_list("chart.font_paths.regular")],
                [Path(p) for p in DEFAULT_REGULAR_PATHS],
            ),
        }
        self._dummy_draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))	# 🖌️ «Полотно» для вимірів
        self._cache: Dict[Tuple[FontType, int], FontLike] = {}	# ♻️ Кеш шрифтів

    # ================================
    # 📣 ПУБЛІЧНЕ API
    # ================================
    def get_font(self, font_type: FontType, size: int) -> FontLike:
        """🔤 Повертає шрифт обраного типу/розміру з кешем та fallback-ами."""
        key = (font_type, size)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        for path in self._search[font_type]:
            try:
                if path.exists():
                    font = ImageFont.truetype(str(path), size)
                    self._cache[key] = font
                    logger.debug("✅ Шрифт %s (%s pt) завантажено з %s", font_type.value, size, path)
                    return font
            except OSError as exc:	# ⚠️ Файл може бути пошкоджений
                logger.debug("⚠️ Неможливо прочитати шрифт %s: %s", path, exc)

        logger.warning("⚠️ Шрифт '%s' не знайдено, використовую стандартний.", font_type.value)
        fallback = self._load_default(size)
        self._cache[key] = fallback
        return fallback

    def get_text_width(self, text: str, font: FontLike) -> int:
        """📏 Обчислює ширину тексту у пікселях для переданого шрифту."""
        if not text:
            return 0
        bbox = self._dummy_draw.textbbox((0, 0), str(text), font=font)
        return int(bbox[2] - bbox[0])

    # ================================
    # 🧰 ДОПОМІЖНІ МЕТОДИ
    # ================================
    @staticmethod
    def _load_default(size: int) -> FontLike:
        """🪢 Pillow fallback (масштабований у Pillow ≥ 10.1)."""
        try:
            return ImageFont.load_default(size=size)
        except TypeError:
            return ImageFont.load_default()

    def _get_cfg_list(self, key: str) -> List[str]:
        """🧾 Повертає списки шляхів із конфіга; ігнорує не-списки."""
        raw_value = self._config.get(key, [])
        if not isinstance(raw_value, (list, tuple)):
            return []
        return [str(item).strip() for item in raw_value if str(item).strip()]

    @staticmethod
    def _chain_paths(*groups: Iterable[Path]) -> List[Path]:
        """🔗 Обʼєднує групи шляхів у один список без дублів."""
        unique: List[Path] = []
        for group in groups:
            for path in group:
                if path not in unique:
                    unique.append(path)
        return unique


__all__ = ["FontService"]
