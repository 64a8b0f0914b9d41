"""
🧪 test_pillow_backend.py — PNG-графік на Pillow
"""

import io

import pytest
from PIL import Image

from currency_bot.config.config_service import ConfigService
from currency_bot.infrastructure.chart.pillow_backend import PillowChartBackend
from currency_bot.infrastructure.image_generation.font_service import FontService


@pytest.fixture
def backend():
    return PillowChartBackend(FontService(ConfigService()), width=400, height=240, padding=40)


def test_render_series_produces_png(backend):
    backend.render_series(
        ["100 USD", "50 USD", "10 USD"],
        [8312.34, 4156.17, 831.23],
        "Conversion Chart (USD → INR)",
        point_labels=["8312.34 INR", "4156.17 INR", "831.23 INR"],
        x_title="Amount in USD",
        y_title="Converted in INR",
    )

    frame = backend.snapshot()
    assert frame.points == 3
    assert frame.image is not None
    with Image.open(io.BytesIO(frame.image)) as image:
        assert image.format == "PNG"
        assert image.size == (400, 240)


def test_single_point_and_flat_values(backend):
    backend.render_series(["1 EUR"], [1.1], "Conversion Chart (EUR → USD)")
    assert backend.snapshot().points == 1
    backend.render_series(["1 EUR", "2 EUR"], [5.0, 5.0], "Conversion Chart (EUR → USD)")
    assert backend.snapshot().points == 2


def test_clear_releases_image(backend):
    backend.render_series(["1 EUR"], [1.1], "t")
    backend.clear("No conversions yet for this pair")

    frame = backend.snapshot()
    assert frame.is_empty
    assert frame.title == "No conversions yet for this pair"
    assert backend._image is None


def test_length_mismatch_is_rejected(backend):
    with pytest.raises(ValueError):
        backend.render_series(["a", "b"], [1.0], "t")


def test_from_config_reads_chart_section():
    config = ConfigService()
    config.override({"chart.width": 320, "chart.height": 200, "chart.line_color": "#ff0000"})

    backend = PillowChartBackend.from_config(FontService(config), config)

    assert (backend._width, backend._height) == (320, 200)
    assert backend._line == (255, 0, 0, 255)
