# tests/conftest.py
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

# Додаємо src в sys.path, щоб працював імпорт "currency_bot.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from currency_bot.config.config_service import ConfigService  # noqa: E402
from currency_bot.domain.chart.interfaces import ChartFrame  # noqa: E402
from currency_bot.errors.custom_errors import RateNetworkError  # noqa: E402


# ──────────────────────────────────────────────────────────────────────────────
#                          🔧 Тестові заглушки/фейки
# ──────────────────────────────────────────────────────────────────────────────

class FakeRateClient:
    """Віддає заздалегідь задані курси; невідома пара → RateNetworkError."""

    def __init__(self, rates: Dict[Tuple[str, str], float], codes=None):
        self.rates = dict(rates)
        self.codes = set(codes or {"USD", "EUR", "INR", "UAH"})
        self.calls: List[Tuple[str, str]] = []

    async def list_currencies(self):
        return set(self.codes)

    async def get_pair_rate(self, from_code: str, to_code: str) -> float:
        self.calls.append((from_code, to_code))
        try:
            return self.rates[(from_code, to_code)]
        except KeyError:
            raise RateNetworkError(details=f"no rate for {from_code}/{to_code}") from None


class FakeChartBackend:
    """Записує виклики render_series/clear замість малювання."""

    def __init__(self):
        self.series = []
        self.cleared = []
        self.frame = ChartFrame(title="")

    def render_series(self, labels, values, title, *, point_labels=(), x_title="", y_title=""):
        self.series.append(
            {
                "labels": list(labels),
                "values": list(values),
                "title": title,
                "point_labels": list(point_labels),
                "x_title": x_title,
                "y_title": y_title,
            }
        )
        self.frame = ChartFrame(title=title, image=b"\x89PNG", points=len(values))

    def clear(self, title):
        self.cleared.append(title)
        self.frame = ChartFrame(title=title)

    def snapshot(self):
        return self.frame


@pytest.fixture(autouse=True)
def fresh_config():
    """Кожен тест отримує свіжий singleton ConfigService."""
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def rate_client():
    return FakeRateClient({("USD", "INR"): 83.1234, ("INR", "USD"): 0.012, ("USD", "EUR"): 0.9})


@pytest.fixture
def chart_backend():
    return FakeChartBackend()


@pytest.fixture
def make_rate_client():
    return FakeRateClient
