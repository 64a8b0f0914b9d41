"""
🧩 interfaces.py — DTO та контракти доменного шару конвертера валют.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from typing import Protocol, Set


# ================================
# 🔑 КЛЮЧ ПАРИ
# ================================
def make_pair_key(from_code: str, to_code: str) -> str:
    """`USD`, `INR` → `USD_INR`. Напрямок зберігається: `INR_USD` — інша пара."""
    return f"{from_code.strip().upper()}_{to_code.strip().upper()}"


def format_amount(value: float) -> str:
    """Сума без зайвих нулів: 100.0 → "100", 12.5 → "12.5"."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True)
class ConversionRecord:
    """Один запис історії: сума → результат за курсом на момент конвертації."""
    amount: float
    converted: float            # повна точність amount * rate (для графіка)
    rate: float
    time: str                   # відносний час, обчислений один раз при створенні
    created_at: float


@dataclass(frozen=True)
class ConversionResult:
    """Готовий до показу результат конвертації."""
    from_code: str
    to_code: str
    amount: float
    rate: float
    converted: float            # округлено до 2 знаків
    pair_key: str
    record: ConversionRecord
    is_refresh: bool = False

    @property
    def rate_info(self) -> str:
        return f"1 {self.from_code} = {self.rate:.4f} {self.to_code}"

    @property
    def converted_display(self) -> str:
        return f"{self.converted:.2f}"

    @property
    def amount_display(self) -> str:
        return format_amount(self.amount)


@dataclass
class PairSelection:
    """Поточна пара валют сесії. `swap()` міняє обидва коди одним присвоєнням."""
    from_code: str
    to_code: str

    def __post_init__(self) -> None:
        self.from_code = self.from_code.strip().upper()
        self.to_code = self.to_code.strip().upper()

    @property
    def pair_key(self) -> str:
        return make_pair_key(self.from_code, self.to_code)

    def swap(self) -> None:
        self.from_code, self.to_code = self.to_code, self.from_code

    def select(self, from_code: str, to_code: str) -> None:
        self.from_code, self.to_code = from_code.strip().upper(), to_code.strip().upper()


# ================================
# 🔌 КОНТРАКТИ
# ================================
class IRateClient(Protocol):
    """📈 Джерело курсів (мережевий клієнт)."""

    async def list_currencies(self) -> Set[str]: ...

    async def get_pair_rate(self, from_code: str, to_code: str) -> float: ...


class IChartRenderer(Protocol):
    """📊 Перемальовує графік історії для пари."""

    def render(self, pair_key: str, from_code: str, to_code: str) -> None: ...


class INotifier(Protocol):
    """🍞 Короткі сповіщення (тости) для користувача."""

    async def notify(self, message: str) -> None: ...


__all__ = [
    "ConversionRecord",
    "ConversionResult",
    "IChartRenderer",
    "INotifier",
    "IRateClient",
    "PairSelection",
    "format_amount",
    "make_pair_key",
]
