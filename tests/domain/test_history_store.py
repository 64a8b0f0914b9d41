"""
🧪 test_history_store.py — історія конвертацій по парах

Перевіряє:
- Порядок додавання і ледаче створення послідовності
- Напрямок пари має значення (USD_INR ≠ INR_USD)
- clear() очищає всі пари
- get() повертає копію
"""

from currency_bot.domain.currency.history_store import HistoryStore
from currency_bot.domain.currency.interfaces import ConversionRecord, make_pair_key


def _record(amount: float, rate: float = 2.0) -> ConversionRecord:
    return ConversionRecord(amount=amount, converted=amount * rate, rate=rate, time="Just now", created_at=0.0)


def test_append_keeps_insertion_order():
    store = HistoryStore()
    for amount in (1, 2, 3, 4, 5):
        store.append("USD_INR", _record(amount))

    records = store.get("USD_INR")
    assert [r.amount for r in records] == [1, 2, 3, 4, 5]
    assert len(store) == 5


def test_missing_pair_is_empty():
    store = HistoryStore()
    assert store.get("EUR_GBP") == []
    assert store.pair_keys() == []


def test_pair_direction_matters():
    store = HistoryStore()
    store.append(make_pair_key("usd", "inr"), _record(10))
    store.append(make_pair_key("INR", "USD"), _record(20))

    assert make_pair_key("usd", "inr") == "USD_INR"
    assert [r.amount for r in store.get("USD_INR")] == [10]
    assert [r.amount for r in store.get("INR_USD")] == [20]


def test_clear_wipes_every_pair():
    store = HistoryStore()
    store.append("USD_INR", _record(1))
    store.append("EUR_USD", _record(2))

    store.clear()

    assert store.get("USD_INR") == []
    assert store.get("EUR_USD") == []
    assert len(store) == 0


def test_get_returns_copy():
    store = HistoryStore()
    store.append("USD_INR", _record(1))
    snapshot = store.get("USD_INR")
    snapshot.append(_record(99))
    assert len(store.get("USD_INR")) == 1


def test_all_records_merges_pairs_by_creation_time():
    store = HistoryStore()
    store.append("USD_INR", ConversionRecord(1, 83.0, 83.0, "Just now", created_at=10.0))
    store.append("EUR_USD", ConversionRecord(2, 2.2, 1.1, "Just now", created_at=20.0))
    store.append("USD_INR", ConversionRecord(3, 249.0, 83.0, "Just now", created_at=30.0))

    entries = store.all_records()

    assert [(key, r.amount) for key, r in entries] == [("USD_INR", 1), ("EUR_USD", 2), ("USD_INR", 3)]
    store.clear()
    assert store.all_records() == []
