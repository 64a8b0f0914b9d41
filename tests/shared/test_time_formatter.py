"""
🧪 test_time_formatter.py — відносний час для записів історії

Перевіряє:
- Межі хвилин і годин
- Округлення вниз дробових хвилин
- Обчислення від unix-міток
"""

import pytest

from currency_bot.shared.utils.time_formatter import format_relative_minutes, format_relative_time


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (0, "Just now"),
        (0.99, "Just now"),
        (1, "1 minute ago"),
        (1.7, "1 minute ago"),
        (2, "2 minutes ago"),
        (45, "45 minutes ago"),
        (59, "59 minutes ago"),
        (60, "1 hour ago"),
        (119, "1 hour ago"),
        (125, "2 hours ago"),
        (24 * 60, "24 hours ago"),
    ],
)
def test_format_relative_minutes(minutes, expected):
    assert format_relative_minutes(minutes) == expected


def test_format_relative_time_from_timestamps():
    now = 1_700_000_000.0
    assert format_relative_time(now, now) == "Just now"
    assert format_relative_time(now - 30, now) == "Just now"
    assert format_relative_time(now - 90, now) == "1 minute ago"
    assert format_relative_time(now - 3 * 3600, now) == "3 hours ago"


def test_format_relative_time_defaults_to_current_clock(monkeypatch):
    import currency_bot.shared.utils.time_formatter as tf

    monkeypatch.setattr(tf.time, "time", lambda: 10_000.0)
    assert format_relative_time(10_000.0 - 600) == "10 minutes ago"
