"""
🧪 test_logger.py — централізоване логування

Перевіряє:
- Консоль + файл із ротацією
- Повторна ініціалізація замінює хендлери
- JSON-формат з extra-полями
- Приглушення сторонніх логерів
"""

import json
import logging
from logging.handlers import TimedRotatingFileHandler

import pytest

from currency_bot.shared.utils.logger import LOG_NAME, JsonFormatter, init_logging_from_config


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger(LOG_NAME)
    saved = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in saved[0]:
        root.addHandler(handler)
    root.setLevel(saved[1])


def test_console_and_file_handlers(tmp_path):
    log_file = tmp_path / "logs" / "bot.log"
    logger = init_logging_from_config({"level": "INFO", "file": str(log_file), "file_level": "DEBUG"})

    assert logger.name == LOG_NAME
    assert logger.level == logging.DEBUG
    kinds = {type(h) for h in logger.handlers}
    assert kinds == {logging.StreamHandler, TimedRotatingFileHandler}
    assert log_file.parent.is_dir()


def test_reinit_replaces_handlers(tmp_path):
    init_logging_from_config({"file": str(tmp_path / "a.log")})
    logger = init_logging_from_config({"console": False, "file": str(tmp_path / "b.log")})
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], TimedRotatingFileHandler)


def test_file_disabled_and_suppress():
    logger = init_logging_from_config(
        {"level": "WARNING", "file_enabled": False, "suppress": {"httpx": "ERROR"}}
    )
    assert not any(isinstance(h, TimedRotatingFileHandler) for h in logger.handlers)
    assert logger.level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.ERROR


def test_json_file_formatter(tmp_path):
    logger = init_logging_from_config({"console": False, "json": True, "file": str(tmp_path / "j.log")})
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(LOG_NAME, logging.WARNING, __file__, 10, "rate %s", ("USD",), None)
    record.error_code = "api_error"
    record.payload = object()

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "rate USD"
    assert data["level"] == "WARNING"
    assert data["error_code"] == "api_error"
    assert isinstance(data["payload"], str)
