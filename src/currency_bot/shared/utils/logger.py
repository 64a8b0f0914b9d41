# 📜 currency_bot/shared/utils/logger.py
"""
📜 Логування бота-конвертера.

🔹 `init_logging_from_config` налаштовує кореневий логер `currency_bot` з розділу `logging` конфігу.
🔹 Консоль — короткий формат, файл — ротація опівночі (звичайний текст або JSON з extra-полями).
🔹 Галасливі сторонні логери (httpx, telegram) приглушуються рівнями з `suppress`.
"""
from __future__ import annotations

# 🔠 Системні імпорти
import json                                                         # 📦 JSON-рядки для файлу
import logging                                                      # 🪵 Логери Python
import sys                                                          # 🖥️ stdout для консолі
from logging.handlers import TimedRotatingFileHandler               # 📁 Ротація файлів за часом
from pathlib import Path                                            # 📂 Шлях до лог-файлу
from typing import Any, Dict, Mapping, Optional, Union              # 🧰 Типізація

LOG_NAME: str = "currency_bot"                                      # 🏷️ Кореневий логер застосунку
CONSOLE_FORMAT = "[%(levelname).1s] %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] - (%(name)s).%(funcName)s(%(lineno)d) - %(message)s"
DEFAULT_FILE = "logs/currency_bot.log"

_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Один запис — один JSON-обʼєкт; поля з `extra=` додаються як є."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, datefmt="%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "name": record.name,
            "func": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RECORD_ATTRS or key in payload:
                continue
            try:
                json.dumps(value)
                payload[key] = value
            except (TypeError, ValueError):
                payload[key] = str(value)                           # 🔄 Несеріалізоване — рядком
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _to_level(value: Union[str, int, None], default: int) -> int:
    if isinstance(value, int):
        return value
    if not value:
        return default
    return getattr(logging, str(value).upper(), default)


def _file_handler(path: str, json_mode: bool) -> logging.Handler:
    log_path = Path(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = TimedRotatingFileHandler(str(log_path), when="midnight", backupCount=7, encoding="utf-8")
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(FILE_FORMAT))
    return handler


def init_logging_from_config(config: Optional[Mapping[str, Any]]) -> logging.Logger:
    """
    Налаштовує кореневий логер за розділом `logging`.

    Ключі: `level`, `console`, `json`, `file`, `file_enabled`, `file_level`, `suppress`.
    Повторний виклик замінює хендлери, а не додає нові.
    """
    node = config or {}
    level = _to_level(node.get("level"), logging.INFO)
    file_level = _to_level(node.get("file_level"), level)
    console = node.get("console", True) is not False
    file_path = (node.get("file") or DEFAULT_FILE) if node.get("file_enabled", True) else None

    root_logger = logging.getLogger(LOG_NAME)
    for handler in list(root_logger.handlers):                      # 🧹 Прибираємо попередні хендлери
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(min(level, file_level) if file_path else level)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if file_path:
        file_handler = _file_handler(file_path, bool(node.get("json")))
        file_handler.setLevel(file_level)
        root_logger.addHandler(file_handler)

    for name, suppressed in (node.get("suppress") or {}).items():
        logging.getLogger(name).setLevel(_to_level(suppressed, logging.WARNING))

    root_logger.info(
        "✅ Logging initialized | level=%s console=%s file=%s",
        logging.getLevelName(level), "ON" if console else "OFF", file_path or "OFF",
    )
    return root_logger


__all__ = ["LOG_NAME", "JsonFormatter", "init_logging_from_config"]
