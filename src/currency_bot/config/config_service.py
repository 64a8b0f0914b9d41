# ⚙️ config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації.

🔹 Клас `ConfigService`:
- Завантажує конфігурацію з .env та config.yaml.
- Надає єдиний метод .get() для доступу до будь-якого параметра через крапкові ключі.
- Працює як Singleton.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import os                                   # 📁 Доступ до змінних середовища
import logging                              # 🧾 Логування
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Dict, Optional      # 🧩 Типізація

# 🧩 Внутрішні модулі проєкту
from currency_bot.shared.utils.logger import LOG_NAME      # 🏷️ Єдине імʼя логера

logger = logging.getLogger(LOG_NAME)

CONFIG_DIR = Path(__file__).parent          # 📂 Директорія з config.yaml

# 🔐 ENV-змінні → крапкові ключі конфігу
_ENV_KEYS: Dict[str, str] = {
    "TELEGRAM_TOKEN": "telegram.bot_token",
    "EXCHANGE_API_KEY": "exchange_api.api_key",
    "EXCHANGE_API_BASE_URL": "exchange_api.base_url",
    "LOG_LEVEL": "logging.level",
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до всіх статичних конфігураційних параметрів проєкту.
    Працює як Singleton — конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None   # 🧩 Singleton-екземпляр
    _config: Dict[str, Any] = {}                  # 📦 Обʼєднана конфігурація зі всіх джерел
    yaml_path: Path = CONFIG_DIR / "config.yaml"  # 📘 Основний YAML-файл

    def __new__(cls):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = {}
            cls._instance._load_all_configs()  # 🔄 Завантаження конфігурації під час першого виклику
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає singleton (наступний виклик перечитає файли)."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет: config.yaml → .env (ENV перекриває YAML).
        """

        # --- 1. YAML-файл ---
        try:
            logger.debug("📘 Завантаження %s", self.yaml_path)
            with open(self.yaml_path, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning("⚠️ Не вдалося завантажити config.yaml: %s", e)

        # --- 2. .env змінні ---
        logger.debug("🔐 Завантаження змінних з .env")
        load_dotenv()  # 🔐 Ініціалізує змінні середовища з файлу .env
        env_vars = {
            dotted: os.getenv(env_name)
            for env_name, dotted in _ENV_KEYS.items()
            if os.getenv(env_name)
        }
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.info("✅ Конфігурацію успішно завантажено.")

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'exchange_api.base_url').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                logger.debug("❓ Ключ '%s' не знайдено, повертаємо значення за замовчуванням", key)
                return default
        return value

    def override(self, values: Dict[str, Any]) -> None:
        """✍️ Перекриває значення крапковими ключами (CLI/тести)."""
        self._deep_update(self._config, self._unflatten_dict(values))

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'exchange_api.api_key' → {'exchange_api': {'api_key': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    def _deep_update(self, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """
        🔁 Рекурсивно обʼєднує два словника.
        Якщо значення — словник, обʼєднує його глибоко.
        """
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                self._deep_update(source[key], value)
            else:
                source[key] = value
