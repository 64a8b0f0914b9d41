"""
🧪 test_config_service.py — unit-тести для ConfigService

Перевіряє:
- Singleton і скидання
- Значення з config.yaml за крапковими ключами
- ENV перекриває YAML
- override() для тестів/CLI
"""

from currency_bot.config.config_service import ConfigService


def test_singleton_and_reset():
    first = ConfigService()
    assert ConfigService() is first
    ConfigService.reset()
    assert ConfigService() is not first


def test_yaml_defaults():
    config = ConfigService()
    assert config.get("exchange_api.base_url") == "https://v6.exchangerate-api.com/v6"
    assert config.get("exchange_api.timeout_sec") is None
    assert config.get("converter.default_from") == "USD"
    assert config.get("converter.default_to") == "INR"
    assert config.get("ui.toast_seconds") == 2
    assert config.get("ui.reveal_delay_ms") == 50


def test_missing_key_returns_default():
    config = ConfigService()
    assert config.get("nope.nothing", "fallback") == "fallback"
    assert config.get("exchange_api.base_url.deeper") is None


def test_env_overrides_yaml(monkeypatch):
    monkeypatch.setenv("EXCHANGE_API_KEY", "from-env")
    monkeypatch.setenv("EXCHANGE_API_BASE_URL", "https://mirror.example/v6")
    ConfigService.reset()

    config = ConfigService()

    assert config.get("exchange_api.api_key") == "from-env"
    assert config.get("exchange_api.base_url") == "https://mirror.example/v6"
    assert config.get("exchange_api.base_currency") == "USD"


def test_override_merges_deeply():
    config = ConfigService()
    config.override({"ui.toast_seconds": 5})
    assert config.get("ui.toast_seconds") == 5
    assert config.get("ui.reveal_delay_ms") == 50
