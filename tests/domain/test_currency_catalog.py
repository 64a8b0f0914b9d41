"""
🧪 test_currency_catalog.py — список валют і валідація кодів
"""

import pytest

from currency_bot.domain.currency.catalog import CurrencyCatalog
from currency_bot.errors.custom_errors import RateApiError, UnknownCurrencyError


@pytest.mark.asyncio
async def test_load_and_validate(rate_client):
    catalog = CurrencyCatalog()
    await catalog.load(rate_client)

    assert catalog.is_loaded
    assert catalog.codes == ["EUR", "INR", "UAH", "USD"]
    assert catalog.validate(" eur ") == "EUR"
    assert "inr" in catalog
    with pytest.raises(UnknownCurrencyError) as exc:
        catalog.validate("GBP")
    assert "GBP" in exc.value.message


def test_unloaded_catalog_checks_shape_only():
    catalog = CurrencyCatalog()
    assert catalog.validate("gbp") == "GBP"
    for bad in ("", "US", "USDT", "12$"):
        with pytest.raises(UnknownCurrencyError):
            catalog.validate(bad)


@pytest.mark.asyncio
async def test_failed_load_keeps_previous_codes(rate_client):
    catalog = CurrencyCatalog()
    await catalog.load(rate_client)

    class _Broken:
        async def list_currencies(self):
            raise RateApiError(api_result="invalid-key")

    with pytest.raises(RateApiError):
        await catalog.load(_Broken())
    assert catalog.is_loaded


def test_code_length_is_configurable():
    catalog = CurrencyCatalog(code_length=4)
    assert catalog.validate("usdt") == "USDT"
    with pytest.raises(UnknownCurrencyError):
        catalog.validate("USD")
