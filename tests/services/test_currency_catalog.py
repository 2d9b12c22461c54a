from __future__ import annotations

import pytest
from babel import UnknownLocaleError

from app.services.currency_catalog import (
    CldrCurrencyCatalog,
    StaticCurrencyCatalog,
    localized_currency_data,
)
from app.services.iso4217 import NUMERIC_CODES, numeric_code_for
from tests.factories import make_reference_currency
from tests.fixtures import load_reference_catalog


def test_cldr_catalog_exposes_numeric_codes_and_precision():
    catalog = CldrCurrencyCatalog()

    usd = catalog.get_currency("usd", "en")
    jpy = catalog.get_currency("JPY", "en")

    assert usd is not None
    assert usd.numeric_iso_code == 840
    assert usd.decimal_digits == 2
    assert usd.name == "US Dollar"
    assert usd.symbol == "$"
    assert jpy is not None
    assert jpy.decimal_digits == 0


def test_cldr_catalog_localizes_names():
    euro = CldrCurrencyCatalog().get_currency("EUR", "fr_FR")

    assert euro is not None
    assert euro.name == "euro"
    assert euro.numeric_iso_code == 978


def test_cldr_catalog_accepts_hyphenated_locales():
    assert CldrCurrencyCatalog().get_currency("EUR", "fr-FR") is not None


def test_cldr_catalog_only_lists_three_letter_codes():
    currencies = CldrCurrencyCatalog().all_currencies("en")

    assert currencies
    assert all(len(item.iso_code) == 3 and item.iso_code.isalpha() for item in currencies)
    assert len({item.iso_code for item in currencies}) == len(currencies)


def test_cldr_catalog_leaves_historic_codes_without_numeric_value():
    # The Deutsche Mark is still named by CLDR but no longer carries an ISO 4217 number.
    dem = CldrCurrencyCatalog().get_currency("DEM", "en")

    assert dem is not None
    assert dem.numeric_iso_code is None


def test_cldr_catalog_rejects_unknown_locale():
    with pytest.raises(UnknownLocaleError):
        CldrCurrencyCatalog().all_currencies("xx_YY")


def test_unknown_currency_is_absent():
    assert CldrCurrencyCatalog().get_currency("ZZZ", "en") is None


def test_static_catalog_serves_fixture_entries():
    catalog = load_reference_catalog()

    assert catalog.get_currency("KWD", "de").decimal_digits == 3
    assert [item.iso_code for item in catalog.all_currencies("en")][:2] == ["USD", "EUR"]


def test_static_catalog_returns_copies():
    catalog = StaticCurrencyCatalog([make_reference_currency("USD", 840)])

    catalog.all_currencies("en").clear()

    assert len(catalog.all_currencies("en")) == 1


def test_localized_currency_data_falls_back_to_none():
    assert localized_currency_data("ZZZ", "en") is None
    assert localized_currency_data("USD", "not-a-locale") is None
    assert localized_currency_data("usd", "en") == ("US Dollar", "$")


def test_numeric_code_table_is_consistent():
    assert numeric_code_for("eur") == 978
    assert numeric_code_for("ZZZ") is None
    assert len(set(NUMERIC_CODES.values())) == len(NUMERIC_CODES)
    assert all(1 <= code <= 999 for code in NUMERIC_CODES.values())
