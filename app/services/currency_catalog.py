"""Reference currency data sourced from CLDR."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass

from babel import Locale, UnknownLocaleError
from babel.numbers import get_currency_precision, get_currency_symbol

from .iso4217 import numeric_code_for


@dataclass(frozen=True)
class ReferenceCurrency:
    """An official currency as described by the reference dataset."""

    iso_code: str
    numeric_iso_code: int | None
    decimal_digits: int
    name: str | None = None
    symbol: str | None = None


class ReferenceCurrencyCatalog(ABC):
    """Read-only access to official currency definitions for a locale."""

    @abstractmethod
    def all_currencies(self, locale: str) -> list[ReferenceCurrency]:
        """Return every official currency described for `locale`."""

    def get_currency(self, iso_code: str, locale: str) -> ReferenceCurrency | None:
        """Return the entry for `iso_code`, or None when the locale lacks it."""

        wanted = iso_code.upper()
        for currency in self.all_currencies(locale):
            if currency.iso_code == wanted:
                return currency
        return None


class CldrCurrencyCatalog(ReferenceCurrencyCatalog):
    """Catalog backed by the CLDR data shipped with Babel."""

    def all_currencies(self, locale: str) -> list[ReferenceCurrency]:
        return list(_load_cldr_currencies(_normalize_locale(locale)))


class StaticCurrencyCatalog(ReferenceCurrencyCatalog):
    """In-memory catalog serving the same entries for every locale."""

    def __init__(self, currencies: Iterable[ReferenceCurrency]):
        self._currencies = tuple(currencies)

    def all_currencies(self, locale: str) -> list[ReferenceCurrency]:
        return list(self._currencies)


def _normalize_locale(locale: str) -> str:
    return locale.replace("-", "_")


@functools.lru_cache(maxsize=32)
def _load_cldr_currencies(locale: str) -> tuple[ReferenceCurrency, ...]:
    """Build the reference entries for a locale.

    Raises:
        UnknownLocaleError: If CLDR has no data for `locale`.
    """

    try:
        parsed = Locale.parse(locale)
    except ValueError as exc:
        raise UnknownLocaleError(locale) from exc

    entries: list[ReferenceCurrency] = []
    for iso_code, name in sorted(parsed.currencies.items()):
        # CLDR also lists a few non ISO 4217 identifiers; only keep three letter codes.
        if len(iso_code) != 3 or not iso_code.isalpha():
            continue
        entries.append(
            ReferenceCurrency(
                iso_code=iso_code,
                numeric_iso_code=numeric_code_for(iso_code),
                decimal_digits=get_currency_precision(iso_code),
                name=name,
                symbol=get_currency_symbol(iso_code, locale=parsed),
            )
        )
    return tuple(entries)


def localized_currency_data(iso_code: str, locale: str) -> tuple[str, str] | None:
    """Return the CLDR (name, symbol) pair of a currency in `locale`, if known."""

    try:
        parsed = Locale.parse(_normalize_locale(locale))
    except (UnknownLocaleError, ValueError):
        return None

    code = iso_code.upper()
    name = parsed.currencies.get(code)
    if not name:
        return None
    return name, get_currency_symbol(code, locale=parsed)


def init_catalog(app, catalog: ReferenceCurrencyCatalog | None = None) -> None:
    """Attach the reference catalog to the Flask app."""

    app.extensions["currency_catalog"] = catalog if catalog is not None else CldrCurrencyCatalog()
