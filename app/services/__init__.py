"""Service layer modules."""

from .currency_catalog import (
    CldrCurrencyCatalog,
    ReferenceCurrency,
    ReferenceCurrencyCatalog,
    StaticCurrencyCatalog,
    init_catalog,
)
from .currency_manager import (
    CurrencyDTO,
    CurrencyListResult,
    add_currency,
    build_validator,
    get_currency,
    list_currencies,
    list_reference_currencies,
    preview_currency,
)
from .currency_store import CurrencyStore, SqlCurrencyStore
from .currency_validator import CurrencyCreationValidator, CurrencyDraft, ValidatedCurrency
