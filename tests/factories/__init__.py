"""Helper factories for building payloads and domain objects in tests."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from app.services.currency_catalog import ReferenceCurrency
from app.services.currency_validator import CurrencyDraft


def make_currency_payload(
    iso_code: str = "USD",
    numeric_iso_code: int | None = None,
    unofficial: bool = False,
    exchange_rate: str = "1.000000",
    **extra: Any,
) -> dict[str, Any]:
    """Return a currency creation payload."""

    payload: dict[str, Any] = {
        "iso_code": iso_code,
        "unofficial": unofficial,
        "exchange_rate": exchange_rate,
    }
    if numeric_iso_code is not None:
        payload["numeric_iso_code"] = numeric_iso_code
    payload.update(extra)
    return payload


def make_draft(
    iso_code: str = "USD",
    numeric_iso_code: int | None = None,
    unofficial: bool = False,
    exchange_rate: Decimal | str = Decimal("1"),
    shop_ids: Iterable[int] = (),
    **extra: Any,
) -> CurrencyDraft:
    """Return a currency draft with sensible defaults."""

    return CurrencyDraft(
        iso_code=iso_code,
        numeric_iso_code=numeric_iso_code,
        is_unofficial=unofficial,
        exchange_rate=Decimal(exchange_rate),
        shop_ids=frozenset(shop_ids),
        **extra,
    )


def make_reference_currency(
    iso_code: str,
    numeric_iso_code: Any = None,
    decimal_digits: int = 2,
) -> ReferenceCurrency:
    """Return a reference entry; `numeric_iso_code` is deliberately untyped for bad-data cases."""

    return ReferenceCurrency(
        iso_code=iso_code,
        numeric_iso_code=numeric_iso_code,
        decimal_digits=decimal_digits,
        name=iso_code,
        symbol=iso_code,
    )
