"""Service layer for creating and reading currencies."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from flask import current_app
from sqlalchemy import asc, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import get_session
from app.errors import (
    APIError,
    ConstraintKind,
    CurrencyConstraintError,
    CurrencyCreationError,
    ValidationError,
)
from app.logging import currency_log_extra
from app.models import Currency, CurrencyShop, CurrencyTranslation, Shop

from .currency_catalog import ReferenceCurrency, ReferenceCurrencyCatalog, localized_currency_data
from .currency_store import CurrencyStore, SqlCurrencyStore
from .currency_validator import CurrencyCreationValidator, CurrencyDraft, ValidatedCurrency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrencyDTO:
    """Immutable representation of a stored currency."""

    id: int
    iso_code: str
    numeric_iso_code: int | None
    name: str | None
    symbol: str | None
    precision: int
    exchange_rate: Decimal
    enabled: bool
    unofficial: bool
    localized_names: dict[str, str]
    localized_symbols: dict[str, str]
    shop_ids: list[int]


@dataclass(frozen=True)
class CurrencyListResult:
    """Paginated collection wrapper for currencies."""

    items: list[CurrencyDTO]
    total: int
    page: int
    page_size: int


def get_catalog() -> ReferenceCurrencyCatalog:
    return current_app.extensions["currency_catalog"]


def build_validator(
    *,
    catalog: ReferenceCurrencyCatalog | None = None,
    store: CurrencyStore | None = None,
    locale: str | None = None,
    rng: random.Random | None = None,
) -> CurrencyCreationValidator:
    """Assemble a validator from explicit collaborators or the app defaults."""

    return CurrencyCreationValidator(
        catalog if catalog is not None else get_catalog(),
        store if store is not None else SqlCurrencyStore(get_session()),
        locale=locale or current_app.config["DEFAULT_LOCALE"],
        rng=rng,
    )


def preview_currency(draft: CurrencyDraft, **collaborators) -> ValidatedCurrency:
    """Run every creation check without persisting anything."""

    return build_validator(**collaborators).run(draft)


def add_currency(
    draft: CurrencyDraft,
    *,
    catalog: ReferenceCurrencyCatalog | None = None,
    store: CurrencyStore | None = None,
    locale: str | None = None,
    rng: random.Random | None = None,
) -> CurrencyDTO:
    """Validate, persist and associate a new currency with its shops."""

    session = get_session()
    catalog = catalog if catalog is not None else get_catalog()
    locale = locale or current_app.config["DEFAULT_LOCALE"]
    validator = build_validator(catalog=catalog, store=store, locale=locale, rng=rng)

    try:
        validated = validator.run(draft)
    except CurrencyConstraintError as exc:
        logger.warning(
            "Currency rejected",
            extra=currency_log_extra(
                event="currency.rejected",
                iso_code=draft.iso_code,
                numeric_iso_code=draft.numeric_iso_code,
                status=exc.kind.value,
            ),
        )
        raise

    shops = _resolve_shops(draft.shop_ids)
    reference = None if draft.is_unofficial else catalog.get_currency(draft.iso_code, locale)
    currency = _build_currency(validated, reference, locale)

    for shop in shops:
        currency.shop_links.append(CurrencyShop(shop_id=shop.id, conversion_rate=draft.exchange_rate))

    session.add(currency)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        _raise_integrity_error(exc, currency)
    except SQLAlchemyError as exc:
        session.rollback()
        raise CurrencyCreationError("Failed to create new currency") from exc

    session.refresh(currency)
    logger.info(
        "Currency created",
        extra=currency_log_extra(
            event="currency.created",
            iso_code=currency.iso_code,
            numeric_iso_code=currency.numeric_iso_code,
            status="created",
            shop_count=len(shops),
        ),
    )
    return _to_dto(currency)


def get_currency(currency_id: int) -> CurrencyDTO:
    session = get_session()
    currency = session.get(Currency, currency_id)
    if currency is None:
        raise APIError("Currency not found.", status_code=404)
    return _to_dto(currency)


def list_currencies(*, page: int = 1, page_size: int = 20) -> CurrencyListResult:
    """Return a paginated list of currencies ordered by id."""

    session = get_session()
    query = session.query(Currency).order_by(asc(Currency.id))

    total = query.count()
    items = query.offset((page - 1) * page_size).limit(page_size).all()
    return CurrencyListResult(
        items=[_to_dto(currency) for currency in items],
        total=total,
        page=page,
        page_size=page_size,
    )


def list_reference_currencies(locale: str | None = None) -> list[ReferenceCurrency]:
    return get_catalog().all_currencies(locale or current_app.config["DEFAULT_LOCALE"])


def _resolve_shops(shop_ids: frozenset[int]) -> list[Shop]:
    session = get_session()
    if not shop_ids:
        return list(session.scalars(select(Shop).where(Shop.active.is_(True)).order_by(Shop.id)))

    shops = list(session.scalars(select(Shop).where(Shop.id.in_(shop_ids)).order_by(Shop.id)))
    missing = sorted(shop_ids - {shop.id for shop in shops})
    if missing:
        raise ValidationError(
            f"Unknown shop ids: {', '.join(str(shop_id) for shop_id in missing)}.",
            payload={"field": "shop_ids"},
        )
    return shops


def _build_currency(
    validated: ValidatedCurrency,
    reference: ReferenceCurrency | None,
    default_locale: str,
) -> Currency:
    draft = validated.draft
    currency = Currency(
        iso_code=draft.iso_code,
        numeric_iso_code=validated.numeric_iso_code,
        precision=current_app.config["DEFAULT_CURRENCY_PRECISION"],
        conversion_rate=draft.exchange_rate,
        active=draft.enabled,
        unofficial=draft.is_unofficial,
    )
    # Official currencies take their precision and numeric code from CLDR.
    if reference is not None:
        currency.precision = reference.decimal_digits
        currency.numeric_iso_code = reference.numeric_iso_code

    for translation in _localized_translations(draft, default_locale):
        currency.translations.append(translation)
        if translation.locale == default_locale:
            currency.name = translation.name
            currency.symbol = translation.symbol
    return currency


def _localized_translations(draft: CurrencyDraft, default_locale: str) -> list[CurrencyTranslation]:
    """Merge explicit names/symbols with CLDR data for every supported locale."""

    locales: list[str] = [default_locale]
    for locale in (
        *current_app.config["SUPPORTED_LOCALES"],
        *draft.localized_names,
        *draft.localized_symbols,
    ):
        if locale not in locales:
            locales.append(locale)

    translations = []
    for locale in locales:
        cldr = localized_currency_data(draft.iso_code, locale)
        cldr_name, cldr_symbol = cldr if cldr is not None else (draft.iso_code, draft.iso_code)
        translations.append(
            CurrencyTranslation(
                locale=locale,
                name=draft.localized_names.get(locale) or cldr_name,
                symbol=draft.localized_symbols.get(locale) or cldr_symbol,
            )
        )
    return translations


def _raise_integrity_error(exc: IntegrityError, currency: Currency) -> None:
    message = str(getattr(exc, "orig", exc)).lower()

    if "numeric_iso_code" in message:
        raise CurrencyConstraintError(
            f'Currency with numeric iso code "{currency.numeric_iso_code}" already exists '
            "and cannot be created",
            kind=ConstraintKind.NUMERIC_CODE_EXISTS,
        ) from exc
    if "iso_code" in message:
        raise CurrencyConstraintError(
            f'Currency with iso code "{currency.iso_code}" already exists and cannot be created',
            kind=ConstraintKind.ISO_CODE_EXISTS,
        ) from exc

    raise CurrencyCreationError("Failed to create new currency") from exc


def _to_dto(currency: Currency) -> CurrencyDTO:
    return CurrencyDTO(
        id=currency.id,
        iso_code=currency.iso_code,
        numeric_iso_code=currency.numeric_iso_code,
        name=currency.name,
        symbol=currency.symbol,
        precision=currency.precision,
        exchange_rate=currency.conversion_rate,
        enabled=currency.active,
        unofficial=currency.unofficial,
        localized_names={item.locale: item.name for item in currency.translations},
        localized_symbols={item.locale: item.symbol for item in currency.translations},
        shop_ids=sorted(link.shop_id for link in currency.shop_links),
    )
