"""Route handlers for currency creation and lookup."""

from __future__ import annotations

from babel import UnknownLocaleError
from flask import current_app, url_for
from flask.views import MethodView

from app.errors import ValidationError
from app.schemas import ErrorMessageSchema
from app.services import (
    CurrencyDraft,
    add_currency,
    get_currency,
    list_currencies,
    list_reference_currencies,
    preview_currency,
)

from . import blp
from .schemas import (
    CurrencyCollectionSchema,
    CurrencyCreateSchema,
    CurrencyListQuerySchema,
    CurrencyResponseSchema,
    CurrencyValidationResponseSchema,
    ReferenceCollectionSchema,
    ReferenceQuerySchema,
)


def _draft_from_payload(payload: dict) -> CurrencyDraft:
    return CurrencyDraft(
        iso_code=payload["iso_code"],
        numeric_iso_code=payload.get("numeric_iso_code"),
        is_unofficial=payload["unofficial"],
        exchange_rate=payload["exchange_rate"],
        enabled=payload["enabled"],
        localized_names=payload["localized_names"],
        localized_symbols=payload["localized_symbols"],
        shop_ids=frozenset(payload["shop_ids"]),
    )


def _serialize_currency(dto) -> dict:
    return {
        "id": dto.id,
        "iso_code": dto.iso_code,
        "numeric_iso_code": dto.numeric_iso_code,
        "name": dto.name,
        "symbol": dto.symbol,
        "precision": dto.precision,
        "exchange_rate": dto.exchange_rate,
        "enabled": dto.enabled,
        "unofficial": dto.unofficial,
        "localized_names": dto.localized_names,
        "localized_symbols": dto.localized_symbols,
        "shop_ids": dto.shop_ids,
    }


@blp.route("")
class CurrencyCollection(MethodView):
    @blp.arguments(CurrencyListQuerySchema, location="query")
    @blp.response(200, CurrencyCollectionSchema())
    def get(self, query_args):
        result = list_currencies(page=query_args["page"], page_size=query_args["page_size"])
        return {
            "items": [_serialize_currency(item) for item in result.items],
            "total": result.total,
            "page": result.page,
            "page_size": result.page_size,
        }

    @blp.arguments(CurrencyCreateSchema)
    @blp.response(201, CurrencyResponseSchema())
    @blp.alt_response(409, schema=ErrorMessageSchema, description="Currency conflicts with stored or CLDR data")
    def post(self, payload):
        dto = add_currency(_draft_from_payload(payload))
        headers = {
            "Location": url_for("Currencies.CurrencyItem", currency_id=dto.id, _external=False)
        }
        return _serialize_currency(dto), 201, headers


@blp.route("/<int:currency_id>")
class CurrencyItem(MethodView):
    @blp.response(200, CurrencyResponseSchema())
    def get(self, currency_id: int):
        return _serialize_currency(get_currency(currency_id))


@blp.route("/validate")
class CurrencyValidation(MethodView):
    @blp.arguments(CurrencyCreateSchema)
    @blp.response(200, CurrencyValidationResponseSchema())
    @blp.alt_response(409, schema=ErrorMessageSchema, description="Currency conflicts with stored or CLDR data")
    def post(self, payload):
        validated = preview_currency(_draft_from_payload(payload))
        return {
            "iso_code": validated.draft.iso_code,
            "numeric_iso_code": validated.numeric_iso_code,
            "unofficial": validated.draft.is_unofficial,
            "message": "Currency can be created.",
        }


@blp.route("/reference")
class ReferenceCurrencies(MethodView):
    @blp.arguments(ReferenceQuerySchema, location="query")
    @blp.response(200, ReferenceCollectionSchema())
    def get(self, query_args):
        locale = query_args.get("locale") or current_app.config["DEFAULT_LOCALE"]
        try:
            items = list_reference_currencies(locale)
        except UnknownLocaleError as exc:
            raise ValidationError(
                f"Unknown locale '{locale}'.",
                payload={"field": "locale"},
            ) from exc
        return {
            "locale": locale,
            "items": [
                {
                    "iso_code": item.iso_code,
                    "numeric_iso_code": item.numeric_iso_code,
                    "decimal_digits": item.decimal_digits,
                    "name": item.name,
                    "symbol": item.symbol,
                }
                for item in items
            ],
        }
