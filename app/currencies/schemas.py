"""Marshmallow schemas for currency endpoints."""

from __future__ import annotations

from marshmallow import Schema, fields
from marshmallow.validate import Length, Range, Regexp

from app.services.currency_validator import MAX_EXCHANGE_RATE

_ISO_CODE = Regexp(r"^[A-Za-z]{3}$", error="Iso code must be three letters.")


class CurrencyCreateSchema(Schema):
    """Payload for creating a currency."""

    iso_code = fields.String(required=True, validate=_ISO_CODE)
    numeric_iso_code = fields.Integer(load_default=None, allow_none=True, validate=Range(min=1, max=999))
    unofficial = fields.Boolean(load_default=False)
    exchange_rate = fields.Decimal(
        required=True,
        places=6,
        validate=Range(min=0, max=MAX_EXCHANGE_RATE, min_inclusive=False),
    )
    enabled = fields.Boolean(load_default=True)
    localized_names = fields.Dict(
        keys=fields.String(validate=Length(min=2, max=16)),
        values=fields.String(validate=Length(min=1, max=64)),
        load_default=dict,
    )
    localized_symbols = fields.Dict(
        keys=fields.String(validate=Length(min=2, max=16)),
        values=fields.String(validate=Length(min=1, max=16)),
        load_default=dict,
    )
    shop_ids = fields.List(fields.Integer(validate=Range(min=1)), load_default=list)


class CurrencyResponseSchema(Schema):
    """Serialized currency representation."""

    id = fields.Integer(required=True)
    iso_code = fields.String(required=True)
    numeric_iso_code = fields.Integer(allow_none=True)
    name = fields.String(allow_none=True)
    symbol = fields.String(allow_none=True)
    precision = fields.Integer(required=True)
    exchange_rate = fields.Decimal(required=True, as_string=True)
    enabled = fields.Boolean(required=True)
    unofficial = fields.Boolean(required=True)
    localized_names = fields.Dict(keys=fields.String(), values=fields.String())
    localized_symbols = fields.Dict(keys=fields.String(), values=fields.String())
    shop_ids = fields.List(fields.Integer())


class CurrencyCollectionSchema(Schema):
    """Envelope for paginated currency responses."""

    items = fields.List(fields.Nested(CurrencyResponseSchema), required=True)
    total = fields.Integer(required=True)
    page = fields.Integer(required=True)
    page_size = fields.Integer(required=True)


class CurrencyListQuerySchema(Schema):
    page = fields.Integer(load_default=1, validate=Range(min=1))
    page_size = fields.Integer(load_default=20, validate=Range(min=1, max=100))


class CurrencyValidationResponseSchema(Schema):
    """Outcome of a dry-run validation."""

    iso_code = fields.String(required=True)
    numeric_iso_code = fields.Integer(allow_none=True)
    unofficial = fields.Boolean(required=True)
    message = fields.String(required=True)


class ReferenceQuerySchema(Schema):
    locale = fields.String(load_default=None)


class ReferenceCurrencySchema(Schema):
    iso_code = fields.String(required=True)
    numeric_iso_code = fields.Integer(allow_none=True)
    decimal_digits = fields.Integer(required=True)
    name = fields.String(allow_none=True)
    symbol = fields.String(allow_none=True)


class ReferenceCollectionSchema(Schema):
    locale = fields.String(required=True)
    items = fields.List(fields.Nested(ReferenceCurrencySchema), required=True)
