"""Schemas shared across blueprints."""

from __future__ import annotations

from marshmallow import Schema, fields


class HealthStatusSchema(Schema):
    status = fields.String(required=True)
    app = fields.String()
    default_locale = fields.String()


class ErrorMessageSchema(Schema):
    """Body rendered by the APIError handler."""

    message = fields.String(required=True)
    kind = fields.String()
    field = fields.String()
    field_errors = fields.Dict(keys=fields.String(), values=fields.List(fields.String()))
