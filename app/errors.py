"""Application-wide error types and Flask error handlers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from flask import Flask, jsonify


class APIError(Exception):
    """Base class for API-level errors."""

    status_code: int = 400

    def __init__(
        self, message: str, *, status_code: int | None = None, payload: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}


class ValidationError(APIError):
    """Error raised for validation failures."""

    status_code = 422


class ConstraintKind(str, Enum):
    """Reasons a currency definition can be rejected."""

    ISO_CODE_EXISTS = "iso_code_exists"
    NUMERIC_CODE_EXISTS = "numeric_code_exists"
    MISMATCHING_ISO_CODES = "mismatching_iso_codes"
    INVALID_ISO_CODE = "invalid_iso_code"
    NO_CANDIDATE_NUMERIC_CODE = "no_candidate_numeric_code"
    UNOFFICIAL_MATCHES_ISO_CODE = "unofficial_matches_iso_code"
    UNOFFICIAL_MATCHES_NUMERIC_CODE = "unofficial_matches_numeric_code"


_CONSTRAINT_FIELDS = {
    ConstraintKind.ISO_CODE_EXISTS: "iso_code",
    ConstraintKind.NUMERIC_CODE_EXISTS: "numeric_iso_code",
    ConstraintKind.UNOFFICIAL_MATCHES_ISO_CODE: "iso_code",
    ConstraintKind.UNOFFICIAL_MATCHES_NUMERIC_CODE: "numeric_iso_code",
    ConstraintKind.MISMATCHING_ISO_CODES: "numeric_iso_code",
    ConstraintKind.INVALID_ISO_CODE: "iso_code",
    ConstraintKind.NO_CANDIDATE_NUMERIC_CODE: "numeric_iso_code",
}


class CurrencyConstraintError(APIError):
    """A currency definition conflicts with stored or reference data."""

    status_code = 409

    def __init__(self, message: str, *, kind: ConstraintKind):
        super().__init__(
            message,
            payload={"kind": kind.value, "field": _CONSTRAINT_FIELDS[kind]},
        )
        self.kind = kind
        # The deduction search running dry is not the caller's fault.
        if kind is ConstraintKind.NO_CANDIDATE_NUMERIC_CODE:
            self.status_code = 500


class CurrencyCreationError(APIError):
    """Persisting a validated currency failed."""

    status_code = 500


DEFAULT_STATUS_MESSAGES: dict[int, str] = {
    400: "Request could not be processed.",
    404: "Resource not found.",
    409: "Request conflicts with existing data.",
    422: "Submitted data is invalid.",
    500: "Internal error.",
}


def register_error_handlers(app: Flask) -> None:
    """Attach error handlers to the Flask application."""

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        message = error.message or DEFAULT_STATUS_MESSAGES.get(error.status_code, "Request failed.")
        payload = error.payload or {}

        response = {"message": message}
        if payload:
            response.update(payload)

        field_errors = _derive_field_errors(payload, default_message=message)
        if field_errors and "field_errors" not in response:
            response["field_errors"] = field_errors

        return jsonify(response), error.status_code


def _derive_field_errors(
    payload: dict[str, Any],
    *,
    default_message: str | None = None,
) -> dict[str, list[str]]:
    """Translate payload fields into a flat field_errors mapping."""

    if not payload:
        return {}

    if isinstance(payload.get("field_errors"), dict):
        return {
            str(field): _normalize_messages(messages)
            for field, messages in payload["field_errors"].items()
            if _normalize_messages(messages)
        }

    field = payload.get("field")
    if field and default_message:
        return {str(field): [default_message]}

    return {}


def _normalize_messages(messages: Any) -> list[str]:
    if messages is None:
        return []
    if isinstance(messages, list):
        return [str(item) for item in messages if item is not None]
    return [str(messages)]
