"""Test fixture helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, cast

from app.services.currency_catalog import ReferenceCurrency, StaticCurrencyCatalog

_FIXTURE_ROOT = Path(__file__).parent


def load_json(name: str) -> dict[str, Any]:
    """Load a JSON fixture by filename."""

    data = json.loads((_FIXTURE_ROOT / name).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Fixture '{name}' does not contain a JSON object.")
    return cast(dict[str, Any], data)


def load_reference_catalog(name: str = "reference_currencies.json") -> StaticCurrencyCatalog:
    """Build an in-memory reference catalog from a JSON fixture."""

    data = load_json(name)
    return StaticCurrencyCatalog(
        ReferenceCurrency(
            iso_code=entry["iso_code"],
            numeric_iso_code=entry.get("numeric_iso_code"),
            decimal_digits=entry["decimal_digits"],
            name=entry.get("name"),
            symbol=entry.get("symbol"),
        )
        for entry in data["currencies"]
    )
