"""Validation and numeric code deduction for new currencies.

The validator only reads from its two collaborators: the CLDR reference
catalog and the store of persisted currencies. Every rejection is raised as a
`CurrencyConstraintError` whose `kind` names the violated rule.
"""

from __future__ import annotations

import random
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from app.errors import ConstraintKind, CurrencyConstraintError, ValidationError

from .currency_catalog import ReferenceCurrency, ReferenceCurrencyCatalog
from .currency_store import CurrencyStore

MIN_NUMERIC_ISO_CODE = 1
MAX_NUMERIC_ISO_CODE = 999
# Largest value a Numeric(13, 6) conversion_rate column holds.
MAX_EXCHANGE_RATE = Decimal("9999999.999999")

_ISO_CODE_PATTERN = re.compile(r"[A-Z]{3}")


@dataclass(frozen=True)
class CurrencyDraft:
    """Immutable definition of a currency to create."""

    iso_code: str
    exchange_rate: Decimal
    numeric_iso_code: int | None = None
    is_unofficial: bool = False
    enabled: bool = True
    localized_names: Mapping[str, str] = field(default_factory=dict)
    localized_symbols: Mapping[str, str] = field(default_factory=dict)
    shop_ids: frozenset[int] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "iso_code", self.iso_code.strip().upper())
        object.__setattr__(self, "shop_ids", frozenset(self.shop_ids))

        if not _ISO_CODE_PATTERN.fullmatch(self.iso_code):
            raise ValidationError(
                f"Iso code '{self.iso_code}' must be three ASCII letters.",
                payload={"field": "iso_code"},
            )
        if self.numeric_iso_code is not None and not (
            _is_int(self.numeric_iso_code)
            and MIN_NUMERIC_ISO_CODE <= self.numeric_iso_code <= MAX_NUMERIC_ISO_CODE
        ):
            raise ValidationError(
                f"Numeric iso code must be between {MIN_NUMERIC_ISO_CODE} and {MAX_NUMERIC_ISO_CODE}.",
                payload={"field": "numeric_iso_code"},
            )
        if not Decimal(0) < self.exchange_rate <= MAX_EXCHANGE_RATE:
            raise ValidationError(
                f"Exchange rate must be positive and at most {MAX_EXCHANGE_RATE}.",
                payload={"field": "exchange_rate"},
            )


@dataclass(frozen=True)
class ValidatedCurrency:
    """A draft accepted by the validator along with its final numeric code."""

    draft: CurrencyDraft
    numeric_iso_code: int | None


class CurrencyCreationValidator:
    """Checks a draft against stored currencies and the reference catalog."""

    def __init__(
        self,
        catalog: ReferenceCurrencyCatalog,
        store: CurrencyStore,
        *,
        locale: str,
        rng: random.Random | None = None,
    ):
        self._catalog = catalog
        self._store = store
        self._locale = locale
        self._rng = rng if rng is not None else random.Random()

    def run(self, draft: CurrencyDraft) -> ValidatedCurrency:
        """Validate `draft` and resolve its numeric ISO code.

        The store is consulted before the catalog, so a duplicate ISO code is
        reported without reading any reference data. When the draft omits its
        numeric code, unofficial currencies receive a random free code; the
        result is not stable across calls.
        """

        self.validate_iso_uniqueness(draft)
        self.validate_numeric_uniqueness(draft)
        self.validate_unofficial_codes(draft)
        self.validate_iso_numeric_consistency(draft)

        if draft.numeric_iso_code is not None:
            return ValidatedCurrency(draft=draft, numeric_iso_code=draft.numeric_iso_code)
        return ValidatedCurrency(draft=draft, numeric_iso_code=self.deduce_numeric_iso_code(draft))

    def validate_iso_uniqueness(self, draft: CurrencyDraft) -> None:
        if self._store.exists(draft.iso_code):
            raise CurrencyConstraintError(
                f'Currency with iso code "{draft.iso_code}" already exists and cannot be created',
                kind=ConstraintKind.ISO_CODE_EXISTS,
            )

    def validate_numeric_uniqueness(self, draft: CurrencyDraft) -> None:
        if draft.numeric_iso_code is None:
            return
        if self._store.find_by_numeric_code(draft.numeric_iso_code) is not None:
            raise CurrencyConstraintError(
                f'Currency with numeric iso code "{draft.numeric_iso_code}" already exists '
                "and cannot be created",
                kind=ConstraintKind.NUMERIC_CODE_EXISTS,
            )

    def validate_unofficial_codes(self, draft: CurrencyDraft) -> None:
        """Reject unofficial currencies that impersonate an official one."""

        if not draft.is_unofficial:
            return

        for currency in self._reference_currencies():
            if currency.iso_code == draft.iso_code:
                raise CurrencyConstraintError(
                    f"Unofficial currency cannot use the official iso code {draft.iso_code}",
                    kind=ConstraintKind.UNOFFICIAL_MATCHES_ISO_CODE,
                )
            if draft.numeric_iso_code is not None and currency.numeric_iso_code == draft.numeric_iso_code:
                raise CurrencyConstraintError(
                    f"Unofficial currency cannot use numeric iso code {draft.numeric_iso_code} "
                    f"of {currency.iso_code}",
                    kind=ConstraintKind.UNOFFICIAL_MATCHES_NUMERIC_CODE,
                )

    def validate_iso_numeric_consistency(self, draft: CurrencyDraft) -> None:
        # Codes of unofficial currencies, and omitted codes, are deduced later.
        if draft.numeric_iso_code is None or draft.is_unofficial:
            return

        for currency in self._reference_currencies():
            if currency.iso_code == draft.iso_code and currency.numeric_iso_code == draft.numeric_iso_code:
                return

        raise CurrencyConstraintError(
            f"There is no real currency matching iso code {draft.iso_code} "
            f"and numeric iso code {draft.numeric_iso_code}",
            kind=ConstraintKind.MISMATCHING_ISO_CODES,
        )

    def deduce_numeric_iso_code(self, draft: CurrencyDraft) -> int | None:
        if draft.is_unofficial:
            return self._deduce_unofficial_numeric_iso_code()
        return self._deduce_official_numeric_iso_code(draft)

    def _deduce_unofficial_numeric_iso_code(self) -> int:
        used = {
            currency.numeric_iso_code
            for currency in self._reference_currencies()
            if _is_valid_numeric_code(currency.numeric_iso_code)
        }
        used.update(self._store.all_numeric_codes())

        candidates = [
            code
            for code in range(MIN_NUMERIC_ISO_CODE, MAX_NUMERIC_ISO_CODE + 1)
            if code not in used
        ]
        if not candidates:
            raise CurrencyConstraintError(
                "No numeric iso code is left for an unofficial currency",
                kind=ConstraintKind.NO_CANDIDATE_NUMERIC_CODE,
            )
        return self._rng.choice(candidates)

    def _deduce_official_numeric_iso_code(self, draft: CurrencyDraft) -> int | None:
        for currency in self._reference_currencies():
            if currency.iso_code == draft.iso_code:
                return currency.numeric_iso_code

        raise CurrencyConstraintError(
            f"There is no real currency with iso code {draft.iso_code}",
            kind=ConstraintKind.INVALID_ISO_CODE,
        )

    def _reference_currencies(self) -> list[ReferenceCurrency]:
        return self._catalog.all_currencies(self._locale)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_valid_numeric_code(value: object) -> bool:
    return _is_int(value) and value > 0
