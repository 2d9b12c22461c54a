"""Lookups over already persisted currencies."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy import func, select

from app.database import get_session
from app.models import Currency


class CurrencyStore(ABC):
    """Existence checks used when validating a new currency."""

    @abstractmethod
    def exists(self, iso_code: str) -> bool:
        """Return True when a currency with `iso_code` is stored."""

    @abstractmethod
    def find_by_numeric_code(self, numeric_iso_code: int) -> int | None:
        """Return the id of the currency using `numeric_iso_code`, if any."""

    @abstractmethod
    def all_numeric_codes(self) -> set[int]:
        """Return every numeric code already assigned."""


class SqlCurrencyStore(CurrencyStore):
    """Store backed by the `currencies` table."""

    def __init__(self, session=None):
        self._session = session if session is not None else get_session()

    def exists(self, iso_code: str) -> bool:
        statement = select(Currency.id).where(func.upper(Currency.iso_code) == iso_code.upper())
        return self._session.execute(statement).first() is not None

    def find_by_numeric_code(self, numeric_iso_code: int) -> int | None:
        statement = select(Currency.id).where(Currency.numeric_iso_code == numeric_iso_code)
        return self._session.execute(statement).scalar_one_or_none()

    def all_numeric_codes(self) -> set[int]:
        statement = select(Currency.numeric_iso_code).where(Currency.numeric_iso_code.is_not(None))
        return {code for code in self._session.execute(statement).scalars() if code and code > 0}
