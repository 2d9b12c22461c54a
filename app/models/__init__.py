"""SQLAlchemy ORM models for currencies and shops."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Currency(Base):
    """A currency available to the shops of the deployment."""

    __tablename__ = "currencies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    iso_code: Mapped[str] = mapped_column(String(3), unique=True, nullable=False)
    numeric_iso_code: Mapped[Optional[int]] = mapped_column(Integer, unique=True, nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    symbol: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    precision: Mapped[int] = mapped_column(Integer, nullable=False, default=2, server_default="2")
    conversion_rate: Mapped[Decimal] = mapped_column(Numeric(13, 6), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default="1")
    unofficial: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    translations: Mapped[list["CurrencyTranslation"]] = relationship(
        "CurrencyTranslation", back_populates="currency", cascade="all, delete-orphan"
    )
    shop_links: Mapped[list["CurrencyShop"]] = relationship(
        "CurrencyShop", back_populates="currency", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Currency iso_code={self.iso_code} numeric={self.numeric_iso_code}>"


class CurrencyTranslation(Base):
    """Localized name and symbol of a currency."""

    __tablename__ = "currency_translations"
    __table_args__ = (
        UniqueConstraint("currency_id", "locale", name="uq_currency_translations_locale"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id", ondelete="CASCADE"), nullable=False
    )
    locale: Mapped[str] = mapped_column(String(16), nullable=False)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    symbol: Mapped[str] = mapped_column(String(16), nullable=False)

    currency: Mapped["Currency"] = relationship("Currency", back_populates="translations")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<CurrencyTranslation currency={self.currency_id} locale={self.locale}>"


class Shop(Base):
    """A storefront of the multi-shop deployment."""

    __tablename__ = "shops"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default="1")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<Shop name={self.name}>"


class CurrencyShop(Base):
    """Association of a currency with a shop, carrying the shop-level rate."""

    __tablename__ = "currency_shops"
    __table_args__ = (
        UniqueConstraint("currency_id", "shop_id", name="uq_currency_shops_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    currency_id: Mapped[int] = mapped_column(
        ForeignKey("currencies.id", ondelete="CASCADE"), nullable=False
    )
    shop_id: Mapped[int] = mapped_column(
        ForeignKey("shops.id", ondelete="CASCADE"), nullable=False
    )
    conversion_rate: Mapped[Decimal] = mapped_column(Numeric(13, 6), nullable=False)

    currency: Mapped["Currency"] = relationship("Currency", back_populates="shop_links")
    shop: Mapped["Shop"] = relationship("Shop", lazy="joined")

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<CurrencyShop currency={self.currency_id} shop={self.shop_id} rate={self.conversion_rate}>"
