"""CLI commands for creating currencies and browsing CLDR reference data."""

from __future__ import annotations

from decimal import Decimal

import click
from babel import UnknownLocaleError
from flask import current_app
from flask.cli import with_appcontext

from app.errors import APIError
from app.services import CurrencyDraft, add_currency, list_reference_currencies


@click.command("add-currency")
@click.argument("iso_code")
@click.option("--numeric", "numeric_iso_code", type=click.IntRange(1, 999), default=None)
@click.option("--unofficial", is_flag=True, help="Create a currency absent from CLDR.")
@click.option("--rate", "exchange_rate", type=Decimal, default=Decimal("1"), show_default=True)
@click.option("--disabled", is_flag=True, help="Create the currency disabled.")
@click.option("--shop", "shop_ids", type=int, multiple=True, help="Shop id; repeatable.")
@with_appcontext
def add_currency_command(
    iso_code: str,
    numeric_iso_code: int | None,
    unofficial: bool,
    exchange_rate: Decimal,
    disabled: bool,
    shop_ids: tuple[int, ...],
) -> None:
    """Create ISO_CODE and associate it with shops (all active shops by default)."""

    if exchange_rate <= 0:
        raise click.BadParameter("must be positive", param_hint="--rate")

    try:
        draft = CurrencyDraft(
            iso_code=iso_code,
            numeric_iso_code=numeric_iso_code,
            is_unofficial=unofficial,
            exchange_rate=exchange_rate,
            enabled=not disabled,
            shop_ids=frozenset(shop_ids),
        )
        dto = add_currency(draft)
    except APIError as exc:
        raise click.ClickException(exc.message) from exc

    click.echo(
        f"Created {dto.iso_code} (id={dto.id}, numeric={dto.numeric_iso_code}, "
        f"shops={','.join(str(shop_id) for shop_id in dto.shop_ids) or '-'})."
    )


@click.command("reference-currencies")
@click.option("--locale", default=None, help="CLDR locale, defaults to DEFAULT_LOCALE.")
@with_appcontext
def reference_currencies_command(locale: str | None) -> None:
    """List the official currencies known to CLDR."""

    locale = locale or current_app.config["DEFAULT_LOCALE"]
    try:
        currencies = list_reference_currencies(locale)
    except UnknownLocaleError as exc:
        raise click.BadParameter(f"unknown locale '{locale}'", param_hint="--locale") from exc

    for currency in currencies:
        numeric = f"{currency.numeric_iso_code:03d}" if currency.numeric_iso_code else "---"
        click.echo(f"{currency.iso_code} {numeric} {currency.decimal_digits} {currency.name}")
