"""CLI entry points."""

from __future__ import annotations

from flask import Flask

from .currencies import add_currency_command, reference_currencies_command


def register_cli(app: Flask) -> None:
    """Register CLI commands on the given Flask app."""

    app.cli.add_command(add_currency_command)
    app.cli.add_command(reference_currencies_command)
