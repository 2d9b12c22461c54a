from __future__ import annotations

import pytest

pytestmark = pytest.mark.usefixtures("clean_currencies")


def test_add_currency_command_creates_currency(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["add-currency", "usd", "--rate", "1.25"])

    assert result.exit_code == 0, result.output
    assert "Created USD" in result.output
    assert "numeric=840" in result.output


def test_add_currency_command_reports_conflicts(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["add-currency", "EUR"])

    result = runner.invoke(args=["add-currency", "EUR"])

    assert result.exit_code != 0
    assert "already exists" in result.output


def test_add_currency_command_rejects_non_positive_rate(app):
    result = app.test_cli_runner().invoke(args=["add-currency", "EUR", "--rate", "0"])

    assert result.exit_code != 0
    assert "--rate" in result.output


def test_add_currency_command_rejects_malformed_iso_code(app):
    result = app.test_cli_runner().invoke(args=["add-currency", "TOOLONG", "--unofficial"])

    assert result.exit_code != 0
    assert "three ASCII letters" in result.output


def test_reference_currencies_command_lists_cldr_entries(app):
    result = app.test_cli_runner().invoke(args=["reference-currencies", "--locale", "en"])

    assert result.exit_code == 0
    assert "USD 840 2 US Dollar" in result.output.splitlines()


def test_reference_currencies_command_rejects_unknown_locale(app):
    result = app.test_cli_runner().invoke(args=["reference-currencies", "--locale", "xx_YY"])

    assert result.exit_code != 0
