"""Smoke tests for Alembic migrations."""

from __future__ import annotations

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

PROJECT_ROOT = Path(__file__).resolve().parents[2]
ALEMBIC_CONFIG_PATH = PROJECT_ROOT / "alembic.ini"

TABLES = {"currencies", "currency_translations", "shops", "currency_shops"}


@pytest.fixture()
def alembic_config(tmp_path):
    """Alembic config pointing to a throwaway SQLite database."""

    config = Config(str(ALEMBIC_CONFIG_PATH))
    config.set_main_option("sqlalchemy.url", f"sqlite:///{tmp_path / 'migrations.db'}")
    return config


def test_alembic_upgrade_and_downgrade(alembic_config):
    command.upgrade(alembic_config, "head")

    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))
    assert TABLES <= set(inspect(engine).get_table_names())

    with engine.connect() as connection:
        shops = connection.execute(text("SELECT name, active FROM shops")).all()
    assert [(name, bool(active)) for name, active in shops] == [("Default shop", True)]

    command.downgrade(alembic_config, "base")

    assert not TABLES & set(inspect(engine).get_table_names())
    engine.dispose()


def test_numeric_iso_code_is_unique(alembic_config):
    command.upgrade(alembic_config, "head")
    engine = create_engine(alembic_config.get_main_option("sqlalchemy.url"))

    unique_columns = {
        tuple(constraint["column_names"])
        for constraint in inspect(engine).get_unique_constraints("currencies")
    }

    assert ("iso_code",) in unique_columns
    assert ("numeric_iso_code",) in unique_columns
    engine.dispose()
