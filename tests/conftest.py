"""Shared pytest fixtures."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app import create_app  # noqa: E402
from app.database import SessionLocal, get_engine, get_session  # noqa: E402
from app.models import Currency, CurrencyShop, CurrencyTranslation, Shop  # noqa: E402


@pytest.fixture(scope="session")
def app(tmp_path_factory: pytest.TempPathFactory) -> Iterator:
    """Session-wide Flask application backed by a migrated temporary database."""

    db_path = tmp_path_factory.mktemp("db") / "test.db"
    database_url = f"sqlite:///{db_path}"

    alembic_cfg = Config(str(ROOT_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    command.upgrade(alembic_cfg, "head")

    flask_app = create_app(
        "development",
        {
            "SQLALCHEMY_DATABASE_URI": database_url,
            "TESTING": True,
            "SUPPORTED_LOCALES": ("en", "fr"),
        },
    )

    yield flask_app

    engine = get_engine()
    SessionLocal.remove()
    engine.dispose()
    command.downgrade(alembic_cfg, "base")


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""

    with app.test_client() as client:
        yield client


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield app


@pytest.fixture()
def clean_currencies(app) -> Iterator[None]:
    """Remove currencies and extra shops before and after a test."""

    def _purge() -> None:
        with app.app_context():
            session = get_session()
            session.query(CurrencyShop).delete()
            session.query(CurrencyTranslation).delete()
            session.query(Currency).delete()
            session.query(Shop).filter(Shop.name != "Default shop").delete()
            session.commit()

    _purge()
    yield
    _purge()
