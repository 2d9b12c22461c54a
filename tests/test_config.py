from __future__ import annotations

import pytest

import config


@pytest.fixture()
def restore_locales():
    saved = {
        cls: (cls.DEFAULT_LOCALE, cls.SUPPORTED_LOCALES) for cls in config.CONFIG_BY_ENV.values()
    }
    yield
    for cls, (default_locale, supported) in saved.items():
        cls.DEFAULT_LOCALE = default_locale
        cls.SUPPORTED_LOCALES = supported


def test_get_config_defaults_to_development(monkeypatch, restore_locales):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert config.get_config() is config.DevelopmentConfig


def test_get_config_rejects_unknown_environment(restore_locales):
    with pytest.raises(KeyError, match="Unknown APP_ENV 'staging'"):
        config.get_config("staging")


def test_get_config_normalizes_locales(monkeypatch, restore_locales):
    monkeypatch.setattr(config.ProductionConfig, "DEFAULT_LOCALE", "pt-BR")
    monkeypatch.setattr(config.ProductionConfig, "SUPPORTED_LOCALES", ("en", "fr-FR"))

    config_cls = config.get_config("production")

    assert config_cls.DEFAULT_LOCALE == "pt_BR"
    assert config_cls.SUPPORTED_LOCALES == ("pt_BR", "en", "fr_FR")


def test_get_config_rejects_unknown_locale(monkeypatch, restore_locales):
    monkeypatch.setattr(config.ProductionConfig, "SUPPORTED_LOCALES", ("en", "xx_YY"))

    with pytest.raises(ValueError, match="SUPPORTED_LOCALES"):
        config.get_config("production")


def test_split_csv_ignores_blanks():
    assert config._split_csv(" en, ,fr ,") == ("en", "fr")
