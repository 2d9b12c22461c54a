"""Application configuration classes."""

from __future__ import annotations

import os

from babel import Locale, UnknownLocaleError


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "currency-admin"
    SECRET_KEY = _get_env("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = _get_env("DATABASE_URL", "sqlite:///currency-admin.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    DEFAULT_LOCALE = _get_env("DEFAULT_LOCALE", "en")
    SUPPORTED_LOCALES = _split_csv(_get_env("SUPPORTED_LOCALES", "en,fr,de,es"))
    DEFAULT_CURRENCY_PRECISION = int(_get_env("DEFAULT_CURRENCY_PRECISION", "2"))
    LOG_LEVEL = _get_env("LOG_LEVEL", "INFO")
    LOG_JSON_ENABLED = _get_env("LOG_JSON_ENABLED", "false").lower() == "true"
    LOG_FORMAT = _get_env("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")


class DevelopmentConfig(BaseConfig):
    """Configuration for local development."""

    DEBUG = True
    TESTING = False


class ProductionConfig(BaseConfig):
    """Configuration for production deployments."""

    DEBUG = False
    TESTING = False


CONFIG_BY_ENV = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config(config_name: str | None = None) -> type[BaseConfig]:
    """Return the config class for the requested environment.

    Args:
        config_name: Optional explicit config identifier. If omitted, the
            APP_ENV environment variable is consulted.

    Raises:
        KeyError: If the requested configuration is not defined.
        ValueError: If a configured locale is unknown to CLDR.
    """

    env_candidate = config_name if config_name is not None else os.getenv("APP_ENV", "development")
    env_name = (env_candidate or "development").lower()
    try:
        config_cls = CONFIG_BY_ENV[env_name]
    except KeyError as exc:
        raise KeyError(f"Unknown APP_ENV '{env_name}'") from exc

    _validate_locales(config_cls)
    return config_cls


def _validate_locales(config_cls: type[BaseConfig]) -> None:
    default_locale = _normalize_locale(config_cls.DEFAULT_LOCALE, setting="DEFAULT_LOCALE")
    supported = [
        _normalize_locale(value, setting="SUPPORTED_LOCALES") for value in config_cls.SUPPORTED_LOCALES
    ]
    if default_locale not in supported:
        supported.insert(0, default_locale)

    config_cls.DEFAULT_LOCALE = default_locale
    config_cls.SUPPORTED_LOCALES = tuple(supported)


def _normalize_locale(value: str | None, *, setting: str) -> str:
    if not value:
        raise ValueError(f"{setting} cannot be empty.")
    try:
        return str(Locale.parse(value.replace("-", "_")))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"Unsupported {setting} value '{value}'.") from exc
