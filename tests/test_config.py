"""Tests for settings and logging setup."""

import logging

from compass_badges.core.config import Settings, get_settings
from compass_badges.core.logging_config import configure_logging


def test_defaults(monkeypatch):
    for name in ("COMPASS_DATABASE_URL", "COMPASS_DEFAULT_AGE_GROUP", "COMPASS_LOG_LEVEL", "COMPASS_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.default_age_group == "school"
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMPASS_DATABASE_URL", "postgresql+asyncpg://u:p@db/compass")
    monkeypatch.setenv("COMPASS_DEBUG", "true")

    settings = get_settings()

    assert settings.database_url == "postgresql+asyncpg://u:p@db/compass"
    assert settings.debug is True


def test_configure_logging_quiets_sqlalchemy():
    configure_logging(Settings(log_level="debug"))

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
