"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from core.infrastructure.database.config import DatabaseSettings
from core.settings import AppSettings, LoggingSettings, MessagingSettings, get_app_settings


def test_defaults(monkeypatch):
    for name in ("MESSAGING_REQUEST_TIMEOUT_SECONDS", "DB_DATABASE_URL", "DB_TRANSACTIONS_ENABLED", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    assert MessagingSettings().request_timeout_seconds == 10.0
    assert LoggingSettings().level == "INFO"
    assert DatabaseSettings().transactions_enabled is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MESSAGING_REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("DB_TRANSACTIONS_ENABLED", "false")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    get_app_settings.cache_clear()
    try:
        settings = get_app_settings()
    finally:
        get_app_settings.cache_clear()

    assert isinstance(settings, AppSettings)
    assert settings.messaging.request_timeout_seconds == 2.5
    assert settings.database.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.database.transactions_enabled is False
    assert settings.logging.level == "DEBUG"


@pytest.mark.parametrize("value", ["0", "-1"])
def test_timeout_must_be_positive(monkeypatch, value):
    monkeypatch.setenv("MESSAGING_REQUEST_TIMEOUT_SECONDS", value)

    with pytest.raises(ValidationError):
        MessagingSettings()
