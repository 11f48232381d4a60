"""Tests for environment-driven settings."""

import pytest

from constants import DEFAULT_EXTRACTION_SERVICE_URL
from errors import ConfigurationError
from settings import get_extraction_client, get_settings


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("EXTRACTION_SERVICE_URL", "https://example.test/extract")
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("VERIFICATION_TTL_SECONDS", "60")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.service_url == "https://example.test/extract"
    assert settings.timeout_seconds == 12.5
    assert settings.verification_ttl_seconds == 60.0
    assert settings.log_level == "DEBUG"


def test_settings_defaults(monkeypatch):
    for name in (
        "EXTRACTION_SERVICE_URL",
        "EXTRACTION_TIMEOUT_SECONDS",
        "VERIFICATION_TTL_SECONDS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.service_url == DEFAULT_EXTRACTION_SERVICE_URL
    assert settings.timeout_seconds == 25.0
    assert settings.verification_ttl_seconds == 300.0
    assert settings.log_level == "INFO"


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", value)

    with pytest.raises(ConfigurationError, match="EXTRACTION_TIMEOUT_SECONDS"):
        get_settings()


def test_empty_url(monkeypatch):
    monkeypatch.setenv("EXTRACTION_SERVICE_URL", "  ")

    with pytest.raises(ConfigurationError, match="must not be empty"):
        get_settings()


def test_get_extraction_client(monkeypatch):
    monkeypatch.setenv("EXTRACTION_SERVICE_URL", "https://example.test/extract")
    monkeypatch.setenv("EXTRACTION_TIMEOUT_SECONDS", "5")

    client = get_extraction_client()

    assert client.url == "https://example.test/extract"
    assert client.timeout == 5.0
