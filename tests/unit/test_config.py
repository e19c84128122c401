"""Tests for settings and logging setup."""

import io
import logging

from accessadmin.config import Settings
from accessadmin.logging_config import LOGGER_NAME, configure_logging


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.api_base_url == "http://localhost:8000"
    assert settings.environment == "development"
    assert settings.cors_origin_list == ["http://localhost:3000"]


def test_settings_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ACCESSADMIN_API_BASE_URL", "https://admin.example.com")
    monkeypatch.setenv("ACCESSADMIN_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("ACCESSADMIN_CORS_ORIGINS", "https://a.example, ,https://b.example")

    settings = Settings(_env_file=None)

    assert settings.api_base_url == "https://admin.example.com"
    assert settings.request_timeout == 2.5
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]


def test_configure_logging_is_idempotent() -> None:
    stream = io.StringIO()
    configure_logging("DEBUG", stream=stream)
    logger = configure_logging("debug", stream=stream)

    logging.getLogger(f"{LOGGER_NAME}.tests").debug("hello")

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert "DEBUG accessadmin.tests: hello" in stream.getvalue()


def test_configure_logging_unknown_level_falls_back_to_info() -> None:
    logger = configure_logging("LOUD", stream=io.StringIO())
    assert logger.level == logging.INFO
