"""Tests for environment settings and logging setup."""
from __future__ import annotations

import logging

import pytest

from app.core.config import load_settings
from app.core.exceptions import ConfigurationException
from logging_config import setup_logging


@pytest.fixture()
def env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "TEST_TOKEN")
    monkeypatch.setenv("API_BASE_URL", "http://backend.test/")
    for name in ("PAGE_SIZE", "API_TIMEOUT", "DEFAULT_LANG", "DEBUG"):
        monkeypatch.setenv(name, "")
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, env) -> None:
        settings = load_settings()
        assert settings.api.base_url == "http://backend.test"
        assert settings.page_size == 5
        assert settings.default_lang == "en"
        assert settings.debug is False

    @pytest.mark.parametrize("raw", ["true", "1", "YES"])
    def test_debug_flag(self, env, raw: str) -> None:
        env.setenv("DEBUG", raw)
        assert load_settings().debug is True

    def test_unsupported_language_falls_back(self, env) -> None:
        env.setenv("DEFAULT_LANG", "fr")
        assert load_settings().default_lang == "en"

    def test_non_http_backend_is_rejected(self, env) -> None:
        env.setenv("API_BASE_URL", "backend.test")
        with pytest.raises(ConfigurationException):
            load_settings()

    def test_bad_page_size(self, env) -> None:
        env.setenv("PAGE_SIZE", "many")
        with pytest.raises(ConfigurationException):
            load_settings()


class TestSetupLogging:
    def test_debug_overrides_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        try:
            assert setup_logging(debug=True).level == logging.DEBUG
            assert setup_logging().level == logging.WARNING
        finally:
            setup_logging("INFO")

    def test_handler_added_once(self) -> None:
        log = setup_logging("INFO")
        count = len(log.handlers)
        assert len(setup_logging("INFO").handlers) == count
