"""Environment-driven configuration objects for the bot."""
from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from app.core.exceptions import ConfigurationException

SUPPORTED_LANGUAGES = ("en", "ar")


def _str_to_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "y"}


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationException(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True, slots=True)
class ApiConfig:
    base_url: str
    timeout: int


@dataclass(frozen=True, slots=True)
class Settings:
    bot_token: str
    api: ApiConfig
    redis_url: str | None
    page_size: int
    currency: str
    default_lang: str
    environment: str
    debug: bool


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise ConfigurationException("TELEGRAM_BOT_TOKEN environment variable is not set")

    base_url = os.getenv("API_BASE_URL", "http://localhost:8080").strip().rstrip("/")
    if not base_url.startswith(("http://", "https://")):
        raise ConfigurationException(f"API_BASE_URL must be an http(s) URL, got {base_url!r}")

    page_size = _int_env("PAGE_SIZE", 5)
    if page_size < 1:
        raise ConfigurationException("PAGE_SIZE must be positive")

    default_lang = os.getenv("DEFAULT_LANG", "en").strip().lower()
    if default_lang not in SUPPORTED_LANGUAGES:
        default_lang = "en"

    return Settings(
        bot_token=token,
        api=ApiConfig(base_url=base_url, timeout=_int_env("API_TIMEOUT", 15)),
        redis_url=os.getenv("REDIS_URL") or None,
        page_size=page_size,
        currency=os.getenv("CURRENCY", "EGP"),
        default_lang=default_lang,
        environment=os.getenv("ENVIRONMENT", "development"),
        debug=_str_to_bool(os.getenv("DEBUG")),
    )
