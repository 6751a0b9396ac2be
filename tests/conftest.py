"""Shared pytest fixtures: auth sessions, a fake backend and aiogram event mocks."""
from __future__ import annotations

import os
import time
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import jwt
import pytest
from aiogram import types
from aiohttp import web
from aiohttp.test_utils import TestServer

from app.api import ApiClient, RepairHubApi
from app.core.config import ApiConfig, Settings
from app.core.session_store import AuthSession, SessionStore
from app.services import build_services

TEST_SECRET = "repairhub-test-secret-key-0123456789abcdef"


def make_token(exp_offset: int = 3600, **claims: Any) -> str:
    """Signed JWT whose ``exp`` is ``exp_offset`` seconds from now."""
    payload = {"sub": "7", "exp": int(time.time()) + exp_offset, **claims}
    return jwt.encode(payload, TEST_SECRET, algorithm="HS256")


def make_message(text: str = "", user_id: int = 100) -> MagicMock:
    message = MagicMock(spec=types.Message)
    message.text = text
    message.from_user = SimpleNamespace(id=user_id, username="tester")
    message.chat = SimpleNamespace(id=user_id)
    message.answer = AsyncMock()
    message.edit_text = AsyncMock()
    message.delete = AsyncMock()
    return message


def make_callback(data: str, user_id: int = 100) -> MagicMock:
    callback = MagicMock(spec=types.CallbackQuery)
    callback.data = data
    callback.from_user = SimpleNamespace(id=user_id, username="tester")
    callback.message = make_message(user_id=user_id)
    callback.answer = AsyncMock()
    return callback


@pytest.fixture(scope="session", autouse=True)
def _test_env_vars() -> None:
    """Provide minimal env vars required for imports in tests."""
    if not os.getenv("TELEGRAM_BOT_TOKEN"):
        os.environ["TELEGRAM_BOT_TOKEN"] = "TEST_TOKEN"


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        bot_token="TEST_TOKEN",
        api=ApiConfig(base_url="http://backend.test", timeout=5),
        redis_url=None,
        page_size=5,
        currency="EGP",
        default_lang="en",
        environment="test",
        debug=False,
    )


@pytest.fixture()
def auth() -> AuthSession:
    return AuthSession(
        access_token=make_token(),
        refresh_token="refresh-1",
        roles=["ROLE_USER"],
        user_id=7,
        email="user@example.com",
        telegram_id=100,
    )


@pytest.fixture()
def session_store() -> SessionStore:
    return SessionStore(redis_url=None)


@pytest.fixture()
def api() -> MagicMock:
    """RepairHubApi with every resource method replaced by an AsyncMock."""
    fake = MagicMock(spec=RepairHubApi)
    for name in (
        "auth",
        "users",
        "cart",
        "catalog",
        "repair",
        "shops",
        "admin",
        "payments",
        "notifications",
        "delivery",
        "assigner",
    ):
        setattr(fake, name, AsyncMock())
    fake.client = MagicMock()
    return fake


@pytest.fixture()
def services(api: MagicMock, session_store: SessionStore, settings: Settings):
    return build_services(api, session_store, settings)


@pytest.fixture()
async def backend():
    """Start an aiohttp app as a fake RepairHub backend and point an ApiClient at it."""
    servers: list[TestServer] = []
    clients: list[ApiClient] = []

    async def _make(app: web.Application) -> ApiClient:
        server = TestServer(app)
        await server.start_server()
        servers.append(server)
        client = ApiClient(str(server.make_url("/")), timeout=5)
        clients.append(client)
        return client

    try:
        yield _make
    finally:
        for client in clients:
            await client.close()
        for server in servers:
            await server.close()
