"""Tests for app/api/client.py against a fake aiohttp backend."""
from __future__ import annotations

import asyncio

import pytest
from aiohttp import web

from app.api import RepairHubApi, normalize_path, unwrap_content
from app.api.client import ApiClient
from app.core.exceptions import (
    ApiValidationException,
    AuthenticationException,
    AuthorizationException,
    ConnectionException,
    NotFoundException,
    ServerException,
)
from app.core.session_store import AuthSession

# =============================================================================
# Path and payload helpers
# =============================================================================


class TestNormalizePath:
    def test_collapses_duplicate_slashes(self) -> None:
        assert normalize_path("/api//admin///shops") == "/api/admin/shops"

    def test_strips_stray_whitespace(self) -> None:
        assert normalize_path(" /api/admin/ deliveries ") == "/api/admin/deliveries"

    def test_adds_leading_slash(self) -> None:
        assert normalize_path("api/cart") == "/api/cart"

    def test_drops_trailing_slash_by_default(self) -> None:
        assert normalize_path("/api/products/") == "/api/products"

    def test_keeps_trailing_slash_on_request(self) -> None:
        assert normalize_path("/api/products/", keep_trailing_slash=True) == "/api/products/"

    def test_root_stays_root(self) -> None:
        assert normalize_path("/") == "/"


class TestUnwrapContent:
    def test_spring_page(self) -> None:
        assert unwrap_content({"content": [1, 2], "totalElements": 2}) == [1, 2]

    def test_bare_list(self) -> None:
        assert unwrap_content([{"id": 1}]) == [{"id": 1}]

    def test_none_and_scalars(self) -> None:
        assert unwrap_content(None) == []
        assert unwrap_content("oops") == []

    def test_data_key(self) -> None:
        assert unwrap_content({"data": [3]}) == [3]


# =============================================================================
# Requests against the fake backend
# =============================================================================


async def test_sends_bearer_token_and_decodes_json(backend, auth: AuthSession) -> None:
    seen = {}

    async def handler(request: web.Request) -> web.Response:
        seen["auth"] = request.headers.get("Authorization")
        return web.json_response({"items": [], "totalPrice": 0})

    app = web.Application()
    app.router.add_get("/api/cart", handler)
    client = await backend(app)

    payload = await client.get("/api/cart", auth=auth)

    assert payload == {"items": [], "totalPrice": 0}
    assert seen["auth"] == f"Bearer {auth.access_token}"


async def test_public_request_has_no_authorization_header(backend) -> None:
    seen = {}

    async def handler(request: web.Request) -> web.Response:
        seen["auth"] = request.headers.get("Authorization")
        return web.json_response([])

    app = web.Application()
    app.router.add_get("/api/products", handler)
    client = await backend(app)

    await client.get("/api/products")
    assert seen["auth"] is None


async def test_none_params_are_dropped(backend) -> None:
    seen = {}

    async def handler(request: web.Request) -> web.Response:
        seen["query"] = dict(request.query)
        return web.json_response([])

    app = web.Application()
    app.router.add_get("/api/products", handler)
    client = await backend(app)

    await client.get("/api/products", params={"categoryId": 3, "condition": None})
    assert seen["query"] == {"categoryId": "3"}


async def test_empty_body_returns_none(backend) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.Response(status=204)

    app = web.Application()
    app.router.add_delete("/api/cart", handler)
    client = await backend(app)

    assert await client.delete("/api/cart") is None


async def test_plain_text_body_is_returned_as_text(backend) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.Response(text="OTP sent")

    app = web.Application()
    app.router.add_post("/api/auth/resend-otp", handler)
    client = await backend(app)

    assert await client.post("/api/auth/resend-otp", json={"email": "a@b.co"}) == "OTP sent"


@pytest.mark.parametrize(
    ("status", "exc_type"),
    [
        (400, ApiValidationException),
        (401, AuthenticationException),
        (404, NotFoundException),
        (422, ApiValidationException),
        (500, ServerException),
        (503, ServerException),
    ],
)
async def test_error_status_mapping(backend, status: int, exc_type: type) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.json_response({"message": "backend says no"}, status=status)

    app = web.Application()
    app.router.add_get("/api/thing", handler)
    client = await backend(app)

    with pytest.raises(exc_type) as info:
        await client.get("/api/thing")
    assert info.value.status == status
    assert info.value.message == "backend says no"


async def test_error_without_message_gets_generic_text(backend) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.Response(status=500)

    app = web.Application()
    app.router.add_get("/api/thing", handler)
    client = await backend(app)

    with pytest.raises(ServerException) as info:
        await client.get("/api/thing")
    assert "500" in info.value.message


async def test_unreachable_backend_raises_connection_exception() -> None:
    # Port 9 (discard) is closed on test machines
    client = ApiClient("http://127.0.0.1:9", timeout=2)
    try:
        with pytest.raises(ConnectionException):
            await client.get("/api/products")
    finally:
        await client.close()


# =============================================================================
# Token refresh on 403
# =============================================================================


def _refreshing_app(calls: dict, refresh_status: int = 200) -> web.Application:
    async def protected(request: web.Request) -> web.Response:
        calls["protected"] = calls.get("protected", 0) + 1
        if request.headers.get("Authorization") == "Bearer fresh-token":
            return web.json_response({"ok": True})
        return web.json_response({"message": "expired"}, status=403)

    async def refresh(request: web.Request) -> web.Response:
        calls["refresh"] = calls.get("refresh", 0) + 1
        body = await request.json()
        calls["refresh_body"] = body
        if refresh_status != 200:
            return web.json_response({"message": "bad refresh"}, status=refresh_status)
        return web.json_response({"access_token": "fresh-token", "refresh_token": "refresh-2"})

    app = web.Application()
    app.router.add_get("/api/users/profile", protected)
    app.router.add_post("/api/auth/refresh-token", refresh)
    return app


async def test_403_triggers_one_refresh_and_retry(backend) -> None:
    calls: dict = {}
    client = await backend(_refreshing_app(calls))
    refreshed = []
    client.on_token_refresh = refreshed.append
    session = AuthSession(access_token="stale-token", refresh_token="refresh-1", user_id=7, telegram_id=100)

    payload = await client.get("/api/users/profile", auth=session)

    assert payload == {"ok": True}
    assert calls["protected"] == 2
    assert calls["refresh"] == 1
    assert calls["refresh_body"] == {"refreshToken": "refresh-1"}
    assert session.access_token == "fresh-token"
    assert session.refresh_token == "refresh-2"
    assert refreshed == [session]


async def test_failed_refresh_raises_authentication_exception(backend) -> None:
    calls: dict = {}
    client = await backend(_refreshing_app(calls, refresh_status=401))
    session = AuthSession(access_token="stale-token", refresh_token="refresh-1")

    with pytest.raises(AuthenticationException):
        await client.get("/api/users/profile", auth=session)
    assert session.access_token == "stale-token"


def _rotating_app(calls: dict) -> web.Application:
    """Backend that accepts each refresh token once and hands out a new one."""
    tokens = {"access": "fresh-1", "refresh": "refresh-1", "issued": 1}

    async def protected(request: web.Request) -> web.Response:
        await asyncio.sleep(0.01)
        if request.headers.get("Authorization") == f"Bearer {tokens['access']}":
            return web.json_response({"ok": True})
        return web.json_response({"message": "expired"}, status=403)

    async def refresh(request: web.Request) -> web.Response:
        calls["refresh"] = calls.get("refresh", 0) + 1
        body = await request.json()
        if body.get("refreshToken") != tokens["refresh"]:
            return web.json_response({"message": "refresh token reused"}, status=401)
        tokens["issued"] += 1
        tokens["access"] = f"fresh-{tokens['issued']}"
        tokens["refresh"] = f"refresh-{tokens['issued']}"
        return web.json_response({"access_token": tokens["access"], "refresh_token": tokens["refresh"]})

    app = web.Application()
    app.router.add_get("/api/users/profile", protected)
    app.router.add_post("/api/auth/refresh-token", refresh)
    return app


async def test_concurrent_refresh_from_separate_session_copies(backend, session_store) -> None:
    calls: dict = {}
    client = await backend(_rotating_app(calls))
    client.on_token_refresh = lambda session: session_store.save(session.telegram_id, session)
    session_store.save(100, AuthSession(access_token="stale-token", refresh_token="refresh-1", user_id=7))
    first, second = session_store.get(100), session_store.get(100)
    assert first is not second

    results = await asyncio.gather(
        client.get("/api/users/profile", auth=first),
        client.get("/api/users/profile", auth=second),
    )

    assert results == [{"ok": True}, {"ok": True}]
    assert calls["refresh"] == 1
    assert first.access_token == second.access_token == "fresh-2"
    assert session_store.get(100).refresh_token == "refresh-2"


async def test_later_request_with_old_token_reuses_refresh(backend) -> None:
    calls: dict = {}
    client = await backend(_rotating_app(calls))
    early = AuthSession(access_token="stale-token", refresh_token="refresh-1")
    late = AuthSession(access_token="stale-token", refresh_token="refresh-1")

    await client.get("/api/users/profile", auth=early)
    assert await client.get("/api/users/profile", auth=late) == {"ok": True}

    assert calls["refresh"] == 1
    assert late.refresh_token == "refresh-2"


async def test_403_without_refresh_token_is_authorization_error(backend) -> None:
    calls: dict = {}
    client = await backend(_refreshing_app(calls))
    session = AuthSession(access_token="stale-token")

    with pytest.raises(AuthorizationException):
        await client.get("/api/users/profile", auth=session)
    assert "refresh" not in calls


# =============================================================================
# Resource wrappers
# =============================================================================


async def test_cart_payload_becomes_models(backend, auth: AuthSession) -> None:
    async def handler(request: web.Request) -> web.Response:
        return web.json_response(
            {
                "items": [
                    {"id": 1, "productId": 10, "productName": "Screen", "productPrice": "10.00", "quantity": 2},
                    {"id": 2, "productId": 11, "productName": "Cable", "productPrice": 5, "quantity": 1},
                ]
            }
        )

    app = web.Application()
    app.router.add_get("/api/cart", handler)
    api = RepairHubApi(await backend(app))

    cart = await api.cart.get(auth)

    assert [item.product_name for item in cart.items] == ["Screen", "Cable"]
    assert cart.items[0].subtotal + cart.items[1].subtotal == 25


async def test_staff_filter_selects_endpoint(backend, auth: AuthSession) -> None:
    seen = []

    async def handler(request: web.Request) -> web.Response:
        seen.append(request.path)
        return web.json_response({"content": [{"id": 1, "name": "Courier", "status": "PENDING"}]})

    app = web.Application()
    app.router.add_get("/api/admin/deliveries", handler)
    app.router.add_get("/api/admin/deliveries/pending", handler)
    api = RepairHubApi(await backend(app))

    await api.admin.list_staff(auth, "deliveries")
    rows = await api.admin.list_staff(auth, "deliveries", "pending")

    assert seen == ["/api/admin/deliveries", "/api/admin/deliveries/pending"]
    assert rows[0].name == "Courier"


async def test_create_order_sends_camel_case_body(backend, auth: AuthSession) -> None:
    seen = {}

    async def handler(request: web.Request) -> web.Response:
        seen["body"] = await request.json()
        return web.json_response({"id": 55, "status": "PENDING", "totalPrice": 25})

    app = web.Application()
    app.router.add_post("/api/users/orders", handler)
    api = RepairHubApi(await backend(app))

    order = await api.users.create_order(auth, 3, "CASH")

    assert seen["body"] == {"deliveryAddressId": 3, "paymentMethod": "CASH"}
    assert order.id == 55
