"""Routing tests for the resource wrappers: each call must hit the right backend endpoint."""
from __future__ import annotations

import pytest
from aiohttp import web

from app.api import RepairHubApi
from app.core.session_store import AuthSession


@pytest.fixture()
async def recorded(backend):
    """RepairHubApi against a catch-all backend that records every request."""
    calls: list[tuple[str, str, dict, object]] = []

    async def handler(request: web.Request) -> web.Response:
        body = await request.json() if request.can_read_body else None
        calls.append((request.method, request.path, dict(request.query), body))
        return web.json_response({})

    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", handler)
    api = RepairHubApi(await backend(app))
    return api, calls


def _routes(calls) -> list[tuple[str, str]]:
    return [(method, path) for method, path, _, _ in calls]


class TestAdminEndpoints:
    async def test_catalog_moderation(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        assert await api.admin.list_products(auth) == []
        await api.admin.delete_product(auth, 3)
        await api.admin.list_offers(auth)
        await api.admin.delete_offer(auth, 4)
        await api.admin.list_reviews(auth)
        await api.admin.delete_review(auth, 5)

        assert _routes(calls) == [
            ("GET", "/api/admin/products"),
            ("DELETE", "/api/admin/products/3"),
            ("GET", "/api/admin/offers"),
            ("DELETE", "/api/admin/offers/4"),
            ("GET", "/api/admin/reviews"),
            ("DELETE", "/api/admin/reviews/5"),
        ]

    async def test_categories(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.admin.list_categories(auth)
        await api.admin.create_category(auth, "Phones", "Smartphones")
        await api.admin.delete_category(auth, 2)

        assert _routes(calls) == [
            ("GET", "/api/admin/categories"),
            ("POST", "/api/admin/categories"),
            ("DELETE", "/api/admin/categories/2"),
        ]
        assert calls[1][3] == {"name": "Phones", "description": "Smartphones"}

    async def test_user_and_logs(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        user = await api.admin.get_user(auth, 9)
        await api.admin.list_repair_requests(auth)
        await api.admin.assignment_logs(auth)

        assert user.id is None
        assert _routes(calls) == [
            ("GET", "/api/admin/users/9"),
            ("GET", "/api/admin/repair-requests"),
            ("GET", "/api/admin/assignment-logs"),
        ]

    async def test_staff_delete_uses_delete_verb(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.admin.staff_action(auth, "assigners", 6, "delete")
        await api.admin.staff_action(auth, "deliveries", 6, "approve")

        assert _routes(calls) == [
            ("DELETE", "/api/admin/assigners/6/delete"),
            ("PUT", "/api/admin/deliveries/6/approve"),
        ]

    async def test_bad_staff_action_sends_nothing(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded
        with pytest.raises(ValueError):
            await api.admin.staff_action(auth, "deliveries", 6, "promote")
        assert calls == []


class TestAuthEndpoints:
    async def test_legacy_registration(self, recorded) -> None:
        api, calls = recorded

        await api.auth.register_legacy("shops", {"email": "shop@example.com"})

        assert _routes(calls) == [("POST", "/api/auth/shops/register")]

    async def test_legacy_registration_rejects_admins(self, recorded) -> None:
        api, calls = recorded
        with pytest.raises(ValueError):
            await api.auth.register_legacy("admins", {})
        assert calls == []

    async def test_reset_password(self, recorded) -> None:
        api, calls = recorded

        await api.auth.reset_password("tok-1", "n3w-secret")

        assert calls == [
            ("POST", "/api/auth/users/reset-password", {}, {"token": "tok-1", "newPassword": "n3w-secret"})
        ]

    async def test_current_user(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.auth.current_user(auth)

        assert _routes(calls) == [("GET", "/api/auth/user")]

    async def test_portal_login(self, recorded) -> None:
        api, calls = recorded

        await api.auth.login("a@b.co", "secret1", portal="admins")

        assert _routes(calls) == [("POST", "/api/auth/admins/login")]


class TestUserEndpoints:
    async def test_account_and_reviews(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.users.delete_account(auth)
        await api.users.list_transactions(auth)
        await api.users.shop_reviews(4)
        await api.users.add_review(auth, 4, 5, "Fast fix")

        assert _routes(calls) == [
            ("DELETE", "/api/users/profile"),
            ("GET", "/api/users/transactions"),
            ("GET", "/api/reviews/shops/4"),
            ("POST", "/api/reviews/4"),
        ]
        assert calls[-1][3] == {"rating": 5, "comment": "Fast fix"}


class TestShopEndpoints:
    async def test_product_crud(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.shops.add_product(auth, {"name": "Battery"})
        await api.shops.update_product(auth, 8, {"stock": 3})
        await api.shops.delete_product(auth, 8)

        assert _routes(calls) == [
            ("POST", "/api/shops/products"),
            ("PUT", "/api/shops/products/8"),
            ("DELETE", "/api/shops/products/8"),
        ]

    async def test_offers_and_reviews(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.shops.create_offer(auth, {"discountPercentage": 10})
        await api.shops.update_offer(auth, 2, {"discountPercentage": 15})
        await api.shops.list_reviews(auth, 4)

        assert _routes(calls) == [
            ("POST", "/api/shop/offers"),
            ("PUT", "/api/shop/offers/2"),
            ("GET", "/api/reviews/shops/4"),
        ]

    async def test_dashboard_totals(self, recorded, auth: AuthSession) -> None:
        api, calls = recorded

        await api.shops.sales_total(auth)
        await api.shops.orders_total(auth, "2024-01-01", "2024-01-31")
        await api.shops.repairs_total(auth, "2024-01-01", "2024-01-31")

        assert _routes(calls) == [
            ("GET", "/api/shops/dashboard/sales/total"),
            ("GET", "/api/shops/dashboard/orders/total"),
            ("GET", "/api/shops/dashboard/repairs/total"),
        ]
        assert calls[1][2] == {"startDate": "2024-01-01", "endDate": "2024-01-31"}
