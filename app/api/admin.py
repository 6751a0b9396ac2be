"""Admin moderation and reporting endpoints."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import (
    Assignment,
    Category,
    Offer,
    Product,
    RepairRequest,
    Review,
    Shop,
    StaffMember,
    Transaction,
    User,
)

STAFF_KINDS = ("deliveries", "assigners")
STAFF_FILTERS = ("pending", "approved", "suspended")
STAFF_ACTIONS = ("approve", "suspend", "delete")
SHOP_ACTIONS = ("approve", "suspend", "delete")
USER_ACTIONS = ("activate", "deactivate", "delete")
# Shops only expose these two filtered listings
SHOP_FILTER_PATHS = {"approved": "approved", "suspended": "suspend"}


def staff_list_path(kind: str, status_filter: str = "all") -> str:
    if kind not in STAFF_KINDS:
        raise ValueError(f"Unknown staff kind: {kind}")
    if status_filter == "all":
        return f"/api/admin/{kind}"
    if status_filter not in STAFF_FILTERS:
        raise ValueError(f"Unknown status filter: {status_filter}")
    return f"/api/admin/{kind}/{status_filter}"


def shop_list_path(status_filter: str = "all") -> str:
    suffix = SHOP_FILTER_PATHS.get(status_filter)
    return "/api/admin/shops" if not suffix else f"/api/admin/shops/{suffix}"


class AdminApi(ResourceApi):
    async def list_staff(self, auth: AuthSession, kind: str, status_filter: str = "all") -> list[StaffMember]:
        return await self._list(StaffMember, staff_list_path(kind, status_filter), auth)

    async def staff_action(self, auth: AuthSession, kind: str, staff_id: int, action: str) -> Any:
        if kind not in STAFF_KINDS or action not in STAFF_ACTIONS:
            raise ValueError(f"Unsupported action {action} for {kind}")
        method = "DELETE" if action == "delete" else "PUT"
        return await self._client.request(method, f"/api/admin/{kind}/{staff_id}/{action}", auth=auth)

    async def list_shops(self, auth: AuthSession, status_filter: str = "all") -> list[Shop]:
        return await self._list(Shop, shop_list_path(status_filter), auth)

    async def search_shops(self, auth: AuthSession, query: str) -> list[Shop]:
        return await self._list(Shop, "/api/admin/shops/search", auth, params={"query": query})

    async def shop_action(self, auth: AuthSession, shop_id: int, action: str) -> Any:
        if action not in SHOP_ACTIONS:
            raise ValueError(f"Unsupported shop action: {action}")
        if action == "delete":
            return await self._client.delete(f"/api/admin/shops/{shop_id}", auth=auth)
        return await self._client.put(f"/api/admin/shops/{shop_id}/{action}", auth=auth)

    async def list_users(self, auth: AuthSession, page: int = 0, size: int = 100) -> list[User]:
        return await self._list(User, "/api/admin/users", auth, params={"page": page, "size": size})

    async def get_user(self, auth: AuthSession, user_id: int) -> User:
        return await self._one(User, f"/api/admin/users/{user_id}", auth)

    async def user_action(self, auth: AuthSession, user_id: int, action: str) -> Any:
        if action not in USER_ACTIONS:
            raise ValueError(f"Unsupported user action: {action}")
        if action == "delete":
            return await self._client.delete(f"/api/admin/users/{user_id}", auth=auth)
        return await self._client.put(f"/api/admin/users/{user_id}/{action}", auth=auth, json={})

    async def update_user_role(self, auth: AuthSession, user_id: int, role: str) -> Any:
        return await self._client.put(f"/api/admin/users/{user_id}", auth=auth, json={"role": role})

    async def stats(self, auth: AuthSession) -> dict[str, Any]:
        payload = await self._client.get("/api/admin/stats", auth=auth)
        return payload if isinstance(payload, dict) else {}

    async def all_transactions(self, auth: AuthSession) -> list[Transaction]:
        return await self._list(Transaction, "/api/admin/transactions/all", auth)

    async def user_transactions(self, auth: AuthSession, user_id: int) -> list[Transaction]:
        return await self._list(Transaction, f"/api/admin/transactions/{user_id}", auth)

    async def list_products(self, auth: AuthSession) -> list[Product]:
        return await self._list(Product, "/api/admin/products", auth)

    async def delete_product(self, auth: AuthSession, product_id: int) -> None:
        await self._client.delete(f"/api/admin/products/{product_id}", auth=auth)

    async def list_offers(self, auth: AuthSession) -> list[Offer]:
        return await self._list(Offer, "/api/admin/offers", auth)

    async def delete_offer(self, auth: AuthSession, offer_id: int) -> None:
        await self._client.delete(f"/api/admin/offers/{offer_id}", auth=auth)

    async def list_reviews(self, auth: AuthSession) -> list[Review]:
        return await self._list(Review, "/api/admin/reviews", auth)

    async def delete_review(self, auth: AuthSession, review_id: int) -> None:
        await self._client.delete(f"/api/admin/reviews/{review_id}", auth=auth)

    async def list_categories(self, auth: AuthSession) -> list[Category]:
        return await self._list(Category, "/api/admin/categories", auth)

    async def create_category(self, auth: AuthSession, name: str, description: str = "") -> Category:
        return await self._one(
            Category,
            "/api/admin/categories",
            auth,
            method="POST",
            json={"name": name, "description": description},
        )

    async def delete_category(self, auth: AuthSession, category_id: int) -> None:
        await self._client.delete(f"/api/admin/categories/{category_id}", auth=auth)

    async def list_repair_requests(self, auth: AuthSession) -> list[RepairRequest]:
        return await self._list(RepairRequest, "/api/admin/repair-requests", auth)

    async def assignment_logs(self, auth: AuthSession) -> list[Assignment]:
        return await self._list(Assignment, "/api/admin/assignment-logs", auth)
