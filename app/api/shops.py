"""Shop-owner endpoints: products, orders control, offers, dashboard."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Offer, Order, Product, Review, Shop

ORDERS_CONTROL = "/api/shops/orders/control"


class ShopsApi(ResourceApi):
    async def get_shop(self, shop_id: int, auth: AuthSession | None = None) -> Shop:
        return await self._one(Shop, f"/api/shops/{shop_id}", auth)

    async def list_products(self, auth: AuthSession) -> list[Product]:
        return await self._list(Product, "/api/shops/products", auth)

    async def add_product(self, auth: AuthSession, data: dict[str, Any]) -> Product:
        return await self._one(Product, "/api/shops/products", auth, method="POST", json=data)

    async def update_product(self, auth: AuthSession, product_id: int, data: dict[str, Any]) -> Product:
        return await self._one(
            Product, f"/api/shops/products/{product_id}", auth, method="PUT", json=data
        )

    async def delete_product(self, auth: AuthSession, product_id: int) -> None:
        await self._client.delete(f"/api/shops/products/{product_id}", auth=auth)

    async def list_orders(self, auth: AuthSession, status: str | None = None) -> list[Order]:
        path = ORDERS_CONTROL if not status else f"{ORDERS_CONTROL}/status/{status}"
        return await self._list(Order, path, auth)

    async def get_order(self, auth: AuthSession, order_id: int) -> Order:
        return await self._one(Order, f"{ORDERS_CONTROL}/{order_id}", auth)

    async def accept_order(self, auth: AuthSession, order_id: int) -> Any:
        return await self._client.put(f"{ORDERS_CONTROL}/{order_id}/accept", auth=auth)

    async def reject_order(self, auth: AuthSession, order_id: int) -> Any:
        return await self._client.put(f"{ORDERS_CONTROL}/{order_id}/reject", auth=auth)

    async def update_order_status(self, auth: AuthSession, order_id: int, status: str) -> Any:
        return await self._client.put(
            f"{ORDERS_CONTROL}/{order_id}/status", auth=auth, json={"status": status}
        )

    async def list_offers(self, auth: AuthSession) -> list[Offer]:
        return await self._list(Offer, "/api/shop/offers", auth)

    async def create_offer(self, auth: AuthSession, data: dict[str, Any]) -> Offer:
        return await self._one(Offer, "/api/shop/offers", auth, method="POST", json=data)

    async def update_offer(self, auth: AuthSession, offer_id: int, data: dict[str, Any]) -> Offer:
        return await self._one(Offer, f"/api/shop/offers/{offer_id}", auth, method="PUT", json=data)

    async def delete_offer(self, auth: AuthSession, offer_id: int) -> None:
        await self._client.delete(f"/api/shop/offers/{offer_id}", auth=auth)

    async def list_reviews(self, auth: AuthSession, shop_id: int) -> list[Review]:
        return await self._list(Review, f"/api/reviews/shops/{shop_id}", auth)

    async def subscription(self, auth: AuthSession) -> dict[str, Any]:
        payload = await self._client.get("/api/subscriptions", auth=auth)
        return payload if isinstance(payload, dict) else {}

    async def sales_total(self, auth: AuthSession) -> Any:
        return await self._client.get("/api/shops/dashboard/sales/total", auth=auth)

    async def orders_total(self, auth: AuthSession, start_date: str, end_date: str) -> Any:
        return await self._client.get(
            "/api/shops/dashboard/orders/total",
            auth=auth,
            params={"startDate": start_date, "endDate": end_date},
        )

    async def repairs_total(self, auth: AuthSession, start_date: str, end_date: str) -> Any:
        return await self._client.get(
            "/api/shops/dashboard/repairs/total",
            auth=auth,
            params={"startDate": start_date, "endDate": end_date},
        )
