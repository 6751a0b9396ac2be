"""Shop owner screens: orders control, offers, dashboard."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any

from app.api import RepairHubApi
from app.core.exceptions import ValidationException
from app.core.session_store import AuthSession
from app.domain.models import Notification, Offer, Order, Product
from app.domain.statuses import OrderStatus


@dataclass(slots=True)
class ShopDashboard:
    subscription: dict[str, Any]
    orders: list[Order]
    notifications: list[Notification]

    @property
    def pending_orders(self) -> int:
        return sum(1 for o in self.orders if OrderStatus.normalize(o.status) == OrderStatus.PENDING)

    @property
    def unread_notifications(self) -> int:
        return sum(1 for n in self.notifications if not n.read)


class ShopService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def dashboard(self, auth: AuthSession) -> ShopDashboard:
        subscription, orders, notifications = await asyncio.gather(
            self._api.shops.subscription(auth),
            self._api.shops.list_orders(auth),
            self._api.notifications.list_notifications(auth, "shops"),
        )
        return ShopDashboard(subscription=subscription, orders=orders, notifications=notifications)

    async def orders(self, auth: AuthSession, status: str | None = None) -> list[Order]:
        """Orders for the shop; a status filter hits the filtered endpoint and is re-checked locally."""
        wanted = OrderStatus.normalize(status) if status else None
        orders = await self._api.shops.list_orders(auth, wanted)
        if wanted:
            orders = [o for o in orders if OrderStatus.normalize(o.status) == wanted]
        return sorted(orders, key=lambda o: o.id or 0, reverse=True)

    async def order(self, auth: AuthSession, order_id: int) -> Order:
        return await self._api.shops.get_order(auth, order_id)

    async def accept(self, auth: AuthSession, order_id: int) -> Any:
        return await self._api.shops.accept_order(auth, order_id)

    async def reject(self, auth: AuthSession, order_id: int) -> Any:
        return await self._api.shops.reject_order(auth, order_id)

    async def set_status(self, auth: AuthSession, order_id: int, status: str) -> Any:
        normalized = OrderStatus.normalize(status)
        if normalized not in OrderStatus.ALL:
            raise ValidationException(f"Unknown order status: {status}", field="status")
        return await self._api.shops.update_order_status(auth, order_id, normalized)

    async def offers(self, auth: AuthSession) -> list[Offer]:
        return await self._api.shops.list_offers(auth)

    async def delete_offer(self, auth: AuthSession, offer_id: int) -> None:
        await self._api.shops.delete_offer(auth, offer_id)

    async def products(self, auth: AuthSession) -> list[Product]:
        return await self._api.shops.list_products(auth)

    async def low_stock(self, auth: AuthSession, threshold: int = 3) -> list[Product]:
        return [p for p in await self.products(auth) if p.stock <= threshold]
