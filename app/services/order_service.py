"""Customer order history, tracking and cancellation."""
from __future__ import annotations

from typing import Any

from app.api import RepairHubApi
from app.core.exceptions import ValidationException
from app.core.session_store import AuthSession
from app.domain.models import Order
from app.domain.statuses import OrderStatus


class OrderService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def list_orders(self, auth: AuthSession, status: str | None = None) -> list[Order]:
        orders = await self._api.users.list_orders(auth)
        if status:
            wanted = OrderStatus.normalize(status)
            orders = [o for o in orders if OrderStatus.normalize(o.status) == wanted]
        return sorted(orders, key=lambda o: o.id or 0, reverse=True)

    async def track(self, auth: AuthSession, order_id: int) -> Order:
        return await self._api.users.track_order(auth, order_id)

    async def cancel(self, auth: AuthSession, order: Order) -> Any:
        if not OrderStatus.can_cancel(order.status) or order.id is None:
            raise ValidationException("This order can no longer be cancelled", field="status")
        return await self._api.users.cancel_order(auth, order.id)

    async def pay_by_card(self, auth: AuthSession, order_id: int) -> str:
        return await self._api.payments.pay_order_by_card(auth, order_id)
