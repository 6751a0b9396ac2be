"""Repair request workflow, customer side and shop side."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import RepairRequest

USER_BASE = "/api/users/repair-request"
SHOP_BASE = "/api/shops/repair-request"


class RepairApi(ResourceApi):
    async def create(
        self, auth: AuthSession, shop_id: int, device_category: str, description: str
    ) -> RepairRequest:
        return await self._one(
            RepairRequest,
            f"{USER_BASE}/{shop_id}",
            auth,
            method="POST",
            json={"deviceCategory": device_category, "description": description},
        )

    async def list_mine(self, auth: AuthSession) -> list[RepairRequest]:
        return await self._list(RepairRequest, USER_BASE, auth)

    async def get(self, auth: AuthSession, request_id: int) -> RepairRequest:
        return await self._one(RepairRequest, f"{USER_BASE}/{request_id}", auth)

    async def update_delivery(
        self,
        auth: AuthSession,
        request_id: int,
        delivery_address: Any,
        delivery_method: str,
        payment_method: str,
    ) -> Any:
        return await self._client.post(
            f"{USER_BASE}/{request_id}/update",
            auth=auth,
            json={
                "deliveryAddress": delivery_address,
                "deliveryMethod": delivery_method,
                "paymentMethod": payment_method,
            },
        )

    async def confirm_quote(self, auth: AuthSession, request_id: int) -> Any:
        return await self._client.post(f"{USER_BASE}/repairs/{request_id}/confirm", auth=auth)

    async def reject_quote(self, auth: AuthSession, request_id: int) -> Any:
        return await self._client.post(f"{USER_BASE}/{request_id}/reject", auth=auth)

    async def cancel(self, auth: AuthSession, request_id: int) -> Any:
        return await self._client.delete(f"{USER_BASE}/{request_id}/cancel", auth=auth)

    async def shop_list(self, auth: AuthSession, status: str | None = None) -> list[RepairRequest]:
        path = SHOP_BASE if not status else f"{SHOP_BASE}/status/{status}"
        return await self._list(RepairRequest, path, auth)

    async def shop_update_status(self, auth: AuthSession, request_id: int, status: str) -> Any:
        return await self._client.put(f"{SHOP_BASE}/{request_id}/status", auth=auth, json={"status": status})

    async def shop_set_price(self, auth: AuthSession, request_id: int, price: Decimal) -> Any:
        """Send the quote to the customer."""
        return await self._client.put(
            f"{SHOP_BASE}/{request_id}/price", auth=auth, json={"price": float(price)}
        )
