"""Card payment initiation; each call returns a hosted checkout URL."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.exceptions import ApiException
from app.core.session_store import AuthSession


def _payment_url(payload: Any) -> str:
    if isinstance(payload, str) and payload.startswith("http"):
        return payload
    if isinstance(payload, dict):
        for key in ("paymentURL", "paymentUrl", "url", "redirectUrl"):
            if payload.get(key):
                return str(payload[key])
    raise ApiException(502, "Payment provider returned no redirect URL", payload)


class PaymentsApi(ResourceApi):
    async def pay_order_by_card(self, auth: AuthSession, order_id: int) -> str:
        payload = await self._client.post(f"/api/payments/order/card/{order_id}", auth=auth)
        return _payment_url(payload)

    async def pay_repair_by_card(self, auth: AuthSession, repair_id: int) -> str:
        payload = await self._client.post(f"/api/payments/repair/card/{repair_id}", auth=auth)
        return _payment_url(payload)
