"""Courier endpoints for orders and repairs."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Order, RepairRequest, StaffMember

# "orders" and "repair" share the same sub-routes
JOB_KINDS = {"orders": Order, "repair": RepairRequest}


def _kind(kind: str) -> str:
    if kind not in JOB_KINDS:
        raise ValueError(f"Unknown delivery job kind: {kind}")
    return kind


class DeliveryApi(ResourceApi):
    async def profile(self, auth: AuthSession) -> StaffMember:
        return await self._one(StaffMember, "/api/delivery/profile", auth)

    async def update_profile(self, auth: AuthSession, name: str, address: str, phone: str) -> StaffMember:
        return await self._one(
            StaffMember,
            "/api/delivery/profile",
            auth,
            method="PUT",
            json={"name": name, "address": address, "phone": phone},
        )

    async def available(self, auth: AuthSession, kind: str = "orders") -> list[Any]:
        return await self._list(JOB_KINDS[_kind(kind)], f"/api/delivery/{kind}/available", auth)

    async def mine(self, auth: AuthSession, kind: str = "orders") -> list[Any]:
        return await self._list(JOB_KINDS[_kind(kind)], f"/api/delivery/{kind}/my-deliveries", auth)

    async def accept(self, auth: AuthSession, job_id: int, kind: str = "orders") -> Any:
        return await self._client.post(f"/api/delivery/{_kind(kind)}/{job_id}/accept", auth=auth)

    async def reject(self, auth: AuthSession, job_id: int, kind: str = "orders") -> Any:
        return await self._client.post(f"/api/delivery/{_kind(kind)}/{job_id}/reject", auth=auth)

    async def update_status(
        self, auth: AuthSession, job_id: int, status: str, notes: str = "", kind: str = "orders"
    ) -> Any:
        return await self._client.put(
            f"/api/delivery/{_kind(kind)}/{job_id}/status",
            auth=auth,
            json={"status": status, "notes": notes},
        )
