"""Assigner endpoints: dispatch orders and repairs to couriers."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Assignment, Order, RepairRequest, StaffMember

BASE = "/api/assigner"


class AssignerApi(ResourceApi):
    async def profile(self, auth: AuthSession) -> StaffMember:
        return await self._one(StaffMember, f"{BASE}/profile", auth)

    async def orders_for_assignment(self, auth: AuthSession) -> list[Order]:
        return await self._list(Order, f"{BASE}/orders-for-assignment", auth)

    async def repairs_for_assignment(self, auth: AuthSession) -> list[RepairRequest]:
        return await self._list(RepairRequest, f"{BASE}/repairs-for-assignment", auth)

    async def delivery_persons(self, auth: AuthSession) -> list[StaffMember]:
        return await self._list(StaffMember, f"{BASE}/delivery-persons", auth)

    async def assign_order(self, auth: AuthSession, order_id: int, delivery_id: int, notes: str = "") -> Any:
        return await self._client.post(
            f"{BASE}/assign-order",
            auth=auth,
            json={"orderId": order_id, "deliveryId": delivery_id, "notes": notes},
        )

    async def assign_repair(self, auth: AuthSession, repair_id: int, delivery_id: int, notes: str = "") -> Any:
        return await self._client.post(
            f"{BASE}/assign-repair",
            auth=auth,
            json={"repairRequestId": repair_id, "deliveryId": delivery_id, "notes": notes},
        )

    async def reassign(self, auth: AuthSession, job_id: int, delivery_id: int, notes: str = "") -> Any:
        # Orders and repairs are both reassigned through this route
        return await self._client.put(
            f"{BASE}/reassign-order/{job_id}",
            auth=auth,
            json={"newDeliveryId": delivery_id, "notes": notes},
        )

    async def assignment_log(self, auth: AuthSession) -> list[Assignment]:
        return await self._list(Assignment, f"{BASE}/assignment-log", auth)
