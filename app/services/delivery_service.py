"""Courier and assigner work queues."""
from __future__ import annotations

from typing import Any

from app.api import RepairHubApi
from app.core.exceptions import ValidationException
from app.core.session_store import AuthSession
from app.domain.models import Assignment, Order, RepairRequest, StaffMember
from app.domain.statuses import AccountStatus, DeliveryStatus
from logging_config import logger

JOB_KINDS = ("orders", "repair")


def _check_kind(kind: str) -> str:
    if kind not in JOB_KINDS:
        raise ValueError(f"Unknown job kind: {kind}")
    return kind


class DeliveryService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def profile(self, auth: AuthSession) -> StaffMember:
        return await self._api.delivery.profile(auth)

    async def available(self, auth: AuthSession, kind: str = "orders") -> list[Any]:
        return await self._api.delivery.available(auth, _check_kind(kind))

    async def mine(self, auth: AuthSession, kind: str = "orders") -> list[Any]:
        return await self._api.delivery.mine(auth, _check_kind(kind))

    async def accept(self, auth: AuthSession, job_id: int, kind: str = "orders") -> Any:
        logger.info("Courier %s accepts %s #%s", auth.user_id, kind, job_id)
        return await self._api.delivery.accept(auth, job_id, _check_kind(kind))

    async def reject(self, auth: AuthSession, job_id: int, kind: str = "orders") -> Any:
        return await self._api.delivery.reject(auth, job_id, _check_kind(kind))

    async def update_status(
        self, auth: AuthSession, job_id: int, status: str, notes: str = "", kind: str = "orders"
    ) -> Any:
        normalized = (status or "").strip().upper()
        if normalized not in DeliveryStatus.UPDATABLE:
            raise ValidationException(f"Status {status} cannot be set by a courier", field="status")
        return await self._api.delivery.update_status(
            auth, job_id, normalized, notes.strip(), _check_kind(kind)
        )


class AssignerService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def orders_queue(self, auth: AuthSession) -> list[Order]:
        return await self._api.assigner.orders_for_assignment(auth)

    async def repairs_queue(self, auth: AuthSession) -> list[RepairRequest]:
        return await self._api.assigner.repairs_for_assignment(auth)

    async def couriers(self, auth: AuthSession) -> list[StaffMember]:
        """Delivery persons that can take work; suspended couriers are hidden."""
        couriers = await self._api.assigner.delivery_persons(auth)
        return [c for c in couriers if AccountStatus.normalize(c.account_status) != AccountStatus.SUSPENDED]

    async def assign(
        self, auth: AuthSession, kind: str, job_id: int, delivery_id: int, notes: str = ""
    ) -> Any:
        _check_kind(kind)
        logger.info("Assigner %s: %s #%s -> courier %s", auth.user_id, kind, job_id, delivery_id)
        if kind == "orders":
            return await self._api.assigner.assign_order(auth, job_id, delivery_id, notes)
        return await self._api.assigner.assign_repair(auth, job_id, delivery_id, notes)

    async def reassign(self, auth: AuthSession, job_id: int, delivery_id: int, notes: str = "") -> Any:
        return await self._api.assigner.reassign(auth, job_id, delivery_id, notes)

    async def log(self, auth: AuthSession) -> list[Assignment]:
        return await self._api.assigner.assignment_log(auth)
