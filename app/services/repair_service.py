"""Repair request workflow for customers and shops."""
from __future__ import annotations

from decimal import Decimal
from typing import Any

from app.api import RepairHubApi
from app.core.constants import MAX_DESCRIPTION_LENGTH
from app.core.exceptions import ValidationException
from app.core.security import InputValidator
from app.core.session_store import AuthSession
from app.domain.checkout import REPAIR_DELIVERY_METHODS, REPAIR_PAYMENT_METHODS
from app.domain.models import RepairRequest
from app.domain.statuses import RepairStatus
from logging_config import logger

DEVICE_CATEGORIES = ("MOBILE", "LAPTOP", "TABLET", "DESKTOP", "TV", "OTHER")


class RepairService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def create(
        self, auth: AuthSession, shop_id: int, device_category: str, description: str
    ) -> RepairRequest:
        category = (device_category or "").strip().upper()
        if category not in DEVICE_CATEGORIES:
            raise ValidationException("Choose a device type", field="device_category")
        ok, cleaned = InputValidator.validate_description(description)
        if not ok:
            raise ValidationException(
                f"Describe the problem (up to {MAX_DESCRIPTION_LENGTH} characters)", field="description"
            )
        request = await self._api.repair.create(auth, shop_id, category, cleaned)
        logger.info("Repair request %s created for shop %s", request.id, shop_id)
        return request

    async def list_mine(self, auth: AuthSession) -> list[RepairRequest]:
        requests = await self._api.repair.list_mine(auth)
        return sorted(requests, key=lambda r: r.id or 0, reverse=True)

    async def get(self, auth: AuthSession, request_id: int) -> RepairRequest:
        return await self._api.repair.get(auth, request_id)

    async def submit_delivery_details(
        self,
        auth: AuthSession,
        request: RepairRequest,
        delivery_address: Any,
        delivery_method: str,
        payment_method: str,
    ) -> Any:
        """Answer a sent quote with delivery and payment choices."""
        if not RepairStatus.awaiting_decision(request.status) or request.id is None:
            raise ValidationException("No quote is waiting for an answer", field="status")
        if delivery_method not in REPAIR_DELIVERY_METHODS:
            raise ValidationException("Choose a delivery method", field="delivery_method")
        if payment_method not in REPAIR_PAYMENT_METHODS:
            raise ValidationException("Choose a payment method", field="payment_method")
        if delivery_method != "SHOP_VISIT" and not delivery_address:
            raise ValidationException("Delivery address is required", field="address")
        return await self._api.repair.update_delivery(
            auth, request.id, delivery_address, delivery_method, payment_method
        )

    async def confirm_quote(self, auth: AuthSession, request_id: int) -> Any:
        return await self._api.repair.confirm_quote(auth, request_id)

    async def reject_quote(self, auth: AuthSession, request_id: int) -> Any:
        return await self._api.repair.reject_quote(auth, request_id)

    async def cancel(self, auth: AuthSession, request: RepairRequest) -> Any:
        if not RepairStatus.can_cancel(request.status) or request.id is None:
            raise ValidationException("This repair can no longer be cancelled", field="status")
        return await self._api.repair.cancel(auth, request.id)

    async def pay_by_card(self, auth: AuthSession, request_id: int) -> str:
        return await self._api.payments.pay_repair_by_card(auth, request_id)

    async def shop_requests(self, auth: AuthSession, status: str | None = None) -> list[RepairRequest]:
        """Shop's incoming requests; re-filtered so only the chosen status renders."""
        wanted = RepairStatus.normalize(status) if status else None
        requests = await self._api.repair.shop_list(auth, wanted)
        if wanted:
            requests = [r for r in requests if RepairStatus.normalize(r.status) == wanted]
        return requests

    async def shop_update_status(self, auth: AuthSession, request_id: int, status: str) -> Any:
        normalized = RepairStatus.normalize(status)
        if normalized not in RepairStatus.ALL:
            raise ValidationException(f"Unknown repair status: {status}", field="status")
        return await self._api.repair.shop_update_status(auth, request_id, normalized)

    async def send_quote(self, auth: AuthSession, request_id: int, price: Decimal) -> Any:
        if price <= 0:
            raise ValidationException("Price must be positive", field="price")
        return await self._api.repair.shop_set_price(auth, request_id, price)
