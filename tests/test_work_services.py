"""Tests for repair, shop, courier and assigner services."""
from __future__ import annotations

from decimal import Decimal

import pytest

from app.core.exceptions import ValidationException
from app.domain.models import Notification, Order, Product, RepairRequest, StaffMember
from app.services.delivery_service import AssignerService, DeliveryService
from app.services.repair_service import RepairService
from app.services.shop_service import ShopService

# =============================================================================
# Repair requests
# =============================================================================


class TestRepairService:
    @pytest.fixture()
    def repairs(self, api) -> RepairService:
        return RepairService(api)

    async def test_create_trims_description(self, repairs: RepairService, api, auth) -> None:
        api.repair.create.return_value = RepairRequest(id=31)

        request = await repairs.create(auth, 4, "mobile", "  Screen cracked  ")

        api.repair.create.assert_awaited_once_with(auth, 4, "MOBILE", "Screen cracked")
        assert request.id == 31

    async def test_unknown_device_type(self, repairs: RepairService, api, auth) -> None:
        with pytest.raises(ValidationException) as info:
            await repairs.create(auth, 4, "toaster", "broken")
        assert info.value.field == "device_category"
        api.repair.create.assert_not_awaited()

    async def test_empty_description(self, repairs: RepairService, api, auth) -> None:
        with pytest.raises(ValidationException):
            await repairs.create(auth, 4, "LAPTOP", "   ")
        api.repair.create.assert_not_awaited()

    async def test_delivery_details_need_sent_quote(self, repairs: RepairService, api, auth) -> None:
        request = RepairRequest(id=5, status="SUBMITTED")
        with pytest.raises(ValidationException):
            await repairs.submit_delivery_details(auth, request, "12", "HOME_DELIVERY", "CASH")
        api.repair.update_delivery.assert_not_awaited()

    async def test_home_delivery_needs_address(self, repairs: RepairService, api, auth) -> None:
        request = RepairRequest(id=5, status="QUOTE_SENT")
        with pytest.raises(ValidationException) as info:
            await repairs.submit_delivery_details(auth, request, None, "HOME_DELIVERY", "CASH")
        assert info.value.field == "address"

    async def test_shop_visit_without_address(self, repairs: RepairService, api, auth) -> None:
        request = RepairRequest(id=5, status="QUOTE_SENT")

        await repairs.submit_delivery_details(auth, request, None, "SHOP_VISIT", "CREDIT_CARD")

        api.repair.update_delivery.assert_awaited_once_with(auth, 5, None, "SHOP_VISIT", "CREDIT_CARD")

    async def test_cancel_after_repair_started(self, repairs: RepairService, api, auth) -> None:
        with pytest.raises(ValidationException):
            await repairs.cancel(auth, RepairRequest(id=5, status="REPAIRING"))
        api.repair.cancel.assert_not_awaited()

    async def test_cancel_submitted(self, repairs: RepairService, api, auth) -> None:
        await repairs.cancel(auth, RepairRequest(id=5, status="SUBMITTED"))
        api.repair.cancel.assert_awaited_once_with(auth, 5)

    async def test_shop_filter_is_rechecked(self, repairs: RepairService, api, auth) -> None:
        api.repair.shop_list.return_value = [
            RepairRequest(id=1, status="REPAIRING"),
            RepairRequest(id=2, status="SUBMITTED"),
            RepairRequest(id=3, status="in_progress"),
        ]

        requests = await repairs.shop_requests(auth, "repairing")

        api.repair.shop_list.assert_awaited_once_with(auth, "REPAIRING")
        assert [r.id for r in requests] == [1, 3]

    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-5")])
    async def test_quote_must_be_positive(self, repairs: RepairService, api, auth, price: Decimal) -> None:
        with pytest.raises(ValidationException):
            await repairs.send_quote(auth, 5, price)
        api.repair.shop_set_price.assert_not_awaited()

    async def test_unknown_shop_status(self, repairs: RepairService, api, auth) -> None:
        with pytest.raises(ValidationException):
            await repairs.shop_update_status(auth, 5, "teleported")
        api.repair.shop_update_status.assert_not_awaited()


# =============================================================================
# Shop orders and dashboard
# =============================================================================


class TestShopService:
    @pytest.fixture()
    def shop(self, api) -> ShopService:
        return ShopService(api)

    async def test_orders_filtered_and_newest_first(self, shop: ShopService, api, auth) -> None:
        api.shops.list_orders.return_value = [
            Order(id=3, status="PENDING"),
            Order(id=9, status="PENDING"),
            Order(id=5, status="SHIPPED"),
        ]

        orders = await shop.orders(auth, "pending")

        api.shops.list_orders.assert_awaited_once_with(auth, "PENDING")
        assert [o.id for o in orders] == [9, 3]

    async def test_finish_processing_status(self, shop: ShopService, api, auth) -> None:
        await shop.set_status(auth, 3, "finish_processing")
        api.shops.update_order_status.assert_awaited_once_with(auth, 3, "FINISHPROCESSING")

    async def test_unknown_status(self, shop: ShopService, api, auth) -> None:
        with pytest.raises(ValidationException):
            await shop.set_status(auth, 3, "LOST")
        api.shops.update_order_status.assert_not_awaited()

    async def test_dashboard_counts(self, shop: ShopService, api, auth) -> None:
        api.shops.subscription.return_value = {"plan": "BASIC"}
        api.shops.list_orders.return_value = [Order(id=1), Order(id=2, status="SHIPPED")]
        api.notifications.list_notifications.return_value = [
            Notification(id=1, read=False),
            Notification(id=2, read=True),
        ]

        dashboard = await shop.dashboard(auth)

        api.notifications.list_notifications.assert_awaited_once_with(auth, "shops")
        assert dashboard.pending_orders == 1
        assert dashboard.unread_notifications == 1

    async def test_low_stock(self, shop: ShopService, api, auth) -> None:
        api.shops.list_products.return_value = [Product(id=1, stock=0), Product(id=2, stock=10)]
        assert [p.id for p in await shop.low_stock(auth)] == [1]


# =============================================================================
# Couriers and assigners
# =============================================================================


class TestDeliveryService:
    @pytest.fixture()
    def delivery(self, api) -> DeliveryService:
        return DeliveryService(api)

    async def test_available_repairs(self, delivery: DeliveryService, api, auth) -> None:
        await delivery.available(auth, "repair")
        api.delivery.available.assert_awaited_once_with(auth, "repair")

    async def test_unknown_kind(self, delivery: DeliveryService, auth) -> None:
        with pytest.raises(ValueError):
            await delivery.mine(auth, "parcels")

    async def test_status_update_normalized(self, delivery: DeliveryService, api, auth) -> None:
        await delivery.update_status(auth, 8, "picked_up", notes=" at door ", kind="orders")
        api.delivery.update_status.assert_awaited_once_with(auth, 8, "PICKED_UP", "at door", "orders")

    async def test_courier_cannot_set_assigned(self, delivery: DeliveryService, api, auth) -> None:
        with pytest.raises(ValidationException):
            await delivery.update_status(auth, 8, "ASSIGNED")
        api.delivery.update_status.assert_not_awaited()


class TestAssignerService:
    @pytest.fixture()
    def assigner(self, api) -> AssignerService:
        return AssignerService(api)

    async def test_suspended_couriers_hidden(self, assigner: AssignerService, api, auth) -> None:
        api.assigner.delivery_persons.return_value = [
            StaffMember(id=1, status="APPROVED"),
            StaffMember(id=2, status="SUSPENDED"),
            StaffMember(id=3, verified=True),
        ]
        assert [c.id for c in await assigner.couriers(auth)] == [1, 3]

    async def test_assign_order(self, assigner: AssignerService, api, auth) -> None:
        await assigner.assign(auth, "orders", 4, 9)
        api.assigner.assign_order.assert_awaited_once_with(auth, 4, 9, "")
        api.assigner.assign_repair.assert_not_awaited()

    async def test_assign_repair(self, assigner: AssignerService, api, auth) -> None:
        await assigner.assign(auth, "repair", 4, 9, "fragile")
        api.assigner.assign_repair.assert_awaited_once_with(auth, 4, 9, "fragile")

    async def test_reassign(self, assigner: AssignerService, api, auth) -> None:
        await assigner.reassign(auth, 4, 10)
        api.assigner.reassign.assert_awaited_once_with(auth, 4, 10, "")
