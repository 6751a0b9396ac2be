"""Tests for admin moderation lists, filters and reports."""
from __future__ import annotations

from decimal import Decimal

import pytest

from app.api.admin import shop_list_path, staff_list_path
from app.domain.models import Shop, StaffMember, Transaction, User
from app.services.admin_service import (
    AdminService,
    account_status,
    filter_by_status,
    search_rows,
)


@pytest.fixture()
def admin(api) -> AdminService:
    return AdminService(api)


class TestEndpointSelection:
    def test_staff_all(self) -> None:
        assert staff_list_path("deliveries") == "/api/admin/deliveries"

    def test_staff_filtered(self) -> None:
        assert staff_list_path("assigners", "suspended") == "/api/admin/assigners/suspended"

    def test_staff_unknown_filter(self) -> None:
        with pytest.raises(ValueError):
            staff_list_path("deliveries", "deleted")

    def test_shop_paths(self) -> None:
        assert shop_list_path("all") == "/api/admin/shops"
        assert shop_list_path("approved") == "/api/admin/shops/approved"
        assert shop_list_path("suspended") == "/api/admin/shops/suspend"
        # no dedicated endpoint; filtered locally
        assert shop_list_path("pending") == "/api/admin/shops"


class TestAccountStatus:
    def test_shop_verified_flag(self) -> None:
        assert account_status(Shop(id=1, verified=True)) == "APPROVED"
        assert account_status(Shop(id=1, verified=False)) == "SUSPENDED"
        assert account_status(Shop(id=1)) == "PENDING"

    def test_explicit_status_wins(self) -> None:
        assert account_status(Shop(id=1, status="suspend", verified=True)) == "SUSPENDED"

    def test_user_activation(self) -> None:
        assert account_status(User(id=1, activate=False)) == "SUSPENDED"
        assert account_status(User(id=1, activate=True)) == "APPROVED"


class TestFilters:
    rows = [
        StaffMember(id=1, name="Ali", email="ali@example.com", status="PENDING"),
        StaffMember(id=2, name="Mona", email="mona@example.com", status="APPROVED"),
        StaffMember(id=3, name="Omar", phone="+201001234567", status="SUSPENDED"),
    ]

    def test_all_keeps_everything(self) -> None:
        assert len(filter_by_status(self.rows, "all")) == 3

    def test_only_matching_status(self) -> None:
        assert [r.id for r in filter_by_status(self.rows, "approved")] == [2]

    def test_search_is_case_insensitive(self) -> None:
        assert [r.id for r in search_rows(self.rows, "MONA")] == [2]

    def test_search_by_phone(self) -> None:
        assert [r.id for r in search_rows(self.rows, "100123")] == [3]

    def test_blank_query_keeps_rows(self) -> None:
        assert len(search_rows(self.rows, "  ")) == 3


class TestModerationList:
    async def test_filter_change_refetches_and_renders_only_matches(self, admin: AdminService, api, auth) -> None:
        """Backend returns extra rows; only the selected status survives."""
        api.admin.list_staff.return_value = [
            StaffMember(id=1, status="PENDING"),
            StaffMember(id=2, status="APPROVED"),
        ]

        rows = await admin.moderation_list(auth, "deliveries", "pending")

        api.admin.list_staff.assert_awaited_once_with(auth, "deliveries", "pending")
        assert [r.id for r in rows] == [1]

        api.admin.list_staff.reset_mock()
        await admin.moderation_list(auth, "deliveries", "approved")
        api.admin.list_staff.assert_awaited_once_with(auth, "deliveries", "approved")

    async def test_shop_search_uses_search_endpoint(self, admin: AdminService, api, auth) -> None:
        api.admin.search_shops.return_value = [Shop(id=4, name="Fix It", verified=True)]

        rows = await admin.moderation_list(auth, "shops", "all", "fix")

        api.admin.search_shops.assert_awaited_once_with(auth, "fix")
        api.admin.list_shops.assert_not_awaited()
        assert [r.id for r in rows] == [4]

    async def test_users_filtered_locally(self, admin: AdminService, api, auth) -> None:
        api.admin.list_users.return_value = [User(id=1, activate=True), User(id=2, activate=False)]

        rows = await admin.moderation_list(auth, "users", "suspended")

        assert [r.id for r in rows] == [2]

    async def test_unknown_filter_falls_back_to_all(self, admin: AdminService, api, auth) -> None:
        api.admin.list_staff.return_value = []
        await admin.moderation_list(auth, "assigners", "bogus")
        api.admin.list_staff.assert_awaited_once_with(auth, "assigners", "all")

    async def test_unknown_kind(self, admin: AdminService, auth) -> None:
        with pytest.raises(ValueError):
            await admin.moderation_list(auth, "robots")


class TestModerate:
    async def test_user_action(self, admin: AdminService, api, auth) -> None:
        await admin.moderate(auth, "users", 5, "deactivate")
        api.admin.user_action.assert_awaited_once_with(auth, 5, "deactivate")

    async def test_staff_action(self, admin: AdminService, api, auth) -> None:
        await admin.moderate(auth, "deliveries", 6, "approve")
        api.admin.staff_action.assert_awaited_once_with(auth, "deliveries", 6, "approve")

    async def test_action_not_available_for_kind(self, admin: AdminService, auth) -> None:
        with pytest.raises(ValueError):
            await admin.moderate(auth, "users", 5, "approve")


class TestFinancialReport:
    async def test_fetches_all_sources(self, admin: AdminService, api, auth) -> None:
        api.admin.stats.return_value = {"users": 3}
        api.admin.all_transactions.return_value = [
            Transaction(id=1, amount=Decimal("100"), status="SUCCESS"),
            Transaction(id=2, amount=Decimal("40"), status="FAILED"),
            Transaction(id=3, amount=Decimal("60.5"), status="success"),
        ]
        api.admin.user_transactions.return_value = [Transaction(id=3, amount=Decimal("60.5"))]

        report = await admin.financial_report(auth, user_id=8)

        api.admin.user_transactions.assert_awaited_once_with(auth, 8)
        assert report.stats == {"users": 3}
        assert report.revenue == Decimal("160.5")
        assert len(report.user_transactions) == 1

    async def test_without_user(self, admin: AdminService, api, auth) -> None:
        api.admin.stats.return_value = {}
        api.admin.all_transactions.return_value = []

        report = await admin.financial_report(auth)

        api.admin.user_transactions.assert_not_awaited()
        assert report.user_transactions == []


async def test_update_user_role(admin: AdminService, api, auth) -> None:
    await admin.update_user_role(auth, 5, "ROLE_ASSIGNER")
    api.admin.update_user_role.assert_awaited_once_with(auth, 5, "ROLE_ASSIGNER")
