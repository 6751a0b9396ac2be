"""Admin moderation lists and dashboards."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Iterable, TypeVar

from app.api import RepairHubApi
from app.core.session_store import AuthSession
from app.domain.models import Shop, StaffMember, Transaction, User
from app.domain.statuses import AccountStatus
from logging_config import logger

T = TypeVar("T")

MODERATION_KINDS = ("shops", "users", "deliveries", "assigners")
STATUS_FILTERS = ("all", "pending", "approved", "suspended")
KIND_ACTIONS = {
    "shops": ("approve", "suspend", "delete"),
    "deliveries": ("approve", "suspend", "delete"),
    "assigners": ("approve", "suspend", "delete"),
    "users": ("activate", "deactivate", "delete"),
}


def account_status(row: Any) -> str:
    """Moderation status of a shop, staff member or user."""
    if isinstance(row, User):
        return AccountStatus.SUSPENDED if row.activate is False else AccountStatus.APPROVED
    if isinstance(row, (Shop, StaffMember)):
        return AccountStatus.normalize(row.account_status)
    return AccountStatus.normalize(getattr(row, "status", None))


def filter_by_status(
    rows: Iterable[T],
    status_filter: str,
    status_of: Callable[[T], str] = account_status,
) -> list[T]:
    """Keep rows whose status matches the filter; ``all`` keeps everything."""
    if not status_filter or status_filter == "all":
        return list(rows)
    wanted = AccountStatus.normalize(status_filter)
    return [row for row in rows if status_of(row) == wanted]


def search_rows(rows: Iterable[T], query: str) -> list[T]:
    """Case-insensitive match on name, email or phone."""
    needle = (query or "").strip().lower()
    if not needle:
        return list(rows)
    matched = []
    for row in rows:
        name = getattr(row, "display_name", None) or getattr(row, "name", None)
        haystack = (name, getattr(row, "email", None), getattr(row, "phone", None))
        if any(needle in str(value).lower() for value in haystack if value):
            matched.append(row)
    return matched


@dataclass(slots=True)
class FinancialReport:
    stats: dict[str, Any]
    transactions: list[Transaction]
    user_transactions: list[Transaction] = field(default_factory=list)

    @property
    def revenue(self) -> Decimal:
        paid = ("SUCCESS", "COMPLETED", "PAID")
        return sum(
            (t.amount for t in self.transactions if (t.status or "").upper() in paid),
            Decimal("0"),
        )


class AdminService:
    """Moderation and reporting for ROLE_ADMIN sessions."""

    def __init__(self, api: RepairHubApi):
        self._api = api

    async def moderation_list(
        self,
        auth: AuthSession,
        kind: str,
        status_filter: str = "all",
        query: str = "",
    ) -> list[Any]:
        """Fetch a moderation list.

        The filter chooses the endpoint; rows are filtered again locally so
        only matching statuses render even when the backend returns extras.
        """
        if kind not in MODERATION_KINDS:
            raise ValueError(f"Unknown moderation list: {kind}")
        if status_filter not in STATUS_FILTERS:
            status_filter = "all"

        if kind == "shops":
            if query.strip():
                rows: list[Any] = await self._api.admin.search_shops(auth, query.strip())
            else:
                rows = await self._api.admin.list_shops(auth, status_filter)
        elif kind == "users":
            rows = await self._api.admin.list_users(auth)
        else:
            rows = await self._api.admin.list_staff(auth, kind, status_filter)

        rows = filter_by_status(rows, status_filter)
        return search_rows(rows, query)

    async def moderate(self, auth: AuthSession, kind: str, item_id: int, action: str) -> Any:
        if action not in KIND_ACTIONS.get(kind, ()):
            raise ValueError(f"Action {action} is not available for {kind}")
        logger.info("Admin %s: %s %s #%s", auth.user_id, action, kind, item_id)
        if kind == "shops":
            return await self._api.admin.shop_action(auth, item_id, action)
        if kind == "users":
            return await self._api.admin.user_action(auth, item_id, action)
        return await self._api.admin.staff_action(auth, kind, item_id, action)

    async def update_user_role(self, auth: AuthSession, user_id: int, role: str) -> Any:
        return await self._api.admin.update_user_role(auth, user_id, role)

    async def stats(self, auth: AuthSession) -> dict[str, Any]:
        return await self._api.admin.stats(auth)

    async def financial_report(self, auth: AuthSession, user_id: int | None = None) -> FinancialReport:
        """Stats and transaction lists fetched concurrently."""
        calls = [self._api.admin.stats(auth), self._api.admin.all_transactions(auth)]
        if user_id is not None:
            calls.append(self._api.admin.user_transactions(auth, user_id))
        results = await asyncio.gather(*calls)
        return FinancialReport(
            stats=results[0],
            transactions=results[1],
            user_transactions=results[2] if user_id is not None else [],
        )
