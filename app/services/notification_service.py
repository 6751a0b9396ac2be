"""Notification feed for customers and shops."""
from __future__ import annotations

from app.api import RepairHubApi
from app.core.session_store import AuthSession
from app.domain.models import Notification
from app.domain.roles import SHOP_ROLES


def audience_for(auth: AuthSession) -> str:
    return "shops" if auth.has_role(*SHOP_ROLES) else "users"


class NotificationService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def feed(self, auth: AuthSession) -> list[Notification]:
        """Unread first, newest first within each group."""
        items = await self._api.notifications.list_notifications(auth, audience_for(auth))
        return sorted(items, key=lambda n: (n.read, -(n.id or 0)))

    async def mark_read(self, auth: AuthSession, notification_id: int) -> None:
        await self._api.notifications.mark_read(auth, notification_id, audience_for(auth))

    async def delete(self, auth: AuthSession, notification_id: int) -> None:
        await self._api.notifications.delete(auth, notification_id, audience_for(auth))
