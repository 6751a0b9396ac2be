"""Per-user and per-shop notification feeds."""
from __future__ import annotations

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Notification

AUDIENCES = ("users", "shops")


def _base(audience: str) -> str:
    if audience not in AUDIENCES:
        raise ValueError(f"Unknown notification audience: {audience}")
    return f"/api/notifications/{audience}"


class NotificationsApi(ResourceApi):
    async def list_notifications(self, auth: AuthSession, audience: str = "users") -> list[Notification]:
        return await self._list(Notification, _base(audience), auth)

    async def mark_read(self, auth: AuthSession, notification_id: int, audience: str = "users") -> None:
        await self._client.put(f"{_base(audience)}/{notification_id}", auth=auth)

    async def delete(self, auth: AuthSession, notification_id: int, audience: str = "users") -> None:
        await self._client.delete(f"{_base(audience)}/{notification_id}", auth=auth)
