"""REST API client layer grouped by backend resource."""
from __future__ import annotations

from app.api.admin import AdminApi
from app.api.assigner import AssignerApi
from app.api.auth import AuthApi
from app.api.cart import CartApi
from app.api.catalog import CatalogApi
from app.api.client import ApiClient, normalize_path, unwrap_content
from app.api.delivery import DeliveryApi
from app.api.notifications import NotificationsApi
from app.api.payments import PaymentsApi
from app.api.repair import RepairApi
from app.api.shops import ShopsApi
from app.api.users import UsersApi


class RepairHubApi:
    """All resource APIs sharing one ApiClient."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.auth = AuthApi(client)
        self.users = UsersApi(client)
        self.cart = CartApi(client)
        self.catalog = CatalogApi(client)
        self.repair = RepairApi(client)
        self.shops = ShopsApi(client)
        self.admin = AdminApi(client)
        self.payments = PaymentsApi(client)
        self.notifications = NotificationsApi(client)
        self.delivery = DeliveryApi(client)
        self.assigner = AssignerApi(client)

    async def close(self) -> None:
        await self.client.close()


__all__ = [
    "ApiClient",
    "RepairHubApi",
    "normalize_path",
    "unwrap_content",
]
