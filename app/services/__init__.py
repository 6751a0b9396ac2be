"""Business services orchestrating API calls and local UI state."""
from __future__ import annotations

from dataclasses import dataclass

from app.api import RepairHubApi
from app.core.config import Settings
from app.core.session_store import SessionStore

from .account_service import AccountService
from .admin_service import AdminService
from .auth_service import AuthService
from .cart_service import CartService
from .catalog_service import CatalogService
from .checkout_service import CheckoutService
from .delivery_service import AssignerService, DeliveryService
from .notification_service import NotificationService
from .order_service import OrderService
from .repair_service import RepairService
from .shop_service import ShopService


@dataclass(slots=True)
class Services:
    """Everything a handler needs, injected by ServicesMiddleware."""

    settings: Settings
    sessions: SessionStore
    auth: AuthService
    account: AccountService
    cart: CartService
    checkout: CheckoutService
    catalog: CatalogService
    orders: OrderService
    repairs: RepairService
    shops: ShopService
    admin: AdminService
    delivery: DeliveryService
    assigner: AssignerService
    notifications: NotificationService


def build_services(api: RepairHubApi, sessions: SessionStore, settings: Settings) -> Services:
    auth = AuthService(api, sessions)
    # Refreshed tokens are written back to the session store
    api.client.on_token_refresh = auth.persist_refreshed
    cart = CartService(api)
    return Services(
        settings=settings,
        sessions=sessions,
        auth=auth,
        account=AccountService(api),
        cart=cart,
        checkout=CheckoutService(api, cart),
        catalog=CatalogService(api),
        orders=OrderService(api),
        repairs=RepairService(api),
        shops=ShopService(api),
        admin=AdminService(api),
        delivery=DeliveryService(api),
        assigner=AssignerService(api),
        notifications=NotificationService(api),
    )


__all__ = [
    "AccountService",
    "AdminService",
    "AssignerService",
    "AuthService",
    "CartService",
    "CatalogService",
    "CheckoutService",
    "DeliveryService",
    "NotificationService",
    "OrderService",
    "RepairService",
    "Services",
    "ShopService",
    "build_services",
]
