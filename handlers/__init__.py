"""
Handlers package - modular bot handlers using aiogram Router

common/     - errors, /start, language, help, login, register, logout
customer/   - explore, cart, checkout, orders, repairs, offers, account, notifications
shop/       - shop dashboard, orders control, repair queue, offers
delivery/   - courier jobs and assigner queues
admin/      - dashboard, financial report, moderation lists
"""
from aiogram import Dispatcher, Router

from handlers.admin import admin_router
from handlers.common import common_router
from handlers.customer import customer_router
from handlers.delivery import delivery_router
from handlers.shop import shop_router

# Common first: it owns the error handlers and FSM-agnostic commands like /cancel
ROUTERS: tuple[Router, ...] = (
    common_router,
    shop_router,
    delivery_router,
    admin_router,
    customer_router,
)


def setup_routers(dp: Dispatcher) -> None:
    """Include every router in priority order."""
    for router in ROUTERS:
        dp.include_router(router)


__all__ = ["ROUTERS", "setup_routers"]
