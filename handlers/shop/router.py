"""
Shop router - dashboard, orders control, repair queue, offers.

Every handler here requires a shop role.
"""
from aiogram import Router

from app.domain.roles import SHOP_ROLES
from handlers.common.filters import HasRole
from handlers.shop import dashboard, orders, repairs

router = Router(name="shop")
router.message.filter(HasRole(*SHOP_ROLES))
router.callback_query.filter(HasRole(*SHOP_ROLES))

router.include_router(dashboard.router)
router.include_router(orders.router)
router.include_router(repairs.router)
