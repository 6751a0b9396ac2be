"""
Delivery router - courier and assigner screens, each behind its role.
"""
from aiogram import Router

from app.domain.roles import ROLE_ASSIGNER, ROLE_DELIVERY
from handlers.common.filters import HasRole
from handlers.delivery import assigner, courier

courier.router.message.filter(HasRole(ROLE_DELIVERY))
courier.router.callback_query.filter(HasRole(ROLE_DELIVERY))
assigner.router.message.filter(HasRole(ROLE_ASSIGNER))
assigner.router.callback_query.filter(HasRole(ROLE_ASSIGNER))

router = Router(name="delivery")
router.include_router(courier.router)
router.include_router(assigner.router)
