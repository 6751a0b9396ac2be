"""
Admin router - dashboard, financial report, moderation lists.
"""
from aiogram import Router

from app.domain.roles import ROLE_ADMIN
from handlers.admin import dashboard, moderation
from handlers.common.filters import HasRole

router = Router(name="admin")
router.message.filter(HasRole(ROLE_ADMIN))
router.callback_query.filter(HasRole(ROLE_ADMIN))

router.include_router(dashboard.router)
router.include_router(moderation.router)
