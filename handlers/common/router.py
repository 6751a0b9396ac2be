"""
Common router - aggregates all common handlers.
"""
from aiogram import Router

from handlers.common import auth, commands, errors

router = Router(name="common")

# Include sub-routers
router.include_router(errors.router)
router.include_router(commands.router)
router.include_router(auth.router)
