"""
Customer router - explore, cart, checkout, orders, repairs, offers, account.
"""
from aiogram import Router

from handlers.customer import account, cart, checkout, explore, notifications, offers, orders, repair

router = Router(name="customer")

router.include_router(checkout.router)
router.include_router(explore.router)
router.include_router(cart.router)
router.include_router(orders.router)
router.include_router(repair.router)
router.include_router(offers.router)
router.include_router(account.router)
router.include_router(notifications.router)
