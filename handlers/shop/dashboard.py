"""Shop dashboard and offers list."""
from __future__ import annotations

import asyncio

from aiogram import F, Router, types

from app.core.session_store import AuthSession
from app.keyboards import shop_offers_keyboard
from app.services import Services
from app.templates.shop import render_dashboard, render_shop_offers
from handlers.common.utils import parse_int, render
from localization import button_texts

router = Router(name="shop_dashboard")


@router.message(F.text.in_(button_texts("menu_shop_dashboard")))
async def dashboard(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    board, low_stock = await asyncio.gather(
        services.shops.dashboard(auth),
        services.shops.low_stock(auth),
    )
    await message.answer(render_dashboard(lang, board, low_stock))


async def show_offers(event: types.Message | types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    offers = await services.shops.offers(auth)
    await render(event, render_shop_offers(lang, offers, services.settings.currency), shop_offers_keyboard(lang, offers))


@router.message(F.text.in_(button_texts("menu_shop_offers")))
async def offers(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_offers(message, services, lang, auth)


@router.callback_query(F.data.startswith("soffer_del_"))
async def offer_delete(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    offer_id = parse_int(callback.data.split("_")[-1])
    if offer_id is None:
        await callback.answer()
        return
    await services.shops.delete_offer(auth, offer_id)
    await show_offers(callback, services, lang, auth)
