"""Active offers, paginated."""
from __future__ import annotations

from aiogram import F, Router, types

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.keyboards import offers_keyboard
from app.services import Services
from app.templates.offers import render_offers_page
from handlers.common.utils import parse_int, render
from localization import button_texts

router = Router(name="offers")


async def show_offers(
    event: types.Message | types.CallbackQuery,
    services: Services,
    lang: str,
    auth: AuthSession | None,
    page: int = 1,
) -> None:
    offers = await services.catalog.offers(auth)
    result = paginate(offers, page, services.settings.page_size)
    await render(
        event,
        render_offers_page(lang, result, services.settings.currency),
        offers_keyboard(lang, result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_offers")))
async def offers(message: types.Message, services: Services, lang: str, auth: AuthSession | None) -> None:
    await show_offers(message, services, lang, auth)


@router.callback_query(F.data.startswith("offers_page_"))
async def offers_page(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession | None) -> None:
    await show_offers(callback, services, lang, auth, parse_int(callback.data.split("_")[-1]) or 1)
