"""Order history, tracking timeline, cancellation and card payment."""
from __future__ import annotations

from aiogram import F, Router, types

from app.core.pagination import paginate
from app.keyboards import order_detail_keyboard, orders_keyboard, payment_link_keyboard
from app.services import Services
from app.templates.orders import render_order, render_orders_list
from handlers.common.utils import parse_int, render
from localization import button_texts, get_text

router = Router(name="orders")


async def show_orders(event: types.Message | types.CallbackQuery, services: Services, lang: str, page: int = 1) -> None:
    auth = services.auth.require_session(event.from_user.id)
    orders = await services.orders.list_orders(auth)
    result = paginate(orders, page, services.settings.page_size)
    await render(
        event,
        render_orders_list(lang, result.items, services.settings.currency),
        orders_keyboard(lang, result.items, result.page, result.page_count),
    )


async def show_order(callback: types.CallbackQuery, services: Services, lang: str, order_id: int) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    order = await services.orders.track(auth, order_id)
    await render(callback, render_order(lang, order, services.settings.currency), order_detail_keyboard(lang, order))


@router.message(F.text.in_(button_texts("menu_orders")))
async def orders(message: types.Message, services: Services, lang: str) -> None:
    await show_orders(message, services, lang)


@router.callback_query(F.data.startswith("orders_page_"))
async def orders_page(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    await show_orders(callback, services, lang, parse_int(callback.data.split("_")[-1]) or 1)


@router.callback_query(F.data.startswith("order_view_"))
async def order_view(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    order_id = parse_int(callback.data.split("_")[-1])
    if order_id is None:
        await callback.answer()
        return
    await show_order(callback, services, lang, order_id)


@router.callback_query(F.data.startswith("order_cancel_"))
async def order_cancel(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    order_id = parse_int(callback.data.split("_")[-1])
    if order_id is None:
        await callback.answer()
        return
    order = await services.orders.track(auth, order_id)
    await services.orders.cancel(auth, order)
    await show_order(callback, services, lang, order_id)


@router.callback_query(F.data.startswith("order_pay_"))
async def order_pay(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    order_id = parse_int(callback.data.split("_")[-1])
    if order_id is None:
        await callback.answer()
        return
    url = await services.orders.pay_by_card(auth, order_id)
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "pay_by_card_hint"), reply_markup=payment_link_keyboard(lang, url))
