"""Shop orders control: status filter, accept/reject, status changes."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.domain.statuses import OrderStatus
from app.keyboards import shop_order_keyboard, shop_orders_keyboard
from app.services import Services
from app.templates.orders import render_order, render_orders_list
from handlers.common.utils import callback_parts, parse_int, render
from localization import button_texts

router = Router(name="shop_orders")


async def show_orders(
    event: types.Message | types.CallbackQuery,
    state: FSMContext,
    services: Services,
    lang: str,
    auth: AuthSession,
    page: int = 1,
) -> None:
    status = (await state.get_data()).get("shop_order_status")
    orders = await services.shops.orders(auth, status)
    result = paginate(orders, page, services.settings.page_size)
    await render(
        event,
        render_orders_list(lang, result.items, services.settings.currency),
        shop_orders_keyboard(lang, result.items, status, result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_shop_orders")))
async def orders(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession) -> None:
    await show_orders(message, state, services, lang, auth)


@router.callback_query(F.data.startswith("sord_page_"))
async def orders_page(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    await show_orders(callback, state, services, lang, auth, parse_int(callback.data.split("_")[-1]) or 1)


@router.callback_query(F.data.startswith("sord_filter_"))
async def orders_filter(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    value = callback_parts(callback.data, 3)[2]
    await state.update_data(shop_order_status=value if value in OrderStatus.ALL else None)
    await show_orders(callback, state, services, lang, auth)


async def show_order(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession, order_id: int) -> None:
    order = await services.shops.order(auth, order_id)
    await render(callback, render_order(lang, order, services.settings.currency), shop_order_keyboard(lang, order))


@router.callback_query(F.data.startswith("sord_view_"))
async def order_view(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    order_id = parse_int(callback.data.split("_")[-1])
    if order_id is None:
        await callback.answer()
        return
    await show_order(callback, services, lang, auth, order_id)


@router.callback_query(F.data.startswith("sord_accept_") | F.data.startswith("sord_reject_"))
async def order_decide(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, action, raw_id = callback.data.split("_")
    order_id = parse_int(raw_id)
    if order_id is None:
        await callback.answer()
        return
    if action == "accept":
        await services.shops.accept(auth, order_id)
    else:
        await services.shops.reject(auth, order_id)
    await show_order(callback, services, lang, auth, order_id)


@router.callback_query(F.data.startswith("sord_status_"))
async def order_status(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, raw_id, status = callback_parts(callback.data, 4)
    order_id = parse_int(raw_id)
    if order_id is None:
        await callback.answer()
        return
    await services.shops.set_status(auth, order_id, status)
    await show_order(callback, services, lang, auth, order_id)
