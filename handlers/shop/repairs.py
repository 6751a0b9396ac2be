"""Shop repair queue: status filter, status updates and quotes."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.domain.statuses import RepairStatus
from app.keyboards import cancel_keyboard, shop_repair_keyboard, shop_repairs_keyboard
from app.services import Services
from app.templates.repairs import render_repair, render_repairs_list
from app.templates.shop import render_quote_prompt
from handlers.common.states import SendQuote
from handlers.common.utils import callback_parts, home_keyboard, parse_int, render
from localization import button_texts, get_text

router = Router(name="shop_repairs")


async def show_requests(
    event: types.Message | types.CallbackQuery,
    state: FSMContext,
    services: Services,
    lang: str,
    auth: AuthSession,
    page: int = 1,
) -> None:
    status = (await state.get_data()).get("shop_repair_status")
    requests = await services.repairs.shop_requests(auth, status)
    result = paginate(requests, page, services.settings.page_size)
    await render(
        event,
        render_repairs_list(lang, result.items),
        shop_repairs_keyboard(lang, result.items, status, result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_shop_repairs")))
async def repairs(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession) -> None:
    await show_requests(message, state, services, lang, auth)


@router.callback_query(F.data.startswith("srep_page_"))
async def repairs_page(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    await show_requests(callback, state, services, lang, auth, parse_int(callback.data.split("_")[-1]) or 1)


@router.callback_query(F.data.startswith("srep_filter_"))
async def repairs_filter(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    value = callback_parts(callback.data, 3)[2]
    await state.update_data(shop_repair_status=value if value in RepairStatus.ALL else None)
    await show_requests(callback, state, services, lang, auth)


async def _find_request(services: Services, auth: AuthSession, request_id: int):
    # The shop side has no single-request endpoint
    return next((r for r in await services.repairs.shop_requests(auth) if r.id == request_id), None)


async def show_request(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession, request_id: int) -> None:
    request = await _find_request(services, auth, request_id)
    if request is None:
        await callback.answer(get_text(lang, "error_not_found"), show_alert=True)
        return
    await render(callback, render_repair(lang, request, services.settings.currency), shop_repair_keyboard(lang, request))


@router.callback_query(F.data.startswith("srep_view_"))
async def request_view(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    await show_request(callback, services, lang, auth, request_id)


@router.callback_query(F.data.startswith("srep_status_"))
async def request_status(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, raw_id, status = callback_parts(callback.data, 4)
    request_id = parse_int(raw_id)
    if request_id is None:
        await callback.answer()
        return
    await services.repairs.shop_update_status(auth, request_id, status)
    await show_request(callback, services, lang, auth, request_id)


@router.callback_query(F.data.startswith("srep_quote_"))
async def quote_start(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    await state.set_state(SendQuote.price)
    await state.update_data(quote_request_id=request_id)
    await callback.answer()
    if callback.message:
        await callback.message.answer(
            render_quote_prompt(lang, request_id, services.settings.currency),
            reply_markup=cancel_keyboard(lang),
        )


@router.message(SendQuote.price, F.text)
async def quote_price(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession) -> None:
    try:
        price = Decimal(message.text.strip().replace(",", "."))
    except InvalidOperation:
        await message.answer(get_text(lang, "error_price"))
        return
    data = await state.get_data()
    await services.repairs.send_quote(auth, data["quote_request_id"], price)
    await state.clear()
    await message.answer(get_text(lang, "quote_sent"), reply_markup=home_keyboard(auth, lang))
