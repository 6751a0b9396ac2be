"""Repair requests: creation wizard, list, quote answer, cancel and payment."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext

from app.core.pagination import paginate
from app.domain.checkout import REPAIR_DELIVERY_METHODS, REPAIR_PAYMENT_METHODS
from app.domain.statuses import RepairStatus
from app.keyboards import (
    cancel_keyboard,
    payment_link_keyboard,
    repair_address_keyboard,
    repair_category_keyboard,
    repair_delivery_method_keyboard,
    repair_detail_keyboard,
    repair_menu_keyboard,
    repair_payment_keyboard,
    repair_shops_keyboard,
    repairs_keyboard,
)
from app.services import Services
from app.services.repair_service import DEVICE_CATEGORIES
from app.templates.repairs import render_repair, render_repairs_list, render_wizard_header
from handlers.common.states import CreateRepair, RepairDetails
from handlers.common.utils import home_keyboard, parse_int, render
from localization import button_texts, get_text

router = Router(name="repair")

CARD_METHODS = ("CREDIT_CARD", "DEBIT_CARD")
# Shops list is a picker, not a catalogue
MAX_SHOP_CHOICES = 10


@router.message(F.text.in_(button_texts("menu_repair")))
async def repair_menu(message: types.Message, state: FSMContext, services: Services, lang: str) -> None:
    services.auth.require_session(message.from_user.id)
    await state.set_state(None)
    await message.answer(get_text(lang, "repair_menu"), reply_markup=repair_menu_keyboard(lang))


@router.callback_query(F.data == "repair_new")
async def repair_new(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    services.auth.require_session(callback.from_user.id)
    await state.set_state(CreateRepair.category)
    await render(callback, render_wizard_header(lang, "device_type"), repair_category_keyboard(lang))


@router.callback_query(CreateRepair.category, F.data.startswith("repair_cat_"))
async def repair_category(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    category = callback.data.split("_", 2)[2]
    if category not in DEVICE_CATEGORIES:
        await callback.answer()
        return
    auth = services.auth.require_session(callback.from_user.id)
    shops = await services.catalog.shops(auth)
    if not shops:
        await state.clear()
        await render(callback, get_text(lang, "repair_no_shops"))
        return
    await state.update_data(device_category=category)
    await state.set_state(CreateRepair.shop)
    await render(
        callback,
        render_wizard_header(lang, "select_shop"),
        repair_shops_keyboard(lang, shops[:MAX_SHOP_CHOICES]),
    )


@router.callback_query(CreateRepair.shop, F.data.startswith("repair_shop_"))
async def repair_shop(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    shop_id = parse_int(callback.data.split("_")[-1])
    if shop_id is None:
        await callback.answer()
        return
    await state.update_data(shop_id=shop_id)
    await state.set_state(CreateRepair.description)
    await callback.answer()
    if callback.message:
        await callback.message.answer(
            render_wizard_header(lang, "describe") + "\n\n" + get_text(lang, "repair_describe"),
            reply_markup=cancel_keyboard(lang),
        )


@router.message(CreateRepair.description, F.text)
async def repair_description(message: types.Message, state: FSMContext, services: Services, lang: str) -> None:
    auth = services.auth.require_session(message.from_user.id)
    data = await state.get_data()
    request = await services.repairs.create(auth, data["shop_id"], data["device_category"], message.text)
    await state.clear()
    await message.answer(get_text(lang, "repair_created", request_id=request.id), reply_markup=home_keyboard(auth, lang))
    await message.answer(
        render_repair(lang, request, services.settings.currency),
        reply_markup=repair_detail_keyboard(lang, request),
    )


@router.callback_query(F.data.startswith("repairs_page_"))
async def repairs_page(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    page = parse_int(callback.data.split("_")[-1]) or 1
    requests = await services.repairs.list_mine(auth)
    result = paginate(requests, page, services.settings.page_size)
    await render(
        callback,
        render_repairs_list(lang, result.items),
        repairs_keyboard(lang, result.items, result.page, result.page_count),
    )


async def show_repair(callback: types.CallbackQuery, services: Services, lang: str, request_id: int) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    request = await services.repairs.get(auth, request_id)
    await render(
        callback,
        render_repair(lang, request, services.settings.currency),
        repair_detail_keyboard(lang, request),
    )


@router.callback_query(F.data.startswith("repair_view_"))
async def repair_view(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    await show_repair(callback, services, lang, request_id)


@router.callback_query(F.data.startswith("repair_details_"))
async def repair_accept_quote(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    """Accepting a quote starts the delivery/payment questions."""
    auth = services.auth.require_session(callback.from_user.id)
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    request = await services.repairs.get(auth, request_id)
    if not RepairStatus.awaiting_decision(request.status):
        await callback.answer(get_text(lang, "repair_no_quote"), show_alert=True)
        return
    await state.update_data(repair_id=request_id)
    await state.set_state(RepairDetails.delivery_method)
    await render(
        callback,
        render_wizard_header(lang, "delivery_address", request.status),
        repair_delivery_method_keyboard(lang),
    )


@router.callback_query(RepairDetails.delivery_method, F.data.startswith("repair_dm_"))
async def repair_delivery_method(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    method = callback.data.split("_", 2)[2]
    if method not in REPAIR_DELIVERY_METHODS:
        await callback.answer()
        return
    await state.update_data(delivery_method=method)
    if method == "SHOP_VISIT":
        await state.set_state(RepairDetails.payment)
        await render(callback, render_wizard_header(lang, "payment_method", RepairStatus.QUOTE_SENT), repair_payment_keyboard(lang))
        return

    auth = services.auth.require_session(callback.from_user.id)
    addresses = await services.account.addresses(auth)
    if not addresses:
        await state.clear()
        await render(callback, get_text(lang, "checkout_no_address"))
        return
    await state.set_state(RepairDetails.address)
    await render(callback, get_text(lang, "checkout_address"), repair_address_keyboard(lang, addresses))


@router.callback_query(RepairDetails.address, F.data.startswith("repair_addr_"))
async def repair_address(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    address_id = parse_int(callback.data.split("_")[-1])
    if address_id is None:
        await callback.answer()
        return
    await state.update_data(delivery_address=str(address_id))
    await state.set_state(RepairDetails.payment)
    await render(callback, render_wizard_header(lang, "payment_method", RepairStatus.QUOTE_SENT), repair_payment_keyboard(lang))


@router.callback_query(RepairDetails.payment, F.data.startswith("repair_pm_"))
async def repair_payment(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    method = callback.data.split("_", 2)[2]
    if method not in REPAIR_PAYMENT_METHODS:
        await callback.answer()
        return
    auth = services.auth.require_session(callback.from_user.id)
    data = await state.get_data()
    request = await services.repairs.get(auth, data["repair_id"])
    await services.repairs.submit_delivery_details(
        auth, request, data.get("delivery_address"), data.get("delivery_method", ""), method
    )
    await services.repairs.confirm_quote(auth, request.id)
    await state.clear()

    if method in CARD_METHODS:
        url = await services.repairs.pay_by_card(auth, request.id)
        await render(callback, get_text(lang, "repair_quote_accepted") + "\n\n" + get_text(lang, "pay_by_card_hint"), payment_link_keyboard(lang, url))
        return
    await show_repair(callback, services, lang, request.id)


@router.callback_query(F.data.startswith("repair_reject_"))
async def repair_reject_quote(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    await services.repairs.reject_quote(auth, request_id)
    await show_repair(callback, services, lang, request_id)


@router.callback_query(F.data.startswith("repair_cancel_"))
async def repair_cancel(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    request = await services.repairs.get(auth, request_id)
    await services.repairs.cancel(auth, request)
    await show_repair(callback, services, lang, request_id)


@router.callback_query(F.data.startswith("repair_pay_"))
async def repair_pay(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    request_id = parse_int(callback.data.split("_")[-1])
    if request_id is None:
        await callback.answer()
        return
    url = await services.repairs.pay_by_card(auth, request_id)
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "pay_by_card_hint"), reply_markup=payment_link_keyboard(lang, url))


@router.callback_query(StateFilter("*"), F.data == "repair_abort")
async def repair_abort(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    await state.clear()
    await render(callback, get_text(lang, "action_cancelled"))
