"""Checkout flow: address → payment method → confirm."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.filters import StateFilter
from aiogram.fsm.context import FSMContext

from app.domain.checkout import CASH, CREDIT_CARD
from app.keyboards import (
    checkout_confirm_keyboard,
    checkout_payment_keyboard,
    payment_link_keyboard,
    payment_retry_keyboard,
)
from app.services import Services
from app.templates.cart import render_checkout_summary
from handlers.common.states import Checkout
from handlers.common.utils import home_keyboard, parse_int, render
from localization import get_text

router = Router(name="checkout")


@router.callback_query(Checkout.address, F.data.startswith("co_addr_"))
async def checkout_address(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    address_id = parse_int(callback.data.split("_")[-1])
    await state.update_data(address_id=address_id)
    await state.set_state(Checkout.payment)
    await render(callback, get_text(lang, "checkout_payment"), checkout_payment_keyboard(lang))


@router.callback_query(Checkout.payment, F.data.startswith("co_pay_"))
async def checkout_payment(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    method = callback.data.split("_", 2)[2]
    if method not in (CREDIT_CARD, CASH):
        await callback.answer()
        return
    auth = services.auth.require_session(callback.from_user.id)
    await state.update_data(payment_method=method)
    await state.set_state(Checkout.confirm)

    data = await state.get_data()
    addresses = await services.account.addresses(auth)
    address = next((a for a in addresses if a.id == data.get("address_id")), None)
    text = render_checkout_summary(lang, services.cart.items(auth), address, method, services.settings.currency)
    await render(callback, text, checkout_confirm_keyboard(lang))


@router.callback_query(Checkout.confirm, F.data == "co_confirm")
async def checkout_confirm(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    data = await state.get_data()
    # Raises CheckoutValidationException before any request when a choice is missing
    result = await services.checkout.place_order(auth, data.get("address_id"), data.get("payment_method"))
    # The order exists from here on, a second confirm must not create another one
    await state.clear()

    text = get_text(lang, "order_placed", order_id=result.order.id)
    if result.requires_payment:
        await render(callback, text + "\n\n" + get_text(lang, "pay_by_card_hint"), payment_link_keyboard(lang, result.payment_url))
    elif result.payment_failed:
        await render(callback, text + "\n\n" + get_text(lang, "payment_start_failed"), payment_retry_keyboard(lang, result.order.id))
    else:
        await render(callback, text)
    if callback.message:
        await callback.message.answer(get_text(lang, "main_menu"), reply_markup=home_keyboard(auth, lang))


@router.callback_query(StateFilter("*"), F.data == "co_cancel")
async def checkout_cancel(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    await state.clear()
    await render(callback, get_text(lang, "checkout_cancelled"))
