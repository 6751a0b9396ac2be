"""Cart view and editing handlers.

Quantity changes are shown immediately and rolled back on the screen when
the backend rejects them.
"""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.exceptions import ApiException, ConnectionException
from app.core.session_store import AuthSession
from app.keyboards import addresses_keyboard, cart_keyboard, checkout_address_keyboard
from app.services import Services
from app.templates.cart import render_cart
from handlers.common.states import Checkout
from handlers.common.utils import parse_int, render, safe_edit_message
from localization import button_texts, get_text
from logging_config import logger

router = Router(name="cart")


def _cart_view(services: Services, auth: AuthSession, lang: str) -> tuple[str, types.InlineKeyboardMarkup]:
    items = services.cart.items(auth)
    return render_cart(lang, items, services.settings.currency), cart_keyboard(lang, items)


async def show_cart(event: types.Message | types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(event.from_user.id)
    await services.cart.load(auth)
    text, kb = _cart_view(services, auth, lang)
    await render(event, text, kb)


@router.message(F.text.in_(button_texts("menu_cart")))
async def cart(message: types.Message, state: FSMContext, services: Services, lang: str) -> None:
    await state.set_state(None)
    await show_cart(message, services, lang)


@router.callback_query(F.data == "cart_refresh")
async def cart_refresh(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    await show_cart(callback, services, lang)


@router.callback_query(F.data.startswith("cart_inc_") | F.data.startswith("cart_dec_"))
async def cart_change_quantity(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    _, action, raw_id = callback.data.split("_")
    item_id = parse_int(raw_id)
    item = services.cart.find(auth, item_id) if item_id is not None else None
    if item is None:
        await show_cart(callback, services, lang)
        return

    quantity = item.quantity + (1 if action == "inc" else -1)
    try:
        await services.cart.update_quantity(auth, item.id, quantity)
    except (ApiException, ConnectionException) as e:
        # The service already restored the previous quantity
        logger.warning("Quantity change rejected for user %s: %s", callback.from_user.id, e)
        await callback.answer(get_text(lang, "cart_update_failed"), show_alert=True)
        text, kb = _cart_view(services, auth, lang)
        await safe_edit_message(callback.message, text, kb)
        return

    text, kb = _cart_view(services, auth, lang)
    await render(callback, text, kb)


@router.callback_query(F.data.startswith("cart_rm_"))
async def cart_remove(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    item_id = parse_int(callback.data.split("_")[-1])
    if item_id is None:
        await callback.answer()
        return
    try:
        await services.cart.remove_item(auth, item_id)
    except (ApiException, ConnectionException) as e:
        logger.warning("Cart remove rejected for user %s: %s", callback.from_user.id, e)
        await callback.answer(get_text(lang, "cart_update_failed"), show_alert=True)
        text, kb = _cart_view(services, auth, lang)
        await safe_edit_message(callback.message, text, kb)
        return
    text, kb = _cart_view(services, auth, lang)
    await render(callback, text, kb)


@router.callback_query(F.data == "cart_clear")
async def cart_clear(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    await services.cart.clear(auth)
    text, kb = _cart_view(services, auth, lang)
    await render(callback, text, kb)


@router.callback_query(F.data == "cart_checkout")
async def cart_checkout(callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    if not services.cart.items(auth):
        await callback.answer(get_text(lang, "cart_empty"), show_alert=True)
        return
    addresses = await services.account.addresses(auth)
    if not addresses:
        await render(callback, get_text(lang, "checkout_no_address"), addresses_keyboard(lang, []))
        return
    await state.set_state(Checkout.address)
    await render(callback, get_text(lang, "checkout_address"), checkout_address_keyboard(lang, addresses))
