"""Account screen: profile summary and saved addresses."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.security import esc
from app.keyboards import account_keyboard, addresses_keyboard, cancel_keyboard
from app.services import Services
from handlers.common.states import AddAddress
from handlers.common.utils import home_keyboard, parse_int, render
from localization import button_texts, get_text

router = Router(name="account")


@router.message(F.text.in_(button_texts("menu_account")))
async def account(message: types.Message, services: Services, lang: str) -> None:
    auth = services.auth.require_session(message.from_user.id)
    profile = await services.account.profile(auth)
    text = get_text(
        lang,
        "account_profile",
        name=esc(profile.display_name),
        email=esc(profile.email or auth.email or "-"),
        phone=esc(profile.phone or "-"),
    )
    await message.answer(text, reply_markup=account_keyboard(lang))


async def show_addresses(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    addresses = await services.account.addresses(auth)
    lines = [get_text(lang, "addresses_title"), ""]
    lines += [f"{'⭐' if a.is_default else '📍'} {esc(a.label)}" for a in addresses] or [get_text(lang, "addresses_empty")]
    await render(callback, "\n".join(lines), addresses_keyboard(lang, addresses))


@router.callback_query(F.data == "account_addresses")
async def addresses(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    await show_addresses(callback, services, lang)


@router.callback_query(F.data.startswith("addr_del_"))
async def address_delete(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    address_id = parse_int(callback.data.split("_")[-1])
    if address_id is None:
        await callback.answer()
        return
    await services.account.delete_address(auth, address_id)
    await show_addresses(callback, services, lang)


@router.callback_query(F.data == "addr_add")
async def address_add(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    await state.set_state(AddAddress.street)
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "address_street"), reply_markup=cancel_keyboard(lang))


@router.message(AddAddress.street, F.text)
async def address_street(message: types.Message, state: FSMContext, lang: str) -> None:
    await state.update_data(street=message.text)
    await state.set_state(AddAddress.city)
    await message.answer(get_text(lang, "address_city"))


@router.message(AddAddress.city, F.text)
async def address_city(message: types.Message, state: FSMContext, services: Services, lang: str) -> None:
    auth = services.auth.require_session(message.from_user.id)
    data = await state.get_data()
    address = await services.account.add_address(auth, data.get("street", ""), message.text)
    await state.clear()
    await message.answer(
        get_text(lang, "address_saved", address=esc(address.label)),
        reply_markup=home_keyboard(auth, lang),
    )
