"""Login, registration with OTP verification, and logout."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from app.api.auth import REGISTER_KINDS
from app.core.exceptions import ApiException, ValidationException
from app.core.security import InputValidator, esc
from app.keyboards import cancel_keyboard, guest_menu, main_menu, otp_keyboard, register_kind_keyboard
from app.services import Services
from handlers.common.states import ForgotPassword, Login, Register
from localization import button_texts, get_text
from logging_config import logger

router = Router(name="auth")


async def _start_login(message: types.Message, state: FSMContext, lang: str) -> None:
    await state.set_state(Login.email)
    await message.answer(get_text(lang, "login_email"), reply_markup=cancel_keyboard(lang))


@router.message(Command("login"))
@router.message(F.text.in_(button_texts("menu_login")))
async def login_start(message: types.Message, state: FSMContext, lang: str) -> None:
    await _start_login(message, state, lang)


@router.callback_query(F.data == "auth_login")
async def login_start_cb(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    await callback.answer()
    if callback.message:
        await _start_login(callback.message, state, lang)


@router.message(Login.email, F.text)
async def login_email(message: types.Message, state: FSMContext, lang: str) -> None:
    email = message.text.strip().lower()
    if not InputValidator.validate_email(email):
        await message.answer(get_text(lang, "error_email"))
        return
    await state.update_data(email=email)
    await state.set_state(Login.password)
    await message.answer(get_text(lang, "login_password"))


@router.message(Login.password, F.text)
async def login_password(message: types.Message, state: FSMContext, lang: str, services: Services) -> None:
    data = await state.get_data()
    password = message.text
    # Keep the password out of the chat history
    try:
        await message.delete()
    except TelegramAPIError as e:
        logger.debug("Could not delete password message: %s", e)

    try:
        result = await services.auth.login(message.from_user.id, data.get("email", ""), password)
    except ApiException as e:
        logger.info("Login failed for %s: %s", message.from_user.id, e)
        await state.set_state(Login.email)
        await message.answer(get_text(lang, "login_failed", reason=esc(e.message)))
        return

    await state.clear()
    services.cart.forget(result.session)
    text = get_text(lang, "login_success", home=get_text(lang, f"home_{result.home}"))
    if result.requires_renewal:
        text += "\n\n" + get_text(lang, "subscription_renewal", email=esc(result.shop_email or ""))
    await message.answer(text, reply_markup=main_menu(result.home, lang))


async def _start_register(message: types.Message, state: FSMContext, lang: str) -> None:
    await state.set_state(Register.kind)
    await message.answer(get_text(lang, "register_kind"), reply_markup=register_kind_keyboard(lang))


@router.message(Command("register"))
@router.message(F.text.in_(button_texts("menu_register")))
async def register_start(message: types.Message, state: FSMContext, lang: str) -> None:
    await _start_register(message, state, lang)


@router.callback_query(F.data == "auth_register")
async def register_start_cb(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    await callback.answer()
    if callback.message:
        await _start_register(callback.message, state, lang)


@router.callback_query(Register.kind, F.data.startswith("reg_kind_"))
async def register_kind(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    kind = callback.data.split("_", 2)[2]
    if kind not in REGISTER_KINDS:
        await callback.answer()
        return
    await state.update_data(kind=kind)
    await state.set_state(Register.name)
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "register_name"), reply_markup=cancel_keyboard(lang))


@router.message(Register.name, F.text)
async def register_name(message: types.Message, state: FSMContext, lang: str) -> None:
    name = InputValidator.sanitize_text(message.text, max_length=100)
    if len(name) < 2:
        await message.answer(get_text(lang, "error_name"))
        return
    await state.update_data(name=name)
    await state.set_state(Register.email)
    await message.answer(get_text(lang, "register_email"))


@router.message(Register.email, F.text)
async def register_email(message: types.Message, state: FSMContext, lang: str) -> None:
    email = message.text.strip().lower()
    if not InputValidator.validate_email(email):
        await message.answer(get_text(lang, "error_email"))
        return
    await state.update_data(email=email)
    await state.set_state(Register.password)
    await message.answer(get_text(lang, "register_password"))


@router.message(Register.password, F.text)
async def register_password(message: types.Message, state: FSMContext, lang: str, services: Services) -> None:
    password = message.text
    try:
        await message.delete()
    except TelegramAPIError as e:
        logger.debug("Could not delete password message: %s", e)

    data = await state.get_data()
    payload = {"name": data.get("name"), "email": data.get("email"), "password": password}
    try:
        await services.auth.register(data.get("kind", "user"), payload)
    except ValidationException as e:
        await message.answer(get_text(lang, f"error_{e.field}") if e.field else e.message)
        return

    await state.set_state(Register.otp)
    await message.answer(
        get_text(lang, "register_otp", email=esc(data.get("email", ""))),
        reply_markup=otp_keyboard(lang),
    )


@router.message(Register.otp, F.text)
async def register_otp(message: types.Message, state: FSMContext, lang: str, services: Services) -> None:
    data = await state.get_data()
    await services.auth.verify_email(data.get("email", ""), message.text)
    await state.clear()
    await message.answer(get_text(lang, "register_verified"), reply_markup=guest_menu(lang))


@router.callback_query(Register.otp, F.data == "reg_resend_otp")
async def register_resend_otp(callback: types.CallbackQuery, state: FSMContext, lang: str, services: Services) -> None:
    data = await state.get_data()
    await services.auth.resend_otp(data.get("email", ""))
    await callback.answer(get_text(lang, "otp_resent"), show_alert=True)


@router.message(Command("logout"))
@router.message(F.text.in_(button_texts("menu_logout")))
async def logout(message: types.Message, state: FSMContext, lang: str, services: Services) -> None:
    await state.clear()
    session = services.auth.get_session(message.from_user.id)
    if session:
        services.cart.forget(session)
    await services.auth.logout(message.from_user.id)
    await message.answer(get_text(lang, "logged_out"), reply_markup=guest_menu(lang))


@router.callback_query(F.data == "auth_logout")
async def logout_cb(callback: types.CallbackQuery, state: FSMContext, lang: str, services: Services) -> None:
    await callback.answer()
    if callback.message:
        await state.clear()
        session = services.auth.get_session(callback.from_user.id)
        if session:
            services.cart.forget(session)
        await services.auth.logout(callback.from_user.id)
        await callback.message.answer(get_text(lang, "logged_out"), reply_markup=guest_menu(lang))


@router.message(Command("forgot"))
async def forgot_start(message: types.Message, state: FSMContext, lang: str) -> None:
    await state.set_state(ForgotPassword.email)
    await message.answer(get_text(lang, "forgot_email"), reply_markup=cancel_keyboard(lang))


@router.message(ForgotPassword.email, F.text)
async def forgot_email(message: types.Message, state: FSMContext, lang: str, services: Services) -> None:
    email = message.text.strip().lower()
    if not InputValidator.validate_email(email):
        await message.answer(get_text(lang, "error_email"))
        return
    await services.auth.forgot_password(email)
    await state.clear()
    await message.answer(get_text(lang, "forgot_sent", email=esc(email)), reply_markup=guest_menu(lang))
