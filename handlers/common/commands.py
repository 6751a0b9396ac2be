"""/start, /help, language switch, cancel and the main menu."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.filters import Command, CommandStart, StateFilter
from aiogram.fsm.context import FSMContext

from app.core.config import SUPPORTED_LANGUAGES
from app.core.session_store import AuthSession
from app.domain.roles import home_for_roles
from app.keyboards import language_keyboard
from app.services import Services
from handlers.common.utils import home_keyboard
from localization import button_texts, get_text

router = Router(name="commands")


@router.message(CommandStart())
async def cmd_start(message: types.Message, state: FSMContext, lang: str, auth: AuthSession | None) -> None:
    await state.clear()
    if auth is None:
        await message.answer(get_text(lang, "welcome"), reply_markup=home_keyboard(None, lang))
        return
    home = home_for_roles(auth.roles)
    await message.answer(
        get_text(lang, "welcome_back", email=auth.email or "", home=get_text(lang, f"home_{home}")),
        reply_markup=home_keyboard(auth, lang),
    )


@router.message(Command("help"))
async def cmd_help(message: types.Message, lang: str) -> None:
    await message.answer(get_text(lang, "help"))


@router.message(Command("menu"))
async def cmd_menu(message: types.Message, state: FSMContext, lang: str, auth: AuthSession | None) -> None:
    await state.clear()
    await message.answer(get_text(lang, "main_menu"), reply_markup=home_keyboard(auth, lang))


@router.message(Command("language"))
@router.message(F.text.in_(button_texts("menu_language")))
async def choose_language(message: types.Message, lang: str) -> None:
    await message.answer(get_text(lang, "choose_language"), reply_markup=language_keyboard())


@router.callback_query(F.data == "account_language")
async def choose_language_cb(callback: types.CallbackQuery, lang: str) -> None:
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "choose_language"), reply_markup=language_keyboard())


@router.callback_query(F.data.startswith("lang_"))
async def set_language(callback: types.CallbackQuery, services: Services, auth: AuthSession | None) -> None:
    new_lang = callback.data.split("_", 1)[1]
    if new_lang not in SUPPORTED_LANGUAGES:
        await callback.answer()
        return
    services.sessions.set_lang(callback.from_user.id, new_lang)
    await callback.answer(get_text(new_lang, "language_changed"))
    if callback.message:
        await callback.message.answer(
            get_text(new_lang, "main_menu"), reply_markup=home_keyboard(auth, new_lang)
        )


@router.message(Command("cancel"))
@router.message(StateFilter("*"), F.text.in_(button_texts("cancel")))
async def cmd_cancel(message: types.Message, state: FSMContext, lang: str, auth: AuthSession | None) -> None:
    await state.clear()
    await message.answer(get_text(lang, "action_cancelled"), reply_markup=home_keyboard(auth, lang))


@router.callback_query(F.data == "noop")
async def noop(callback: types.CallbackQuery) -> None:
    await callback.answer()
