"""Common helpers shared by handlers."""
from __future__ import annotations

from aiogram import types
from aiogram.exceptions import TelegramBadRequest
from aiogram.types import InlineKeyboardMarkup

from app.core.session_store import AuthSession
from app.domain.roles import home_for_roles
from app.keyboards import guest_menu, login_keyboard, main_menu
from localization import get_text
from logging_config import logger


def parse_int(value: str | None) -> int | None:
    try:
        return int(value) if value is not None else None
    except ValueError:
        return None


def callback_parts(data: str | None, count: int) -> list[str]:
    """Split ``prefix_action_a_b`` callback data into at most ``count`` parts.

    The last part keeps its underscores, so statuses like ``QUOTE_SENT``
    survive the split.
    """
    return (data or "").split("_", count - 1)


def home_keyboard(auth: AuthSession | None, lang: str):
    if auth is None:
        return guest_menu(lang)
    return main_menu(home_for_roles(auth.roles), lang)


async def safe_edit_message(
    message: types.Message | None,
    text: str,
    reply_markup: InlineKeyboardMarkup | None = None,
) -> None:
    """Edit a bot message in place, falling back to a new message."""
    if message is None:
        return
    try:
        await message.edit_text(text, reply_markup=reply_markup)
    except TelegramBadRequest as e:
        if "message is not modified" in str(e):
            return
        logger.debug("Edit failed, sending new message: %s", e)
        await message.answer(text, reply_markup=reply_markup)


async def render(
    event: types.Message | types.CallbackQuery,
    text: str,
    reply_markup: InlineKeyboardMarkup | None = None,
) -> None:
    """Answer a message, or edit the message a callback came from."""
    if isinstance(event, types.CallbackQuery):
        await safe_edit_message(event.message, text, reply_markup)
        await event.answer()
    else:
        await event.answer(text, reply_markup=reply_markup)


async def ask_login(event: types.Message | types.CallbackQuery, lang: str) -> None:
    text = get_text(lang, "login_required")
    if isinstance(event, types.CallbackQuery):
        await event.answer()
        if event.message:
            await event.message.answer(text, reply_markup=login_keyboard(lang))
    else:
        await event.answer(text, reply_markup=login_keyboard(lang))
