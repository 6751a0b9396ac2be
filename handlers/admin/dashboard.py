"""Admin dashboard statistics and the financial report."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.filters import Command, CommandObject

from app.core.session_store import AuthSession
from app.keyboards import admin_dashboard_keyboard
from app.services import Services
from app.templates.admin import render_dashboard, render_financial_report
from handlers.common.utils import parse_int, render
from localization import button_texts

router = Router(name="admin_dashboard")


@router.message(Command("admin"))
@router.message(F.text.in_(button_texts("menu_admin_dashboard")))
async def dashboard(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    stats = await services.admin.stats(auth)
    await message.answer(render_dashboard(lang, stats), reply_markup=admin_dashboard_keyboard(lang))


@router.message(Command("finance"))
async def finance_command(
    message: types.Message, command: CommandObject, services: Services, lang: str, auth: AuthSession
) -> None:
    """``/finance`` or ``/finance <user_id>`` to include one user's transactions."""
    user_id = parse_int((command.args or "").strip() or None)
    report = await services.admin.financial_report(auth, user_id)
    await message.answer(render_financial_report(lang, report, services.settings.currency))


@router.message(F.text.in_(button_texts("menu_admin_finance")))
async def finance(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    report = await services.admin.financial_report(auth)
    await message.answer(render_financial_report(lang, report, services.settings.currency))


@router.callback_query(F.data == "adm_finance")
async def finance_callback(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    report = await services.admin.financial_report(auth)
    await render(callback, render_financial_report(lang, report, services.settings.currency), admin_dashboard_keyboard(lang))
