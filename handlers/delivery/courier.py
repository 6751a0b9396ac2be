"""Delivery person screens: available jobs, own jobs, status updates."""
from __future__ import annotations

from aiogram import F, Router, types

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.keyboards import job_status_keyboard, jobs_keyboard, my_jobs_menu_keyboard
from app.services import Services
from app.services.delivery_service import JOB_KINDS
from app.templates.delivery import render_jobs
from handlers.common.utils import callback_parts, parse_int, render
from localization import button_texts, get_text

router = Router(name="courier")

SCOPES = ("avail", "mine")


async def show_jobs(
    event: types.Message | types.CallbackQuery,
    services: Services,
    lang: str,
    auth: AuthSession,
    kind: str,
    scope: str,
    page: int = 1,
) -> None:
    if scope == "avail":
        jobs = await services.delivery.available(auth, kind)
    else:
        jobs = await services.delivery.mine(auth, kind)
    result = paginate(jobs, page, services.settings.page_size)
    await render(
        event,
        render_jobs(lang, kind, scope, result),
        jobs_keyboard(lang, kind, scope, result.items, result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_delivery_orders")))
async def available_orders(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_jobs(message, services, lang, auth, "orders", "avail")


@router.message(F.text.in_(button_texts("menu_delivery_repairs")))
async def available_repairs(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_jobs(message, services, lang, auth, "repair", "avail")


@router.message(F.text.in_(button_texts("menu_my_deliveries")))
async def my_deliveries(message: types.Message, lang: str) -> None:
    await message.answer(get_text(lang, "my_deliveries"), reply_markup=my_jobs_menu_keyboard(lang))


@router.callback_query(F.data.startswith("dlv_list_"))
async def jobs_page(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, kind, scope, raw_page = callback_parts(callback.data, 5)
    if kind not in JOB_KINDS or scope not in SCOPES:
        await callback.answer()
        return
    await show_jobs(callback, services, lang, auth, kind, scope, parse_int(raw_page) or 1)


@router.callback_query(F.data.startswith("dlv_accept_") | F.data.startswith("dlv_reject_"))
async def job_decide(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, action, kind, raw_id = callback_parts(callback.data, 4)
    job_id = parse_int(raw_id)
    if kind not in JOB_KINDS or job_id is None:
        await callback.answer()
        return
    if action == "accept":
        await services.delivery.accept(auth, job_id, kind)
    else:
        await services.delivery.reject(auth, job_id, kind)
    await show_jobs(callback, services, lang, auth, kind, "avail")


@router.callback_query(F.data.startswith("dlv_job_"))
async def job_view(callback: types.CallbackQuery, lang: str) -> None:
    _, _, kind, raw_id = callback_parts(callback.data, 4)
    job_id = parse_int(raw_id)
    if kind not in JOB_KINDS or job_id is None:
        await callback.answer()
        return
    await render(callback, get_text(lang, "job_update", job_id=job_id), job_status_keyboard(lang, kind, job_id))


@router.callback_query(F.data.startswith("dlv_status_"))
async def job_status(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, kind, raw_id, status = callback_parts(callback.data, 5)
    job_id = parse_int(raw_id)
    if kind not in JOB_KINDS or job_id is None:
        await callback.answer()
        return
    await services.delivery.update_status(auth, job_id, status, kind=kind)
    await show_jobs(callback, services, lang, auth, kind, "mine")
