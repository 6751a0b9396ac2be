"""Assigner screens: queues awaiting a courier, assignment and reassignment."""
from __future__ import annotations

from aiogram import F, Router, types

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.keyboards import assign_queue_keyboard, assignment_log_keyboard, couriers_keyboard
from app.services import Services
from app.services.delivery_service import JOB_KINDS
from app.templates.delivery import render_assignment_log, render_jobs
from handlers.common.utils import callback_parts, parse_int, render
from localization import button_texts, get_text

router = Router(name="assigner")

# ``reassign`` picks a new courier for an already assigned order
PICK_KINDS = JOB_KINDS + ("reassign",)


async def show_queue(
    event: types.Message | types.CallbackQuery,
    services: Services,
    lang: str,
    auth: AuthSession,
    kind: str,
    page: int = 1,
) -> None:
    if kind == "orders":
        jobs = await services.assigner.orders_queue(auth)
    else:
        jobs = await services.assigner.repairs_queue(auth)
    result = paginate(jobs, page, services.settings.page_size)
    await render(
        event,
        render_jobs(lang, kind, "queue", result),
        assign_queue_keyboard(lang, kind, result.items, result.page, result.page_count),
    )


async def show_log(event: types.Message | types.CallbackQuery, services: Services, lang: str, auth: AuthSession, page: int = 1) -> None:
    entries = await services.assigner.log(auth)
    result = paginate(entries, page, services.settings.page_size)
    order_ids = [e.order_id for e in result.items if e.order_id]
    await render(
        event,
        render_assignment_log(lang, result),
        assignment_log_keyboard(lang, list(dict.fromkeys(order_ids)), result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_assign_orders")))
async def orders_queue(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_queue(message, services, lang, auth, "orders")


@router.message(F.text.in_(button_texts("menu_assign_repairs")))
async def repairs_queue(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_queue(message, services, lang, auth, "repair")


@router.message(F.text.in_(button_texts("menu_assign_log")))
async def assignment_log(message: types.Message, services: Services, lang: str, auth: AuthSession) -> None:
    await show_log(message, services, lang, auth)


@router.callback_query(F.data.startswith("asg_queue_"))
async def queue_page(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, kind, raw_page = callback_parts(callback.data, 4)
    if kind not in JOB_KINDS:
        await callback.answer()
        return
    await show_queue(callback, services, lang, auth, kind, parse_int(raw_page) or 1)


@router.callback_query(F.data.startswith("asg_log_"))
async def log_page(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    await show_log(callback, services, lang, auth, parse_int(callback.data.split("_")[-1]) or 1)


@router.callback_query(F.data.startswith("asg_pick_"))
async def pick_courier(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, kind, raw_id = callback_parts(callback.data, 4)
    job_id = parse_int(raw_id)
    if kind not in PICK_KINDS or job_id is None:
        await callback.answer()
        return
    couriers = await services.assigner.couriers(auth)
    if not couriers:
        await callback.answer(get_text(lang, "no_couriers"), show_alert=True)
        return
    await render(callback, get_text(lang, "choose_courier", job_id=job_id), couriers_keyboard(lang, kind, job_id, couriers))


@router.callback_query(F.data.startswith("asg_to_"))
async def assign(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession) -> None:
    _, _, kind, raw_job, raw_courier = callback_parts(callback.data, 5)
    job_id, courier_id = parse_int(raw_job), parse_int(raw_courier)
    if kind not in PICK_KINDS or job_id is None or courier_id is None:
        await callback.answer()
        return
    if kind == "reassign":
        await services.assigner.reassign(auth, job_id, courier_id)
        await show_log(callback, services, lang, auth)
        return
    await services.assigner.assign(auth, kind, job_id, courier_id)
    await show_queue(callback, services, lang, auth, kind)
