"""Courier and assigner keyboards."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from app.domain.models import StaffMember
from app.domain.statuses import DeliveryStatus
from app.keyboards.common import add_pagination
from localization import get_text


def jobs_keyboard(
    lang: str, kind: str, scope: str, jobs: Sequence[Any], page: int, pages: int
) -> InlineKeyboardMarkup:
    """Available or own jobs of one kind (``orders`` or ``repair``)."""
    builder = InlineKeyboardBuilder()
    rows = []
    for job in jobs:
        if scope == "avail":
            builder.button(text=f"✅ #{job.id}", callback_data=f"dlv_accept_{kind}_{job.id}")
            builder.button(text=f"❌ #{job.id}", callback_data=f"dlv_reject_{kind}_{job.id}")
            rows.append(2)
        else:
            builder.button(text=f"🚚 #{job.id}", callback_data=f"dlv_job_{kind}_{job.id}")
            rows.append(1)
    if rows:
        builder.adjust(*rows)
    add_pagination(builder, f"dlv_list_{kind}_{scope}", page, pages)
    return builder.as_markup()


def my_jobs_menu_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "admin_kind_orders"), callback_data="dlv_list_orders_mine_1")
    builder.button(text=get_text(lang, "admin_kind_repairs"), callback_data="dlv_list_repair_mine_1")
    builder.adjust(2)
    return builder.as_markup()


def job_status_keyboard(lang: str, kind: str, job_id: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for status in DeliveryStatus.UPDATABLE:
        builder.button(
            text=get_text(lang, f"status_{status}"),
            callback_data=f"dlv_status_{kind}_{job_id}_{status}",
        )
    builder.button(text=get_text(lang, "btn_back"), callback_data=f"dlv_list_{kind}_mine_1")
    builder.adjust(2, 2, 1)
    return builder.as_markup()


def assign_queue_keyboard(
    lang: str, kind: str, jobs: Sequence[Any], page: int, pages: int
) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for job in jobs:
        builder.button(text=f"👤 #{job.id}", callback_data=f"asg_pick_{kind}_{job.id}")
    builder.adjust(2)
    add_pagination(builder, f"asg_queue_{kind}", page, pages)
    return builder.as_markup()


def couriers_keyboard(lang: str, kind: str, job_id: int, couriers: Sequence[StaffMember]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for courier in couriers:
        load = f" ({courier.active_assignments})" if courier.active_assignments is not None else ""
        builder.button(
            text=f"{courier.name or courier.email or courier.id}{load}",
            callback_data=f"asg_to_{kind}_{job_id}_{courier.id}",
        )
    builder.button(text=get_text(lang, "btn_back"), callback_data=f"asg_queue_{kind}_1")
    builder.adjust(1)
    return builder.as_markup()


def assignment_log_keyboard(lang: str, order_ids: Sequence[int], page: int, pages: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for order_id in order_ids:
        builder.button(text=f"🔁 #{order_id}", callback_data=f"asg_pick_reassign_{order_id}")
    builder.adjust(3)
    add_pagination(builder, "asg_log", page, pages)
    return builder.as_markup()
