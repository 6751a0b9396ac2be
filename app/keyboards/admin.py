"""Admin keyboards: dashboard, moderation lists, financial report."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from app.keyboards.common import add_pagination
from app.services.admin_service import KIND_ACTIONS, STATUS_FILTERS, account_status
from localization import get_text

ACTION_ICONS = {
    "approve": "✅",
    "activate": "✅",
    "suspend": "⛔",
    "deactivate": "⛔",
    "delete": "🗑",
}


def admin_dashboard_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for kind in ("shops", "users", "deliveries", "assigners"):
        builder.button(text=get_text(lang, f"admin_kind_{kind}"), callback_data=f"adm_list_{kind}_all_1")
    builder.button(text=get_text(lang, "menu_admin_finance"), callback_data="adm_finance")
    builder.adjust(2, 2, 1)
    return builder.as_markup()


def moderation_keyboard(
    lang: str,
    kind: str,
    rows: Sequence[Any],
    status_filter: str,
    page: int,
    pages: int,
) -> InlineKeyboardMarkup:
    """One line per row with its actions, then filters, search and pages."""
    builder = InlineKeyboardBuilder()
    actions = KIND_ACTIONS.get(kind, ())
    for row in rows:
        current = account_status(row)
        for action in actions:
            # no point offering the state the row is already in
            if action in ("approve", "activate") and current == "APPROVED":
                continue
            if action in ("suspend", "deactivate") and current == "SUSPENDED":
                continue
            builder.button(
                text=f"{ACTION_ICONS[action]} #{row.id}",
                callback_data=f"adm_act_{kind}_{row.id}_{action}",
            )
    builder.adjust(3)

    filters = InlineKeyboardBuilder()
    for value in STATUS_FILTERS:
        mark = "✅ " if value == status_filter else ""
        filters.button(
            text=f"{mark}{get_text(lang, f'filter_{value}')}",
            callback_data=f"adm_list_{kind}_{value}_1",
        )
    filters.button(text=get_text(lang, "btn_search"), callback_data=f"adm_search_{kind}")
    filters.adjust(4, 1)
    builder.attach(filters)

    add_pagination(builder, f"adm_list_{kind}_{status_filter}", page, pages)
    return builder.as_markup()


def delete_confirm_keyboard(lang: str, kind: str, item_id: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_yes"), callback_data=f"adm_act_{kind}_{item_id}_delete_yes")
    builder.button(text=get_text(lang, "btn_no"), callback_data=f"adm_list_{kind}_all_1")
    builder.adjust(2)
    return builder.as_markup()
