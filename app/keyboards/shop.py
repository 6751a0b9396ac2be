"""Shop owner keyboards: orders control, repair queue, offers."""
from __future__ import annotations

from collections.abc import Sequence

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from app.domain.models import Offer, Order, RepairRequest
from app.domain.statuses import OrderStatus, RepairStatus
from app.keyboards.common import add_pagination
from localization import get_text


def _status_filter_row(lang: str, prefix: str, statuses: Sequence[str], current: str | None) -> InlineKeyboardBuilder:
    row = InlineKeyboardBuilder()
    mark = "✅ " if not current else ""
    row.button(text=f"{mark}{get_text(lang, 'filter_all')}", callback_data=f"{prefix}_all")
    for status in statuses:
        mark = "✅ " if status == current else ""
        row.button(text=f"{mark}{get_text(lang, f'status_{status}')}", callback_data=f"{prefix}_{status}")
    row.adjust(3)
    return row


def shop_orders_keyboard(
    lang: str, orders: Sequence[Order], status: str | None, page: int, pages: int
) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for order in orders:
        label = get_text(lang, f"status_{OrderStatus.normalize(order.status)}")
        builder.button(text=f"#{order.id} · {order.total_price:g} · {label}", callback_data=f"sord_view_{order.id}")
    builder.adjust(1)
    builder.attach(_status_filter_row(lang, "sord_filter", OrderStatus.ALL, status))
    add_pagination(builder, "sord_page", page, pages)
    return builder.as_markup()


def shop_order_keyboard(lang: str, order: Order) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    status = OrderStatus.normalize(order.status)
    if status == OrderStatus.PENDING:
        builder.button(text=get_text(lang, "btn_accept"), callback_data=f"sord_accept_{order.id}")
        builder.button(text=get_text(lang, "btn_reject"), callback_data=f"sord_reject_{order.id}")
    elif status not in OrderStatus.TERMINAL:
        for target in OrderStatus.SHOP_SETTABLE:
            if target != status:
                builder.button(
                    text=f"➡️ {get_text(lang, f'status_{target}')}",
                    callback_data=f"sord_status_{order.id}_{target}",
                )
    builder.button(text=get_text(lang, "btn_back"), callback_data="sord_page_1")
    builder.adjust(2)
    return builder.as_markup()


def shop_repairs_keyboard(
    lang: str, requests: Sequence[RepairRequest], status: str | None, page: int, pages: int
) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for request in requests:
        label = get_text(lang, f"status_{RepairStatus.normalize(request.status)}")
        builder.button(text=f"#{request.id} · {label}", callback_data=f"srep_view_{request.id}")
    builder.adjust(1)
    builder.attach(_status_filter_row(lang, "srep_filter", RepairStatus.ALL, status))
    add_pagination(builder, "srep_page", page, pages)
    return builder.as_markup()


def shop_repair_keyboard(lang: str, request: RepairRequest) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    status = RepairStatus.normalize(request.status)
    if status in (RepairStatus.SUBMITTED, RepairStatus.QUOTE_PENDING):
        builder.button(text=get_text(lang, "btn_send_quote"), callback_data=f"srep_quote_{request.id}")
    if status not in RepairStatus.TERMINAL:
        for target in RepairStatus.SHOP_SETTABLE:
            if target != status:
                builder.button(
                    text=f"➡️ {get_text(lang, f'status_{target}')}",
                    callback_data=f"srep_status_{request.id}_{target}",
                )
    builder.button(text=get_text(lang, "btn_back"), callback_data="srep_page_1")
    builder.adjust(1)
    return builder.as_markup()


def shop_offers_keyboard(lang: str, offers: Sequence[Offer]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for offer in offers:
        builder.button(text=f"🗑 {offer.name[:30]}", callback_data=f"soffer_del_{offer.id}")
    builder.adjust(1)
    return builder.as_markup()
