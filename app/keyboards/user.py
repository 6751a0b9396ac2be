"""Customer keyboards: explore, cart, checkout, orders, repairs, account."""
from __future__ import annotations

from collections.abc import Sequence

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from app.domain.checkout import CASH, CREDIT_CARD, REPAIR_DELIVERY_METHODS, REPAIR_PAYMENT_METHODS
from app.domain.models import (
    Address,
    CartItem,
    Category,
    Notification,
    Order,
    Product,
    RepairRequest,
    Shop,
)
from app.domain.statuses import OrderStatus, RepairStatus
from app.keyboards.common import add_pagination
from app.services.catalog_service import CONDITIONS
from app.services.repair_service import DEVICE_CATEGORIES
from localization import get_text


def _short(text: str | None, limit: int = 24) -> str:
    text = text or ""
    return text[: limit - 2] + ".." if len(text) > limit else text


def explore_keyboard(
    lang: str,
    products: Sequence[Product],
    page: int,
    pages: int,
    categories: Sequence[Category],
    category_id: int | None,
    condition: str | None,
) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for product in products:
        builder.button(
            text=f"{_short(product.name)} · {product.price:g}",
            callback_data=f"product_{product.id}",
        )
    builder.adjust(1)

    filters = InlineKeyboardBuilder()
    all_mark = "✅ " if category_id is None else ""
    filters.button(text=f"{all_mark}{get_text(lang, 'filter_all')}", callback_data="explore_cat_all")
    for category in categories[:8]:
        mark = "✅ " if category.id == category_id else ""
        filters.button(text=f"{mark}{_short(category.name, 16)}", callback_data=f"explore_cat_{category.id}")
    filters.adjust(3)
    builder.attach(filters)

    conditions = InlineKeyboardBuilder()
    for value in (None, *CONDITIONS):
        key = "condition_all" if value is None else f"condition_{value}"
        mark = "✅ " if value == condition else ""
        conditions.button(text=f"{mark}{get_text(lang, key)}", callback_data=f"explore_cond_{value or 'all'}")
    conditions.adjust(3)
    builder.attach(conditions)

    add_pagination(builder, "explore_page", page, pages)
    return builder.as_markup()


def product_keyboard(lang: str, product: Product) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    if product.in_stock:
        builder.button(text=get_text(lang, "btn_add_to_cart"), callback_data=f"cart_add_{product.id}")
    builder.button(text=get_text(lang, "btn_back"), callback_data="explore_back")
    builder.adjust(1)
    return builder.as_markup()


def cart_keyboard(lang: str, items: Sequence[CartItem]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for item in items:
        builder.button(text="➖", callback_data=f"cart_dec_{item.id}")
        builder.button(text=f"{_short(item.product_name, 18)} ×{item.quantity}", callback_data="noop")
        builder.button(text="➕", callback_data=f"cart_inc_{item.id}")
        builder.button(text="🗑", callback_data=f"cart_rm_{item.id}")
    rows = [4] * len(items)
    if items:
        builder.button(text=get_text(lang, "btn_checkout"), callback_data="cart_checkout")
        builder.button(text=get_text(lang, "btn_clear_cart"), callback_data="cart_clear")
        rows.append(2)
    builder.button(text=get_text(lang, "btn_refresh"), callback_data="cart_refresh")
    rows.append(1)
    builder.adjust(*rows)
    return builder.as_markup()


def checkout_address_keyboard(lang: str, addresses: Sequence[Address]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for address in addresses:
        star = "⭐ " if address.is_default else ""
        builder.button(text=f"{star}{_short(address.label, 40)}", callback_data=f"co_addr_{address.id}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="co_cancel")
    builder.adjust(1)
    return builder.as_markup()


def checkout_payment_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "pay_CREDIT_CARD"), callback_data=f"co_pay_{CREDIT_CARD}")
    builder.button(text=get_text(lang, "pay_CASH"), callback_data=f"co_pay_{CASH}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="co_cancel")
    builder.adjust(2, 1)
    return builder.as_markup()


def checkout_confirm_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_place_order"), callback_data="co_confirm")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="co_cancel")
    builder.adjust(1)
    return builder.as_markup()


def payment_link_keyboard(lang: str, url: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_pay_now"), url=url)
    return builder.as_markup()


def payment_retry_keyboard(lang: str, order_id: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_pay_now"), callback_data=f"order_pay_{order_id}")
    builder.button(text=get_text(lang, "btn_view_order"), callback_data=f"order_view_{order_id}")
    builder.adjust(1)
    return builder.as_markup()


def orders_keyboard(lang: str, orders: Sequence[Order], page: int, pages: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for order in orders:
        status = get_text(lang, f"status_{OrderStatus.normalize(order.status)}")
        builder.button(text=f"#{order.id} · {status}", callback_data=f"order_view_{order.id}")
    builder.adjust(1)
    add_pagination(builder, "orders_page", page, pages)
    return builder.as_markup()


def order_detail_keyboard(lang: str, order: Order) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    if OrderStatus.can_cancel(order.status):
        builder.button(text=get_text(lang, "btn_cancel_order"), callback_data=f"order_cancel_{order.id}")
    if (order.payment_method or "").upper() == CREDIT_CARD and order.payment_id is None:
        builder.button(text=get_text(lang, "btn_pay_now"), callback_data=f"order_pay_{order.id}")
    builder.button(text=get_text(lang, "btn_refresh"), callback_data=f"order_view_{order.id}")
    builder.button(text=get_text(lang, "btn_back"), callback_data="orders_page_1")
    builder.adjust(1)
    return builder.as_markup()


def repair_menu_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_new_repair"), callback_data="repair_new")
    builder.button(text=get_text(lang, "btn_my_repairs"), callback_data="repairs_page_1")
    builder.adjust(1)
    return builder.as_markup()


def repair_category_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for category in DEVICE_CATEGORIES:
        builder.button(text=get_text(lang, f"device_{category}"), callback_data=f"repair_cat_{category}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="repair_abort")
    builder.adjust(2, 2, 2, 1)
    return builder.as_markup()


def repair_shops_keyboard(lang: str, shops: Sequence[Shop]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for shop in shops:
        rating = f" ⭐{shop.rating:.1f}" if shop.rating else ""
        builder.button(text=f"{_short(shop.name, 30)}{rating}", callback_data=f"repair_shop_{shop.id}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="repair_abort")
    builder.adjust(1)
    return builder.as_markup()


def repairs_keyboard(lang: str, requests: Sequence[RepairRequest], page: int, pages: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for request in requests:
        status = get_text(lang, f"status_{RepairStatus.normalize(request.status)}")
        device = get_text(lang, f"device_{request.device_category}") if request.device_category else ""
        builder.button(text=f"#{request.id} {device} · {status}", callback_data=f"repair_view_{request.id}")
    builder.adjust(1)
    add_pagination(builder, "repairs_page", page, pages)
    return builder.as_markup()


def repair_detail_keyboard(lang: str, request: RepairRequest) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    status = RepairStatus.normalize(request.status)
    if RepairStatus.awaiting_decision(status):
        builder.button(text=get_text(lang, "btn_accept_quote"), callback_data=f"repair_details_{request.id}")
        builder.button(text=get_text(lang, "btn_reject_quote"), callback_data=f"repair_reject_{request.id}")
    if status == RepairStatus.QUOTE_APPROVED and (request.payment_method or "") in ("CREDIT_CARD", "DEBIT_CARD"):
        builder.button(text=get_text(lang, "btn_pay_now"), callback_data=f"repair_pay_{request.id}")
    if RepairStatus.can_cancel(status):
        builder.button(text=get_text(lang, "btn_cancel_repair"), callback_data=f"repair_cancel_{request.id}")
    builder.button(text=get_text(lang, "btn_refresh"), callback_data=f"repair_view_{request.id}")
    builder.button(text=get_text(lang, "btn_back"), callback_data="repairs_page_1")
    builder.adjust(1)
    return builder.as_markup()


def repair_delivery_method_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for method in REPAIR_DELIVERY_METHODS:
        builder.button(text=get_text(lang, f"delivery_{method}"), callback_data=f"repair_dm_{method}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="repair_abort")
    builder.adjust(1)
    return builder.as_markup()


def repair_address_keyboard(lang: str, addresses: Sequence[Address]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for address in addresses:
        builder.button(text=_short(address.label, 40), callback_data=f"repair_addr_{address.id}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="repair_abort")
    builder.adjust(1)
    return builder.as_markup()


def repair_payment_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for method in REPAIR_PAYMENT_METHODS:
        builder.button(text=get_text(lang, f"pay_{method}"), callback_data=f"repair_pm_{method}")
    builder.button(text=get_text(lang, "btn_cancel"), callback_data="repair_abort")
    builder.adjust(2, 2, 1, 1)
    return builder.as_markup()


def offers_keyboard(lang: str, page: int, pages: int) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "menu_explore"), callback_data="explore_page_1")
    add_pagination(builder, "offers_page", page, pages)
    return builder.as_markup()


def notifications_keyboard(
    lang: str, notifications: Sequence[Notification], page: int, pages: int
) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    rows = []
    for notification in notifications:
        if not notification.read:
            builder.button(text=f"✔️ #{notification.id}", callback_data=f"notif_read_{notification.id}")
        builder.button(text=f"🗑 #{notification.id}", callback_data=f"notif_del_{notification.id}")
        rows.append(1 if notification.read else 2)
    if rows:
        builder.adjust(*rows)
    add_pagination(builder, "notif_page", page, pages)
    return builder.as_markup()


def account_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_addresses"), callback_data="account_addresses")
    builder.button(text=get_text(lang, "menu_language"), callback_data="account_language")
    builder.button(text=get_text(lang, "menu_logout"), callback_data="auth_logout")
    builder.adjust(1)
    return builder.as_markup()


def addresses_keyboard(lang: str, addresses: Sequence[Address]) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for address in addresses:
        builder.button(text=f"🗑 {_short(address.label, 36)}", callback_data=f"addr_del_{address.id}")
    builder.button(text=get_text(lang, "btn_add_address"), callback_data="addr_add")
    builder.adjust(1)
    return builder.as_markup()
