"""Order list, order card and tracking texts."""
from __future__ import annotations

from collections.abc import Sequence

from app.core.security import esc
from app.domain.cart_math import format_money
from app.domain.models import Order
from app.domain.statuses import OrderStatus, order_progress
from app.templates.common import render_progress
from localization import get_text, status_label


def render_orders_list(lang: str, orders: Sequence[Order], currency: str) -> str:
    if not orders:
        return get_text(lang, "orders_empty")
    lines = [get_text(lang, "orders_title"), ""]
    for order in orders:
        status = status_label(lang, OrderStatus.normalize(order.status))
        lines.append(f"#{order.id} · {format_money(order.total_price, currency)} · {status}")
    return "\n".join(lines)


def render_order(lang: str, order: Order, currency: str) -> str:
    """Order card with items, totals and the tracking timeline."""
    lines = [get_text(lang, "order_title", order_id=order.id)]
    if order.shop_name:
        lines.append(f"🏪 {esc(order.shop_name)}")
    if order.created_at:
        lines.append(f"🕒 {esc(order.created_at[:16].replace('T', ' '))}")
    lines.append("")
    for item in order.order_items:
        lines.append(
            f"• {esc(item.product_name or item.product_id)} ×{item.quantity}"
            f" = {format_money(item.subtotal, currency)}"
        )
    lines.append("")
    if order.payment_method:
        lines.append(f"💳 {get_text(lang, f'pay_{order.payment_method.upper()}')}")
    lines.append(f"💰 {get_text(lang, 'total')}: <b>{format_money(order.total_price, currency)}</b>")
    lines += ["", get_text(lang, "tracking_title"), render_progress(lang, order_progress(order.status))]
    return "\n".join(lines)
