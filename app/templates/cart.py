"""Cart and checkout summary texts."""
from __future__ import annotations

from collections.abc import Sequence

from app.core.security import esc
from app.domain.cart_math import cart_total, format_money, items_count
from app.domain.models import Address, CartItem
from localization import get_text


def render_cart(lang: str, items: Sequence[CartItem], currency: str) -> str:
    if not items:
        return get_text(lang, "cart_empty")
    lines = [get_text(lang, "cart_title", count=items_count(items)), ""]
    for item in items:
        lines.append(f"• <b>{esc(item.product_name)}</b>")
        lines.append(
            f"   {item.quantity} × {format_money(item.product_price, currency)}"
            f" = {format_money(item.subtotal, currency)}"
        )
    lines += ["", f"💰 {get_text(lang, 'total')}: <b>{format_money(cart_total(items), currency)}</b>"]
    return "\n".join(lines)


def render_checkout_summary(
    lang: str,
    items: Sequence[CartItem],
    address: Address | None,
    payment_method: str,
    currency: str,
) -> str:
    lines = [get_text(lang, "checkout_title"), ""]
    for item in items:
        lines.append(f"• {esc(item.product_name)} ×{item.quantity}")
    lines.append("")
    if address is not None:
        lines.append(f"📍 {esc(address.label)}")
    lines.append(f"💳 {get_text(lang, f'pay_{payment_method}')}")
    lines.append(f"💰 {get_text(lang, 'total')}: <b>{format_money(cart_total(items), currency)}</b>")
    return "\n".join(lines)
