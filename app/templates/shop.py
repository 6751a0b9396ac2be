"""Shop owner dashboard and repair queue texts."""
from __future__ import annotations

from collections.abc import Sequence

from app.core.security import esc
from app.domain.models import Offer, Product
from app.domain.offers import format_discount, is_active
from app.services.shop_service import ShopDashboard
from localization import get_text


def render_dashboard(lang: str, dashboard: ShopDashboard, low_stock: Sequence[Product] = ()) -> str:
    plan = dashboard.subscription.get("plan") or dashboard.subscription.get("name") or "-"
    lines = [
        get_text(lang, "shop_dashboard_title"),
        "",
        f"📋 {get_text(lang, 'subscription')}: <b>{esc(plan)}</b>",
        f"📦 {get_text(lang, 'admin_kind_orders')}: {len(dashboard.orders)}",
        f"⏳ {get_text(lang, 'pending_orders')}: {dashboard.pending_orders}",
        f"🔔 {get_text(lang, 'unread_notifications')}: {dashboard.unread_notifications}",
    ]
    if low_stock:
        lines += ["", get_text(lang, "low_stock_title")]
        lines += [f"• {esc(p.name)}: {p.stock}" for p in low_stock]
    return "\n".join(lines)


def render_shop_offers(lang: str, offers: Sequence[Offer], currency: str) -> str:
    if not offers:
        return get_text(lang, "offers_empty")
    lines = [get_text(lang, "shop_offers_title"), ""]
    for offer in offers:
        state = "🟢" if is_active(offer) else "⚪"
        lines.append(f"{state} <b>{esc(offer.name)}</b> · {format_discount(offer, currency)}")
    return "\n".join(lines)


def render_quote_prompt(lang: str, request_id: int, currency: str) -> str:
    return get_text(lang, "shop_quote_prompt", request_id=request_id, currency=currency)
