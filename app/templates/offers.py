"""Offer listing texts."""
from __future__ import annotations

from app.core.pagination import Page
from app.core.security import esc
from app.domain.models import Offer
from app.domain.offers import format_discount
from app.templates.common import render_page_footer
from localization import get_text


def render_offers_page(lang: str, page: Page[Offer], currency: str) -> str:
    if not page.items:
        return get_text(lang, "offers_empty")
    lines = [get_text(lang, "offers_title"), ""]
    for offer in page.items:
        lines.append(f"🔥 <b>{esc(offer.name)}</b> · {format_discount(offer, currency)}")
        if offer.shop_name:
            lines.append(f"   🏪 {esc(offer.shop_name)}")
        if offer.end_date:
            lines.append(f"   ⏳ {get_text(lang, 'offer_until', date=offer.end_date.strftime('%Y-%m-%d'))}")
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        lines += ["", footer]
    return "\n".join(lines)
