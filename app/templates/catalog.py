"""Product listing and product card texts."""
from __future__ import annotations

from collections.abc import Sequence

from app.core.pagination import Page
from app.core.security import esc
from app.domain.cart_math import format_money
from app.domain.models import Product
from app.templates.common import render_page_footer
from localization import get_text


def render_products_page(lang: str, page: Page[Product], currency: str) -> str:
    if not page.items:
        return get_text(lang, "explore_empty")
    lines = [get_text(lang, "explore_title"), ""]
    for idx, product in enumerate(page.items, page.offset + 1):
        stock = "" if product.in_stock else f" · {get_text(lang, 'out_of_stock')}"
        lines.append(f"{idx}. <b>{esc(product.name)}</b>")
        lines.append(f"   💰 {format_money(product.price, currency)}{stock}")
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        lines += ["", footer]
    return "\n".join(lines)


def render_product(lang: str, product: Product, currency: str) -> str:
    lines = [f"📦 <b>{esc(product.name)}</b>", ""]
    if product.description:
        lines += [esc(product.description), ""]
    lines.append(f"💰 {get_text(lang, 'price')}: <b>{format_money(product.price, currency)}</b>")
    if product.condition:
        lines.append(f"🏷 {get_text(lang, f'condition_{product.condition.upper()}')}")
    if product.category_name:
        lines.append(f"📂 {esc(product.category_name)}")
    if product.shop_name:
        lines.append(f"🏪 {esc(product.shop_name)}")
    stock_key = "in_stock" if product.in_stock else "out_of_stock"
    lines.append(f"📊 {get_text(lang, stock_key, count=product.stock)}")
    return "\n".join(lines)
