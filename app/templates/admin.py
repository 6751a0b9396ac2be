"""Text rendering helpers for admin dashboards."""
from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Any

from app.core.pagination import Page
from app.core.security import esc
from app.domain.cart_math import format_money
from app.services.admin_service import FinancialReport, account_status
from app.templates.common import render_page_footer
from localization import get_text, status_label

STATUS_ICONS = {"APPROVED": "🟢", "PENDING": "🟡", "SUSPENDED": "🔴"}


def render_dashboard(lang: str, stats: dict[str, Any]) -> str:
    text = get_text(lang, "admin_dashboard_title") + "\n\n"
    text += f"👥 {get_text(lang, 'admin_kind_users')}: {stats.get('users', 0)}\n"
    text += f"🏪 {get_text(lang, 'admin_kind_shops')}: {stats.get('shops', 0)}\n"
    text += f"🛠 {get_text(lang, 'admin_kind_repairs')}: {stats.get('repairs', 0)}\n"
    text += f"📦 {get_text(lang, 'admin_kind_orders')}: {stats.get('orders', 0)}"
    return text


def render_moderation(lang: str, kind: str, page: Page[Any], status_filter: str, query: str = "") -> str:
    header = get_text(lang, "moderation_title", kind=get_text(lang, f"admin_kind_{kind}"))
    text = f"{header}\n{get_text(lang, 'filter')}: {get_text(lang, f'filter_{status_filter}')}"
    if query:
        text += f" · 🔍 {esc(query)}"
    text += "\n\n"
    if not page.items:
        return text + get_text(lang, "moderation_empty")
    for row in page.items:
        status = account_status(row)
        name = getattr(row, "display_name", None) or row.name or "-"
        text += f"{STATUS_ICONS.get(status, '⚪')} #{row.id} <b>{esc(name)}</b>\n"
        if row.email:
            text += f"   ✉️ {esc(row.email)}\n"
        if row.phone:
            text += f"   📞 {esc(row.phone)}\n"
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        text += f"\n{footer}"
    return text.strip()


def render_financial_report(lang: str, report: FinancialReport, currency: str) -> str:
    counts = Counter((t.status or "UNKNOWN").upper() for t in report.transactions)
    text = get_text(lang, "finance_title") + "\n\n"
    text += f"📊 {get_text(lang, 'finance_total')}: {len(report.transactions)}\n"
    for status in ("SUCCESS", "PENDING", "FAILED"):
        text += f"├ {status_label(lang, status)}: {counts.get(status, 0)}\n"
    text += f"💰 {get_text(lang, 'finance_revenue')}: <b>{format_money(report.revenue, currency)}</b>"
    if report.user_transactions:
        text += "\n\n" + get_text(lang, "finance_user_title") + "\n"
        text += _transactions(report.user_transactions, currency)
    return text


def _transactions(rows: Sequence[Any], currency: str, limit: int = 10) -> str:
    lines = []
    for row in rows[:limit]:
        lines.append(f"#{row.id} · {format_money(row.amount, currency)} · {row.status or '-'}")
    return "\n".join(lines)
