"""Courier jobs and assigner queue texts."""
from __future__ import annotations

from typing import Any

from app.core.pagination import Page
from app.core.security import esc
from app.domain.models import Assignment
from app.templates.common import render_page_footer
from localization import get_text, status_label


def _address(job: Any) -> str:
    address = getattr(job, "delivery_address", None)
    if isinstance(address, dict):
        parts = (address.get("street"), address.get("building"), address.get("city"))
        return ", ".join(str(p) for p in parts if p)
    return str(address or "")


def render_jobs(lang: str, kind: str, scope: str, page: Page[Any]) -> str:
    title = get_text(lang, f"jobs_{scope}_title", kind=get_text(lang, f"job_kind_{kind}"))
    if not page.items:
        return f"{title}\n\n{get_text(lang, 'jobs_empty')}"
    lines = [title, ""]
    for job in page.items:
        lines.append(f"#{job.id} · {status_label(lang, job.status)}")
        address = _address(job)
        if address:
            lines.append(f"   📍 {esc(address)}")
        shop = getattr(job, "shop_name", None)
        if shop:
            lines.append(f"   🏪 {esc(shop)}")
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        lines += ["", footer]
    return "\n".join(lines)


def render_assignment_log(lang: str, page: Page[Assignment]) -> str:
    if not page.items:
        return get_text(lang, "assign_log_empty")
    lines = [get_text(lang, "assign_log_title"), ""]
    for entry in page.items:
        target = f"#{entry.order_id}" if entry.order_id else f"🛠 #{entry.repair_request_id}"
        courier = esc(entry.delivery_name or entry.delivery_id or "-")
        lines.append(f"{target} → {courier} · {esc(entry.action or '')}")
        if entry.notes:
            lines.append(f"   📝 {esc(entry.notes)}")
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        lines += ["", footer]
    return "\n".join(lines)
