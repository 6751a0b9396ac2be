"""Notification feed text."""
from __future__ import annotations

from app.core.pagination import Page
from app.core.security import esc
from app.domain.models import Notification
from app.templates.common import render_page_footer
from localization import get_text


def render_notifications(lang: str, page: Page[Notification]) -> str:
    if not page.items:
        return get_text(lang, "notifications_empty")
    lines = [get_text(lang, "notifications_title"), ""]
    for notification in page.items:
        icon = "📭" if notification.read else "📬"
        title = f"<b>{esc(notification.title)}</b> " if notification.title else ""
        lines.append(f"{icon} #{notification.id} {title}{esc(notification.message)}")
        if notification.timestamp:
            lines.append(f"   🕒 {esc(notification.timestamp[:16].replace('T', ' '))}")
    footer = render_page_footer(lang, page.page, page.page_count, page.total)
    if footer:
        lines += ["", footer]
    return "\n".join(lines)
