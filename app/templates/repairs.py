"""Repair request texts for customers and shops."""
from __future__ import annotations

from collections.abc import Sequence

from app.core.security import esc
from app.domain.cart_math import format_money
from app.domain.models import RepairRequest
from app.domain.statuses import RepairStatus, repair_progress, repair_wizard_steps
from app.templates.common import render_progress
from localization import get_text, status_label


def render_repairs_list(lang: str, requests: Sequence[RepairRequest]) -> str:
    if not requests:
        return get_text(lang, "repairs_empty")
    lines = [get_text(lang, "repairs_title"), ""]
    for request in requests:
        lines.append(f"#{request.id} · {status_label(lang, RepairStatus.normalize(request.status))}")
    return "\n".join(lines)


def render_repair(lang: str, request: RepairRequest, currency: str) -> str:
    status = RepairStatus.normalize(request.status)
    lines = [get_text(lang, "repair_title", request_id=request.id)]
    if request.device_category:
        lines.append(f"📱 {get_text(lang, f'device_{request.device_category.upper()}')}")
    if request.shop_name:
        lines.append(f"🏪 {esc(request.shop_name)}")
    if request.description:
        lines.append(f"📝 {esc(request.description)}")
    if request.price is not None:
        lines.append(f"💰 {get_text(lang, 'quote')}: <b>{format_money(request.price, currency)}</b>")
    if request.delivery_method:
        lines.append(f"🚚 {get_text(lang, f'delivery_{request.delivery_method.upper()}')}")
    if request.payment_method:
        lines.append(f"💳 {get_text(lang, f'pay_{request.payment_method.upper()}')}")
    lines += ["", render_progress(lang, repair_progress(status))]
    if RepairStatus.awaiting_decision(status):
        lines += ["", get_text(lang, "repair_quote_hint")]
    return "\n".join(lines)


def render_wizard_header(lang: str, step: str, status: str | None = None) -> str:
    """``Step 2/3: Select shop`` style header of the repair wizard."""
    steps = repair_wizard_steps(status)
    index = steps.index(step) + 1 if step in steps else 1
    return get_text(lang, "wizard_step", index=index, total=len(steps), title=get_text(lang, f"wizard_{step}"))
