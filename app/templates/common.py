"""Shared rendering pieces: status labels and progress timelines."""
from __future__ import annotations

from collections.abc import Sequence

from app.domain.statuses import StepState, StepView
from localization import get_text, status_label

STEP_ICONS = {
    StepState.COMPLETED: "✅",
    StepState.CURRENT: "🔵",
    StepState.FUTURE: "⚪",
    StepState.CANCELLED: "❌",
}


def render_progress(lang: str, steps: Sequence[StepView]) -> str:
    """Vertical timeline, one step per line; the current step is bold."""
    lines = []
    for step in steps:
        label = status_label(lang, step.key)
        if step.state == StepState.CURRENT:
            label = f"<b>{label}</b>"
        lines.append(f"{STEP_ICONS[step.state]} {label}")
    return "\n".join(lines)


def render_page_footer(lang: str, page: int, pages: int, total: int) -> str:
    if pages <= 1:
        return ""
    return get_text(lang, "page_footer", page=page, pages=pages, total=total)
