"""Notification feed for customers and shops: list, mark read, delete."""
from __future__ import annotations

from aiogram import F, Router, types

from app.core.pagination import paginate
from app.keyboards import notifications_keyboard
from app.services import Services
from app.templates.notifications import render_notifications
from handlers.common.utils import parse_int, render
from localization import button_texts

router = Router(name="notifications")


async def show_notifications(
    event: types.Message | types.CallbackQuery, services: Services, lang: str, page: int = 1
) -> None:
    auth = services.auth.require_session(event.from_user.id)
    feed = await services.notifications.feed(auth)
    result = paginate(feed, page, services.settings.page_size)
    await render(
        event,
        render_notifications(lang, result),
        notifications_keyboard(lang, result.items, result.page, result.page_count),
    )


@router.message(F.text.in_(button_texts("menu_notifications")))
async def notifications(message: types.Message, services: Services, lang: str) -> None:
    await show_notifications(message, services, lang)


@router.callback_query(F.data.startswith("notif_page_"))
async def notifications_page(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    await show_notifications(callback, services, lang, parse_int(callback.data.split("_")[-1]) or 1)


@router.callback_query(F.data.startswith("notif_read_") | F.data.startswith("notif_del_"))
async def notification_action(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    _, action, raw_id = callback.data.split("_")
    notification_id = parse_int(raw_id)
    if notification_id is None:
        await callback.answer()
        return
    if action == "read":
        await services.notifications.mark_read(auth, notification_id)
    else:
        await services.notifications.delete(auth, notification_id)
    await show_notifications(callback, services, lang)
