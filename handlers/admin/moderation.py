"""Moderation lists for shops, users, deliveries and assigners."""
from __future__ import annotations

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.keyboards import cancel_keyboard, delete_confirm_keyboard, moderation_keyboard
from app.services import Services
from app.services.admin_service import KIND_ACTIONS, MODERATION_KINDS, STATUS_FILTERS
from app.templates.admin import render_moderation
from handlers.common.states import AdminSearch
from handlers.common.utils import callback_parts, home_keyboard, parse_int, render
from localization import button_texts, get_text

router = Router(name="admin_moderation")

MENU_KINDS = {
    "menu_admin_shops": "shops",
    "menu_admin_users": "users",
    "menu_admin_deliveries": "deliveries",
    "menu_admin_assigners": "assigners",
}


async def show_list(
    event: types.Message | types.CallbackQuery,
    state: FSMContext,
    services: Services,
    lang: str,
    auth: AuthSession,
    kind: str,
    status_filter: str = "all",
    page: int = 1,
) -> None:
    data = await state.get_data()
    # the search query sticks to its list until another list is opened
    query = data.get("admin_query", "") if data.get("admin_kind") == kind else ""
    await state.update_data(admin_kind=kind, admin_query=query)

    rows = await services.admin.moderation_list(auth, kind, status_filter, query)
    result = paginate(rows, page, services.settings.page_size)
    await state.update_data(admin_filter=status_filter, admin_page=result.page)
    await render(
        event,
        render_moderation(lang, kind, result, status_filter, query),
        moderation_keyboard(lang, kind, result.items, status_filter, result.page, result.page_count),
    )


async def _current_view(state: FSMContext, kind: str) -> tuple[str, int]:
    """Filter and page last shown for this list, so actions return to the same view."""
    data = await state.get_data()
    if data.get("admin_kind") != kind:
        return "all", 1
    return data.get("admin_filter", "all"), data.get("admin_page", 1)


@router.message(F.text.in_(set().union(*(button_texts(key) for key in MENU_KINDS))))
async def open_list(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession) -> None:
    kind = next(kind for key, kind in MENU_KINDS.items() if message.text in button_texts(key))
    await state.update_data(admin_kind=kind, admin_query="")
    await show_list(message, state, services, lang, auth, kind)


@router.callback_query(F.data.startswith("adm_list_"))
async def list_page(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    _, _, kind, status_filter, raw_page = callback_parts(callback.data, 5)
    if kind not in MODERATION_KINDS or status_filter not in STATUS_FILTERS:
        await callback.answer()
        return
    await show_list(callback, state, services, lang, auth, kind, status_filter, parse_int(raw_page) or 1)


@router.callback_query(F.data.startswith("adm_search_"))
async def search_start(callback: types.CallbackQuery, state: FSMContext, lang: str) -> None:
    kind = callback_parts(callback.data, 3)[2]
    if kind not in MODERATION_KINDS:
        await callback.answer()
        return
    await state.set_state(AdminSearch.query)
    if (await state.get_data()).get("admin_kind") != kind:
        await state.update_data(admin_kind=kind, admin_filter="all", admin_page=1)
    await callback.answer()
    if callback.message:
        await callback.message.answer(get_text(lang, "admin_search_prompt"), reply_markup=cancel_keyboard(lang))


@router.message(AdminSearch.query, F.text)
async def search_query(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession) -> None:
    data = await state.get_data()
    kind = data.get("admin_kind", "shops")
    await state.set_state(None)
    await state.update_data(admin_query=message.text.strip()[:100])
    await message.answer(get_text(lang, "admin_search_applied"), reply_markup=home_keyboard(auth, lang))
    status_filter, _ = await _current_view(state, kind)
    await show_list(message, state, services, lang, auth, kind, status_filter)


@router.callback_query(F.data.startswith("adm_act_"))
async def moderate(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession
) -> None:
    parts = callback.data.split("_")
    if len(parts) < 5:
        await callback.answer()
        return
    kind, item_id, action = parts[2], parse_int(parts[3]), parts[4]
    confirmed = parts[-1] == "yes"
    if kind not in MODERATION_KINDS or item_id is None or action not in KIND_ACTIONS[kind]:
        await callback.answer()
        return

    if action == "delete" and not confirmed:
        await render(
            callback,
            get_text(lang, "admin_delete_confirm", kind=get_text(lang, f"admin_kind_{kind}"), item_id=item_id),
            delete_confirm_keyboard(lang, kind, item_id),
        )
        return

    await services.admin.moderate(auth, kind, item_id, action)
    await callback.answer(get_text(lang, "admin_action_done", item_id=item_id))
    status_filter, page = await _current_view(state, kind)
    await show_list(callback, state, services, lang, auth, kind, status_filter, page)
