"""Explore: paginated products with category and condition filters."""
from __future__ import annotations

import asyncio

from aiogram import F, Router, types
from aiogram.fsm.context import FSMContext

from app.core.pagination import paginate
from app.core.session_store import AuthSession
from app.keyboards import explore_keyboard, product_keyboard
from app.services import Services
from app.services.catalog_service import CONDITIONS
from app.templates.catalog import render_product, render_products_page
from handlers.common.utils import parse_int, render
from localization import button_texts, get_text

router = Router(name="explore")


async def show_products(
    event: types.Message | types.CallbackQuery,
    state: FSMContext,
    services: Services,
    lang: str,
    auth: AuthSession | None,
    page: int = 1,
) -> None:
    data = await state.get_data()
    category_id = data.get("explore_category")
    condition = data.get("explore_condition")

    products, categories = await asyncio.gather(
        services.catalog.products(category_id, condition, auth),
        services.catalog.categories(auth),
    )
    result = paginate(products, page, services.settings.page_size)
    await state.update_data(explore_page=result.page)
    await render(
        event,
        render_products_page(lang, result, services.settings.currency),
        explore_keyboard(lang, result.items, result.page, result.page_count, categories, category_id, condition),
    )


@router.message(F.text.in_(button_texts("menu_explore")))
async def explore(message: types.Message, state: FSMContext, services: Services, lang: str, auth: AuthSession | None) -> None:
    await show_products(message, state, services, lang, auth)


@router.callback_query(F.data.startswith("explore_page_"))
async def explore_page(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession | None
) -> None:
    page = parse_int(callback.data.split("_")[-1]) or 1
    await show_products(callback, state, services, lang, auth, page)


@router.callback_query(F.data == "explore_back")
async def explore_back(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession | None
) -> None:
    data = await state.get_data()
    await show_products(callback, state, services, lang, auth, data.get("explore_page", 1))


@router.callback_query(F.data.startswith("explore_cat_"))
async def explore_category(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession | None
) -> None:
    await state.update_data(explore_category=parse_int(callback.data.split("_")[-1]))
    await show_products(callback, state, services, lang, auth)


@router.callback_query(F.data.startswith("explore_cond_"))
async def explore_condition(
    callback: types.CallbackQuery, state: FSMContext, services: Services, lang: str, auth: AuthSession | None
) -> None:
    value = callback.data.split("_")[-1]
    await state.update_data(explore_condition=value if value in CONDITIONS else None)
    await show_products(callback, state, services, lang, auth)


@router.callback_query(F.data.startswith("product_"))
async def product_card(callback: types.CallbackQuery, services: Services, lang: str, auth: AuthSession | None) -> None:
    product_id = parse_int(callback.data.split("_")[-1])
    if product_id is None:
        await callback.answer()
        return
    product = await services.catalog.product(product_id, auth)
    await render(callback, render_product(lang, product, services.settings.currency), product_keyboard(lang, product))


@router.callback_query(F.data.startswith("cart_add_"))
async def add_to_cart(callback: types.CallbackQuery, services: Services, lang: str) -> None:
    auth = services.auth.require_session(callback.from_user.id)
    product_id = parse_int(callback.data.split("_")[-1])
    if product_id is None:
        await callback.answer()
        return
    await services.cart.add(auth, product_id)
    await callback.answer(get_text(lang, "cart_added"))
