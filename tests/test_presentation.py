"""Tests for texts, keyboards, templates and the rate limiter."""
from __future__ import annotations

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

from aiogram.utils.keyboard import InlineKeyboardBuilder
from conftest import make_callback, make_message

from app.core.pagination import paginate
from app.domain.models import CartItem, Order, Shop, StaffMember, Transaction
from app.keyboards import (
    add_pagination,
    delete_confirm_keyboard,
    job_status_keyboard,
    main_menu,
    moderation_keyboard,
)
from app.middlewares import RateLimitMiddleware
from app.services.admin_service import FinancialReport
from app.templates.admin import render_financial_report, render_moderation
from app.templates.cart import render_cart
from app.templates.common import render_page_footer
from app.templates.orders import render_order
from localization import TEXTS, button_texts, get_text, status_label


def _callbacks(markup) -> list[str]:
    return [button.callback_data for row in markup.inline_keyboard for button in row]


class TestLocalization:
    def test_formats_placeholders(self) -> None:
        assert get_text("en", "page_footer", page=2, pages=3, total=14) == "Page 2/3 · 14 total"

    def test_unknown_language_uses_english(self) -> None:
        assert get_text("fr", "cart_empty") == TEXTS["en"]["cart_empty"]

    def test_missing_key_returns_key(self) -> None:
        assert get_text("en", "no_such_key") == "no_such_key"

    def test_missing_placeholder_returns_raw_text(self) -> None:
        assert get_text("en", "page_footer", page=1) == TEXTS["en"]["page_footer"]

    def test_arabic_has_every_english_key(self) -> None:
        assert set(TEXTS["en"]) <= set(TEXTS["ar"])

    def test_status_label_fallback(self) -> None:
        assert status_label("en", "PENDING") == "Pending"
        assert status_label("en", "some_new_state") == "Some New State"
        assert status_label("en", None) == "-"

    def test_button_texts_cover_all_languages(self) -> None:
        assert button_texts("menu_cart") == {TEXTS["en"]["menu_cart"], TEXTS["ar"]["menu_cart"]}


class TestKeyboards:
    def test_pagination_row(self) -> None:
        builder = InlineKeyboardBuilder()
        add_pagination(builder, "adm_list_shops_all", 2, 3)
        callbacks = _callbacks(builder.as_markup())
        assert callbacks == ["adm_list_shops_all_1", "noop", "adm_list_shops_all_3"]

    def test_single_page_has_no_pagination(self) -> None:
        builder = InlineKeyboardBuilder()
        add_pagination(builder, "x", 1, 1)
        assert _callbacks(builder.as_markup()) == []

    def test_moderation_skips_current_state(self) -> None:
        rows = [Shop(id=4, verified=True), Shop(id=5, status="PENDING")]
        callbacks = _callbacks(moderation_keyboard("en", "shops", rows, "all", 1, 1))

        assert "adm_act_shops_4_approve" not in callbacks
        assert "adm_act_shops_4_suspend" in callbacks
        assert "adm_act_shops_5_approve" in callbacks
        assert "adm_search_shops" in callbacks
        assert "adm_list_shops_pending_1" in callbacks

    def test_delete_needs_confirmation(self) -> None:
        callbacks = _callbacks(delete_confirm_keyboard("en", "users", 3))
        assert callbacks == ["adm_act_users_3_delete_yes", "adm_list_users_all_1"]

    def test_courier_status_buttons(self) -> None:
        callbacks = _callbacks(job_status_keyboard("en", "repair", 12))
        assert "dlv_status_repair_12_PICKED_UP" in callbacks
        assert "dlv_status_repair_12_ASSIGNED" not in callbacks
        assert callbacks[-1] == "dlv_list_repair_mine_1"

    def test_role_menus(self) -> None:
        texts = [b.text for row in main_menu("admin", "en").keyboard for b in row]
        assert get_text("en", "menu_admin_finance") in texts
        assert get_text("en", "menu_cart") not in texts


class TestTemplates:
    def test_cart_total(self) -> None:
        items = [
            CartItem(id=1, product_name="A", product_price=Decimal("10"), quantity=2),
            CartItem(id=2, product_name="B", product_price=Decimal("5"), quantity=1),
        ]
        text = render_cart("en", items, "EGP")
        assert "25 EGP" in text

    def test_empty_cart(self) -> None:
        assert render_cart("en", [], "EGP") == get_text("en", "cart_empty")

    def test_order_names_are_escaped(self) -> None:
        order = Order(id=3, shop_name="<Fix & Go>", status="SHIPPED", total_price="40")
        text = render_order("en", order, "EGP")
        assert "&lt;Fix &amp; Go&gt;" in text
        assert "<b>" + status_label("en", "SHIPPED") + "</b>" in text

    def test_moderation_page(self) -> None:
        page = paginate([StaffMember(id=i, name=f"Courier {i}") for i in range(1, 8)], 2, 5)
        text = render_moderation("en", "deliveries", page, "all", "cour")
        assert "Courier 6" in text
        assert "#1 <b>" not in text
        assert get_text("en", "page_footer", page=2, pages=2, total=7) in text

    def test_footer_hidden_on_single_page(self) -> None:
        assert render_page_footer("en", 1, 1, 3) == ""

    def test_financial_report(self) -> None:
        report = FinancialReport(
            stats={},
            transactions=[Transaction(id=1, amount="100", status="SUCCESS")],
            user_transactions=[Transaction(id=1, amount="100", status="SUCCESS")],
        )
        text = render_financial_report("en", report, "EGP")
        assert "100 EGP" in text
        assert get_text("en", "finance_user_title") in text


class TestRateLimit:
    async def test_blocks_after_limit_and_warns_once(self) -> None:
        middleware = RateLimitMiddleware(message_limit=2, callback_limit=5)
        handler = AsyncMock(return_value="ok")
        message = make_message("hi")
        data = {"event_from_user": SimpleNamespace(id=1), "lang": "en"}

        results = [await middleware(handler, message, data) for _ in range(4)]

        assert results == ["ok", "ok", None, None]
        assert handler.await_count == 2
        message.answer.assert_awaited_once_with(get_text("en", "rate_limited"))

    async def test_callbacks_counted_separately(self) -> None:
        middleware = RateLimitMiddleware(message_limit=1, callback_limit=1)
        assert middleware.hit(1, make_message()) is True
        assert middleware.hit(1, make_callback("noop")) is True
        assert middleware.hit(1, make_message()) is False

    async def test_callback_warning_is_alert(self) -> None:
        middleware = RateLimitMiddleware(message_limit=1, callback_limit=0)
        callback = make_callback("noop")
        handler = AsyncMock()

        await middleware(handler, callback, {"event_from_user": SimpleNamespace(id=2), "lang": "en"})

        handler.assert_not_awaited()
        callback.answer.assert_awaited_once_with(get_text("en", "rate_limited"), show_alert=True)

    async def test_events_without_user_pass(self) -> None:
        middleware = RateLimitMiddleware(message_limit=0)
        handler = AsyncMock(return_value="ok")
        assert await middleware(handler, make_message(), {}) == "ok"
