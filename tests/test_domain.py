"""Tests for pagination, status progress, offers and money helpers."""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.pagination import page_count, page_numbers, paginate
from app.domain.cart_math import cart_total, format_money, items_count
from app.domain.models import CartItem, Offer
from app.domain.offers import active_offers, apply_discount, format_discount, is_active
from app.domain.statuses import (
    OrderStatus,
    RepairStatus,
    StepState,
    order_progress,
    repair_progress,
    repair_wizard_steps,
)


class TestPagination:
    @pytest.mark.parametrize(
        ("total", "size", "expected"),
        [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (23, 5, 5)],
    )
    def test_page_count_is_ceiling(self, total: int, size: int, expected: int) -> None:
        assert page_count(total, size) == expected

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValueError):
            page_count(3, 0)

    def test_last_page_is_short(self) -> None:
        page = paginate(list(range(12)), page=3, page_size=5)
        assert page.items == [10, 11]
        assert page.has_next is False
        assert page.has_prev is True

    def test_page_beyond_range_is_clamped(self) -> None:
        page = paginate(list(range(7)), page=9, page_size=5)
        assert page.page == 2
        assert page.items == [5, 6]

    def test_empty_list_yields_page_one(self) -> None:
        page = paginate([], page=4, page_size=5)
        assert page.page == 1
        assert page.items == []
        assert page.page_count == 0

    def test_no_page_exceeds_page_size(self) -> None:
        items = list(range(37))
        for number in range(1, page_count(len(items), 5) + 1):
            assert len(paginate(items, number, 5).items) <= 5

    def test_few_pages_show_all_numbers(self) -> None:
        assert page_numbers(2, 4) == [1, 2, 3, 4]

    def test_gaps_on_both_sides(self) -> None:
        assert page_numbers(6, 20) == [1, "...", 4, 5, 6, 7, 8, "...", 20]

    def test_window_at_start(self) -> None:
        assert page_numbers(1, 20) == [1, 2, 3, 4, 5, "...", 20]

    def test_window_at_end(self) -> None:
        assert page_numbers(20, 20) == [1, "...", 16, 17, 18, 19, 20]


class TestProgress:
    def test_steps_before_current_are_completed(self) -> None:
        states = [view.state for view in order_progress("PROCESSING")]
        assert states[:2] == [StepState.COMPLETED, StepState.COMPLETED]
        assert states[2] == StepState.CURRENT
        assert set(states[3:]) == {StepState.FUTURE}

    def test_cancelled_order_completes_nothing(self) -> None:
        views = order_progress("CANCELLED")
        assert all(view.state == StepState.FUTURE for view in views[:-1])
        assert views[-1].key == "CANCELLED"
        assert views[-1].state == StepState.CANCELLED

    def test_unknown_status_is_all_future(self) -> None:
        views = order_progress("TELEPORTED")
        assert len(views) == len(OrderStatus.STEPS)
        assert all(view.state == StepState.FUTURE for view in views)

    def test_finish_processing_alias(self) -> None:
        assert OrderStatus.normalize("finish processing") == OrderStatus.FINISHPROCESSING

    def test_rejected_quote_aborts_repair(self) -> None:
        views = repair_progress("QUOTE_REJECTED")
        assert views[-1].state == StepState.CANCELLED
        assert not any(view.state == StepState.COMPLETED for view in views)

    def test_repair_aliases(self) -> None:
        assert RepairStatus.normalize("in_progress") == RepairStatus.REPAIRING

    @pytest.mark.parametrize("status", ["PENDING", "CONFIRMED"])
    def test_order_cancellable_before_processing(self, status: str) -> None:
        assert OrderStatus.can_cancel(status) is True

    def test_shipped_order_cannot_be_cancelled(self) -> None:
        assert OrderStatus.can_cancel("SHIPPED") is False


class TestRepairWizardSteps:
    def test_new_request(self) -> None:
        assert repair_wizard_steps(None) == ["device_type", "select_shop", "describe"]

    def test_quote_sent_adds_delivery_and_payment(self) -> None:
        steps = repair_wizard_steps("QUOTE_SENT")
        assert steps[-2:] == ["delivery_address", "payment_method"]

    def test_approved_quote_hides_decision_steps(self) -> None:
        assert "payment_method" not in repair_wizard_steps("QUOTE_APPROVED")


class TestOffers:
    def test_percentage_label(self) -> None:
        assert format_discount(Offer(discount_type="percentage", discount_value="20")) == "20% Off"

    def test_fixed_label(self) -> None:
        offer = Offer(discount_type="FIXED", discount_value="50.5")
        assert format_discount(offer, "EGP") == "50.5 EGP Off"

    def test_end_date_covers_the_whole_day(self) -> None:
        offer = Offer(start_date="2026-01-01", end_date="2026-01-31")
        assert is_active(offer, datetime(2026, 1, 31, 18, 30)) is True
        assert is_active(offer, datetime(2026, 2, 1, 0, 1)) is False

    def test_not_started_yet(self) -> None:
        offer = Offer(start_date="2026-03-01")
        assert is_active(offer, datetime(2026, 2, 28)) is False

    def test_open_ended_offer(self) -> None:
        assert is_active(Offer(), datetime(2030, 1, 1)) is True

    def test_active_offers_filter(self) -> None:
        offers = [
            Offer(id=1, end_date="2026-01-10"),
            Offer(id=2, start_date="2026-01-01", end_date="2026-12-31"),
        ]
        assert [o.id for o in active_offers(offers, datetime(2026, 6, 1))] == [2]

    def test_percentage_discount(self) -> None:
        offer = Offer(discount_type="PERCENTAGE", discount_value=20)
        assert apply_discount("100", offer) == Decimal("80.00")

    def test_fixed_discount_never_goes_negative(self) -> None:
        offer = Offer(discount_type="FIXED_VALUE", discount_value=150)
        assert apply_discount(100, offer) == Decimal("0.00")


class TestMoney:
    def test_cart_total_and_count(self) -> None:
        items = [
            CartItem(product_price="10", quantity=2),
            CartItem(product_price="5", quantity=1),
        ]
        assert cart_total(items) == Decimal("25.00")
        assert items_count(items) == 3

    def test_format_whole_amount(self) -> None:
        assert format_money(25, "EGP") == "25 EGP"

    def test_format_with_cents(self) -> None:
        assert format_money("1234.5", "EGP") == "1,234.50 EGP"

    @pytest.mark.parametrize("amount", ["12,50", "abc", "NaN", "Infinity"])
    def test_malformed_amount_is_a_validation_error(self, amount: str) -> None:
        with pytest.raises(ValidationError):
            CartItem(product_price=amount, quantity=1)

    def test_padded_and_missing_amounts(self) -> None:
        assert CartItem(product_price=" 7.5 ").product_price == Decimal("7.5")
        assert CartItem(product_price=None).product_price == Decimal("0")
