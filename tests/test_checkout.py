"""Tests for checkout validation and order placement."""
from __future__ import annotations

import pytest

from app.core.exceptions import CheckoutValidationException, ServerException
from app.domain.checkout import CASH, CREDIT_CARD, map_payment_method, validate_checkout
from app.domain.models import Cart, CartItem, Order
from app.services.cart_service import CartService
from app.services.checkout_service import CheckoutService


class TestPaymentMethodMapping:
    @pytest.mark.parametrize("method", ["visa", "VISA", "card", "CREDIT_CARD", "mastercard"])
    def test_card_aliases(self, method: str) -> None:
        assert map_payment_method(method) == CREDIT_CARD

    @pytest.mark.parametrize("method", ["cash", "CASH", "anything", None])
    def test_everything_else_is_cash(self, method) -> None:
        assert map_payment_method(method) == CASH


class TestValidateCheckout:
    def test_missing_address(self) -> None:
        with pytest.raises(CheckoutValidationException) as info:
            validate_checkout(None, "CASH")
        assert info.value.field == "address"

    def test_missing_payment_method(self) -> None:
        with pytest.raises(CheckoutValidationException) as info:
            validate_checkout(3, "")
        assert info.value.field == "payment_method"

    def test_non_numeric_address(self) -> None:
        with pytest.raises(CheckoutValidationException):
            validate_checkout("home", "CASH")

    def test_valid_input(self) -> None:
        assert validate_checkout("3", "visa") == (3, CREDIT_CARD)


class TestCheckoutService:
    @pytest.fixture()
    def checkout(self, api) -> CheckoutService:
        return CheckoutService(api, CartService(api))

    @pytest.mark.parametrize(("address_id", "method"), [(None, "CASH"), (3, None), (None, None)])
    async def test_blocked_checkout_sends_no_request(self, checkout: CheckoutService, api, auth, address_id, method) -> None:
        """Missing address or payment method never reaches the backend."""
        with pytest.raises(CheckoutValidationException):
            await checkout.place_order(auth, address_id, method)
        api.users.create_order.assert_not_awaited()
        api.payments.pay_order_by_card.assert_not_awaited()

    async def test_cash_order(self, checkout: CheckoutService, api, auth) -> None:
        api.users.create_order.return_value = Order(id=9, status="PENDING")

        result = await checkout.place_order(auth, 3, "cash")

        api.users.create_order.assert_awaited_once_with(auth, 3, CASH)
        api.payments.pay_order_by_card.assert_not_awaited()
        assert result.order.id == 9
        assert result.requires_payment is False

    async def test_card_order_starts_payment(self, checkout: CheckoutService, api, auth) -> None:
        api.users.create_order.return_value = Order(id=9, status="PENDING")
        api.payments.pay_order_by_card.return_value = "https://pay.example/9"

        result = await checkout.place_order(auth, 3, "visa")

        api.payments.pay_order_by_card.assert_awaited_once_with(auth, 9)
        assert result.payment_url == "https://pay.example/9"
        assert result.requires_payment is True

    async def test_payment_start_failure_keeps_the_order(self, api, auth) -> None:
        """The order stands and the cart is dropped even when the card redirect fails."""
        cart = CartService(api)
        api.cart.get.return_value = Cart(items=[CartItem(id=1, product_id=10, quantity=1)])
        await cart.load(auth)
        api.users.create_order.return_value = Order(id=9, status="PENDING")
        api.payments.pay_order_by_card.side_effect = ServerException(500, "gateway down")

        result = await CheckoutService(api, cart).place_order(auth, 3, "CREDIT_CARD")

        api.users.create_order.assert_awaited_once_with(auth, 3, CREDIT_CARD)
        assert result.order.id == 9
        assert result.payment_failed is True
        assert result.requires_payment is False
        assert cart.items(auth) == []
