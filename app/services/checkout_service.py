"""Order placement from the current cart."""
from __future__ import annotations

from app.api import RepairHubApi
from app.core.exceptions import ApiException, ConnectionException
from app.core.session_store import AuthSession
from app.domain.checkout import CREDIT_CARD, CheckoutResult, validate_checkout
from app.services.cart_service import CartService
from logging_config import logger


class CheckoutService:
    def __init__(self, api: RepairHubApi, cart: CartService):
        self._api = api
        self._cart = cart

    async def place_order(
        self, auth: AuthSession, address_id: int | None, payment_method: str | None
    ) -> CheckoutResult:
        """Validate, create the order and start card payment when needed.

        Once the order exists the cart is forgotten, even if the card payment
        cannot be started; the result then carries ``payment_failed`` and the
        order can be paid later from its detail screen.

        Raises:
            CheckoutValidationException: before any request when the address
                or payment method is missing.
        """
        address, method = validate_checkout(address_id, payment_method)
        order = await self._api.users.create_order(auth, address, method)
        logger.info("Order %s created by user %s (%s)", order.id, auth.user_id, method)
        self._cart.forget(auth)

        if method != CREDIT_CARD or order.id is None:
            return CheckoutResult(order=order)
        try:
            payment_url = await self._api.payments.pay_order_by_card(auth, order.id)
        except (ApiException, ConnectionException) as e:
            logger.warning("Card payment for order %s could not be started: %s", order.id, e)
            return CheckoutResult(order=order, payment_failed=True)
        return CheckoutResult(order=order, payment_url=payment_url)
