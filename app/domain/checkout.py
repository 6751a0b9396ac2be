"""Checkout input rules applied before any order request is sent."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from app.core.exceptions import CheckoutValidationException
from app.domain.models import Order

CREDIT_CARD = "CREDIT_CARD"
CASH = "CASH"

_CARD_ALIASES = {"visa", "card", "credit_card", "creditcard", "mastercard"}

# Repair requests accept a wider set of methods
REPAIR_PAYMENT_METHODS = ("CASH", "CREDIT_CARD", "DEBIT_CARD", "BANK_TRANSFER", "MOBILE_WALLET")
REPAIR_DELIVERY_METHODS = ("HOME_DELIVERY", "SHOP_VISIT", "PICKUP")


def map_payment_method(method: str | None) -> str:
    """``visa``/``card``/``CREDIT_CARD`` map to CREDIT_CARD, anything else to CASH."""
    if method and method.strip().lower() in _CARD_ALIASES:
        return CREDIT_CARD
    return CASH


def validate_checkout(address_id: Any, payment_method: str | None) -> tuple[int, str]:
    """Return ``(address_id, payment_method)`` ready for the order request.

    Raises:
        CheckoutValidationException: address or payment method missing.
    """
    if address_id in (None, "", 0):
        raise CheckoutValidationException("Delivery address is required", field="address")
    if not payment_method or not str(payment_method).strip():
        raise CheckoutValidationException("Payment method is required", field="payment_method")
    try:
        address = int(address_id)
    except (TypeError, ValueError) as e:
        raise CheckoutValidationException("Delivery address is invalid", field="address") from e
    return address, map_payment_method(str(payment_method))


@dataclass(frozen=True, slots=True)
class CheckoutResult:
    order: Order
    payment_url: str | None = None
    # card order created but the payment redirect could not be obtained
    payment_failed: bool = False

    @property
    def requires_payment(self) -> bool:
        return self.payment_url is not None
