"""Offer display and discount rules."""
from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from app.domain.cart_math import round_money, to_decimal
from app.domain.models import Offer

PERCENTAGE = "PERCENTAGE"
FIXED_VALUE = "FIXED_VALUE"


def _number(value: Decimal) -> str:
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


def format_discount(offer: Offer, currency: str = "EGP") -> str:
    """``"20% Off"`` for percentage offers, ``"50 EGP Off"`` for fixed ones."""
    value = _number(to_decimal(offer.discount_value))
    if offer.discount_type == PERCENTAGE:
        return f"{value}% Off"
    return f"{value} {currency} Off"


def _naive_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def is_active(offer: Offer, now: datetime | None = None) -> bool:
    """True when ``now`` lies within [start_date, end_date].

    Missing bounds are open-ended. An end date without a time part covers
    the whole day.
    """
    moment = _naive_utc(now or datetime.now(timezone.utc))
    if offer.start_date and moment < offer.start_date:
        return False
    if offer.end_date:
        end = offer.end_date
        if end.hour == end.minute == end.second == 0:
            end = end.replace(hour=23, minute=59, second=59)
        if moment > end:
            return False
    return True


def apply_discount(price: Any, offer: Offer) -> Decimal:
    """Price after the offer, never below zero."""
    base = to_decimal(price)
    value = to_decimal(offer.discount_value)
    if offer.discount_type == PERCENTAGE:
        discounted = base - base * min(value, Decimal("100")) / Decimal("100")
    else:
        discounted = base - value
    return round_money(max(discounted, Decimal("0")))


def active_offers(offers: list[Offer], now: datetime | None = None) -> list[Offer]:
    return [offer for offer in offers if is_active(offer, now)]
