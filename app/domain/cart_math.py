"""Shared helpers for cart and order totals."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

TWO_PLACES = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    if value in (None, ""):
        return Decimal("0")
    try:
        return Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc


def round_money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def line_total(price: Any, quantity: Any) -> Decimal:
    return round_money(to_decimal(price) * int(quantity or 0))


def cart_total(items: Iterable[Any]) -> Decimal:
    """Sum of price x quantity over cart items or order items.

    Accepts models exposing ``product_price``/``price`` and ``quantity``.
    """
    total = Decimal("0")
    for item in items:
        price = getattr(item, "product_price", None)
        if price is None:
            price = getattr(item, "price", 0)
        total += to_decimal(price) * int(getattr(item, "quantity", 0) or 0)
    return round_money(total)


def items_count(items: Iterable[Any]) -> int:
    return sum(int(getattr(item, "quantity", 0) or 0) for item in items)


def format_money(value: Any, currency: str = "EGP") -> str:
    """``1234.5`` -> ``1,234.50 EGP``; whole amounts drop the decimals."""
    amount = round_money(to_decimal(value))
    if amount == amount.to_integral_value():
        return f"{int(amount):,} {currency}"
    return f"{amount:,.2f} {currency}"
