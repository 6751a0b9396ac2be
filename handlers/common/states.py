"""
FSM States for all bot workflows.

Organized by role:
- Common: Login, Register
- Customer: Checkout, CreateRepair, RepairDetails, AddAddress
- Shop: SendQuote
- Admin: AdminSearch
"""
from __future__ import annotations

from aiogram.fsm.state import State, StatesGroup


class Login(StatesGroup):
    """Flow: Login → email → password → home screen."""

    email = State()
    password = State()


class Register(StatesGroup):
    """Flow: Register → account kind → name → email → password → OTP."""

    kind = State()
    name = State()
    email = State()
    password = State()
    otp = State()


class Checkout(StatesGroup):
    """Flow: Cart → address → payment method → confirm."""

    address = State()
    payment = State()
    confirm = State()


class CreateRepair(StatesGroup):
    """Flow: Repair → device category → shop → description."""

    category = State()
    shop = State()
    description = State()


class RepairDetails(StatesGroup):
    """Answering a quote: delivery method → address → payment method."""

    delivery_method = State()
    address = State()
    payment = State()


class AddAddress(StatesGroup):
    street = State()
    city = State()


class SendQuote(StatesGroup):
    price = State()


class AdminSearch(StatesGroup):
    query = State()


class ForgotPassword(StatesGroup):
    email = State()
