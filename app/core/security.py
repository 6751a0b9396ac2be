"""
Input validation and sanitisation helpers.

Everything the user types is checked here before it is sent to the backend
or echoed back in an HTML message.
"""
from __future__ import annotations

import html
import re
from typing import Any

from app.core.constants import MAX_DESCRIPTION_LENGTH, MAX_QUANTITY, MIN_PASSWORD_LENGTH, MIN_QUANTITY


class InputValidator:
    """Input validation and sanitization for Telegram bot security."""

    EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}$")
    PHONE_PATTERN = re.compile(r"^\+?[1-9]\d{6,14}$")
    PRICE_PATTERN = re.compile(r"^\d+(\.\d{1,2})?$")

    @staticmethod
    def sanitize_text(text: Any, max_length: int = 1000) -> str:
        """Sanitize text input by escaping HTML and limiting length."""
        if not text or not isinstance(text, str):
            return ""

        sanitized = html.escape(text.strip())

        if len(sanitized) > max_length:
            sanitized = sanitized[:max_length] + "..."

        return sanitized

    @staticmethod
    def validate_email(email: str | None) -> bool:
        if not email:
            return False
        return bool(InputValidator.EMAIL_PATTERN.match(email.strip()))

    @staticmethod
    def validate_phone(phone: str | None) -> bool:
        """Validate phone number format (E.164 compatible)."""
        if not phone:
            return False
        cleaned = phone.replace(" ", "").replace("-", "").replace("(", "").replace(")", "")
        return bool(InputValidator.PHONE_PATTERN.match(cleaned))

    @staticmethod
    def validate_password(password: str | None) -> bool:
        return bool(password) and len(password) >= MIN_PASSWORD_LENGTH

    @staticmethod
    def validate_description(text: str | None) -> tuple[bool, str]:
        """Trim a repair description; empty or over-long text is invalid."""
        cleaned = (text or "").strip()
        if not cleaned or len(cleaned) > MAX_DESCRIPTION_LENGTH:
            return False, cleaned
        return True, cleaned

    @staticmethod
    def validate_price(price_str: str) -> tuple[bool, float]:
        """Validate and parse price string. Returns (is_valid, parsed_price)."""
        if not price_str:
            return False, 0.0

        if InputValidator.PRICE_PATTERN.match(price_str.strip()):
            try:
                price = float(price_str)
                if 0 <= price <= 999_999_999:
                    return True, price
            except ValueError:
                pass

        return False, 0.0

    @staticmethod
    def validate_quantity(quantity_str: str) -> tuple[bool, int]:
        """Validate and parse quantity string."""
        if not quantity_str:
            return False, 0

        try:
            quantity = int(quantity_str)
            if MIN_QUANTITY <= quantity <= MAX_QUANTITY:
                return True, quantity
        except ValueError:
            pass

        return False, 0


def esc(value: Any) -> str:
    """Escape a value for Telegram HTML parse mode."""
    if value is None:
        return ""
    return html.escape(str(value))
