"""Common keyboards used across the bot."""
from __future__ import annotations

from aiogram.types import InlineKeyboardMarkup, ReplyKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder, ReplyKeyboardBuilder

from app.core.pagination import page_numbers
from app.domain import roles
from localization import LANGUAGES, get_language_name, get_text

# Reply-menu button keys per home screen, in display order
MENU_KEYS = {
    roles.HOME_CUSTOMER: (
        "menu_explore",
        "menu_cart",
        "menu_orders",
        "menu_repair",
        "menu_offers",
        "menu_notifications",
        "menu_account",
    ),
    roles.HOME_SHOP: (
        "menu_shop_dashboard",
        "menu_shop_orders",
        "menu_shop_repairs",
        "menu_shop_offers",
        "menu_notifications",
        "menu_logout",
    ),
    roles.HOME_DELIVERY: (
        "menu_delivery_orders",
        "menu_delivery_repairs",
        "menu_my_deliveries",
        "menu_logout",
    ),
    roles.HOME_ASSIGNER: (
        "menu_assign_orders",
        "menu_assign_repairs",
        "menu_assign_log",
        "menu_logout",
    ),
    roles.HOME_ADMIN: (
        "menu_admin_dashboard",
        "menu_admin_shops",
        "menu_admin_users",
        "menu_admin_deliveries",
        "menu_admin_assigners",
        "menu_admin_finance",
        "menu_logout",
    ),
}

GUEST_MENU_KEYS = ("menu_login", "menu_register", "menu_explore", "menu_offers", "menu_language")


def language_keyboard() -> InlineKeyboardMarkup:
    """Language selection keyboard."""
    builder = InlineKeyboardBuilder()
    for code in LANGUAGES:
        builder.button(text=get_language_name(code), callback_data=f"lang_{code}")
    builder.adjust(2)
    return builder.as_markup()


def cancel_keyboard(lang: str = "en") -> ReplyKeyboardMarkup:
    """Cancel keyboard."""
    builder = ReplyKeyboardBuilder()
    builder.button(text=get_text(lang, "cancel"))
    return builder.as_markup(resize_keyboard=True)


def main_menu(home: str, lang: str = "en") -> ReplyKeyboardMarkup:
    """Reply menu of a role's home screen."""
    builder = ReplyKeyboardBuilder()
    for key in MENU_KEYS.get(home, MENU_KEYS[roles.HOME_CUSTOMER]):
        builder.button(text=get_text(lang, key))
    if home == roles.HOME_CUSTOMER:
        builder.adjust(2, 2, 2, 1)
    else:
        builder.adjust(2)
    return builder.as_markup(resize_keyboard=True)


def guest_menu(lang: str = "en") -> ReplyKeyboardMarkup:
    builder = ReplyKeyboardBuilder()
    for key in GUEST_MENU_KEYS:
        builder.button(text=get_text(lang, key))
    builder.adjust(2, 2, 1)
    return builder.as_markup(resize_keyboard=True)


def add_pagination(builder: InlineKeyboardBuilder, prefix: str, page: int, pages: int) -> None:
    """Append a page-number row (``1 … 4 [5] 6 … 20``) with ``{prefix}_{n}`` callbacks."""
    if pages <= 1:
        return
    nav = InlineKeyboardBuilder()
    numbers = page_numbers(page, pages)
    for number in numbers:
        if isinstance(number, str):
            nav.button(text=number, callback_data="noop")
        elif number == page:
            nav.button(text=f"· {number} ·", callback_data="noop")
        else:
            nav.button(text=str(number), callback_data=f"{prefix}_{number}")
    nav.adjust(len(numbers))
    builder.attach(nav)


def confirm_keyboard(lang: str, yes_callback: str, no_callback: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_yes"), callback_data=yes_callback)
    builder.button(text=get_text(lang, "btn_no"), callback_data=no_callback)
    builder.adjust(2)
    return builder.as_markup()


def login_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "menu_login"), callback_data="auth_login")
    builder.button(text=get_text(lang, "menu_register"), callback_data="auth_register")
    builder.adjust(2)
    return builder.as_markup()


def register_kind_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for kind in ("user", "shop", "delivery", "assigner"):
        builder.button(text=get_text(lang, f"register_kind_{kind}"), callback_data=f"reg_kind_{kind}")
    builder.adjust(2)
    return builder.as_markup()


def otp_keyboard(lang: str) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=get_text(lang, "btn_resend_otp"), callback_data="reg_resend_otp")
    return builder.as_markup()
