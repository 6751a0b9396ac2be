"""Keyboards package - centralized keyboard management.

Usage:
    from app.keyboards import main_menu, cart_keyboard, moderation_keyboard
"""

# Common keyboards
from .common import (
    add_pagination,
    cancel_keyboard,
    confirm_keyboard,
    guest_menu,
    language_keyboard,
    login_keyboard,
    main_menu,
    otp_keyboard,
    register_kind_keyboard,
)

# Customer keyboards
from .user import (
    account_keyboard,
    addresses_keyboard,
    cart_keyboard,
    checkout_address_keyboard,
    checkout_confirm_keyboard,
    checkout_payment_keyboard,
    explore_keyboard,
    notifications_keyboard,
    offers_keyboard,
    order_detail_keyboard,
    orders_keyboard,
    payment_link_keyboard,
    payment_retry_keyboard,
    product_keyboard,
    repair_address_keyboard,
    repair_category_keyboard,
    repair_delivery_method_keyboard,
    repair_detail_keyboard,
    repair_menu_keyboard,
    repair_payment_keyboard,
    repair_shops_keyboard,
    repairs_keyboard,
)

# Shop keyboards
from .shop import (
    shop_offers_keyboard,
    shop_order_keyboard,
    shop_orders_keyboard,
    shop_repair_keyboard,
    shop_repairs_keyboard,
)

# Admin keyboards
from .admin import admin_dashboard_keyboard, delete_confirm_keyboard, moderation_keyboard

# Delivery and assigner keyboards
from .delivery import (
    assign_queue_keyboard,
    assignment_log_keyboard,
    couriers_keyboard,
    job_status_keyboard,
    jobs_keyboard,
    my_jobs_menu_keyboard,
)

__all__ = [
    # Common
    "add_pagination",
    "cancel_keyboard",
    "confirm_keyboard",
    "guest_menu",
    "language_keyboard",
    "login_keyboard",
    "main_menu",
    "otp_keyboard",
    "register_kind_keyboard",
    # Customer
    "account_keyboard",
    "addresses_keyboard",
    "cart_keyboard",
    "checkout_address_keyboard",
    "checkout_confirm_keyboard",
    "checkout_payment_keyboard",
    "explore_keyboard",
    "notifications_keyboard",
    "offers_keyboard",
    "order_detail_keyboard",
    "orders_keyboard",
    "payment_link_keyboard",
    "payment_retry_keyboard",
    "product_keyboard",
    "repair_address_keyboard",
    "repair_category_keyboard",
    "repair_delivery_method_keyboard",
    "repair_detail_keyboard",
    "repair_menu_keyboard",
    "repair_payment_keyboard",
    "repair_shops_keyboard",
    "repairs_keyboard",
    # Shop
    "shop_offers_keyboard",
    "shop_order_keyboard",
    "shop_orders_keyboard",
    "shop_repair_keyboard",
    "shop_repairs_keyboard",
    # Admin
    "admin_dashboard_keyboard",
    "delete_confirm_keyboard",
    "moderation_keyboard",
    # Delivery / assigner
    "assign_queue_keyboard",
    "assignment_log_keyboard",
    "couriers_keyboard",
    "job_status_keyboard",
    "jobs_keyboard",
    "my_jobs_menu_keyboard",
]
