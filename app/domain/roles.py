"""Backend roles and the home screen each one lands on after login."""
from __future__ import annotations

from typing import Any, Iterable

ROLE_ADMIN = "ROLE_ADMIN"
ROLE_REPAIRER = "ROLE_REPAIRER"
ROLE_SELLER = "ROLE_SELLER"
ROLE_SHOP_OWNER = "ROLE_SHOP_OWNER"
ROLE_ASSIGNER = "ROLE_ASSIGNER"
ROLE_DELIVERY = "ROLE_DELIVERY"
ROLE_GUEST = "ROLE_GUEST"
ROLE_USER = "ROLE_USER"

HOME_ADMIN = "admin"
HOME_SHOP = "shop"
HOME_ASSIGNER = "assigner"
HOME_DELIVERY = "delivery"
HOME_CUSTOMER = "customer"

# Checked in this order; the first match wins
ROLE_HOMES = (
    (ROLE_ADMIN, HOME_ADMIN),
    (ROLE_REPAIRER, HOME_SHOP),
    (ROLE_SELLER, HOME_SHOP),
    (ROLE_SHOP_OWNER, HOME_SHOP),
    (ROLE_ASSIGNER, HOME_ASSIGNER),
    (ROLE_DELIVERY, HOME_DELIVERY),
    (ROLE_GUEST, HOME_CUSTOMER),
)

SHOP_ROLES = (ROLE_REPAIRER, ROLE_SELLER, ROLE_SHOP_OWNER)


def normalize_roles(raw: Any) -> list[str]:
    """Backend sends ``role`` as a string, a list, or a list of dicts."""
    if raw is None:
        return []
    if isinstance(raw, str):
        raw = [part for part in raw.replace(";", ",").split(",")]
    roles: list[str] = []
    for item in raw:
        if isinstance(item, dict):
            item = item.get("authority") or item.get("name") or ""
        value = str(item).strip().upper()
        if not value:
            continue
        if not value.startswith("ROLE_"):
            value = f"ROLE_{value}"
        if value not in roles:
            roles.append(value)
    return roles


def home_for_roles(roles: Iterable[str]) -> str:
    role_set = set(roles)
    for role, home in ROLE_HOMES:
        if role in role_set:
            return home
    return HOME_CUSTOMER
