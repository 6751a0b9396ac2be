"""Cart synchronisation with optimistic updates and rollback."""
from __future__ import annotations

from decimal import Decimal

from cachetools import TTLCache

from app.api import RepairHubApi
from app.core.constants import CART_SNAPSHOT_MAX_USERS, CART_SNAPSHOT_TTL_SECONDS, MAX_QUANTITY
from app.core.exceptions import ValidationException
from app.core.session_store import AuthSession
from app.domain.cart_math import cart_total
from app.domain.models import CartItem
from logging_config import logger


class CartService:
    """Keeps a local snapshot of each user's cart next to the server copy.

    Mutations are applied locally first, then sent; a failed request puts
    the previous snapshot back and re-raises.
    """

    def __init__(
        self,
        api: RepairHubApi,
        ttl: int = CART_SNAPSHOT_TTL_SECONDS,
        max_users: int = CART_SNAPSHOT_MAX_USERS,
    ):
        self._api = api
        self._carts: TTLCache = TTLCache(maxsize=max_users, ttl=ttl)

    @staticmethod
    def _key(auth: AuthSession) -> int:
        return int(auth.telegram_id if auth.telegram_id is not None else auth.user_id or 0)

    @staticmethod
    def total(items: list[CartItem]) -> Decimal:
        return cart_total(items)

    def items(self, auth: AuthSession) -> list[CartItem]:
        return list(self._carts.get(self._key(auth), []))

    def find(self, auth: AuthSession, item_id: int) -> CartItem | None:
        return next((item for item in self._carts.get(self._key(auth), []) if item.id == item_id), None)

    async def load(self, auth: AuthSession) -> list[CartItem]:
        cart = await self._api.cart.get(auth)
        self._carts[self._key(auth)] = list(cart.items)
        return self.items(auth)

    async def add(self, auth: AuthSession, product_id: int, quantity: int = 1) -> list[CartItem]:
        if quantity < 1 or quantity > MAX_QUANTITY:
            raise ValidationException(f"Quantity must be between 1 and {MAX_QUANTITY}", field="quantity")
        await self._api.cart.add_item(auth, product_id, quantity)
        return await self.load(auth)

    def _snapshot(self, key: int) -> list[CartItem]:
        return [item.model_copy() for item in self._carts.get(key, [])]

    async def update_quantity(self, auth: AuthSession, item_id: int, quantity: int) -> list[CartItem]:
        if quantity < 1:
            return await self.remove_item(auth, item_id)
        if quantity > MAX_QUANTITY:
            raise ValidationException(f"Quantity must be at most {MAX_QUANTITY}", field="quantity")

        key = self._key(auth)
        snapshot = self._snapshot(key)
        self._carts[key] = [
            item.model_copy(update={"quantity": quantity}) if item.id == item_id else item
            for item in snapshot
        ]
        try:
            await self._api.cart.update_item(auth, item_id, quantity)
        except Exception:
            logger.warning("Cart update failed for item %s, restoring previous quantity", item_id)
            self._carts[key] = snapshot
            raise
        return self.items(auth)

    async def remove_item(self, auth: AuthSession, item_id: int) -> list[CartItem]:
        key = self._key(auth)
        snapshot = self._snapshot(key)
        self._carts[key] = [item for item in snapshot if item.id != item_id]
        try:
            await self._api.cart.remove_item(auth, item_id)
        except Exception:
            logger.warning("Cart remove failed for item %s, restoring cart", item_id)
            self._carts[key] = snapshot
            raise
        return self.items(auth)

    async def clear(self, auth: AuthSession) -> None:
        key = self._key(auth)
        snapshot = self._snapshot(key)
        self._carts[key] = []
        try:
            await self._api.cart.clear(auth)
        except Exception:
            logger.warning("Cart clear failed for user %s, restoring cart", key)
            self._carts[key] = snapshot
            raise

    def forget(self, auth: AuthSession) -> None:
        """Drop the local snapshot (after checkout the server empties the cart)."""
        self._carts.pop(self._key(auth), None)
