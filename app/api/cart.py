"""Server-side cart of the authenticated user."""
from __future__ import annotations

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Cart


class CartApi(ResourceApi):
    async def get(self, auth: AuthSession) -> Cart:
        return await self._one(Cart, "/api/cart", auth)

    async def add_item(self, auth: AuthSession, product_id: int, quantity: int = 1) -> None:
        await self._client.post(
            "/api/cart/items", auth=auth, json={"productId": product_id, "quantity": quantity}
        )

    async def update_item(self, auth: AuthSession, item_id: int, quantity: int) -> None:
        await self._client.put(f"/api/cart/items/{item_id}", auth=auth, json={"quantity": quantity})

    async def remove_item(self, auth: AuthSession, item_id: int) -> None:
        await self._client.delete(f"/api/cart/items/{item_id}", auth=auth)

    async def clear(self, auth: AuthSession) -> None:
        await self._client.delete("/api/cart", auth=auth)
