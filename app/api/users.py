"""Customer profile, addresses, orders and related lists."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Address, Offer, Order, Review, Shop, Transaction, User


class UsersApi(ResourceApi):
    async def get_profile(self, auth: AuthSession) -> User:
        return await self._one(User, "/api/users/profile", auth)

    async def update_profile(self, auth: AuthSession, data: dict[str, Any]) -> User:
        return await self._one(User, "/api/users/profile", auth, method="PUT", json=data)

    async def delete_account(self, auth: AuthSession) -> None:
        await self._client.delete("/api/users/profile", auth=auth)

    async def list_addresses(self, auth: AuthSession) -> list[Address]:
        return await self._list(Address, "/api/users/addresses", auth)

    async def add_address(self, auth: AuthSession, data: dict[str, Any]) -> Address:
        return await self._one(Address, "/api/users/addresses", auth, method="POST", json=data)

    async def update_address(self, auth: AuthSession, address_id: int, data: dict[str, Any]) -> Address:
        return await self._one(
            Address, f"/api/users/addresses/{address_id}", auth, method="PUT", json=data
        )

    async def delete_address(self, auth: AuthSession, address_id: int) -> None:
        await self._client.delete(f"/api/users/addresses/{address_id}", auth=auth)

    async def create_order(self, auth: AuthSession, address_id: int, payment_method: str) -> Order:
        return await self._one(
            Order,
            "/api/users/orders",
            auth,
            method="POST",
            json={"deliveryAddressId": address_id, "paymentMethod": payment_method},
        )

    async def list_orders(self, auth: AuthSession) -> list[Order]:
        return await self._list(Order, "/api/users/orders", auth)

    async def track_order(self, auth: AuthSession, order_id: int) -> Order:
        return await self._one(Order, f"/api/users/orders/{order_id}/tracking", auth)

    async def cancel_order(self, auth: AuthSession, order_id: int) -> Any:
        return await self._client.delete(f"/api/users/orders/{order_id}/cancel", auth=auth)

    async def list_transactions(self, auth: AuthSession) -> list[Transaction]:
        return await self._list(Transaction, "/api/users/transactions", auth)

    async def list_shops(self, auth: AuthSession | None = None) -> list[Shop]:
        return await self._list(Shop, "/api/users/shops/all", auth)

    async def list_offers(self, auth: AuthSession | None = None) -> list[Offer]:
        return await self._list(Offer, "/api/users/offers", auth)

    async def shop_reviews(self, shop_id: int, auth: AuthSession | None = None) -> list[Review]:
        return await self._list(Review, f"/api/reviews/shops/{shop_id}", auth)

    async def add_review(self, auth: AuthSession, shop_id: int, rating: int, comment: str) -> Review:
        return await self._one(
            Review,
            f"/api/reviews/{shop_id}",
            auth,
            method="POST",
            json={"rating": rating, "comment": comment},
        )
