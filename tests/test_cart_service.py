"""Tests for CartService: totals, optimistic updates and rollback."""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from app.core.exceptions import ServerException, ValidationException
from app.domain.models import Cart, CartItem
from app.services.cart_service import CartService


def _cart() -> Cart:
    return Cart(
        items=[
            CartItem(id=1, product_id=10, product_name="A", product_price=Decimal("10"), quantity=2),
            CartItem(id=2, product_id=11, product_name="B", product_price=Decimal("5"), quantity=1),
        ]
    )


@pytest.fixture()
def cart_service(api) -> CartService:
    api.cart.get.return_value = _cart()
    return CartService(api)


class TestCartTotals:
    async def test_total_of_two_items(self, cart_service: CartService, auth) -> None:
        """A (2 x 10) + B (1 x 5) totals 25."""
        items = await cart_service.load(auth)
        assert cart_service.total(items) == Decimal("25")

    async def test_empty_cart_total(self, cart_service: CartService) -> None:
        assert cart_service.total([]) == Decimal("0")


class TestQuantityUpdates:
    async def test_successful_update_keeps_new_quantity(self, cart_service: CartService, api, auth) -> None:
        await cart_service.load(auth)

        items = await cart_service.update_quantity(auth, 1, 3)

        api.cart.update_item.assert_awaited_once_with(auth, 1, 3)
        assert next(i for i in items if i.id == 1).quantity == 3
        assert cart_service.total(items) == Decimal("35")

    async def test_failed_update_reverts_quantity(self, cart_service: CartService, api, auth) -> None:
        """The backend rejects the change and the old quantity comes back."""
        await cart_service.load(auth)
        api.cart.update_item.side_effect = ServerException(500, "boom")

        with pytest.raises(ServerException):
            await cart_service.update_quantity(auth, 1, 5)

        assert cart_service.find(auth, 1).quantity == 2
        assert cart_service.total(cart_service.items(auth)) == Decimal("25")

    async def test_quantity_zero_removes_item(self, cart_service: CartService, api, auth) -> None:
        await cart_service.load(auth)

        items = await cart_service.update_quantity(auth, 2, 0)

        api.cart.remove_item.assert_awaited_once_with(auth, 2)
        assert [i.id for i in items] == [1]

    async def test_quantity_above_limit_is_rejected_locally(self, cart_service: CartService, api, auth) -> None:
        await cart_service.load(auth)

        with pytest.raises(ValidationException):
            await cart_service.update_quantity(auth, 1, 1000)
        api.cart.update_item.assert_not_awaited()


class TestRemoveAndClear:
    async def test_failed_remove_restores_item(self, cart_service: CartService, api, auth) -> None:
        await cart_service.load(auth)
        api.cart.remove_item.side_effect = ServerException(502, "bad gateway")

        with pytest.raises(ServerException):
            await cart_service.remove_item(auth, 2)

        assert [i.id for i in cart_service.items(auth)] == [1, 2]

    async def test_failed_clear_restores_cart(self, cart_service: CartService, api, auth) -> None:
        await cart_service.load(auth)
        api.cart.clear.side_effect = ServerException(500, "boom")

        with pytest.raises(ServerException):
            await cart_service.clear(auth)

        assert len(cart_service.items(auth)) == 2

    async def test_add_reloads_cart(self, cart_service: CartService, api, auth) -> None:
        items = await cart_service.add(auth, 10, 1)

        api.cart.add_item.assert_awaited_once_with(auth, 10, 1)
        assert len(items) == 2

    async def test_forget_drops_snapshot(self, cart_service: CartService, auth) -> None:
        await cart_service.load(auth)
        cart_service.forget(auth)
        assert cart_service.items(auth) == []


class TestSnapshotBounds:
    async def test_oldest_user_snapshot_is_evicted(self, api, auth) -> None:
        api.cart.get.return_value = _cart()
        service = CartService(api, max_users=2)
        users = [replace(auth, telegram_id=telegram_id) for telegram_id in (1, 2, 3)]

        for user in users:
            await service.load(user)

        assert service.items(users[0]) == []
        assert len(service.items(users[2])) == 2
