"""Public catalog reads: products and categories."""
from __future__ import annotations

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import Category, Product


class CatalogApi(ResourceApi):
    async def list_products(
        self,
        category: str | None = None,
        condition: str | None = None,
        auth: AuthSession | None = None,
    ) -> list[Product]:
        params = {"category": category, "condition": condition}
        return await self._list(Product, "/api/products", auth, params=params)

    async def get_product(self, product_id: int, auth: AuthSession | None = None) -> Product:
        return await self._one(Product, f"/api/products/{product_id}", auth)

    async def shop_products(self, shop_id: int, auth: AuthSession | None = None) -> list[Product]:
        return await self._list(Product, f"/api/products/shop/{shop_id}", auth)

    async def list_categories(self, auth: AuthSession | None = None) -> list[Category]:
        return await self._list(Category, "/api/categories", auth)

    async def category_products(self, category_id: int, auth: AuthSession | None = None) -> list[Product]:
        return await self._list(Product, f"/api/categories/{category_id}/products", auth)
