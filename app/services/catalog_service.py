"""Explore screen data: products, categories, shops and offers."""
from __future__ import annotations

from datetime import datetime

from app.api import RepairHubApi
from app.core.session_store import AuthSession
from app.domain.models import Category, Offer, Product, Shop
from app.domain.offers import active_offers

CONDITIONS = ("NEW", "USED")


class CatalogService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def products(
        self,
        category_id: int | None = None,
        condition: str | None = None,
        auth: AuthSession | None = None,
    ) -> list[Product]:
        if category_id is not None:
            products = await self._api.catalog.category_products(category_id, auth)
        else:
            products = await self._api.catalog.list_products(auth=auth)
        if condition:
            wanted = condition.upper()
            products = [p for p in products if (p.condition or "").upper() == wanted]
        return products

    async def product(self, product_id: int, auth: AuthSession | None = None) -> Product:
        return await self._api.catalog.get_product(product_id, auth)

    async def categories(self, auth: AuthSession | None = None) -> list[Category]:
        return await self._api.catalog.list_categories(auth)

    async def shops(self, auth: AuthSession | None = None, shop_type: str | None = None) -> list[Shop]:
        shops = await self._api.users.list_shops(auth)
        if shop_type:
            shops = [s for s in shops if (s.shop_type or "").upper() == shop_type.upper()]
        return shops

    async def offers(self, auth: AuthSession | None = None, now: datetime | None = None) -> list[Offer]:
        """Only offers running right now, soonest-ending first."""
        offers = active_offers(await self._api.users.list_offers(auth), now)
        return sorted(offers, key=lambda o: (o.end_date is None, o.end_date or datetime.max))
