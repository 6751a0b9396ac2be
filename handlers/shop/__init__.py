"""Shop owner handlers."""

from handlers.shop.router import router as shop_router

__all__ = ["shop_router"]
