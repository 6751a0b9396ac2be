"""Customer handlers."""

from handlers.customer.router import router as customer_router

__all__ = ["customer_router"]
