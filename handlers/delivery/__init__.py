"""Courier and assigner handlers."""

from handlers.delivery.router import router as delivery_router

__all__ = ["delivery_router"]
