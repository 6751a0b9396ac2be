"""
Admin handlers package:
- dashboard: statistics and the financial report
- moderation: shops, users, deliveries and assigners lists
"""
from handlers.admin.router import router as admin_router

__all__ = ["admin_router"]
