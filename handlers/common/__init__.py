"""
Common handlers - commands, language, login/registration and error alerts.
"""

from handlers.common.router import router as common_router

__all__ = ["common_router"]
