"""Router filters based on the logged-in user's roles."""
from __future__ import annotations

from aiogram.filters import BaseFilter
from aiogram.types import TelegramObject

from app.core.session_store import AuthSession


class HasRole(BaseFilter):
    """Passes when the injected ``auth`` session carries one of ``roles``."""

    def __init__(self, *roles: str):
        self.roles = roles

    async def __call__(self, event: TelegramObject, auth: AuthSession | None = None) -> bool:
        return auth is not None and auth.has_role(*self.roles)
