from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, User

from app.services import Services


class ServicesMiddleware(BaseMiddleware):
    """Puts ``services``, the user's ``lang`` and ``auth`` session into handler data."""

    def __init__(self, services: Services):
        self.services = services

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        data["services"] = self.services
        user: User | None = data.get("event_from_user")
        if user is not None:
            data["lang"] = self.services.sessions.get_lang(user.id) or self.services.settings.default_lang
            data["auth"] = self.services.auth.get_session(user.id)
        else:
            data["lang"] = self.services.settings.default_lang
            data["auth"] = None
        return await handler(event, data)
