"""Rate limiting middleware to keep one user from flooding the backend."""
from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.exceptions import TelegramAPIError
from aiogram.types import CallbackQuery, Message, TelegramObject, User
from cachetools import TTLCache

from app.core.constants import RATE_LIMIT_CALLBACKS, RATE_LIMIT_MESSAGES
from localization import get_text
from logging_config import logger


class RateLimitMiddleware(BaseMiddleware):
    """Per-user limits over a one minute window.

    Messages and callback presses are counted separately; callbacks get a
    higher limit because pagination and cart buttons are pressed in bursts.
    """

    def __init__(
        self,
        message_limit: int = RATE_LIMIT_MESSAGES,
        callback_limit: int = RATE_LIMIT_CALLBACKS,
        window_seconds: int = 60,
    ):
        super().__init__()
        self.message_limit = message_limit
        self.callback_limit = callback_limit
        self.counters: TTLCache = TTLCache(maxsize=10000, ttl=window_seconds)
        # Warn at most once per five minutes
        self.warning_cache: TTLCache = TTLCache(maxsize=10000, ttl=300)

    def _limit_for(self, event: TelegramObject) -> tuple[str, int]:
        if isinstance(event, CallbackQuery):
            return "callback", self.callback_limit
        return "message", self.message_limit

    def hit(self, user_id: int, event: TelegramObject) -> bool:
        """Count one event; False once the user is over the limit."""
        kind, limit = self._limit_for(event)
        key = f"{kind}_{user_id}"
        count = self.counters.get(key, 0)
        if count >= limit:
            return False
        self.counters[key] = count + 1
        return True

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        user: User | None = data.get("event_from_user")
        if not user:
            return await handler(event, data)

        if self.hit(user.id, event):
            return await handler(event, data)

        if user.id not in self.warning_cache:
            self.warning_cache[user.id] = time.time()
            logger.warning("User %s exceeded rate limit", user.id)
            text = get_text(data.get("lang", "en"), "rate_limited")
            try:
                if isinstance(event, CallbackQuery):
                    await event.answer(text, show_alert=True)
                elif isinstance(event, Message):
                    await event.answer(text)
            except TelegramAPIError as e:
                logger.debug("Rate limit warning not delivered: %s", e)
        return None
