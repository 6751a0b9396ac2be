"""Application bootstrap wiring bot, dispatcher, storage, and backend client."""
from __future__ import annotations

from dataclasses import dataclass

import redis
from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.base import BaseStorage
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.fsm.storage.redis import RedisStorage

from app.api import ApiClient, RepairHubApi
from app.core.config import Settings
from app.core.session_store import SessionStore
from app.services import Services, build_services
from logging_config import logger


@dataclass(slots=True)
class Application:
    bot: Bot
    dispatcher: Dispatcher
    api: RepairHubApi
    services: Services

    async def close(self) -> None:
        await self.api.close()
        await self.bot.session.close()


def build_storage(redis_url: str | None) -> BaseStorage:
    """FSM storage: Redis when configured, memory otherwise."""
    if redis_url:
        try:
            storage = RedisStorage.from_url(redis_url)
            logger.info("Using Redis for FSM storage")
            return storage
        except (redis.RedisError, ValueError) as e:
            logger.warning("Failed to initialize Redis storage, using MemoryStorage: %s", e)
    else:
        logger.info("REDIS_URL is not set; FSM states will be lost on restart")
    return MemoryStorage()


def build_application(settings: Settings) -> Application:
    """Create bot runtime components from configuration."""
    bot = Bot(token=settings.bot_token, default=DefaultBotProperties(parse_mode=ParseMode.HTML))
    dispatcher = Dispatcher(storage=build_storage(settings.redis_url))

    api = RepairHubApi(ApiClient(settings.api.base_url, timeout=settings.api.timeout))
    sessions = SessionStore(settings.redis_url)
    services = build_services(api, sessions, settings)
    logger.info("Backend API: %s", settings.api.base_url)

    return Application(bot=bot, dispatcher=dispatcher, api=api, services=services)
