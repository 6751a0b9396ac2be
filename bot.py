"""
RepairHub Telegram Bot - Main Module

Telegram front-end for the RepairHub marketplace: shop for devices and
parts, request repairs, and run the shop, delivery, assigner and admin
workflows against the RepairHub REST backend.
Architecture: aiogram 3.x routers over a thin aiohttp API client.
"""
from __future__ import annotations

import asyncio
import signal
import sys
from types import FrameType

from aiogram import Router, types
from aiogram.exceptions import TelegramAPIError
from aiogram.types import BotCommand

from app.core.bootstrap import Application, build_application
from app.core.config import load_settings
from app.core.exceptions import ConfigurationException
from app.core.sentry_integration import init_sentry
from app.middlewares import RateLimitMiddleware, ServicesMiddleware
from handlers import setup_routers
from localization import get_text
from logging_config import logger, setup_logging

# =============================================================================
# FALLBACK ROUTER (CATCH-ALL HANDLERS)
# =============================================================================

fallback_router = Router(name="fallback")


@fallback_router.message()
async def fallback_message_handler(message: types.Message, lang: str) -> None:
    """Anything no other router understood."""
    await message.answer(get_text(lang, "unknown_command"))


@fallback_router.callback_query()
async def fallback_callback_handler(callback: types.CallbackQuery) -> None:
    """Stale buttons, or buttons of a role the user no longer has."""
    user_id = callback.from_user.id if callback.from_user else 0
    logger.debug("Unhandled callback from %s: %s", user_id, callback.data)
    try:
        await callback.answer()
    except TelegramAPIError as e:
        logger.debug("Fallback callback answer failed: %s", e)


# =============================================================================
# REGISTRATION
# =============================================================================


def register(application: Application) -> None:
    """Register middlewares and routers in priority order."""
    dp = application.dispatcher

    # 1. services, lang and auth session for every update (error handlers included)
    dp.update.outer_middleware(ServicesMiddleware(application.services))

    # 2. per-user flood protection
    rate_limit = RateLimitMiddleware()
    dp.message.middleware(rate_limit)
    dp.callback_query.middleware(rate_limit)

    setup_routers(dp)
    # Fallback router must be LAST
    dp.include_router(fallback_router)


async def set_commands(application: Application, lang: str) -> None:
    commands = [
        BotCommand(command="start", description=get_text(lang, "cmd_start")),
        BotCommand(command="menu", description=get_text(lang, "cmd_menu")),
        BotCommand(command="login", description=get_text(lang, "cmd_login")),
        BotCommand(command="language", description=get_text(lang, "cmd_language")),
        BotCommand(command="help", description=get_text(lang, "cmd_help")),
        BotCommand(command="cancel", description=get_text(lang, "cmd_cancel")),
    ]
    try:
        await application.bot.set_my_commands(commands)
    except TelegramAPIError as e:
        logger.warning("Failed to set bot commands: %s", e)


# =============================================================================
# SIGNAL HANDLING
# =============================================================================

shutdown_event = asyncio.Event()


def signal_handler(sig: int, frame: FrameType | None) -> None:
    """Handle termination signals."""
    logger.info("Received signal %s, initiating shutdown...", sig)
    shutdown_event.set()


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================


async def main() -> None:
    """Main bot entry point."""
    settings = load_settings()
    if settings.debug:
        setup_logging(debug=True)
    init_sentry(environment=settings.environment)

    application = build_application(settings)
    register(application)

    logger.info("=" * 50)
    logger.info("Starting RepairHub Bot")
    logger.info("Backend: %s", settings.api.base_url)
    logger.info("Environment: %s", settings.environment)
    logger.info("=" * 50)

    bot, dp = application.bot, application.dispatcher
    await set_commands(application, settings.default_lang)
    try:
        await bot.delete_webhook(drop_pending_updates=True)
    except TelegramAPIError as e:
        logger.warning("Failed to delete webhook: %s", e)

    polling_task = asyncio.create_task(
        dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
            handle_signals=False,
        )
    )
    stop_task = asyncio.create_task(shutdown_event.wait())
    try:
        await asyncio.wait({polling_task, stop_task}, return_when=asyncio.FIRST_COMPLETED)
        logger.info("Shutting down...")
        if not polling_task.done():
            await dp.stop_polling()
        await polling_task
    finally:
        stop_task.cancel()
        await application.close()
        logger.info("Bot stopped")


# =============================================================================
# STARTUP
# =============================================================================


def run() -> None:
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        asyncio.run(main())
    except ConfigurationException as e:
        logger.error("Configuration error: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user")


if __name__ == "__main__":
    run()
