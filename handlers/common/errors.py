"""Error handlers turning backend and validation failures into user alerts."""
from __future__ import annotations

from aiogram import Router
from aiogram.exceptions import TelegramAPIError
from aiogram.filters import ExceptionTypeFilter
from aiogram.types import CallbackQuery, ErrorEvent, Message

from app.core.exceptions import (
    ApiException,
    AuthenticationException,
    AuthorizationException,
    ConnectionException,
    NotFoundException,
    ValidationException,
)
from app.core.sentry_integration import capture_exception
from app.keyboards import login_keyboard
from app.services import Services
from app.services.auth_service import is_token_expired
from localization import get_text
from logging_config import logger

router = Router(name="errors")


def _target(event: ErrorEvent) -> tuple[Message | None, CallbackQuery | None, int | None]:
    update = event.update
    if update.callback_query:
        cb = update.callback_query
        return cb.message, cb, cb.from_user.id
    if update.message:
        return update.message, None, update.message.from_user.id if update.message.from_user else None
    return None, None, None


async def _notify(event: ErrorEvent, text: str, reply_markup=None) -> None:
    message, callback, _ = _target(event)
    try:
        if callback is not None:
            await callback.answer(text[:200], show_alert=True)
            if reply_markup is not None and message is not None:
                await message.answer(text, reply_markup=reply_markup)
        elif message is not None:
            await message.answer(text, reply_markup=reply_markup)
    except TelegramAPIError as e:
        logger.warning("Could not deliver error message: %s", e)


def _session_expired(exc: Exception, services: Services | None, user_id: int | None) -> bool:
    if isinstance(exc, AuthenticationException):
        return True
    if isinstance(exc, AuthorizationException) and services is not None and user_id is not None:
        # A 403 that survived the refresh attempt on a dead token means re-login
        session = services.auth.get_session(user_id)
        return session is not None and is_token_expired(session.access_token)
    return False


@router.error(ExceptionTypeFilter(ValidationException))
async def on_validation_error(event: ErrorEvent, lang: str = "en") -> None:
    exc = event.exception
    field = getattr(exc, "field", None)
    text = get_text(lang, f"error_{field}") if field else ""
    if not text or text == f"error_{field}":
        text = f"⚠️ {exc.message}"
    await _notify(event, text)


@router.error(ExceptionTypeFilter(ApiException))
async def on_api_error(event: ErrorEvent, lang: str = "en", services: Services | None = None) -> None:
    exc = event.exception
    _, _, user_id = _target(event)

    if _session_expired(exc, services, user_id):
        if services is not None and user_id is not None:
            services.auth.forget(user_id)
        logger.info("Session of %s expired: %s", user_id, exc)
        await _notify(event, get_text(lang, "session_expired"), login_keyboard(lang))
        return

    if isinstance(exc, NotFoundException):
        await _notify(event, get_text(lang, "error_not_found"))
        return

    if exc.status >= 500:
        logger.error("Backend error for %s: %s", user_id, exc)
        capture_exception(exc, user={"telegram_id": user_id})
    else:
        logger.warning("Backend rejected request of %s: %s", user_id, exc)
    await _notify(event, f"⚠️ {exc.message}")


@router.error(ExceptionTypeFilter(ConnectionException))
async def on_connection_error(event: ErrorEvent, lang: str = "en") -> None:
    logger.error("Backend unreachable: %s", event.exception)
    await _notify(event, get_text(lang, "error_connection"))


@router.error()
async def on_unexpected_error(event: ErrorEvent, lang: str = "en") -> None:
    logger.exception("Unhandled error in update %s", event.update.update_id, exc_info=event.exception)
    capture_exception(event.exception, update={"update_id": event.update.update_id})
    await _notify(event, get_text(lang, "error_unexpected"))
