"""Login, session lifecycle and token checks."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any

import jwt

from app.api import RepairHubApi
from app.core.constants import MIN_PASSWORD_LENGTH
from app.core.exceptions import (
    ApiException,
    AuthenticationException,
    ConnectionException,
    ValidationException,
)
from app.core.security import InputValidator
from app.core.session_store import AuthSession, SessionStore
from app.domain.roles import home_for_roles, normalize_roles
from logging_config import logger


def decode_token(token: str | None) -> dict[str, Any] | None:
    """Read JWT claims without verifying the signature (the backend does that)."""
    if not token:
        return None
    try:
        claims = jwt.decode(token, options={"verify_signature": False, "verify_exp": False})
    except jwt.PyJWTError:
        return None
    return claims if isinstance(claims, dict) else None


def is_token_expired(token: str | None, now: float | None = None) -> bool:
    """Undecodable tokens and tokens without ``exp`` count as expired."""
    claims = decode_token(token)
    if not claims:
        return True
    exp = claims.get("exp")
    if exp is None:
        return True
    try:
        return float(exp) < (time.time() if now is None else now)
    except (TypeError, ValueError):
        return True


def _int_or_none(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True, slots=True)
class LoginResult:
    session: AuthSession
    home: str
    requires_renewal: bool = False
    shop_email: str | None = None


class AuthService:
    def __init__(self, api: RepairHubApi, sessions: SessionStore):
        self._api = api
        self._sessions = sessions

    async def login(self, telegram_id: int, email: str, password: str) -> LoginResult:
        email = email.strip().lower()
        if not InputValidator.validate_email(email):
            raise ValidationException("Invalid email address", field="email")
        if not password:
            raise ValidationException("Password is required", field="password")

        payload = await self._api.auth.login(email, password)
        token = payload.get("access_token") or payload.get("accessToken") or payload.get("token")
        if not token or not isinstance(token, str):
            raise AuthenticationException("Invalid or missing access token", payload)

        claims = decode_token(token) or {}
        roles = normalize_roles(payload.get("role"))
        if not roles:
            roles = normalize_roles(claims.get("roles") or claims.get("role") or claims.get("authorities"))

        user_id = _int_or_none(payload.get("id"))
        if user_id is None:
            user_id = _int_or_none(claims.get("sub"))

        session = AuthSession(
            access_token=token,
            refresh_token=payload.get("refresh_token") or payload.get("refreshToken"),
            roles=roles,
            user_id=user_id,
            email=payload.get("email") or email,
        )
        self._sessions.save(telegram_id, session)
        logger.info("User %s logged in with roles %s", telegram_id, roles)
        return LoginResult(
            session=session,
            home=home_for_roles(roles),
            requires_renewal=bool(payload.get("requiresRenewal", False)),
            shop_email=payload.get("shopEmail"),
        )

    async def register(self, kind: str, data: dict[str, Any]) -> Any:
        email = str(data.get("email", "")).strip().lower()
        if not InputValidator.validate_email(email):
            raise ValidationException("Invalid email address", field="email")
        if not InputValidator.validate_password(str(data.get("password", ""))):
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
            )
        return await self._api.auth.register(kind, {**data, "email": email})

    async def verify_email(self, email: str, otp_code: str) -> Any:
        code = otp_code.strip()
        if len(code) != 6 or not code.isdigit():
            raise ValidationException("Enter a valid 6-digit OTP", field="otp")
        return await self._api.auth.verify_email(email, code)

    async def resend_otp(self, email: str) -> Any:
        return await self._api.auth.resend_otp(email)

    async def forgot_password(self, email: str) -> Any:
        email = email.strip().lower()
        if not InputValidator.validate_email(email):
            raise ValidationException("Invalid email address", field="email")
        return await self._api.auth.forgot_password(email)

    def get_session(self, telegram_id: int) -> AuthSession | None:
        return self._sessions.get(telegram_id)

    def require_session(self, telegram_id: int) -> AuthSession:
        """Return a usable session or raise AuthenticationException.

        Expired sessions without a refresh token are dropped here; sessions
        that can refresh are handed to the API client, which refreshes on 403.
        """
        session = self._sessions.get(telegram_id)
        if not session or not session.access_token:
            raise AuthenticationException("Please log in first")
        if is_token_expired(session.access_token) and not session.refresh_token:
            self._sessions.clear(telegram_id)
            raise AuthenticationException("Session expired, please log in again")
        return session

    def persist_refreshed(self, session: AuthSession) -> None:
        """Store a session whose access token the API client just refreshed."""
        if session.telegram_id is not None:
            self._sessions.save(session.telegram_id, session)

    def forget(self, telegram_id: int) -> None:
        self._sessions.clear(telegram_id)

    async def logout(self, telegram_id: int) -> None:
        session = self._sessions.get(telegram_id)
        if session:
            try:
                await self._api.auth.logout(session)
            except (ApiException, ConnectionException) as e:
                # Local session goes away regardless
                logger.warning("Logout call failed for %s: %s", telegram_id, e)
        self._sessions.clear(telegram_id)
        logger.info("User %s logged out", telegram_id)
