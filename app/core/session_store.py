"""Per Telegram user auth sessions and language, Redis-backed with TTL."""
from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any

import redis

from app.core.constants import SESSION_TTL_SECONDS
from logging_config import logger


@dataclass
class AuthSession:
    """Backend credentials of one Telegram user."""

    access_token: str
    refresh_token: str | None = None
    roles: list[str] = field(default_factory=list)
    user_id: int | None = None
    email: str | None = None
    telegram_id: int | None = None

    def has_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "roles": list(self.roles),
            "user_id": self.user_id,
            "email": self.email,
            "telegram_id": self.telegram_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthSession:
        user_id = data.get("user_id")
        return cls(
            access_token=str(data.get("access_token", "")),
            refresh_token=data.get("refresh_token"),
            roles=[str(role) for role in data.get("roles") or []],
            user_id=int(user_id) if user_id not in (None, "") else None,
            email=data.get("email"),
            telegram_id=data.get("telegram_id"),
        )


class SessionStore:
    """Sessions and language preferences keyed by Telegram user id.

    Uses Redis when ``redis_url`` is given and reachable, otherwise an
    in-memory dict with the same TTL semantics.
    """

    def __init__(self, redis_url: str | None = None, ttl_seconds: int = SESSION_TTL_SECONDS):
        self._ttl = ttl_seconds
        self._redis_url = redis_url
        self._client = self._init_client()
        self._memory_sessions: dict[int, tuple[float, dict[str, Any]]] = {}
        self._memory_langs: dict[int, str] = {}

    def _init_client(self):
        if not self._redis_url:
            logger.info("REDIS_URL is not set; sessions use in-memory storage")
            return None
        try:
            client = redis.from_url(
                self._redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_timeout=5,
            )
            client.ping()
            logger.info("Redis session storage enabled")
            return client
        except redis.RedisError as exc:
            logger.warning("Redis session init failed, fallback to in-memory: %s", exc)
            return None

    def _switch_to_memory_fallback(self, reason: Exception) -> None:
        logger.warning("Redis session fallback to memory mode: %s", reason)
        self._client = None

    @property
    def uses_redis(self) -> bool:
        return self._client is not None

    @staticmethod
    def _session_key(user_id: int) -> str:
        return f"session:{int(user_id)}"

    @staticmethod
    def _lang_key(user_id: int) -> str:
        return f"lang:{int(user_id)}"

    def get(self, user_id: int) -> AuthSession | None:
        if self._client:
            try:
                raw = self._client.get(self._session_key(user_id))
            except redis.RedisError as exc:
                self._switch_to_memory_fallback(exc)
            else:
                if not raw:
                    return None
                try:
                    return AuthSession.from_dict(json.loads(raw))
                except (ValueError, TypeError):
                    logger.warning("Dropping malformed session for user %s", user_id)
                    self.clear(user_id)
                    return None

        entry = self._memory_sessions.get(int(user_id))
        if not entry:
            return None
        expires_at, data = entry
        if expires_at < time.time():
            self._memory_sessions.pop(int(user_id), None)
            return None
        return AuthSession.from_dict(data)

    def save(self, user_id: int, session: AuthSession) -> None:
        session.telegram_id = int(user_id)
        payload = session.to_dict()
        if self._client:
            try:
                self._client.setex(self._session_key(user_id), self._ttl, json.dumps(payload))
                return
            except redis.RedisError as exc:
                self._switch_to_memory_fallback(exc)
        self._memory_sessions[int(user_id)] = (time.time() + self._ttl, payload)

    def clear(self, user_id: int) -> None:
        if self._client:
            try:
                self._client.delete(self._session_key(user_id))
            except redis.RedisError as exc:
                self._switch_to_memory_fallback(exc)
        self._memory_sessions.pop(int(user_id), None)

    def get_lang(self, user_id: int) -> str | None:
        if self._client:
            try:
                return self._client.get(self._lang_key(user_id))
            except redis.RedisError as exc:
                self._switch_to_memory_fallback(exc)
        return self._memory_langs.get(int(user_id))

    def set_lang(self, user_id: int, lang: str) -> None:
        if self._client:
            try:
                self._client.set(self._lang_key(user_id), lang)
                return
            except redis.RedisError as exc:
                self._switch_to_memory_fallback(exc)
        self._memory_langs[int(user_id)] = lang
