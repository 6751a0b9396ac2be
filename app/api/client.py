"""Thin aiohttp client for the RepairHub REST backend.

One shared ``ClientSession`` per process. Every call takes an explicit
``AuthSession`` (or ``None`` for public endpoints); the client never keeps
a global token.
"""
from __future__ import annotations

import asyncio
import json
import re
from typing import Any, Callable

import aiohttp
from cachetools import TTLCache

from app.core.exceptions import (
    AuthenticationException,
    ConnectionException,
    exception_for_status,
)
from app.core.session_store import AuthSession
from logging_config import logger

REFRESH_PATH = "/api/auth/refresh-token"
# How long a refresh result stays reusable by requests holding the old token
REFRESH_REUSE_SECONDS = 120

_SLASHES = re.compile(r"/{2,}")
_WHITESPACE = re.compile(r"\s+")


def normalize_path(path: str, keep_trailing_slash: bool = False) -> str:
    """Clean up a backend path.

    Removes stray whitespace, collapses duplicate slashes and makes sure the
    path starts with ``/``. A trailing slash is dropped unless asked to keep it.
    """
    cleaned = _WHITESPACE.sub("", path or "")
    cleaned = _SLASHES.sub("/", "/" + cleaned.lstrip("/"))
    if not keep_trailing_slash and len(cleaned) > 1:
        cleaned = cleaned.rstrip("/")
    return cleaned


def unwrap_content(payload: Any) -> list[Any]:
    """Spring pages (``{"content": [...]}``) and bare lists both become a list."""
    if payload is None:
        return []
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        content = payload.get("content")
        if isinstance(content, list):
            return content
        for key in ("data", "items", "results"):
            if isinstance(payload.get(key), list):
                return payload[key]
    return []


def _error_message(payload: Any, status: int) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if value:
                return str(value)
    if isinstance(payload, str) and payload.strip():
        return payload.strip()[:300]
    return f"Request failed with status {status}"


class ApiClient:
    """Bearer-token REST client with one-shot refresh on 403."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 15,
        session: aiohttp.ClientSession | None = None,
        on_token_refresh: Callable[[AuthSession], None] | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None
        self._refresh_locks: dict[str, asyncio.Lock] = {}
        self._refreshed: TTLCache = TTLCache(maxsize=10000, ttl=REFRESH_REUSE_SECONDS)
        self.on_token_refresh = on_token_refresh

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={"Accept": "application/json"},
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._session and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    def url(self, path: str, keep_trailing_slash: bool = False) -> str:
        return f"{self.base_url}{normalize_path(path, keep_trailing_slash)}"

    async def get(self, path: str, *, auth: AuthSession | None = None, params: dict | None = None) -> Any:
        return await self.request("GET", path, auth=auth, params=params)

    async def post(
        self,
        path: str,
        *,
        auth: AuthSession | None = None,
        json: Any = None,
        params: dict | None = None,
    ) -> Any:
        return await self.request("POST", path, auth=auth, json=json, params=params)

    async def put(
        self,
        path: str,
        *,
        auth: AuthSession | None = None,
        json: Any = None,
        params: dict | None = None,
    ) -> Any:
        return await self.request("PUT", path, auth=auth, json=json, params=params)

    async def delete(
        self,
        path: str,
        *,
        auth: AuthSession | None = None,
        json: Any = None,
        params: dict | None = None,
    ) -> Any:
        return await self.request("DELETE", path, auth=auth, json=json, params=params)

    async def request(
        self,
        method: str,
        path: str,
        *,
        auth: AuthSession | None = None,
        json: Any = None,
        params: dict | None = None,
        keep_trailing_slash: bool = False,
        allow_refresh: bool = True,
    ) -> Any:
        """Send one request and return the decoded body.

        Raises:
            ApiException subclass for non-2xx answers.
            ConnectionException when the backend is unreachable or times out.
        """
        url = self.url(path, keep_trailing_slash)
        token_used = auth.access_token if auth else None
        status, payload = await self._send(method, url, token_used, json, params)

        if status == 403 and auth and auth.refresh_token and allow_refresh:
            await self._refresh(auth, token_used)
            status, payload = await self._send(method, url, auth.access_token, json, params)

        if 200 <= status < 300:
            return payload

        message = _error_message(payload, status)
        logger.warning("API %s %s failed: %s %s", method, url, status, message)
        raise exception_for_status(status, message, payload)

    async def _send(
        self,
        method: str,
        url: str,
        token: str | None,
        body: Any,
        params: dict | None,
    ) -> tuple[int, Any]:
        headers = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        clean_params = {k: v for k, v in (params or {}).items() if v is not None} or None

        logger.debug("API -> %s %s auth=%s params=%s", method, url, bool(token), clean_params)
        session = await self._get_session()
        try:
            async with session.request(
                method, url, json=body, params=clean_params, headers=headers
            ) as resp:
                status = resp.status
                text = await resp.text()
        except asyncio.TimeoutError as e:
            logger.error("API %s %s timed out", method, url)
            raise ConnectionException(f"Backend timeout: {method} {url}") from e
        except aiohttp.ClientError as e:
            logger.error("API %s %s connection error: %s", method, url, e)
            raise ConnectionException(f"Backend unreachable: {e}") from e

        logger.info("API <- %s %s %s", method, url, status)
        return status, self._decode(status, text)

    @staticmethod
    def _decode(status: int, text: str) -> Any:
        if status == 204 or not text or not text.strip():
            return None
        try:
            return json.loads(text)
        except ValueError:
            return text

    async def _refresh(self, auth: AuthSession, token_used: str | None) -> None:
        """Swap the access token, coalescing concurrent refreshes per session.

        Each update loads its own ``AuthSession`` copy, so the outcome of a
        refresh is remembered under the refresh token it replaced. Callers
        still holding that token adopt the stored pair instead of spending
        the (possibly rotated) refresh token a second time.
        """
        lock_key = auth.refresh_token or ""
        lock = self._refresh_locks.setdefault(lock_key, asyncio.Lock())
        async with lock:
            reused = self._refreshed.get(lock_key)
            if reused and reused[0] != token_used:
                auth.access_token, auth.refresh_token = reused
            elif auth.access_token == token_used:
                await self._exchange_refresh_token(auth)
                self._refreshed[lock_key] = (auth.access_token, auth.refresh_token)

        self._refresh_locks.pop(lock_key, None)
        if self.on_token_refresh and auth.access_token != token_used:
            self.on_token_refresh(auth)

    async def _exchange_refresh_token(self, auth: AuthSession) -> None:
        status, payload = await self._send(
            "POST",
            self.url(REFRESH_PATH),
            None,
            {"refreshToken": auth.refresh_token},
            None,
        )
        if not (200 <= status < 300) or not isinstance(payload, dict):
            logger.warning("Token refresh failed with status %s", status)
            raise AuthenticationException("Session expired, please log in again", payload)

        new_token = (
            payload.get("access_token") or payload.get("accessToken") or payload.get("token")
        )
        if not new_token:
            raise AuthenticationException("Refresh response carried no access token", payload)
        auth.access_token = str(new_token)
        auth.refresh_token = (
            payload.get("refresh_token") or payload.get("refreshToken") or auth.refresh_token
        )
        logger.info("Access token refreshed for user %s", auth.user_id)
