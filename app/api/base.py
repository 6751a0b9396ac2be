"""Shared helpers for resource API wrappers."""
from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from app.api.client import ApiClient, unwrap_content
from app.core.session_store import AuthSession

M = TypeVar("M", bound=BaseModel)


class ResourceApi:
    """Wraps an ApiClient and turns payloads into pydantic models."""

    def __init__(self, client: ApiClient):
        self._client = client

    async def _list(
        self,
        model: type[M],
        path: str,
        auth: AuthSession | None,
        params: dict[str, Any] | None = None,
    ) -> list[M]:
        payload = await self._client.get(path, auth=auth, params=params)
        return [model.model_validate(row) for row in unwrap_content(payload) if isinstance(row, dict)]

    async def _one(
        self,
        model: type[M],
        path: str,
        auth: AuthSession | None,
        method: str = "GET",
        json: Any = None,
    ) -> M:
        payload = await self._client.request(method, path, auth=auth, json=json)
        return model.model_validate(payload if isinstance(payload, dict) else {})
