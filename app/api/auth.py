"""Credential issuance: login, registration, OTP, refresh, logout."""
from __future__ import annotations

from typing import Any

from app.api.base import ResourceApi
from app.core.session_store import AuthSession
from app.domain.models import User

REGISTER_KINDS = ("user", "shop", "delivery", "assigner")
# Older role-specific endpoints still served by the backend
PORTALS = ("users", "shops", "admins")


class AuthApi(ResourceApi):
    async def login(self, email: str, password: str, portal: str | None = None) -> dict[str, Any]:
        """Return the raw login payload (``access_token``, ``role``, ``id`` ...)."""
        if portal is not None and portal not in PORTALS:
            raise ValueError(f"Unknown login portal: {portal}")
        path = "/api/auth/login" if portal is None else f"/api/auth/{portal}/login"
        payload = await self._client.post(path, json={"email": email, "password": password})
        return payload if isinstance(payload, dict) else {}

    async def register(self, kind: str, data: dict[str, Any]) -> Any:
        if kind not in REGISTER_KINDS:
            raise ValueError(f"Unknown registration kind: {kind}")
        return await self._client.post(f"/api/auth/register/{kind}", json=data)

    async def register_legacy(self, portal: str, data: dict[str, Any]) -> Any:
        if portal not in ("users", "shops"):
            raise ValueError(f"Unknown registration portal: {portal}")
        return await self._client.post(f"/api/auth/{portal}/register", json=data)

    async def verify_email(self, email: str, otp_code: str) -> Any:
        # The backend field really is spelled "optCode"
        return await self._client.post(
            "/api/auth/verify-email", json={"email": email, "optCode": otp_code}
        )

    async def resend_otp(self, email: str) -> Any:
        return await self._client.post("/api/auth/resend-otp", json={"email": email})

    async def forgot_password(self, email: str, portal: str = "users") -> Any:
        return await self._client.post(f"/api/auth/{portal}/forgot-password", json={"email": email})

    async def reset_password(self, token: str, new_password: str) -> Any:
        return await self._client.post(
            "/api/auth/users/reset-password", json={"token": token, "newPassword": new_password}
        )

    async def logout(self, auth: AuthSession) -> Any:
        return await self._client.request(
            "POST",
            "/api/auth/logout",
            auth=auth,
            json={"refreshToken": auth.refresh_token},
            allow_refresh=False,
        )

    async def current_user(self, auth: AuthSession) -> User:
        return await self._one(User, "/api/auth/user", auth)
