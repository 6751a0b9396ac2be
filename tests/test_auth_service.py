"""Tests for login, token checks and the session store."""
from __future__ import annotations

import time

import pytest
from conftest import make_token

from app.core.exceptions import ApiException, AuthenticationException, ValidationException
from app.core.session_store import AuthSession, SessionStore
from app.domain.roles import HOME_ADMIN, HOME_CUSTOMER, HOME_SHOP, home_for_roles, normalize_roles
from app.services.auth_service import AuthService, decode_token, is_token_expired


@pytest.fixture()
def auth_service(api, session_store: SessionStore) -> AuthService:
    return AuthService(api, session_store)


class TestTokens:
    def test_fresh_token(self) -> None:
        assert is_token_expired(make_token(3600)) is False

    def test_expired_token(self) -> None:
        assert is_token_expired(make_token(-10)) is True

    def test_garbage_counts_as_expired(self) -> None:
        assert is_token_expired("not-a-jwt") is True
        assert is_token_expired(None) is True

    def test_decode_without_signature_check(self) -> None:
        claims = decode_token(make_token(roles=["ADMIN"]))
        assert claims["roles"] == ["ADMIN"]

    def test_explicit_now(self) -> None:
        token = make_token(100)
        assert is_token_expired(token, now=time.time() + 1000) is True


class TestRoles:
    def test_string_role(self) -> None:
        assert normalize_roles("admin") == ["ROLE_ADMIN"]

    def test_authority_dicts(self) -> None:
        assert normalize_roles([{"authority": "ROLE_SELLER"}, "user"]) == ["ROLE_SELLER", "ROLE_USER"]

    def test_home_priority(self) -> None:
        assert home_for_roles(["ROLE_USER", "ROLE_ADMIN"]) == HOME_ADMIN
        assert home_for_roles(["ROLE_REPAIRER"]) == HOME_SHOP
        assert home_for_roles([]) == HOME_CUSTOMER


class TestLogin:
    async def test_login_saves_session(self, auth_service: AuthService, api, session_store: SessionStore) -> None:
        token = make_token()
        api.auth.login.return_value = {
            "access_token": token,
            "refresh_token": "r-1",
            "role": "ROLE_SHOP_OWNER",
            "id": 12,
        }

        result = await auth_service.login(100, " Shop@Example.com ", "secret1")

        api.auth.login.assert_awaited_once_with("shop@example.com", "secret1")
        assert result.home == HOME_SHOP
        stored = session_store.get(100)
        assert stored.access_token == token
        assert stored.user_id == 12
        assert stored.telegram_id == 100

    async def test_roles_from_token_claims(self, auth_service: AuthService, api) -> None:
        api.auth.login.return_value = {"accessToken": make_token(roles=["ADMIN"], sub="3")}

        result = await auth_service.login(100, "a@example.com", "secret1")

        assert result.session.roles == ["ROLE_ADMIN"]
        assert result.session.user_id == 3

    async def test_missing_token_is_rejected(self, auth_service: AuthService, api, session_store: SessionStore) -> None:
        api.auth.login.return_value = {"message": "ok"}

        with pytest.raises(AuthenticationException):
            await auth_service.login(100, "a@example.com", "secret1")
        assert session_store.get(100) is None

    async def test_invalid_email_sends_nothing(self, auth_service: AuthService, api) -> None:
        with pytest.raises(ValidationException) as info:
            await auth_service.login(100, "not-an-email", "secret1")
        assert info.value.field == "email"
        api.auth.login.assert_not_awaited()

    async def test_subscription_renewal_flag(self, auth_service: AuthService, api) -> None:
        api.auth.login.return_value = {
            "access_token": make_token(),
            "role": "ROLE_SHOP_OWNER",
            "requiresRenewal": True,
            "shopEmail": "shop@example.com",
        }

        result = await auth_service.login(100, "shop@example.com", "secret1")

        assert result.requires_renewal is True
        assert result.shop_email == "shop@example.com"


class TestRegistration:
    async def test_short_password(self, auth_service: AuthService, api) -> None:
        with pytest.raises(ValidationException) as info:
            await auth_service.register("user", {"email": "a@example.com", "password": "123"})
        assert info.value.field == "password"
        api.auth.register.assert_not_awaited()

    async def test_otp_must_be_six_digits(self, auth_service: AuthService, api) -> None:
        with pytest.raises(ValidationException):
            await auth_service.verify_email("a@example.com", "12ab")
        api.auth.verify_email.assert_not_awaited()

    async def test_valid_otp(self, auth_service: AuthService, api) -> None:
        await auth_service.verify_email("a@example.com", " 123456 ")
        api.auth.verify_email.assert_awaited_once_with("a@example.com", "123456")


class TestRequireSession:
    def test_no_session(self, auth_service: AuthService) -> None:
        with pytest.raises(AuthenticationException):
            auth_service.require_session(100)

    def test_expired_without_refresh_is_dropped(self, auth_service: AuthService, session_store: SessionStore) -> None:
        session_store.save(100, AuthSession(access_token=make_token(-60)))

        with pytest.raises(AuthenticationException):
            auth_service.require_session(100)
        assert session_store.get(100) is None

    def test_expired_with_refresh_is_kept(self, auth_service: AuthService, session_store: SessionStore) -> None:
        session_store.save(100, AuthSession(access_token=make_token(-60), refresh_token="r-1"))
        assert auth_service.require_session(100).refresh_token == "r-1"

    def test_refreshed_session_is_persisted(self, auth_service: AuthService, session_store: SessionStore) -> None:
        session = AuthSession(access_token="new", telegram_id=100)
        auth_service.persist_refreshed(session)
        assert session_store.get(100).access_token == "new"


class TestLogout:
    async def test_backend_failure_still_clears_session(
        self, auth_service: AuthService, api, session_store: SessionStore, auth: AuthSession
    ) -> None:
        session_store.save(100, auth)
        api.auth.logout.side_effect = ApiException(500, "boom")

        await auth_service.logout(100)

        assert session_store.get(100) is None


class TestSessionStore:
    def test_memory_roundtrip_and_language(self, session_store: SessionStore, auth: AuthSession) -> None:
        assert session_store.uses_redis is False
        session_store.save(5, auth)
        session_store.set_lang(5, "ar")

        assert session_store.get(5).email == auth.email
        assert session_store.get_lang(5) == "ar"

    def test_ttl_expiry(self, auth: AuthSession) -> None:
        store = SessionStore(redis_url=None, ttl_seconds=-1)
        store.save(5, auth)
        assert store.get(5) is None
