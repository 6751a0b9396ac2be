"""Customer profile and saved delivery addresses."""
from __future__ import annotations

from app.api import RepairHubApi
from app.core.exceptions import ValidationException
from app.core.security import InputValidator
from app.core.session_store import AuthSession
from app.domain.models import Address, User


class AccountService:
    def __init__(self, api: RepairHubApi):
        self._api = api

    async def profile(self, auth: AuthSession) -> User:
        return await self._api.users.get_profile(auth)

    async def addresses(self, auth: AuthSession) -> list[Address]:
        """Saved addresses, the default one first."""
        addresses = await self._api.users.list_addresses(auth)
        return sorted(addresses, key=lambda a: not a.is_default)

    async def add_address(self, auth: AuthSession, street: str, city: str) -> Address:
        street = InputValidator.sanitize_text(street, max_length=200)
        city = InputValidator.sanitize_text(city, max_length=100)
        if not street:
            raise ValidationException("Street is required", field="street")
        if not city:
            raise ValidationException("City is required", field="city")
        return await self._api.users.add_address(auth, {"street": street, "city": city})

    async def delete_address(self, auth: AuthSession, address_id: int) -> None:
        await self._api.users.delete_address(auth, address_id)
