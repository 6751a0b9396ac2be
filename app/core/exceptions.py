"""Custom exceptions for the RepairHub bot."""
from __future__ import annotations

from typing import Any


class RepairHubException(Exception):
    """Base exception for all RepairHub bot errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationException(RepairHubException):
    """Configuration errors."""

    pass


class ConnectionException(RepairHubException):
    """Backend could not be reached (network error or timeout)."""

    pass


class ApiException(RepairHubException):
    """Backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str, payload: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.payload = payload

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"


class AuthenticationException(ApiException):
    """Missing, expired or rejected access token."""

    def __init__(self, message: str = "Authentication required", payload: Any = None) -> None:
        super().__init__(401, message, payload)


class AuthorizationException(ApiException):
    """Authenticated but not allowed."""

    def __init__(self, message: str = "Access denied", payload: Any = None) -> None:
        super().__init__(403, message, payload)


class NotFoundException(ApiException):
    """Requested resource does not exist."""

    def __init__(self, message: str = "Not found", payload: Any = None) -> None:
        super().__init__(404, message, payload)


class ApiValidationException(ApiException):
    """Backend rejected the request body or parameters."""

    pass


class ServerException(ApiException):
    """Backend failed with a 5xx status."""

    pass


class ValidationException(RepairHubException):
    """Input validation errors detected before any request is sent."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class CheckoutValidationException(ValidationException):
    """Checkout is missing a delivery address or payment method."""

    pass


def exception_for_status(status: int, message: str, payload: Any = None) -> ApiException:
    """Map an HTTP status to the matching ApiException subclass."""
    if status == 401:
        return AuthenticationException(message, payload)
    if status == 403:
        return AuthorizationException(message, payload)
    if status == 404:
        return NotFoundException(message, payload)
    if status in (400, 409, 422):
        return ApiValidationException(status, message, payload)
    if status >= 500:
        return ServerException(status, message, payload)
    return ApiException(status, message, payload)
