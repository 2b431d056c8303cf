"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask, HTTP, or pymongo directly. They serve as stable contracts between
stores, domain models, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``cubechrono/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from stores or domain logic.
    - The API layer will later translate them to APIError.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in a store.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str
    """

    entity: str
    key: str

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:
        return f"Conflict on {self.entity}: {self.detail}"


class UsernameTakenError(ConflictError):
    """Raised when registering or renaming to a username already in use."""

    def __init__(self, username: str) -> None:
        super().__init__("Account", "username already taken")
        self.username = username

    def __str__(self) -> str:
        return "Username already taken"


class ForbiddenError(ServiceError):
    """Raised when an authenticated actor lacks the required privilege."""

    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(message)


class NotImplementedServiceError(ServiceError):
    """Raised by placeholder operations that are not available yet."""

    def __init__(self, message: str = "Not implemented") -> None:
        super().__init__(message)


# --------------------------------------------------------------------------- #
# Authentication errors (all surface as 401)
# --------------------------------------------------------------------------- #


class AuthError(ServiceError):
    """Base for authentication failures; ``code`` is the stable API code."""

    code = "unauthorized"
    default_message = "Unauthorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class UnauthorizedError(AuthError):
    """Missing or unusable credentials (no bearer header, bad token)."""


class InvalidCredentialsError(AuthError):
    """
    Username/password rejected, or the token subject no longer resolves.

    Unknown usernames and wrong passwords both raise this same error so that
    callers cannot tell them apart.
    """

    code = "invalid_credentials"
    default_message = "Invalid credentials"


class TokenInvalidError(AuthError):
    """Bad signature, malformed payload, wrong secret, or revoked token."""

    code = "token_invalid"
    default_message = "Token is invalid"


class TokenExpiredError(AuthError):
    """Signature is valid but the token (or its stored record) has expired."""

    code = "token_expired"
    default_message = "Token has expired"
