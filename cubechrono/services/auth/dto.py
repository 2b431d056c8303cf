# cubechrono/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from cubechrono.models.account import Role

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for account registration.

    :param username: Requested username (case-sensitive).
    :type username: str
    :param password: Raw password (hashed by the service).
    :type password: str
    :param roles: Roles to grant; defaults to a plain user role.
    :type roles: tuple[Role, ...]
    """

    username: str
    password: str = field(repr=False)
    roles: tuple[Role, ...] = (Role.user(),)


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param username: Account username.
    :type username: str
    :param password: Raw password (to be verified).
    :type password: str
    """

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class RefreshIn:
    """
    Input DTO for token refresh.

    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    refresh_token: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class LogoutIn:
    """
    Input DTO for logout.

    :param refresh_token: Encoded refresh JWT to revoke.
    :type refresh_token: str
    """

    refresh_token: str = field(repr=False)


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class TokenPairOut:
    """
    Output DTO with access and refresh tokens.

    :param access_token: Encoded access JWT.
    :type access_token: str
    :param refresh_token: Encoded refresh JWT.
    :type refresh_token: str
    """

    access_token: str
    refresh_token: str


@dataclass(frozen=True, slots=True)
class AccessTokenOut:
    """
    Output DTO for a refresh: a new access token only.

    :param access_token: Encoded access JWT.
    :type access_token: str
    """

    access_token: str


@dataclass(frozen=True, slots=True)
class LogoutOut:
    """
    Output DTO for logout.

    :param logged_out: ``True`` when a stored session was removed.
    :type logged_out: bool
    :param message: Human-readable outcome.
    :type message: str
    """

    logged_out: bool
    message: str


# ------------------------------ Settings ---------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """
    Immutable token configuration, built once at app creation and injected.

    :param access_secret: HMAC secret for access tokens.
    :type access_secret: str
    :param refresh_secret: HMAC secret for refresh tokens.
    :type refresh_secret: str
    :param access_expires: Access token lifetime.
    :type access_expires: timedelta
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    """

    access_secret: str = field(repr=False)
    refresh_secret: str = field(repr=False)
    access_expires: timedelta = timedelta(minutes=15)
    refresh_expires: timedelta = timedelta(days=30)

    def __post_init__(self) -> None:
        if not self.access_secret or not self.refresh_secret:
            raise ValueError("Token secrets must be non-empty.")
        if self.access_expires <= timedelta(0) or self.refresh_expires <= timedelta(0):
            raise ValueError("Token lifetimes must be positive.")
