"""Convenience exports for application schemas."""

from __future__ import annotations

from .account import AccountSchema, ChangePasswordSchema, ChangeUsernameSchema, RoleSchema
from .auth import (
    AccessTokenSchema,
    LoginSchema,
    RefreshTokenSchema,
    RegisterSchema,
    RevokeAllSchema,
    TokenPairSchema,
)
from .session import AddTimeSchema, CreateSessionSchema, SessionSchema, TimeSchema

__all__ = [
    "AccessTokenSchema",
    "AccountSchema",
    "AddTimeSchema",
    "ChangePasswordSchema",
    "ChangeUsernameSchema",
    "CreateSessionSchema",
    "LoginSchema",
    "RefreshTokenSchema",
    "RegisterSchema",
    "RevokeAllSchema",
    "RoleSchema",
    "SessionSchema",
    "TimeSchema",
    "TokenPairSchema",
]
