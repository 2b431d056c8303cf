"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

_non_empty = validate.Length(min=1)


class RegisterSchema(Schema):
    """Input payload for account registration."""

    username = fields.String(required=True, validate=_non_empty)
    password = fields.String(required=True, validate=_non_empty, load_only=True)


class LoginSchema(Schema):
    """Input payload for authenticating an account."""

    username = fields.String(required=True, validate=_non_empty)
    password = fields.String(required=True, validate=_non_empty, load_only=True)


class RefreshTokenSchema(Schema):
    """Input payload carrying a refresh token (refresh and logout)."""

    refresh_token = fields.String(required=True, validate=_non_empty, load_only=True)


class RevokeAllSchema(Schema):
    """Password confirmation for revoking every session of the caller."""

    password = fields.String(required=True, validate=_non_empty, load_only=True)


class TokenPairSchema(Schema):
    """Response payload containing both tokens issued at login."""

    access_token = fields.String(required=True)
    refresh_token = fields.String(required=True)


class AccessTokenSchema(Schema):
    """Response payload containing a fresh access token."""

    access_token = fields.String(required=True)
