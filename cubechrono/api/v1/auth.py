"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app

from cubechrono.api.deps import current_account, json_response, load_body, require_auth, timing
from cubechrono.core.extensions import get_container, limiter
from cubechrono.schemas import (
    AccessTokenSchema,
    AccountSchema,
    LoginSchema,
    RefreshTokenSchema,
    RegisterSchema,
    RevokeAllSchema,
    TokenPairSchema,
)
from cubechrono.services.auth.dto import LoginIn, LogoutIn, RefreshIn, RegisterIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
refresh_token_schema = RefreshTokenSchema()
revoke_all_schema = RevokeAllSchema()
account_schema = AccountSchema()
token_pair_schema = TokenPairSchema()
access_token_schema = AccessTokenSchema()


def _login_rate_limit() -> str:
    return str(current_app.config.get("AUTH_LOGIN_RATE_LIMIT", "5 per minute"))


@bp.post("/register")
@timing
def register():
    """Register a new account and return its public representation."""

    data = load_body(register_schema)
    account = get_container().auth.register(RegisterIn(**data))
    body = {"message": "Account registered", "payload": {"account": account_schema.dump(account)}}
    return json_response(body, status=201)


@bp.post("/login")
@limiter.limit(_login_rate_limit)
@timing
def login():
    """Authenticate credentials and issue an access/refresh token pair."""

    data = load_body(login_schema)
    pair = get_container().auth.login(LoginIn(**data))
    return json_response(token_pair_schema.dump(pair))


@bp.post("/refresh")
@timing
def refresh():
    """Exchange a live refresh token for a new access token."""

    data = load_body(refresh_token_schema)
    out = get_container().auth.refresh(RefreshIn(**data))
    return json_response(access_token_schema.dump(out))


@bp.post("/logout")
@timing
def logout():
    """Revoke one refresh token; unknown tokens are not an error."""

    data = load_body(refresh_token_schema)
    out = get_container().auth.logout(LogoutIn(**data))
    return json_response({"message": out.message, "logged_out": out.logged_out})


@bp.post("/revoke-all")
@require_auth
@timing
def revoke_all():
    """Revoke every refresh token of the caller after a password check."""

    data = load_body(revoke_all_schema)
    revoked = get_container().auth.revoke_all(current_account(), data["password"])
    return json_response({"revoked_count": revoked})
