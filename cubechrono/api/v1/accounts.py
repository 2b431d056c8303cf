"""Endpoints for the logged account and admin account management."""

from __future__ import annotations

from flask import Blueprint

from cubechrono.api.deps import current_account, json_response, load_body, require_auth, timing
from cubechrono.core.extensions import get_container
from cubechrono.schemas import AccountSchema, ChangePasswordSchema, ChangeUsernameSchema
from cubechrono.services.accounts.dto import AccountOut, PasswordChangeIn, UsernameChangeIn

bp = Blueprint("accounts", __name__)

account_schema = AccountSchema()
change_username_schema = ChangeUsernameSchema()
change_password_schema = ChangePasswordSchema()


@bp.get("/logged")
@require_auth
@timing
def logged():
    """Return the authenticated account."""

    return json_response(account_schema.dump(AccountOut.from_account(current_account())))


@bp.put("/logged/change-username")
@require_auth
@timing
def change_username():
    data = load_body(change_username_schema)
    modified = get_container().account_service.change_username(
        current_account(), UsernameChangeIn(**data)
    )
    return json_response({"modified_count": modified})


@bp.put("/logged/change-password")
@require_auth
@timing
def change_password():
    """Change the password and sign out every session of the account."""

    data = load_body(change_password_schema)
    out = get_container().account_service.change_password(
        current_account(), PasswordChangeIn(**data)
    )
    return json_response(
        {"modified_count": out.modified_count, "revoked_sessions": out.revoked_sessions}
    )


@bp.delete("/<account_id>")
@require_auth
@timing
def delete_account(account_id: str):
    """Delete an account (admin only)."""

    deleted = get_container().account_service.delete_account(current_account(), account_id)
    return json_response({"deleted_count": deleted})
