"""
AccountService
==============

Aggregate service for the logged account:
- Username changes (uniqueness checked before write)
- Password lifecycle (change revokes every refresh token)
- Administrative deletion (cascades to tokens and sessions)
"""

from __future__ import annotations

import logging

from cubechrono.models.account import Account
from cubechrono.services._shared.base import BaseService
from cubechrono.services._shared.errors import (
    InvalidCredentialsError,
    UsernameTakenError,
)
from cubechrono.services._shared.ports import (
    AccountStore,
    PasswordHasher,
    RefreshTokenStore,
    SessionStore,
)
from cubechrono.services.accounts.dto import (
    PasswordChangeIn,
    PasswordChangeOut,
    UsernameChangeIn,
)

log = logging.getLogger(__name__)


class AccountService(BaseService):
    """
    Application service for the :class:`Account` aggregate.

    Responsibilities
    ----------------
    - Rename accounts ensuring username uniqueness.
    - Manage password lifecycle.
    - Delete accounts on behalf of admins.
    """

    def __init__(
        self,
        *,
        accounts: AccountStore,
        refresh_store: RefreshTokenStore,
        hasher: PasswordHasher,
        sessions: SessionStore,
    ) -> None:
        self.accounts = accounts
        self.refresh_store = refresh_store
        self.hasher = hasher
        self.sessions = sessions

    # --------------------------------------------------------------------- #
    # Username
    # --------------------------------------------------------------------- #

    def change_username(self, account: Account, dto: UsernameChangeIn) -> int:
        """
        Rename the account.

        :returns: Number of modified documents.
        :raises UsernameTakenError: When the username already exists.
        """
        if self.accounts.exists_by_username(dto.username):
            raise UsernameTakenError(dto.username)
        return self.accounts.update(account.with_username(dto.username))

    # --------------------------------------------------------------------- #
    # Password management
    # --------------------------------------------------------------------- #

    def change_password(self, account: Account, dto: PasswordChangeIn) -> PasswordChangeOut:
        """
        Change the password after verifying the old one, then revoke all
        refresh tokens of the account.

        :raises InvalidCredentialsError: When the old password does not match.
        """
        if not self.hasher.verify(account.password_hash, dto.old_password):
            raise InvalidCredentialsError()

        modified = self.accounts.update(
            account.with_password_hash(self.hasher.hash(dto.new_password))
        )
        revoked = self.refresh_store.delete_all_for_account(account.id)
        log.info("accounts.password_changed", extra={"account_id": account.id, "revoked": revoked})
        return PasswordChangeOut(modified_count=modified, revoked_sessions=revoked)

    # --------------------------------------------------------------------- #
    # Deletion
    # --------------------------------------------------------------------- #

    def delete_account(self, actor: Account, account_id: str) -> int:
        """
        Delete an account with its refresh tokens and sessions (admin only).

        :returns: Number of deleted account documents.
        :raises ForbiddenError: When ``actor`` is not an admin.
        """
        self.ensure_admin(actor)
        deleted = self.accounts.delete_by_id(account_id)
        if deleted:
            revoked = self.refresh_store.delete_all_for_account(account_id)
            self.sessions.delete_all_for_account(account_id)
            log.info(
                "accounts.deleted",
                extra={"account_id": account_id, "actor_id": actor.id, "revoked": revoked},
            )
        return deleted
