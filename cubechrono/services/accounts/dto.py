"""
DTOs for AccountService.

Data Transfer Objects (DTOs) isolate the service layer from stored
documents and keep the password digest out of every output contract.
"""

from __future__ import annotations

from dataclasses import dataclass

from cubechrono.models.account import Account, Role

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class UsernameChangeIn:
    """
    Input DTO for renaming the logged account.

    :param username: New username.
    :type username: str
    """

    username: str


@dataclass(frozen=True, slots=True)
class PasswordChangeIn:
    """
    Input DTO for changing the logged account's password.

    :param old_password: Current password.
    :type old_password: str
    :param new_password: New password (raw).
    :type new_password: str
    """

    old_password: str
    new_password: str


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountOut:
    """
    Public-safe account payload (never carries the password digest).

    :param id: Account identifier.
    :type id: str
    :param username: Username.
    :type username: str
    :param roles: Granted roles.
    :type roles: tuple[Role, ...]
    """

    id: str
    username: str
    roles: tuple[Role, ...]

    @classmethod
    def from_account(cls, account: Account) -> AccountOut:
        return cls(id=account.id, username=account.username, roles=account.roles)


@dataclass(frozen=True, slots=True)
class PasswordChangeOut:
    """
    Result of a password change.

    :param modified_count: Account documents modified.
    :type modified_count: int
    :param revoked_sessions: Refresh tokens revoked as a consequence.
    :type revoked_sessions: int
    """

    modified_count: int
    revoked_sessions: int
