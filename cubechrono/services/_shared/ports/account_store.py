from __future__ import annotations

import threading
from typing import Protocol

from cubechrono.models.account import Account
from cubechrono.services._shared.errors import UsernameTakenError


class AccountStore(Protocol):
    """
    Credential store for :class:`Account` documents.

    Implementations rely on per-document atomicity only; no call spans
    more than one document.
    """

    def insert(self, account: Account) -> None:
        """
        Persist a brand-new account.

        :raises UsernameTakenError: If the backend enforces username uniqueness
            and the username is already stored.
        """

    def find_by_id(self, account_id: str) -> Account | None: ...

    def find_by_username(self, username: str) -> Account | None: ...

    def exists_by_username(self, username: str) -> bool: ...

    def update(self, account: Account) -> int:
        """Replace the stored account. :returns: Number of modified documents."""

    def delete_by_id(self, account_id: str) -> int:
        """:returns: Number of deleted documents."""


class InMemoryAccountStore(AccountStore):
    """
    In-memory account store used by unit tests and the ``memory`` backend.

    .. note::
       Mirrors the unique username index of the Mongo adapter.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Account] = {}
        self._lock = threading.Lock()

    def _id_for_username(self, username: str) -> str | None:
        for account_id, acc in self._by_id.items():
            if acc.username == username:
                return account_id
        return None

    def insert(self, account: Account) -> None:
        with self._lock:
            if self._id_for_username(account.username) is not None:
                raise UsernameTakenError(account.username)
            self._by_id[account.id] = account

    def find_by_id(self, account_id: str) -> Account | None:
        with self._lock:
            return self._by_id.get(account_id)

    def find_by_username(self, username: str) -> Account | None:
        with self._lock:
            account_id = self._id_for_username(username)
            return self._by_id.get(account_id) if account_id else None

    def exists_by_username(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def update(self, account: Account) -> int:
        with self._lock:
            current = self._by_id.get(account.id)
            if current is None:
                return 0
            owner = self._id_for_username(account.username)
            if owner is not None and owner != account.id:
                raise UsernameTakenError(account.username)
            if current == account:
                return 0
            self._by_id[account.id] = account
            return 1

    def delete_by_id(self, account_id: str) -> int:
        with self._lock:
            return 1 if self._by_id.pop(account_id, None) is not None else 0
