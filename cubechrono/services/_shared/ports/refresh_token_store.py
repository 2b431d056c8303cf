from __future__ import annotations

import threading
from typing import Protocol

from cubechrono.models.refresh_token import RefreshToken


class RefreshTokenStore(Protocol):
    """
    Revocation list of issued refresh tokens.

    A token is only honoured while its record exists here. Point revocation
    deletes by exact token string, bulk revocation deletes by owner.
    """

    def new_id(self) -> str:
        """Generate the record id; it is embedded in the token as ``jti``."""

    def insert(self, record: RefreshToken) -> None:
        """
        Persist a refresh token record.

        This MUST complete *before* the token is handed to the client.
        """

    def find_by_token(self, token: str) -> RefreshToken | None: ...

    def delete_by_token(self, token: str) -> int:
        """:returns: Number of deleted records (0 or 1)."""

    def delete_all_for_account(self, account_id: str) -> int:
        """:returns: Number of deleted records."""


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """
    In-memory refresh token store.

    .. note::
       Uses a threading lock to mimic per-document atomicity.
    """

    def __init__(self) -> None:
        self._by_token: dict[str, RefreshToken] = {}
        self._seq = 0
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            self._seq += 1
            return f"rt-{self._seq}"

    def insert(self, record: RefreshToken) -> None:
        with self._lock:
            self._by_token[record.token] = record

    def find_by_token(self, token: str) -> RefreshToken | None:
        with self._lock:
            return self._by_token.get(token)

    def delete_by_token(self, token: str) -> int:
        with self._lock:
            return 1 if self._by_token.pop(token, None) is not None else 0

    def delete_all_for_account(self, account_id: str) -> int:
        with self._lock:
            doomed = [t for t, r in self._by_token.items() if r.account_id == account_id]
            for t in doomed:
                del self._by_token[t]
            return len(doomed)
