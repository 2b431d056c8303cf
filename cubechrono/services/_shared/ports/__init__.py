"""
cubechrono.services._shared.ports
=================================

Collection of *ports* (hexagonal interfaces) that define the contracts
for credential storage, password hashing, token signing, refresh
token persistence and timing sessions.

These ports decouple the service layer from concrete implementations.

Modules
-------
- :mod:`account_store`:
    Defines :class:`~.AccountStore`: the credential store (accounts collection).

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`: salted memory-hard hashing.

- :mod:`token_codec`:
    Defines :class:`~.TokenCodec` and :class:`~.Claims`: signed claim sets.

- :mod:`refresh_token_store`:
    Defines :class:`~.RefreshTokenStore`: revocable refresh token records.

- :mod:`session_store`:
    Defines :class:`~.SessionStore`: timing sessions scoped by owner.

Design Notes
------------
Concrete adapters (Mongo, Argon2, PyJWT) live under ``cubechrono.infra``.
In-memory stores live next to their ports and back the unit tests.
"""

from __future__ import annotations

from .account_store import AccountStore, InMemoryAccountStore
from .password_hasher import PasswordHasher
from .refresh_token_store import InMemoryRefreshTokenStore, RefreshTokenStore
from .session_store import InMemorySessionStore, SessionStore
from .token_codec import Claims, TokenCodec, TokenCodecError

__all__ = [
    "AccountStore",
    "InMemoryAccountStore",
    "PasswordHasher",
    "RefreshTokenStore",
    "InMemoryRefreshTokenStore",
    "SessionStore",
    "InMemorySessionStore",
    "Claims",
    "TokenCodec",
    "TokenCodecError",
]
