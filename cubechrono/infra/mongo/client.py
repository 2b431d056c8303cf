"""MongoDB client construction and store wiring."""

from __future__ import annotations

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .mongo_account_store import ACCOUNTS_COLLECTION, MongoAccountStore
from .mongo_refresh_token_store import (
    DEFAULT_REAP_GRACE_SECONDS,
    REFRESH_TOKENS_COLLECTION,
    MongoRefreshTokenStore,
)
from .mongo_session_store import SESSIONS_COLLECTION, MongoSessionStore


def connect(uri: str, *, timeout_ms: int = 5000) -> MongoClient:
    """
    Build a tz-aware client and verify connectivity with ``ping``.

    :raises RuntimeError: If the server cannot be reached.
    """
    client: MongoClient = MongoClient(uri, tz_aware=True, serverSelectionTimeoutMS=timeout_ms)
    try:
        client.admin.command("ping")
    except PyMongoError as exc:
        client.close()
        raise RuntimeError(f"Failed to connect to MongoDB at {uri!r}") from exc
    return client


def build_stores(
    db: Database, *, reap_grace_seconds: int = DEFAULT_REAP_GRACE_SECONDS
) -> tuple[MongoAccountStore, MongoRefreshTokenStore, MongoSessionStore]:
    """Return the account, refresh token and session stores bound to ``db``."""
    return (
        MongoAccountStore(collection=db[ACCOUNTS_COLLECTION]),
        MongoRefreshTokenStore(
            collection=db[REFRESH_TOKENS_COLLECTION], reap_grace_seconds=reap_grace_seconds
        ),
        MongoSessionStore(collection=db[SESSIONS_COLLECTION]),
    )


def ensure_indexes(
    accounts: MongoAccountStore,
    refresh_tokens: MongoRefreshTokenStore,
    sessions: MongoSessionStore,
) -> None:
    """Create every index the stores rely on; ``create_index`` is idempotent."""
    accounts.ensure_indexes()
    refresh_tokens.ensure_indexes()
    sessions.ensure_indexes()
