# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from pymongo.collection import Collection

from cubechrono.models.refresh_token import RefreshToken
from cubechrono.services._shared.ports import RefreshTokenStore

REFRESH_TOKENS_COLLECTION = "refresh_tokens"

# Expired records stay this long so refresh can still answer token_expired.
DEFAULT_REAP_GRACE_SECONDS = 7 * 24 * 3600


@dataclass(slots=True)
class MongoRefreshTokenStore(RefreshTokenStore):
    """
    MongoDB-backed refresh token store.

    Every call maps onto a single-document or single-filter operation, so the
    store relies on MongoDB's per-document atomicity and nothing else.

    :param collection: The ``refresh_tokens`` collection.
    :param reap_grace_seconds: How long past ``expires_at`` the TTL monitor
        keeps a record. A reaped record makes refresh report ``token_invalid``
        instead of ``token_expired``.
    """

    collection: Collection
    reap_grace_seconds: int = DEFAULT_REAP_GRACE_SECONDS

    def ensure_indexes(self) -> None:
        """
        Create lookup indexes plus a TTL index so expired records are reaped
        by the server after the grace period.
        """
        self.collection.create_index("token", unique=True, name="uq_refresh_tokens_token")
        self.collection.create_index("account_id", name="ix_refresh_tokens_account_id")
        self.collection.create_index(
            "expires_at",
            expireAfterSeconds=self.reap_grace_seconds,
            name="ttl_refresh_tokens_expires_at",
        )

    # -------------------- API ------------------------

    def new_id(self) -> str:
        return str(uuid4())

    def insert(self, record: RefreshToken) -> None:
        self.collection.insert_one(record.to_document())

    def find_by_token(self, token: str) -> RefreshToken | None:
        doc = self.collection.find_one({"token": token})
        return RefreshToken.from_document(doc) if doc else None

    def delete_by_token(self, token: str) -> int:
        return self.collection.delete_one({"token": token}).deleted_count

    def delete_all_for_account(self, account_id: str) -> int:
        return self.collection.delete_many({"account_id": account_id}).deleted_count
