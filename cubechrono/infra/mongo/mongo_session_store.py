# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass

from pymongo.collection import Collection

from cubechrono.models.session import Session, Time
from cubechrono.services._shared.ports import SessionStore

SESSIONS_COLLECTION = "sessions"


@dataclass(slots=True)
class MongoSessionStore(SessionStore):
    """
    MongoDB-backed timing session store.

    :param collection: The ``sessions`` collection.
    """

    collection: Collection

    def ensure_indexes(self) -> None:
        """Index the owner so listing never scans the collection."""
        self.collection.create_index("account_id", name="ix_sessions_account_id")

    # -------------------- API ------------------------

    def insert(self, session: Session) -> None:
        self.collection.insert_one(session.to_document())

    def find_all_by_account(self, account_id: str) -> list[Session]:
        cursor = self.collection.find({"account_id": account_id})
        return [Session.from_document(doc) for doc in cursor]

    def find_by_id_and_account(self, session_id: str, account_id: str) -> Session | None:
        doc = self.collection.find_one({"_id": session_id, "account_id": account_id})
        return Session.from_document(doc) if doc else None

    def push_time(self, session_id: str, account_id: str, time: Time) -> tuple[int, int]:
        result = self.collection.update_one(
            {"_id": session_id, "account_id": account_id},
            {"$push": {"times": time.to_document()}},
        )
        return result.matched_count, result.modified_count

    def delete_all_for_account(self, account_id: str) -> int:
        return self.collection.delete_many({"account_id": account_id}).deleted_count
