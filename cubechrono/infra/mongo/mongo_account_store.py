# comments in English; reST docstrings
from __future__ import annotations

from dataclasses import dataclass

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from cubechrono.models.account import Account
from cubechrono.services._shared.errors import UsernameTakenError
from cubechrono.services._shared.ports import AccountStore

ACCOUNTS_COLLECTION = "accounts"


@dataclass(slots=True)
class MongoAccountStore(AccountStore):
    """
    MongoDB-backed credential store.

    :param collection: The ``accounts`` collection.
    """

    collection: Collection

    def ensure_indexes(self) -> None:
        """Create the unique username index backing the registration check."""
        self.collection.create_index("username", unique=True, name="uq_accounts_username")

    # -------------------- API ------------------------

    def insert(self, account: Account) -> None:
        try:
            self.collection.insert_one(account.to_document())
        except DuplicateKeyError as exc:
            raise UsernameTakenError(account.username) from exc

    def find_by_id(self, account_id: str) -> Account | None:
        doc = self.collection.find_one({"_id": account_id})
        return Account.from_document(doc) if doc else None

    def find_by_username(self, username: str) -> Account | None:
        doc = self.collection.find_one({"username": username})
        return Account.from_document(doc) if doc else None

    def exists_by_username(self, username: str) -> bool:
        return self.collection.count_documents({"username": username}, limit=1) > 0

    def update(self, account: Account) -> int:
        try:
            result = self.collection.replace_one({"_id": account.id}, account.to_document())
        except DuplicateKeyError as exc:
            raise UsernameTakenError(account.username) from exc
        return result.modified_count

    def delete_by_id(self, account_id: str) -> int:
        return self.collection.delete_one({"_id": account_id}).deleted_count
