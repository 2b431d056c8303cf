"""
Unit tests for MongoRefreshTokenStore using mongomock.

These tests exercise the main flows:
- insert + find_by_token
- point revocation (delete_by_token)
- bulk revocation scoped to one account
- TTL grace period on the expiry index
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import mongomock
import pytest

from cubechrono.infra.mongo.mongo_refresh_token_store import (
    DEFAULT_REAP_GRACE_SECONDS,
    MongoRefreshTokenStore,
)
from cubechrono.models.refresh_token import RefreshToken


def _now() -> datetime:
    """Return a timezone-aware UTC "now" at millisecond-safe precision."""
    return datetime.now(UTC).replace(microsecond=0)


@pytest.fixture
def collection():
    return mongomock.MongoClient().db.refresh_tokens


@pytest.fixture
def store(collection):
    s = MongoRefreshTokenStore(collection=collection)
    s.ensure_indexes()
    return s


def _record(store, account_id: str, *, days: int = 30) -> RefreshToken:
    rt_id = store.new_id()
    return RefreshToken(
        id=rt_id,
        account_id=account_id,
        expires_at=_now() + timedelta(days=days),
        token=f"token-{rt_id}",
    )


def test_ensure_indexes_declares_ttl_on_expiry(store, collection):
    info = collection.index_information()
    assert {"uq_refresh_tokens_token", "ix_refresh_tokens_account_id"} <= set(info)
    ttl = info["ttl_refresh_tokens_expires_at"]["expireAfterSeconds"]
    assert ttl == DEFAULT_REAP_GRACE_SECONDS
    # Expired records must outlive their expiry so refresh can report token_expired
    assert ttl > 0


def test_ttl_grace_period_is_configurable():
    collection = mongomock.MongoClient().db.refresh_tokens
    MongoRefreshTokenStore(collection=collection, reap_grace_seconds=3600).ensure_indexes()

    info = collection.index_information()
    assert info["ttl_refresh_tokens_expires_at"]["expireAfterSeconds"] == 3600


def test_expired_record_is_still_found_until_reaped(store):
    record = _record(store, "acc-1", days=-1)
    store.insert(record)

    found = store.find_by_token(record.token)

    assert found == record
    assert found.is_expired(_now())


def test_new_id_is_unique(store):
    assert store.new_id() != store.new_id()


def test_insert_and_find_by_token(store):
    record = _record(store, "acc-1")
    store.insert(record)

    found = store.find_by_token(record.token)

    assert found == record
    assert found.expires_at.tzinfo is not None
    assert store.find_by_token("unknown") is None


def test_delete_by_token_is_exact(store):
    keep, drop = _record(store, "acc-1"), _record(store, "acc-1")
    store.insert(keep)
    store.insert(drop)

    assert store.delete_by_token(drop.token) == 1
    assert store.delete_by_token(drop.token) == 0
    assert store.find_by_token(keep.token) == keep


def test_delete_all_for_account_spares_other_accounts(store):
    for _ in range(3):
        store.insert(_record(store, "acc-1"))
    other = _record(store, "acc-2")
    store.insert(other)

    assert store.delete_all_for_account("acc-1") == 3
    assert store.delete_all_for_account("acc-1") == 0
    assert store.find_by_token(other.token) == other

