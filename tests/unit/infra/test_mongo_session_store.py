"""
Unit tests for MongoSessionStore using mongomock.

Every query is filtered by owner, so a foreign session id behaves exactly
like a missing one.
"""

from __future__ import annotations

from datetime import UTC, datetime

import mongomock
import pytest

from cubechrono.infra.mongo.mongo_session_store import MongoSessionStore
from cubechrono.models.session import Session, Time


@pytest.fixture
def collection():
    return mongomock.MongoClient().db.sessions


@pytest.fixture
def store(collection):
    s = MongoSessionStore(collection=collection)
    s.ensure_indexes()
    return s


def _time(millis: int, scramble: str | None = None) -> Time:
    return Time(
        millis=millis, recorded_at=datetime(2024, 5, 1, 12, 0, 5, tzinfo=UTC), scramble=scramble
    )


def test_ensure_indexes_covers_owner(store, collection):
    assert "ix_sessions_account_id" in collection.index_information()


def test_insert_and_find_scoped_by_owner(store):
    session = Session.new("acc-1", "3x3", [_time(12000)])
    store.insert(session)

    assert store.find_by_id_and_account(session.id, "acc-1") == session
    assert store.find_by_id_and_account(session.id, "acc-2") is None
    assert store.find_all_by_account("acc-1") == [session]
    assert store.find_all_by_account("acc-2") == []


def test_push_time_appends_to_owned_session(store, collection):
    session = Session.new("acc-1", "3x3")
    store.insert(session)

    assert store.push_time(session.id, "acc-1", _time(9100, "R U R' U'")) == (1, 1)

    doc = collection.find_one({"_id": session.id})
    assert doc["times"][0]["millis"] == 9100
    stored = store.find_by_id_and_account(session.id, "acc-1")
    assert stored.times == (_time(9100, "R U R' U'"),)
    assert stored.times[0].recorded_at.tzinfo is not None


def test_push_time_ignores_foreign_session(store):
    session = Session.new("acc-1", "3x3")
    store.insert(session)

    assert store.push_time(session.id, "acc-2", _time(9100)) == (0, 0)
    assert store.find_by_id_and_account(session.id, "acc-1").times == ()


def test_delete_all_for_account(store):
    store.insert(Session.new("acc-1", "3x3"))
    store.insert(Session.new("acc-1", "2x2"))
    kept = Session.new("acc-2", "OH")
    store.insert(kept)

    assert store.delete_all_for_account("acc-1") == 2
    assert store.find_all_by_account("acc-2") == [kept]
