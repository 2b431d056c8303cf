"""Application startup against the ``mongo`` backend (served by mongomock)."""

from __future__ import annotations

import mongomock
import pytest

from cubechrono import create_app
from cubechrono.core.config import TestingConfig
from cubechrono.infra.mongo import client as mongo_client
from cubechrono.services._shared.errors import UsernameTakenError

from tests.factories.account import AccountFactory


class MongoTestingConfig(TestingConfig):
    STORAGE_BACKEND = "mongo"
    MONGO_DATABASE = "cube-chrono-test"
    REFRESH_TOKEN_REAP_GRACE_SECONDS = 120


@pytest.fixture()
def mongo_server(monkeypatch):
    server = mongomock.MongoClient(tz_aware=True)
    monkeypatch.setattr(mongo_client, "connect", lambda uri, timeout_ms=5000: server)
    return server


@pytest.fixture()
def mongo_app(mongo_server):
    application = create_app(MongoTestingConfig)
    with application.app_context():
        yield application


def test_startup_creates_indexes(mongo_app, mongo_server) -> None:
    db = mongo_server[MongoTestingConfig.MONGO_DATABASE]

    assert "uq_accounts_username" in db.accounts.index_information()
    refresh_indexes = db.refresh_tokens.index_information()
    assert {"uq_refresh_tokens_token", "ix_refresh_tokens_account_id"} <= set(refresh_indexes)
    assert refresh_indexes["ttl_refresh_tokens_expires_at"]["expireAfterSeconds"] == 120
    assert "ix_sessions_account_id" in db.sessions.index_information()


def test_unique_username_is_enforced_without_cli_step(mongo_app) -> None:
    accounts = mongo_app.extensions["cubechrono"].accounts
    accounts.insert(AccountFactory(username="alice"))

    with pytest.raises(UsernameTakenError):
        accounts.insert(AccountFactory(username="alice"))


def test_ensure_indexes_command_is_rerunnable(mongo_app) -> None:
    result = mongo_app.test_cli_runner().invoke(args=["accounts", "ensure-indexes"])

    assert result.exit_code == 0, result.output
    assert "'sessions'" in result.output
