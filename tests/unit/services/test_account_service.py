# tests/unit/services/test_account_service.py
from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import pytest

from cubechrono.models.refresh_token import RefreshToken
from cubechrono.models.session import Session
from cubechrono.services._shared.errors import (
    ForbiddenError,
    InvalidCredentialsError,
    UsernameTakenError,
)
from cubechrono.services._shared.ports import (
    InMemoryAccountStore,
    InMemoryRefreshTokenStore,
    InMemorySessionStore,
)
from cubechrono.services.accounts.dto import PasswordChangeIn, UsernameChangeIn
from cubechrono.services.accounts.service import AccountService

from tests.factories import DEFAULT_PASSWORD, HASHER
from tests.factories.account import AccountFactory


# ------------------------------ Fixtures ---------------------------------- #
@pytest.fixture()
def service() -> AccountService:
    return AccountService(
        accounts=InMemoryAccountStore(),
        refresh_store=InMemoryRefreshTokenStore(),
        hasher=HASHER,
        sessions=InMemorySessionStore(),
    )


@pytest.fixture()
def account(service):
    acc = AccountFactory()
    service.accounts.insert(acc)
    return acc


def _store_sessions(service, account_id: str, count: int) -> list[str]:
    tokens = []
    for _ in range(count):
        rt_id = service.refresh_store.new_id()
        service.refresh_store.insert(
            RefreshToken(
                id=rt_id,
                account_id=account_id,
                expires_at=datetime.now(UTC) + timedelta(days=1),
                token=f"token-{rt_id}",
            )
        )
        tokens.append(f"token-{rt_id}")
    return tokens


# -------------------------------- Tests ----------------------------------- #
def test_change_username(service, account):
    modified = service.change_username(account, UsernameChangeIn(username="new-name"))

    assert modified == 1
    assert service.accounts.find_by_username("new-name").id == account.id


def test_change_username_to_taken_one_conflicts(service, account):
    other = AccountFactory(username="taken")
    service.accounts.insert(other)

    with pytest.raises(UsernameTakenError):
        service.change_username(account, UsernameChangeIn(username="taken"))


def test_change_password_revokes_sessions(service, account):
    _store_sessions(service, account.id, 2)

    out = service.change_password(
        account, PasswordChangeIn(old_password=DEFAULT_PASSWORD, new_password="N3w!Pass")
    )

    assert (out.modified_count, out.revoked_sessions) == (1, 2)
    stored = service.accounts.find_by_id(account.id)
    assert HASHER.verify(stored.password_hash, "N3w!Pass")
    assert not HASHER.verify(stored.password_hash, DEFAULT_PASSWORD)


def test_change_password_with_wrong_old_password(service, account):
    (token,) = _store_sessions(service, account.id, 1)

    with pytest.raises(InvalidCredentialsError):
        service.change_password(
            account, PasswordChangeIn(old_password="wrong", new_password="N3w!Pass")
        )

    assert service.refresh_store.find_by_token(token) is not None


def test_delete_account_requires_admin(service, account):
    with pytest.raises(ForbiddenError):
        service.delete_account(account, account.id)

    assert service.accounts.find_by_id(account.id) is not None


def test_admin_deletes_account_and_its_sessions(service, account):
    admin = AccountFactory(admin=True)
    service.accounts.insert(admin)
    doomed = _store_sessions(service, account.id, 2)
    (kept,) = _store_sessions(service, admin.id, 1)

    assert service.delete_account(admin, account.id) == 1
    assert service.accounts.find_by_id(account.id) is None
    assert all(service.refresh_store.find_by_token(t) is None for t in doomed)
    assert service.refresh_store.find_by_token(kept) is not None


def test_deleting_account_drops_its_timing_sessions(service, account):
    admin = AccountFactory(admin=True)
    service.accounts.insert(admin)
    service.sessions.insert(Session.new(account.id, "3x3"))
    own = Session.new(admin.id, "4x4")
    service.sessions.insert(own)

    service.delete_account(admin, account.id)

    assert service.sessions.find_all_by_account(account.id) == []
    assert service.sessions.find_all_by_account(admin.id) == [own]


def test_delete_missing_account_returns_zero(service):
    admin = AccountFactory(admin=True)

    assert service.delete_account(admin, "missing") == 0


def test_ensure_admin_accepts_admin_and_rejects_user(service, account):
    admin = AccountFactory(admin=True)

    service.ensure_admin(admin)
    with pytest.raises(ForbiddenError, match="Admins only"):
        service.ensure_admin(account, msg="Admins only")


def test_password_change_logs_structured_fields(service, account, caplog):
    _store_sessions(service, account.id, 1)

    with caplog.at_level(logging.INFO, logger="cubechrono.services.accounts.service"):
        service.change_password(
            account, PasswordChangeIn(old_password=DEFAULT_PASSWORD, new_password="N3w!Pass")
        )

    (record,) = [r for r in caplog.records if r.getMessage() == "accounts.password_changed"]
    assert record.account_id == account.id
    assert record.revoked == 1
