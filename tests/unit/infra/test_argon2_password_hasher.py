"""Unit tests for the Argon2 password hasher adapter."""

from __future__ import annotations

import pytest

from cubechrono.infra.security.argon2_password_hasher import Argon2PasswordHasher


@pytest.fixture()
def hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


def test_hash_is_salted_argon2id(hasher):
    first, second = hasher.hash("Str0ng!Pass"), hasher.hash("Str0ng!Pass")

    assert first.startswith("$argon2id$")
    assert first != second
    assert "Str0ng!Pass" not in first


def test_verify_accepts_matching_password(hasher):
    assert hasher.verify(hasher.hash("Str0ng!Pass"), "Str0ng!Pass") is True


def test_verify_rejects_wrong_password(hasher):
    assert hasher.verify(hasher.hash("Str0ng!Pass"), "wrong") is False


def test_verify_rejects_garbage_digest(hasher):
    assert hasher.verify("not-a-hash", "Str0ng!Pass") is False
