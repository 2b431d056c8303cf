"""Unit tests for the PyJWT token codec."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time

from cubechrono.infra.jwt.pyjwt_token_codec import PyJWTTokenCodec
from cubechrono.services._shared.errors import TokenExpiredError, TokenInvalidError

from tests.helpers.auth import tamper

SECRET = "codec-secret"


@pytest.fixture()
def codec() -> PyJWTTokenCodec:
    return PyJWTTokenCodec()


def _in(seconds: int) -> datetime:
    return datetime.now(UTC).replace(microsecond=0) + timedelta(seconds=seconds)


# -------------------------------- Tests ----------------------------------- #
@pytest.mark.parametrize("subject", ["acc-1", "9f1c2b1e-7a4e-4c57-8b1e-6f3f7d1d2c11"])
def test_issue_then_decode_returns_subject_and_expiry(codec, subject):
    exp = _in(900)

    claims = codec.decode(codec.issue(subject, exp, SECRET), SECRET)

    assert claims.sub == subject
    assert claims.exp == exp


def test_token_is_a_three_segment_hs256_jwt(codec):
    token = codec.issue("acc-1", _in(60), SECRET, jti="rt-1")

    assert token.count(".") == 2
    assert jwt.get_unverified_header(token)["alg"] == "HS256"
    assert codec.decode(token, SECRET).jti == "rt-1"


def test_decode_with_wrong_secret_is_invalid(codec):
    token = codec.issue("acc-1", _in(60), SECRET)

    with pytest.raises(TokenInvalidError):
        codec.decode(token, "another-secret")


def test_expired_token_is_distinct_from_corrupted_one(codec):
    """Expired (valid signature) and tampered tokens map to different errors."""
    with freeze_time(datetime.now(UTC) - timedelta(minutes=10)):
        expired = codec.issue("acc-1", _in(60), SECRET)
    corrupted = tamper(codec.issue("acc-1", _in(60), SECRET))

    with pytest.raises(TokenExpiredError):
        codec.decode(expired, SECRET)
    with pytest.raises(TokenInvalidError):
        codec.decode(corrupted, SECRET)


def test_expired_token_with_wrong_secret_is_invalid(codec):
    with freeze_time(datetime.now(UTC) - timedelta(minutes=10)):
        expired = codec.issue("acc-1", _in(60), SECRET)

    with pytest.raises(TokenInvalidError):
        codec.decode(expired, "another-secret")


def test_issue_rejects_past_expiry(codec):
    with pytest.raises(ValueError):
        codec.issue("acc-1", _in(-1), SECRET)


def test_naive_expiry_is_read_as_utc(codec):
    exp = _in(120)

    claims = codec.decode(codec.issue("acc-1", exp.replace(tzinfo=None), SECRET), SECRET)

    assert claims.exp == exp


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
def test_decode_rejects_malformed_tokens(codec, garbage):
    with pytest.raises(TokenInvalidError):
        codec.decode(garbage, SECRET)


def test_decode_requires_subject(codec):
    token = jwt.encode({"exp": int(_in(60).timestamp())}, SECRET, algorithm="HS256")

    with pytest.raises(TokenInvalidError):
        codec.decode(token, SECRET)
