"""Integration tests for the authentication endpoints."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from freezegun import freeze_time

from tests.helpers.http import assert_problem

BASE = "/api/v1"
ALICE = {"username": "alice", "password": "Str0ng!Pass"}


def _login(client, creds=ALICE):
    resp = client.post(f"{BASE}/auth/login", json=creds)
    assert resp.status_code == 200
    return resp.get_json()


def test_end_to_end_session_lifecycle(client) -> None:
    """Register, use, expire, refresh and log out a session."""

    resp = client.post(f"{BASE}/auth/register", json=ALICE)
    assert resp.status_code == 201
    account = resp.get_json()["payload"]["account"]
    assert account["username"] == "alice"
    assert "password" not in account and "password_hash" not in account

    tokens = _login(client)
    bearer = {"Authorization": f"Bearer {tokens['access_token']}"}

    resp = client.get(f"{BASE}/accounts/logged", headers=bearer)
    assert resp.status_code == 200
    assert resp.get_json()["id"] == account["id"]
    assert resp.get_json()["username"] == "alice"

    assert_problem(client.get(f"{BASE}/accounts/logged"), 401, "unauthorized")

    with freeze_time(datetime.now(UTC) + timedelta(minutes=16)):
        expired = client.get(f"{BASE}/accounts/logged", headers=bearer)
        assert_problem(expired, 401, "token_expired")

        resp = client.post(f"{BASE}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert resp.status_code == 200
        fresh = {"Authorization": f"Bearer {resp.get_json()['access_token']}"}
        assert client.get(f"{BASE}/accounts/logged", headers=fresh).status_code == 200

    resp = client.post(f"{BASE}/auth/logout", json={"refresh_token": tokens["refresh_token"]})
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Logged out"

    resp = client.post(f"{BASE}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert_problem(resp, 401, "token_invalid")


def test_expired_token_fixture_is_rejected(client, expired_auth_token) -> None:
    resp = client.get(
        f"{BASE}/accounts/logged", headers={"Authorization": f"Bearer {expired_auth_token}"}
    )
    assert_problem(resp, 401, "token_expired")


def test_register_duplicate_username_conflicts(client) -> None:
    assert client.post(f"{BASE}/auth/register", json=ALICE).status_code == 201

    body = assert_problem(client.post(f"{BASE}/auth/register", json=ALICE), 409, "conflict")
    assert body["detail"] == "Username already taken"


def test_register_validates_payload(client) -> None:
    body = assert_problem(
        client.post(f"{BASE}/auth/register", json={"username": "bob"}), 400, "validation_error"
    )
    assert "password" in body["details"]["errors"]


def test_login_failures_are_indistinguishable(client) -> None:
    client.post(f"{BASE}/auth/register", json=ALICE)

    unknown = assert_problem(
        client.post(f"{BASE}/auth/login", json={"username": "ghost", "password": "x"}),
        401,
        "invalid_credentials",
    )
    wrong = assert_problem(
        client.post(f"{BASE}/auth/login", json={"username": "alice", "password": "x"}),
        401,
        "invalid_credentials",
    )
    assert unknown["detail"] == wrong["detail"]


def test_logout_unknown_token_is_not_an_error(client) -> None:
    resp = client.post(f"{BASE}/auth/logout", json={"refresh_token": "never-issued"})

    assert resp.status_code == 200
    assert resp.get_json() == {"message": "Not logged in", "logged_out": False}


def test_revoke_all_requires_password(client) -> None:
    client.post(f"{BASE}/auth/register", json=ALICE)
    first, second = _login(client), _login(client)
    bearer = {"Authorization": f"Bearer {first['access_token']}"}

    resp = client.post(f"{BASE}/auth/revoke-all", json={"password": "wrong"}, headers=bearer)
    assert_problem(resp, 401, "invalid_credentials")

    resp = client.post(f"{BASE}/auth/revoke-all", json={"password": ALICE["password"]}, headers=bearer)
    assert resp.status_code == 200
    assert resp.get_json() == {"revoked_count": 2}

    for pair in (first, second):
        resp = client.post(f"{BASE}/auth/refresh", json={"refresh_token": pair["refresh_token"]})
        assert_problem(resp, 401, "token_invalid")


def test_revoke_all_needs_bearer(client) -> None:
    resp = client.post(f"{BASE}/auth/revoke-all", json={"password": "x"})
    assert_problem(resp, 401, "unauthorized")


def test_request_id_is_echoed(client) -> None:
    resp = client.get(f"{BASE}/accounts/logged", headers={"X-Request-ID": "req-42"})

    assert resp.headers["X-Request-ID"] == "req-42"
    assert resp.get_json()["request_id"] == "req-42"


def test_unexpected_errors_hide_details(client, container, monkeypatch) -> None:
    class _Exploding:
        def login(self, dto):
            raise RuntimeError("db password is hunter2")

    monkeypatch.setattr(container, "auth", _Exploding())

    body = assert_problem(client.post(f"{BASE}/auth/login", json=ALICE), 500, "internal_server_error")
    assert body["detail"] == "Something went wrong"
    assert "hunter2" not in str(body)
