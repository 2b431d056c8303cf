"""Global Flask extension instances and the service container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flask import Flask, current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pymongo import MongoClient

from cubechrono.core.config import auth_settings_from
from cubechrono.infra.jwt.pyjwt_token_codec import PyJWTTokenCodec
from cubechrono.infra.mongo import client as mongo
from cubechrono.infra.security.argon2_password_hasher import Argon2PasswordHasher
from cubechrono.services._shared.ports import (
    AccountStore,
    InMemoryAccountStore,
    InMemoryRefreshTokenStore,
    InMemorySessionStore,
    PasswordHasher,
    RefreshTokenStore,
    SessionStore,
    TokenCodec,
)
from cubechrono.services.accounts import AccountService
from cubechrono.services.auth import AuthGuard, AuthService
from cubechrono.services.auth.dto import AuthSettings
from cubechrono.services.sessions import SessionService

EXTENSION_KEY = "cubechrono"

# Global singletons (import-safe)
limiter = Limiter(key_func=get_remote_address)


@dataclass(slots=True)
class AppContainer:
    """
    Wired collaborators for one application instance.

    Views resolve services through :func:`get_container` so nothing mutable
    lives at module level.
    """

    settings: AuthSettings
    accounts: AccountStore
    refresh_tokens: RefreshTokenStore
    sessions: SessionStore
    hasher: PasswordHasher
    codec: TokenCodec
    auth: AuthService
    account_service: AccountService
    session_service: SessionService
    guard: AuthGuard
    mongo: MongoClient | None = None


def _build_stores(
    app: Flask,
) -> tuple[AccountStore, RefreshTokenStore, SessionStore, MongoClient | None]:
    backend = str(app.config.get("STORAGE_BACKEND", "mongo")).lower()
    if backend == "memory":
        return InMemoryAccountStore(), InMemoryRefreshTokenStore(), InMemorySessionStore(), None
    if backend != "mongo":
        raise RuntimeError(f"Unknown STORAGE_BACKEND {backend!r}")

    client = mongo.connect(
        app.config["MONGO_URI"], timeout_ms=int(app.config.get("MONGO_TIMEOUT_MS", 5000))
    )
    accounts, refresh_tokens, sessions = mongo.build_stores(
        client[app.config["MONGO_DATABASE"]],
        reap_grace_seconds=int(
            app.config.get("REFRESH_TOKEN_REAP_GRACE_SECONDS", mongo.DEFAULT_REAP_GRACE_SECONDS)
        ),
    )
    # Uniqueness and TTL reaping depend on these; create_index is idempotent
    mongo.ensure_indexes(accounts, refresh_tokens, sessions)
    return accounts, refresh_tokens, sessions, client


def build_container(app: Flask, **overrides: Any) -> AppContainer:
    """
    Assemble stores, adapters and services from ``app.config``.

    :param app: Application whose config drives the wiring.
    :param overrides: Optional replacements for ``accounts``, ``refresh_tokens``,
        ``sessions``, ``hasher`` or ``codec`` (used by tests).
    :returns: A fully wired :class:`AppContainer`.
    """
    settings = auth_settings_from(app.config)
    if {"accounts", "refresh_tokens", "sessions"} & overrides.keys():
        accounts = overrides.get("accounts") or InMemoryAccountStore()
        refresh_tokens = overrides.get("refresh_tokens") or InMemoryRefreshTokenStore()
        sessions = overrides.get("sessions") or InMemorySessionStore()
        client = None
    else:
        accounts, refresh_tokens, sessions, client = _build_stores(app)

    hasher = overrides.get("hasher") or Argon2PasswordHasher(**app.config.get("ARGON2_PARAMS", {}))
    codec = overrides.get("codec") or PyJWTTokenCodec()

    return AppContainer(
        settings=settings,
        accounts=accounts,
        refresh_tokens=refresh_tokens,
        sessions=sessions,
        hasher=hasher,
        codec=codec,
        auth=AuthService(
            accounts=accounts,
            refresh_store=refresh_tokens,
            hasher=hasher,
            token_codec=codec,
            settings=settings,
        ),
        account_service=AccountService(
            accounts=accounts, refresh_store=refresh_tokens, hasher=hasher, sessions=sessions
        ),
        session_service=SessionService(sessions=sessions),
        guard=AuthGuard(token_codec=codec, accounts=accounts, settings=settings),
        mongo=client,
    )


def init_app(app: Flask, **overrides: Any) -> None:
    """Initialize the rate limiter and attach the service container.

    Parameters
    ----------
    app: flask.Flask
        Application used to bind extension instances.
    overrides:
        Forwarded to :func:`build_container`.
    """
    limiter.init_app(app)
    app.extensions[EXTENSION_KEY] = build_container(app, **overrides)


def get_container() -> AppContainer:
    """Return the container bound to the current application."""
    container = current_app.extensions.get(EXTENSION_KEY)
    if container is None:
        raise RuntimeError("Service container is not initialized. Call init_app() first.")
    return container
