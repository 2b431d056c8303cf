"""Global pytest fixtures for the cube-chrono API."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from cubechrono import create_app
from cubechrono.core.config import TestingConfig
from cubechrono.core.extensions import EXTENSION_KEY, AppContainer
from cubechrono.models.account import Account

from tests.factories.account import AccountFactory
from tests.helpers.auth import expired_access_token, issue_access_token


@pytest.fixture()
def app() -> Generator[Flask, None, None]:
    """Create a Flask application backed by fresh in-memory stores.

    Returns
    -------
    Generator[Flask, None, None]
        Configured Flask application instance.
    """

    application = create_app(TestingConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def container(app: Flask) -> AppContainer:
    """Service container wired by the application factory."""

    return app.extensions[EXTENSION_KEY]


@pytest.fixture()
def account(container: AppContainer) -> Account:
    """Persist and return a plain user account (password ``Passw0rd!``)."""

    acc = AccountFactory()
    container.accounts.insert(acc)
    return acc


@pytest.fixture()
def admin(container: AppContainer) -> Account:
    """Persist and return an admin account (password ``Passw0rd!``)."""

    acc = AccountFactory(admin=True)
    container.accounts.insert(acc)
    return acc


@pytest.fixture()
def auth_token(container: AppContainer, account: Account) -> str:
    """Generate a valid access token for ``account``."""

    return issue_access_token(container, account.id)


@pytest.fixture()
def auth_header(auth_token: str) -> dict[str, str]:
    """Authorization header for authenticated requests."""

    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture()
def admin_header(container: AppContainer, admin: Account) -> dict[str, str]:
    """Authorization header carrying an admin access token."""

    return {"Authorization": f"Bearer {issue_access_token(container, admin.id)}"}


@pytest.fixture()
def expired_auth_token(container: AppContainer, account: Account) -> str:
    """Return an already expired access token for ``account``."""

    return expired_access_token(container, account.id)

