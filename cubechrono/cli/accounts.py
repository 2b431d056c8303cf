"""Flask CLI commands for account bootstrap and store maintenance."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext
from pymongo.errors import PyMongoError

from cubechrono.core.extensions import get_container
from cubechrono.infra.mongo import client as mongo
from cubechrono.infra.mongo.mongo_account_store import MongoAccountStore
from cubechrono.infra.mongo.mongo_refresh_token_store import MongoRefreshTokenStore
from cubechrono.infra.mongo.mongo_session_store import MongoSessionStore

LOGGER = logging.getLogger(__name__)


@click.group("accounts")
def accounts_cli() -> None:
    """Account administration commands."""


@accounts_cli.command("bootstrap-admin")
@click.option("--username", default=None, help="Defaults to ADMIN_USERNAME.")
@click.option("--password", default=None, help="Defaults to ADMIN_PASSWORD.")
@with_appcontext
def bootstrap_admin_command(username: str | None, password: str | None) -> None:
    """Create the privileged account on first run (idempotent)."""
    username = username or current_app.config.get("ADMIN_USERNAME")
    password = password or current_app.config.get("ADMIN_PASSWORD")
    if not username or not password:
        raise click.UsageError(
            "Provide --username/--password or set ADMIN_USERNAME and ADMIN_PASSWORD."
        )

    created = get_container().auth.bootstrap_admin(username, password)
    if created is None:
        click.echo(f"Account '{username}' already exists; nothing to do.")
        return
    LOGGER.info("cli.bootstrap_admin", extra={"account_id": created.id})
    click.echo(f"Created admin account '{created.username}' ({created.id}).")


@accounts_cli.command("ensure-indexes")
@with_appcontext
def ensure_indexes_command() -> None:
    """
    Re-create the unique, lookup and TTL indexes on the MongoDB collections.

    The app already ensures them at startup; this re-runs that step, e.g.
    after a collection was dropped.
    """
    container = get_container()
    accounts, refresh_tokens, sessions = (
        container.accounts,
        container.refresh_tokens,
        container.sessions,
    )
    if not (
        isinstance(accounts, MongoAccountStore)
        and isinstance(refresh_tokens, MongoRefreshTokenStore)
        and isinstance(sessions, MongoSessionStore)
    ):
        raise click.UsageError("ensure-indexes requires STORAGE_BACKEND=mongo.")
    try:
        mongo.ensure_indexes(accounts, refresh_tokens, sessions)
    except PyMongoError as exc:
        raise click.ClickException(f"Index creation failed: {exc}") from exc
    click.echo("Indexes ensured on 'accounts', 'refresh_tokens' and 'sessions'.")
