"""Integration tests for the ``flask accounts`` command group."""

from __future__ import annotations

from cubechrono.models.account import Role


def test_bootstrap_admin_creates_then_skips(app, container) -> None:
    runner = app.test_cli_runner()
    args = ["accounts", "bootstrap-admin", "--username", "root", "--password", "R00t!Pass"]

    first = runner.invoke(args=args)
    second = runner.invoke(args=args)

    assert first.exit_code == 0, first.output
    assert "Created admin account 'root'" in first.output
    assert second.exit_code == 0
    assert "already exists" in second.output
    assert container.accounts.find_by_username("root").has_role(Role.admin())


def test_bootstrap_admin_reads_config(app, container) -> None:
    app.config.update(ADMIN_USERNAME="cfg-admin", ADMIN_PASSWORD="Cfg!Pass1")

    result = app.test_cli_runner().invoke(args=["accounts", "bootstrap-admin"])

    assert result.exit_code == 0, result.output
    assert container.accounts.find_by_username("cfg-admin").is_admin()


def test_bootstrap_admin_without_credentials_fails(app) -> None:
    app.config.update(ADMIN_USERNAME=None, ADMIN_PASSWORD=None)

    result = app.test_cli_runner().invoke(args=["accounts", "bootstrap-admin"])

    assert result.exit_code != 0


def test_ensure_indexes_requires_mongo_backend(app) -> None:
    result = app.test_cli_runner().invoke(args=["accounts", "ensure-indexes"])

    assert result.exit_code != 0
    assert "STORAGE_BACKEND=mongo" in result.output
