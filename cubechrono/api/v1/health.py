"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from pymongo.errors import PyMongoError

from cubechrono.api.deps import json_response, timing
from cubechrono.core.extensions import get_container

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and document store health information."""

    client = get_container().mongo
    if client is None:
        db_status = "memory"
    else:
        try:
            client.admin.command("ping")
            db_status = "ok"
        except PyMongoError:  # pragma: no cover - depends on a live server
            current_app.logger.exception("healthcheck.db_error")
            db_status = "fail"
    version = current_app.config.get("APP_VERSION", "dev")
    payload = {"status": "ok", "db": db_status, "version": version}
    return json_response(payload)
