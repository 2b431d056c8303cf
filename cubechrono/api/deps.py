"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request
from marshmallow import Schema

from cubechrono.core.extensions import get_container
from cubechrono.models.account import Account

F = TypeVar("F", bound=Callable[..., Any])


def load_body(schema: Schema) -> dict[str, Any]:
    """Validate the JSON body with ``schema``; a missing body counts as ``{}``."""

    return schema.load(request.get_json(silent=True) or {})


def require_auth(func: F) -> F:
    """Ensure the request carries a valid bearer access token.

    The resolved account is stored on ``g.current_account``. Guard failures
    propagate as service errors, so the view is never entered.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        guard = get_container().guard
        g.current_account = guard.authenticate(request.headers.get("Authorization"))
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_account() -> Account:
    """Return the account authenticated by :func:`require_auth`."""

    account = g.get("current_account")
    if account is None:
        raise RuntimeError("current_account() used outside a @require_auth view")
    return account


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
