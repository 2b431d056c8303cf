"""WSGI proxy middleware configuration helper."""

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Apply :class:`~werkzeug.middleware.proxy_fix.ProxyFix` when enabled.

    The login rate limit keys on the client address, so behind a reverse proxy
    the ``X-Forwarded-For`` hop must be trusted or every caller shares one
    bucket. Controlled by ``USE_PROXYFIX`` (defaults to ``True``; one hop).
    """
    if app.config.get("USE_PROXYFIX", True):
        hops = int(app.config.get("PROXYFIX_HOPS", 1))
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)
