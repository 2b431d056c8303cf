"""Session lifecycle: registration, login, refresh, logout and the auth guard."""

from __future__ import annotations

from .guard import AuthGuard
from .service import AuthService

__all__ = ["AuthGuard", "AuthService"]
