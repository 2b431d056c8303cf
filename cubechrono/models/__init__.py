"""Domain records persisted in the document store."""

from __future__ import annotations

from .account import Account, Role, RoleKind
from .refresh_token import RefreshToken
from .session import Session, Time

__all__ = ["Account", "Role", "RoleKind", "RefreshToken", "Session", "Time"]
