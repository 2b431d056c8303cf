from __future__ import annotations

from .service import AccountService

__all__ = ["AccountService"]
