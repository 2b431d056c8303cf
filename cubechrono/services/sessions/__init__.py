"""Timing sessions of the logged account."""

from __future__ import annotations

from .service import SessionService

__all__ = ["SessionService"]
