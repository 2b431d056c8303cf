"""Persisted refresh token record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


def _as_utc(dt: datetime) -> datetime:
    # Mongo hands back naive datetimes unless the client is tz-aware
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class RefreshToken:
    """
    Capability entry for an issued refresh token.

    The signed token carries the authoritative expiry; ``expires_at`` here is
    a secondary check and drives the storage TTL index.

    :ivar id: Record identifier, also embedded in the token as ``jti``.
    :ivar account_id: Owner account reference.
    :ivar expires_at: Absolute expiry (UTC).
    :ivar token: Signed JWT string handed to the client.
    """

    id: str
    account_id: str
    expires_at: datetime
    token: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "expires_at", _as_utc(self.expires_at))

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= _as_utc(now)

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "account_id": self.account_id,
            "expires_at": self.expires_at,
            "token": self.token,
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> RefreshToken:
        return cls(
            id=str(doc["_id"]),
            account_id=str(doc["account_id"]),
            expires_at=doc["expires_at"],
            token=doc["token"],
        )
