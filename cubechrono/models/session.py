"""Timing sessions and the solve times recorded in them."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4


def _as_utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=UTC) if dt.tzinfo is None else dt.astimezone(UTC)


@dataclass(frozen=True, slots=True)
class Time:
    """
    One recorded solve.

    :ivar millis: Solve duration in milliseconds.
    :ivar recorded_at: When the solve finished (UTC).
    :ivar scramble: Move sequence the solve was scrambled with, if any.
    """

    millis: int
    recorded_at: datetime
    scramble: str | None = None

    def __post_init__(self) -> None:
        if self.millis < 0:
            raise ValueError("millis must be non-negative.")
        object.__setattr__(self, "recorded_at", _as_utc(self.recorded_at))

    def to_document(self) -> dict[str, Any]:
        return {"millis": self.millis, "recorded_at": self.recorded_at, "scramble": self.scramble}

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Time:
        return cls(
            millis=int(doc["millis"]),
            recorded_at=doc["recorded_at"],
            scramble=doc.get("scramble"),
        )


@dataclass(frozen=True, slots=True)
class Session:
    """
    Named list of times owned by one account (``sessions`` collection).

    Every read and write is scoped by ``account_id``; a session of another
    account is indistinguishable from a missing one.
    """

    id: str
    account_id: str
    name: str
    times: tuple[Time, ...] = ()

    @classmethod
    def new(cls, account_id: str, name: str, times: Iterable[Time] = ()) -> Session:
        return cls(id=str(uuid4()), account_id=account_id, name=name, times=tuple(times))

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "account_id": self.account_id,
            "name": self.name,
            "times": [t.to_document() for t in self.times],
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Session:
        return cls(
            id=str(doc["_id"]),
            account_id=str(doc["account_id"]),
            name=doc["name"],
            times=tuple(Time.from_document(t) for t in doc.get("times", [])),
        )
