"""
DTOs for SessionService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from cubechrono.models.session import Time

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class CreateSessionIn:
    """
    Input DTO for creating an empty session.

    :param name: Display name (1..32 characters).
    :type name: str
    """

    name: str


@dataclass(frozen=True, slots=True)
class TimeIn:
    """
    One solve as submitted by the client.

    :param millis: Solve duration in milliseconds.
    :type millis: int
    :param recorded_at: When the solve finished.
    :type recorded_at: datetime
    :param scramble: Scramble sequence, when the client tracked one.
    :type scramble: str | None
    """

    millis: int
    recorded_at: datetime
    scramble: str | None = None

    def to_time(self) -> Time:
        return Time(millis=self.millis, recorded_at=self.recorded_at, scramble=self.scramble)


@dataclass(frozen=True, slots=True)
class AddTimeIn:
    """
    Input DTO for appending a time to an owned session.

    :param session_id: Target session.
    :type session_id: str
    :param time: The solve to append.
    :type time: TimeIn
    """

    session_id: str
    time: TimeIn


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AddTimeOut:
    """
    Result of appending a time.

    :param matched_count: Sessions matched by id and owner.
    :type matched_count: int
    :param modified_count: Sessions modified.
    :type modified_count: int
    """

    matched_count: int
    modified_count: int
