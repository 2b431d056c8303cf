from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class TokenCodecError(RuntimeError):
    """Signing or serialization failed; surfaces as an internal error."""


@dataclass(frozen=True, slots=True)
class Claims:
    """
    Decoded claim set of a signed token.

    :ivar sub: Subject (account id).
    :ivar exp: Absolute expiry (UTC, second precision).
    :ivar iat: Issued-at instant when present.
    :ivar jti: Token identifier when present.
    """

    sub: str
    exp: datetime
    iat: datetime | None = None
    jti: str | None = None


class TokenCodec(Protocol):
    """
    Port for issuing and decoding signed, time-bound claim sets.

    ``decode`` MUST raise :class:`~cubechrono.services._shared.errors.TokenExpiredError`
    for a valid signature past its expiry and
    :class:`~cubechrono.services._shared.errors.TokenInvalidError` for anything
    else it cannot verify.
    """

    def issue(
        self,
        subject_id: str,
        expires_at: datetime,
        secret: str,
        *,
        issued_at: datetime | None = None,
        jti: str | None = None,
    ) -> str: ...

    def decode(self, token: str, secret: str) -> Claims: ...
