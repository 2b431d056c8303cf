# cubechrono/infra/jwt/pyjwt_token_codec.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import jwt

from cubechrono.services._shared.errors import TokenExpiredError, TokenInvalidError
from cubechrono.services._shared.ports import Claims, TokenCodec, TokenCodecError


def _ts(dt: datetime) -> int:
    # naive -> label as UTC (no conversion)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return int(dt.timestamp())


@dataclass(frozen=True, slots=True)
class PyJWTTokenCodec(TokenCodec):
    """
    HS256 JWT codec on top of PyJWT.

    The secret is passed per call so access and refresh tokens can be keyed
    independently.
    """

    algorithm: str = "HS256"

    def issue(
        self,
        subject_id: str,
        expires_at: datetime,
        secret: str,
        *,
        issued_at: datetime | None = None,
        jti: str | None = None,
    ) -> str:
        exp = _ts(expires_at)
        if exp <= _ts(datetime.now(UTC)):
            raise ValueError("Token expiry must be in the future at issuance.")

        payload: dict[str, Any] = {"sub": str(subject_id), "exp": exp}
        if issued_at is not None:
            payload["iat"] = _ts(issued_at)
        if jti is not None:
            payload["jti"] = jti

        try:
            return jwt.encode(payload, secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenCodecError("Failed to sign token") from exc

    def decode(self, token: str, secret: str) -> Claims:
        try:
            data = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            # Signature verified first by PyJWT, so this is a genuine expiry
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            raise TokenInvalidError() from exc

        try:
            return Claims(
                sub=str(data["sub"]),
                exp=datetime.fromtimestamp(int(data["exp"]), tz=UTC),
                iat=datetime.fromtimestamp(int(data["iat"]), tz=UTC) if "iat" in data else None,
                jti=data.get("jti"),
            )
        except (TypeError, ValueError) as exc:
            raise TokenInvalidError() from exc
