"""Argon2id password hashing via argon2-cffi."""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from cubechrono.services._shared.ports import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """
    Adapter for :class:`argon2.PasswordHasher`.

    Cost parameters default to argon2-cffi's recommended profile; tests pass
    cheap values through the ``ARGON2_*`` config keys.
    """

    def __init__(self, **params: int) -> None:
        self._ph = _Argon2(**params)

    def hash(self, password: str) -> str:
        return self._ph.hash(password)

    def verify(self, digest: str, password: str) -> bool:
        try:
            return self._ph.verify(digest, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False
