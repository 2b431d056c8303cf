from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for a salted, memory-hard password hash."""

    def hash(self, password: str) -> str: ...

    def verify(self, digest: str, password: str) -> bool:
        """Return ``False`` on mismatch or unparsable digest; never raise for those."""
