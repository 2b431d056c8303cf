"""Account aggregate and its role tags."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
from uuid import uuid4


class RoleKind(str, Enum):
    """Closed set of role tags an account can carry."""

    USER = "user"
    ADMIN = "admin"
    EVENT_MODERATOR = "event_moderator"


@dataclass(frozen=True, slots=True)
class Role:
    """
    Tagged role value.

    Only :attr:`RoleKind.EVENT_MODERATOR` is scoped, and the scope is kept as
    a plain ``event_id`` reference rather than an embedded event document.

    :ivar kind: Role tag.
    :ivar event_id: Moderated event identifier (moderator roles only).
    """

    kind: RoleKind
    event_id: str | None = None

    def __post_init__(self) -> None:
        scoped = self.kind is RoleKind.EVENT_MODERATOR
        if scoped and not self.event_id:
            raise ValueError("event_moderator role requires an event_id.")
        if not scoped and self.event_id is not None:
            raise ValueError(f"{self.kind.value} role does not take an event_id.")

    @classmethod
    def user(cls) -> Role:
        return cls(RoleKind.USER)

    @classmethod
    def admin(cls) -> Role:
        return cls(RoleKind.ADMIN)

    @classmethod
    def event_moderator(cls, event_id: str) -> Role:
        return cls(RoleKind.EVENT_MODERATOR, event_id=str(event_id))

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"kind": self.kind.value}
        if self.event_id is not None:
            doc["event_id"] = self.event_id
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Role:
        return cls(RoleKind(doc["kind"]), event_id=doc.get("event_id"))


@dataclass(frozen=True, slots=True)
class Account:
    """
    Authentication identity stored in the ``accounts`` collection.

    Fields
    ------
    id : str
        Opaque unique identifier (UUID4 string, stored as ``_id``).
    username : str
        Unique, case-sensitive login name.
    password_hash : str
        Argon2 digest. Never logged nor serialized to clients.
    roles : tuple[Role, ...]
        Role tags granted to the account.
    """

    id: str
    username: str
    password_hash: str = field(repr=False)
    roles: tuple[Role, ...] = ()

    @classmethod
    def new(cls, username: str, password_hash: str, roles: Iterable[Role]) -> Account:
        """Build a fresh account with a newly generated identifier."""
        return cls(
            id=str(uuid4()),
            username=username,
            password_hash=password_hash,
            roles=tuple(roles),
        )

    # -------------------- Role checks --------------------

    def has_role(self, role: Role) -> bool:
        return role in self.roles

    def is_admin(self) -> bool:
        return self.has_role(Role.admin())

    def is_event_moderator(self, event_id: str) -> bool:
        return any(
            r.kind is RoleKind.EVENT_MODERATOR and r.event_id == str(event_id)
            for r in self.roles
        )

    # -------------------- Mutation helpers --------------------

    def with_username(self, username: str) -> Account:
        return replace(self, username=username)

    def with_password_hash(self, password_hash: str) -> Account:
        return replace(self, password_hash=password_hash)

    # -------------------- Document mapping --------------------

    def to_document(self) -> dict[str, Any]:
        return {
            "_id": self.id,
            "username": self.username,
            "password_hash": self.password_hash,
            "roles": [r.to_document() for r in self.roles],
        }

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> Account:
        return cls(
            id=str(doc["_id"]),
            username=doc["username"],
            password_hash=doc["password_hash"],
            roles=tuple(Role.from_document(r) for r in doc.get("roles", [])),
        )
