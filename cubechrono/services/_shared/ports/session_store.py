from __future__ import annotations

import threading
from dataclasses import replace
from typing import Protocol

from cubechrono.models.session import Session, Time


class SessionStore(Protocol):
    """
    Timing sessions, always addressed together with their owner.

    Appending a time is a single-document update; no call spans documents
    except the owner-wide delete.
    """

    def insert(self, session: Session) -> None: ...

    def find_all_by_account(self, account_id: str) -> list[Session]: ...

    def find_by_id_and_account(self, session_id: str, account_id: str) -> Session | None: ...

    def push_time(self, session_id: str, account_id: str, time: Time) -> tuple[int, int]:
        """
        Append ``time`` to the owned session.

        :returns: ``(matched_count, modified_count)``.
        """

    def delete_all_for_account(self, account_id: str) -> int:
        """:returns: Number of deleted sessions."""


class InMemorySessionStore(SessionStore):
    """
    In-memory session store.

    .. note::
       Uses a threading lock to mimic per-document atomicity.
    """

    def __init__(self) -> None:
        self._by_id: dict[str, Session] = {}
        self._lock = threading.Lock()

    def insert(self, session: Session) -> None:
        with self._lock:
            self._by_id[session.id] = session

    def find_all_by_account(self, account_id: str) -> list[Session]:
        with self._lock:
            return [s for s in self._by_id.values() if s.account_id == account_id]

    def find_by_id_and_account(self, session_id: str, account_id: str) -> Session | None:
        with self._lock:
            session = self._by_id.get(session_id)
        return session if session is not None and session.account_id == account_id else None

    def push_time(self, session_id: str, account_id: str, time: Time) -> tuple[int, int]:
        with self._lock:
            session = self._by_id.get(session_id)
            if session is None or session.account_id != account_id:
                return 0, 0
            self._by_id[session_id] = replace(session, times=(*session.times, time))
            return 1, 1

    def delete_all_for_account(self, account_id: str) -> int:
        with self._lock:
            doomed = [sid for sid, s in self._by_id.items() if s.account_id == account_id]
            for sid in doomed:
                del self._by_id[sid]
            return len(doomed)
