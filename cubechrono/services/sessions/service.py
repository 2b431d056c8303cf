"""
SessionService
==============

Timing sessions of the logged account:
- List and fetch (always filtered by owner)
- Create an empty named session
- Append solve times
"""

from __future__ import annotations

import logging

from cubechrono.models.account import Account
from cubechrono.models.session import Session
from cubechrono.services._shared.base import BaseService
from cubechrono.services._shared.errors import NotFoundError
from cubechrono.services._shared.ports import SessionStore
from cubechrono.services.sessions.dto import AddTimeIn, AddTimeOut, CreateSessionIn

log = logging.getLogger(__name__)


class SessionService(BaseService):
    """
    Application service for the :class:`Session` aggregate.

    Sessions of other accounts are reported as missing, never as forbidden.
    """

    def __init__(self, *, sessions: SessionStore) -> None:
        self.sessions = sessions

    def list_sessions(self, account: Account) -> list[Session]:
        return self.sessions.find_all_by_account(account.id)

    def get_session(self, account: Account, session_id: str) -> Session:
        """
        :raises NotFoundError: When the session is missing or not owned.
        """
        session = self.sessions.find_by_id_and_account(session_id, account.id)
        if session is None:
            raise NotFoundError("Session", session_id)
        return session

    def create_empty(self, account: Account, dto: CreateSessionIn) -> Session:
        session = Session.new(account.id, dto.name)
        self.sessions.insert(session)
        log.info("sessions.created", extra={"account_id": account.id, "session_id": session.id})
        return session

    def add_time(self, account: Account, dto: AddTimeIn) -> AddTimeOut:
        """
        Append a time to an owned session.

        :raises NotFoundError: When no owned session matches ``dto.session_id``.
        """
        matched, modified = self.sessions.push_time(dto.session_id, account.id, dto.time.to_time())
        if not matched:
            raise NotFoundError("Session", dto.session_id)
        log.info(
            "sessions.time_added",
            extra={"account_id": account.id, "session_id": dto.session_id},
        )
        return AddTimeOut(matched_count=matched, modified_count=modified)
