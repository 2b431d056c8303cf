"""Endpoints for the timing sessions of the logged account."""

from __future__ import annotations

from flask import Blueprint

from cubechrono.api.deps import current_account, json_response, load_body, require_auth, timing
from cubechrono.core.extensions import get_container
from cubechrono.schemas import AddTimeSchema, CreateSessionSchema, SessionSchema
from cubechrono.services.sessions.dto import AddTimeIn, CreateSessionIn, TimeIn

bp = Blueprint("sessions", __name__)

session_schema = SessionSchema()
create_session_schema = CreateSessionSchema()
add_time_schema = AddTimeSchema()


@bp.get("")
@require_auth
@timing
def list_sessions():
    sessions = get_container().session_service.list_sessions(current_account())
    return json_response(
        {
            "message": f"Found {len(sessions)} sessions",
            "payload": {"sessions": session_schema.dump(sessions, many=True)},
        }
    )


@bp.get("/<session_id>")
@require_auth
@timing
def get_session(session_id: str):
    """Return one session owned by the caller; foreign ids are 404."""

    session = get_container().session_service.get_session(current_account(), session_id)
    return json_response(
        {"message": "Session found", "payload": {"session": session_schema.dump(session)}}
    )


@bp.post("/empty")
@require_auth
@timing
def create_empty():
    data = load_body(create_session_schema)
    session = get_container().session_service.create_empty(
        current_account(), CreateSessionIn(**data)
    )
    return json_response(
        {"message": "Empty session created", "payload": {"session_id": session.id}},
        status=201,
    )


@bp.post("/add-time")
@require_auth
@timing
def add_time():
    """Append a solve time to one of the caller's sessions."""

    data = load_body(add_time_schema)
    out = get_container().session_service.add_time(
        current_account(),
        AddTimeIn(session_id=data["session_id"], time=TimeIn(**data["time"])),
    )
    return json_response(
        {
            "message": "New time inserted",
            "payload": {"matched_count": out.matched_count, "modified_count": out.modified_count},
        },
        status=201,
    )
