"""Timing session Marshmallow schemas."""

from __future__ import annotations

from datetime import UTC

from marshmallow import Schema, fields, validate


class TimeSchema(Schema):
    """One solve time, used for both input and output."""

    class Meta:
        ordered = True

    millis = fields.Integer(required=True, strict=True, validate=validate.Range(min=0))
    recorded_at = fields.AwareDateTime(required=True, default_timezone=UTC)
    scramble = fields.String(load_default=None, allow_none=True)


class SessionSchema(Schema):
    """Serialize sessions for API responses."""

    class Meta:
        ordered = True

    id = fields.String(dump_only=True)
    account_id = fields.String(dump_only=True)
    name = fields.String(dump_only=True)
    times = fields.List(fields.Nested(TimeSchema), dump_only=True)


class CreateSessionSchema(Schema):
    """Input payload for creating an empty session."""

    name = fields.String(required=True, validate=validate.Length(min=1, max=32))


class AddTimeSchema(Schema):
    """Input payload for appending a time to an owned session."""

    session_id = fields.String(required=True, validate=validate.Length(min=1))
    time = fields.Nested(TimeSchema, required=True)
