"""Account-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class RoleSchema(Schema):
    """Serialize a :class:`~cubechrono.models.account.Role`."""

    kind = fields.Function(lambda role: role.kind.value)
    event_id = fields.String(allow_none=True)


class AccountSchema(Schema):
    """Serialize accounts for API responses; the password hash never leaves."""

    class Meta:
        ordered = True

    id = fields.String(dump_only=True)
    username = fields.String(dump_only=True)
    roles = fields.List(fields.Nested(RoleSchema), dump_only=True)


class ChangeUsernameSchema(Schema):
    """Input payload for renaming the logged account."""

    username = fields.String(required=True, validate=validate.Length(min=1))


class ChangePasswordSchema(Schema):
    """Input payload for changing the logged account's password."""

    old_password = fields.String(required=True, validate=validate.Length(min=1), load_only=True)
    new_password = fields.String(required=True, validate=validate.Length(min=1), load_only=True)
