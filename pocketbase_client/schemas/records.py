"""Record schemas: the identity fields every backend record carries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from marshmallow import EXCLUDE, INCLUDE, Schema, fields, post_load


class BaseSchema(Schema):
    """Base schema ignoring wire keys a caller did not declare."""

    class Meta:
        unknown = EXCLUDE


class RecordSchema(BaseSchema):
    """
    Declare the three identity fields present on every record.

    Subclass it and add the collection's own fields; a ``@post_load`` hook
    may turn the loaded dict into any caller type.
    """

    id = fields.String(required=True)
    collection_id = fields.String(required=True, data_key="collectionId")
    collection_name = fields.String(required=True, data_key="collectionName")


class RawRecordSchema(RecordSchema):
    """Permissive default: identity fields are checked, everything else is kept."""

    class Meta:
        unknown = INCLUDE


class RecordIdSchema(BaseSchema):
    """Minimal shape used to peek at a record's id."""

    id = fields.String(required=True)


@dataclass(slots=True)
class DefaultAuthRecord:
    """
    Record of the built-in auth collections.

    ``name`` is absent on superuser accounts.
    """

    id: str
    collection_id: str
    collection_name: str
    email: str
    verified: bool
    email_visibility: bool
    created: str
    updated: str
    name: str | None = None


class DefaultAuthRecordSchema(RecordSchema):
    """Load :class:`DefaultAuthRecord` values."""

    email = fields.String(required=True)
    verified = fields.Boolean(required=True)
    email_visibility = fields.Boolean(required=True, data_key="emailVisibility")
    created = fields.String(required=True)
    updated = fields.String(required=True)
    name = fields.String(load_default=None, allow_none=True)

    @post_load
    def make_record(self, data: dict[str, Any], **_: Any) -> DefaultAuthRecord:
        return DefaultAuthRecord(**data)
