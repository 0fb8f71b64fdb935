"""Authentication-related Marshmallow schemas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from marshmallow import fields, post_load

from pocketbase_client.schemas.common import SchemaLike, as_schema
from pocketbase_client.schemas.records import BaseSchema

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class AuthResponse(Generic[R]):
    """Body of a successful password authentication."""

    token: str
    record: R


@dataclass(frozen=True, slots=True)
class TokenPayload:
    """Claims read from the middle segment of a bearer token."""

    token_type: str
    collection_id: str
    id: str
    exp: int
    refreshable: bool = False


class AuthRequestSchema(BaseSchema):
    """Input payload for authenticating with a password."""

    identity = fields.String(required=True)
    password = fields.String(required=True)


class AuthResponseSchema(BaseSchema):
    """
    Auth body, with ``record`` loaded through ``record_schema``.

    :param record_schema: Schema applied to the authenticated record.
    :type record_schema: Schema | type[Schema]
    """

    def __init__(self, *, record_schema: SchemaLike, **kwargs: Any) -> None:
        self._record_schema = as_schema(record_schema)
        super().__init__(**kwargs)

    token = fields.String(required=True)
    record = fields.Dict(required=True)

    @post_load
    def make_response(self, data: dict[str, Any], **_: Any) -> AuthResponse[Any]:
        return AuthResponse(token=data["token"], record=self._record_schema.load(data["record"]))


class TokenPayloadSchema(BaseSchema):
    """Claims of a backend auth token."""

    token_type = fields.String(required=True, data_key="type")
    collection_id = fields.String(required=True, data_key="collectionId")
    id = fields.String(required=True)
    exp = fields.Integer(required=True)
    refreshable = fields.Boolean(load_default=False)

    @post_load
    def make_payload(self, data: dict[str, Any], **_: Any) -> TokenPayload:
        return TokenPayload(**data)
