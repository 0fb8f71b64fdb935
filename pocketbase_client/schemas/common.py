"""Common Marshmallow schemas shared across services."""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load

from pocketbase_client.schemas.records import BaseSchema
from pocketbase_client.services._shared.dto import ListResult

SchemaLike = Schema | type[Schema]


def as_schema(schema: SchemaLike) -> Schema:
    """Accept either a schema class or an instance."""
    return schema() if isinstance(schema, type) else schema


class ResponseErrorSchema(BaseSchema):
    """Error body returned by the backend (extra keys such as ``data`` are ignored)."""

    message = fields.String(required=True)
    status = fields.Integer(required=True)


class ListResponseSchema(BaseSchema):
    """
    Paginated list body, with items loaded through ``item_schema``.

    :param item_schema: Schema applied to every item.
    :type item_schema: Schema | type[Schema]
    """

    def __init__(self, *, item_schema: SchemaLike, **kwargs: Any) -> None:
        self._item_schema = as_schema(item_schema)
        super().__init__(**kwargs)

    items = fields.List(fields.Dict(), required=True)
    page = fields.Integer(required=True)
    per_page = fields.Integer(required=True, data_key="perPage")
    total_items = fields.Integer(required=True, data_key="totalItems")
    total_pages = fields.Integer(required=True, data_key="totalPages")

    @post_load
    def make_result(self, data: dict[str, Any], **_: Any) -> ListResult[Any]:
        items = self._item_schema.load(data["items"], many=True)
        return ListResult(
            items=list(items),
            page=data["page"],
            per_page=data["per_page"],
            total_items=data["total_items"],
            total_pages=data["total_pages"],
        )
