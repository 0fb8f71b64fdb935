"""Parsing of the backend's ``pb_auth`` cookie string."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final
from urllib.parse import unquote

from marshmallow import ValidationError, fields, post_load

from pocketbase_client.schemas.records import BaseSchema

AUTH_COOKIE_NAME: Final[str] = "pb_auth"


@dataclass(frozen=True, slots=True)
class Cookie:
    """Attributes of one ``Set-Cookie``-style string."""

    name: str | None = None
    value: str | None = None
    path: str | None = None
    expires: str | None = None
    same_site: str | None = None
    http_only: bool = False
    secure: bool = False


class CookieSchema(BaseSchema):
    """Map cookie attribute names onto :class:`Cookie` fields."""

    name = fields.String(load_default=None)
    value = fields.String(load_default=None)
    path = fields.String(load_default=None, data_key="Path")
    expires = fields.String(load_default=None, data_key="Expires")
    same_site = fields.String(load_default=None, data_key="SameSite")
    http_only = fields.Boolean(
        load_default=False, data_key="HttpOnly", truthy={"true"}, falsy={"false"}
    )
    secure = fields.Boolean(load_default=False, data_key="Secure", truthy={"true"}, falsy={"false"})

    @post_load
    def make_cookie(self, data: dict[str, Any], **_: Any) -> Cookie:
        return Cookie(**data)


_cookie_schema = CookieSchema()


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        raw = raw[1:-1]
    return unquote(raw)


def parse_cookie(raw: str) -> Cookie:
    """
    Parse ``pb_auth=...; Path=/; Expires=...; SameSite=Strict; HttpOnly; Secure``.

    Bare ``HttpOnly``/``Secure`` attributes count as set. Values are
    percent-decoded and stripped of surrounding double quotes.

    :raises ValueError: When a boolean attribute is neither ``true`` nor ``false``.
    """
    attrs: dict[str, str] = {}
    for segment in raw.split(";"):
        key, sep, value = segment.partition("=")
        key = key.strip()
        if not key:
            continue
        if not sep:
            attrs[key] = "true" if key in ("HttpOnly", "Secure") else ""
            continue
        if key == AUTH_COOKIE_NAME:
            key = "value"
        attrs[key] = _unquote(value.strip())
    if attrs.get("value"):
        attrs["name"] = AUTH_COOKIE_NAME
    try:
        return _cookie_schema.load(attrs)
    except ValidationError as exc:
        raise ValueError(f"Invalid cookie string: {exc.messages}") from exc
