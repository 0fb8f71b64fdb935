"""
Inspection of backend bearer tokens.

Tokens are only *read* here: the payload segment is decoded to answer
validity and role questions. Signatures are never verified and tokens are
never issued; the backend stays the only authority.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

from jwt.utils import base64url_decode
from marshmallow import ValidationError

from pocketbase_client.core.errors import TokenDecodeError
from pocketbase_client.schemas.auth import TokenPayload, TokenPayloadSchema

log = logging.getLogger(__name__)

_payload_schema = TokenPayloadSchema()


def decode_token(token: str) -> TokenPayload:
    """
    Decode the payload segment of ``token``.

    :param token: Encoded bearer token (``header.payload.signature``).
    :returns: Decoded claims.
    :raises TokenDecodeError: On a malformed structure, bad base64, invalid
        UTF-8/JSON or claims not matching :class:`TokenPayloadSchema`.
    """
    segments = token.split(".")
    if len(segments) != 3:
        raise TokenDecodeError()
    # Only the payload segment is read; header and signature are opaque.
    try:
        claims = json.loads(base64url_decode(segments[1]))
    except ValueError as exc:
        raise TokenDecodeError() from exc
    try:
        return _payload_schema.load(claims)
    except ValidationError as exc:
        raise TokenDecodeError() from exc


def get_expires_at(token: str) -> datetime:
    """Return the expiry of ``token`` as an aware UTC datetime."""
    return datetime.fromtimestamp(decode_token(token).exp, tz=UTC)


def is_token_expired(token: str) -> bool:
    """
    Tell whether ``token`` is expired.

    Undecodable tokens count as expired.
    """
    try:
        payload = decode_token(token)
    except TokenDecodeError:
        log.debug("Token could not be decoded; treating it as expired")
        return True
    now = int(datetime.now(UTC).timestamp())
    return payload.exp <= now
