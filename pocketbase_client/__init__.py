"""Typed client for a PocketBase backend.

Expose the client handle and the value types callers work with so that
``from pocketbase_client import PocketBase`` is all most programs need.
"""

from __future__ import annotations

from .client import PocketBase
from .cookies import Cookie, parse_cookie
from .core.errors import (
    ApiError,
    ConfigurationError,
    HttpError,
    NotFoundError,
    ResponseDecodeError,
    TokenDecodeError,
    TransportError,
)
from .schemas.auth import AuthResponse, TokenPayload
from .schemas.records import DefaultAuthRecord, DefaultAuthRecordSchema, RawRecordSchema, RecordSchema
from .services._shared.dto import ListOptions, ListResult, ViewOptions
from .services.auth.store import AuthStore
from .services.auth.tokens import decode_token, is_token_expired
from .services.collections.service import CollectionService
from .services.records.service import RecordService

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "AuthResponse",
    "AuthStore",
    "CollectionService",
    "ConfigurationError",
    "Cookie",
    "DefaultAuthRecord",
    "DefaultAuthRecordSchema",
    "HttpError",
    "ListOptions",
    "ListResult",
    "NotFoundError",
    "PocketBase",
    "RawRecordSchema",
    "RecordSchema",
    "RecordService",
    "ResponseDecodeError",
    "TokenDecodeError",
    "TokenPayload",
    "TransportError",
    "ViewOptions",
    "__version__",
    "decode_token",
    "is_token_expired",
    "parse_cookie",
]
