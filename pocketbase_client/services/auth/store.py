# comments in English; reST docstrings
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Final, Generic, TypeVar

from pocketbase_client.core.errors import TokenDecodeError
from pocketbase_client.services.auth.tokens import decode_token, is_token_expired

log = logging.getLogger(__name__)

R = TypeVar("R")

SUPERUSERS_COLLECTION_NAME: Final[str] = "_superusers"
# Fixed id of the built-in superusers collection on the backend.
SUPERUSERS_COLLECTION_ID: Final[str] = "pbc_3142635823"
AUTH_TOKEN_TYPE: Final[str] = "auth"


class AuthStore(Generic[R]):
    """
    Snapshot of who is currently authenticated.

    One instance is owned by a client and shared by every service derived
    from it. All reads and writes go through a single lock, which is never
    held across a network call.

    Only the record services write to the store, through the underscored
    setters and while holding :meth:`locked`.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._token: str | None = None
        self._record: R | None = None
        self._collection_id: str | None = None
        self._collection_name: str | None = None
        self._record_id: str | None = None

    # ------------------------------------------------------------------ #
    # Public read API
    # ------------------------------------------------------------------ #

    @property
    def token(self) -> str | None:
        """Bearer token of the current session, if any."""
        with self._lock:
            return self._token

    @property
    def record(self) -> R | None:
        """Authenticated record, decoded with the client's record schema."""
        with self._lock:
            return self._record

    @property
    def collection_id(self) -> str | None:
        with self._lock:
            return self._collection_id

    @property
    def collection_name(self) -> str | None:
        with self._lock:
            return self._collection_name

    @property
    def record_id(self) -> str | None:
        with self._lock:
            return self._record_id

    def is_valid(self) -> bool:
        """
        Tell whether the store holds a complete, unexpired session.

        :returns: ``True`` iff token, record and collection are all set and
            the token is not expired.
        :rtype: bool
        """
        with self._lock:
            if not self._is_populated():
                return False
            token = self._token
        return not is_token_expired(token)

    def is_superuser(self) -> bool:
        """
        Tell whether the session belongs to the superusers collection.

        The token must be an ``auth`` token, and either the stored collection
        name is ``_superusers`` or the token's collection id is the built-in
        superusers collection id. Undecodable tokens yield ``False``.
        """
        with self._lock:
            if not self._is_populated():
                return False
            token = self._token
            collection_name = self._collection_name
        try:
            payload = decode_token(token)
        except TokenDecodeError:
            return False
        if payload.token_type != AUTH_TOKEN_TYPE:
            return False
        return (
            collection_name == SUPERUSERS_COLLECTION_NAME
            or payload.collection_id == SUPERUSERS_COLLECTION_ID
        )

    def clear(self) -> None:
        """Forget the current session."""
        with self._lock:
            self._token = None
            self._record = None
            self._collection_id = None
            self._collection_name = None
            self._record_id = None
        log.info("Auth store cleared")

    # ------------------------------------------------------------------ #
    # Writer API (record services only)
    # ------------------------------------------------------------------ #

    @contextmanager
    def locked(self) -> Iterator[AuthStore[R]]:
        """Hold the store lock for a read-modify-write sequence."""
        with self._lock:
            yield self

    def _is_populated(self) -> bool:
        # Caller must hold the lock.
        return (
            self._token is not None
            and self._record is not None
            and self._collection_id is not None
            and self._collection_name is not None
        )

    def _set_token(self, token: str) -> None:
        self._token = token

    def _set_record(self, record: R | None) -> None:
        self._record = record

    def _set_collection(self, name: str, collection_id: str) -> None:
        self._collection_name = name
        self._collection_id = collection_id

    def _set_record_id(self, record_id: str | None) -> None:
        self._record_id = record_id

    def __repr__(self) -> str:
        return (
            f"AuthStore(collection_name={self._collection_name!r}, "
            f"record_id={self._record_id!r}, has_token={self._token is not None})"
        )
