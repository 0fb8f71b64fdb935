"""Client handle wiring the transport, the auth store and the services."""

from __future__ import annotations

from typing import Any, Generic, TypeVar
from urllib.parse import urlsplit

import requests

from pocketbase_client.core.config import BaseConfig, get_config
from pocketbase_client.core.errors import ConfigurationError
from pocketbase_client.core.logger import configure_logging
from pocketbase_client.infra.http.transport import HttpTransport
from pocketbase_client.schemas.common import SchemaLike
from pocketbase_client.schemas.records import DefaultAuthRecordSchema
from pocketbase_client.services._shared.base import ClientState
from pocketbase_client.services.auth.store import AuthStore
from pocketbase_client.services.collections.service import CollectionService
from pocketbase_client.services.records.service import RecordService

R = TypeVar("R")


def normalize_base_url(base_url: str) -> str:
    """
    Strip one trailing slash and check the URL is usable.

    :param base_url: Backend root such as ``http://localhost:8090/``.
    :returns: The URL without its trailing slash.
    :raises ConfigurationError: When the result still ends with a slash or
        is not an absolute http(s) URL.
    """
    url = base_url[:-1] if base_url.endswith("/") else base_url
    if url.endswith("/"):
        raise ConfigurationError(f"Base URL must end with at most one slash: {base_url!r}")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigurationError(f"Base URL must be an absolute http(s) URL: {base_url!r}")
    return url


class PocketBase(Generic[R]):
    """
    Entry point of the client.

    Holds the base URL, the HTTP transport and the auth store, and hands
    out services sharing them. ``record_schema`` decodes the record of the
    authenticated user (``R``); it defaults to
    :class:`~pocketbase_client.schemas.records.DefaultAuthRecordSchema`.

    Example::

        pb = PocketBase("http://localhost:8090/")
        pb.collection("_superusers").auth_with_password("me@example.com", "secret")
        pb.auth_store.is_superuser()
    """

    def __init__(
        self,
        base_url: str,
        *,
        record_schema: SchemaLike = DefaultAuthRecordSchema,
        session: requests.Session | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._state: ClientState[R] = ClientState(
            base_url=normalize_base_url(base_url),
            transport=HttpTransport(session, user_agent=user_agent),
            auth_store=AuthStore(),
            record_schema=record_schema,
        )
        self.collections: CollectionService[R] = CollectionService(self._state)

    @classmethod
    def from_config(
        cls,
        config: type[BaseConfig] | Any | None = None,
        *,
        record_schema: SchemaLike = DefaultAuthRecordSchema,
    ) -> PocketBase[Any]:
        """
        Build a client from a configuration class or object.

        :param config: Defaults to :func:`get_config`.
        :param record_schema: Schema of the auth record.
        """
        cfg = get_config() if config is None else config
        if getattr(cfg, "CONFIGURE_LOGGING", False):
            configure_logging(getattr(cfg, "LOG_LEVEL", "INFO"))
        return cls(
            cfg.BASE_URL,
            record_schema=record_schema,
            user_agent=getattr(cfg, "USER_AGENT", None),
        )

    @property
    def base_url(self) -> str:
        return self._state.base_url

    @property
    def auth_store(self) -> AuthStore[R]:
        """Authentication snapshot shared with every service."""
        return self._state.auth_store

    def collection(self, collection_id_or_name: str) -> RecordService[R]:
        """Return the record service of one collection."""
        return RecordService(self._state, collection_id_or_name)

    def close(self) -> None:
        self._state.transport.close()
