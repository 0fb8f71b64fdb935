# pocketbase_client/services/_shared/base.py
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from marshmallow import ValidationError

from pocketbase_client.core.errors import HttpError, ResponseDecodeError
from pocketbase_client.infra.http.transport import HttpResponse, HttpTransport
from pocketbase_client.schemas.common import ResponseErrorSchema, SchemaLike, as_schema
from pocketbase_client.services.auth.store import AuthStore

log = logging.getLogger(__name__)

R = TypeVar("R")

_error_schema = ResponseErrorSchema()


@dataclass(slots=True)
class ClientState(Generic[R]):
    """
    State shared by a client and every service derived from it.

    :param base_url: Backend root, without trailing slash.
    :param transport: Shared HTTP transport.
    :param auth_store: Shared authentication snapshot.
    :param record_schema: Schema decoding the auth record type ``R``.
    """

    base_url: str
    transport: HttpTransport
    auth_store: AuthStore[R]
    record_schema: SchemaLike


def parse_json(text: str) -> Any:
    """Return the JSON value of ``text`` or ``None`` when it is not JSON."""
    try:
        return json.loads(text)
    except ValueError:
        return None


def load_error(data: Any) -> HttpError | None:
    """Return the backend error described by ``data``, if it has the error shape."""
    try:
        error = _error_schema.load(data)
    except ValidationError:
        return None
    return HttpError(error["status"], error["message"])


class BaseService(Generic[R]):
    """
    Base class for services talking to the backend.

    Responsibilities
    ----------------
    * Hold a reference (never a copy) to the client's shared state.
    * Attach the bearer token when one is stored.
    * Disambiguate success bodies from error bodies.
    """

    def __init__(self, state: ClientState[R]) -> None:
        self.state = state

    # ------------------------------ HTTP ---------------------------------

    def auth_headers(self) -> dict[str, str]:
        """
        Build the ``Authorization`` header from the stored token.

        The token is sent whenever present, valid or not; the backend owns
        authorization decisions.
        """
        token = self.state.auth_store.token
        if token is None:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def send(self, method: str, path: str, *, json: Any = None, auth: bool = True) -> HttpResponse:
        """
        Send a request to ``base_url + path``.

        :param method: HTTP verb.
        :param path: Path (and query string) below the base URL.
        :param json: Optional JSON body.
        :param auth: Attach the bearer header when a token is stored.
        :raises TransportError: On network failure.
        """
        headers = self.auth_headers() if auth else {}
        return self.state.transport.request(
            method, f"{self.state.base_url}{path}", headers=headers, json=json
        )

    # --------------------------- Decoding --------------------------------

    def handle_response_body(self, response: HttpResponse, schema: SchemaLike) -> Any:
        """
        Decode ``response`` with ``schema``, falling back to the error shape.

        :returns: Whatever ``schema.load`` returns.
        :raises HttpError: When the body is a backend error.
        :raises ResponseDecodeError: When the body matches neither shape.
        """
        data = parse_json(response.text)
        try:
            return as_schema(schema).load(data)
        except ValidationError as exc:
            error = load_error(data)
            if error is not None:
                raise error from None
            log.warning(
                "Undecodable response body (status %s) from %s",
                response.status,
                response.url,
            )
            raise ResponseDecodeError(response.status, exc.messages) from exc
