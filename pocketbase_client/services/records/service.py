# pocketbase_client/services/records/service.py
from __future__ import annotations

import logging
from typing import Any, Final, TypeVar
from urllib.parse import quote

from marshmallow import ValidationError

from pocketbase_client.core.errors import ApiError, NotFoundError
from pocketbase_client.schemas.auth import AuthRequestSchema, AuthResponse, AuthResponseSchema
from pocketbase_client.schemas.common import ListResponseSchema, SchemaLike, as_schema
from pocketbase_client.schemas.records import RawRecordSchema, RecordIdSchema, RecordSchema
from pocketbase_client.services._shared.base import BaseService, ClientState, load_error, parse_json
from pocketbase_client.services._shared.dto import ListOptions, ListResult, ViewOptions

log = logging.getLogger(__name__)

R = TypeVar("R")

FULL_LIST_BATCH_SIZE: Final[int] = 1000

_auth_request_schema = AuthRequestSchema()
_record_id_schema = RecordIdSchema()


class RecordService(BaseService[R]):
    """
    CRUD and authentication over the records of one collection.

    Instances are cheap views over the client's shared state; build them
    with :meth:`PocketBase.collection`. Every ``schema`` argument decides the
    type of the returned records (a dict through
    :class:`~pocketbase_client.schemas.records.RawRecordSchema` by default).
    """

    def __init__(self, state: ClientState[R], collection_id_or_name: str) -> None:
        super().__init__(state)
        self.collection_id_or_name = collection_id_or_name

    @property
    def records_path(self) -> str:
        return f"/api/collections/{self.collection_id_or_name}/records"

    def _record_path(self, record_id: str) -> str:
        return f"{self.records_path}/{quote(record_id, safe='')}"

    # ------------------------------------------------------------------ #
    # Reads
    # ------------------------------------------------------------------ #

    def get_list(
        self,
        options: ListOptions | None = None,
        *,
        schema: SchemaLike = RawRecordSchema,
    ) -> ListResult[Any]:
        """
        Fetch one page of records.

        :param options: Pagination, filter, sort and projection options.
        :param schema: Schema applied to every item.
        :returns: The page and its metadata.
        :raises HttpError: When the backend answers with an error body.
        """
        query = (options or ListOptions()).to_query()
        response = self.send("GET", f"{self.records_path}{query}")
        return self.handle_response_body(response, ListResponseSchema(item_schema=schema))

    def get_one(
        self,
        record_id: str,
        options: ViewOptions | None = None,
        *,
        schema: SchemaLike = RawRecordSchema,
    ) -> Any:
        """
        Fetch one record by id.

        :raises HttpError: 404 when the id does not exist.
        """
        query = (options or ViewOptions()).to_query()
        response = self.send("GET", f"{self._record_path(record_id)}{query}")
        return self.handle_response_body(response, schema)

    def get_full_list(self, *, schema: SchemaLike = RawRecordSchema) -> list[Any]:
        """
        Fetch every record of the collection, page after page.

        Pages of :data:`FULL_LIST_BATCH_SIZE` items are requested in order
        until a page comes back shorter than its ``per_page``. The first
        error stops the pagination and is raised.
        """
        items: list[Any] = []
        page_index = 1
        while True:
            page = self.get_list(
                ListOptions.paginated_and_skip(page_index, FULL_LIST_BATCH_SIZE), schema=schema
            )
            items.extend(page.items)
            if len(page.items) < page.per_page:
                break
            page_index += 1
        log.debug(
            "Fetched %d records of %s in %d page(s)",
            len(items),
            self.collection_id_or_name,
            page_index,
        )
        return items

    def get_first_list_item(
        self,
        filter: str,
        options: ViewOptions | None = None,
        *,
        schema: SchemaLike = RawRecordSchema,
    ) -> Any:
        """
        Return the first record matching ``filter``.

        Same as :meth:`get_list` with page 1 and a page size of 1.

        :raises NotFoundError: When no record matches.
        """
        page = self.get_list(ListOptions.from_view(1, 1, filter, options), schema=schema)
        if not page.items:
            raise NotFoundError()
        return page.items[0]

    # ------------------------------------------------------------------ #
    # Writes
    # ------------------------------------------------------------------ #

    def create(
        self,
        body: Any,
        options: ViewOptions | None = None,
        *,
        schema: SchemaLike = RawRecordSchema,
    ) -> Any:
        """Create a record from the JSON-serializable ``body`` and return it."""
        query = (options or ViewOptions()).to_query()
        response = self.send("POST", f"{self.records_path}{query}", json=body)
        return self.handle_response_body(response, schema)

    def update(
        self,
        record_id: str,
        body: Any,
        options: ViewOptions | None = None,
        *,
        schema: SchemaLike = RawRecordSchema,
    ) -> Any:
        """
        Patch a record and return its new state.

        When the patched record is the authenticated one, the auth store's
        record is replaced by the new state.
        """
        query = (options or ViewOptions()).to_query()
        response = self.send("PATCH", f"{self._record_path(record_id)}{query}", json=body)
        self._sync_auth_record(parse_json(response.text))
        return self.handle_response_body(response, schema)

    def delete(self, record_id: str) -> None:
        """
        Delete a record.

        An empty body means success. A non-empty body is raised as
        :class:`HttpError` when it has the error shape, and otherwise still
        treated as success.
        """
        response = self.send("DELETE", self._record_path(record_id))
        if not response.text:
            return
        error = load_error(parse_json(response.text))
        if error is not None:
            raise error
        log.warning(
            "Ignoring unexpected body (status %s) after deleting %s/%s",
            response.status,
            self.collection_id_or_name,
            record_id,
        )

    # ------------------------------------------------------------------ #
    # Authentication
    # ------------------------------------------------------------------ #

    def auth_with_password(self, identity: str, password: str) -> AuthResponse[R]:
        """
        Authenticate with an identity (usually an email) and a password.

        The body is decoded twice. The identity part (token, record id and
        collection) updates the auth store as soon as it decodes; the full
        response, with the record decoded through the client's record
        schema, is what gets returned. A record that does not fit the
        client's schema therefore raises here while the store already holds
        the new token, without a record.

        :raises HttpError: On bad credentials.
        :raises ResponseDecodeError: When the record does not fit the schema.
        """
        payload = _auth_request_schema.dump({"identity": identity, "password": password})
        response = self.send(
            "POST",
            f"/api/collections/{self.collection_id_or_name}/auth-with-password",
            json=payload,
            auth=False,
        )

        identity_part: AuthResponse[Any] | None
        try:
            identity_part = self.handle_response_body(
                response, AuthResponseSchema(record_schema=RecordSchema)
            )
        except ApiError:
            identity_part = None

        result: AuthResponse[R] | None = None
        failure: ApiError | None = None
        try:
            result = self.handle_response_body(
                response, AuthResponseSchema(record_schema=self.state.record_schema)
            )
        except ApiError as exc:
            failure = exc

        if identity_part is not None:
            record_identity = identity_part.record
            with self.state.auth_store.locked() as store:
                store._set_token(identity_part.token)
                store._set_collection(
                    record_identity["collection_name"], record_identity["collection_id"]
                )
                if result is not None:
                    store._set_record(result.record)
                    store._set_record_id(record_identity["id"])
                else:
                    store._set_record(None)
                    store._set_record_id(None)
            log.info(
                "Authenticated record %s of collection %s",
                record_identity["id"],
                record_identity["collection_name"],
            )

        if failure is not None:
            raise failure
        return result

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _sync_auth_record(self, data: Any) -> None:
        """Replace the stored auth record when ``data`` is its new state."""
        with self.state.auth_store.locked() as store:
            if not store._is_populated():
                return
            if self.collection_id_or_name not in (store._collection_id, store._collection_name):
                return
            try:
                record_id = _record_id_schema.load(data)["id"]
            except ValidationError:
                return
            if record_id != store._record_id:
                return
            try:
                record = as_schema(self.state.record_schema).load(data)
            except ValidationError:
                log.warning("Updated auth record %s does not fit the record schema", record_id)
                return
            store._set_record_id(record_id)
            store._set_record(record)
        log.debug("Auth store record refreshed after self-update of %s", record_id)
