# pocketbase_client/services/collections/service.py
from __future__ import annotations

from typing import Final, TypeVar

from pocketbase_client.services._shared.base import BaseService

R = TypeVar("R")

COLLECTIONS_PATH: Final[str] = "/api/collections"


class CollectionService(BaseService[R]):
    """Requests about the collections themselves rather than their records."""

    @property
    def base_crud_path(self) -> str:
        """Path every collection-management route lives under."""
        return COLLECTIONS_PATH

    def get_full_list(self) -> str:
        """
        Return the raw body of the collections listing.

        The body is not interpreted and no bearer header is sent.
        """
        # TODO: send the bearer header once this listing is decoded into collection models.
        return self.send("GET", self.base_crud_path, auth=False).text
