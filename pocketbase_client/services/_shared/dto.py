# comments in English; reST docstrings strict
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar
from urllib.parse import quote

E = TypeVar("E")


def _encode(value: str) -> str:
    """Percent-encode ``value``, reserved characters included."""
    return quote(value, safe="")


def _to_query(pairs: Sequence[tuple[str, str | None]]) -> str:
    """Join the set pairs as ``?k=v&k=v`` or return ``""`` when none is set."""
    parts = [f"{key}={value}" for key, value in pairs if value is not None]
    return f"?{'&'.join(parts)}" if parts else ""


@dataclass(frozen=True, slots=True)
class ViewOptions:
    """
    Options to view a collection's record.

    :param fields: Comma separated fields to return (all by default).
    :type fields: str | None
    :param expand: Relations to auto expand.
    :type expand: str | None
    :param sort: Records order attribute.
    :type sort: str | None
    """

    fields: str | None = None
    expand: str | None = None
    sort: str | None = None

    def to_query(self) -> str:
        """
        Encode as a query string (``expand`` then ``sort``).

        :returns: ``""`` or a string starting with ``?``.
        :rtype: str
        """
        return _to_query(
            [
                ("expand", _encode(self.expand) if self.expand is not None else None),
                ("sort", _encode(self.sort) if self.sort is not None else None),
            ]
        )


@dataclass(frozen=True, slots=True)
class ListOptions:
    """
    Query parameters of ``/api/collections/NAME/records``.

    :param page: 1-based page number.
    :type page: int | None
    :param per_page: Number of items per page.
    :type per_page: int | None
    :param skip_total: Skip the (costly) total count on the backend.
    :type skip_total: bool | None
    :param filter: Filter expression.
    :type filter: str | None
    :param fields: Comma separated fields to return.
    :type fields: str | None
    :param expand: Relations to auto expand.
    :type expand: str | None
    :param sort: Records order attribute.
    :type sort: str | None
    """

    page: int | None = None
    per_page: int | None = None
    skip_total: bool | None = None
    filter: str | None = None
    fields: str | None = None
    expand: str | None = None
    sort: str | None = None

    @classmethod
    def paginated(cls, page: int, per_page: int) -> ListOptions:
        """Only care about the page number and its size."""
        return cls(page=page, per_page=per_page)

    @classmethod
    def paginated_and_skip(cls, page: int, per_page: int) -> ListOptions:
        """Like :meth:`paginated`, with ``skip_total`` forced on."""
        return cls(page=page, per_page=per_page, skip_total=True)

    @classmethod
    def from_view(
        cls,
        page: int | None,
        per_page: int | None,
        filter: str | None,
        view_options: ViewOptions | None = None,
    ) -> ListOptions:
        """
        Build list options from view options plus an explicit filter.

        ``skip_total`` is always forced on.
        """
        view = view_options or ViewOptions()
        return cls(
            page=page,
            per_page=per_page,
            skip_total=True,
            filter=filter,
            fields=view.fields,
            expand=view.expand,
            sort=view.sort,
        )

    def to_query(self) -> str:
        """
        Encode as a query string.

        Keys are emitted in a fixed order: ``page``, ``perPage``,
        ``skipTotal``, ``filter``, ``fields``, ``expand``, ``sort``.

        :returns: ``""`` or a string starting with ``?``.
        :rtype: str
        """
        skip_total = None
        if self.skip_total is not None:
            skip_total = "1" if self.skip_total else "0"
        text = {
            "filter": self.filter,
            "fields": self.fields,
            "expand": self.expand,
            "sort": self.sort,
        }
        return _to_query(
            [
                ("page", str(self.page) if self.page is not None else None),
                ("perPage", str(self.per_page) if self.per_page is not None else None),
                ("skipTotal", skip_total),
                *((key, _encode(value) if value is not None else None) for key, value in text.items()),
            ]
        )


@dataclass(frozen=True, slots=True)
class ListResult(Generic[E]):
    """
    One page of records.

    :param items: Records of the page, in server order.
    :type items: list[E]
    :param page: Current page (1-based).
    :type page: int
    :param per_page: Page size requested from the backend.
    :type per_page: int
    :param total_items: Total records, ``-1`` when totals were skipped.
    :type total_items: int
    :param total_pages: Total pages, ``-1`` when totals were skipped.
    :type total_pages: int
    """

    items: list[E] = field(default_factory=list)
    page: int = 1
    per_page: int = 0
    total_items: int = -1
    total_pages: int = -1
