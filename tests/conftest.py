"""Global pytest fixtures for the PocketBase client."""

from __future__ import annotations

import os
from collections.abc import Generator
from typing import Any, Callable

import pytest
import responses

os.environ.setdefault("PB_ENV", "testing")

from pocketbase_client import PocketBase  # noqa: E402

from tests.factories.record import SuperuserRecordFactory, UserRecordFactory  # noqa: E402
from tests.helpers.auth import auth_body  # noqa: E402
from tests.helpers.http import BASE_URL, auth_url  # noqa: E402


@pytest.fixture()
def mocked() -> Generator[responses.RequestsMock, None, None]:
    """Intercept every ``requests`` call made during the test.

    Returns
    -------
    Generator[responses.RequestsMock, None, None]
        Active mock; register routes with ``mocked.add``.
    """

    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture()
def pb() -> Generator[PocketBase, None, None]:
    """Return a client pointed at the mocked backend."""

    client = PocketBase(f"{BASE_URL}/")
    yield client
    client.close()


@pytest.fixture()
def user_record() -> dict[str, Any]:
    """Wire payload of a regular user."""

    return UserRecordFactory()


@pytest.fixture()
def superuser_record() -> dict[str, Any]:
    """Wire payload of a superuser."""

    return SuperuserRecordFactory()


@pytest.fixture()
def login(pb: PocketBase, mocked: responses.RequestsMock) -> Callable[[dict[str, Any]], Any]:
    """Factory authenticating ``pb`` as the given record payload."""

    def _login(record: dict[str, Any], token: str | None = None) -> Any:
        body = auth_body(record, token)
        mocked.add(responses.POST, auth_url(record["collectionName"]), json=body, status=200)
        return pb.collection(record["collectionName"]).auth_with_password(record["email"], "Passw0rd!")

    return _login


@pytest.fixture()
def freeze_time() -> Callable[[str | None], Any]:
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory
