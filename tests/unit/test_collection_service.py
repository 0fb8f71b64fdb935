"""Unit tests for the collections listing stub."""

from __future__ import annotations

import responses

from tests.helpers.assertions import assert_anonymous
from tests.helpers.http import BASE_URL


def test_base_crud_path(pb) -> None:
    assert pb.collections.base_crud_path == "/api/collections"


def test_get_full_list_returns_raw_text(pb, mocked) -> None:
    raw = '{"items":[{"id":"pbc_1","name":"articles"}],"page":1}'
    mocked.add(responses.GET, f"{BASE_URL}/api/collections", body=raw)

    assert pb.collections.get_full_list() == raw


def test_get_full_list_never_sends_token(pb, mocked, login, superuser_record) -> None:
    """Even an authenticated client lists collections anonymously."""

    # Arrange
    login(superuser_record)
    mocked.add(responses.GET, f"{BASE_URL}/api/collections", body="{}")

    # Act
    pb.collections.get_full_list()

    # Assert
    assert_anonymous(mocked.calls[-1])


def test_error_status_is_not_interpreted(pb, mocked) -> None:
    mocked.add(responses.GET, f"{BASE_URL}/api/collections", body='{"status":401}', status=401)

    assert pb.collections.get_full_list() == '{"status":401}'
