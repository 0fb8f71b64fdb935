"""Unit tests for the error hierarchy."""

from __future__ import annotations

import pytest

from pocketbase_client import (
    ApiError,
    ConfigurationError,
    HttpError,
    NotFoundError,
    ResponseDecodeError,
    TokenDecodeError,
    TransportError,
)


@pytest.mark.parametrize(
    ("status", "code"),
    [(400, "bad_request"), (401, "unauthorized"), (403, "forbidden"), (404, "not_found"), (418, "error")],
)
def test_http_error_codes(status: int, code: str) -> None:
    error = HttpError(status, "boom")

    assert error.status_code == status
    assert error.code == code
    assert str(error) == f"HTTP error {status}: boom"


def test_not_found_defaults() -> None:
    error = NotFoundError()

    assert isinstance(error, HttpError)
    assert error.status_code == 404
    assert error.message == "There is no record matching the filter."


@pytest.mark.parametrize(
    "error",
    [
        TransportError("refused"),
        TokenDecodeError(),
        ResponseDecodeError(200, {"id": ["Missing data for required field."]}),
        ConfigurationError("bad url"),
        HttpError(500, "oops"),
    ],
)
def test_every_error_is_an_api_error(error: Exception) -> None:
    assert isinstance(error, ApiError)


def test_response_decode_error_keeps_validation_messages() -> None:
    error = ResponseDecodeError(502, {"id": ["Missing data for required field."]})

    assert error.status_code == 502
    assert error.code == "decode_error"
    assert error.details == {"errors": {"id": ["Missing data for required field."]}}
