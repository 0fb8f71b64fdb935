"""Exception hierarchy raised by the client.

Every fallible operation raises a subclass of :class:`ApiError`; callers
that only care about "the call failed" can catch the base class, while
callers that need the backend status inspect :class:`HttpError`.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any


def _http_status_to_code(status_code: int) -> str:
    """Map common HTTP status codes to canonical, stable error codes."""
    mapping = {
        400: "bad_request",
        401: "unauthorized",
        403: "forbidden",
        404: "not_found",
        405: "method_not_allowed",
        409: "conflict",
        413: "payload_too_large",
        415: "unsupported_media_type",
        422: "unprocessable_entity",
        429: "too_many_requests",
        500: "internal_server_error",
        503: "service_unavailable",
    }
    return mapping.get(status_code, "error")


class ApiError(Exception):
    """
    Base class for every error surfaced by the client.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    code : str, optional
        Machine-readable identifier, typically snake_case. Defaults to
        ``"error"``.
    details : dict[str, Any] | None, optional
        Optional structured payload (e.g., validation messages).

    Attributes
    ----------
    message : str
        Error summary.
    code : str
        Stable machine-readable identifier.
    details : dict[str, Any]
        Arbitrary context specific to the error instance.
    """

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class HttpError(ApiError):
    """
    Error reported by the backend through its ``{message, status}`` body.

    :param status_code: HTTP status reported by the backend.
    :type status_code: int
    :param message: Backend message.
    :type message: str
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message, code=_http_status_to_code(int(status_code)))
        self.status_code = int(status_code)

    def __str__(self) -> str:
        return f"HTTP error {self.status_code}: {self.message}"


class NotFoundError(HttpError):
    """404 raised locally when a filtered lookup yields no record."""

    def __init__(self, message: str = "There is no record matching the filter.") -> None:
        super().__init__(HTTPStatus.NOT_FOUND, message)


class TransportError(ApiError):
    """The request never produced a response (DNS, refused connection, TLS...)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="transport_error")


class TokenDecodeError(ApiError):
    """The bearer token could not be decoded."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message, code="invalid_token")


class ResponseDecodeError(ApiError):
    """
    The body matched neither the expected shape nor the error shape.

    :param status_code: HTTP status of the raw response.
    :type status_code: int
    :param errors: Validation messages of the failed success decode.
    :type errors: Any
    """

    def __init__(self, status_code: int, errors: Any = None) -> None:
        super().__init__(
            "Unexpected response body",
            code="decode_error",
            details={"errors": errors} if errors else None,
        )
        self.status_code = int(status_code)


class ConfigurationError(ApiError):
    """Raised at construction time for an unusable client configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="configuration_error")


__all__ = [
    "ApiError",
    "ConfigurationError",
    "HttpError",
    "NotFoundError",
    "ResponseDecodeError",
    "TokenDecodeError",
    "TransportError",
]
