"""Authentication helpers for tests."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

TEST_SIGNING_KEY = "unit-test-signing-key-0123456789abcdef"


def issue_token(
    collection_id: str,
    record_id: str,
    expires_delta: timedelta | None = None,
    *,
    token_type: str = "auth",
    now: datetime | None = None,
) -> str:
    """Generate a backend-like auth token.

    Parameters
    ----------
    collection_id:
        Collection the authenticated record belongs to.
    record_id:
        Authenticated record id (the token subject).
    expires_delta:
        Optional expiry delta. Defaults to one hour.
    token_type:
        Value of the ``type`` claim.
    now:
        Reference instant; defaults to the current time.

    Returns
    -------
    str
        Encoded JWT string.
    """

    issued = now or datetime.now(UTC)
    exp = issued + (expires_delta if expires_delta is not None else timedelta(hours=1))
    payload = {
        "collectionId": collection_id,
        "exp": int(exp.timestamp()),
        "id": record_id,
        "refreshable": True,
        "type": token_type,
    }
    return jwt.encode(payload, TEST_SIGNING_KEY, algorithm="HS256")


def expired_token(collection_id: str, record_id: str) -> str:
    """Return an already expired token."""

    return issue_token(collection_id, record_id, expires_delta=timedelta(seconds=-1))


def auth_body(record: dict, token: str | None = None) -> dict:
    """Build the body of a successful password authentication for ``record``."""

    return {
        "token": token or issue_token(record["collectionId"], record["id"]),
        "record": record,
    }
