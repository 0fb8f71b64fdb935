"""Unit tests for auth cookie parsing."""

from __future__ import annotations

import pytest

from pocketbase_client import Cookie, parse_cookie


def test_parses_full_cookie() -> None:
    raw = (
        'pb_auth="%7B%22token%22%3A%22abc%22%7D"; Path=/; '
        "Expires=Thu, 01 Jan 2026 00:00:00 GMT; SameSite=Strict; HttpOnly; Secure"
    )

    cookie = parse_cookie(raw)

    assert cookie == Cookie(
        name="pb_auth",
        value='{"token":"abc"}',
        path="/",
        expires="Thu, 01 Jan 2026 00:00:00 GMT",
        same_site="Strict",
        http_only=True,
        secure=True,
    )


def test_flags_default_to_false() -> None:
    cookie = parse_cookie("pb_auth=abc; Path=/")

    assert cookie.http_only is False
    assert cookie.secure is False


def test_explicit_flag_values() -> None:
    cookie = parse_cookie("pb_auth=abc; HttpOnly=false; Secure=true")

    assert cookie.http_only is False
    assert cookie.secure is True


def test_empty_value_has_no_name() -> None:
    cookie = parse_cookie("pb_auth=; Path=/")

    assert cookie.name is None
    assert cookie.path == "/"


def test_unknown_attributes_are_ignored() -> None:
    assert parse_cookie("pb_auth=abc; Domain=example.com; Max-Age=10").value == "abc"


def test_invalid_flag_raises() -> None:
    with pytest.raises(ValueError):
        parse_cookie("pb_auth=abc; Secure=maybe")
