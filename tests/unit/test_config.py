"""Unit tests for configuration helpers."""

from __future__ import annotations

import pytest

from pocketbase_client.core.config import (
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    get_config,
)


@pytest.mark.parametrize("value", ["1", "true", "YES", " on ", "y"])
def test_env_bool_truthy(monkeypatch, value: str) -> None:
    monkeypatch.setenv("PB_FLAG", value)

    assert env_bool("PB_FLAG") is True


@pytest.mark.parametrize("value", ["0", "false", "no", "", "nope"])
def test_env_bool_falsy(monkeypatch, value: str) -> None:
    monkeypatch.setenv("PB_FLAG", value)

    assert env_bool("PB_FLAG", default=True) is False


def test_env_bool_default_when_unset(monkeypatch) -> None:
    monkeypatch.delenv("PB_FLAG", raising=False)

    assert env_bool("PB_FLAG", default=True) is True


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ("testing", TestingConfig),
        ("Production", ProductionConfig),
        ("development", DevelopmentConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config(monkeypatch, env: str, expected: type) -> None:
    monkeypatch.setenv("PB_ENV", env)

    assert get_config() is expected


def test_get_config_defaults_to_development(monkeypatch) -> None:
    monkeypatch.delenv("PB_ENV", raising=False)

    assert get_config() is DevelopmentConfig


def test_testing_config_keeps_logging_untouched() -> None:
    assert TestingConfig.CONFIGURE_LOGGING is False
