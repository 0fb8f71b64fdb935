"""Client settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "PB_ENV"  # 'development' | 'testing' | 'production'


# Loads .env when present (no-op otherwise)
load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    BASE_URL: str
        Root URL of the backend, with or without one trailing slash.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CONFIGURE_LOGGING: bool
        When ``True`` :meth:`PocketBase.from_config` installs the JSON log
        handler on the root logger.
    USER_AGENT: str
        ``User-Agent`` header sent with every request.

    Notes
    -----
    Values are read once, when the module is imported.
    """

    BASE_URL = os.getenv("POCKETBASE_URL", "http://127.0.0.1:8090")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CONFIGURE_LOGGING = env_bool("PB_CONFIGURE_LOGGING", False)

    USER_AGENT = os.getenv("PB_USER_AGENT", "pocketbase-client/0.1")


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    CONFIGURE_LOGGING = env_bool("PB_CONFIGURE_LOGGING", True)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    Points at a local backend unless ``TEST_POCKETBASE_URL`` is set and
    leaves the root logger alone so pytest keeps capturing records.
    """

    BASE_URL = os.getenv("TEST_POCKETBASE_URL", "http://localhost:8091/")
    CONFIGURE_LOGGING = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``PB_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`PocketBase.from_config`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``PB_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
