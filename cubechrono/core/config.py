"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Final

from dotenv import load_dotenv

from cubechrono.services.auth.dto import AuthSettings

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'


# Load .env in development (no-op when the file is missing)
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


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, falling back to ``default``."""
    val = os.getenv(name)
    return default if val is None or not val.strip() else int(val)


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    STORAGE_BACKEND: str
        ``"mongo"`` for MongoDB collections, ``"memory"`` for in-process stores.
    MONGO_URI: str
        Connection string consumed by pymongo.
    MONGO_DATABASE: str
        Database holding the ``accounts``, ``refresh_tokens`` and ``sessions``
        collections.
    JWT_ACCESS_SECRET: str
        HMAC secret for access tokens.
    JWT_REFRESH_SECRET: str
        HMAC secret for refresh tokens; independent from the access secret so
        rotating one does not invalidate the other token class.
    ACCESS_TOKEN_TTL_SECONDS: int
        Access token lifetime (15 minutes by default).
    REFRESH_TOKEN_TTL_SECONDS: int
        Refresh token lifetime (30 days by default).
    REFRESH_TOKEN_REAP_GRACE_SECONDS: int
        How long MongoDB keeps an expired refresh record before its TTL index
        removes it (7 days by default). Refresh answers ``token_expired`` while
        the record survives, ``token_invalid`` afterwards.
    ARGON2_PARAMS: dict
        Keyword arguments for :class:`argon2.PasswordHasher`; empty keeps the
        library defaults.
    AUTH_LOGIN_RATE_LIMIT: str
        Flask-Limiter rule applied to the login endpoint.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated list of allowed origins for CORS.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Storage
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mongo")
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://127.0.0.1:27017")
    MONGO_DATABASE = os.getenv("MONGO_DATABASE", "cube-chrono")
    MONGO_TIMEOUT_MS = env_int("MONGO_TIMEOUT_MS", 5000)

    # Secrets / security
    SECRET_KEY = os.getenv("SECRET_KEY", "CHANGE_ME")
    JWT_ACCESS_SECRET = os.getenv("JWT_ACCESS_SECRET", "CHANGE_ME_ACCESS")
    JWT_REFRESH_SECRET = os.getenv("JWT_REFRESH_SECRET", "CHANGE_ME_REFRESH")
    ACCESS_TOKEN_TTL_SECONDS = env_int("ACCESS_TOKEN_TTL_SECONDS", 15 * 60)
    REFRESH_TOKEN_TTL_SECONDS = env_int("REFRESH_TOKEN_TTL_SECONDS", 30 * 24 * 3600)
    REFRESH_TOKEN_REAP_GRACE_SECONDS = env_int("REFRESH_TOKEN_REAP_GRACE_SECONDS", 7 * 24 * 3600)
    ARGON2_PARAMS: dict[str, int] = {}

    # First-run admin (consumed by `flask accounts bootstrap-admin`)
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    # Rate limiting
    AUTH_LOGIN_RATE_LIMIT = os.getenv("AUTH_LOGIN_RATE_LIMIT", "5 per minute")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_ENABLED = env_bool("RATELIMIT_ENABLED", True)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # Flask built-ins
    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development."""

    DEBUG = env_bool("FLASK_DEBUG", True)
    CORS_MAX_AGE = 600  # 10 minutes


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Uses in-memory stores so no MongoDB server is required.
    - Cheap Argon2 parameters keep hashing fast.
    - Disables rate limiting.
    """

    TESTING = True
    DEBUG = False
    STORAGE_BACKEND = "memory"
    JWT_ACCESS_SECRET = "test-access-secret"
    JWT_REFRESH_SECRET = "test-refresh-secret"
    ARGON2_PARAMS = {"time_cost": 1, "memory_cost": 8, "parallelism": 1}
    RATELIMIT_ENABLED = False
    LOG_LEVEL = "WARNING"


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments."""

    DEBUG = False
    PROPAGATE_EXCEPTIONS = False


# Map names -> classes (simple, explicit)
CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)


def auth_settings_from(config: Mapping[str, Any]) -> AuthSettings:
    """Freeze the token-related config keys into an :class:`AuthSettings`."""
    return AuthSettings(
        access_secret=str(config["JWT_ACCESS_SECRET"]),
        refresh_secret=str(config["JWT_REFRESH_SECRET"]),
        access_expires=timedelta(seconds=int(config["ACCESS_TOKEN_TTL_SECONDS"])),
        refresh_expires=timedelta(seconds=int(config["REFRESH_TOKEN_TTL_SECONDS"])),
    )
