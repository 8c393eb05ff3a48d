"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass


def resolve_int_env(name: str, default: int, minimum: int | None = None) -> int:
    """Read an integer env var, falling back to ``default`` and clamping to ``minimum``."""

    raw = os.getenv(name)
    try:
        value = int(raw) if raw else default
    except ValueError:
        value = default
    if minimum is not None:
        value = max(minimum, value)
    return value


def resolve_cors_origins() -> str | tuple[str, ...]:
    """Parse CORS_ORIGINS: ``*`` or a comma-separated origin list."""

    raw = (os.getenv("CORS_ORIGINS") or "*").strip()
    if raw == "*":
        return raw
    return tuple(o.strip() for o in raw.split(",") if o.strip())


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Upper bound for a single /tickets request.
    MAX_TICKETS_PER_REQUEST: int = resolve_int_env("MAX_TICKETS_PER_REQUEST", 50, minimum=1)

    CORS_ORIGINS: str | tuple[str, ...] = resolve_cors_origins()


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Configuration used by the test suite."""

    TESTING: bool = True
    DEBUG: bool = False
    MAX_TICKETS_PER_REQUEST: int = 10


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
