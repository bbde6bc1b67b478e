# This file defines runtime settings for the API layer in one place.
# It exists so the mount path, pagination bounds, store timeouts, and collection names can be configured without code edits.
# The config loader reads environment variables and applies the defaults the public API has always used.
# It also validates collection names so a typo fails at startup instead of on the first request.

from __future__ import annotations

import os
import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.common.settings import load_settings

_COLLECTION_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_.-]*$")


class ApiConfig(BaseModel):
    """Typed API runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_name: str = "Wormhole Query API"
    api_path: str = "/api"
    host: str = "0.0.0.0"
    port: int = 4000
    environment: str = "local"
    mongodb_uri: str
    database_name: str = "wormhole"
    default_page_size: int = 20
    max_page_size: int = 100
    request_timeout_seconds: int = 30
    allowed_origins: list[str] = Field(default_factory=list)
    heartbeats_collection: str = "heartbeats"
    vaas_collection: str = "vaas"
    observations_collection: str = "observations"
    app_version: str = "0.1.0"

    @field_validator("api_path")
    @classmethod
    def validate_api_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_path must start with '/'.")
        return value.rstrip("/")

    @field_validator("heartbeats_collection", "vaas_collection", "observations_collection")
    @classmethod
    def validate_collection_name(cls, value: str) -> str:
        if not _COLLECTION_NAME_RE.match(value) or value.startswith("system."):
            raise ValueError(f"Invalid MongoDB collection name: {value!r}")
        return value

    @field_validator("default_page_size", "max_page_size", "request_timeout_seconds")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @model_validator(mode="after")
    def validate_page_bounds(self) -> ApiConfig:
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size must be <= max_page_size.")
        return self

    @property
    def request_timeout_ms(self) -> int:
        return self.request_timeout_seconds * 1000


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load API configuration from `.env` and process environment."""

    settings = load_settings(load_env=load_env)

    config_values: dict[str, object] = {
        "api_name": os.getenv("API_NAME", "Wormhole Query API"),
        "api_path": os.getenv("API_PATH", "/api"),
        "host": os.getenv("API_HOST", "0.0.0.0"),
        "port": _env_int("API_PORT", 4000),
        "environment": settings.ENV,
        "mongodb_uri": settings.MONGODB_URI,
        "database_name": settings.MONGODB_DATABASE,
        "default_page_size": _env_int("API_DEFAULT_PAGE_SIZE", 20),
        "max_page_size": _env_int("API_MAX_PAGE_SIZE", 100),
        "request_timeout_seconds": _env_int("API_REQUEST_TIMEOUT_SECONDS", 30),
        "allowed_origins": _env_list("API_ALLOWED_ORIGINS", []),
        "heartbeats_collection": os.getenv("API_HEARTBEATS_COLLECTION", "heartbeats"),
        "vaas_collection": os.getenv("API_VAAS_COLLECTION", "vaas"),
        "observations_collection": os.getenv("API_OBSERVATIONS_COLLECTION", "observations"),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }

    return ApiConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for API config."""

    return load_api_config()
