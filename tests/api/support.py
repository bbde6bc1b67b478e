# This file provides shared helpers for API endpoint tests.
# It exists so tests can override the database dependency without touching a real MongoDB.
# Seeded clients run on mongomock, which evaluates the same query documents the API sends to MongoDB.
# Centralized test wiring keeps API tests small and focused on behavior.

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta
from typing import Any

import mongomock
from fastapi.testclient import TestClient

from src.api.api_config import ApiConfig
from src.api.app import app
from src.api.db_access import DatabaseClient
from src.api.dependencies import get_config, get_database_client

BASE_TIME = datetime(2024, 3, 1, 12, 0, 0)


def build_test_config(**overrides: Any) -> ApiConfig:
    """Create deterministic API config for tests."""

    values: dict[str, Any] = {
        "api_name": "Test Wormhole API",
        "api_path": "/api",
        "host": "0.0.0.0",
        "port": 4000,
        "environment": "test",
        "mongodb_uri": "mongodb://localhost:27017",
        "database_name": "wormhole",
        "default_page_size": 20,
        "max_page_size": 100,
        "request_timeout_seconds": 5,
        "allowed_origins": [],
        "heartbeats_collection": "heartbeats",
        "vaas_collection": "vaas",
        "observations_collection": "observations",
        "app_version": "0.1.0",
    }
    values.update(overrides)
    return ApiConfig(**values)


def created_at(offset_seconds: int) -> datetime:
    return BASE_TIME + timedelta(seconds=offset_seconds)


def vaa_doc(chain: str, emitter: str, sequence: int | str, offset_seconds: int) -> dict[str, Any]:
    return {
        "_id": f"{chain}/{emitter}/{sequence}",
        "vaas": f"AQAAAA{chain}{sequence}",
        "createdAt": created_at(offset_seconds),
        "updatedAt": created_at(offset_seconds),
    }


def observation_doc(
    chain: str,
    emitter: str,
    sequence: int | str,
    signer: str,
    digest: str,
    offset_seconds: int,
) -> dict[str, Any]:
    return {
        "_id": f"{chain}/{emitter}/{sequence}/{signer}/{digest}",
        "signature": f"sig-{signer}",
        "txHash": digest,
        "createdAt": created_at(offset_seconds),
    }


def build_mongomock_client(
    *,
    heartbeats: Iterable[dict[str, Any]] = (),
    vaas: Iterable[dict[str, Any]] = (),
    observations: Iterable[dict[str, Any]] = (),
    database_name: str = "wormhole",
) -> DatabaseClient:
    """Return a DatabaseClient over an in-memory MongoDB seeded with documents."""

    client = mongomock.MongoClient()
    database = client[database_name]
    for collection_name, documents in (
        ("heartbeats", list(heartbeats)),
        ("vaas", list(vaas)),
        ("observations", list(observations)),
    ):
        if documents:
            database[collection_name].insert_many(documents)
    return DatabaseClient(client=client, database_name=database_name)


class FakeDBClient:
    """Simple fake DB dependency for health/readiness endpoint tests."""

    def __init__(self, *, connected: bool = True, existing_collections: set[str] | None = None) -> None:
        self._connected = connected
        self._collections = (
            existing_collections
            if existing_collections is not None
            else {"heartbeats", "vaas", "observations"}
        )

    def can_connect(self) -> bool:
        return self._connected

    def collection_exists(self, collection_name: str) -> bool:
        return self._connected and collection_name in self._collections


@contextmanager
def api_test_client(
    *,
    config: ApiConfig | None = None,
    db_client: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if db_client is not None:
        app.dependency_overrides[get_database_client] = lambda: db_client

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
