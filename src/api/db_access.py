# This file wraps MongoDB access so API services can run read queries through one handle.
# It exists to keep driver details out of router code and make testing easier.
# One client is created at startup and shared by every request; pymongo clients are thread-safe.
# Reads are never retried, so store failures surface to the caller as server errors.

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from src.api.pagination import SortSpec

logger = logging.getLogger(__name__)


class DatabaseClient:
    """Minimal pymongo wrapper for API read access."""

    def __init__(
        self,
        *,
        database_name: str,
        mongodb_uri: str | None = None,
        timeout_ms: int = 30_000,
        client: MongoClient | None = None,
    ) -> None:
        if client is None:
            if not mongodb_uri:
                raise ValueError("mongodb_uri is required when no client is supplied.")
            client = MongoClient(
                mongodb_uri,
                serverSelectionTimeoutMS=timeout_ms,
                connectTimeoutMS=timeout_ms,
                socketTimeoutMS=timeout_ms,
                retryReads=False,
            )
        self._client = client
        self._database: Database = client[database_name]

    @property
    def database(self) -> Database:
        return self._database

    def can_connect(self) -> bool:
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    def collection_exists(self, collection_name: str) -> bool:
        return collection_name in self._database.list_collection_names()

    def find_many(
        self,
        collection_name: str,
        query: Mapping[str, Any],
        *,
        sort: SortSpec | None = None,
        skip: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        cursor = self._database[collection_name].find(dict(query))
        if sort is not None:
            cursor = cursor.sort([(sort.field, sort.direction)])
        if skip is not None:
            cursor = cursor.skip(skip)
        if limit is not None:
            cursor = cursor.limit(limit)
        return list(cursor)

    def find_one(self, collection_name: str, query: Mapping[str, Any]) -> dict[str, Any] | None:
        return self._database[collection_name].find_one(dict(query))

    def aggregate(
        self, collection_name: str, pipeline: Sequence[Mapping[str, Any]]
    ) -> list[dict[str, Any]]:
        return list(self._database[collection_name].aggregate([dict(stage) for stage in pipeline]))

    def close(self) -> None:
        self._client.close()
