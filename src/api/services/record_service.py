# This file implements the shared fetch-many and fetch-one operations over a record collection.
# It exists so every record kind applies the same not-found and pagination rules.
# An empty result set is reported as not-found; callers cannot tell "no matches" from "absent".

from __future__ import annotations

import logging
from typing import Any

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.error_handlers import RecordNotFoundError
from src.api.filters import Equality, Filter, to_mongo_query
from src.api.pagination import PaginationOptions

logger = logging.getLogger(__name__)


class RecordService:
    """Filtered reads over one append-only collection."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient, collection_name: str) -> None:
        self.config = config
        self.db = db
        self.collection_name = collection_name

    def fetch_many(
        self,
        record_filter: Filter,
        pagination: PaginationOptions | None = None,
    ) -> list[dict[str, Any]]:
        """Return every matching record, newest first when paginated."""

        if pagination is None:
            rows = self.db.find_many(self.collection_name, to_mongo_query(record_filter))
        else:
            query = to_mongo_query(pagination.apply(record_filter))
            rows = self.db.find_many(
                self.collection_name,
                query,
                sort=pagination.sort,
                skip=pagination.skip,
                limit=pagination.limit,
            )

        if not rows:
            raise RecordNotFoundError(collection=self.collection_name)
        logger.debug("Fetched %d records from %s", len(rows), self.collection_name)
        return rows

    def fetch_one(self, record_filter: Equality) -> dict[str, Any]:
        row = self.db.find_one(self.collection_name, to_mongo_query(record_filter))
        if row is None:
            raise RecordNotFoundError(
                collection=self.collection_name,
                message=f"No record {record_filter.record_id!r} in {self.collection_name}.",
            )
        return row
