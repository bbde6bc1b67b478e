# This file implements read access to guardian heartbeats.
# Heartbeats have no identifier structure the API relies on, so they are only listed whole.

from __future__ import annotations

from typing import Any

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.filters import MatchAll
from src.api.services.record_service import RecordService


class HeartbeatService(RecordService):
    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        super().__init__(config=config, db=db, collection_name=config.heartbeats_collection)

    def list_heartbeats(self) -> list[dict[str, Any]]:
        # Never paginated.
        return self.fetch_many(MatchAll())
