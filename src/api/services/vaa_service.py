# This file implements read services for signed VAAs.
# It exists so routers can stay transport-focused while identifier filters and aggregation live in one layer.
# VAA identifiers are `chain/emitter/sequence`; three segments address exactly one VAA.
# The per-chain histogram buckets identifiers lexicographically against a fixed boundary list.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.error_handlers import RecordNotFoundError
from src.api.filters import ID_FIELD, Equality
from src.api.identifiers import (
    VAA_ID_SEGMENTS,
    build_record_id,
    chain_exclusion_filter,
    id_filter,
)
from src.api.pagination import PaginationOptions
from src.api.services.record_service import RecordService

# Sorted as strings, not numbers. The last boundary is an exclusive upper
# bound, so `9/...` identifiers land in the default bucket. New chains must be
# added here by hand.
VAA_COUNT_BOUNDARIES: Final[tuple[str, ...]] = (
    "1/",
    "10/",
    "11/",
    "12/",
    "13/",
    "14/",
    "15/",
    "16/",
    "18/",
    "2/",
    "26/",
    "3/",
    "4/",
    "5/",
    "6/",
    "7/",
    "8/",
    "9/",
)
UNKNOWN_BUCKET: Final[str] = "unknown"


def build_vaa_count_pipeline() -> list[dict[str, Any]]:
    return [
        {
            "$bucket": {
                "groupBy": f"${ID_FIELD}",
                "boundaries": list(VAA_COUNT_BOUNDARIES),
                "default": UNKNOWN_BUCKET,
                "output": {"count": {"$sum": 1}},
            }
        }
    ]


class VaaService(RecordService):
    """Data retrieval for VAA API routes."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        super().__init__(config=config, db=db, collection_name=config.vaas_collection)

    def list_vaas(
        self,
        segments: Sequence[str],
        *,
        pagination: PaginationOptions,
    ) -> list[dict[str, Any]]:
        """List VAAs under a chain or chain/emitter prefix (or all, with no segments)."""

        if len(segments) >= VAA_ID_SEGMENTS:
            raise ValueError("Use get_vaa for a complete VAA identifier.")
        return self.fetch_many(id_filter(segments, full_length=VAA_ID_SEGMENTS), pagination)

    def get_vaa(self, chain: str, emitter: str, sequence: str) -> dict[str, Any]:
        return self.fetch_one(Equality(build_record_id(chain, emitter, sequence)))

    def list_vaas_sans_pythnet(self, *, pagination: PaginationOptions) -> list[dict[str, Any]]:
        return self.fetch_many(chain_exclusion_filter(), pagination)

    def count_by_chain(self) -> list[dict[str, Any]]:
        """Return `{"_id": bucket, "count": n}` rows for non-empty buckets."""

        rows = self.db.aggregate(self.collection_name, build_vaa_count_pipeline())
        if not rows:
            raise RecordNotFoundError(collection=self.collection_name)
        return rows
