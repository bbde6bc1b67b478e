# This file implements read services for guardian observations.
# An observation identifier extends its VAA's identifier with `signer/hash`, so
# `chain/emitter/sequence` is still a prefix here and returns one observation per signer.

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.filters import Equality
from src.api.identifiers import OBSERVATION_ID_SEGMENTS, build_record_id, id_filter
from src.api.pagination import PaginationOptions
from src.api.services.record_service import RecordService


class ObservationService(RecordService):
    """Data retrieval for observation API routes."""

    def __init__(self, *, config: ApiConfig, db: DatabaseClient) -> None:
        super().__init__(config=config, db=db, collection_name=config.observations_collection)

    def list_observations(
        self,
        segments: Sequence[str],
        *,
        pagination: PaginationOptions,
    ) -> list[dict[str, Any]]:
        if len(segments) >= OBSERVATION_ID_SEGMENTS:
            raise ValueError("Use get_observation for a complete observation identifier.")
        return self.fetch_many(
            id_filter(segments, full_length=OBSERVATION_ID_SEGMENTS),
            pagination,
        )

    def get_observation(
        self,
        chain: str,
        emitter: str,
        sequence: str,
        signer: str,
        digest: str,
    ) -> dict[str, Any]:
        return self.fetch_one(Equality(build_record_id(chain, emitter, sequence, signer, digest)))
