"""
Unit tests for the VAA count aggregation.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

import pytest

from src.api.error_handlers import RecordNotFoundError
from src.api.services.vaa_service import (
    UNKNOWN_BUCKET,
    VAA_COUNT_BOUNDARIES,
    VaaService,
    build_vaa_count_pipeline,
)
from tests.api.support import build_mongomock_client, build_test_config, vaa_doc


def test_boundaries_are_in_string_order() -> None:
    assert list(VAA_COUNT_BOUNDARIES) == sorted(VAA_COUNT_BOUNDARIES)
    assert VAA_COUNT_BOUNDARIES[0] == "1/"
    assert VAA_COUNT_BOUNDARIES[-1] == "9/"
    assert "17/" not in VAA_COUNT_BOUNDARIES


def test_pipeline_groups_by_identifier() -> None:
    (stage,) = build_vaa_count_pipeline()
    bucket = stage["$bucket"]
    assert bucket["groupBy"] == "$_id"
    assert bucket["boundaries"] == list(VAA_COUNT_BOUNDARIES)
    assert bucket["default"] == UNKNOWN_BUCKET
    assert bucket["output"] == {"count": {"$sum": 1}}


def test_identifiers_fall_into_lexicographic_buckets() -> None:
    docs = [
        vaa_doc("17", "aa", 1, 0),  # between "16/" and "18/"
        vaa_doc("20", "aa", 1, 1),  # between "2/" and "26/"
        vaa_doc("9", "aa", 1, 2),  # at the exclusive upper bound
        vaa_doc("0", "aa", 1, 3),  # below the first boundary
        vaa_doc("3", "aa", 1, 4),
    ]
    service = VaaService(config=build_test_config(), db=build_mongomock_client(vaas=docs))

    counts = {row["_id"]: row["count"] for row in service.count_by_chain()}

    assert counts == {"16/": 1, "2/": 1, "3/": 1, UNKNOWN_BUCKET: 2}


def test_count_by_chain_raises_not_found_when_empty() -> None:
    service = VaaService(config=build_test_config(), db=build_mongomock_client())
    with pytest.raises(RecordNotFoundError) as excinfo:
        service.count_by_chain()
    assert excinfo.value.status_code == 404
    assert excinfo.value.collection == "vaas"
