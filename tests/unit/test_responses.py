"""
Unit tests for BSON value rendering.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from datetime import datetime, timedelta, timezone

from bson import ObjectId

from src.api.responses import encode_documents


def test_dates_render_as_utc_milliseconds_with_z_suffix() -> None:
    naive = datetime(2024, 3, 1, 12, 0, 7, 123456)
    shifted = datetime(2024, 3, 1, 14, 0, 7, tzinfo=timezone(timedelta(hours=2)))

    assert encode_documents({"createdAt": naive}) == {"createdAt": "2024-03-01T12:00:07.123Z"}
    assert encode_documents({"createdAt": shifted}) == {"createdAt": "2024-03-01T12:00:07.000Z"}


def test_object_ids_and_binary_render_as_strings() -> None:
    document = {"_id": ObjectId("65e1c2f0a1b2c3d4e5f60718"), "vaa": b"\x01\x02"}

    assert encode_documents(document) == {"_id": "65e1c2f0a1b2c3d4e5f60718", "vaa": "AQI="}
