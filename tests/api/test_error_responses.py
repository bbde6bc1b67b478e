# This file tests how failures are reported to clients.
# Every error is status-only: malformed parameters answer 400 and store failures answer 500.

from __future__ import annotations

from typing import Any

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from tests.api.support import api_test_client, build_mongomock_client, vaa_doc


class UnavailableDBClient:
    """Database stand-in whose every read fails like an unreachable MongoDB."""

    def find_many(self, *args: Any, **kwargs: Any) -> list[dict[str, Any]]:
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def find_one(self, *args: Any, **kwargs: Any) -> dict[str, Any] | None:
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")

    def aggregate(self, *args: Any, **kwargs: Any) -> list[dict[str, Any]]:
        raise ServerSelectionTimeoutError("localhost:27017: connection refused")


@pytest.mark.parametrize(
    "path",
    ["/api/vaas", "/api/vaas/2/abc/1", "/api/vaa-counts", "/api/heartbeats"],
)
def test_store_errors_surface_as_500_without_body(path: str) -> None:
    with api_test_client(db_client=UnavailableDBClient(), raise_server_exceptions=False) as client:
        response = client.get(path)

    assert response.status_code == 500
    assert response.content == b""


@pytest.mark.parametrize(
    "query",
    [
        "page=-1",
        "page=abc",
        "limit=ten",
        "before=not-a-date",
        "before=0001-01-01T00:00:00%2B01:00",
        "page=100000000000000000000",
    ],
)
def test_malformed_query_parameters_return_400(query: str) -> None:
    db_client = build_mongomock_client(vaas=[vaa_doc("2", "abc", 1, 0)])
    with api_test_client(db_client=db_client) as client:
        response = client.get(f"/api/vaas?{query}")

    assert response.status_code == 400
    assert response.content == b""


def test_unknown_route_returns_404_without_body() -> None:
    with api_test_client(db_client=build_mongomock_client()) as client:
        response = client.get("/api/guardians")

    assert response.status_code == 404
    assert response.content == b""


def test_only_get_is_allowed() -> None:
    with api_test_client(db_client=build_mongomock_client()) as client:
        response = client.post("/api/vaas")

    assert response.status_code == 405
