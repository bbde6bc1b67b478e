# This file renders stored documents as JSON responses.
# Documents pass through unchanged; only BSON values JSON cannot carry are converted.
# ObjectIds become hex strings, dates become ISO-8601 UTC with milliseconds and a `Z` suffix, and binary becomes base64.

from __future__ import annotations

import base64
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def _encode_datetime(value: datetime) -> str:
    # pymongo returns naive datetimes that are already UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    else:
        value = value.astimezone(UTC)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


BSON_ENCODERS: dict[Any, Any] = {
    ObjectId: str,
    datetime: _encode_datetime,
    bytes: lambda value: base64.b64encode(value).decode("ascii"),
}


def encode_documents(payload: Any) -> Any:
    return jsonable_encoder(payload, custom_encoder=BSON_ENCODERS)


def json_response(payload: dict[str, Any] | list[dict[str, Any]]) -> JSONResponse:
    """Return documents as a 200 JSON response."""

    return JSONResponse(content=encode_documents(payload))
