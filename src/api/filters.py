# This file defines the small filter algebra used to query record collections.
# It exists so routers and services describe what to match without hand-building MongoDB documents.
# Each variant is an immutable value; `to_mongo_query` is the only place that knows the store's query syntax.
# Prefix patterns are regex-escaped, so segment values always match literally.

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

ID_FIELD = "_id"
CREATED_AT_FIELD = "createdAt"
ID_SEPARATOR = "/"


@dataclass(frozen=True)
class MatchAll:
    """Matches every record in a collection."""


@dataclass(frozen=True)
class Prefix:
    """Matches identifiers that start with the given segments followed by a separator."""

    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("Prefix requires at least one segment.")

    @property
    def text(self) -> str:
        return ID_SEPARATOR.join(self.segments) + ID_SEPARATOR

    @property
    def pattern(self) -> str:
        return "^" + re.escape(self.text)


@dataclass(frozen=True)
class Equality:
    """Matches exactly one identifier."""

    record_id: str


@dataclass(frozen=True)
class Negation:
    inner: Filter


@dataclass(frozen=True)
class And:
    left: Filter
    right: Filter


@dataclass(frozen=True)
class CreatedBefore:
    """Matches records whose `createdAt` is strictly earlier than `timestamp`."""

    timestamp: datetime


Filter: TypeAlias = "MatchAll | Prefix | Equality | Negation | And | CreatedBefore"


def and_filters(*filters: Filter) -> Filter:
    """Combine filters with logical AND, dropping `MatchAll` terms."""

    terms = [item for item in filters if not isinstance(item, MatchAll)]
    if not terms:
        return MatchAll()
    combined = terms[0]
    for term in terms[1:]:
        combined = And(combined, term)
    return combined


def to_mongo_query(record_filter: Filter) -> dict[str, Any]:
    """Translate a filter into a MongoDB query document."""

    if isinstance(record_filter, MatchAll):
        return {}
    if isinstance(record_filter, Prefix):
        return {ID_FIELD: {"$regex": record_filter.pattern}}
    if isinstance(record_filter, Equality):
        return {ID_FIELD: record_filter.record_id}
    if isinstance(record_filter, Negation):
        return {"$nor": [to_mongo_query(record_filter.inner)]}
    if isinstance(record_filter, And):
        return {
            "$and": [
                to_mongo_query(record_filter.left),
                to_mongo_query(record_filter.right),
            ]
        }
    if isinstance(record_filter, CreatedBefore):
        return {CREATED_AT_FIELD: {"$lt": record_filter.timestamp}}
    raise TypeError(f"Unsupported filter type: {type(record_filter).__name__}")
