# This file handles pagination parsing for list endpoints.
# It exists so every router uses the same limit, page, and `before` cursor rules.
# Out-of-range limits fall back to the default page size instead of being clamped to the maximum.
# Results are always ordered newest first by `createdAt`.

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final

from pydantic import TypeAdapter, ValidationError

from src.api.filters import CREATED_AT_FIELD, CreatedBefore, Filter, and_filters

# BSON encodes skip as a signed 64-bit integer.
MAX_SKIP: Final[int] = 2**63 - 1

_DATETIME_ADAPTER = TypeAdapter(datetime)


@dataclass(frozen=True)
class SortSpec:
    field: str
    order: str

    @property
    def as_text(self) -> str:
        return f"{self.field}:{self.order}"

    @property
    def direction(self) -> int:
        return -1 if self.order == "desc" else 1


NEWEST_FIRST = SortSpec(field=CREATED_AT_FIELD, order="desc")


@dataclass(frozen=True)
class PaginationOptions:
    limit: int
    skip: int | None = None
    before: datetime | None = None
    sort: SortSpec = NEWEST_FIRST

    def apply(self, record_filter: Filter) -> Filter:
        """Return `record_filter` narrowed by the `before` cursor, if any."""

        if self.before is None:
            return record_filter
        return and_filters(record_filter, CreatedBefore(self.before))


def resolve_limit(limit: int | None, *, default_page_size: int, max_page_size: int) -> int:
    """Return the requested limit, or the default when absent or out of range."""

    if limit is None or limit < 1 or limit > max_page_size:
        return default_page_size
    return limit


def parse_query_int(name: str, raw: str | None) -> int | None:
    """Parse an integer query value; an empty value counts as absent."""

    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def parse_query_datetime(name: str, raw: str | None) -> datetime | None:
    """Parse an ISO-8601 query value; an empty value counts as absent."""

    if raw is None or raw.strip() == "":
        return None
    try:
        return _DATETIME_ADAPTER.validate_python(raw.strip())
    except ValidationError as exc:
        raise ValueError(f"{name} must be an ISO-8601 timestamp, got {raw!r}") from exc


def normalize_before(before: datetime | None) -> datetime | None:
    """Convert the cursor to naive UTC, the form BSON dates are stored and compared in."""

    if before is None or before.tzinfo is None:
        return before
    try:
        return before.astimezone(UTC).replace(tzinfo=None)
    except OverflowError as exc:
        raise ValueError(f"before is outside the representable range: {before.isoformat()}") from exc


def build_pagination_options(
    *,
    limit: int | None,
    page: int | None,
    before: datetime | None,
    default_page_size: int,
    max_page_size: int,
) -> PaginationOptions:
    """Translate raw query parameters into fetch options."""

    if page is not None and page < 0:
        raise ValueError("page must be >= 0")

    resolved_limit = resolve_limit(
        limit,
        default_page_size=default_page_size,
        max_page_size=max_page_size,
    )
    skip = page * resolved_limit if page is not None else None
    if skip is not None and skip > MAX_SKIP:
        raise ValueError(f"page is too large; skip must be <= {MAX_SKIP}")
    return PaginationOptions(
        limit=resolved_limit,
        skip=skip,
        before=normalize_before(before),
    )
