# This file provides dependency factories for FastAPI routes.
# The MongoDB client is owned by the application lifespan and handed to services from `app.state`.
# Services are cheap views over that shared client, so they are built per request.
# Tests replace `get_database_client` or `get_config` through `app.dependency_overrides`.

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request

from src.api.api_config import ApiConfig, get_api_config
from src.api.db_access import DatabaseClient
from src.api.error_handlers import APIError
from src.api.pagination import (
    PaginationOptions,
    build_pagination_options,
    parse_query_datetime,
    parse_query_int,
)
from src.api.services.heartbeat_service import HeartbeatService
from src.api.services.observation_service import ObservationService
from src.api.services.vaa_service import VaaService


def get_config() -> ApiConfig:
    return get_api_config()


def get_database_client(request: Request) -> DatabaseClient:
    return request.app.state.db_client


ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def get_heartbeat_service(config: ConfigDep, db: DBDep) -> HeartbeatService:
    return HeartbeatService(config=config, db=db)


def get_vaa_service(config: ConfigDep, db: DBDep) -> VaaService:
    return VaaService(config=config, db=db)


def get_observation_service(config: ConfigDep, db: DBDep) -> ObservationService:
    return ObservationService(config=config, db=db)


def get_pagination_options(
    config: ConfigDep,
    limit: str | None = Query(default=None, description="Page size; out-of-range values use the default."),
    page: str | None = Query(default=None, description="Zero-based page number."),
    before: str | None = Query(
        default=None, description="Only records created strictly before this ISO-8601 timestamp."
    ),
) -> PaginationOptions:
    # Empty values (`?limit=`) are treated as absent.
    try:
        return build_pagination_options(
            limit=parse_query_int("limit", limit),
            page=parse_query_int("page", page),
            before=parse_query_datetime("before", before),
            default_page_size=config.default_page_size,
            max_page_size=config.max_page_size,
        )
    except ValueError as exc:
        raise APIError(
            status_code=400,
            error_code="INVALID_QUERY_PARAM",
            message=str(exc),
        ) from exc
