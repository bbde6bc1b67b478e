# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check pings MongoDB and confirms the record collections exist.

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request

from src.api.dependencies import ConfigDep, DBDep
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

router = APIRouter(tags=["health"])


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    db: DBDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    heartbeats_ready = db_connected and db.collection_exists(config.heartbeats_collection)
    vaas_ready = db_connected and db.collection_exists(config.vaas_collection)
    observations_ready = db_connected and db.collection_exists(config.observations_collection)
    is_ready = db_connected and heartbeats_ready and vaas_ready and observations_ready

    return {
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "heartbeats_ready": heartbeats_ready,
        "vaas_ready": vaas_ready,
        "observations_ready": observations_ready,
        "ready": is_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "request_id": request.state.request_id,
        "api_path": config.api_path,
        "app_version": config.app_version,
        "project": config.api_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
