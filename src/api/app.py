# This file builds the FastAPI application and registers all API routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The MongoDB client is created once in the lifespan and closed at shutdown.
# The app adds request IDs, timing headers, and Prometheus request metrics for operations visibility.

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from src.api.api_config import get_api_config
from src.api.db_access import DatabaseClient
from src.api.error_handlers import register_error_handlers
from src.api.routers.health import router as health_router
from src.api.routers.heartbeats import router as heartbeats_router
from src.api.routers.observations import router as observations_router
from src.api.routers.vaas import router as vaas_router
from src.common.logging import configure_logging

logger = logging.getLogger(__name__)

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _route_label(request: Request) -> str:
    # Route templates keep record identifiers out of metric labels.
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = get_api_config()
    db_client = DatabaseClient(
        mongodb_uri=config.mongodb_uri,
        database_name=config.database_name,
        timeout_ms=config.request_timeout_ms,
    )
    app.state.db_client = db_client
    logger.info("MongoDB client ready for database %r", config.database_name)
    try:
        yield
    finally:
        db_client.close()
        logger.info("MongoDB client closed")


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description=(
            "Read-only access to Wormhole guardian heartbeats, signed VAAs, and observations. "
            "Records are addressed by `chain/emitter/sequence` identifiers and listed newest first."
        ),
        version=config.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
            {"name": "heartbeats", "description": "Guardian heartbeats."},
            {"name": "vaas", "description": "Signed VAAs and per-chain counts."},
            {"name": "observations", "description": "Individual guardian observations of VAAs."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            path_label = _route_label(request)
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(heartbeats_router, prefix=config.api_path)
    app.include_router(vaas_router, prefix=config.api_path)
    app.include_router(observations_router, prefix=config.api_path)

    return app


app = create_app()
