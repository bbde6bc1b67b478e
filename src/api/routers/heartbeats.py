# This file defines the heartbeat listing endpoint.
# Heartbeats are returned whole; pagination parameters are ignored if supplied.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from src.api.dependencies import get_heartbeat_service
from src.api.responses import json_response
from src.api.services.heartbeat_service import HeartbeatService

router = APIRouter(tags=["heartbeats"])
HeartbeatServiceDep = Annotated[HeartbeatService, Depends(get_heartbeat_service)]


@router.get("/heartbeats")
def list_heartbeats(service: HeartbeatServiceDep) -> Response:
    return json_response(service.list_heartbeats())
