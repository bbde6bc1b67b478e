# This file defines observation endpoints under the API path.
# Up to three segments list by prefix, so `chain/emitter/sequence` returns every signer's observation.
# Only the full five-segment path is an exact lookup.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from src.api.dependencies import get_observation_service, get_pagination_options
from src.api.pagination import PaginationOptions
from src.api.responses import json_response
from src.api.services.observation_service import ObservationService

router = APIRouter(tags=["observations"])
ObservationServiceDep = Annotated[ObservationService, Depends(get_observation_service)]
PaginationDep = Annotated[PaginationOptions, Depends(get_pagination_options)]


@router.get("/observations")
def list_observations(service: ObservationServiceDep, pagination: PaginationDep) -> Response:
    return json_response(service.list_observations((), pagination=pagination))


@router.get("/observations/{chain}")
def list_observations_by_chain(
    chain: str,
    service: ObservationServiceDep,
    pagination: PaginationDep,
) -> Response:
    return json_response(service.list_observations((chain,), pagination=pagination))


@router.get("/observations/{chain}/{emitter}")
def list_observations_by_emitter(
    chain: str,
    emitter: str,
    service: ObservationServiceDep,
    pagination: PaginationDep,
) -> Response:
    return json_response(service.list_observations((chain, emitter), pagination=pagination))


@router.get("/observations/{chain}/{emitter}/{sequence}")
def list_observations_by_vaa(
    chain: str,
    emitter: str,
    sequence: str,
    service: ObservationServiceDep,
    pagination: PaginationDep,
) -> Response:
    return json_response(
        service.list_observations((chain, emitter, sequence), pagination=pagination)
    )


@router.get("/observations/{chain}/{emitter}/{sequence}/{signer}/{digest}")
def get_observation(
    chain: str,
    emitter: str,
    sequence: str,
    signer: str,
    digest: str,
    service: ObservationServiceDep,
) -> Response:
    return json_response(service.get_observation(chain, emitter, sequence, signer, digest))
