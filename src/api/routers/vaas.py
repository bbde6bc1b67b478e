# This file defines VAA endpoints under the API path.
# Chain and chain/emitter paths list by identifier prefix; chain/emitter/sequence is an exact lookup.
# List endpoints accept `limit`, `page`, and `before` and return newest records first.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from src.api.dependencies import get_pagination_options, get_vaa_service
from src.api.pagination import PaginationOptions
from src.api.responses import json_response
from src.api.schemas.vaa_schemas import VaaCountBucket
from src.api.services.vaa_service import VaaService

router = APIRouter(tags=["vaas"])
VaaServiceDep = Annotated[VaaService, Depends(get_vaa_service)]
PaginationDep = Annotated[PaginationOptions, Depends(get_pagination_options)]


@router.get("/vaas")
def list_vaas(service: VaaServiceDep, pagination: PaginationDep) -> Response:
    return json_response(service.list_vaas((), pagination=pagination))


@router.get("/vaas/{chain}")
def list_vaas_by_chain(chain: str, service: VaaServiceDep, pagination: PaginationDep) -> Response:
    return json_response(service.list_vaas((chain,), pagination=pagination))


@router.get("/vaas/{chain}/{emitter}")
def list_vaas_by_emitter(
    chain: str,
    emitter: str,
    service: VaaServiceDep,
    pagination: PaginationDep,
) -> Response:
    return json_response(service.list_vaas((chain, emitter), pagination=pagination))


@router.get("/vaas/{chain}/{emitter}/{sequence}")
def get_vaa(chain: str, emitter: str, sequence: str, service: VaaServiceDep) -> Response:
    return json_response(service.get_vaa(chain, emitter, sequence))


@router.get("/vaas-sans-pythnet")
def list_vaas_sans_pythnet(service: VaaServiceDep, pagination: PaginationDep) -> Response:
    return json_response(service.list_vaas_sans_pythnet(pagination=pagination))


@router.get("/vaa-counts", response_model=list[VaaCountBucket])
def vaa_counts(service: VaaServiceDep) -> list[dict[str, object]]:
    return service.count_by_chain()
