"""Delivery sector and zone endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from ...exceptions import DataUnavailableError
from ...models.domain import DeliverySector
from ...schemas.pricing import AvailabilityResponse, CommuneSectorsModel, SectorModel, ZoneModel
from ...services.billing.communes import is_capital_commune
from ...services.delivery import (
    get_sectors_for_commune,
    is_express_available,
    list_communes_with_active_sectors,
    list_delivery_zones,
)

router = APIRouter(prefix="/sectors", tags=["sectors"])


def _sector_model(sector: DeliverySector) -> SectorModel:
    return SectorModel(
        id=sector.id,
        zone_id=sector.zone_id,
        commune=sector.commune,
        name=sector.name,
        slug=sector.slug,
        latitude=sector.location.latitude,
        longitude=sector.location.longitude,
        display_order=sector.display_order,
    )


@router.get("/communes", response_model=List[CommuneSectorsModel], status_code=status.HTTP_200_OK)
def list_communes() -> List[CommuneSectorsModel]:
    try:
        groups = list_communes_with_active_sectors()
    except DataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return [
        CommuneSectorsModel(commune=group.commune, sectors=[_sector_model(s) for s in group.sectors])
        for group in groups
    ]


@router.get("/zones", response_model=List[ZoneModel], status_code=status.HTTP_200_OK)
def list_zones() -> List[ZoneModel]:
    try:
        zones = list_delivery_zones()
    except DataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return [
        ZoneModel(
            id=zone.id,
            name=zone.name,
            code=zone.code,
            communes=sorted(zone.communes),
            display_order=zone.display_order,
        )
        for zone in zones
    ]


@router.get("/{commune}", response_model=List[SectorModel], status_code=status.HTTP_200_OK)
def list_commune_sectors(commune: str) -> List[SectorModel]:
    try:
        return [_sector_model(sector) for sector in get_sectors_for_commune(commune)]
    except DataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc


@router.get("/{commune}/availability", response_model=AvailabilityResponse, status_code=status.HTTP_200_OK)
def express_availability(commune: str) -> AvailabilityResponse:
    try:
        available = is_express_available(commune)
    except DataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return AvailabilityResponse(
        commune=commune,
        express_available=available,
        capital_commune=is_capital_commune(commune),
    )
