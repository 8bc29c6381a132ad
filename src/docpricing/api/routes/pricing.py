"""Express-delivery pricing endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...data.sectors_repository import load_sector
from ...exceptions import DataUnavailableError, InvalidTariffConfig
from ...models.domain import GeoPoint, TariffConfig
from ...schemas.pricing import DepotQuoteRequest, ExpressQuoteRequest, PreviewQuoteRequest, QuoteResponse
from ...services.delivery import express_price, pickup_to_depot_price, quote_between_points
from ...services.geospatial import DistanceQuote

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["pricing"])


def _to_response(quote: DistanceQuote | None) -> QuoteResponse:
    if quote is None:
        return QuoteResponse(available=False)
    return QuoteResponse(
        available=True,
        price=quote.price,
        distance_km=quote.distance_km,
        road_distance_km=quote.road_distance_km,
    )


def _tariff_error(exc: InvalidTariffConfig) -> HTTPException:
    logger.error(f"Invalid delivery tariff: {exc}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Invalid delivery pricing configuration: {exc}",
    )


def _unavailable(exc: DataUnavailableError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.post("/express", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def quote_express(payload: ExpressQuoteRequest) -> QuoteResponse:
    try:
        sector = load_sector(payload.sector_id)
        if sector is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Delivery sector '{payload.sector_id}' not found",
            )
        origin = (
            GeoPoint(payload.origin.latitude, payload.origin.longitude)
            if payload.origin
            else payload.origin_commune
        )
        return _to_response(express_price(origin, sector))
    except InvalidTariffConfig as exc:
        raise _tariff_error(exc) from exc
    except DataUnavailableError as exc:
        raise _unavailable(exc) from exc


@router.post("/pickup-to-depot", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def quote_pickup_to_depot(payload: DepotQuoteRequest) -> QuoteResponse:
    try:
        return _to_response(pickup_to_depot_price(payload.origin_commune))
    except InvalidTariffConfig as exc:
        raise _tariff_error(exc) from exc
    except DataUnavailableError as exc:
        raise _unavailable(exc) from exc


@router.post("/preview", response_model=QuoteResponse, status_code=status.HTTP_200_OK)
def preview_quote(payload: PreviewQuoteRequest) -> QuoteResponse:
    """Price two arbitrary points against a draft tariff (admin sector editor)."""
    tariff = TariffConfig(**payload.tariff.model_dump())
    try:
        quote = quote_between_points(
            GeoPoint(payload.origin.latitude, payload.origin.longitude),
            GeoPoint(payload.destination.latitude, payload.destination.longitude),
            tariff,
        )
    except InvalidTariffConfig as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    return _to_response(quote)
