"""Pydantic request/response models for delivery pricing endpoints."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class GeoPointModel(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class TariffModel(BaseModel):
    base_fee: int
    per_km_rate: int
    road_factor: float
    rounding: int
    min_price: int
    max_price: int


class ExpressQuoteRequest(BaseModel):
    origin_commune: Optional[str] = Field(
        default=None, description="Commune whose town hall is the pickup point."
    )
    origin: Optional[GeoPointModel] = Field(default=None, description="Explicit pickup coordinate.")
    sector_id: str = Field(..., description="Destination delivery sector.")

    @model_validator(mode="after")
    def _check_origin(self) -> "ExpressQuoteRequest":
        if (self.origin is None) == (not self.origin_commune):
            raise ValueError("Provide exactly one of origin_commune or origin")
        return self


class DepotQuoteRequest(BaseModel):
    origin_commune: str = Field(..., min_length=1)


class PreviewQuoteRequest(BaseModel):
    origin: GeoPointModel
    destination: GeoPointModel
    tariff: TariffModel


class QuoteResponse(BaseModel):
    available: bool
    price: Optional[int] = None
    distance_km: Optional[float] = None
    road_distance_km: Optional[float] = None


class SectorModel(BaseModel):
    id: str
    zone_id: Optional[str] = None
    commune: str
    name: str
    slug: str
    latitude: float
    longitude: float
    display_order: int


class CommuneSectorsModel(BaseModel):
    commune: str
    sectors: List[SectorModel]


class AvailabilityResponse(BaseModel):
    commune: str
    express_available: bool
    capital_commune: bool


class ZoneModel(BaseModel):
    id: str
    name: str
    code: str
    communes: List[str]
    display_order: int


class DocumentModel(BaseModel):
    type: str
    name: str
    service: str
    base_price: int
    processing_time: str


class DocumentPriceResponse(BaseModel):
    document_type: str
    city: str
    service_type: Optional[str] = None
    copies: int
    unit_price: int
    total_price: int
