"""Domain models for delivery reference data and pricing snapshots."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..exceptions import InvalidTariffConfig


@dataclass(slots=True, frozen=True)
class GeoPoint:
    """A WGS84 coordinate in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(slots=True, frozen=True)
class TariffConfig:
    """Express-delivery tariff snapshot loaded from ``delivery_pricing_config``."""

    base_fee: int
    per_km_rate: int
    road_factor: float
    rounding: int
    min_price: int
    max_price: int
    id: Optional[str] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        if self.rounding <= 0:
            raise InvalidTariffConfig(f"rounding must be positive, got {self.rounding}")
        if self.per_km_rate < 0:
            raise InvalidTariffConfig(f"per_km_rate must not be negative, got {self.per_km_rate}")
        if self.road_factor < 1:
            raise InvalidTariffConfig(f"road_factor must be >= 1, got {self.road_factor}")
        if self.min_price > self.max_price:
            raise InvalidTariffConfig(
                f"min_price ({self.min_price}) is greater than max_price ({self.max_price})"
            )


@dataclass(slots=True, frozen=True)
class DeliverySector:
    """Named delivery sub-area of a commune, used as express destination."""

    id: str
    zone_id: Optional[str]
    commune: str
    name: str
    slug: str
    location: GeoPoint
    is_active: bool = True
    display_order: int = 0


@dataclass(slots=True, frozen=True)
class DeliveryZone:
    """Administrative grouping of communes."""

    id: str
    name: str
    code: str
    communes: frozenset[str]
    is_active: bool = True
    display_order: int = 0

    def covers(self, commune: str) -> bool:
        wanted = commune.strip().lower()
        return any(name.lower() == wanted for name in self.communes)


@dataclass(slots=True, frozen=True)
class CommunePickupPoint:
    """Town hall of a commune, the default origin for courier pickups."""

    commune: str
    location: GeoPoint
    name: Optional[str] = None


@dataclass(slots=True, frozen=True)
class CityPricing:
    """Per-city document price table, passed explicitly to price computations.

    ``document_prices`` maps a service type (``mairie``, ``sous_prefecture``...)
    to a mapping of document type to unit price in FCFA.
    """

    city: str
    document_prices: Mapping[str, Mapping[str, int]] = field(default_factory=dict)
    shipping_cost: int = 0
    processing_delay_multiplier: float = 1.0
    is_active: bool = True

    @classmethod
    def from_record(cls, row: Mapping[str, Any]) -> "CityPricing":
        raw_prices = row.get("document_prices") or {}
        prices: dict[str, Mapping[str, int]] = {}
        for service, documents in raw_prices.items():
            if not isinstance(documents, Mapping):
                continue
            prices[service] = MappingProxyType(
                {doc: int(price) for doc, price in documents.items() if price is not None}
            )
        return cls(
            city=str(row.get("name") or row.get("city") or ""),
            document_prices=MappingProxyType(prices),
            shipping_cost=int(row.get("shipping_cost") or 0),
            processing_delay_multiplier=float(row.get("processing_delay_multiplier") or 1.0),
            is_active=bool(row.get("is_active", True)),
        )

    def price_for(self, service: str, document_type: str) -> int:
        return self.document_prices.get(service, {}).get(document_type, 0)
