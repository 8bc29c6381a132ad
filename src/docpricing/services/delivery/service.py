"""Express-delivery pricing orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from supabase import Client

from ...config import settings
from ...data.pickup_points_repository import resolve_pickup_point_or_fallback
from ...data.sectors_repository import (
    load_active_sectors,
    load_active_zones,
    load_sectors_for_commune,
)
from ...data.tariff_repository import load_active_tariff
from ...exceptions import DataUnavailableError
from ...models.domain import DeliverySector, DeliveryZone, GeoPoint, TariffConfig
from ..geospatial import DistanceQuote, price_from_distance

logger = logging.getLogger(__name__)

Origin = Union[GeoPoint, str]


@dataclass(slots=True)
class CommuneSectors:
    commune: str
    sectors: list[DeliverySector] = field(default_factory=list)


def depot_point() -> GeoPoint:
    """Adjamé bus station, where documents bound for the interior are dropped."""
    return GeoPoint(settings.depot_latitude, settings.depot_longitude)


def _load_tariff_or_none(client: Client | None) -> TariffConfig | None:
    try:
        return load_active_tariff(client)
    except DataUnavailableError as e:
        logger.error(f"Failed to load delivery pricing config: {e}")
        return None


def _resolve_origin(origin: Origin, client: Client | None) -> GeoPoint:
    if isinstance(origin, str):
        return resolve_pickup_point_or_fallback(origin, client)
    return origin


def quote_between_points(origin: GeoPoint, destination: GeoPoint, config: TariffConfig) -> DistanceQuote:
    """Price an arbitrary pair of points against a supplied tariff."""
    return price_from_distance(origin, destination, config)


def express_price(
    origin: Origin,
    destination: DeliverySector,
    client: Client | None = None,
) -> DistanceQuote | None:
    """Quote an express delivery from a point or commune town hall to a sector.

    Returns None when no tariff can be loaded; callers must treat that as
    "cannot quote yet" rather than a free delivery.
    """
    config = _load_tariff_or_none(client)
    if config is None:
        return None

    pickup = _resolve_origin(origin, client)
    return price_from_distance(pickup, destination.location, config)


def pickup_to_depot_price(origin_commune: str, client: Client | None = None) -> DistanceQuote | None:
    """Quote the courier leg from a commune's town hall to the depot."""
    config = _load_tariff_or_none(client)
    if config is None:
        return None

    pickup = resolve_pickup_point_or_fallback(origin_commune, client)
    return price_from_distance(pickup, depot_point(), config)


def group_sectors_by_commune(sectors: list[DeliverySector]) -> list[CommuneSectors]:
    """Group sectors by commune, keeping communes in first-appearance order."""
    groups: dict[str, CommuneSectors] = {}
    for sector in sectors:
        group = groups.get(sector.commune)
        if group is None:
            group = groups[sector.commune] = CommuneSectors(commune=sector.commune)
        group.sectors.append(sector)
    for group in groups.values():
        group.sectors.sort(key=lambda sector: sector.display_order)
    return list(groups.values())


def list_communes_with_active_sectors(client: Client | None = None) -> list[CommuneSectors]:
    return group_sectors_by_commune(load_active_sectors(client))


def get_sectors_for_commune(commune: str, client: Client | None = None) -> list[DeliverySector]:
    return load_sectors_for_commune(commune, client)


def is_express_available(commune: str, client: Client | None = None) -> bool:
    return len(load_sectors_for_commune(commune, client)) > 0


def list_delivery_zones(client: Client | None = None) -> list[DeliveryZone]:
    return load_active_zones(client)


def find_zone_for_commune(commune: str, client: Client | None = None) -> DeliveryZone | None:
    for zone in load_active_zones(client):
        if zone.covers(commune):
            return zone
    return None
