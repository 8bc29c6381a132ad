"""Geospatial helper functions and distance-based delivery pricing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..models.domain import GeoPoint, TariffConfig

EARTH_RADIUS_KM = 6371.0


@dataclass(slots=True, frozen=True)
class DistanceQuote:
    """Delivery fee for a pair of points, with the distances shown to the client."""

    price: int
    distance_km: float
    road_distance_km: float


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers."""

    return haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)


def round_up_to(value: float, step: int) -> int:
    """Round ``value`` up to the next multiple of ``step``."""

    return int(math.ceil(value / step) * step)


def price_from_distance(a: GeoPoint, b: GeoPoint, config: TariffConfig) -> DistanceQuote:
    """Price an express delivery between two points.

    The straight-line distance is inflated by ``road_factor`` to approximate
    the road distance, priced at ``base_fee + road_km * per_km_rate``, rounded
    up to the tariff's ``rounding`` step and clamped to ``[min_price, max_price]``.

    Raises:
        InvalidTariffConfig: if the tariff cannot produce a meaningful price.
    """

    config.validate()

    straight_km = distance_km(a, b)
    road_km = straight_km * config.road_factor
    raw_price = config.base_fee + road_km * config.per_km_rate

    # always up to the next step
    price = round_up_to(raw_price, config.rounding)
    price = max(config.min_price, min(config.max_price, price))

    return DistanceQuote(
        price=price,
        distance_km=round(straight_km, 1),
        road_distance_km=round(road_km, 1),
    )
