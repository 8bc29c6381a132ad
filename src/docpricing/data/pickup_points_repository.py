"""Commune pickup-point lookup with a fixed fallback coordinate."""

from __future__ import annotations

import logging

from supabase import Client

from ..config import settings
from ..db.supabase import fetch_rows
from ..models.domain import CommunePickupPoint, GeoPoint

logger = logging.getLogger(__name__)

PICKUP_POINTS_TABLE = "commune_pickup_points"


def fallback_pickup_point() -> GeoPoint:
    """Central Plateau coordinate used when a commune has no registered town hall."""
    return GeoPoint(settings.pickup_fallback_latitude, settings.pickup_fallback_longitude)


def load_commune_pickup_point(commune: str, client: Client | None = None) -> CommunePickupPoint | None:
    """Case-insensitive lookup of a commune's pickup point."""
    name = commune.strip()
    if not name:
        return None

    rows = fetch_rows(
        PICKUP_POINTS_TABLE,
        lambda query: query.select("*").ilike("commune", name).limit(1),
        client,
    )
    if not rows:
        return None

    row = rows[0]
    try:
        return CommunePickupPoint(
            commune=str(row["commune"]),
            name=row.get("name"),
            location=GeoPoint(float(row["latitude"]), float(row["longitude"])),
        )
    except (KeyError, ValueError, TypeError) as e:
        logger.warning(f"Skipping invalid pickup point row for '{name}': {e}")
        return None


def resolve_commune_pickup_point(commune: str, client: Client | None = None) -> GeoPoint | None:
    """Resolve a commune to the coordinate of its town hall, or None if unknown."""
    point = load_commune_pickup_point(commune, client)
    return point.location if point else None


def resolve_pickup_point_or_fallback(commune: str, client: Client | None = None) -> GeoPoint:
    """Resolve a commune's pickup point, degrading to the fallback coordinate."""
    location = resolve_commune_pickup_point(commune, client)
    if location is None:
        logger.info(f"No pickup point registered for commune '{commune}', using fallback coordinate")
        return fallback_pickup_point()
    return location
