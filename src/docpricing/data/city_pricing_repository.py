"""Loader for per-city document price tables."""

from __future__ import annotations

import logging

from supabase import Client

from ..db.supabase import fetch_rows
from ..models.domain import CityPricing

logger = logging.getLogger(__name__)

CITIES_TABLE = "cities"


def load_city_pricing(city: str, client: Client | None = None) -> CityPricing | None:
    """Fetch the active price table of ``city`` as an immutable snapshot."""
    name = city.strip()
    if not name:
        return None

    rows = fetch_rows(
        CITIES_TABLE,
        lambda query: query.select("*").eq("name", name).eq("is_active", True).limit(1),
        client,
    )
    if not rows:
        return None

    try:
        return CityPricing.from_record(rows[0])
    except (ValueError, TypeError, AttributeError) as e:
        logger.warning(f"Skipping invalid price table for city '{name}': {e}")
        return None


def list_active_cities(client: Client | None = None) -> list[str]:
    rows = fetch_rows(
        CITIES_TABLE,
        lambda query: query.select("name").eq("is_active", True).order("name"),
        client,
    )
    return [str(row["name"]) for row in rows if row.get("name")]
