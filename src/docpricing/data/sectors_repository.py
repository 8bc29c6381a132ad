"""Data access helpers for delivery sectors and zones."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from supabase import Client

from ..db.supabase import fetch_rows
from ..models.domain import DeliverySector, DeliveryZone, GeoPoint

logger = logging.getLogger(__name__)

SECTORS_TABLE = "delivery_sectors"
ZONES_TABLE = "delivery_zones"


def sector_from_record(row: Mapping[str, Any]) -> DeliverySector:
    return DeliverySector(
        id=str(row["id"]),
        zone_id=str(row["zone_id"]) if row.get("zone_id") is not None else None,
        commune=str(row["commune"]),
        name=str(row.get("name") or ""),
        slug=str(row.get("slug") or ""),
        location=GeoPoint(float(row["latitude"]), float(row["longitude"])),
        is_active=bool(row.get("is_active", True)),
        display_order=int(row.get("display_order") or 0),
    )


def zone_from_record(row: Mapping[str, Any]) -> DeliveryZone:
    return DeliveryZone(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        code=str(row.get("code") or ""),
        communes=frozenset(str(name) for name in (row.get("communes") or [])),
        is_active=bool(row.get("is_active", True)),
        display_order=int(row.get("display_order") or 0),
    )


def _parse_sectors(rows: list[dict]) -> list[DeliverySector]:
    sectors: list[DeliverySector] = []
    for row in rows:
        try:
            sectors.append(sector_from_record(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid delivery sector row: {e}")
    return sectors


def load_active_sectors(client: Client | None = None) -> list[DeliverySector]:
    """All active sectors, ordered by commune then display order."""
    rows = fetch_rows(
        SECTORS_TABLE,
        lambda query: query.select("*")
        .eq("is_active", True)
        .order("commune")
        .order("display_order"),
        client,
    )
    return _parse_sectors(rows)


def load_sectors_for_commune(commune: str, client: Client | None = None) -> list[DeliverySector]:
    """Active sectors of one commune (case-insensitive), ordered by display order."""
    name = commune.strip()
    if not name:
        return []
    rows = fetch_rows(
        SECTORS_TABLE,
        lambda query: query.select("*")
        .ilike("commune", name)
        .eq("is_active", True)
        .order("display_order"),
        client,
    )
    return _parse_sectors(rows)


def load_sector(sector_id: str, client: Client | None = None) -> DeliverySector | None:
    rows = fetch_rows(
        SECTORS_TABLE,
        lambda query: query.select("*").eq("id", sector_id).limit(1),
        client,
    )
    sectors = _parse_sectors(rows)
    return sectors[0] if sectors else None


def load_active_zones(client: Client | None = None) -> list[DeliveryZone]:
    rows = fetch_rows(
        ZONES_TABLE,
        lambda query: query.select("*").eq("is_active", True).order("display_order"),
        client,
    )
    zones: list[DeliveryZone] = []
    for row in rows:
        try:
            zones.append(zone_from_record(row))
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Skipping invalid delivery zone row: {e}")
    return zones
