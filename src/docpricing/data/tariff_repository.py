"""Loader for the express-delivery tariff record."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping

from supabase import Client

from ..db.supabase import fetch_rows
from ..models.domain import TariffConfig

logger = logging.getLogger(__name__)

TARIFF_TABLE = "delivery_pricing_config"


def _parse_timestamp(value: Any) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def tariff_from_record(row: Mapping[str, Any]) -> TariffConfig:
    """Build a :class:`TariffConfig` from a ``delivery_pricing_config`` row."""
    return TariffConfig(
        base_fee=int(row["base_fee"]),
        per_km_rate=int(row["per_km_rate"]),
        road_factor=float(row["road_factor"]),
        rounding=int(row["rounding"]),
        min_price=int(row["min_price"]),
        max_price=int(row["max_price"]),
        id=str(row["id"]) if row.get("id") is not None else None,
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def load_active_tariff(client: Client | None = None) -> TariffConfig | None:
    """Load the single active tariff. Returns None when no usable record exists.

    Raises:
        DataUnavailableError: if the store cannot be read.
    """
    rows = fetch_rows(TARIFF_TABLE, lambda query: query.select("*").limit(1), client)
    if not rows:
        logger.warning("No delivery pricing config found")
        return None

    try:
        return tariff_from_record(rows[0])
    except (KeyError, ValueError, TypeError) as e:
        logger.warning(f"Skipping invalid delivery pricing config row: {e}")
        return None
