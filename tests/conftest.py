"""Shared fixtures: an in-memory stand-in for the Supabase query builder."""

from __future__ import annotations

import copy
from types import SimpleNamespace
from typing import Any

import pytest

from docpricing.models.domain import TariffConfig


class FakeQuery:
    def __init__(self, store: "FakeSupabase", table: str) -> None:
        self.store = store
        self.table_name = table
        self.filters: list = []
        self.orderings: list[tuple[str, bool]] = []
        self.max_rows: int | None = None
        self.to_insert: list[dict] | None = None

    def select(self, columns: str = "*", count: str | None = None) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def ilike(self, column: str, pattern: str) -> "FakeQuery":
        wanted = pattern.lower()
        self.filters.append(lambda row: str(row.get(column, "")).lower() == wanted)
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.orderings.append((column, desc))
        return self

    def limit(self, size: int) -> "FakeQuery":
        self.max_rows = size
        return self

    def insert(self, rows: dict | list[dict]) -> "FakeQuery":
        self.to_insert = rows if isinstance(rows, list) else [rows]
        return self

    def execute(self) -> SimpleNamespace:
        self.store.queries.append(self.table_name)
        failure = self.store.failures.get(self.table_name)
        if failure is not None:
            raise failure

        rows = self.store.tables.setdefault(self.table_name, [])
        if self.to_insert is not None:
            inserted = [copy.deepcopy(row) for row in self.to_insert]
            rows.extend(inserted)
            return SimpleNamespace(data=copy.deepcopy(inserted))

        result = [row for row in rows if all(check(row) for check in self.filters)]
        for column, desc in reversed(self.orderings):
            result.sort(key=lambda row: row.get(column), reverse=desc)
        if self.max_rows is not None:
            result = result[: self.max_rows]
        return SimpleNamespace(data=copy.deepcopy(result))


class FakeSupabase:
    """Just enough of ``supabase.Client`` for the repositories."""

    def __init__(self, tables: dict[str, list[dict]] | None = None) -> None:
        self.tables: dict[str, list[dict]] = copy.deepcopy(tables or {})
        self.failures: dict[str, Exception] = {}
        self.queries: list[str] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)


TARIFF_ROW = {
    "id": "cfg-1",
    "base_fee": 500,
    "per_km_rate": 100,
    "road_factor": 1.3,
    "rounding": 100,
    "min_price": 1000,
    "max_price": 5000,
    "updated_at": "2025-01-10T08:00:00Z",
}

PICKUP_POINTS = [
    {"id": "pp-1", "commune": "Cocody", "name": "Mairie de Cocody", "latitude": 5.3480, "longitude": -3.9870},
    {"id": "pp-2", "commune": "Yopougon", "name": "Mairie de Yopougon", "latitude": 5.3330, "longitude": -4.0780},
]

SECTORS = [
    {
        "id": "s-3",
        "zone_id": "z-1",
        "commune": "Cocody",
        "name": "Riviera 2",
        "slug": "riviera-2",
        "latitude": 5.3600,
        "longitude": -3.9700,
        "is_active": True,
        "display_order": 2,
    },
    {
        "id": "s-1",
        "zone_id": "z-1",
        "commune": "Cocody",
        "name": "Angré",
        "slug": "angre",
        "latitude": 5.3950,
        "longitude": -3.9900,
        "is_active": True,
        "display_order": 1,
    },
    {
        "id": "s-2",
        "zone_id": "z-2",
        "commune": "Abobo",
        "name": "Abobo Gare",
        "slug": "abobo-gare",
        "latitude": 5.4160,
        "longitude": -4.0200,
        "is_active": True,
        "display_order": 1,
    },
    {
        "id": "s-4",
        "zone_id": "z-2",
        "commune": "Marcory",
        "name": "Zone 4",
        "slug": "zone-4",
        "latitude": 5.2950,
        "longitude": -3.9800,
        "is_active": False,
        "display_order": 1,
    },
]

ZONES = [
    {
        "id": "z-1",
        "name": "Abidjan Est",
        "code": "EST",
        "communes": ["Cocody", "Bingerville"],
        "is_active": True,
        "display_order": 1,
    },
    {
        "id": "z-2",
        "name": "Abidjan Nord",
        "code": "NORD",
        "communes": ["Abobo", "Anyama"],
        "is_active": True,
        "display_order": 2,
    },
]

CITIES = [
    {
        "id": "c-1",
        "name": "Daloa",
        "document_prices": {
            "mairie": {"extrait_acte_naissance": 2500},
            "sous_prefecture": {"extrait_acte_naissance": 3000, "certificat_residence": 1800},
        },
        "shipping_cost": 1000,
        "processing_delay_multiplier": 1.4,
        "is_active": True,
    },
    {
        "id": "c-2",
        "name": "Korhogo",
        "document_prices": {"mairie": {"extrait_acte_naissance": 4000}},
        "shipping_cost": 1000,
        "processing_delay_multiplier": 1.5,
        "is_active": False,
    },
]


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase(
        {
            "delivery_pricing_config": [TARIFF_ROW],
            "commune_pickup_points": PICKUP_POINTS,
            "delivery_sectors": SECTORS,
            "delivery_zones": ZONES,
            "cities": CITIES,
            "invoices": [],
        }
    )


@pytest.fixture
def tariff() -> TariffConfig:
    return TariffConfig(
        base_fee=500,
        per_km_rate=100,
        road_factor=1.0,
        rounding=500,
        min_price=1000,
        max_price=5000,
    )
