import httpx
import pytest

from docpricing.config import settings
from docpricing.data.pickup_points_repository import (
    resolve_commune_pickup_point,
    resolve_pickup_point_or_fallback,
)
from docpricing.data.tariff_repository import load_active_tariff
from docpricing.exceptions import DataUnavailableError, InvalidTariffConfig
from docpricing.models.domain import DeliverySector, GeoPoint
from docpricing.services.delivery import service as delivery_service
from docpricing.services.geospatial import price_from_distance


def _sector(commune: str = "Cocody", lat: float = 5.3950, lon: float = -3.9900) -> DeliverySector:
    return DeliverySector(
        id="s-x",
        zone_id=None,
        commune=commune,
        name="Sector",
        slug="sector",
        location=GeoPoint(lat, lon),
    )


def test_pickup_point_lookup_is_case_insensitive(fake_supabase):
    point = resolve_commune_pickup_point("  cocody ", fake_supabase)

    assert point == GeoPoint(5.3480, -3.9870)


def test_unknown_commune_falls_back_to_default_coordinate(fake_supabase):
    assert resolve_commune_pickup_point("Tiassalé", fake_supabase) is None

    point = resolve_pickup_point_or_fallback("Tiassalé", fake_supabase)

    assert point == GeoPoint(settings.pickup_fallback_latitude, settings.pickup_fallback_longitude)


def test_pickup_point_read_failure_is_not_a_fallback(fake_supabase):
    fake_supabase.failures["commune_pickup_points"] = httpx.ConnectError("network down")

    with pytest.raises(DataUnavailableError):
        resolve_pickup_point_or_fallback("Cocody", fake_supabase)


def test_load_active_tariff_parses_record(fake_supabase):
    tariff = load_active_tariff(fake_supabase)

    assert tariff is not None
    assert tariff.base_fee == 500
    assert tariff.road_factor == 1.3
    assert tariff.updated_at is not None and tariff.updated_at.year == 2025


def test_express_price_from_commune_uses_town_hall(fake_supabase):
    sector = _sector()
    tariff = load_active_tariff(fake_supabase)

    quote = delivery_service.express_price("Cocody", sector, fake_supabase)

    assert quote == price_from_distance(GeoPoint(5.3480, -3.9870), sector.location, tariff)


def test_express_price_from_explicit_point(fake_supabase):
    sector = _sector()
    origin = GeoPoint(5.3000, -4.0000)
    tariff = load_active_tariff(fake_supabase)

    quote = delivery_service.express_price(origin, sector, fake_supabase)

    assert quote == price_from_distance(origin, sector.location, tariff)


def test_express_price_without_tariff_is_unavailable(fake_supabase):
    fake_supabase.tables["delivery_pricing_config"] = []

    assert delivery_service.express_price("Cocody", _sector(), fake_supabase) is None
    assert delivery_service.pickup_to_depot_price("Cocody", fake_supabase) is None


def test_express_price_with_failing_tariff_read_is_unavailable(fake_supabase):
    fake_supabase.failures["delivery_pricing_config"] = httpx.ReadTimeout("slow")

    assert delivery_service.express_price("Cocody", _sector(), fake_supabase) is None


def test_express_price_with_broken_tariff_raises(fake_supabase):
    fake_supabase.tables["delivery_pricing_config"][0]["rounding"] = 0

    with pytest.raises(InvalidTariffConfig):
        delivery_service.express_price("Cocody", _sector(), fake_supabase)


def test_pickup_to_depot_price_targets_depot(fake_supabase):
    tariff = load_active_tariff(fake_supabase)

    quote = delivery_service.pickup_to_depot_price("Yopougon", fake_supabase)

    expected = price_from_distance(GeoPoint(5.3330, -4.0780), delivery_service.depot_point(), tariff)
    assert quote == expected
    assert quote.distance_km > 0


def test_communes_grouped_in_source_order(fake_supabase):
    groups = delivery_service.list_communes_with_active_sectors(fake_supabase)

    assert [group.commune for group in groups] == ["Abobo", "Cocody"]
    assert [sector.slug for sector in groups[1].sectors] == ["angre", "riviera-2"]


def test_group_sectors_keeps_first_appearance_order():
    sectors = [
        _sector("Yopougon"),
        _sector("Cocody"),
        _sector("Yopougon"),
    ]

    groups = delivery_service.group_sectors_by_commune(sectors)

    assert [group.commune for group in groups] == ["Yopougon", "Cocody"]
    assert len(groups[0].sectors) == 2


def test_express_availability(fake_supabase):
    assert delivery_service.is_express_available("cocody", fake_supabase) is True
    assert delivery_service.is_express_available("Marcory", fake_supabase) is False
    assert delivery_service.is_express_available("Bouaké", fake_supabase) is False


def test_sector_read_failure_is_surfaced(fake_supabase):
    fake_supabase.failures["delivery_sectors"] = httpx.ConnectError("network down")

    with pytest.raises(DataUnavailableError):
        delivery_service.list_communes_with_active_sectors(fake_supabase)


def test_find_zone_for_commune(fake_supabase):
    zone = delivery_service.find_zone_for_commune(" anyama ", fake_supabase)

    assert zone is not None
    assert zone.code == "NORD"
    assert delivery_service.find_zone_for_commune("Man", fake_supabase) is None
