"""Express-delivery pricing services."""

from .service import (
    CommuneSectors,
    depot_point,
    express_price,
    find_zone_for_commune,
    get_sectors_for_commune,
    is_express_available,
    list_communes_with_active_sectors,
    list_delivery_zones,
    pickup_to_depot_price,
    quote_between_points,
)

__all__ = [
    "CommuneSectors",
    "depot_point",
    "express_price",
    "pickup_to_depot_price",
    "quote_between_points",
    "list_communes_with_active_sectors",
    "get_sectors_for_commune",
    "is_express_available",
    "list_delivery_zones",
    "find_zone_for_commune",
]
