"""Per-copy document pricing and related estimates."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

from ...config import settings
from ...models.domain import CityPricing
from .catalog import DocumentType, ServiceType, get_document_config

BASE_PROCESSING_DELAY_HOURS = 72

FALLBACK_SERVICE_ORDER: tuple[str, ...] = (
    ServiceType.MAIRIE.value,
    ServiceType.SOUS_PREFECTURE.value,
    ServiceType.JUSTICE.value,
)

CITY_DELAY_MULTIPLIERS: dict[str, float] = {
    "abidjan": 1.0,
    "bouaké": 1.2,
    "san-pédro": 1.3,
    "yamoussoukro": 1.1,
    "daloa": 1.4,
    "korhogo": 1.5,
    "man": 1.6,
    "divo": 1.3,
    "gagnoa": 1.3,
    "abengourou": 1.4,
}
DEFAULT_DELAY_MULTIPLIER = 1.3


def round_amount(value: float) -> int:
    """Round half up to a whole FCFA amount."""
    return int(math.floor(value + 0.5))


def _applies_to(pricing: CityPricing | None, city: str) -> bool:
    if pricing is None or not pricing.is_active:
        return False
    return pricing.city.strip().lower() == city.strip().lower()


def unit_price(
    document_type: DocumentType | str,
    city: str,
    service_type: str | None = None,
    pricing: CityPricing | None = None,
) -> int:
    """Price of one copy of a document for a city and issuing service.

    The requested service's price wins; otherwise the first non-empty price
    among ``mairie``, ``sous_prefecture`` and ``justice`` is used, and finally
    the document's default base price.
    """
    config = get_document_config(document_type)
    doc_key = config.type.value

    if _applies_to(pricing, city):
        price = pricing.price_for(service_type, doc_key) if service_type else 0
        if not price:
            for service in FALLBACK_SERVICE_ORDER:
                price = pricing.price_for(service, doc_key)
                if price:
                    break
        if price > 0:
            return round_amount(price)

    return round_amount(config.base_price)


def line_total(unit: int, copies: int) -> int:
    return round_amount(unit * copies)


def delegate_earnings(total_amount: int, rate: float | None = None) -> int:
    """Share of an order paid to the field delegate."""
    commission = settings.delegate_commission_rate if rate is None else rate
    return round_amount(total_amount * commission)


def estimate_completion_time(city: str, now: datetime | None = None) -> datetime:
    """Estimated completion date: the base delay scaled by a per-city multiplier."""
    start = now or datetime.now(timezone.utc)
    multiplier = CITY_DELAY_MULTIPLIERS.get(city.strip().lower(), DEFAULT_DELAY_MULTIPLIER)
    return start + timedelta(hours=BASE_PROCESSING_DELAY_HOURS * multiplier)
