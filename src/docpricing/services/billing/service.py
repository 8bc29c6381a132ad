"""Billing capture orchestration: fetch reference data, then run the engine."""

from __future__ import annotations

import logging

from supabase import Client

from ...data.city_pricing_repository import load_city_pricing
from ...data.sectors_repository import load_sector
from ...exceptions import PricingUnavailableError
from ...schemas.billing import BillingCaptureRequest, BillingDetails
from ..delivery.service import express_price, pickup_to_depot_price
from .engine import capture_billing_details
from .modes import DeliveryChoice, RecoveryKind, Route, RouteScenario

logger = logging.getLogger(__name__)


def quote_courier_leg(request: BillingCaptureRequest, client: Client | None = None) -> int | None:
    """GPS quote for the courier leg an order needs, or None if it needs none.

    Raises:
        PricingUnavailableError: when a quote is needed but cannot be computed.
    """
    choice = DeliveryChoice.from_form(request.delivery_form)
    route = Route.classify(request.city, choice.destination)
    kind = choice.recovery.kind

    if route.scenario is RouteScenario.CAPITAL_TO_REGION and kind in (
        RecoveryKind.DEPOT_PICKUP,
        RecoveryKind.EXPRESS_DELIVERY,
    ):
        quote = pickup_to_depot_price(request.city, client)
    elif kind is RecoveryKind.EXPRESS_DELIVERY and request.delivery_sector_id:
        sector = load_sector(request.delivery_sector_id, client)
        if sector is None:
            raise PricingUnavailableError(f"Unknown delivery sector '{request.delivery_sector_id}'")
        quote = express_price(request.city, sector, client)
    else:
        return None

    if quote is None:
        raise PricingUnavailableError("Express pricing is not available yet")
    return quote.price


def capture_order_billing(request: BillingCaptureRequest, client: Client | None = None) -> BillingDetails:
    """Capture the billing record of an order from the live price tables."""
    pricing = load_city_pricing(request.city, client)
    if pricing is None:
        logger.info(f"No active price table for '{request.city}', using document base prices")

    override = request.express_price_override
    if override is None and request.auto_quote:
        override = quote_courier_leg(request, client)

    return capture_billing_details(
        document_type=request.document_type,
        copies=request.copies,
        city=request.city,
        service_type=request.service_type,
        delivery_form=request.delivery_form,
        express_price_override=override,
        pricing=pricing,
    )
