"""Billing capture for single-document orders.

The engine turns an order and its delivery form into an itemised
:class:`BillingDetails`. It performs no I/O: the city price table and the
express quote are fetched by the caller and passed in. Combinations the
decision table does not cover produce no fee for that line and are logged.
"""

from __future__ import annotations

import logging
from typing import Mapping

from ...config import settings
from ...models.domain import CityPricing
from ...schemas.billing import BillingDetails, BillingLine, DocumentOrderLine, PaymentBreakdown
from ..documents.catalog import DocumentType, get_document_config
from ..documents.pricing import line_total, unit_price
from .communes import display_city, display_destination
from .modes import (
    DeliveryChoice,
    ExpeditionKind,
    RecoveryKind,
    RecoveryMode,
    Route,
    RouteScenario,
)

logger = logging.getLogger(__name__)

PRESTATION_DIRECT_PICKUP_FEE = 1000
PRESTATION_FEE = 2000
SHIPPING_FLAT_FEE = 1000
SHIPPING_UTB_FEE_PER_COPY = 1000
SHIPPING_VIA_CAPITAL_FEE = 4000

PRESTATION_DIRECT_PICKUP_LABEL = "Prestation (récupération directe)"
PRESTATION_LABEL = "Prestation"
EXPRESS_LABEL = "Livraison express"
COURIER_TO_DEPOT_LABEL = "Recuperation livreur (mairie → gare)"
UTB_CARRIER = "UTB"
OTHER_CARRIER = "autre compagnie"
VIA_CAPITAL_CARRIER = "expédition par Abidjan"


def prestation_line(recovery: RecoveryMode) -> BillingLine:
    # single-document orders do not use the progressive multi-document tiers
    if recovery.kind is RecoveryKind.DIRECT_PICKUP:
        return BillingLine(description=PRESTATION_DIRECT_PICKUP_LABEL, amount=PRESTATION_DIRECT_PICKUP_FEE)
    return BillingLine(description=PRESTATION_LABEL, amount=PRESTATION_FEE)


def _carrier_name(choice: DeliveryChoice) -> str:
    if choice.expedition.kind is ExpeditionKind.UTB:
        return UTB_CARRIER
    return choice.preferred_carrier or OTHER_CARRIER


def _shipping_description(route: Route, carrier: str) -> str:
    return f"Expédition de {display_city(route.origin)} à {display_destination(route.destination)} par {carrier}"


def shipping_line(route: Route, choice: DeliveryChoice, copies: int) -> BillingLine | None:
    """Inter-city expedition fee, or None when the document does not travel."""
    if route.scenario is RouteScenario.CAPITAL_TO_CAPITAL or route.same_city:
        return None
    if not choice.recovery.needs_expedition:
        return None

    if route.scenario is RouteScenario.REGION_TO_REGION and choice.expedition.kind is ExpeditionKind.VIA_CAPITAL:
        return BillingLine(
            description=_shipping_description(route, VIA_CAPITAL_CARRIER),
            amount=SHIPPING_VIA_CAPITAL_FEE,
        )

    if choice.expedition.kind is ExpeditionKind.UTB:
        amount = SHIPPING_UTB_FEE_PER_COPY * copies
    else:
        amount = SHIPPING_FLAT_FEE
    return BillingLine(description=_shipping_description(route, _carrier_name(choice)), amount=amount)


def express_line(route: Route, choice: DeliveryChoice, fee: int) -> BillingLine | None:
    """Courier fee: home delivery, or the mandatory town hall to depot leg."""
    kind = choice.recovery.kind
    courier_leg = route.scenario is RouteScenario.CAPITAL_TO_REGION

    if kind is RecoveryKind.EXPRESS_DELIVERY or (kind is RecoveryKind.DEPOT_PICKUP and courier_leg):
        if fee <= 0:
            return None
        description = COURIER_TO_DEPOT_LABEL if courier_leg else EXPRESS_LABEL
        return BillingLine(description=description, amount=fee)
    return None


def capture_billing_details(
    document_type: DocumentType | str,
    copies: int,
    city: str,
    service_type: str | None,
    delivery_form: Mapping[str, str],
    express_price_override: int | None = None,
    pricing: CityPricing | None = None,
) -> BillingDetails:
    """Compute the frozen billing breakdown of a single-document order.

    Args:
        document_type: requested document.
        copies: number of copies, at least 1.
        city: city of the issuing office, the shipment origin.
        service_type: issuing service (``mairie``, ``sous_prefecture``...).
        delivery_form: delivery form fields; ``moyen_recuperation``,
            ``moyen_expedition``, ``preference_transport`` and
            ``ville_destination`` are read, others are ignored.
        express_price_override: GPS quote for the courier leg; the configured
            default express fee applies when omitted.
        pricing: price table snapshot of ``city``, if one is configured.
    """
    if copies < 1:
        raise ValueError(f"copies must be >= 1, got {copies}")

    config = get_document_config(document_type)
    unit = unit_price(config.type, city, service_type, pricing)
    documents_total = line_total(unit, copies)

    choice = DeliveryChoice.from_form(delivery_form)
    route = Route.classify(city, choice.destination)

    if choice.recovery.kind is RecoveryKind.OTHER:
        logger.warning(
            f"Unrecognised recovery mode {choice.recovery.raw!r} for order {city} -> "
            f"{choice.destination or '-'}; no shipping or express fee applied"
        )

    express_fee = express_price_override if express_price_override is not None else settings.default_express_fee

    prestation = prestation_line(choice.recovery)
    shipping = shipping_line(route, choice, copies)
    express = express_line(route, choice, express_fee)

    breakdown = PaymentBreakdown(
        documents_subtotal=documents_total,
        prestation_fee=prestation.amount,
        shipping_fee=shipping.amount if shipping else 0,
        express_fee=express.amount if express else 0,
    )
    return BillingDetails(
        documents=(
            DocumentOrderLine(
                document_type=config.type,
                document_name=config.name,
                copies=copies,
                unit_price=unit,
                total_price=documents_total,
            ),
        ),
        prestation=prestation,
        shipping=shipping,
        express_delivery=express,
        total_amount=breakdown.total,
        payment_breakdown=breakdown,
    )
