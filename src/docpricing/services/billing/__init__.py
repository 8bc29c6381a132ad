"""Billing capture services."""

from .communes import CAPITAL_COMMUNES, CAPITAL_COMMUNES_VERSION, is_capital_commune
from .engine import capture_billing_details
from .service import capture_order_billing, quote_courier_leg

__all__ = [
    "CAPITAL_COMMUNES",
    "CAPITAL_COMMUNES_VERSION",
    "is_capital_commune",
    "capture_billing_details",
    "capture_order_billing",
    "quote_courier_leg",
]
