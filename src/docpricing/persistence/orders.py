"""Persistence of orders together with their captured billing record."""

from __future__ import annotations

import logging
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from ..config import settings
from ..db.supabase import fetch_rows, require_client
from ..exceptions import DataUnavailableError, OrderNotFoundError
from ..schemas.billing import BillingDetails
from ..schemas.orders import OrderCreateRequest, OrderRecord
from ..services.billing.service import capture_order_billing
from ..services.documents.pricing import delegate_earnings, estimate_completion_time

logger = logging.getLogger(__name__)

INVOICES_TABLE = "invoices"

_REFERENCE_ALPHABET = string.ascii_uppercase + string.digits


def generate_invoice_reference(now: datetime | None = None) -> str:
    """Invoice reference in the ``IV-YYYYMMDD-XXXX`` format."""
    stamp = (now or datetime.now(timezone.utc)).strftime("%Y%m%d")
    suffix = "".join(secrets.choice(_REFERENCE_ALPHABET) for _ in range(4))
    return f"IV-{stamp}-{suffix}"


def generate_delivery_code() -> str:
    """Four-digit code the recipient gives the courier on delivery."""
    return str(1000 + secrets.randbelow(9000))


def build_invoice_row(payload: OrderCreateRequest, billing: BillingDetails, now: datetime) -> dict[str, Any]:
    order = payload.order
    return {
        "reference": generate_invoice_reference(now),
        "user_id": payload.user_id,
        "request_id": None,
        "amount": billing.total_amount,
        "status": "pending",
        "payment_method": None,
        "expires_at": (now + timedelta(hours=settings.invoice_expiry_hours)).isoformat(),
        "metadata": {
            "document_type": order.document_type.value,
            "city": order.city.strip(),
            "service_type": order.service_type,
            "copies": order.copies,
            "customer_name": payload.customer_name,
            "customer_phone": payload.customer_phone,
            "delegate_earnings": delegate_earnings(billing.total_amount),
            "estimated_completion": estimate_completion_time(order.city, now).isoformat(),
            "delivery_code": generate_delivery_code(),
            "delivery_form": dict(order.delivery_form),
            "billing_details": billing.to_record(),
        },
    }


def _insert(supabase: Client, row: dict[str, Any]) -> dict[str, Any]:
    try:
        response = supabase.table(INVOICES_TABLE).insert(row).execute()
    except (APIError, httpx.HTTPError) as exc:
        logger.error(f"Failed to save invoice {row['reference']}: {exc}")
        raise DataUnavailableError(f"Failed to save invoice: {exc}") from exc
    data = response.data or []
    return data[0] if data else row


def create_order_invoice(payload: OrderCreateRequest, client: Client | None = None) -> OrderRecord:
    """Capture the billing of a new order and store it with a pending invoice.

    The captured record is written once, verbatim, into the invoice metadata;
    later reads go through :func:`get_order_billing` and never recompute it.
    """
    supabase = require_client(client)
    billing = capture_order_billing(payload.order, supabase)
    row = build_invoice_row(payload, billing, datetime.now(timezone.utc))
    saved = _insert(supabase, row)
    logger.info(f"Created invoice {saved['reference']} for {billing.total_amount} FCFA")
    return OrderRecord(
        reference=saved["reference"],
        amount=saved["amount"],
        status=saved.get("status", "pending"),
        expires_at=saved["expires_at"],
        billing_details=billing,
    )


def get_order_billing(reference: str, client: Client | None = None) -> BillingDetails:
    """Read back the billing record captured for an invoice."""
    rows = fetch_rows(
        INVOICES_TABLE,
        lambda query: query.select("reference, metadata").eq("reference", reference).limit(1),
        client,
    )
    if not rows:
        raise OrderNotFoundError(f"No order found for reference '{reference}'")

    stored = (rows[0].get("metadata") or {}).get("billing_details")
    if not stored:
        raise OrderNotFoundError(f"Order '{reference}' has no captured billing")
    return BillingDetails.model_validate(stored)

