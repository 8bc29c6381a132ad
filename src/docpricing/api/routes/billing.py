"""Billing capture and order endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...exceptions import (
    DataUnavailableError,
    InvalidTariffConfig,
    OrderNotFoundError,
    PricingUnavailableError,
)
from ...persistence.orders import create_order_invoice, get_order_billing
from ...schemas.billing import BillingCaptureRequest, BillingDetails
from ...schemas.orders import OrderCreateRequest, OrderRecord
from ...services.billing import capture_order_billing

logger = logging.getLogger(__name__)

router = APIRouter(tags=["billing"])


def _translate(exc: Exception) -> HTTPException:
    if isinstance(exc, PricingUnavailableError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, InvalidTariffConfig):
        logger.error(f"Invalid delivery tariff: {exc}")
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Invalid delivery pricing configuration: {exc}",
        )
    if isinstance(exc, DataUnavailableError):
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post("/billing/capture", response_model=BillingDetails, response_model_exclude_none=True)
def capture(payload: BillingCaptureRequest) -> BillingDetails:
    """Compute the billing breakdown shown before submission."""
    try:
        return capture_order_billing(payload)
    except (PricingUnavailableError, InvalidTariffConfig, DataUnavailableError) as exc:
        raise _translate(exc) from exc


@router.post(
    "/orders",
    response_model=OrderRecord,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_order(payload: OrderCreateRequest) -> OrderRecord:
    try:
        return create_order_invoice(payload)
    except (PricingUnavailableError, InvalidTariffConfig, DataUnavailableError) as exc:
        raise _translate(exc) from exc
    except Exception as exc:
        logger.exception(f"Error creating order: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create order: {str(exc)}",
        ) from exc


@router.get("/orders/{reference}/billing", response_model=BillingDetails, response_model_exclude_none=True)
def read_order_billing(reference: str) -> BillingDetails:
    """Return the billing captured at submission, never a recomputed one."""
    try:
        return get_order_billing(reference)
    except (OrderNotFoundError, DataUnavailableError) as exc:
        raise _translate(exc) from exc
