"""Order submission schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .billing import BillingCaptureRequest, BillingDetails


class OrderCreateRequest(BaseModel):
    user_id: str
    customer_name: str = Field(..., min_length=1)
    customer_phone: str = Field(..., min_length=1)
    order: BillingCaptureRequest


class OrderRecord(BaseModel):
    reference: str
    amount: int
    status: str
    expires_at: Optional[str] = None
    billing_details: BillingDetails
