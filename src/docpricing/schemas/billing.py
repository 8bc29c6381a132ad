"""Billing record schemas.

A :class:`BillingDetails` is captured once when an order is submitted and
stored verbatim with the order. Every model here is frozen.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..services.documents.catalog import DocumentType


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DocumentOrderLine(_FrozenModel):
    document_type: DocumentType
    document_name: str
    copies: int = Field(..., ge=1)
    unit_price: int = Field(..., ge=0)
    total_price: int = Field(..., ge=0)


class BillingLine(_FrozenModel):
    description: str
    amount: int = Field(..., ge=0)


class PaymentBreakdown(_FrozenModel):
    documents_subtotal: int = Field(..., ge=0)
    prestation_fee: int = Field(..., ge=0)
    shipping_fee: int = Field(default=0, ge=0)
    express_fee: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.documents_subtotal + self.prestation_fee + self.shipping_fee + self.express_fee


class BillingDetails(_FrozenModel):
    documents: Tuple[DocumentOrderLine, ...]
    prestation: BillingLine
    shipping: Optional[BillingLine] = None
    express_delivery: Optional[BillingLine] = None
    total_amount: int
    payment_breakdown: PaymentBreakdown

    @model_validator(mode="after")
    def _check_totals(self) -> "BillingDetails":
        if self.total_amount != self.payment_breakdown.total:
            raise ValueError(
                f"total_amount {self.total_amount} does not match breakdown total "
                f"{self.payment_breakdown.total}"
            )
        documents_total = sum(line.total_price for line in self.documents)
        if documents_total != self.payment_breakdown.documents_subtotal:
            raise ValueError("documents_subtotal does not match the document lines")
        return self

    def to_record(self) -> dict:
        """Serialize for storage, omitting absent shipping/express lines."""
        return self.model_dump(mode="json", exclude_none=True)


class BillingCaptureRequest(BaseModel):
    document_type: DocumentType
    copies: int = Field(..., ge=1, le=50)
    city: str = Field(..., min_length=1, description="City of the issuing office (origin).")
    service_type: str = Field(..., min_length=1)
    delivery_form: Dict[str, str] = Field(
        default_factory=dict,
        description="Delivery form fields (moyen_recuperation, moyen_expedition, preference_transport, ville_destination...).",
    )
    express_price_override: Optional[int] = Field(
        default=None, ge=0, description="GPS-computed express price to use instead of the default."
    )
    delivery_sector_id: Optional[str] = Field(
        default=None, description="Destination sector for home delivery within a commune."
    )
    auto_quote: bool = Field(
        default=False,
        description="Quote the courier leg from GPS coordinates when no override is given.",
    )
