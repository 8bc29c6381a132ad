"""Document catalog and base price endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from ...data.city_pricing_repository import load_city_pricing
from ...exceptions import DataUnavailableError
from ...schemas.pricing import DocumentModel, DocumentPriceResponse
from ...services.documents import DOCUMENT_CONFIGS, DocumentType, line_total, unit_price

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=List[DocumentModel], status_code=status.HTTP_200_OK)
def list_documents() -> List[DocumentModel]:
    return [
        DocumentModel(
            type=config.type.value,
            name=config.name,
            service=config.service,
            base_price=config.base_price,
            processing_time=config.processing_time,
        )
        for config in DOCUMENT_CONFIGS.values()
    ]


@router.get("/{document_type}/price", response_model=DocumentPriceResponse, status_code=status.HTTP_200_OK)
def get_document_price(
    document_type: DocumentType,
    city: str = Query(..., min_length=1, description="City of the issuing office"),
    service_type: str | None = Query(default=None, description="Issuing service (mairie, sous_prefecture, justice)"),
    copies: int = Query(default=1, ge=1, le=50),
) -> DocumentPriceResponse:
    try:
        pricing = load_city_pricing(city)
    except DataUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    unit = unit_price(document_type, city, service_type, pricing)
    return DocumentPriceResponse(
        document_type=document_type.value,
        city=city,
        service_type=service_type,
        copies=copies,
        unit_price=unit,
        total_price=line_total(unit, copies),
    )
