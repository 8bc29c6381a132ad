"""Catalog of the civil-registry documents that can be requested."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DocumentType(str, Enum):
    DECLARATION_NAISSANCE = "declaration_naissance"
    EXTRAIT_ACTE_NAISSANCE = "extrait_acte_naissance"
    COPIE_INTEGRALE_NAISSANCE = "copie_integrale_naissance"
    EXTRAIT_ACTE_MARIAGE = "extrait_acte_mariage"
    COPIE_INTEGRALE_MARIAGE = "copie_integrale_mariage"
    CERTIFICAT_CELIBAT = "certificat_celibat"
    CERTIFICAT_NON_DIVORCE = "certificat_non_divorce"
    CERTIFICAT_RESIDENCE = "certificat_residence"


class ServiceType(str, Enum):
    MAIRIE = "mairie"
    SOUS_PREFECTURE = "sous_prefecture"
    JUSTICE = "justice"
    MAIRIE_SOUS_PREFECTURE = "mairie/sous-préfecture"


SERVICE_LABELS: dict[ServiceType, str] = {
    ServiceType.MAIRIE: "Mairie",
    ServiceType.SOUS_PREFECTURE: "Sous-préfecture",
    ServiceType.JUSTICE: "Tribunal",
    ServiceType.MAIRIE_SOUS_PREFECTURE: "Mairie/Sous-préfecture",
}


@dataclass(slots=True, frozen=True)
class DocumentConfig:
    type: DocumentType
    name: str
    service: str
    base_price: int
    processing_time: str = "72h"


_CIVIL_REGISTRY = "mairie/sous-préfecture"

DOCUMENT_CONFIGS: dict[DocumentType, DocumentConfig] = {
    config.type: config
    for config in (
        DocumentConfig(DocumentType.DECLARATION_NAISSANCE, "Déclaration de naissance", _CIVIL_REGISTRY, 1000),
        DocumentConfig(DocumentType.EXTRAIT_ACTE_NAISSANCE, "Extrait d'acte de naissance", _CIVIL_REGISTRY, 1500),
        DocumentConfig(
            DocumentType.COPIE_INTEGRALE_NAISSANCE,
            "Copie intégrale d'extrait d'acte de naissance",
            _CIVIL_REGISTRY,
            2000,
        ),
        DocumentConfig(DocumentType.EXTRAIT_ACTE_MARIAGE, "Extrait d'acte de mariage", _CIVIL_REGISTRY, 2000),
        DocumentConfig(
            DocumentType.COPIE_INTEGRALE_MARIAGE,
            "Copie intégrale d'extrait d'acte de mariage",
            _CIVIL_REGISTRY,
            2500,
        ),
        DocumentConfig(DocumentType.CERTIFICAT_CELIBAT, "Certificat de célibat", _CIVIL_REGISTRY, 1500),
        DocumentConfig(
            DocumentType.CERTIFICAT_NON_DIVORCE,
            "Certificat de non divorce non remariage",
            _CIVIL_REGISTRY,
            1500,
        ),
        DocumentConfig(DocumentType.CERTIFICAT_RESIDENCE, "Certificat de résidence", _CIVIL_REGISTRY, 1000),
    )
}


def get_document_config(document_type: DocumentType | str) -> DocumentConfig:
    """Look up a document's configuration, raising ValueError for unknown types."""
    return DOCUMENT_CONFIGS[DocumentType(document_type)]
