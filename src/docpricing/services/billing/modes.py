"""Typed views of the delivery form's mode fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from .communes import is_capital_commune, normalize_city

DIRECT_PICKUP_PREFIX = "moi_meme_service_"


class RecoveryKind(str, Enum):
    """How the recipient gets the document (``moyen_recuperation``)."""

    DIRECT_PICKUP = "direct_pickup"  # moi_meme_service_<city>
    DEPOT_PICKUP = "depot_pickup"  # moi_meme_gare
    EXPRESS_DELIVERY = "express_delivery"  # livraison_express
    OTHER = "other"


class ExpeditionKind(str, Enum):
    """How the document travels between cities (``moyen_expedition``)."""

    UTB = "utb"
    CLASSIC_TRANSPORT = "transport_classique"
    VIA_CAPITAL = "expedition_abidjan"
    OTHER = "other"


class RouteScenario(str, Enum):
    CAPITAL_TO_CAPITAL = "capital_to_capital"
    CAPITAL_TO_REGION = "capital_to_region"
    REGION_TO_CAPITAL = "region_to_capital"
    REGION_TO_REGION = "region_to_region"


@dataclass(slots=True, frozen=True)
class RecoveryMode:
    kind: RecoveryKind
    raw: str = ""

    @classmethod
    def parse(cls, value: str | None) -> "RecoveryMode":
        raw = value or ""
        if raw.startswith(DIRECT_PICKUP_PREFIX):
            return cls(RecoveryKind.DIRECT_PICKUP, raw)
        if raw == "moi_meme_gare":
            return cls(RecoveryKind.DEPOT_PICKUP, raw)
        if raw == "livraison_express":
            return cls(RecoveryKind.EXPRESS_DELIVERY, raw)
        return cls(RecoveryKind.OTHER, raw)

    @property
    def needs_expedition(self) -> bool:
        return self.kind in (RecoveryKind.DEPOT_PICKUP, RecoveryKind.EXPRESS_DELIVERY)


@dataclass(slots=True, frozen=True)
class ExpeditionMode:
    kind: ExpeditionKind
    raw: str = ""

    @classmethod
    def parse(cls, value: str | None) -> "ExpeditionMode":
        raw = value or ""
        for kind in (ExpeditionKind.UTB, ExpeditionKind.CLASSIC_TRANSPORT, ExpeditionKind.VIA_CAPITAL):
            if raw == kind.value:
                return cls(kind, raw)
        return cls(ExpeditionKind.OTHER, raw)


@dataclass(slots=True, frozen=True)
class Route:
    """Origin/destination classification of an order."""

    origin: str
    destination: str
    scenario: RouteScenario
    same_city: bool

    @classmethod
    def classify(cls, origin: str, destination: str | None) -> "Route":
        destination = destination or ""
        origin_capital = is_capital_commune(origin)
        destination_capital = is_capital_commune(destination)
        if origin_capital and destination_capital:
            scenario = RouteScenario.CAPITAL_TO_CAPITAL
        elif origin_capital:
            scenario = RouteScenario.CAPITAL_TO_REGION
        elif destination_capital:
            scenario = RouteScenario.REGION_TO_CAPITAL
        else:
            scenario = RouteScenario.REGION_TO_REGION
        return cls(
            origin=origin,
            destination=destination,
            scenario=scenario,
            same_city=normalize_city(origin) == normalize_city(destination),
        )


@dataclass(slots=True, frozen=True)
class DeliveryChoice:
    """Parsed delivery form fields used for pricing."""

    recovery: RecoveryMode
    expedition: ExpeditionMode
    preferred_carrier: str
    destination: str

    @classmethod
    def from_form(cls, form: Mapping[str, str]) -> "DeliveryChoice":
        return cls(
            recovery=RecoveryMode.parse(form.get("moyen_recuperation")),
            expedition=ExpeditionMode.parse(form.get("moyen_expedition")),
            preferred_carrier=(form.get("preference_transport") or "").strip(),
            destination=(form.get("ville_destination") or "").strip(),
        )
