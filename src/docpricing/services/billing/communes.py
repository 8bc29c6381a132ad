"""Communes of the Abidjan metropolitan area.

Single shared list used by the billing classifier and by any client-facing
helper. Bump ``CAPITAL_COMMUNES_VERSION`` whenever the set changes.
"""

from __future__ import annotations

CAPITAL_NAME = "Abidjan"

CAPITAL_COMMUNES_VERSION = "2024.1"

CAPITAL_COMMUNES: frozenset[str] = frozenset(
    {
        "abidjan",
        "cocody",
        "plateau",
        "adjame",
        "abobo",
        "yopougon",
        "koumassi",
        "port-bouet",
        "marcory",
        "treichville",
        "attécoubé",
        "anyama",
        "bingerville",
        "songon",
        # capital-adjacent, billed as Abidjan
        "grand-bassam",
        "dabou",
        "jacqueville",
        "grand-lahou",
    }
)


def normalize_city(name: str | None) -> str:
    return (name or "").strip().lower()


def is_capital_commune(name: str | None) -> bool:
    """True if ``name`` belongs to the capital area (trimmed, case-insensitive)."""
    return normalize_city(name) in CAPITAL_COMMUNES


def display_city(name: str | None) -> str:
    """Capitalize a city name for invoices (``"BOUAKÉ"`` -> ``"Bouaké"``)."""
    return (name or "").strip().capitalize()


def display_destination(name: str | None) -> str:
    """Like :func:`display_city`, but capital communes display as Abidjan."""
    if is_capital_commune(name):
        return CAPITAL_NAME
    return display_city(name)
