"""Custom exceptions raised by the pricing services."""


class PricingError(Exception):
    """Base exception for the pricing and billing services."""


class InvalidTariffConfig(PricingError, ValueError):
    """Raised when a delivery tariff cannot produce a meaningful price."""


class DataUnavailableError(PricingError):
    """Raised when a reference-data read fails at the transport or API level."""


class OrderNotFoundError(PricingError):
    """Raised when no persisted order matches an invoice reference."""


class PricingUnavailableError(PricingError):
    """Raised when an express quote is required but no tariff is configured."""
