"""Document catalog and base pricing."""

from .catalog import DOCUMENT_CONFIGS, DocumentConfig, DocumentType, ServiceType, get_document_config
from .pricing import delegate_earnings, estimate_completion_time, line_total, unit_price

__all__ = [
    "DOCUMENT_CONFIGS",
    "DocumentConfig",
    "DocumentType",
    "ServiceType",
    "get_document_config",
    "unit_price",
    "line_total",
    "delegate_earnings",
    "estimate_completion_time",
]
