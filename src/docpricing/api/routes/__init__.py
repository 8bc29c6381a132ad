"""Route group exports."""

from . import billing, documents, health, pricing, sectors

__all__ = ["billing", "documents", "health", "pricing", "sectors"]
