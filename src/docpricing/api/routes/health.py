"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/database", status_code=status.HTTP_200_OK)
def check_database() -> dict:
    """Check database connection and tariff availability."""
    from ...data.tariff_repository import load_active_tariff
    from ...db.supabase import get_supabase_client
    from ...exceptions import DataUnavailableError

    supabase = get_supabase_client()
    if not supabase:
        return {
            "configured": False,
            "message": "Supabase not configured. Set DOCPRICING_SUPABASE_URL and DOCPRICING_SUPABASE_KEY environment variables.",
            "tariff_configured": False,
        }

    try:
        tariff = load_active_tariff(supabase)
    except DataUnavailableError as exc:
        return {
            "configured": True,
            "connected": False,
            "error": str(exc),
            "message": f"Database connection error: {exc}",
        }

    return {
        "configured": True,
        "connected": True,
        "tariff_configured": tariff is not None,
        "message": "Database connected." if tariff else "Database connected but no delivery pricing config found.",
    }
