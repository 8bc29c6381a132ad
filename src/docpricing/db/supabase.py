"""Supabase client for the pricing backend."""

import logging
from functools import lru_cache
from typing import Any, Callable

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client

from ..config import settings
from ..exceptions import DataUnavailableError

logger = logging.getLogger(__name__)


@lru_cache()
def get_supabase_client() -> Client | None:
    """Get cached Supabase client instance.

    Returns:
        Supabase Client instance if configured, None otherwise.
        Note: This does not test the connection - actual queries may fail with network errors.
    """
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured (missing URL or key)")
        return None

    try:
        return create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None


def require_client(client: Client | None = None) -> Client:
    """Return ``client`` or the cached one, raising if the store is not configured."""
    resolved = client if client is not None else get_supabase_client()
    if resolved is None:
        raise DataUnavailableError(
            "Supabase not configured. Set DOCPRICING_SUPABASE_URL and DOCPRICING_SUPABASE_KEY."
        )
    return resolved


def fetch_rows(table: str, build: Callable[[Any], Any], client: Client | None = None) -> list[dict]:
    """Run a read query against ``table`` and return its rows.

    ``build`` receives the table query builder and returns the filtered query.
    Transport and API failures are re-raised as :class:`DataUnavailableError`
    so callers never mistake an outage for an empty result.
    """
    supabase = require_client(client)
    try:
        response = build(supabase.table(table)).execute()
    except (APIError, httpx.HTTPError) as exc:
        logger.warning(f"Query on '{table}' failed: {exc}")
        raise DataUnavailableError(f"Failed to read '{table}': {exc}") from exc
    return list(response.data or [])
