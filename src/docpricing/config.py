"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="DOCPRICING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Document Delivery Pricing API"
    api_prefix: str = "/api"
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:8081",
            "http://127.0.0.1:8081",
            "http://localhost:19006",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    # Pricing defaults
    default_express_fee: int = Field(
        default=2000,
        ge=0,
        description="Express fee (FCFA) used when no GPS quote is supplied at capture time.",
    )
    pickup_fallback_latitude: float = Field(
        default=5.3200,
        description="Fallback pickup latitude (Plateau) for communes without a registered town hall.",
    )
    pickup_fallback_longitude: float = Field(default=-4.0170)
    depot_latitude: float = Field(
        default=5.3364,
        description="Adjamé bus station, relay depot for shipments to the interior.",
    )
    depot_longitude: float = Field(default=-4.0267)

    # Orders
    invoice_expiry_hours: int = Field(default=24, ge=1)
    delegate_commission_rate: float = Field(default=0.6, ge=0.0, le=1.0)

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
