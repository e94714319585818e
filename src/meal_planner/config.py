"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    weeks_count: int = 4
    meals_per_week: int = 4
    budget_per_week: float | None = None
    favorite_injection_probability: float = 0.3
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_budget(raw: str | float | None) -> float | None:
    """Parse a weekly budget; blank, "none" and zero mean no budget."""
    if raw is None:
        return None
    if isinstance(raw, (int, float)):
        return float(raw) if raw > 0 else None
    cleaned = raw.strip().lstrip("$")
    if cleaned.lower() in {"", "none"}:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    return value if value > 0 else None
