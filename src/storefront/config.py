from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables with STOREFRONT_ prefix."""

    # CMS
    cms_base_url: str = "http://localhost:8080"
    tenant_id: str = "vijfhart"
    cms_api_key: str | None = None
    # Revalidation hint (seconds) handed to the transport as-is
    cache_ttl: int = 300
    http_timeout_seconds: float = 10.0
    # App
    debug: bool = False
    api_prefix: str = "/api/v1"

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
