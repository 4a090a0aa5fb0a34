"""
Application settings.

Values come from environment variables (or a local .env file). Everything the
storefront needs from the outside world is optional so a missing value
degrades to placeholders instead of failing at import time.
"""

from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the storefront API and client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront Catalog API"
    app_version: str = "1.0.0"
    debug: bool = False
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database (hosted backend, read-only)
    DATABASE_URL: str = "sqlite:///./storefront.db"

    # Object storage for product, store and banner images
    SUPABASE_URL: Optional[str] = Field(default=None, description="Storage base URL")
    STORAGE_BUCKET: str = "produtos"

    # Site / client
    SITE_URL: Optional[str] = None
    CATALOG_API_URL: Optional[str] = None
    HTTP_TIMEOUT: float = 10.0

    # Branding and contact
    BRAND_NAME: str = "TurattiMT"
    WHATSAPP_COUNTRY_CODE: str = "55"

    # CORS
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    @property
    def log_format(self) -> str:
        return "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def site_url(self) -> str:
        """Public site URL, localhost when not configured."""
        return (self.SITE_URL or "http://localhost:3000").rstrip("/")

    @property
    def catalog_api_url(self) -> str:
        """Base URL the client uses to reach the catalog endpoints."""
        if self.CATALOG_API_URL:
            return self.CATALOG_API_URL.rstrip("/")
        return f"{self.site_url}/api"

    @property
    def storage_base_url(self) -> Optional[str]:
        if not self.SUPABASE_URL:
            return None
        return self.SUPABASE_URL.rstrip("/")


settings = Settings()
