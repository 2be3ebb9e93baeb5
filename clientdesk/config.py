"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Optional[str] = Field(default=None, description="Overrides the debug-derived log level")

    # API Configuration
    api_title: str = Field(default="Client Dashboard")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Supabase Configuration (no defaults: absence is reported at first use)
    supabase_url: Optional[str] = Field(default=None, description="Supabase project URL")
    supabase_key: Optional[str] = Field(default=None, description="Supabase anon or service key")

    # CORS
    cors_origins: str = Field(default=",".join(DEFAULT_CORS_ORIGINS))

    # Pagination
    default_page_size: int = Field(default=25)
    max_page_size: int = Field(default=100)

    # Localization
    default_currency: str = Field(default="USD")

    @property
    def cors_origin_list(self) -> List[str]:
        """Parse CORS origins from the comma-separated setting."""
        if not self.cors_origins or not self.cors_origins.strip():
            return list(DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def effective_log_level(self) -> str:
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.debug else "INFO"

    def missing_store_settings(self) -> List[str]:
        """Names of the environment variables required by the data store that are unset."""
        required_vars = ["supabase_url", "supabase_key"]
        return [var.upper() for var in required_vars if not getattr(self, var, None)]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()
