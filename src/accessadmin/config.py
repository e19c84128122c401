"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="ACCESSADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Access entry API (client side)
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the access entry API",
    )
    api_token: str = Field(default="", description="Bearer token for the admin API")
    request_timeout: float = Field(default=10.0, description="HTTP timeout in seconds")

    # Reference server
    server_host: str = Field(default="127.0.0.1", description="Bind address")
    server_port: int = Field(default=8000, description="Bind port")
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma separated list of allowed CORS origins",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
