"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profile Directory API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(
        default=False,
        description="Force JSON log output even when attached to a terminal",
    )

    # Simulated network latency for profile mutations
    create_latency_seconds: float = Field(default=0.5, ge=0)
    update_latency_seconds: float = Field(default=0.5, ge=0)
    delete_latency_seconds: float = Field(default=0.3, ge=0)

    # Settled submissions kept for polling; oldest are forgotten first
    mutation_history_limit: int = Field(default=1000, ge=1)

    # Mock data
    seed_on_startup: bool = Field(default=True)
    seed_count: int = Field(default=12, ge=0)
    seed_random_seed: int = Field(
        default=123,
        description="Seed for deterministic mock profile generation",
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )
    read_rate_limit: str = Field(default="60/minute")
    write_rate_limit: str = Field(default="20/minute")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
