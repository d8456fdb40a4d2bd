"""Configuration management for the application."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REQUIRED_VENUES = [f"venue{i:02d}" for i in range(1, 16)]

DEFAULT_COUPONS = [
    {"vendorid": "test-vendor", "imgurl": "https://example.com/coupon.png"},
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database: DATABASE_URL selects a networked store, otherwise DB_PATH is a SQLite file
    database_url: str | None = Field(default=None)
    db_path: str = Field(default="Data/ARCompletions.db")
    auto_migrate: bool = Field(default=True)

    # Rally
    required_venues: list[str] = Field(default_factory=lambda: list(DEFAULT_REQUIRED_VENUES))
    coupons: list[dict[str, str]] = Field(default_factory=lambda: list(DEFAULT_COUPONS))

    # Static files
    static_dir: str = Field(default="wwwroot")
    static_prefix: str = Field(default="/static")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has a usable rally configuration."""
        if self.environment == "production" and not self.required_venues:
            raise ValueError("REQUIRED_VENUES must not be empty in production")
        return self

    @property
    def sqlalchemy_url(self) -> str:
        """Resolve the connection string for the configured backend."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.db_path}"

    @property
    def is_sqlite(self) -> bool:
        """Check if the embedded-file store is in use."""
        return self.sqlalchemy_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    def ensure_db_dir(self) -> None:
        """Create the parent directory of the SQLite file if needed."""
        if self.database_url or self.db_path == ":memory:":
            return
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
