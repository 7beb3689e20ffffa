"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Normalization
    default_category: str = "other"
    strip_cooking_units: bool = False  # drop tbsp/pinch/clove style units from shopping lines

    # Shopping lists
    list_name_template: str = "Meal Plan — Week of {week}"

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @field_validator("default_category")
    @classmethod
    def validate_default_category(cls, value: str) -> str:
        """Require the fallback category to be one of the canonical categories."""
        from grocerylist.normalize.categories import CANONICAL_CATEGORIES

        normalized = value.strip().lower()
        if normalized not in CANONICAL_CATEGORIES:
            raise ValueError(
                f"default_category must be one of {sorted(CANONICAL_CATEGORIES)}, got {value!r}"
            )
        return normalized

    @property
    def origins(self) -> list[str]:
        """Get the allowed CORS origins as a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
