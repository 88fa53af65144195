"""Application configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Residency rule
    days_required: int = Field(1095, gt=0)
    max_partial_credit: int = Field(365, ge=0)
    partial_credit_rate: float = Field(0.5, ge=0, le=1)
    lookback_years: int = Field(5, gt=0)

    # Rate limiting for calculation endpoints
    calculation_rate_limit: str = "60/minute"

    # Application
    log_level: str = "INFO"
    debug: bool = True

    # CORS
    allowed_origins: list[str] = ["http://localhost:8081", "http://localhost:19006"]

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()
