"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="AVANZA_", extra="ignore"
    )

    # Service
    service_name: str = "avanza-engine"
    log_level: str = "INFO"

    # Reports
    essential_category: str = "obligatorios"
    schedule_display_limit: int = 360  # rows of each amortization table returned
    projection_months: int = 6


settings = Settings()
