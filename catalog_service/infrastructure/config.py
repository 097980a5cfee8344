"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "1.0.0"
    service_name: str = "catalog-service"
    debug: bool = False
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"
    port: int = 3000
    gzip_minimum_size: int = 1000

    # Database
    database_url: str = "postgresql+asyncpg://catalog:catalog_dev_password@db:5432/catalog"
    seed_database: bool = False
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Query pipeline
    default_page_size: int = 20
    max_page_size: int = 100

    # Review generator
    review_max_attempts_per_review: int = 100

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
