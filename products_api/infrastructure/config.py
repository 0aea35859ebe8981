"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://products:products_dev_password@db:5432/products"

    # Authentication
    jwt_secret: str = "dev-jwt-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expiration_seconds: int = 7 * 24 * 3600

    # Pagination defaults
    default_page_number: int = 0
    default_page_size: int = 10
    default_sort_by: str = "id"
    default_sort_direction: str = "asc"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
