# =============================================================================
# Application Settings
# =============================================================================
"""
Pydantic Settings configuration for the Interview Prep backend.

Loads configuration from environment variables with validation and type safety.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SCRAPER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    The .env file is automatically loaded if present.

    Attributes:
        app_name: Name of the application.
        app_env: Current environment (development, staging, production).
        debug: Enable debug mode for verbose logging.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        api_host: Host address for the API server.
        api_port: Port number for the API server.
        cors_origins: Comma-separated list of origins allowed by CORS.
        scraper_timeout: Timeout in seconds for fetching a job posting page.
        scraper_user_agent: User-Agent header sent when fetching pages.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="interview-prep-backend",
        description="Name of the application"
    )
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )
    debug: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    # -------------------------------------------------------------------------
    # API Settings
    # -------------------------------------------------------------------------
    api_host: str = Field(
        default="0.0.0.0",
        description="Host address for the API server"
    )
    api_port: int = Field(
        default=8000,
        description="Port number for the API server"
    )
    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        description="Comma-separated list of origins allowed by CORS"
    )

    # -------------------------------------------------------------------------
    # Scraper Settings
    # -------------------------------------------------------------------------
    scraper_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for fetching a job posting page"
    )
    scraper_user_agent: str = Field(
        default=DEFAULT_SCRAPER_USER_AGENT,
        description="User-Agent header sent when fetching job posting pages"
    )

    # -------------------------------------------------------------------------
    # Model Configuration
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS origins string into a list.

        Returns:
            List of allowed origin strings.
        """
        return [
            origin.strip()
            for origin in self.cors_origins.split(",")
            if origin.strip()
        ]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("scraper_timeout")
    @classmethod
    def validate_scraper_timeout(cls, v: float) -> float:
        """
        Validate that the scraper timeout is positive.

        Args:
            v: The timeout value in seconds.

        Returns:
            The validated timeout.

        Raises:
            ValueError: If the timeout is zero or negative.
        """
        if v <= 0:
            raise ValueError("scraper_timeout must be greater than zero")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Uses LRU cache to ensure settings are only loaded once.

    Returns:
        Settings instance with loaded configuration.
    """
    return Settings()
