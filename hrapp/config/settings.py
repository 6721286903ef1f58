"""
Application settings and configuration management.

This module centralizes all application configuration using Pydantic settings
for type validation and environment variable handling.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Main application settings class.

    Uses Pydantic BaseSettings to automatically load configuration from:
    1. Environment variables
    2. .env file
    3. Default values defined here
    """

    # Database Configuration
    database_url: str = "sqlite:///./hrapp.db"

    # Search index Configuration
    redis_url: str = "redis://localhost:6379/0"
    search_backend: str = "redis"  # redis, memory
    search_index_prefix: str = "hrapp"

    # Service behaviour
    # When enabled, update() refuses to write entities whose id is unknown
    update_requires_existing: bool = False

    # Application Configuration
    debug: bool = False
    log_level: str = "INFO"

    # API Configuration
    api_prefix: str = "/api"
    project_name: str = "HR Entity Services"
    default_page_size: int = 20
    max_page_size: int = 1000

    # Pydantic configuration for settings loading
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


# Global settings instance
# This will be imported throughout the application for configuration access
settings = Settings()
