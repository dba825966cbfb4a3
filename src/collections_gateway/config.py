"""
Configuration management for the Collections Gateway
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    # Plain PORT is honored for hosting platforms that inject it
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("PORT", "COLLECTIONS_API_PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Document store
    store_backend: str = "firestore"  # 'firestore', 'memory'
    firestore_project_id: str | None = None
    firestore_database: str | None = None
    firestore_credentials_path: str | None = None
    firestore_credentials_json: str | None = None
    memory_seed_path: str | None = None

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "COLLECTIONS_"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


# Global settings instance
settings = Settings()


def reload_settings() -> Settings:
    """Re-read the environment into the global settings instance.

    Modules hold ``settings`` by reference, so fields are updated in place.
    """
    fresh = Settings()
    for name in Settings.model_fields:
        setattr(settings, name, getattr(fresh, name))
    return settings
