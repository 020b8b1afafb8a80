"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_verification_token: str = ""
    slack_bot_token: str = ""

    # Notion
    notion_api_key: str = ""
    notion_database_id: str = ""

    # Load balancer probes send this User-Agent on GET
    health_check_user_agent: str = "GoogleHC/1.0"

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
