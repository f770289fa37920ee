"""Application configuration from environment variables."""

from typing import Optional

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env."""

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./debt_tracker.db",
        description="SQLAlchemy database URL",
    )
    database_echo: bool = Field(default=False, description="Log SQL queries")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="logs/server.log", description="Log file path")

    # Debt tracker page
    debt_tracker_path: str = Field(
        default="/main/debt-tracker",
        description="View path invalidated after every ledger mutation",
    )
    currency: str = Field(default="INR", description="ISO currency code for display")
    locale: str = Field(default="en_IN", description="Babel locale for display")

    # API
    api_title: str = Field(default="Debt Tracker API", description="API title")
    api_version: str = Field(default="0.1.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")


# Lazy loader so .env is read after load_dotenv() in the entry point
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings (used by tests after changing the environment)."""
    global _settings_instance
    _settings_instance = None


__all__ = ["Settings", "get_settings", "reset_settings"]
