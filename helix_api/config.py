"""Configuration settings for the Helix API client."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .constants import DEFAULT_BASE_URL

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Credentials (issued externally, attached as opaque headers)
    helix_client_id: str = Field(default="")
    helix_access_token: str = Field(default="")

    # Transport
    helix_base_url: str = Field(default=DEFAULT_BASE_URL)
    helix_timeout: float = Field(default=30.0, description="Total request timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get client settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
