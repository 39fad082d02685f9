"""Application configuration using Pydantic Settings."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import List, Literal

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class Settings(BaseSettings):
    """Application configuration using Pydantic Settings"""

    # OAuth Configuration
    google_client_id: str = Field(default="", description="Google OAuth2 Client ID")
    google_client_secret: str = Field(default="", description="Google OAuth2 Client Secret")
    google_refresh_token: str = Field(default="", description="Google OAuth2 Refresh Token")
    google_token_uri: str = GOOGLE_TOKEN_URI

    # Diagnostics
    debug: bool = Field(default=False, description="Enable debug logging")
    log_level: str = "INFO"

    # Server Configuration
    server_name: str = "Google Forms MCP Server"
    server_version: str = "1.0.0"
    transport: Literal["stdio", "http"] = "stdio"
    server_host: str = "localhost"
    server_port: int = 8002

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def missing_oauth_settings(self) -> List[str]:
        """Return the environment variable names of unset OAuth credentials."""
        required = {
            "GOOGLE_CLIENT_ID": self.google_client_id,
            "GOOGLE_CLIENT_SECRET": self.google_client_secret,
            "GOOGLE_REFRESH_TOKEN": self.google_refresh_token,
        }
        return [name for name, value in required.items() if not value or not value.strip()]

    def is_oauth_configured(self) -> bool:
        """Check if OAuth credentials are properly configured."""
        return not self.missing_oauth_settings()

    def validate_oauth_config(self) -> None:
        """Validate that OAuth configuration is complete."""
        missing = self.missing_oauth_settings()
        if missing:
            raise ValueError(
                "OAuth configuration is incomplete. Please set the following "
                f"environment variables: {', '.join(missing)}"
            )
        logger.debug(f"OAuth configured for client {self.google_client_id[:20]}...")


# Global settings instance
settings = Settings()
