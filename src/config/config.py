from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the tools service including
    upstream weather endpoints, snippet storage and logging parameters.
    """

    # Application
    app_name: str = Field(default="Weather Snippet Tools", description="Application display name")
    app_version: str = Field(default="1.0.0", description="Application version")

    # Open-Meteo Configuration
    geocoding_base_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        description="Open-Meteo geocoding endpoint",
    )
    forecast_base_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        description="Open-Meteo forecast endpoint",
    )
    geocoding_language: str = Field(default="en", description="Language for geocoding results")
    http_timeout_seconds: Optional[float] = Field(
        default=None, gt=0, description="Outbound HTTP timeout, unset for no client timeout"
    )

    # Snippet Storage Configuration
    gcs_bucket_name: Optional[str] = Field(default=None, description="Bucket holding snippets")
    google_project_id: Optional[str] = Field(default=None, description="Google Cloud Project ID")
    google_service_account_file: Optional[str] = Field(
        default=None, description="Path to Google service account JSON file"
    )
    snippets_prefix: str = Field(default="snippets", description="Blob prefix for snippets")

    # Weather Widget
    widget_html_path: str = Field(
        default=str(Path(__file__).resolve().parent.parent / "static" / "weather" / "index.html"),
        description="Path to the weather widget HTML asset",
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="FastAPI host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="FastAPI port")
    mcp_enabled: bool = Field(default=True, description="Mount the MCP server under /mcp")

    # Logging Configuration
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_to_file: bool = Field(default=False, description="Also write logs under logs/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    @field_validator("snippets_prefix")
    def strip_snippets_prefix(cls, v):
        return v.strip("/")

    def get_google_credentials_path(self) -> Optional[Path]:
        """Get the absolute path to Google service account credentials, if configured."""
        if not self.google_service_account_file:
            return None
        return Path(self.google_service_account_file).resolve()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


config = Config()
