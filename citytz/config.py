"""Configuration management for the project."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Dataset
    cities_file: Optional[str] = Field(
        default=None, description="Path to a cities JSON file (bundled file when unset)"
    )

    # Time
    local_timezone: str = Field(default="UTC", description="IANA zone treated as local time")
    default_time_format: str = Field(default="Y-m-d H:i:s")
    coordinate_tolerance: float = Field(default=0.1, ge=0)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")
    log_stream: str = Field(default="stderr", description="stderr or stdout")


settings = Settings()
