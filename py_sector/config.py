"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from SECTOR_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Log format (plain or json)")

    # Generation defaults
    default_seed_count: int = Field(default=50, description="Seed points per sector")
    default_sector_width: float = Field(default=500.0, description="Sector width")
    default_sector_height: float = Field(default=500.0, description="Sector height")
    max_seed_count: int = Field(default=2000, description="Max seed points per request")
    max_sector_size: float = Field(default=5000.0, description="Max sector width/height")


settings = Settings()
