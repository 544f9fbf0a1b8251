"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Volunteer directory
    volunteer_directory_file: Optional[Path] = Field(
        default=None,
        description="YAML file of volunteer records (defaults to config/volunteers.yaml)",
    )

    # Matching
    default_max_matches: int = Field(
        default=5,
        ge=1,
        description="Number of candidates returned when the caller does not ask for a count",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def directory_path(self) -> Path:
        """Path to the volunteer directory file."""
        return self.volunteer_directory_file or self.config_dir / "volunteers.yaml"

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()
