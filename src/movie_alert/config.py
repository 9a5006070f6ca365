"""Application configuration using Pydantic Settings."""

import shutil
from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from movie_alert.errors import HomeDirectoryError

# Data file lives in ~/.movie_alert unless STATE_FILE says otherwise
DEFAULT_STATE_FILE_NAME = ".movie_alert"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # TMDB API
    tmdb_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("tmdb_api_key", "tmd_api_v3"),
    )
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_movie_url_base: str = "https://www.themoviedb.org/movie"
    tmdb_language: str = "en-US"
    tmdb_region: str = "US"
    request_timeout: float = Field(default=30.0, gt=0)

    # Alerting
    target_genre: str = "Animation"
    state_file: Path | None = None
    browser_command: str | None = None

    # Logging
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("tmdb_movie_url_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def resolve_state_file(self) -> Path:
        """Return the absolute path of the seen-set file.

        Raises:
            HomeDirectoryError: If the home directory cannot be determined.
        """
        try:
            if self.state_file is not None:
                return self.state_file.expanduser().absolute()
            return Path.home() / DEFAULT_STATE_FILE_NAME
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryError() from e

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if not self.tmdb_api_key:
            warnings.append("TMDB_API_KEY is not set - upcoming movies cannot be fetched")

        if self.browser_command and shutil.which(self.browser_command) is None:
            warnings.append(
                f"BROWSER_COMMAND {self.browser_command!r} was not found on PATH - "
                "movies will not open in a browser"
            )

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
