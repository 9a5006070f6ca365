"""Pytest fixtures and configuration."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from movie_alert.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Make every test start from fresh settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_settings() -> Iterator:
    """Mock settings used by the TMDB client."""
    with patch("movie_alert.services.tmdb.get_settings") as mock:
        mock.return_value.tmdb_api_key = "test-api-key"
        mock.return_value.tmdb_base_url = "https://api.themoviedb.org/3"
        mock.return_value.tmdb_language = "en-US"
        mock.return_value.tmdb_region = "US"
        mock.return_value.request_timeout = 30.0
        yield mock


@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    """Location of the seen-set file for one test."""
    return tmp_path / "movie_alert.json"


@pytest.fixture
def settings(state_file: Path) -> Settings:
    """Settings isolated from any .env file."""
    return Settings(
        _env_file=None,
        tmdb_api_key="test-api-key",
        target_genre="Animation",
        state_file=state_file,
        browser_command=None,
    )
