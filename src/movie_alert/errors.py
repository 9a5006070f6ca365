"""Error kinds raised by the movie alert pipeline.

Every stage raises exactly one of these; the CLI catches ``MovieAlertError``,
logs ``diagnostic_lines()`` and exits with status 1.
"""

from enum import Enum
from pathlib import Path

TMDB_API_KEY_HELP_URL = "https://developers.themoviedb.org/3/getting-started"


class MovieAlertError(Exception):
    """Base exception for all pipeline failures."""

    exit_code = 1

    def diagnostic_lines(self) -> list[str]:
        """Return the human-readable diagnostic for this failure."""
        return [f"Error: {self}"]


class CredentialMissingError(MovieAlertError):
    """Raised when no TMDB API key is configured."""

    def __init__(self, message: str = "TMDB API key is not set") -> None:
        super().__init__(message)

    def diagnostic_lines(self) -> list[str]:
        return [
            "Error: TMDB API key is not set in env (TMDB_API_KEY or TMD_API_V3)!",
            f"    TMDB API key can be obtained at {TMDB_API_KEY_HELP_URL}",
        ]


class HomeDirectoryError(MovieAlertError):
    """Raised when no home directory is available for the state file."""

    def __init__(self, message: str = "home directory cannot be located") -> None:
        super().__init__(message)


class RemoteCallError(MovieAlertError):
    """Raised when a TMDB request fails or returns an unexpected body."""

    def __init__(self, context: str, cause: Exception, page: int | None = None) -> None:
        super().__init__(f"{context}: {cause}")
        self.context = context
        self.cause = cause
        self.page = page

    def diagnostic_lines(self) -> list[str]:
        return [f"Error: {self.context}", f"    {self.cause}"]


class GenreNotFoundError(MovieAlertError):
    """Raised when the target genre name is missing from the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"id cannot be found for genre name: {name}")
        self.name = name


class StateDirection(str, Enum):
    """Which side of the state file round trip failed."""

    LOAD = "load"
    SAVE = "save"


class PersistedStateError(MovieAlertError):
    """Raised when the seen-set file cannot be decoded or written."""

    def __init__(self, direction: StateDirection, path: Path, cause: Exception) -> None:
        super().__init__(f"cannot {direction.value} data file {path}: {cause}")
        self.direction = direction
        self.path = path
        self.cause = cause

    def diagnostic_lines(self) -> list[str]:
        verb = "load from" if self.direction is StateDirection.LOAD else "save to"
        return [f"Error: cannot {verb} data file {self.path}", f"    {self.cause}"]


class StateFileError(MovieAlertError):
    """Raised when the state file cannot be opened or created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"IO error on {path}: {cause}")
        self.path = path
        self.cause = cause

    def diagnostic_lines(self) -> list[str]:
        return [f"Error: IO error on {self.path}", f"    {self.cause}"]
