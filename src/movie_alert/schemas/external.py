"""Pydantic schemas for TMDB API responses."""

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class Genre(BaseModel):
    """A movie genre from the TMDB genre list."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(ge=0, description="TMDB genre ID")
    name: str = Field(description="Genre name")


class GenreListResponse(BaseModel):
    """Response from TMDB movie genre list endpoint."""

    model_config = ConfigDict(extra="ignore")

    genres: list[Genre] = Field(description="All movie genres")


class Movie(BaseModel):
    """A single upcoming movie from TMDB."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(ge=0, description="TMDB movie ID")
    title: str = Field(description="Movie title")
    overview: str = Field(default="", description="Movie overview/synopsis")
    # Kept verbatim, TMDB sometimes sends an empty string
    release_date: str = Field(default="", description="Release date (YYYY-MM-DD)")
    genre_ids: list[NonNegativeInt] = Field(default_factory=list, description="TMDB genre IDs")
    poster_path: str | None = Field(default=None, description="Poster image path")
    adult: bool = Field(default=False, description="Adult content flag")


class DateRange(BaseModel):
    """Release window reported by the upcoming endpoint."""

    model_config = ConfigDict(extra="ignore")

    minimum: str = Field(description="Earliest release date in the window")
    maximum: str = Field(description="Latest release date in the window")


class UpcomingPage(BaseModel):
    """One page of the TMDB upcoming movies endpoint."""

    model_config = ConfigDict(extra="ignore")

    page: int = Field(description="Current page number")
    results: list[Movie] = Field(default_factory=list, description="Movie results")
    dates: DateRange = Field(description="Release window")
    total_pages: int = Field(ge=0, description="Total number of pages")
    total_results: int = Field(ge=0, description="Total number of results")


class AggregatedUpcoming(BaseModel):
    """All upcoming movies across every page.

    Movies are in page order, then in-page order. Duplicates across pages are
    kept. Dates and totals come from page 1.
    """

    movies: list[Movie] = Field(default_factory=list, description="Movies from all pages")
    min_date: str = Field(description="Earliest release date reported by page 1")
    max_date: str = Field(description="Latest release date reported by page 1")
    total_pages: int = Field(description="Total pages reported by page 1")
    total_results: int = Field(description="Total results reported by page 1")
