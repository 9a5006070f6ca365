"""Open browser tabs for upcoming TMDB releases of one genre, once per movie."""

__version__ = "0.1.0"
