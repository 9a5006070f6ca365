"""Genre catalog lookups and the genre filter."""

from collections.abc import Iterable, Mapping, Sequence

from movie_alert.errors import GenreNotFoundError
from movie_alert.schemas.external import Movie

# Genre ID -> genre name, built once per run from the TMDB catalog
GenreMap = Mapping[int, str]


def genre_id_by_name(genre_map: GenreMap, name: str) -> int:
    """Return the ID of the genre called exactly ``name``.

    The match is case-sensitive. If the catalog lists the same name under
    several IDs, the lowest ID wins.

    Raises:
        GenreNotFoundError: If no genre has that name.
    """
    matches = [genre_id for genre_id, genre_name in genre_map.items() if genre_name == name]
    if not matches:
        raise GenreNotFoundError(name)
    return min(matches)


def format_genre_names(genre_ids: Iterable[int], genre_map: GenreMap) -> str:
    """Join the names of ``genre_ids`` with ", ", skipping unknown IDs."""
    return ", ".join(genre_map[genre_id] for genre_id in genre_ids if genre_id in genre_map)


def filter_by_genre(genre_id: int, movies: Sequence[Movie]) -> list[Movie]:
    """Return the movies tagged with ``genre_id``, in their original order."""
    return [movie for movie in movies if genre_id in movie.genre_ids]
