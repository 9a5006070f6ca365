"""Tests for presenting movies and opening them once."""

from unittest.mock import MagicMock

from movie_alert.notifier import movie_url, notify
from movie_alert.schemas.external import Movie

GENRES = {1: "Action", 2: "Animation"}
URL_BASE = "https://www.themoviedb.org/movie"


def make_movie(movie_id: int, genre_ids: list[int]) -> Movie:
    return Movie(
        id=movie_id,
        title=f"Movie {movie_id}",
        release_date="2026-12-01",
        genre_ids=genre_ids,
    )


class TestMovieUrl:
    def test_joins_base_and_id(self) -> None:
        assert movie_url(URL_BASE, 100) == "https://www.themoviedb.org/movie/100"

    def test_tolerates_trailing_slash(self) -> None:
        assert movie_url(URL_BASE + "/", 100) == "https://www.themoviedb.org/movie/100"


class TestNotify:
    """Tests for the notify pass."""

    def test_opens_unseen_movie_and_marks_it(self) -> None:
        launcher = MagicMock()
        lines: list[str] = []
        seen: set[int] = set()

        report = notify(
            [make_movie(100, [1, 2])], GENRES, seen, launcher, URL_BASE, echo=lines.append
        )

        launcher.assert_called_once_with("https://www.themoviedb.org/movie/100")
        assert seen == {100}
        assert report.opened == [100]
        assert report.already_opened == []
        assert "Title: Movie 100" in lines
        assert "Genres: Action, Animation" in lines
        assert "Release date: 2026-12-01" in lines
        assert "URL: https://www.themoviedb.org/movie/100" in lines
        assert "URL was opened" not in lines

    def test_skips_seen_movie(self) -> None:
        launcher = MagicMock()
        lines: list[str] = []
        seen = {100}

        report = notify(
            [make_movie(100, [2])], GENRES, seen, launcher, URL_BASE, echo=lines.append
        )

        launcher.assert_not_called()
        assert seen == {100}
        assert report.already_opened == [100]
        assert "URL was opened" in lines
        assert "URL: https://www.themoviedb.org/movie/100" in lines

    def test_same_movie_twice_in_one_run_opens_once(self) -> None:
        launcher = MagicMock()
        movie = make_movie(7, [2])
        seen: set[int] = set()

        report = notify([movie, movie], GENRES, seen, launcher, URL_BASE, echo=lambda _: None)

        assert launcher.call_count == 1
        assert report.opened == [7]
        assert report.already_opened == [7]

    def test_unknown_genre_ids_are_skipped(self) -> None:
        lines: list[str] = []

        notify([make_movie(1, [99, 2])], GENRES, set(), MagicMock(), URL_BASE, echo=lines.append)

        assert "Genres: Animation" in lines

    def test_launcher_failure_result_is_ignored(self) -> None:
        launcher = MagicMock(return_value=False)
        seen: set[int] = set()

        report = notify([make_movie(5, [2])], GENRES, seen, launcher, URL_BASE, echo=lambda _: None)

        assert seen == {5}
        assert report.opened == [5]

    def test_processes_movies_in_order(self) -> None:
        launcher = MagicMock()

        notify(
            [make_movie(3, [2]), make_movie(1, [2]), make_movie(2, [2])],
            GENRES,
            {1},
            launcher,
            URL_BASE,
            echo=lambda _: None,
        )

        assert [c.args[0] for c in launcher.call_args_list] == [
            f"{URL_BASE}/3",
            f"{URL_BASE}/2",
        ]
