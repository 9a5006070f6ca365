"""Tests for the browser launcher."""

import subprocess
import threading
import time
import webbrowser
from unittest.mock import MagicMock, patch

from movie_alert.browser import make_launcher, open_in_browser

URL = "https://www.themoviedb.org/movie/100"


class TestOpenInBrowser:
    def test_uses_platform_opener(self) -> None:
        with (
            patch("movie_alert.browser.sys.platform", "linux"),
            patch("movie_alert.browser.shutil.which", return_value="/usr/bin/xdg-open"),
            patch("movie_alert.browser.subprocess.Popen") as mock_popen,
        ):
            assert open_in_browser(URL) is True

        assert mock_popen.call_args.args[0] == ["/usr/bin/xdg-open", URL]
        assert mock_popen.call_args.kwargs["start_new_session"] is True

    def test_spawns_command_without_waiting(self) -> None:
        started = threading.Event()
        release = threading.Event()

        def slow_wait() -> int:
            started.set()
            release.wait(5)
            return 0

        process = MagicMock(pid=4242)
        process.wait.side_effect = slow_wait

        with patch("movie_alert.browser.subprocess.Popen", return_value=process) as mock_popen:
            start = time.monotonic()
            assert open_in_browser(URL, command="xdg-open") is True
            elapsed = time.monotonic() - start

        try:
            assert elapsed < 1.0
            assert mock_popen.call_args.args[0] == ["xdg-open", URL]
            assert mock_popen.call_args.kwargs["stdin"] == subprocess.DEVNULL
            # The child is reaped off the calling thread
            assert started.wait(2)
        finally:
            release.set()

    def test_slow_webbrowser_does_not_block(self) -> None:
        release = threading.Event()
        opened = threading.Event()

        def slow_open(url: str) -> bool:
            opened.set()
            release.wait(5)
            return True

        with (
            patch("movie_alert.browser.sys.platform", "linux"),
            patch("movie_alert.browser.shutil.which", return_value=None),
            patch("movie_alert.browser.webbrowser.open_new_tab", side_effect=slow_open),
        ):
            start = time.monotonic()
            assert open_in_browser(URL) is True
            elapsed = time.monotonic() - start
            try:
                assert elapsed < 1.0
                assert opened.wait(2)
            finally:
                release.set()

    def test_missing_command_is_not_fatal(self) -> None:
        with patch("movie_alert.browser.subprocess.Popen", side_effect=FileNotFoundError("nope")):
            assert open_in_browser(URL, command="no-such-browser") is False

    def test_webbrowser_error_is_not_fatal(self) -> None:
        done = threading.Event()

        def failing_open(url: str) -> bool:
            done.set()
            raise webbrowser.Error("no runnable browser")

        with (
            patch("movie_alert.browser.sys.platform", "linux"),
            patch("movie_alert.browser.shutil.which", return_value=None),
            patch("movie_alert.browser.webbrowser.open_new_tab", side_effect=failing_open),
        ):
            assert open_in_browser(URL) is True
            assert done.wait(2)


def test_make_launcher_binds_command() -> None:
    with patch("movie_alert.browser.subprocess.Popen") as mock_popen:
        make_launcher("open")(URL)

    assert mock_popen.call_args.args[0] == ["open", URL]
