"""Fire-and-forget browser launching."""

import logging
import os
import shutil
import subprocess
import sys
import threading
import webbrowser
from collections.abc import Callable

logger = logging.getLogger(__name__)

Launcher = Callable[[str], object]


def default_open_command() -> str | None:
    """Return the platform URL opener, or None if there is none on PATH."""
    if sys.platform == "darwin":
        name = "open"
    elif sys.platform.startswith("linux") or "bsd" in sys.platform:
        name = "xdg-open"
    else:
        return None
    return shutil.which(name)


def _spawn(command: str, url: str) -> None:
    process = subprocess.Popen(
        [command, url],
        stdin=subprocess.DEVNULL,
        start_new_session=True,
    )
    # Reap the child in the background so it never lingers as a zombie
    threading.Thread(target=process.wait, name=f"reap-{process.pid}", daemon=True).start()


def _open_with_webbrowser(url: str) -> None:
    try:
        webbrowser.open_new_tab(url)
    except webbrowser.Error as e:
        logger.warning("Could not open %s in a browser: %s", url, e)


def open_in_browser(url: str, command: str | None = None) -> bool:
    """Open ``url`` without waiting for the browser.

    With ``command`` set (e.g. ``firefox``), it is spawned with the URL as its
    only argument. Otherwise the platform opener is used: ``xdg-open`` on
    Linux, ``open`` on macOS, ``os.startfile`` on Windows. Anything else goes
    through :mod:`webbrowser` on a daemon thread, since some of its browsers
    block until they exit.

    Returns:
        True if the launch was handed off. Failures are logged, never raised.
    """
    try:
        if command:
            _spawn(command, url)
        elif sys.platform == "win32":
            os.startfile(url)  # type: ignore[attr-defined]
        elif (opener := default_open_command()) is not None:
            _spawn(opener, url)
        else:
            threading.Thread(
                target=_open_with_webbrowser, args=(url,), name="open-browser", daemon=True
            ).start()
        return True
    except OSError as e:
        logger.warning("Could not open %s in a browser: %s", url, e)
        return False


def make_launcher(command: str | None = None) -> Launcher:
    """Return a launcher bound to ``command``."""

    def launch(url: str) -> bool:
        return open_in_browser(url, command=command)

    return launch
