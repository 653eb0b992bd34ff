"""Console diagnostics and the interactive "press any key" halt."""

from __future__ import annotations

import sys


def report(*lines: str) -> None:
    """Print diagnostic lines to standard output."""
    for line in lines:
        print(line, flush=True)


def _read_key_windows() -> None:
    import msvcrt

    msvcrt.getwch()


def _read_key_posix() -> None:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old_attrs = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old_attrs)


def wait_for_key() -> None:
    """Block until the user presses a key.

    On an interactive terminal a single raw key press is enough. When stdin is
    piped or redirected, one line is consumed instead; EOF returns immediately.
    """
    stdin = sys.stdin
    if stdin is None or stdin.closed:
        return

    if stdin.isatty():
        if sys.platform == "win32":
            _read_key_windows()
        else:
            _read_key_posix()
        return

    stdin.readline()
