"""Java runtime invocation."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from connect4_launcher.models import LaunchError

logger = logging.getLogger(__name__)


def build_command(executable: str, flag: str, payload_path: Path) -> list[str]:
    """Return the argv used to run the payload, e.g. ``["java", "-jar", path]``."""
    return [executable, flag, str(payload_path)]


def run_payload(payload_path: Path, executable: str = "java", flag: str = "-jar") -> int:
    """Run the payload with the external runtime and block until it exits.

    The child inherits this process's stdin, stdout and stderr, so the game
    shares the launcher's console. There is no timeout.

    Returns:
        The child's return code. Callers are free to ignore it.

    Raises:
        LaunchError: If the runtime cannot be started (not on PATH, not executable).
    """
    command = build_command(executable, flag, payload_path)
    logger.debug(f"Running: {command}")

    try:
        process = subprocess.Popen(command)
    except OSError as e:
        raise LaunchError(str(e)) from e

    return_code = process.wait()
    logger.debug(f"{executable} (PID {process.pid}) exited with code {return_code}")
    return return_code
