"""Connect-4 Launcher.

Extracts the bundled game JAR to a uniquely named temp file, runs it with
Java on the same console, waits for it to exit, then removes the temp file.

Usage:
    python -m connect4_launcher
    python -m connect4_launcher --no-wait
    python -m connect4_launcher --debug
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from connect4_launcher import console
from connect4_launcher.config import LauncherSettings
from connect4_launcher.models import LaunchStatus, PayloadNotFoundError
from connect4_launcher.payload import (
    extract_payload,
    find_payload,
    list_payloads,
    remove_quietly,
    temp_payload_path,
)
from connect4_launcher.runtime import run_payload

logger = logging.getLogger(__name__)


def _halt(cfg: LauncherSettings) -> None:
    if cfg.pause_on_error:
        console.wait_for_key()


def run(cfg: Optional[LauncherSettings] = None) -> LaunchStatus:
    """Extract the payload, run it with Java and clean up afterwards.

    Errors are reported on the console rather than raised. The game's own
    exit code is not inspected.

    Args:
        cfg: Settings to use. Defaults to the module-level singleton.

    Returns:
        How the run ended.
    """
    if cfg is None:
        from connect4_launcher.config import settings as cfg

    temp_path = temp_payload_path(cfg.temp_dir, cfg.temp_prefix, cfg.temp_suffix)
    logger.debug(f"Temp payload path: {temp_path}")

    try:
        resource = find_payload(cfg.payload_name)
        if resource is None:
            raise PayloadNotFoundError(cfg.payload_name, list_payloads())

        extract_payload(resource, temp_path)
        run_payload(temp_path, cfg.java_executable, cfg.java_flag)
        return LaunchStatus.COMPLETED
    except PayloadNotFoundError as e:
        console.report("Error: Could not find embedded JAR resource.", "Available resources:")
        console.report(*(f" - {name}" for name in e.available))
        _halt(cfg)
        return LaunchStatus.PAYLOAD_MISSING
    except Exception as e:
        logger.debug("Launch failed", exc_info=True)
        console.report(
            f"Error launching game: {e}",
            "Make sure Java is installed and in your PATH.",
            "Press any key to exit...",
        )
        _halt(cfg)
        return LaunchStatus.FAILED
    finally:
        remove_quietly(temp_path)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse CLI flags, configure logging and run the launcher. Sets no exit code."""
    from connect4_launcher.config import settings

    parser = argparse.ArgumentParser(description=f"{settings.app_name} Launcher")
    parser.add_argument("--no-wait", action="store_true", help="Don't wait for a key press after an error")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    updates = {}
    if args.no_wait:
        updates["pause_on_error"] = False
    if args.debug:
        updates["log_level"] = "DEBUG"
    cfg = settings.model_copy(update=updates)

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    status = run(cfg)
    logger.debug(f"Launcher finished: {status.value}")
