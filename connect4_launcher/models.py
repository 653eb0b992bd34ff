"""Launcher error types and run outcomes."""

from __future__ import annotations

from enum import Enum


# ── Custom Exceptions ──────────────────────────────────────────────

class LauncherError(Exception):
    """Base class for launcher failures."""
    pass


class PayloadNotFoundError(LauncherError):
    """Raised when the bundled payload is missing from the asset table."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = list(available)
        super().__init__(f"Could not find embedded resource {name!r}")


class LaunchError(LauncherError):
    """Raised when writing the payload or running the runtime fails."""
    pass


# ── Enums ──────────────────────────────────────────────────────────────

class LaunchStatus(str, Enum):
    COMPLETED = "completed"
    PAYLOAD_MISSING = "payload_missing"
    FAILED = "failed"
