"""Connect-4 launcher test configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from connect4_launcher.config import LauncherSettings


@pytest.fixture
def payload_bytes():
    """10-byte blob starting with the ZIP magic, standing in for the game JAR."""
    return bytes([0x50, 0x4B, 0x03, 0x04, 0x14, 0x00, 0x00, 0x00, 0x08, 0x00])


@pytest.fixture
def temp_dir(tmp_path):
    """Isolated temp directory the launcher extracts into."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def launcher_settings(temp_dir):
    """Settings pointing at the isolated temp dir, without the key-press halt."""
    return LauncherSettings(temp_dir=temp_dir, pause_on_error=False)


@pytest.fixture
def assets_dir(tmp_path):
    """Empty asset table directory (with the package marker, like the real one)."""
    path = tmp_path / "assets"
    path.mkdir()
    (path / "__init__.py").write_text("")
    return path


@pytest.fixture
def bundled_assets(monkeypatch, assets_dir):
    """Route asset table lookups to assets_dir instead of the installed package."""
    monkeypatch.setattr(
        "connect4_launcher.payload._assets_root",
        lambda assets=None: assets if assets is not None else assets_dir,
    )
    return assets_dir


@pytest.fixture
def bundled_jar(bundled_assets, payload_bytes):
    """Asset table holding the game JAR."""
    (bundled_assets / "Connect-4.jar").write_bytes(payload_bytes)
    return bundled_assets
