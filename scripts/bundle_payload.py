"""Bundle the built Connect-4 JAR into the launcher's asset table.

Copies the game JAR (built by the Java project) into
``connect4_launcher/assets/`` under the configured payload name, so it ships
as package data and the launcher can find it at run time.

Usage:
    python scripts/bundle_payload.py path/to/Connect-4.jar
    python scripts/bundle_payload.py path/to/Connect-4.jar --dry-run
    python scripts/bundle_payload.py --list
"""

import argparse
import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from connect4_launcher.config import settings
from connect4_launcher.payload import list_payloads

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent.parent / "connect4_launcher" / "assets"


def bundle(source: Path, assets_dir: Path = ASSETS_DIR, name: Optional[str] = None, dry_run: bool = False) -> int:
    """Copy source into assets_dir as name. Returns 0 on success, 1 on failure."""
    name = name or settings.payload_name
    source = Path(source)

    if not source.is_file():
        logger.error(f"Source JAR not found: {source}")
        return 1

    target = Path(assets_dir) / name
    size = source.stat().st_size
    if dry_run:
        logger.info(f"[dry-run] Would copy {source} ({size} bytes) -> {target}")
        return 0

    if target.exists():
        logger.info(f"Overwriting existing {target.name}")
    shutil.copyfile(source, target)
    logger.info(f"Bundled {source} ({size} bytes) as {target.name}")
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Bundle the game JAR into the launcher assets")
    parser.add_argument("source", nargs="?", type=Path, help="Built JAR to bundle")
    parser.add_argument("--name", default=None, help="Asset name (default: configured payload name)")
    parser.add_argument("--dry-run", action="store_true", help="Show what would be copied")
    parser.add_argument("--list", action="store_true", help="List bundled assets and exit")
    args = parser.parse_args(argv)

    if args.list:
        names = list_payloads(ASSETS_DIR)
        logger.info(f"{len(names)} bundled asset(s)")
        for name in names:
            logger.info(f"  - {name}")
        return 0

    if args.source is None:
        parser.error("source is required unless --list is given")

    return bundle(args.source, name=args.name, dry_run=args.dry_run)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    sys.exit(main())
