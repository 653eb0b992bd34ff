"""Connect-4 Launch Script (Default).

Forwards to ``connect4_launcher.launcher.main`` so the launcher can be run
from a source checkout without installing it.

Usage:
    python launch.py
    python launch.py --no-wait
    python launch.py --debug
"""

import sys
from pathlib import Path

if __name__ == "__main__":
    # Add project root to path
    sys.path.insert(0, str(Path(__file__).parent))

    from connect4_launcher.launcher import main

    main()
