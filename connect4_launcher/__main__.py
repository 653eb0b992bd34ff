"""Entry point for ``python -m connect4_launcher``."""

from connect4_launcher.launcher import main

if __name__ == "__main__":
    main()
