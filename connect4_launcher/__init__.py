"""Connect-4 launcher: runs the bundled game JAR with the local Java runtime."""

__version__ = "1.0.0"
