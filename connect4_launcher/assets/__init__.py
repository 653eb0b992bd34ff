"""Bundled assets. ``scripts/bundle_payload.py`` copies the game JAR here at build time."""
