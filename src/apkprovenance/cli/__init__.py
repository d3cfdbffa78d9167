"""Command-line interface for apk-provenance."""
