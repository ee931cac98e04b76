"""Command-line interface for snapman."""
