"""Command-line interface for distcheck."""
