"""distcheck - post-build verification for npm workspace packages."""

__version__ = "0.1.0"
