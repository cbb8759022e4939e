"""Allow running distcheck as ``python -m distcheck``."""

from distcheck.cli.main import app

app(prog_name="distcheck")
