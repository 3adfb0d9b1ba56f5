"""Allow running as python -m better_console."""

from better_console.cli import app

app()
