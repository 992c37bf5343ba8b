"""Command-line interface for works-on-work."""

from works_on_work.cli.main import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
