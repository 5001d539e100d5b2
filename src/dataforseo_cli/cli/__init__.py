"""Command-line interface for dataforseo-cli."""

from .typer_app import app

__all__ = ["app"]
