"""
CLI Layer - Command-line interface built on Typer and Rich.
"""

from animeworld.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
