"""
CLI Main Application - Typer app entry point.

This module provides the ``animeworld`` command: home page lists, search,
detail pages and playback link resolution, printed with Rich.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.traceback import install as install_rich_traceback

from animeworld import __version__
from animeworld.core import ConfigManager
from animeworld.core.exceptions import AnimeWorldError
from animeworld.core.models import PlaybackLink, SubtitleFile
from animeworld.plugins.animeworld import AnimeWorldPlugin
from animeworld.ui import display_warning, get_console, handle_error
from animeworld.cli.display import (
    display_detail,
    display_home_lists,
    display_links,
    display_results,
)


logger = logging.getLogger(__name__)


# Create main Typer application
app = typer.Typer(
    name="animeworld",
    help="🎌 Browse animeworld.tv from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class CLIState:
    """Objects shared by the commands of one invocation."""

    def __init__(self, config_manager: ConfigManager, debug: bool = False):
        self.config_manager = config_manager
        self.debug = debug

    def create_plugin(self) -> AnimeWorldPlugin:
        """Create a plugin configured from the loaded settings."""
        return AnimeWorldPlugin(self.config_manager.settings.provider.to_plugin_config())


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold blue]AnimeWorld[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Directory containing settings.json",
        file_okay=False,
        dir_okay=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
    ),
) -> None:
    """
    🎌 AnimeWorld - metadata and streams from animeworld.tv
    """
    try:
        config_manager = ConfigManager(config_dir)
    except AnimeWorldError as e:
        handle_error(e, "While loading configuration", show_traceback=debug)
        raise typer.Exit(1)

    _setup_logging(config_manager.settings.logging.level, debug)
    install_rich_traceback(show_locals=debug)

    ctx.obj = CLIState(config_manager, debug=debug)


def _setup_logging(level_name: str = "WARNING", debug: bool = False) -> None:
    """
    Set up application logging.

    Args:
        level_name: Level from the settings file
        debug: Force debug logging
    """
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Reduce noise from third-party libraries
    if not debug:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


def _state(ctx: typer.Context) -> CLIState:
    return ctx.obj


@app.command(name="home")
def home_command(ctx: typer.Context) -> None:
    """🏠 Show the home page lists."""
    state = _state(ctx)
    try:
        lists = asyncio.run(state.create_plugin().get_main_page())
    except AnimeWorldError as e:
        handle_error(e, "While loading the home page", show_traceback=state.debug)
        raise typer.Exit(1)
    display_home_lists(lists)


@app.command(name="search")
def search_command(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Title to search for"),
) -> None:
    """🔍 Search for anime."""
    state = _state(ctx)
    try:
        results = asyncio.run(state.create_plugin().search(query))
    except AnimeWorldError as e:
        handle_error(e, f"While searching for '{query}'", show_traceback=state.debug)
        raise typer.Exit(1)
    display_results(results, title=f"🔍 Search Results for '{query}'")


@app.command(name="info")
def info_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Detail page URL"),
) -> None:
    """📋 Show the details and episodes of a title."""
    state = _state(ctx)
    try:
        detail = asyncio.run(state.create_plugin().load(url))
    except AnimeWorldError as e:
        handle_error(e, f"While loading '{url}'", show_traceback=state.debug)
        raise typer.Exit(1)
    display_detail(detail)


@app.command(name="links")
def links_command(
    ctx: typer.Context,
    episode_url: str = typer.Argument(..., help="Episode resolver URL from the info command"),
) -> None:
    """▶️  Resolve an episode into its stream link."""
    state = _state(ctx)
    links: List[PlaybackLink] = []
    subtitles: List[SubtitleFile] = []

    try:
        found = asyncio.run(
            state.create_plugin().load_links(episode_url, links.append, subtitles.append)
        )
    except AnimeWorldError as e:
        handle_error(e, f"While resolving '{episode_url}'", show_traceback=state.debug)
        raise typer.Exit(1)

    if not found:
        display_warning("No playable link found for this episode.", title="▶️  Links")
        raise typer.Exit(1)
    display_links(links)


def cli_main() -> None:
    """
    Main CLI entry point for the animeworld command.
    """
    try:
        app()
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


__all__ = ["app", "cli_main", "CLIState"]
