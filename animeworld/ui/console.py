"""
Console Management - Shared Rich consoles for the command line.

Records are printed on standard output so they can be piped; error and
warning panels go to standard error.
"""

from typing import Dict, Optional

from rich.console import Console
from rich.theme import Theme


ANIMEWORLD_THEME = Theme({
    "aw.title": "bold",
    "aw.url": "cyan",
    "aw.muted": "dim",
    "aw.dub": "magenta",
    "aw.sub": "green",
})

_consoles: Dict[str, Console] = {}


def setup_console(stderr: bool = False, width: Optional[int] = None) -> Console:
    """
    Create the shared console for one output stream.

    Args:
        stderr: Build the error console instead of the output console
        width: Console width override

    Returns:
        The new console, also returned by later get_console() calls
    """
    console = Console(theme=ANIMEWORLD_THEME, stderr=stderr, width=width)
    _consoles["stderr" if stderr else "stdout"] = console
    return console


def get_console() -> Console:
    """Get the console used for command results."""
    return _consoles.get("stdout") or setup_console()


def get_error_console() -> Console:
    """Get the console used for error and warning panels."""
    return _consoles.get("stderr") or setup_console(stderr=True)


__all__ = ["ANIMEWORLD_THEME", "setup_console", "get_console", "get_error_console"]
