"""
UI Layer - Rich console and error display.

This module contains the shared console and the error panels used by
the command-line front end.
"""

from animeworld.ui.console import get_console, get_error_console, setup_console
from animeworld.ui.error_handler import ErrorHandler, display_warning, handle_error

__all__ = [
    "get_console",
    "get_error_console",
    "setup_console",
    "ErrorHandler",
    "display_warning",
    "handle_error",
]
