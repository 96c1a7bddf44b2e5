"""
Error Handler - Error panels with context and suggestions.

This module renders provider errors consistently for the command line.
"""

import traceback
from typing import List, Optional, Tuple

from rich.panel import Panel

from animeworld.core.exceptions import (
    AnimeWorldError,
    ConfigurationError,
    LinkResolutionError,
    NetworkError,
    PluginError,
    SearchError,
)
from animeworld.ui.console import get_error_console


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""

    def __init__(self):
        self.console = get_error_console()

    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show the full traceback
        """
        title, lines, suggestions = self._describe(error)

        content_parts = [f"[red]{lines[0]}[/red]", *lines[1:]]
        if context:
            content_parts.append(f"\n[dim]Context:[/dim] {context}")

        if suggestions:
            content_parts.append("\n[blue]💡 Suggestions:[/blue]")
            content_parts.extend(f"• {suggestion}" for suggestion in suggestions)

        if show_traceback:
            content_parts.append("\n[dim]Traceback:[/dim]")
            content_parts.append(
                "".join(traceback.format_exception(type(error), error, error.__traceback__))
            )

        self.console.print(Panel("\n".join(content_parts), title=title, border_style="red", padding=(1, 2)))

    def _describe(self, error: Exception) -> Tuple[str, List[str], List[str]]:
        if not isinstance(error, AnimeWorldError):
            return "❌ Unexpected Error", [f"{type(error).__name__}: {error}"], []

        lines = [error.message]

        if isinstance(error, ConfigurationError):
            if error.config_path:
                lines.append(f"[dim]Configuration file:[/dim] [cyan]{error.config_path}[/cyan]")
            return "⚙️  Configuration Error", lines, [
                "Check the settings file syntax and format",
                "Remove the file to fall back to defaults",
            ]

        if isinstance(error, NetworkError):
            if error.url:
                lines.append(f"[dim]URL:[/dim] [cyan]{error.url}[/cyan]")
            if error.status_code:
                lines.append(f"[dim]Status:[/dim] {error.status_code}")
            return "🌐 Network Error", lines, [
                "Check your internet connection",
                "Verify the site is reachable from your network",
            ]

        if isinstance(error, LinkResolutionError):
            return "🔗 Link Resolution Error", lines, [
                "Make sure the URL is an episode info URL from [cyan]animeworld info[/cyan]",
            ]

        if isinstance(error, SearchError):
            if error.query is not None:
                lines.append(f"[dim]Query:[/dim] '{error.query}'")
            return "🔍 Search Error", lines, ["Try a different or longer query"]

        if isinstance(error, PluginError):
            if error.plugin_name:
                lines.append(f"[dim]Plugin:[/dim] [cyan]{error.plugin_name}[/cyan]")
            return "🔌 Plugin Error", lines, ["The site markup may have changed"]

        return "❌ Error", lines, []

    def display_warning(self, message: str, title: str = "⚠️  Warning") -> None:
        """Display a warning message."""
        self.console.print(Panel(f"[yellow]{message}[/yellow]", title=title, border_style="yellow", padding=(1, 2)))


# Global error handler instance
_error_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get the global error handler instance."""
    global _error_handler
    if _error_handler is None:
        _error_handler = ErrorHandler()
    return _error_handler


def handle_error(
    error: Exception,
    context: Optional[str] = None,
    show_traceback: bool = False
) -> None:
    """Handle and display an error using the global error handler."""
    get_error_handler().handle_error(error, context, show_traceback)


def display_warning(message: str, title: str = "⚠️  Warning") -> None:
    """Display a warning message using the global error handler."""
    get_error_handler().display_warning(message, title)


__all__ = [
    "ErrorHandler",
    "get_error_handler",
    "handle_error",
    "display_warning",
]
