"""
Core Exceptions - Custom exception classes for the AnimeWorld provider.

This module defines the exception hierarchy used by the extraction
pipeline, its transport layer and the command-line front end.
"""

from typing import Optional, Any


class AnimeWorldError(Exception):
    """Base exception class for all provider-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize provider error.

        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(AnimeWorldError):
    """Raised when the settings file cannot be read."""

    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.config_path = config_path


class PluginError(AnimeWorldError):
    """Raised when a provider operation cannot produce its result."""

    def __init__(self, message: str, plugin_name: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.plugin_name = plugin_name


class NetworkError(AnimeWorldError):
    """Raised when a fetch fails or returns a non-2xx response."""

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, details: Optional[Any] = None):
        """
        Initialize network error.

        Args:
            message: Error description
            url: URL that caused the error
            status_code: HTTP status code if applicable
            details: Additional error context
        """
        super().__init__(message, details)
        self.url = url
        self.status_code = status_code


class SearchError(AnimeWorldError):
    """Raised when a search request is invalid."""

    def __init__(self, message: str, query: Optional[str] = None, source: Optional[str] = None, details: Optional[Any] = None):
        super().__init__(message, details)
        self.query = query
        self.source = source


class LinkResolutionError(PluginError):
    """Raised when an episode info response does not carry a stream URL."""


# Export all exception classes
__all__ = [
    "AnimeWorldError",
    "ConfigurationError",
    "PluginError",
    "NetworkError",
    "SearchError",
    "LinkResolutionError",
]
