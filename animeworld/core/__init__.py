"""
Core Layer - Domain models, configuration and errors.

This module contains the canonical records produced by the provider,
configuration handling and the exception hierarchy.
"""

from animeworld.core.config_manager import ConfigManager
from animeworld.core.config_schemas import AppSettings, LoggingSettings, ProviderSettings
from animeworld.core.exceptions import (
    AnimeWorldError,
    ConfigurationError,
    LinkResolutionError,
    NetworkError,
    PluginError,
    SearchError,
)
from animeworld.core.models import (
    DubStatus,
    EpisodeRef,
    ExternalIds,
    HomePageList,
    MediaDetail,
    PlaybackLink,
    Quality,
    SearchResult,
    ShowStatus,
    SubtitleFile,
    TvType,
)

__all__ = [
    # Data Models
    "DubStatus",
    "EpisodeRef",
    "ExternalIds",
    "HomePageList",
    "MediaDetail",
    "PlaybackLink",
    "Quality",
    "SearchResult",
    "ShowStatus",
    "SubtitleFile",
    "TvType",
    # Configuration Management
    "ConfigManager",
    "AppSettings",
    "LoggingSettings",
    "ProviderSettings",
    # Exceptions
    "AnimeWorldError",
    "ConfigurationError",
    "LinkResolutionError",
    "NetworkError",
    "PluginError",
    "SearchError",
]
