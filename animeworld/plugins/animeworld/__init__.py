"""
AnimeWorld Plugin - Anime source plugin for animeworld.tv

This plugin provides home page lists, search, detail pages with episode
handles, and stream resolution for the Italian site animeworld.tv.
"""

from .plugin import AnimeWorldPlugin, plugin_metadata, default_config
from .config import get_default_config, validate_config
from .parser import AnimeWorldParser, normalize_href, parse_item_card
from .resolver import build_playback_link, resolve_stream_url

__all__ = [
    "AnimeWorldPlugin",
    "plugin_metadata",
    "default_config",
    "get_default_config",
    "validate_config",
    "AnimeWorldParser",
    "normalize_href",
    "parse_item_card",
    "build_playback_link",
    "resolve_stream_url",
]
