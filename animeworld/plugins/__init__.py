"""
Plugin Layer - Media source implementations.

This module contains the plugin contract and the AnimeWorld source
implementation built on it.
"""

from animeworld.plugins.base import BasePlugin, PluginMetadata
from animeworld.plugins.common import HTMLParser

__all__ = [
    # Base Plugin Architecture
    "BasePlugin",
    "PluginMetadata",
    # Plugin Development Utilities
    "HTMLParser",
]
