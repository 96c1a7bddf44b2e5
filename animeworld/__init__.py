"""
AnimeWorld - Metadata and stream extraction for animeworld.tv

Turns the site's pages into typed catalog records (search results,
media details, episode handles) and resolves episodes into playable
stream links, with a small Typer and Rich command-line front end.
"""

__version__ = "0.1.0"
__author__ = "AnimeWorld Provider Team"

# Package metadata
__title__ = "animeworld"
__description__ = "Metadata and stream extraction for animeworld.tv"
__license__ = "MIT"

# Export main components for easy importing
from animeworld.core.models import (
    DubStatus,
    EpisodeRef,
    MediaDetail,
    PlaybackLink,
    SearchResult,
    TvType,
)
from animeworld.plugins.animeworld import AnimeWorldPlugin

__all__ = [
    "__version__",
    "__author__",
    "AnimeWorldPlugin",
    "DubStatus",
    "EpisodeRef",
    "MediaDetail",
    "PlaybackLink",
    "SearchResult",
    "TvType",
]
