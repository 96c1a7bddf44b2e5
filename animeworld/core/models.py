"""
Core Data Models - Pydantic models for the canonical media catalog records.

This module defines the records produced by the extraction pipeline:
search results, media details, episode handles and playback links.
All records are frozen; they are built once per call and handed to the caller.
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TvType(str, Enum):
    """Kind of media a title represents."""

    ANIME = "anime"
    ANIME_MOVIE = "anime_movie"
    OVA = "ova"

    def __str__(self) -> str:
        return self.value


class DubStatus(str, Enum):
    """Audio track of a title."""

    DUBBED = "dubbed"
    SUBBED = "subbed"

    def __str__(self) -> str:
        return self.value


class ShowStatus(str, Enum):
    """Airing status of a series."""

    ONGOING = "ongoing"
    COMPLETED = "completed"


class Quality(str, Enum):
    """Ranked stream quality tiers."""

    UNKNOWN = "unknown"
    P360 = "360p"
    P480 = "480p"
    P720 = "720p"
    P1080 = "1080p"
    P1440 = "1440p"
    P2160 = "2160p"

    @property
    def rank(self) -> int:
        """Get the ordering rank; UNKNOWN sorts below every real tier."""
        if self is Quality.UNKNOWN:
            return 0
        return int(self.value.replace('p', ''))

    def __str__(self) -> str:
        return self.value


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class SearchResult(_Record):
    """
    Represents one title as listed in a grid, search page or recommendation strip.

    Only the track present in ``dub_status`` may carry an episode count,
    and movies never carry one.
    """

    title: str = Field(..., description="Primary title")
    alternate_title: Optional[str] = Field(None, description="Secondary (usually Japanese) title")
    url: str = Field(..., description="Canonical URL of the detail page")
    source: str = Field(..., description="Provider name")
    type: TvType = Field(TvType.ANIME, description="Media type")
    poster_url: str = Field("", description="Poster image URL")
    dub_status: FrozenSet[DubStatus] = Field(
        default_factory=lambda: frozenset({DubStatus.SUBBED}),
        description="Available audio tracks"
    )
    dub_episodes: Optional[int] = Field(None, description="Latest dubbed episode")
    sub_episodes: Optional[int] = Field(None, description="Latest subbed episode")

    @model_validator(mode='after')
    def validate_episode_counts(self) -> 'SearchResult':
        """Ensure episode counts agree with the available tracks."""
        if self.dub_episodes is not None and self.sub_episodes is not None:
            raise ValueError("dub_episodes and sub_episodes are mutually exclusive")
        if self.dub_episodes is not None and DubStatus.DUBBED not in self.dub_status:
            raise ValueError("dub_episodes set for a title without a dubbed track")
        if self.sub_episodes is not None and DubStatus.SUBBED not in self.dub_status:
            raise ValueError("sub_episodes set for a title without a subbed track")
        if self.type == TvType.ANIME_MOVIE and (
            self.dub_episodes is not None or self.sub_episodes is not None
        ):
            raise ValueError("Movies never carry an episode count")
        return self

    def __str__(self) -> str:
        return f"{self.title} ({self.source})"


class EpisodeRef(_Record):
    """Opaque handle that the link resolver turns into a playable stream."""

    resolver_url: str = Field(..., description="Episode info endpoint URL")
    episode_number: Optional[int] = Field(None, description="Episode index on the site")

    def __str__(self) -> str:
        if self.episode_number is None:
            return "Episode ?"
        return f"Episode {self.episode_number}"


class ExternalIds(_Record):
    """Identifiers on third-party catalogs."""

    mal_id: Optional[int] = Field(None, description="MyAnimeList id")
    anilist_id: Optional[int] = Field(None, description="AniList id")


class MediaDetail(_Record):
    """
    Represents the full detail page of a title.

    Episodes are only ever attributed to one track, the one the
    page advertises through its audio metadata.
    """

    title: str = Field(..., description="Primary title")
    alternate_title: Optional[str] = Field(None, description="Secondary title")
    url: str = Field(..., description="Detail page URL")
    source: str = Field(..., description="Provider name")
    type: TvType = Field(TvType.ANIME, description="Media type")
    poster_url: str = Field("", description="Poster image URL")
    plot: Optional[str] = Field(None, description="Synopsis")
    year: Optional[int] = Field(None, description="Release year")
    status: Optional[ShowStatus] = Field(None, description="Airing status")
    duration_minutes: Optional[int] = Field(None, ge=0, description="Episode duration in minutes")
    rating: Optional[int] = Field(None, ge=0, description="Score times 1000")
    genres: List[str] = Field(default_factory=list, description="Genre tags in page order")
    trailer_url: Optional[str] = Field(None, description="Trailer URL")
    external_ids: ExternalIds = Field(default_factory=ExternalIds)
    episodes: Dict[DubStatus, List[EpisodeRef]] = Field(default_factory=dict)
    recommendations: List[SearchResult] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_single_track(self) -> 'MediaDetail':
        """Ensure episodes are attributed to a single track."""
        if len(self.episodes) > 1:
            raise ValueError("Episodes can only be populated for one track")
        return self

    @property
    def dub_status(self) -> Optional[DubStatus]:
        """Get the track the episodes belong to, if any."""
        return next(iter(self.episodes), None)

    def __str__(self) -> str:
        return f"{self.title} ({self.source})"


class PlaybackLink(_Record):
    """A resolved, playable stream. Never persisted."""

    source: str = Field(..., description="Provider name")
    name: str = Field(..., description="Display name")
    url: str = Field(..., description="Stream URL")
    referer: str = Field("", description="Referer to send when playing")
    quality: Quality = Field(Quality.UNKNOWN, description="Stream quality tier")

    @property
    def is_m3u8(self) -> bool:
        """Check whether the stream is an HLS playlist."""
        return urlparse(self.url).path.lower().endswith('.m3u8')

    def __str__(self) -> str:
        return f"{self.name} [{self.quality}] {self.url}"


class SubtitleFile(_Record):
    """A subtitle track accompanying a stream."""

    lang: str = Field(..., description="Language label")
    url: str = Field(..., description="Subtitle file URL")


class HomePageList(_Record):
    """A named list of titles shown on the home page."""

    name: str = Field(..., description="List heading")
    items: List[SearchResult] = Field(default_factory=list)


# Export all models and types
__all__ = [
    "TvType",
    "DubStatus",
    "ShowStatus",
    "Quality",
    "SearchResult",
    "EpisodeRef",
    "ExternalIds",
    "MediaDetail",
    "PlaybackLink",
    "SubtitleFile",
    "HomePageList",
]
