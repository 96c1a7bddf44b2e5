"""
Base Plugin Interface - Abstract base class for media source plugins.

This module defines the interface a source plugin implements for its host:
home page lists, search, detail loading and playback link resolution.
It also owns the HTTP transport, which opens one session per fetch so no
connection outlives the operation that made it.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, FrozenSet, List, Optional
from urllib.parse import urljoin, urlparse

import aiohttp
from pydantic import BaseModel, Field

from animeworld.core.config_schemas import DEFAULT_USER_AGENT
from animeworld.core.exceptions import NetworkError
from animeworld.core.models import (
    HomePageList,
    MediaDetail,
    PlaybackLink,
    SearchResult,
    SubtitleFile,
    TvType,
)


logger = logging.getLogger(__name__)


LinkCallback = Callable[[PlaybackLink], None]
SubtitleCallback = Callable[[SubtitleFile], None]


class PluginMetadata(BaseModel):
    """Metadata information for a plugin."""

    name: str = Field(..., description="Plugin display name")
    version: str = Field(default="1.0.0", description="Plugin version")
    author: str = Field(default="Unknown", description="Plugin author")
    description: str = Field(default="", description="Plugin description")
    website: Optional[str] = Field(None, description="Source website URL")
    lang: str = Field(default="en", description="Content language code")
    has_main_page: bool = Field(default=False, description="Whether the source exposes home page lists")
    supported_types: FrozenSet[TvType] = Field(
        default_factory=lambda: frozenset({TvType.ANIME}),
        description="Media types the source lists"
    )


class BasePlugin(ABC):
    """
    Abstract base class for media source plugins.

    Plugins hold configuration only. Every operation builds its result
    from scratch, so one instance can serve concurrent calls.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the plugin with configuration.

        Args:
            config: Plugin-specific configuration dictionary
        """
        self.config = config or {}

        # Set up logging for this plugin
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self._initialize_config()

    def _initialize_config(self) -> None:
        """Initialize plugin configuration with defaults."""
        self.timeout = self.config.get('timeout', 30)
        self.user_agent = self.config.get('user_agent', DEFAULT_USER_AGENT)

    @property
    @abstractmethod
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata information."""
        pass

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the base URL for the media source."""
        pass

    @property
    def name(self) -> str:
        """Get the provider display name."""
        return self.metadata.name

    def fix_url(self, url: str) -> str:
        """Resolve a possibly relative URL against the base URL."""
        if not url:
            return url
        if url.startswith('//'):
            return f"https:{url}"
        if urlparse(url).netloc:
            return url
        return urljoin(self.base_url + '/', url)

    def _session_kwargs(self) -> Dict[str, Any]:
        """Build the arguments for a fresh HTTP session."""
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'it-IT,it;q=0.9,en;q=0.5',
        }
        return {
            'timeout': aiohttp.ClientTimeout(total=self.timeout),
            'headers': headers,
        }

    async def _get_text(self, url: str, **kwargs) -> str:
        """
        Get text content from URL.

        Args:
            url: URL to request, resolved against the base URL if relative
            **kwargs: Additional arguments for the request

        Returns:
            Response body as text

        Raises:
            NetworkError: If the request fails or the status is not 2xx
        """
        url = self.fix_url(url)
        self.logger.debug(f"Making GET request to {url}")

        try:
            async with aiohttp.ClientSession(**self._session_kwargs()) as session:
                async with session.get(url, **kwargs) as response:
                    if not 200 <= response.status < 300:
                        error_text = await response.text()
                        raise NetworkError(
                            f"HTTP {response.status} error for {url}",
                            url=url,
                            status_code=response.status,
                            details=error_text
                        )
                    return await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(
                f"Request failed for {url}: {e}",
                url=url,
                details=str(e)
            ) from e

    @abstractmethod
    async def get_main_page(self) -> List[HomePageList]:
        """
        Get the lists shown on the source's home page.

        Returns:
            Named lists of titles in page order
        """
        pass

    @abstractmethod
    async def search(self, query: str) -> List[SearchResult]:
        """
        Search for titles.

        Args:
            query: Search query string

        Returns:
            List of search results
        """
        pass

    @abstractmethod
    async def load(self, url: str) -> MediaDetail:
        """
        Load the detail record of a title.

        Args:
            url: URL to the detail page

        Returns:
            Complete media record
        """
        pass

    @abstractmethod
    async def load_links(
        self,
        data: str,
        callback: LinkCallback,
        subtitle_callback: SubtitleCallback,
        is_casting: bool = False,
    ) -> bool:
        """
        Resolve an episode handle into playable links.

        Args:
            data: Episode resolver URL
            callback: Called once per playback link found
            subtitle_callback: Called once per subtitle found
            is_casting: Whether the links are meant for a casting device

        Returns:
            True if at least one link was emitted
        """
        pass

    def __str__(self) -> str:
        return f"{self.metadata.name} v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.metadata.name}')"


# Export base plugin class and metadata
__all__ = ["BasePlugin", "PluginMetadata", "LinkCallback", "SubtitleCallback"]
