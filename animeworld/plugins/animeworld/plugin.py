"""
AnimeWorld Plugin - Main plugin implementation for animeworld.tv

This module implements the plugin class that sequences one fetch and the
matching extractor for each host operation: home page, search, detail
loading and playback link resolution.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from animeworld.core.exceptions import LinkResolutionError, PluginError, SearchError
from animeworld.core.models import HomePageList, MediaDetail, SearchResult, TvType
from animeworld.plugins.base import BasePlugin, LinkCallback, PluginMetadata, SubtitleCallback

from .config import PROVIDER_LANG, PROVIDER_NAME, SEARCH_PATH, get_default_config, validate_config
from .parser import AnimeWorldParser
from .resolver import build_playback_link, resolve_stream_url


logger = logging.getLogger(__name__)


plugin_metadata = PluginMetadata(
    name=PROVIDER_NAME,
    version="1.0.0",
    author="AnimeWorld Provider Team",
    description="Italian anime source with home lists, search, details and streams",
    website="https://www.animeworld.tv",
    lang=PROVIDER_LANG,
    has_main_page=True,
    supported_types=frozenset({TvType.ANIME, TvType.ANIME_MOVIE, TvType.OVA}),
)

default_config = get_default_config()


class AnimeWorldPlugin(BasePlugin):
    """
    AnimeWorld plugin for accessing anime content from animeworld.tv

    Each operation performs its own fetch and builds fresh records;
    nothing is cached or retried.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize AnimeWorld plugin.

        Args:
            config: Plugin configuration dictionary

        Raises:
            ValueError: If the merged configuration is invalid
        """
        merged_config = {**default_config}
        if config:
            merged_config.update(config)
        merged_config = validate_config(merged_config)

        super().__init__(merged_config)
        self._base_url = merged_config["base_url"]

    @property
    def metadata(self) -> PluginMetadata:
        """Get plugin metadata."""
        return plugin_metadata

    @property
    def base_url(self) -> str:
        """Get base URL for animeworld.tv"""
        return self._base_url

    def _parser(self, html_content: str) -> AnimeWorldParser:
        return AnimeWorldParser(html_content, self.fix_url, source=self.name)

    async def get_main_page(self) -> List[HomePageList]:
        """
        Get the sub, dub and trending lists from the home page.

        Returns:
            Home page lists in page order

        Raises:
            NetworkError: If the home page cannot be fetched
        """
        logger.debug("Fetching AnimeWorld home page")
        html_content = await self._get_text(self.base_url)

        lists = self._parser(html_content).parse_home_lists()
        logger.info(f"Found {len(lists)} home page lists")
        return lists

    async def search(self, query: str) -> List[SearchResult]:
        """
        Search for anime on animeworld.tv

        Args:
            query: Search query string

        Returns:
            List of search results, without episode counts

        Raises:
            SearchError: If the query is empty
            NetworkError: If the search page cannot be fetched
            PluginError: If the page cannot be processed
        """
        if not query or not query.strip():
            raise SearchError("Search query cannot be empty", query=query, source=self.name)

        clean_query = query.strip()
        search_url = self.base_url + SEARCH_PATH.format(query=quote_plus(clean_query))
        logger.debug(f"Searching AnimeWorld with query: '{clean_query}'")

        html_content = await self._get_text(search_url)
        try:
            results = self._parser(html_content).parse_search_results()
        except Exception as e:
            raise PluginError(f"Search failed for query '{query}': {e}", plugin_name=self.name) from e

        logger.info(f"Found {len(results)} results for query: '{clean_query}'")
        return results

    async def load(self, url: str) -> MediaDetail:
        """
        Load the detail page of a title.

        Args:
            url: URL to the detail page

        Returns:
            Complete media record

        Raises:
            PluginError: If the URL is empty or the page cannot be processed
            NetworkError: If the page cannot be fetched
        """
        if not url:
            raise PluginError("Detail URL cannot be empty", plugin_name=self.name)

        logger.debug(f"Loading details from: {url}")
        html_content = await self._get_text(url)
        try:
            detail = self._parser(html_content).parse_detail(url)
        except Exception as e:
            raise PluginError(f"Failed to load details from '{url}': {e}", plugin_name=self.name) from e

        episode_count = sum(len(episodes) for episodes in detail.episodes.values())
        logger.info(f"Loaded '{detail.title}' with {episode_count} episodes")
        return detail

    async def load_links(
        self,
        data: str,
        callback: LinkCallback,
        subtitle_callback: SubtitleCallback,
        is_casting: bool = False,
    ) -> bool:
        """
        Resolve an episode handle into its stream link.

        The site exposes no subtitles, so subtitle_callback is never called.

        Args:
            data: Episode resolver URL from an EpisodeRef
            callback: Receives the playback link
            subtitle_callback: Accepted for interface uniformity
            is_casting: Unused by this source

        Returns:
            True if a link was emitted, False if the response had no stream URL

        Raises:
            NetworkError: If the episode info cannot be fetched
        """
        logger.debug(f"Resolving links from: {data}")
        body = await self._get_text(data)

        try:
            stream_url = resolve_stream_url(body)
        except LinkResolutionError as e:
            logger.warning(f"Link resolution failed for {data}: {e}")
            return False

        callback(build_playback_link(stream_url, referer=self.base_url, source=self.name))
        return True

    def __str__(self) -> str:
        return f"AnimeWorld Plugin v{self.metadata.version}"

    def __repr__(self) -> str:
        return f"AnimeWorldPlugin(base_url='{self.base_url}')"


# Export plugin class and metadata
__all__ = ["AnimeWorldPlugin", "plugin_metadata", "default_config"]
