"""
AnimeWorld Parser - HTML extraction for animeworld.tv

This module turns the site's item cards and detail pages into
canonical records. Missing elements never fail a record: the affected
field is left empty or None.
"""

import logging
from typing import Callable, Dict, List, Optional

from bs4 import Tag

from animeworld.core.models import (
    DubStatus,
    EpisodeRef,
    ExternalIds,
    HomePageList,
    MediaDetail,
    SearchResult,
    ShowStatus,
    TvType,
)
from animeworld.plugins.common import (
    HTMLParser,
    Node,
    element_text,
    has_match,
    next_element_text,
    remove_suffix,
    select_attr,
    select_first_text,
    select_text,
)

from .config import (
    CANONICAL_SERVER,
    EPISODE_INFO_PATH,
    NATIVE_LANGUAGE,
    PROVIDER_NAME,
    TAB_SUFFIX,
    TITLE_SUFFIX,
)
from .fields import (
    map_status,
    map_type,
    parse_duration,
    parse_rating,
    parse_trailing_id,
    parse_year,
    to_int,
)


logger = logging.getLogger(__name__)


UrlFixer = Callable[[str], str]


def normalize_href(href: str) -> str:
    """
    Strip the tracking suffix from a card link.

    The second dot-separated segment is cut at its last "/":
    "/play/naruto.AbC12/xYz" becomes "/play/naruto.AbC12".
    """
    parts = href.split('.')
    if len(parts) < 2:
        return href
    second = parts[1]
    if '/' in second:
        parts[1] = second[:second.rindex('/')]
    return '.'.join(parts)


def _alternate(title: str, other: str) -> Optional[str]:
    if not other or other == title:
        return None
    return other


def parse_item_card(
    card: Node,
    fix_url: UrlFixer,
    source: str = PROVIDER_NAME,
    show_episode: bool = True,
) -> SearchResult:
    """
    Convert one item card into a search result.

    Args:
        card: The ".item" fragment
        fix_url: Resolves relative links against the site root
        source: Provider name recorded on the result
        show_episode: Whether the latest episode count is propagated

    Returns:
        SearchResult for the card
    """
    title = remove_suffix(select_text(card, "a.name"), TITLE_SUFFIX)
    other_title = remove_suffix(select_attr(card, "a.name", "data-jtitle"), TITLE_SUFFIX)
    url = fix_url(normalize_href(select_attr(card, "a.name", "href")))
    poster = select_attr(card, "a.poster img", "src")

    dub = False
    episode: Optional[int] = None
    media_type = TvType.ANIME

    status = card.select_one("div.status")
    if status is not None:
        dub = has_match(status, ".dub")
        tokens = select_text(status, ".ep").split()
        episode = to_int(tokens[-1]) if tokens else None
        if has_match(status, ".movie"):
            media_type = TvType.ANIME_MOVIE
        elif has_match(status, ".ova"):
            media_type = TvType.OVA

    if not show_episode or media_type == TvType.ANIME_MOVIE:
        episode = None

    return SearchResult(
        title=title,
        alternate_title=_alternate(title, other_title),
        url=url,
        source=source,
        type=media_type,
        poster_url=poster,
        dub_status=frozenset({DubStatus.DUBBED if dub else DubStatus.SUBBED}),
        dub_episodes=episode if dub else None,
        sub_episodes=None if dub else episode,
    )


def parse_item_cards(
    cards: List[Tag],
    fix_url: UrlFixer,
    source: str = PROVIDER_NAME,
    show_episode: bool = True,
) -> List[SearchResult]:
    """Convert a sequence of item cards, keeping page order."""
    return [
        parse_item_card(card, fix_url, source=source, show_episode=show_episode)
        for card in cards
    ]


class _MetadataScan:
    """Accumulates the label/value metadata block, first match per label."""

    LABELS = ("Audio", "Data", "Stato", "Durata")

    def __init__(self):
        self.dub = False
        self.year: Optional[int] = None
        self.status: Optional[ShowStatus] = None
        self.duration: Optional[int] = None
        self._resolved = set()

    def feed(self, element: Tag) -> None:
        text = element_text(element)
        for label in self.LABELS:
            if label in text:
                if label not in self._resolved:
                    self._resolved.add(label)
                    self._apply(label, next_element_text(element))
                return

    def _apply(self, label: str, value: Optional[str]) -> None:
        if label == "Audio":
            self.dub = value == NATIVE_LANGUAGE
        elif label == "Data":
            self.year = parse_year(value)
        elif label == "Stato":
            self.status = map_status(value)
        elif label == "Durata":
            self.duration = parse_duration(value)


class AnimeWorldParser:
    """Specialized parser for animeworld.tv pages."""

    def __init__(self, html_content: str, fix_url: UrlFixer, source: str = PROVIDER_NAME):
        """
        Initialize AnimeWorld parser.

        Args:
            html_content: HTML content to parse
            fix_url: Resolves relative links against the site root
            source: Provider name recorded on the records
        """
        self.parser = HTMLParser(html_content)
        self.soup = self.parser.soup
        self.fix_url = fix_url
        self.source = source

    def _cards(self, cards: List[Tag], show_episode: bool) -> List[SearchResult]:
        return parse_item_cards(cards, self.fix_url, source=self.source, show_episode=show_episode)

    def parse_home_lists(self) -> List[HomePageList]:
        """
        Parse the tabbed "hot new" widget of the home page.

        Sub and dub tabs keep their episode counts; the trending tab
        hides them and drops repeated titles.

        Returns:
            Home page lists in tab order, sub/dub tabs first
        """
        lists: List[HomePageList] = []

        widget = self.soup.select_one(".widget.hotnew")
        if widget is None:
            logger.debug("Home page has no hot new widget")
            return lists

        for tab in widget.select('.tabs [data-name="sub"], .tabs [data-name="dub"]'):
            tab_id = tab.get("data-name", "")
            tab_name = remove_suffix(element_text(tab), TAB_SUFFIX)
            cards = widget.select(f'[data-name="{tab_id}"] .film-list .item')
            lists.append(HomePageList(name=tab_name, items=self._cards(cards, show_episode=True)))

        for tab in widget.select('.tabs [data-name="trending"]'):
            tab_id = tab.get("data-name", "")
            tab_name = element_text(tab)
            cards = widget.select(f'[data-name="{tab_id}"] .film-list .item')
            items: Dict[str, SearchResult] = {}
            for item in self._cards(cards, show_episode=False):
                items.setdefault(item.url, item)
            lists.append(HomePageList(name=tab_name, items=list(items.values())))

        return lists

    def parse_search_results(self) -> List[SearchResult]:
        """Parse the result grid of a search page."""
        return self._cards(self.parser.select(".film-list > .item"), show_episode=False)

    def parse_episodes(self, dub: bool) -> Dict[DubStatus, List[EpisodeRef]]:
        """
        Parse the episode list of the canonical server.

        Args:
            dub: Whether the episodes belong to the dubbed track

        Returns:
            Mapping of the single track to its episodes, empty if none
        """
        episodes: List[EpisodeRef] = []
        selector = f'.widget.servers .server[data-name="{CANONICAL_SERVER}"] .episode'

        for entry in self.soup.select(selector):
            episode_id = select_attr(entry, "a", "data-id")
            number = to_int(select_attr(entry, "a", "data-episode-num"))
            resolver_url = self.fix_url(EPISODE_INFO_PATH.format(episode_id=episode_id))
            episodes.append(EpisodeRef(resolver_url=resolver_url, episode_number=number))

        if not episodes:
            return {}
        return {DubStatus.DUBBED if dub else DubStatus.SUBBED: episodes}

    def parse_detail(self, url: str) -> MediaDetail:
        """
        Parse a detail page into a complete media record.

        Args:
            url: URL the page was loaded from

        Returns:
            MediaDetail for the page
        """
        soup = self.soup
        widget = soup.select_one("div.widget.info")
        if widget is None:
            widget = soup.new_tag("div")

        title = remove_suffix(select_text(widget, ".info .title"), TITLE_SUFFIX)
        other_title = remove_suffix(select_attr(widget, ".info .title", "data-jtitle"), TITLE_SUFFIX)

        plot = select_first_text(widget, ".desc .long")
        if plot is None:
            plot = select_text(widget, ".desc") or None

        media_type = map_type(select_first_text(widget, "dd"))
        genres = [element_text(a) for a in widget.select('.meta a[href*="/genre/"]')]
        rating = parse_rating(self.parser.find_text("#average-vote"))

        scan = _MetadataScan()
        for element in self.parser.select(".meta dt, .meta dd"):
            scan.feed(element)

        return MediaDetail(
            title=title,
            alternate_title=_alternate(title, other_title),
            url=url,
            source=self.source,
            type=media_type,
            poster_url=self.parser.find_attr(".thumb img", "src"),
            plot=plot,
            year=scan.year,
            status=scan.status,
            duration_minutes=scan.duration,
            rating=rating,
            genres=genres,
            trailer_url=self.parser.find_attr(".trailer[data-url]", "data-url") or None,
            external_ids=ExternalIds(
                mal_id=parse_trailing_id(self.parser.find_attr("#mal-button", "href")),
                anilist_id=parse_trailing_id(self.parser.find_attr("#anilist-button", "href")),
            ),
            episodes=self.parse_episodes(scan.dub),
            recommendations=self._cards(
                self.parser.select(".film-list.interesting .item"), show_episode=False
            ),
        )


__all__ = [
    "normalize_href",
    "parse_item_card",
    "parse_item_cards",
    "AnimeWorldParser",
]
