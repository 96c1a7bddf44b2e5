"""
Display Helpers - Rich renderings of provider records.

This module turns search results, media details and playback links
into tables and panels for the command line.
"""

from typing import List, Optional

from rich.panel import Panel
from rich.table import Table

from animeworld.core.models import (
    DubStatus,
    HomePageList,
    MediaDetail,
    PlaybackLink,
    SearchResult,
    TvType,
)
from animeworld.ui import get_console


TYPE_LABELS = {
    TvType.ANIME: "Series",
    TvType.ANIME_MOVIE: "Movie",
    TvType.OVA: "OVA",
}


def _format_tracks(result: SearchResult) -> str:
    labels = []
    if DubStatus.DUBBED in result.dub_status:
        labels.append("[aw.dub]Dub[/aw.dub]")
    if DubStatus.SUBBED in result.dub_status:
        labels.append("[aw.sub]Sub[/aw.sub]")
    return "/".join(labels)


def _format_latest(result: SearchResult) -> str:
    episode = result.dub_episodes if result.dub_episodes is not None else result.sub_episodes
    return str(episode) if episode is not None else "-"


def _format_rating(rating: Optional[int]) -> str:
    if rating is None:
        return "-"
    return f"{rating / 1000:.2f}"


def build_results_table(results: List[SearchResult], title: Optional[str] = None) -> Table:
    """Build a table with one row per search result."""
    table = Table(title=title, show_lines=False, expand=True)
    table.add_column("#", justify="right", style="aw.muted", width=4)
    table.add_column("Title", style="aw.title")
    table.add_column("Type", width=8)
    table.add_column("Audio", width=8)
    table.add_column("Latest", justify="right", width=7)
    table.add_column("URL", style="aw.url", overflow="fold")

    for index, result in enumerate(results, 1):
        title_text = result.title
        if result.alternate_title:
            title_text += f"\n[aw.muted]{result.alternate_title}[/aw.muted]"
        table.add_row(
            str(index),
            title_text,
            TYPE_LABELS[result.type],
            _format_tracks(result),
            _format_latest(result),
            result.url,
        )

    return table


def display_results(results: List[SearchResult], title: Optional[str] = None) -> None:
    """Print search results, or a notice when there are none."""
    console = get_console()
    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return
    console.print(build_results_table(results, title))


def display_home_lists(lists: List[HomePageList]) -> None:
    """Print every home page list as its own table."""
    console = get_console()
    if not lists:
        console.print("[yellow]The home page has no lists.[/yellow]")
        return
    for home_list in lists:
        display_results(home_list.items, title=home_list.name)
        console.print()


def build_detail_panel(detail: MediaDetail) -> Panel:
    """Build the summary panel of a media record."""
    rows = []
    if detail.alternate_title:
        rows.append(f"[aw.muted]Also known as:[/aw.muted] {detail.alternate_title}")
    rows.append(f"[aw.muted]Type:[/aw.muted] {TYPE_LABELS[detail.type]}")
    if detail.year is not None:
        rows.append(f"[aw.muted]Year:[/aw.muted] {detail.year}")
    if detail.status is not None:
        rows.append(f"[aw.muted]Status:[/aw.muted] {detail.status.value.title()}")
    if detail.duration_minutes is not None:
        rows.append(f"[aw.muted]Duration:[/aw.muted] {detail.duration_minutes} min")
    rows.append(f"[aw.muted]Rating:[/aw.muted] {_format_rating(detail.rating)}")
    if detail.genres:
        rows.append(f"[aw.muted]Genres:[/aw.muted] {', '.join(detail.genres)}")
    if detail.dub_status is not None:
        rows.append(f"[aw.muted]Audio:[/aw.muted] {'Dub' if detail.dub_status == DubStatus.DUBBED else 'Sub'}")
    if detail.external_ids.mal_id is not None:
        rows.append(f"[aw.muted]MAL:[/aw.muted] {detail.external_ids.mal_id}")
    if detail.external_ids.anilist_id is not None:
        rows.append(f"[aw.muted]AniList:[/aw.muted] {detail.external_ids.anilist_id}")
    if detail.trailer_url:
        rows.append(f"[aw.muted]Trailer:[/aw.muted] [aw.url]{detail.trailer_url}[/aw.url]")
    if detail.plot:
        rows.append(f"\n{detail.plot}")

    return Panel("\n".join(rows), title=f"[bold]{detail.title}[/bold]", border_style="blue", padding=(1, 2))


def display_detail(detail: MediaDetail) -> None:
    """Print a media record with its episodes and recommendations."""
    console = get_console()
    console.print(build_detail_panel(detail))

    for track, episodes in detail.episodes.items():
        table = Table(title=f"Episodes ({track})", expand=True)
        table.add_column("Episode", justify="right", width=8)
        table.add_column("Resolver URL", style="aw.url", overflow="fold")
        for episode in episodes:
            number = str(episode.episode_number) if episode.episode_number is not None else "?"
            table.add_row(number, episode.resolver_url)
        console.print(table)

    if detail.recommendations:
        display_results(detail.recommendations, title="Recommendations")


def display_links(links: List[PlaybackLink]) -> None:
    """Print resolved playback links, best quality first."""
    console = get_console()
    table = Table(title="Playback Links", expand=True)
    table.add_column("Name", style="aw.title")
    table.add_column("Quality", width=8)
    table.add_column("HLS", width=4)
    table.add_column("Referer", style="aw.muted")
    table.add_column("URL", style="aw.url", overflow="fold")
    for link in sorted(links, key=lambda link: link.quality.rank, reverse=True):
        table.add_row(link.name, str(link.quality), "yes" if link.is_m3u8 else "no", link.referer, link.url)
    console.print(table)


__all__ = [
    "build_results_table",
    "build_detail_panel",
    "display_results",
    "display_home_lists",
    "display_detail",
    "display_links",
]
