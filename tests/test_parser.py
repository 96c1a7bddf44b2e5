"""Tests for the listing and detail extractors, using inline HTML."""

from bs4 import BeautifulSoup

from animeworld.core.models import DubStatus, ShowStatus, TvType
from animeworld.plugins.animeworld.parser import (
    AnimeWorldParser,
    normalize_href,
    parse_item_card,
)
from pages import (
    BASE_URL,
    DETAIL_EXTRAS,
    HOME_PAGE,
    SEARCH_PAGE,
    card_html,
    detail_page,
)


def _card(**kwargs):
    soup = BeautifulSoup(card_html(**kwargs), "html.parser")
    return soup.select_one(".item")


# ===================================================================
# Listing extractor
# ===================================================================

class TestNormalizeHref:
    def test_strips_tracking_suffix(self):
        assert normalize_href("/play/naruto.Ab12C/xYz9") == "/play/naruto.Ab12C"

    def test_keeps_later_segments(self):
        assert normalize_href("/play/dr.stone.Ab12C/x") == "/play/dr.stone.Ab12C/x"

    def test_second_segment_without_slash(self):
        assert normalize_href("/play/naruto.Ab12C") == "/play/naruto.Ab12C"

    def test_no_dot(self):
        assert normalize_href("/play/naruto") == "/play/naruto"
        assert normalize_href("") == ""


class TestParseItemCard:
    def test_subbed_series_with_episode(self, fix_url):
        result = parse_item_card(_card(), fix_url)

        assert result.title == "Naruto Shippuden"
        assert result.alternate_title == "Naruto: Shippuuden"
        assert result.url == f"{BASE_URL}/play/naruto-shippuden.Ab12C"
        assert result.poster_url == "https://img.animeworld.tv/locandine/naruto.jpg"
        assert result.type == TvType.ANIME
        assert result.dub_status == frozenset({DubStatus.SUBBED})
        assert result.sub_episodes == 500
        assert result.dub_episodes is None
        assert result.source == "AnimeWorld"

    def test_dubbed_card_strips_language_tag(self, fix_url):
        card = _card(
            title="Naruto (ITA)",
            jtitle="Naruto (ITA)",
            markers='<div class="dub">DUB</div><div class="ep">Ep 220</div>',
        )
        result = parse_item_card(card, fix_url)

        assert result.title == "Naruto"
        assert result.alternate_title is None
        assert result.dub_status == frozenset({DubStatus.DUBBED})
        assert result.dub_episodes == 220
        assert result.sub_episodes is None

    def test_alternate_title_missing(self, fix_url):
        result = parse_item_card(_card(jtitle=None), fix_url)
        assert result.alternate_title is None

    def test_movie_never_carries_count(self, fix_url):
        card = _card(markers='<div class="movie">Movie</div><div class="ep">Ep 1</div>')
        result = parse_item_card(card, fix_url, show_episode=True)

        assert result.type == TvType.ANIME_MOVIE
        assert result.dub_episodes is None
        assert result.sub_episodes is None

    def test_ova_type(self, fix_url):
        card = _card(markers='<div class="ova">OVA</div><div class="ep">Ep 2</div>')
        result = parse_item_card(card, fix_url)

        assert result.type == TvType.OVA
        assert result.sub_episodes == 2

    def test_episode_suppressed(self, fix_url):
        for markers in (
            '<div class="ep">Ep 12</div>',
            '<div class="dub">DUB</div><div class="ep">Ep 12</div>',
            '<div class="ova">OVA</div><div class="ep">Ep 3</div>',
        ):
            result = parse_item_card(_card(markers=markers), fix_url, show_episode=False)
            assert result.dub_episodes is None
            assert result.sub_episodes is None

    def test_non_numeric_episode(self, fix_url):
        result = parse_item_card(_card(markers='<div class="ep">Ep ??</div>'), fix_url)
        assert result.sub_episodes is None

    def test_missing_status_fragment(self, fix_url):
        html = '<div class="item"><a class="name" href="/play/x.Y/z">X</a></div>'
        card = BeautifulSoup(html, "html.parser").select_one(".item")
        result = parse_item_card(card, fix_url)

        assert result.title == "X"
        assert result.poster_url == ""
        assert result.dub_status == frozenset({DubStatus.SUBBED})
        assert result.sub_episodes is None

    def test_empty_card(self, fix_url):
        card = BeautifulSoup('<div class="item"></div>', "html.parser").select_one(".item")
        result = parse_item_card(card, fix_url)

        assert result.title == ""
        assert result.url == ""

    def test_extraction_is_repeatable(self, fix_url):
        card = _card(markers='<div class="dub">DUB</div><div class="ep">Ep 7</div>')
        first = parse_item_card(card, fix_url)
        second = parse_item_card(card, fix_url)

        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_counts_never_on_both_tracks(self, fix_url):
        soup = BeautifulSoup(SEARCH_PAGE + HOME_PAGE, "html.parser")
        for card in soup.select(".item"):
            for show_episode in (True, False):
                result = parse_item_card(card, fix_url, show_episode=show_episode)
                assert result.dub_episodes is None or result.sub_episodes is None


# ===================================================================
# Page-level listings
# ===================================================================

class TestHomeLists:
    def test_tabs_in_order(self, fix_url):
        lists = AnimeWorldParser(HOME_PAGE, fix_url).parse_home_lists()
        assert [home_list.name for home_list in lists] == ["Sub", "Dub", "In Tendenza"]

    def test_sub_and_dub_show_episodes(self, fix_url):
        sub, dub, _ = AnimeWorldParser(HOME_PAGE, fix_url).parse_home_lists()

        assert [item.title for item in sub.items] == ["One Piece", "Frieren"]
        assert sub.items[0].sub_episodes == 1090
        assert sub.items[0].alternate_title is None
        assert dub.items[0].title == "Jujutsu Kaisen"
        assert dub.items[0].dub_episodes == 24

    def test_trending_is_deduplicated_without_counts(self, fix_url):
        *_, trending = AnimeWorldParser(HOME_PAGE, fix_url).parse_home_lists()

        assert [item.url for item in trending.items] == [
            f"{BASE_URL}/play/frieren.XyZ2",
            f"{BASE_URL}/play/your-name.MnO4",
        ]
        assert all(item.sub_episodes is None for item in trending.items)

    def test_missing_widget(self, fix_url):
        assert AnimeWorldParser("<html></html>", fix_url).parse_home_lists() == []


class TestSearchResults:
    def test_results_without_counts(self, fix_url):
        results = AnimeWorldParser(SEARCH_PAGE, fix_url).parse_search_results()

        assert [r.title for r in results] == [
            "Naruto Shippuden", "Naruto", "Naruto the Movie", "Naruto OVA",
        ]
        assert [r.type for r in results] == [
            TvType.ANIME, TvType.ANIME, TvType.ANIME_MOVIE, TvType.OVA,
        ]
        assert results[1].dub_status == frozenset({DubStatus.DUBBED})
        assert all(r.dub_episodes is None and r.sub_episodes is None for r in results)

    def test_no_results(self, fix_url):
        assert AnimeWorldParser("<div class='film-list'></div>", fix_url).parse_search_results() == []


# ===================================================================
# Detail extractor
# ===================================================================

DETAIL_URL = f"{BASE_URL}/play/attack-on-titan.AbC"


class TestParseDetail:
    def test_metadata_block(self, fix_url):
        detail = AnimeWorldParser(detail_page(), fix_url).parse_detail(DETAIL_URL)

        assert detail.dub_status == DubStatus.DUBBED
        assert detail.year == 2021
        assert detail.status == ShowStatus.ONGOING
        assert detail.duration_minutes == 80

    def test_basic_fields(self, fix_url):
        detail = AnimeWorldParser(detail_page(), fix_url).parse_detail(DETAIL_URL)

        assert detail.title == "Attack on Titan"
        assert detail.alternate_title == "Shingeki no Kyojin"
        assert detail.url == DETAIL_URL
        assert detail.poster_url == "https://img.animeworld.tv/locandine/aot.jpg"
        assert detail.plot == "Humanity fights the titans behind three walls."
        assert detail.type == TvType.ANIME
        assert detail.genres == ["Azione", "Drammatico"]
        assert detail.rating == 8500

    def test_episodes_of_canonical_server(self, fix_url):
        detail = AnimeWorldParser(detail_page(), fix_url).parse_detail(DETAIL_URL)

        assert list(detail.episodes) == [DubStatus.DUBBED]
        episodes = detail.episodes[DubStatus.DUBBED]
        assert [e.resolver_url for e in episodes] == [
            f"{BASE_URL}/api/episode/info?id=1001",
            f"{BASE_URL}/api/episode/info?id=1002",
            f"{BASE_URL}/api/episode/info?id=1003",
        ]
        assert [e.episode_number for e in episodes] == [1, 2, None]

    def test_subbed_when_audio_is_japanese(self, fix_url):
        meta = "<dt>Audio:</dt><dd>Giapponese</dd>"
        detail = AnimeWorldParser(detail_page(meta_rows=meta), fix_url).parse_detail(DETAIL_URL)

        assert list(detail.episodes) == [DubStatus.SUBBED]
        assert detail.year is None
        assert detail.status is None
        assert detail.duration_minutes is None

    def test_first_label_wins(self, fix_url):
        meta = """
          <dt>Stato:</dt><dd>Finito</dd>
          <dt>Audio:</dt><dd>Giapponese</dd>
          <dt>Data di Uscita:</dt><dd>?? ?? ??</dd>
          <dt>Durata:</dt><dd>24 min</dd>
          <dt>Stato:</dt><dd>In corso</dd>
          <dt>Audio:</dt><dd>Italiano</dd>
          <dt>Data di Uscita:</dt><dd>3 Aprile 2015</dd>
          <dt>Durata:</dt><dd>1h e 5 min</dd>
        """
        detail = AnimeWorldParser(detail_page(meta_rows=meta), fix_url).parse_detail(DETAIL_URL)

        assert detail.status == ShowStatus.COMPLETED
        assert detail.dub_status == DubStatus.SUBBED
        assert detail.year is None
        assert detail.duration_minutes == 24

    def test_unknown_status_is_dropped(self, fix_url):
        meta = "<dt>Stato:</dt><dd>Non rilasciato</dd>"
        detail = AnimeWorldParser(detail_page(meta_rows=meta), fix_url).parse_detail(DETAIL_URL)
        assert detail.status is None

    def test_negative_duration_is_dropped(self, fix_url):
        meta = "<dt>Durata:</dt><dd>-5 min</dd>"
        detail = AnimeWorldParser(detail_page(meta_rows=meta), fix_url).parse_detail(DETAIL_URL)

        assert detail.duration_minutes is None
        assert detail.title == "Attack on Titan"

    def test_negative_rating_is_dropped(self, fix_url):
        html = detail_page().replace('<span id="average-vote">8.5</span>', '<span id="average-vote">-1</span>')
        detail = AnimeWorldParser(html, fix_url).parse_detail(DETAIL_URL)

        assert detail.rating is None
        assert detail.duration_minutes == 80

    def test_overflowing_rating_is_dropped(self, fix_url):
        html = detail_page().replace('<span id="average-vote">8.5</span>', '<span id="average-vote">1e306</span>')
        assert AnimeWorldParser(html, fix_url).parse_detail(DETAIL_URL).rating is None

    def test_type_from_category(self, fix_url):
        detail = AnimeWorldParser(detail_page(category="Movie"), fix_url).parse_detail(DETAIL_URL)
        assert detail.type == TvType.ANIME_MOVIE

    def test_no_episodes(self, fix_url):
        detail = AnimeWorldParser(detail_page(servers=""), fix_url).parse_detail(DETAIL_URL)

        assert detail.episodes == {}
        assert detail.dub_status is None

    def test_external_ids_and_trailer(self, fix_url):
        html = detail_page(extras=DETAIL_EXTRAS)
        detail = AnimeWorldParser(html, fix_url).parse_detail(DETAIL_URL)

        assert detail.trailer_url == "https://www.youtube.com/embed/LHtdKWJdif4"
        assert detail.external_ids.mal_id == 40748
        assert detail.external_ids.anilist_id == 113415

    def test_optional_elements_missing(self, fix_url):
        detail = AnimeWorldParser(detail_page(), fix_url).parse_detail(DETAIL_URL)

        assert detail.trailer_url is None
        assert detail.external_ids.mal_id is None
        assert detail.external_ids.anilist_id is None

    def test_recommendations_without_counts(self, fix_url):
        detail = AnimeWorldParser(detail_page(), fix_url).parse_detail(DETAIL_URL)

        assert [r.title for r in detail.recommendations] == ["Vinland Saga", "Kimi no Na wa"]
        assert detail.recommendations[0].url == f"{BASE_URL}/play/vinland-saga.ZxC8"
        assert detail.recommendations[0].alternate_title is None
        assert all(r.sub_episodes is None for r in detail.recommendations)

    def test_short_description_fallback(self, fix_url):
        html = detail_page().replace(
            '<div class="desc"><div class="long">Humanity fights the titans behind three walls.</div></div>',
            '<div class="desc">Titans attack.</div>',
        )
        detail = AnimeWorldParser(html, fix_url).parse_detail(DETAIL_URL)
        assert detail.plot == "Titans attack."

    def test_empty_document(self, fix_url):
        detail = AnimeWorldParser("<html></html>", fix_url).parse_detail(DETAIL_URL)

        assert detail.title == ""
        assert detail.alternate_title is None
        assert detail.plot is None
        assert detail.type == TvType.ANIME
        assert detail.genres == []
        assert detail.rating is None
        assert detail.episodes == {}
        assert detail.recommendations == []
