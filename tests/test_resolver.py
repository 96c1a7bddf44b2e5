"""Tests for the episode info decoding."""

import pytest

from animeworld.core.exceptions import LinkResolutionError, PluginError
from animeworld.core.models import Quality
from animeworld.plugins.animeworld.resolver import build_playback_link, resolve_stream_url


class TestResolveStreamUrl:
    def test_grabber_field(self):
        body = '{"grabber":"https://cdn.example/stream.m3u8","target":"_blank"}'
        assert resolve_stream_url(body) == "https://cdn.example/stream.m3u8"

    @pytest.mark.parametrize("body", [
        "{}",
        '{"grabber": null}',
        '{"grabber": 42}',
        '{"grabber": ""}',
        '["https://cdn.example/stream.m3u8"]',
        "<html>Not found</html>",
        "",
    ])
    def test_unusable_body(self, body):
        with pytest.raises(LinkResolutionError) as exc_info:
            resolve_stream_url(body)
        assert exc_info.value.plugin_name == "AnimeWorld"

    def test_is_a_plugin_error(self):
        with pytest.raises(PluginError):
            resolve_stream_url("{}")


class TestBuildPlaybackLink:
    def test_single_unknown_quality_link(self):
        link = build_playback_link("https://cdn.example/stream.m3u8", referer="https://www.animeworld.tv")

        assert link.name == "AnimeWorld"
        assert link.source == "AnimeWorld"
        assert link.url == "https://cdn.example/stream.m3u8"
        assert link.referer == "https://www.animeworld.tv"
        assert link.quality == Quality.UNKNOWN
        assert link.is_m3u8 is True

    def test_mp4_is_not_hls(self):
        link = build_playback_link("https://cdn.example/video.mp4?token=abc", referer="")
        assert link.is_m3u8 is False
