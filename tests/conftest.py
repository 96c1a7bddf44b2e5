"""Shared fixtures: a fake transport for the plugin."""

from typing import Callable, Dict, List

import pytest

from animeworld.plugins.animeworld import AnimeWorldPlugin
from pages import BASE_URL


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def fix_url() -> Callable[[str], str]:
    return AnimeWorldPlugin().fix_url


@pytest.fixture
def plugin() -> AnimeWorldPlugin:
    return AnimeWorldPlugin()


@pytest.fixture
def fake_pages(monkeypatch: pytest.MonkeyPatch):
    """
    Replace the plugin transport with a URL -> body mapping.

    Call the returned factory with the pages to serve; it returns the
    list of URLs requested so far.
    """
    requested: List[str] = []

    def install(pages: Dict[str, object]) -> List[str]:
        async def fake_get_text(self, url: str, **kwargs) -> str:
            requested.append(url)
            body = pages[url]
            if isinstance(body, Exception):
                raise body
            return body

        monkeypatch.setattr(AnimeWorldPlugin, "_get_text", fake_get_text, raising=True)
        return requested

    return install
