"""
AnimeWorld Link Resolver - Decodes episode info responses.

The episode info endpoint answers with a small JSON object whose
"grabber" field is the final stream URL. There is no fallback: a body
without that field cannot be played.
"""

import json
import logging

from animeworld.core.exceptions import LinkResolutionError
from animeworld.core.models import PlaybackLink, Quality

from .config import GRABBER_FIELD, PROVIDER_NAME


logger = logging.getLogger(__name__)


def resolve_stream_url(body: str) -> str:
    """
    Extract the stream URL from an episode info response.

    Args:
        body: Raw response body

    Returns:
        Stream URL carried by the "grabber" field

    Raises:
        LinkResolutionError: If the body is not a JSON object with a string "grabber"
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise LinkResolutionError(
            "Episode info response is not valid JSON",
            plugin_name=PROVIDER_NAME,
            details=str(e)
        ) from e

    if not isinstance(payload, dict):
        raise LinkResolutionError(
            "Episode info response is not a JSON object",
            plugin_name=PROVIDER_NAME,
            details=body[:200]
        )

    url = payload.get(GRABBER_FIELD)
    if not isinstance(url, str) or not url:
        raise LinkResolutionError(
            f"Episode info response has no '{GRABBER_FIELD}' URL",
            plugin_name=PROVIDER_NAME,
            details=body[:200]
        )

    logger.debug(f"Resolved stream URL: {url}")
    return url


def build_playback_link(stream_url: str, referer: str, source: str = PROVIDER_NAME) -> PlaybackLink:
    """Create the single link this provider emits per episode."""
    return PlaybackLink(
        source=source,
        name=source,
        url=stream_url,
        referer=referer,
        quality=Quality.UNKNOWN,
    )


__all__ = ["resolve_stream_url", "build_playback_link"]
