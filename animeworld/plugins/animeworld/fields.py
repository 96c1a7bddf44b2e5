"""
AnimeWorld Field Parsers - Typed values from raw page text.

Every function here is total: unparseable input yields None (or the
documented default), never an exception.
"""

import math
import re
from typing import Optional

from animeworld.core.models import ShowStatus, TvType


_INT_TOKEN = re.compile(r'[+-]?[0-9]+')

_STATUS_MAP = {
    "finito": ShowStatus.COMPLETED,
    "in corso": ShowStatus.ONGOING,
}

_TYPE_MAP = {
    "movie": TvType.ANIME_MOVIE,
    "ova": TvType.OVA,
}


def to_int(token: Optional[str]) -> Optional[int]:
    """Parse a signed ASCII integer token, or None."""
    if token is None or not _INT_TOKEN.fullmatch(token):
        return None
    return int(token)


def _leading_int(segment: str) -> Optional[int]:
    return to_int(segment.split(' ')[0])


def parse_duration(text: Optional[str]) -> Optional[int]:
    """
    Parse a duration into total minutes.

    Accepts "<minutes> min" or "<hours>h e <minutes> min". Negative
    amounts are rejected.

    Args:
        text: Raw duration text

    Returns:
        Total minutes or None
    """
    if text is None:
        return None

    segments = text.split(' e ')
    if len(segments) == 1:
        minutes = _leading_int(segments[0])
        return minutes if minutes is not None and minutes >= 0 else None
    if len(segments) != 2:
        return None

    minutes = _leading_int(segments[1])
    hours = to_int(segments[0].removesuffix('h'))
    if minutes is None or hours is None or minutes < 0 or hours < 0:
        return None
    return hours * 60 + minutes


def parse_rating(text: Optional[str]) -> Optional[int]:
    """
    Parse a decimal score into fixed point with three decimals ("8.5" -> 8500).

    Negative scores and scores too large to scale yield None.
    """
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    scaled = value * 1000
    if not math.isfinite(scaled) or scaled < 0:
        return None
    return round(scaled)


def parse_year(text: Optional[str]) -> Optional[int]:
    """Parse the year from the last word of a date ("12 Gen 2021" -> 2021)."""
    if not text:
        return None
    tokens = text.split()
    if not tokens:
        return None
    return to_int(tokens[-1])


def map_status(text: Optional[str]) -> Optional[ShowStatus]:
    """Map the site's status vocabulary; unknown values map to None."""
    if text is None:
        return None
    return _STATUS_MAP.get(text.lower())


def map_type(text: Optional[str]) -> TvType:
    """Map the site's type vocabulary; anything unrecognized is a series."""
    if text is None:
        return TvType.ANIME
    return _TYPE_MAP.get(text.lower(), TvType.ANIME)


def parse_trailing_id(url: Optional[str]) -> Optional[int]:
    """Parse the numeric id after the final "/" of a URL."""
    if not url:
        return None
    return to_int(url.split('/')[-1])


__all__ = [
    "to_int",
    "parse_duration",
    "parse_rating",
    "parse_year",
    "map_status",
    "map_type",
    "parse_trailing_id",
]
