"""
AnimeWorld Configuration - Site constants and plugin configuration.

This module holds the site vocabulary the extractors key on and the
validation of the plugin configuration dictionary.
"""

from typing import Any, Dict

from animeworld.core.config_schemas import DEFAULT_BASE_URL, ProviderSettings


PROVIDER_NAME = "AnimeWorld"
PROVIDER_LANG = "it"

# Suffix the site appends to titles and tab names of dubbed content
TITLE_SUFFIX = " (ITA)"
TAB_SUFFIX = "-ITA"

# Value of the "Audio" metadata entry for dubbed titles
NATIVE_LANGUAGE = "Italiano"

# Mirror whose episode list is authoritative
CANONICAL_SERVER = "9"

SEARCH_PATH = "/search?keyword={query}"
EPISODE_INFO_PATH = "/api/episode/info?id={episode_id}"

# JSON field of the episode info response carrying the stream URL
GRABBER_FIELD = "grabber"


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for the AnimeWorld plugin."""
    return ProviderSettings(base_url=DEFAULT_BASE_URL).to_plugin_config()


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and normalize plugin configuration.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated and normalized configuration

    Raises:
        ValueError: If configuration is invalid
    """
    try:
        return ProviderSettings.model_validate(config).to_plugin_config()
    except Exception as e:
        raise ValueError(f"Invalid AnimeWorld plugin configuration: {e}") from e


__all__ = [
    "PROVIDER_NAME",
    "PROVIDER_LANG",
    "TITLE_SUFFIX",
    "TAB_SUFFIX",
    "NATIVE_LANGUAGE",
    "CANONICAL_SERVER",
    "SEARCH_PATH",
    "EPISODE_INFO_PATH",
    "GRABBER_FIELD",
    "get_default_config",
    "validate_config",
]
