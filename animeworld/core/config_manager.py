"""
Configuration Manager - JSON-based settings loading.

This module reads ``settings.json`` from a configuration directory and
validates it against the application schema. Settings are read-only:
the manager never writes the file back.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from animeworld.core.config_schemas import AppSettings
from animeworld.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Loads application configuration with validation and default values.
    """

    SETTINGS_FILENAME = "settings.json"

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory containing configuration files.
                       Defaults to './config' if not specified.
        """
        self.config_dir = Path(config_dir or "config")
        self._settings_file = self.config_dir / self.SETTINGS_FILENAME
        self._settings = self._load_settings()

    def _load_settings(self) -> AppSettings:
        """Load and validate application settings."""
        if not self._settings_file.exists():
            logger.debug(f"Settings file {self._settings_file} not found, using defaults")
            return AppSettings()

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read settings: {e}",
                config_path=str(self._settings_file),
                details=str(e)
            ) from e
        except json.JSONDecodeError as e:
            logger.warning(f"Invalid settings file, using defaults: {e}")
            return AppSettings()

        try:
            return AppSettings.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Invalid settings file, using defaults: {e}")
            return AppSettings()

    @property
    def settings(self) -> AppSettings:
        """Get current application settings."""
        return self._settings

    @property
    def settings_file(self) -> Path:
        """Get the path of the settings file."""
        return self._settings_file


__all__ = ["ConfigManager"]
