"""
Settings Store
==============

Loads user settings once per session and persists them on every change.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from .config import PluginSettings
from .exceptions import (
    EmptyConfigFileError,
    SettingsSaveError,
    UnknownSettingError,
)

logger = logging.getLogger(__name__)


class SettingsStore:
    """YAML-backed persistence for :class:`PluginSettings`."""

    def __init__(self, path: str | Path):
        """
        Initialize settings store.

        Args:
            path: YAML file settings are read from and written to
        """
        self.path = Path(path).expanduser()
        self._settings: PluginSettings | None = None

    @property
    def settings(self) -> PluginSettings:
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> PluginSettings:
        """
        Load persisted settings merged over defaults.

        A missing or empty file gives the defaults.

        Raises:
            ConfigurationError: If the file is not valid YAML or holds invalid values
        """
        if not self.path.exists():
            self._settings = PluginSettings()
        else:
            try:
                self._settings = PluginSettings.from_yaml(self.path)
            except EmptyConfigFileError:
                logger.warning(f"Settings file {self.path} is empty, using defaults")
                self._settings = PluginSettings()

        logger.debug(f"Loaded settings from {self.path}: {self._settings.model_dump()}")
        return self._settings

    def save(self) -> None:
        """Write current settings to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w") as f:
                yaml.safe_dump(self.settings.model_dump(), f, sort_keys=True)
        except OSError as e:
            raise SettingsSaveError(str(self.path), str(e)) from e
        logger.debug(f"Saved settings to {self.path}")

    def update(self, **changes: Any) -> PluginSettings:
        """
        Validate and apply changes, then persist immediately.

        Raises:
            UnknownSettingError: If a key is not a settings field
            pydantic.ValidationError: If a value is invalid
        """
        valid_names = sorted(PluginSettings.model_fields)
        for name in changes:
            if name not in PluginSettings.model_fields:
                raise UnknownSettingError(name, valid_names)

        # Validate everything before touching the live settings object
        candidate = self.settings.model_copy()
        for name, value in changes.items():
            setattr(candidate, name, value)

        self._settings = candidate
        self.save()
        logger.info(f"Updated settings: {changes}")
        return candidate
