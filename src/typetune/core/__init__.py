"""Core components for typography tuning."""

from .config import AppConfig, PluginSettings, load_config_from_yaml
from .exceptions import (
    ConfigurationError,
    ExportError,
    HostError,
    TypeTuneError,
    ValidationError,
)
from .models import (
    DeduplicatedGroup,
    FontProfile,
    GroupingReport,
    LetterSpacing,
    LineHeight,
    Paint,
    TextItem,
    TypographyInput,
    TypographyResult,
    WeightAdjustment,
)
from .settings_store import SettingsStore

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "DeduplicatedGroup",
    "ExportError",
    "FontProfile",
    "GroupingReport",
    "HostError",
    "LetterSpacing",
    "LineHeight",
    "Paint",
    "PluginSettings",
    "SettingsStore",
    "TextItem",
    "TypeTuneError",
    "TypographyInput",
    "TypographyResult",
    "ValidationError",
    "WeightAdjustment",
    "load_config_from_yaml",
]
