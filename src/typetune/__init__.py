"""TypeTune
========

Visually tuned line-height and letter-spacing for text, derived from font
family, size, weight, case and background, with export to CSS, iOS and
Android code.
"""

__version__ = "1.0.0"
__author__ = "TypeTune Team"

from .core.config import AppConfig, PluginSettings
from .core.exceptions import ConfigurationError, ExportError, HostError, TypeTuneError
from .core.models import FontProfile, TypographyInput, TypographyResult
from .engine import (
    build_groups,
    calculate,
    detect_context,
    export_code,
    is_dark_background,
    relative_luminance,
    snap_to_grid,
)
from .fonts import get_profile, get_profile_or_fallback, guess_category

__all__ = [
    "AppConfig",
    "ConfigurationError",
    "ExportError",
    "FontProfile",
    "HostError",
    "PluginSettings",
    "TypeTuneError",
    "TypographyInput",
    "TypographyResult",
    "build_groups",
    "calculate",
    "detect_context",
    "export_code",
    "get_profile",
    "get_profile_or_fallback",
    "guess_category",
    "is_dark_background",
    "relative_luminance",
    "snap_to_grid",
]
