"""Font Profile Module
===================

Static typographic profiles for common font families, alias resolution and
category-based fallbacks for unknown families.
"""

from .database import (
    FontDatabase,
    all_font_families,
    get_database,
    get_profile,
    get_profile_or_fallback,
    guess_category,
    match_category,
)
from .utils import weight_from_style

__all__ = [
    "FontDatabase",
    "all_font_families",
    "get_database",
    "get_profile",
    "get_profile_or_fallback",
    "guess_category",
    "match_category",
    "weight_from_style",
]
