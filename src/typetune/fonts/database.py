"""
Font Profile Database
=====================

Lookup of static font profiles by family name, with alias substitution and a
category-based fallback for families that are not in the table.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from ..core.models import FALLBACK_FAMILY, FontCategory, FontProfile
from .profiles import ALIASES, FALLBACK_DATA, PROFILE_DATA

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY: FontCategory = "sans-serif"


def _is_mono(text: str) -> bool:
    return "mono" in text or "code" in text


def _is_sans(text: str) -> bool:
    return "sans serif" in text or "sans-serif" in text


def _is_serif(text: str) -> bool:
    return "serif" in text


def _is_display(text: str) -> bool:
    return "display" in text


# Checked in order: mono names first, then "sans serif" before plain "serif"
CATEGORY_RULES: tuple[tuple[Callable[[str], bool], FontCategory], ...] = (
    (_is_mono, "mono"),
    (_is_sans, "sans-serif"),
    (_is_serif, "serif"),
    (_is_display, "display"),
)


def match_category(text: str | None) -> FontCategory | None:
    """Return the first category whose rule matches ``text``, or None."""
    if not text:
        return None
    lowered = text.lower()
    for rule, category in CATEGORY_RULES:
        if rule(lowered):
            return category
    return None


def guess_category(text: str | None) -> FontCategory:
    """
    Infer a font category from a style or family string.

    Matching is plain substring testing, so families such as "Merriweather"
    that carry no hint in their name land in the sans-serif default.
    """
    return match_category(text) or DEFAULT_CATEGORY


def _build_fallbacks() -> dict[str, FontProfile]:
    return {
        category: FontProfile(family=FALLBACK_FAMILY, category=category, **values)
        for category, values in FALLBACK_DATA.items()
    }


class FontDatabase:
    """
    Immutable table of font profiles.

    Profiles are validated once at construction. Lookups are case-insensitive
    and resolve aliases to their canonical family; there is no fuzzy matching.
    """

    def __init__(
        self,
        profiles: Iterable[FontProfile | Mapping[str, Any]] | None = None,
        aliases: Mapping[str, str] | None = None,
    ):
        """
        Initialize the database.

        Args:
            profiles: Profiles or raw profile dicts; defaults to the bundled table
            aliases: Alias -> canonical family mapping; defaults to the bundled aliases
        """
        source = PROFILE_DATA if profiles is None else profiles
        self._profiles: dict[str, FontProfile] = {}
        for entry in source:
            profile = entry if isinstance(entry, FontProfile) else FontProfile(**entry)
            self._profiles[profile.family.lower()] = profile

        alias_source = ALIASES if aliases is None else aliases
        self._aliases = {alias.lower(): family.lower() for alias, family in alias_source.items()}
        self._fallbacks = _build_fallbacks()

        dangling = [alias for alias, family in self._aliases.items() if family not in self._profiles]
        for alias in dangling:
            logger.warning(f"Alias '{alias}' points at unknown family, ignoring")
            del self._aliases[alias]

        logger.debug(
            f"FontDatabase initialized with {len(self._profiles)} profiles "
            f"and {len(self._aliases)} aliases"
        )

    @property
    def families(self) -> tuple[str, ...]:
        """Canonical family names in table order."""
        return tuple(profile.family for profile in self._profiles.values())

    @property
    def aliases(self) -> dict[str, str]:
        """Alias -> canonical family (display casing)."""
        return {alias: self._profiles[family].family for alias, family in self._aliases.items()}

    def get_profile(self, family: str) -> FontProfile | None:
        """Resolve a family (or alias) to its profile; None when unknown."""
        if not family:
            return None
        key = family.strip().lower()
        key = self._aliases.get(key, key)
        return self._profiles.get(key)

    def get_fallback(self, category: FontCategory = DEFAULT_CATEGORY) -> FontProfile:
        return self._fallbacks.get(category, self._fallbacks[DEFAULT_CATEGORY])

    def get_profile_or_fallback(
        self, family: str, category: FontCategory = DEFAULT_CATEGORY
    ) -> tuple[FontProfile, bool]:
        """
        Resolve a profile, falling back to a category profile.

        Returns:
            Tuple of (profile, is_approximate)
        """
        profile = self.get_profile(family)
        if profile is not None:
            return profile, False

        logger.debug(f"No profile for '{family}', using {category} fallback")
        return self.get_fallback(category), True

    def __contains__(self, family: str) -> bool:
        return self.get_profile(family) is not None

    def __len__(self) -> int:
        return len(self._profiles)


_default_database = FontDatabase()

all_font_families: tuple[str, ...] = _default_database.families


def get_database() -> FontDatabase:
    """Get the shared database built from the bundled profile table."""
    return _default_database


def get_profile(family: str) -> FontProfile | None:
    return _default_database.get_profile(family)


def get_profile_or_fallback(
    family: str, category: FontCategory = DEFAULT_CATEGORY
) -> tuple[FontProfile, bool]:
    return _default_database.get_profile_or_fallback(family, category)
