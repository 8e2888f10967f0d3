"""
Font Utilities
==============

Helpers for interpreting font style labels reported by the host.
"""

import re

# Compound keywords must come before the keywords they end with
WEIGHT_KEYWORDS: tuple[tuple[str, int], ...] = (
    ("hairline", 100),
    ("thin", 100),
    ("extralight", 200),
    ("ultralight", 200),
    ("light", 300),
    ("medium", 500),
    ("semibold", 600),
    ("demibold", 600),
    ("extrabold", 800),
    ("ultrabold", 800),
    ("bold", 700),
    ("black", 900),
    ("heavy", 900),
)


def _normalize_style(style_name: str) -> str:
    """Lower-case and drop separators so "Semi Bold" matches "semibold"."""
    return re.sub(r"[\s\-_]+", "", style_name.lower())


def weight_from_style(style_name: str | None) -> int:
    """
    Map a style label such as "SemiBold Italic" to a numeric weight.

    Unrecognised labels (including "Regular") map to 400.
    """
    if not style_name:
        return 400
    normalized = _normalize_style(style_name)
    for keyword, weight in WEIGHT_KEYWORDS:
        if keyword in normalized:
            return weight
    return 400

