"""Static font profile data.

Each profile stores the baseline ratios for one family. Ratios are unitless:
``base_line_height_ratio`` multiplies the font size, the tracking values are
fractions of the font size (so ``-0.01`` means ``-0.01em``).

Weight tables are ``{weight: (line_height_adjust, tracking_adjust)}``. Any table
with entries must contain ``400: (0.0, 0.0)``, the interpolation baseline.
Families with a single weight only carry the baseline entry and fall through to
linear weight extrapolation.
"""

from typing import Any

# Full 100-900 range, typical for variable sans families
_STANDARD_CURVE: dict[int, tuple[float, float]] = {
    100: (0.02, 0.006),
    200: (0.015, 0.004),
    300: (0.008, 0.002),
    400: (0.0, 0.0),
    500: (-0.004, -0.001),
    600: (-0.01, -0.003),
    700: (-0.015, -0.005),
    800: (-0.02, -0.007),
    900: (-0.025, -0.009),
}

# Families shipping 300-800 only
_COMPACT_CURVE: dict[int, tuple[float, float]] = {
    300: (0.01, 0.002),
    400: (0.0, 0.0),
    500: (-0.005, -0.002),
    600: (-0.01, -0.004),
    700: (-0.015, -0.006),
    800: (-0.02, -0.008),
}

_SERIF_CURVE: dict[int, tuple[float, float]] = {
    300: (0.01, 0.003),
    400: (0.0, 0.0),
    700: (-0.01, -0.004),
    900: (-0.02, -0.006),
}

_REGULAR_BOLD: dict[int, tuple[float, float]] = {
    400: (0.0, 0.0),
    700: (-0.012, -0.004),
}

_MONO_CURVE: dict[int, tuple[float, float]] = {
    100: (0.01, 0.002),
    300: (0.005, 0.001),
    400: (0.0, 0.0),
    500: (-0.003, 0.0),
    700: (-0.01, -0.002),
    800: (-0.015, -0.003),
}

_DISPLAY_CURVE: dict[int, tuple[float, float]] = {
    400: (0.0, 0.0),
    600: (-0.01, -0.004),
    700: (-0.015, -0.006),
    900: (-0.025, -0.01),
}

_SINGLE_WEIGHT: dict[int, tuple[float, float]] = {
    400: (0.0, 0.0),
}

# family, category, line-height ratio, tracking, display tightening, uppercase boost, weights
_ROWS: list[tuple[str, str, float, float, float, float, dict[int, tuple[float, float]]]] = [
    # Sans-serif
    ("Inter", "sans-serif", 1.5, -0.005, -0.01, 0.05, _STANDARD_CURVE),
    ("SF Pro", "sans-serif", 1.25, -0.003, -0.012, 0.04, _STANDARD_CURVE),
    ("Roboto", "sans-serif", 1.45, 0.0, -0.01, 0.05, _STANDARD_CURVE),
    ("Helvetica Neue", "sans-serif", 1.4, 0.0, -0.012, 0.05, _STANDARD_CURVE),
    ("Helvetica", "sans-serif", 1.4, 0.0, -0.012, 0.05, _REGULAR_BOLD),
    ("Arial", "sans-serif", 1.4, 0.0, -0.01, 0.05, _REGULAR_BOLD),
    ("Open Sans", "sans-serif", 1.5, 0.0, -0.01, 0.05, _COMPACT_CURVE),
    ("Lato", "sans-serif", 1.5, 0.002, -0.01, 0.05, _STANDARD_CURVE),
    ("Montserrat", "sans-serif", 1.45, 0.0, -0.015, 0.06, _STANDARD_CURVE),
    ("Poppins", "sans-serif", 1.5, 0.0, -0.015, 0.06, _STANDARD_CURVE),
    ("Source Sans 3", "sans-serif", 1.5, 0.003, -0.01, 0.05, _STANDARD_CURVE),
    ("Noto Sans", "sans-serif", 1.5, 0.0, -0.01, 0.05, _STANDARD_CURVE),
    ("IBM Plex Sans", "sans-serif", 1.45, 0.0, -0.01, 0.05, _COMPACT_CURVE),
    ("Nunito", "sans-serif", 1.5, 0.002, -0.01, 0.05, _STANDARD_CURVE),
    ("Work Sans", "sans-serif", 1.45, 0.0, -0.012, 0.05, _STANDARD_CURVE),
    ("DM Sans", "sans-serif", 1.45, -0.004, -0.012, 0.05, _COMPACT_CURVE),
    ("Manrope", "sans-serif", 1.45, -0.004, -0.012, 0.05, _COMPACT_CURVE),
    ("Plus Jakarta Sans", "sans-serif", 1.45, -0.003, -0.012, 0.05, _COMPACT_CURVE),
    ("Figtree", "sans-serif", 1.45, -0.002, -0.01, 0.05, _COMPACT_CURVE),
    ("Geist", "sans-serif", 1.45, -0.006, -0.014, 0.05, _STANDARD_CURVE),
    ("Rubik", "sans-serif", 1.4, 0.0, -0.01, 0.05, _COMPACT_CURVE),
    ("Raleway", "sans-serif", 1.5, 0.004, -0.012, 0.06, _STANDARD_CURVE),
    ("Segoe UI", "sans-serif", 1.35, 0.0, -0.01, 0.04, _REGULAR_BOLD),
    ("Avenir Next", "sans-serif", 1.45, 0.0, -0.01, 0.05, _COMPACT_CURVE),
    # Serif
    ("Merriweather", "serif", 1.6, 0.003, -0.008, 0.04, _SERIF_CURVE),
    ("Georgia", "serif", 1.55, 0.002, -0.008, 0.04, _REGULAR_BOLD),
    ("Lora", "serif", 1.55, 0.0, -0.008, 0.04, _REGULAR_BOLD),
    ("PT Serif", "serif", 1.55, 0.0, -0.008, 0.04, _REGULAR_BOLD),
    ("Source Serif 4", "serif", 1.55, 0.0, -0.01, 0.04, _SERIF_CURVE),
    ("Libre Baskerville", "serif", 1.6, 0.002, -0.008, 0.04, _REGULAR_BOLD),
    ("EB Garamond", "serif", 1.5, 0.004, -0.006, 0.05, _REGULAR_BOLD),
    ("Times New Roman", "serif", 1.45, 0.002, -0.006, 0.04, _REGULAR_BOLD),
    # Display
    ("Playfair Display", "display", 1.3, 0.0, -0.015, 0.05, _DISPLAY_CURVE),
    ("Bebas Neue", "display", 1.1, 0.01, -0.005, 0.0, _SINGLE_WEIGHT),
    # Monospace
    ("JetBrains Mono", "mono", 1.5, 0.0, 0.0, 0.02, _MONO_CURVE),
    ("Fira Code", "mono", 1.5, 0.0, 0.0, 0.02, _MONO_CURVE),
    ("SF Mono", "mono", 1.45, 0.0, 0.0, 0.02, _MONO_CURVE),
    ("Roboto Mono", "mono", 1.5, 0.0, 0.0, 0.02, _MONO_CURVE),
    ("Source Code Pro", "mono", 1.5, 0.0, 0.0, 0.02, _MONO_CURVE),
]


def _row_to_dict(
    row: tuple[str, str, float, float, float, float, dict[int, tuple[float, float]]],
) -> dict[str, Any]:
    family, category, line_height, tracking, tightening, boost, weights = row
    return {
        "family": family,
        "category": category,
        "base_line_height_ratio": line_height,
        "base_tracking_ratio": tracking,
        "display_tightening": tightening,
        "uppercase_boost": boost,
        "weights": {
            weight: {"line_height_adjust": lh, "tracking_adjust": tr}
            for weight, (lh, tr) in weights.items()
        },
    }


PROFILE_DATA: list[dict[str, Any]] = [_row_to_dict(row) for row in _ROWS]

# Lower-cased alias -> canonical family
ALIASES: dict[str, str] = {
    "sf pro display": "SF Pro",
    "sf pro text": "SF Pro",
    "sf pro rounded": "SF Pro",
    "sf ui display": "SF Pro",
    "sf ui text": "SF Pro",
    "roboto flex": "Roboto",
    "noto sans jp": "Noto Sans",
    "noto sans kr": "Noto Sans",
    "noto sans sc": "Noto Sans",
    "noto sans tc": "Noto Sans",
    "ibm plex mono": "IBM Plex Sans",
    "inter variable": "Inter",
    "inter display": "Inter",
    "source sans pro": "Source Sans 3",
    "source serif pro": "Source Serif 4",
    "geist sans": "Geist",
    "segoe ui variable": "Segoe UI",
    "times": "Times New Roman",
    "avenir": "Avenir Next",
}

# Category-based profiles used when a family is unknown
FALLBACK_DATA: dict[str, dict[str, float]] = {
    "sans-serif": {
        "base_line_height_ratio": 1.45,
        "base_tracking_ratio": 0.0,
        "display_tightening": -0.01,
        "uppercase_boost": 0.05,
    },
    "serif": {
        "base_line_height_ratio": 1.55,
        "base_tracking_ratio": 0.0,
        "display_tightening": -0.008,
        "uppercase_boost": 0.04,
    },
    "mono": {
        "base_line_height_ratio": 1.5,
        "base_tracking_ratio": 0.0,
        "display_tightening": 0.0,
        "uppercase_boost": 0.02,
    },
    "display": {
        "base_line_height_ratio": 1.25,
        "base_tracking_ratio": 0.0,
        "display_tightening": -0.015,
        "uppercase_boost": 0.05,
    },
}
