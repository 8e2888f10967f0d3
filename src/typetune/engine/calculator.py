"""
Typography Calculator
=====================

Combines a font profile, the text context, weight interpolation and the
background signal into a line-height and letter-spacing recommendation.
Everything here is closed-form arithmetic over immutable inputs.
"""

import logging
from bisect import bisect_left

from ..core.models import (
    ContextOverride,
    FontProfile,
    TextContext,
    TypographyInput,
    TypographyResult,
)
from ..fonts.database import FontDatabase, get_database, guess_category
from ..utils.numbers import format_number, round_half_up
from .context import DISPLAY_MIN_SIZE, detect_context
from .grid import adaptive_grid_step, snap_to_grid

logger = logging.getLogger(__name__)

# Display line-height multiplier runs from 0.93 at 32px down to 0.79 at 128px
DISPLAY_MAX_MULTIPLIER = 0.93
DISPLAY_MIN_MULTIPLIER = 0.79
DISPLAY_FLOOR_SIZE = 128
CAPTION_MULTIPLIER = 1.1

DARK_BG_LINE_HEIGHT_FACTOR = 1.015
DARK_BG_TRACKING_DELTA = 0.015

# Slopes used when a profile has no usable weight table
FALLBACK_LINE_HEIGHT_SLOPE = -0.03
FALLBACK_TRACKING_SLOPE = -0.008


def context_multiplier(context: TextContext, font_size: float) -> float:
    """
    Line-height multiplier for a context; regressive for display sizes.

    Forced display text below 32px keeps extrapolating past 0.93; only sizes
    beyond 128px are clamped.
    """
    if context == "display":
        if font_size >= DISPLAY_FLOOR_SIZE:
            return DISPLAY_MIN_MULTIPLIER
        t = (font_size - DISPLAY_MIN_SIZE) / (DISPLAY_FLOOR_SIZE - DISPLAY_MIN_SIZE)
        return DISPLAY_MAX_MULTIPLIER - t * (DISPLAY_MAX_MULTIPLIER - DISPLAY_MIN_MULTIPLIER)
    if context == "caption":
        return CAPTION_MULTIPLIER
    return 1.0


def size_scale(font_size: float) -> float:
    """Tracking delta by size: looser for tiny text, tighter for large text."""
    if font_size <= 12:
        return 0.008
    if font_size <= 24:
        return 0.0
    if font_size <= 48:
        t = (font_size - 24) / 24
        return -0.01 * t
    t = min((font_size - 48) / 48, 1)
    return -0.01 - 0.02 * t


def weight_adjustment(profile: FontProfile, weight: float) -> tuple[float, float]:
    """
    Interpolate line-height and tracking deltas for a font weight.

    Uses the two table entries bracketing ``weight`` and clamps to the edge
    entries outside the table. Profiles with fewer than two entries have
    nothing to interpolate between, so a fixed linear slope around 400 is used.

    Returns:
        Tuple of (line_height_adjust, tracking_adjust)
    """
    table = profile.sorted_weights
    if len(table) <= 1:
        delta = (weight - 400) / 400
        return FALLBACK_LINE_HEIGHT_SLOPE * delta, FALLBACK_TRACKING_SLOPE * delta

    weights = [entry_weight for entry_weight, _ in table]
    if weight <= weights[0]:
        edge = table[0][1]
        return edge.line_height_adjust, edge.tracking_adjust
    if weight >= weights[-1]:
        edge = table[-1][1]
        return edge.line_height_adjust, edge.tracking_adjust

    index = bisect_left(weights, weight)
    upper_weight, upper = table[index]
    if upper_weight == weight:
        return upper.line_height_adjust, upper.tracking_adjust

    lower_weight, lower = table[index - 1]
    t = (weight - lower_weight) / (upper_weight - lower_weight)
    return (
        lower.line_height_adjust + t * (upper.line_height_adjust - lower.line_height_adjust),
        lower.tracking_adjust + t * (upper.tracking_adjust - lower.tracking_adjust),
    )


def describe_font(typography: TypographyInput) -> str:
    label = typography.font_style or f"w{typography.font_weight}"
    return f"{typography.font_family} · {format_number(typography.font_size)}px · {label}"


def calculate(
    typography: TypographyInput,
    context_override: ContextOverride = "auto",
    grid_step: float = 4,
    database: FontDatabase | None = None,
) -> TypographyResult:
    """
    Calculate line-height and letter-spacing for one text configuration.

    Args:
        typography: Font family, size, weight, style, case and background
        context_override: Force a context instead of detecting it from size
        grid_step: Pixel quantum line-heights snap to
        database: Profile database; defaults to the bundled table

    Returns:
        Calculated typography result
    """
    if database is None:
        database = get_database()
    font_size = typography.font_size

    # A non-empty style is the only text checked, even when it carries no hint
    category = guess_category(typography.font_style or typography.font_family)
    profile, is_approximate = database.get_profile_or_fallback(typography.font_family, category)

    context = detect_context(font_size) if context_override == "auto" else context_override
    line_height_adjust, tracking_adjust = weight_adjustment(profile, typography.font_weight)

    # Line height
    background_factor = DARK_BG_LINE_HEIGHT_FACTOR if typography.is_dark_bg else 1.0
    line_height_raw = (
        font_size
        * profile.base_line_height_ratio
        * context_multiplier(context, font_size)
        * (1 + line_height_adjust)
        * background_factor
    )
    line_height = snap_to_grid(line_height_raw, adaptive_grid_step(font_size, grid_step))
    line_height_percent = round_half_up(line_height / font_size * 1000) / 10

    # Letter spacing
    tracking_ratio = (
        profile.base_tracking_ratio
        + size_scale(font_size)
        + (profile.display_tightening if context == "display" else 0.0)
        + tracking_adjust
        + (profile.uppercase_boost if typography.is_uppercase else 0.0)
        + (DARK_BG_TRACKING_DELTA if typography.is_dark_bg else 0.0)
    )

    result = TypographyResult(
        line_height=line_height,
        line_height_raw=round_half_up(line_height_raw, 2),
        line_height_percent=line_height_percent,
        letter_spacing=round_half_up(font_size * tracking_ratio, 2),
        letter_spacing_em=round_half_up(tracking_ratio, 4),
        letter_spacing_percent=round_half_up(tracking_ratio * 1000) / 10,
        font_info=describe_font(typography),
        is_approximate=is_approximate,
    )

    logger.debug(
        f"{result.font_info} [{context}, {profile.family}]: "
        f"line-height {result.line_height}px ({result.line_height_percent}%), "
        f"letter-spacing {result.letter_spacing}px"
    )
    return result
