"""Grid snapping for line-height values."""

from ..utils.numbers import round_half_up

# Text at or below this size snaps to half the configured grid step
SMALL_TEXT_MAX_SIZE = 16


def snap_to_grid(value: float, grid_step: float) -> float:
    """Quantize ``value`` to the nearest multiple of ``grid_step`` (ties round up)."""
    if grid_step <= 1:
        return round_half_up(value)
    return round_half_up(value / grid_step) * grid_step


def adaptive_grid_step(font_size: float, grid_step: float) -> float:
    """Halve the grid step for small text so it keeps visible granularity."""
    if font_size <= SMALL_TEXT_MAX_SIZE:
        return grid_step / 2
    return grid_step
