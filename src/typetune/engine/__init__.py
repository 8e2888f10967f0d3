"""Typography calculation engine."""

from .background import average_fill_luminance, is_dark_background, relative_luminance
from .calculator import calculate, context_multiplier, size_scale, weight_adjustment
from .context import detect_context
from .exporter import EXPORT_FORMATS, export_code
from .grid import adaptive_grid_step, snap_to_grid
from .grouping import build_groups, dedup_key, is_within_tolerance

__all__ = [
    "EXPORT_FORMATS",
    "adaptive_grid_step",
    "average_fill_luminance",
    "build_groups",
    "calculate",
    "context_multiplier",
    "dedup_key",
    "detect_context",
    "export_code",
    "is_dark_background",
    "is_within_tolerance",
    "relative_luminance",
    "size_scale",
    "snap_to_grid",
    "weight_adjustment",
]
