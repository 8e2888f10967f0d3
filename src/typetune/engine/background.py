"""
Background Analyzer
===================

Estimates whether text sits on a dark background by inspecting the fills of
its visual ancestors. Image fills cannot be sampled, so they count as a
neutral 0.5 luminance.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from ..core.models import GRADIENT_FILL_TYPES, FillType, Paint, RGBColor

logger = logging.getLogger(__name__)

DARK_LUMINANCE_THRESHOLD = 0.5
IMAGE_FILL_LUMINANCE = 0.5


class SceneNode(Protocol):
    """
    Minimal node capability the analyzer needs.

    ``fills`` is optional on real nodes; it is read with ``getattr`` so nodes
    without geometry (groups, pages) simply have no fills.
    """

    @property
    def parent(self) -> "SceneNode | None": ...


def relative_luminance(r: float, g: float, b: float) -> float:
    """Perceptual luminance of an RGB color with channels in [0, 1]."""
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def _color_luminance(color: RGBColor) -> float:
    return relative_luminance(color.r, color.g, color.b)


def _as_paint(fill: Paint | Mapping[str, Any]) -> Paint | None:
    """Parse a raw fill; paint kinds the analyzer does not know give None."""
    if isinstance(fill, Paint):
        return fill
    try:
        return Paint.model_validate(fill)
    except PydanticValidationError:
        logger.debug(f"Skipping unsupported fill: {fill!r}")
        return None


def average_fill_luminance(fills: Iterable[Paint | Mapping[str, Any]]) -> float | None:
    """
    Average luminance over visible fills.

    Returns:
        Mean luminance, or None when no fill contributed
    """
    total = 0.0
    count = 0

    for raw_fill in fills:
        fill = _as_paint(raw_fill)
        if fill is None or not fill.visible:
            continue

        if fill.type == FillType.SOLID:
            if fill.color is None:
                continue
            total += _color_luminance(fill.color)
            count += 1
        elif fill.type in GRADIENT_FILL_TYPES:
            stops = fill.gradient_stops
            if stops:
                total += sum(_color_luminance(stop.color) for stop in stops) / len(stops)
                count += 1
        elif fill.type == FillType.IMAGE:
            total += IMAGE_FILL_LUMINANCE
            count += 1

    if count == 0:
        return None
    return total / count


def _node_fills(node: Any) -> Sequence[Paint | Mapping[str, Any]] | None:
    fills = getattr(node, "fills", None)
    if isinstance(fills, Sequence) and not isinstance(fills, str):
        return fills
    return None


def is_dark_background(node: SceneNode) -> bool:
    """
    Walk the ancestors of ``node`` and decide whether its background is dark.

    The first ancestor with fills that yield a luminance decides. When no
    ancestor does, the background is assumed to be light.
    """
    current = node.parent
    while current is not None:
        fills = _node_fills(current)
        if fills:
            luminance = average_fill_luminance(fills)
            if luminance is not None:
                logger.debug(
                    f"Background luminance {luminance:.3f} from "
                    f"{getattr(current, 'id', type(current).__name__)}"
                )
                return luminance < DARK_LUMINANCE_THRESHOLD
        current = current.parent

    return False
