"""Text node analysis: turn host text nodes into calculator inputs."""

import logging
from collections.abc import Iterable

from ..core.config import PluginSettings
from ..core.models import TextItem, TypographyInput
from ..engine.background import is_dark_background
from ..fonts.utils import weight_from_style
from .document import DocumentNode

logger = logging.getLogger(__name__)

__all__ = ["analyze_text_node", "collect_text_nodes", "resolve_dark_background", "weight_from_style"]


def collect_text_nodes(nodes: Iterable[DocumentNode]) -> list[DocumentNode]:
    """Depth-first collection of every TEXT node under ``nodes``."""
    return [node for root in nodes for node in root.walk() if node.is_text]


def resolve_dark_background(node: DocumentNode, settings: PluginSettings) -> bool:
    if settings.bg_mode == "dark":
        return True
    if settings.bg_mode == "light":
        return False
    return is_dark_background(node)


def analyze_text_node(node: DocumentNode, settings: PluginSettings) -> TextItem | None:
    """
    Build a :class:`TextItem` from a text node.

    Returns:
        The text item, or None when the node mixes fonts or sizes
    """
    if node.has_mixed_font:
        logger.debug(f"Skipping text node {node.id} with mixed font properties")
        return None

    typography = TypographyInput(
        font_family=node.font_family,
        font_size=node.font_size,
        font_weight=weight_from_style(node.font_style),
        font_style=node.font_style,
        is_uppercase=node.is_uppercase,
        is_dark_bg=resolve_dark_background(node, settings),
    )
    return TextItem(
        item_id=node.id,
        typography=typography,
        current_line_height=node.line_height,
        current_letter_spacing=node.letter_spacing,
    )
