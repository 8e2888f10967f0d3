"""Host integration: document model, text analysis and the tuning pipeline."""

from .analysis import analyze_text_node, collect_text_nodes, resolve_dark_background
from .document import Document, DocumentNode, TextStyle
from .pipeline import (
    ConsoleProgressCallback,
    ItemFailure,
    StyleChange,
    TuningProgressCallback,
    TuningResult,
    TypographyTuner,
)

__all__ = [
    "ConsoleProgressCallback",
    "Document",
    "DocumentNode",
    "ItemFailure",
    "StyleChange",
    "TextStyle",
    "TuningProgressCallback",
    "TuningResult",
    "TypographyTuner",
    "analyze_text_node",
    "collect_text_nodes",
    "resolve_dark_background",
]
