"""
Tuning Pipeline
===============

Scans a document for text, groups it into unique typographic configurations
and writes calculated spacing back to the nodes (or their shared styles).
A failure on one node is recorded and the pass continues.
"""

import logging
import time

from pydantic import BaseModel, Field

from ..core.config import PluginSettings
from ..core.exceptions import HostError, MixedTextPropertiesError, NotATextNodeError
from ..core.models import (
    DeduplicatedGroup,
    ExportFormat,
    GroupingReport,
    LetterSpacing,
    LetterSpacingUnit,
    LineHeight,
    LineHeightUnit,
    TextItem,
)
from ..engine.calculator import calculate
from ..engine.exporter import export_code
from ..engine.grouping import build_groups
from ..fonts.database import FontDatabase
from .analysis import analyze_text_node, collect_text_nodes
from .document import Document, DocumentNode, TextStyle

logger = logging.getLogger(__name__)


class ItemFailure(BaseModel):
    """A text node that could not be updated."""

    item_id: str
    error: str


class StyleChange(BaseModel):
    """Changelog entry for one shared text style."""

    style_id: str
    style_name: str
    line_height_before: str
    line_height_after: str
    letter_spacing_before: str
    letter_spacing_after: str

    def describe(self) -> str:
        return (
            f"{self.style_name}: line-height {self.line_height_before} -> "
            f"{self.line_height_after}, letter-spacing {self.letter_spacing_before} -> "
            f"{self.letter_spacing_after}"
        )


class TuningResult(BaseModel):
    """Outcome of one apply pass."""

    total_items: int = Field(0, ge=0)
    applied: int = Field(0, ge=0)
    already_good: int = Field(0, ge=0)
    applied_ids: list[str] = Field(default_factory=list)
    failures: list[ItemFailure] = Field(default_factory=list)
    style_changes: list[StyleChange] = Field(default_factory=list)
    processing_time_ms: float = Field(0.0, ge=0.0)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def summary(self) -> str:
        text = f"{self.already_good} already well-tuned, {self.applied} fixed"
        if self.failures:
            text += f", {self.failed} failed"
        return text


class TuningProgressCallback:
    """Base class for tuning progress callbacks."""

    def on_start(self, total_groups: int) -> None:
        """Called when an apply pass starts."""

    def on_group_start(self, group: DeduplicatedGroup, group_index: int) -> None:
        """Called before the members of a group are updated."""

    def on_item_complete(self, item_id: str, success: bool) -> None:
        """Called after each text node has been processed."""

    def on_error(self, item_id: str, error: Exception) -> None:
        """Called when a text node could not be updated."""

    def on_complete(self, result: TuningResult) -> None:
        """Called when the apply pass completes."""


class ConsoleProgressCallback(TuningProgressCallback):
    """Console progress output for apply passes."""

    def on_start(self, total_groups: int) -> None:
        print(f"Tuning {total_groups} text configurations...")

    def on_group_start(self, group: DeduplicatedGroup, group_index: int) -> None:
        status = "ok" if group.already_good else "fix"
        print(
            f"[{status}] {group.result.font_info} x{group.count}: "
            f"{group.result.line_height_percent:g}% / {group.result.letter_spacing:g}px"
        )

    def on_error(self, item_id: str, error: Exception) -> None:
        print(f"✗ Error updating {item_id}: {error}")

    def on_complete(self, result: TuningResult) -> None:
        print(f"\nDone: {result.summary}")
        for change in result.style_changes:
            print(f"  style {change.describe()}")


class TypographyTuner:
    """
    Applies calculated typography to the text of a document.

    Targets the given nodes, else the current selection, else the whole page.
    """

    def __init__(
        self,
        document: Document,
        settings: PluginSettings | None = None,
        callback: TuningProgressCallback | None = None,
        database: FontDatabase | None = None,
    ):
        self.document = document
        self.settings = settings or PluginSettings()
        self.callback = callback or TuningProgressCallback()
        self.database = database

    def _target_nodes(self, nodes: list[DocumentNode] | None) -> list[DocumentNode]:
        if nodes is not None:
            return nodes
        selected = self.document.selected_nodes()
        if selected:
            return selected
        return self.document.page_nodes

    def _collect_items(self, nodes: list[DocumentNode] | None) -> list[TextItem]:
        items = []
        for node in collect_text_nodes(self._target_nodes(nodes)):
            item = analyze_text_node(node, self.settings)
            if item is not None:
                items.append(item)
        return items

    def _group(self, items: list[TextItem]) -> GroupingReport:
        return build_groups(
            items,
            self.settings.context_override,
            self.settings.grid_step,
            self.database,
        )

    def scan(self, nodes: list[DocumentNode] | None = None) -> GroupingReport:
        """Analyse text under ``nodes`` and group it without changing anything."""
        return self._group(self._collect_items(nodes))

    def apply(self, nodes: list[DocumentNode] | None = None) -> TuningResult:
        """
        Write calculated spacing to every text node whose group needs change.

        Returns:
            Tuning result with counts, failures and the style changelog
        """
        start_time = time.time()

        # Snapshot before values ahead of any mutation
        items = self._collect_items(nodes)
        styles_before = {
            style_id: (style.line_height, style.letter_spacing)
            for style_id, style in self.document.styles.items()
        }

        report = self._group(items)
        result = TuningResult(total_items=report.total_items, already_good=report.already_good_count)
        updated_styles: set[str] = set()

        self.callback.on_start(len(report.groups))
        for index, group in enumerate(report.groups):
            self.callback.on_group_start(group, index)
            if group.already_good:
                continue

            line_height = LineHeight(
                value=group.result.line_height_percent, unit=LineHeightUnit.PERCENT
            )
            letter_spacing = LetterSpacing(
                value=group.result.letter_spacing, unit=LetterSpacingUnit.PIXELS
            )

            for item_id in group.item_ids:
                try:
                    node = self.document.get_node(item_id)
                    style = self.document.get_style(node) if self.settings.update_styles else None
                    if style is not None:
                        if style.id not in updated_styles:
                            self._update_style(style, line_height, letter_spacing)
                            updated_styles.add(style.id)
                            result.style_changes.append(
                                self._style_change(style, styles_before[style.id])
                            )
                    else:
                        self.document.load_font(node.font_family, node.font_style)
                        self.document.set_text_spacing(node, line_height, letter_spacing)
                except HostError as e:
                    logger.warning(f"Failed to update text node {item_id}: {e}")
                    result.failures.append(ItemFailure(item_id=item_id, error=str(e)))
                    self.callback.on_error(item_id, e)
                    self.callback.on_item_complete(item_id, False)
                    continue

                result.applied += 1
                result.applied_ids.append(item_id)
                self.callback.on_item_complete(item_id, True)

        result.processing_time_ms = (time.time() - start_time) * 1000
        logger.info(f"Tuning pass complete: {result.summary}")
        self.callback.on_complete(result)
        return result

    def _update_style(
        self, style: TextStyle, line_height: LineHeight, letter_spacing: LetterSpacing
    ) -> None:
        self.document.load_font(style.font_family, style.font_style)
        self.document.set_style_spacing(style, line_height, letter_spacing)

    @staticmethod
    def _style_change(
        style: TextStyle, before: tuple[LineHeight, LetterSpacing]
    ) -> StyleChange:
        line_height_before, letter_spacing_before = before
        return StyleChange(
            style_id=style.id,
            style_name=style.name,
            line_height_before=line_height_before.describe(),
            line_height_after=style.line_height.describe(),
            letter_spacing_before=letter_spacing_before.describe(),
            letter_spacing_after=style.letter_spacing.describe(),
        )

    def export(self, node_id: str, format: ExportFormat = "css") -> str:
        """Calculate typography for one text node and render it as code."""
        node = self.document.get_node(node_id)
        if not node.is_text:
            raise NotATextNodeError(node_id, node.type)
        item = analyze_text_node(node, self.settings)
        if item is None:
            raise MixedTextPropertiesError(node_id)

        result = calculate(
            item.typography,
            self.settings.context_override,
            self.settings.grid_step,
            self.database,
        )
        return export_code(result, item.typography.font_size, format)
