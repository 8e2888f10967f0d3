"""
Unit tests for the host document model and text analysis.
"""

import pytest

from src.typetune.core.config import PluginSettings
from src.typetune.core.exceptions import (
    DocumentLoadError,
    FontLoadError,
    NodeMutationError,
    NodeNotFoundError,
    UnknownStyleReferenceError,
)
from src.typetune.core.models import LetterSpacing, LineHeight, LineHeightUnit
from src.typetune.host.analysis import (
    analyze_text_node,
    collect_text_nodes,
    resolve_dark_background,
)
from src.typetune.host.document import Document


class TestDocument:
    """Test document parsing and serialization."""

    def test_tree_is_linked(self, sample_document):
        """Test parents are set while parsing."""
        title = sample_document.get_node("title")

        assert title.parent.id == "hero"
        assert title.parent.parent is sample_document.root
        assert title.is_text
        assert title.fills is None

    def test_text_properties(self, sample_document):
        """Test text node properties."""
        caption = sample_document.get_node("caption")
        body = sample_document.get_node("body-1")

        assert caption.is_uppercase
        assert caption.line_height.unit == LineHeightUnit.AUTO
        assert body.line_height.to_pixels(16) == 24
        assert sample_document.get_node("mixed").has_mixed_font

    def test_round_trip(self, sample_document, sample_document_data):
        """Test to_dict produces data that parses back to the same tree."""
        data = sample_document.to_dict()
        again = Document.from_dict(data)

        assert [node.id for node in again.root.walk()] == [
            node.id for node in sample_document.root.walk()
        ]
        assert again.get_node("styled").text_style_id == "S:body-large"
        assert again.styles["S:body-large"].name == "Body/Large"

    def test_save_and_load(self, sample_document, tmp_path):
        """Test JSON files round-trip."""
        path = tmp_path / "out" / "doc.json"

        sample_document.save(path)
        loaded = Document.load(path)

        assert loaded.get_node("caption").font_family == "SF Pro Text"

    def test_load_invalid_json(self, tmp_path):
        """Test unreadable documents raise DocumentLoadError."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        with pytest.raises(DocumentLoadError):
            Document.load(path)

    def test_load_missing_file(self, tmp_path):
        """Test missing files raise DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            Document.load(tmp_path / "missing.json")

    def test_unsupported_fill_is_kept(self, sample_document_data):
        """Test fills without a paint model load and save unchanged."""
        pattern = {"type": "PATTERN", "source_node_id": "tile"}
        sample_document_data["children"][0]["fills"].insert(0, pattern)

        document = Document.from_dict(sample_document_data)
        hero = document.get_node("hero")

        assert hero.fills[0] == pattern
        assert document.to_dict()["children"][0]["fills"][0] == pattern
        assert resolve_dark_background(hero.children[0], PluginSettings()) is True

    def test_unknown_node(self, sample_document):
        """Test lookups of unknown ids."""
        with pytest.raises(NodeNotFoundError):
            sample_document.get_node("nope")

    def test_selection(self, sample_document):
        """Test selection resolves to nodes and skips stale ids."""
        sample_document.selection = ["content", "deleted"]

        assert [node.id for node in sample_document.selected_nodes()] == ["content"]

    def test_unknown_style_reference(self, sample_document):
        """Test dangling style references."""
        node = sample_document.get_node("body-1")
        node.text_style_id = "S:missing"

        with pytest.raises(UnknownStyleReferenceError):
            sample_document.get_style(node)


class TestHostOperations:
    """Test font loading and spacing mutation."""

    def test_unavailable_font(self, sample_document_data):
        """Test fonts marked unavailable cannot be loaded."""
        sample_document_data["unavailable_fonts"] = ["SF Pro Text"]
        document = Document.from_dict(sample_document_data)

        with pytest.raises(FontLoadError):
            document.load_font("SF Pro Text", "Regular")

    def test_mutation_requires_loaded_font(self, sample_document):
        """Test text cannot change before its font is loaded."""
        node = sample_document.get_node("body-1")

        with pytest.raises(NodeMutationError):
            sample_document.set_text_spacing(node, LineHeight(), LetterSpacing())

        sample_document.load_font("Inter", "Regular")
        sample_document.set_text_spacing(node, LineHeight(), LetterSpacing(value=1))
        assert node.letter_spacing.value == 1

    def test_style_update_reaches_bound_nodes(self, sample_document):
        """Test style changes propagate to nodes using the style."""
        style = sample_document.styles["S:body-large"]
        line_height = LineHeight(value=155.6, unit=LineHeightUnit.PERCENT)

        sample_document.load_font("Inter", "Regular")
        sample_document.set_style_spacing(style, line_height, LetterSpacing(value=-0.09))

        assert style.line_height == line_height
        assert sample_document.get_node("styled").line_height == line_height
        assert sample_document.get_node("body-1").line_height.unit == LineHeightUnit.PERCENT
        assert sample_document.get_node("body-1").line_height.value == 150


class TestAnalysis:
    """Test text node analysis."""

    def test_collect_text_nodes(self, sample_document):
        """Test depth-first collection."""
        nodes = collect_text_nodes(sample_document.page_nodes)

        assert [node.id for node in nodes] == [
            "title",
            "body-1",
            "body-2",
            "caption",
            "mixed",
            "styled",
        ]

    def test_analyze_text_node(self, sample_document, settings):
        """Test a text item is built from node properties."""
        item = analyze_text_node(sample_document.get_node("title"), settings)

        assert item.item_id == "title"
        assert item.typography.font_family == "Inter"
        assert item.typography.font_weight == 700
        assert item.typography.is_dark_bg is True
        assert item.current_line_height.unit == LineHeightUnit.AUTO

    def test_uppercase_from_text_case(self, sample_document, settings):
        """Test UPPER text case marks the item as uppercase."""
        item = analyze_text_node(sample_document.get_node("caption"), settings)

        assert item.typography.is_uppercase is True
        assert item.typography.is_dark_bg is False

    def test_mixed_node_is_skipped(self, sample_document, settings):
        """Test mixed font properties give no item."""
        assert analyze_text_node(sample_document.get_node("mixed"), settings) is None

    @pytest.mark.parametrize("bg_mode, expected", [("dark", True), ("light", False)])
    def test_bg_mode_override(self, sample_document, bg_mode, expected):
        """Test forced background modes ignore the fills."""
        settings = PluginSettings(bg_mode=bg_mode)

        assert resolve_dark_background(sample_document.get_node("title"), settings) is expected
        assert resolve_dark_background(sample_document.get_node("caption"), settings) is expected
