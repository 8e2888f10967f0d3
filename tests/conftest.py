"""
Pytest configuration and fixtures for TypeTune tests.
"""

import json
from pathlib import Path

import pytest

from src.typetune.core.config import PluginSettings
from src.typetune.core.models import (
    LetterSpacing,
    LetterSpacingUnit,
    LineHeight,
    LineHeightUnit,
    TextItem,
    TypographyInput,
)
from src.typetune.host.document import Document, DocumentNode


@pytest.fixture
def body_input():
    """Inter 16px Regular on a light background."""
    return TypographyInput(font_family="Inter", font_size=16, font_weight=400, font_style="Regular")


@pytest.fixture
def settings():
    """Default plugin settings."""
    return PluginSettings()


@pytest.fixture
def make_text_item():
    """Factory for text items with explicit current spacing."""

    def _make(
        item_id,
        family="Inter",
        size=16,
        weight=400,
        line_height=None,
        letter_spacing=0.0,
        uppercase=False,
        dark=False,
    ):
        return TextItem(
            item_id=item_id,
            typography=TypographyInput(
                font_family=family,
                font_size=size,
                font_weight=weight,
                is_uppercase=uppercase,
                is_dark_bg=dark,
            ),
            current_line_height=(
                LineHeight(value=line_height, unit=LineHeightUnit.PIXELS)
                if line_height is not None
                else LineHeight()
            ),
            current_letter_spacing=LetterSpacing(
                value=letter_spacing, unit=LetterSpacingUnit.PIXELS
            ),
        )

    return _make


@pytest.fixture
def make_frame():
    """Factory for a frame with one solid fill and a text child."""

    def _make(r, g, b, fills=None):
        frame = DocumentNode(
            id="frame",
            type="FRAME",
            fills=fills
            if fills is not None
            else [{"type": "SOLID", "color": {"r": r, "g": g, "b": b}}],
        )
        text = frame.add_child(
            DocumentNode(id="text", type="TEXT", font_family="Inter", font_size=16)
        )
        return frame, text

    return _make


@pytest.fixture
def sample_document_data():
    """
    Landing page document.

    - ``title``: Inter Bold 64 on a dark hero frame, auto line-height
    - ``body-1``/``body-2``: Inter 16 already at 24px / -0.08px
    - ``caption``: SF Pro Text 12 uppercase, auto line-height
    - ``mixed``: mixed font family, skipped
    - ``styled``: Inter 18 bound to the ``Body/Large`` style
    """
    return {
        "name": "Landing",
        "selection": [],
        "styles": [
            {
                "id": "S:body-large",
                "name": "Body/Large",
                "font_family": "Inter",
                "font_style": "Regular",
                "font_size": 18,
                "line_height": {"value": 100, "unit": "PERCENT"},
                "letter_spacing": {"value": 0, "unit": "PIXELS"},
            }
        ],
        "children": [
            {
                "id": "hero",
                "type": "FRAME",
                "name": "Hero",
                "fills": [{"type": "SOLID", "color": {"r": 0.05, "g": 0.05, "b": 0.1}}],
                "children": [
                    {
                        "id": "title",
                        "type": "TEXT",
                        "name": "Title",
                        "characters": "Tune your type",
                        "font_family": "Inter",
                        "font_style": "Bold",
                        "font_size": 64,
                        "line_height": {"unit": "AUTO"},
                        "letter_spacing": {"value": 0, "unit": "PIXELS"},
                    }
                ],
            },
            {
                "id": "content",
                "type": "FRAME",
                "name": "Content",
                "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1}}],
                "children": [
                    {
                        "id": "body-1",
                        "type": "TEXT",
                        "font_family": "Inter",
                        "font_style": "Regular",
                        "font_size": 16,
                        "line_height": {"value": 150, "unit": "PERCENT"},
                        "letter_spacing": {"value": -0.08, "unit": "PIXELS"},
                    },
                    {
                        "id": "body-2",
                        "type": "TEXT",
                        "font_family": "Inter",
                        "font_style": "Regular",
                        "font_size": 16,
                        "line_height": {"value": 24, "unit": "PIXELS"},
                        "letter_spacing": {"value": 0, "unit": "PIXELS"},
                    },
                    {
                        "id": "caption",
                        "type": "TEXT",
                        "font_family": "SF Pro Text",
                        "font_style": "Regular",
                        "font_size": 12,
                        "text_case": "UPPER",
                        "line_height": {"unit": "AUTO"},
                    },
                    {
                        "id": "mixed",
                        "type": "TEXT",
                        "font_family": None,
                        "font_style": "Regular",
                        "font_size": 14,
                    },
                    {
                        "id": "styled",
                        "type": "TEXT",
                        "font_family": "Inter",
                        "font_style": "Regular",
                        "font_size": 18,
                        "text_style_id": "S:body-large",
                        "line_height": {"value": 100, "unit": "PERCENT"},
                        "letter_spacing": {"value": 0, "unit": "PIXELS"},
                    },
                ],
            },
        ],
    }


@pytest.fixture
def sample_document(sample_document_data):
    """Sample document built from the fixture data."""
    return Document.from_dict(sample_document_data)


@pytest.fixture
def document_path(tmp_path, sample_document_data):
    """Sample document written to a JSON file."""
    path = Path(tmp_path) / "landing.json"
    with path.open("w") as f:
        json.dump(sample_document_data, f)
    return path


@pytest.fixture
def settings_path(tmp_path):
    """Settings file location inside the test's temp directory."""
    return Path(tmp_path) / "settings" / "settings.yaml"
