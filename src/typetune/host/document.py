"""
Host Document Model
===================

In-memory stand-in for a design document: a tree of nodes with fills, text
nodes with font and spacing properties, and shared text styles. Documents are
read from and written to JSON.
"""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import (
    DocumentLoadError,
    FontLoadError,
    NodeMutationError,
    NodeNotFoundError,
    UnknownStyleReferenceError,
)
from ..core.models import LetterSpacing, LineHeight, Paint

logger = logging.getLogger(__name__)

TEXT_NODE_TYPE = "TEXT"
UPPERCASE_TEXT_CASE = "UPPER"


def _parse_fill(raw: Any) -> Paint | dict[str, Any]:
    """Parse a fill, keeping paint kinds without a model (e.g. PATTERN) as raw data."""
    try:
        return Paint.model_validate(raw)
    except PydanticValidationError:
        if not isinstance(raw, dict):
            raise
        logger.debug(f"Keeping unsupported fill as-is: {raw.get('type')}")
        return dict(raw)


@dataclass
class TextStyle:
    """Shared text style that text nodes can be bound to."""

    id: str
    name: str
    font_family: str
    font_style: str = "Regular"
    font_size: float = 16.0
    text_case: str = "ORIGINAL"
    line_height: LineHeight = field(default_factory=LineHeight)
    letter_spacing: LetterSpacing = field(default_factory=LetterSpacing)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextStyle":
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            font_family=data["font_family"],
            font_style=data.get("font_style", "Regular"),
            font_size=float(data.get("font_size", 16.0)),
            text_case=data.get("text_case", "ORIGINAL"),
            line_height=LineHeight.model_validate(data.get("line_height", {})),
            letter_spacing=LetterSpacing.model_validate(data.get("letter_spacing", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "font_family": self.font_family,
            "font_style": self.font_style,
            "font_size": self.font_size,
            "text_case": self.text_case,
            "line_height": self.line_height.model_dump(mode="json"),
            "letter_spacing": self.letter_spacing.model_dump(mode="json"),
        }


@dataclass
class DocumentNode:
    """
    Node in the document tree.

    ``fills`` is None for nodes that cannot carry fills (groups, pages).
    For text nodes, a None ``font_family``, ``font_style`` or ``font_size``
    means the node mixes several values.
    """

    id: str
    type: str
    name: str = ""
    fills: list[Paint | dict[str, Any]] | None = None
    children: list["DocumentNode"] = field(default_factory=list)
    parent: "DocumentNode | None" = field(default=None, repr=False, compare=False)

    # Text properties
    characters: str = ""
    font_family: str | None = None
    font_style: str | None = "Regular"
    font_size: float | None = None
    text_case: str = "ORIGINAL"
    line_height: LineHeight = field(default_factory=LineHeight)
    letter_spacing: LetterSpacing = field(default_factory=LetterSpacing)
    text_style_id: str | None = None

    @property
    def is_text(self) -> bool:
        return self.type == TEXT_NODE_TYPE

    @property
    def is_uppercase(self) -> bool:
        return self.text_case == UPPERCASE_TEXT_CASE

    @property
    def has_mixed_font(self) -> bool:
        return self.font_family is None or self.font_style is None or self.font_size is None

    def add_child(self, child: "DocumentNode") -> "DocumentNode":
        child.parent = self
        self.children.append(child)
        return child

    def walk(self) -> Iterator["DocumentNode"]:
        """Depth-first iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DocumentNode":
        fills = data.get("fills")
        node = cls(
            id=str(data["id"]),
            type=data.get("type", "FRAME"),
            name=data.get("name", ""),
            fills=[_parse_fill(fill) for fill in fills] if fills is not None else None,
            characters=data.get("characters", ""),
            font_family=data.get("font_family"),
            font_style=data.get("font_style", "Regular"),
            font_size=data.get("font_size"),
            text_case=data.get("text_case", "ORIGINAL"),
            line_height=LineHeight.model_validate(data.get("line_height", {})),
            letter_spacing=LetterSpacing.model_validate(data.get("letter_spacing", {})),
            text_style_id=data.get("text_style_id"),
        )
        for child_data in data.get("children", []):
            node.add_child(cls.from_dict(child_data))
        return node

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type, "name": self.name}
        if self.fills is not None:
            data["fills"] = [
                fill.model_dump(mode="json") if isinstance(fill, Paint) else dict(fill)
                for fill in self.fills
            ]
        if self.is_text:
            data.update(
                {
                    "characters": self.characters,
                    "font_family": self.font_family,
                    "font_style": self.font_style,
                    "font_size": self.font_size,
                    "text_case": self.text_case,
                    "line_height": self.line_height.model_dump(mode="json"),
                    "letter_spacing": self.letter_spacing.model_dump(mode="json"),
                }
            )
            if self.text_style_id is not None:
                data["text_style_id"] = self.text_style_id
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


class Document:
    """A page of nodes plus shared text styles and the current selection."""

    def __init__(
        self,
        root: DocumentNode,
        styles: dict[str, TextStyle] | None = None,
        selection: list[str] | None = None,
        unavailable_fonts: set[str] | None = None,
    ):
        self.root = root
        self.styles = styles or {}
        self.selection = selection or []
        self.unavailable_fonts = {family.lower() for family in unavailable_fonts or set()}
        self.loaded_fonts: set[tuple[str, str]] = set()
        self._index = {node.id: node for node in root.walk()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Document":
        root = DocumentNode.from_dict(
            {
                "id": data.get("id", "page"),
                "type": "PAGE",
                "name": data.get("name", "Page"),
                "children": data.get("children", []),
            }
        )
        styles = {style["id"]: TextStyle.from_dict(style) for style in data.get("styles", [])}
        return cls(
            root,
            styles=styles,
            selection=list(data.get("selection", [])),
            unavailable_fonts=set(data.get("unavailable_fonts", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.root.id,
            "name": self.root.name,
            "selection": list(self.selection),
            "styles": [style.to_dict() for style in self.styles.values()],
            "children": [child.to_dict() for child in self.root.children],
        }
        if self.unavailable_fonts:
            data["unavailable_fonts"] = sorted(self.unavailable_fonts)
        return data

    @classmethod
    def load(cls, path: str | Path) -> "Document":
        """Load a document from a JSON file."""
        path = Path(path)
        try:
            with path.open(encoding="utf-8") as f:
                data = json.load(f)
            document = cls.from_dict(data)
        except (OSError, json.JSONDecodeError, KeyError, PydanticValidationError) as e:
            raise DocumentLoadError(str(path), str(e)) from e

        logger.info(f"Loaded document {path} with {len(document._index)} nodes")
        return document

    def save(self, path: str | Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved document to {path}")

    @property
    def page_nodes(self) -> list[DocumentNode]:
        return list(self.root.children)

    def get_node(self, node_id: str) -> DocumentNode:
        node = self._index.get(node_id)
        if node is None:
            raise NodeNotFoundError(node_id)
        return node

    def selected_nodes(self) -> list[DocumentNode]:
        return [self._index[node_id] for node_id in self.selection if node_id in self._index]

    def get_style(self, node: DocumentNode) -> TextStyle | None:
        """Text style bound to ``node``, if any."""
        if node.text_style_id is None:
            return None
        style = self.styles.get(node.text_style_id)
        if style is None:
            raise UnknownStyleReferenceError(node.id, node.text_style_id)
        return style

    # Host operations

    def load_font(self, family: str, style: str) -> None:
        """Make a font available for editing; must precede any text mutation."""
        if family.lower() in self.unavailable_fonts:
            raise FontLoadError(family, style)
        self.loaded_fonts.add((family, style))

    def _require_loaded(self, node_id: str, family: str | None, style: str | None) -> None:
        if (family, style) not in self.loaded_fonts:
            raise NodeMutationError(node_id, f"font {family} {style} is not loaded")

    def set_text_spacing(
        self, node: DocumentNode, line_height: LineHeight, letter_spacing: LetterSpacing
    ) -> None:
        self._require_loaded(node.id, node.font_family, node.font_style)
        node.line_height = line_height
        node.letter_spacing = letter_spacing

    def set_style_spacing(
        self, style: TextStyle, line_height: LineHeight, letter_spacing: LetterSpacing
    ) -> None:
        """Update a shared style; bound nodes pick up the change."""
        self._require_loaded(style.id, style.font_family, style.font_style)
        style.line_height = line_height
        style.letter_spacing = letter_spacing
        for node in self._index.values():
            if node.text_style_id == style.id:
                node.line_height = line_height
                node.letter_spacing = letter_spacing
