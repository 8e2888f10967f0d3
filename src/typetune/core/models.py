"""Pydantic models for type-safe data structures."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import (
    MissingBaselineWeightError,
    NonZeroBaselineWeightError,
    WeightOutOfRangeError,
)

FontCategory = Literal["sans-serif", "serif", "mono", "display"]
TextContext = Literal["display", "body", "caption"]
ContextOverride = Literal["auto", "display", "body", "caption"]
BgMode = Literal["auto", "light", "dark"]
ExportFormat = Literal["css", "css-fluid", "ios", "android"]

BASELINE_WEIGHT = 400
FALLBACK_FAMILY = "__fallback__"


class WeightAdjustment(BaseModel):
    """Line-height and tracking deltas for one font weight."""

    model_config = ConfigDict(frozen=True)

    line_height_adjust: float = Field(0.0, description="Relative line-height delta")
    tracking_adjust: float = Field(0.0, description="Tracking delta as fraction of font size")


class FontProfile(BaseModel):
    """Static typographic baseline for one font family."""

    model_config = ConfigDict(frozen=True)

    family: str = Field(..., min_length=1, description="Canonical family name")
    category: FontCategory = Field("sans-serif", description="Font category")
    base_line_height_ratio: float = Field(
        ..., ge=1.0, le=1.6, description="Line-height as multiple of font size"
    )
    base_tracking_ratio: float = Field(0.0, description="Tracking as fraction of font size")
    display_tightening: float = Field(0.0, description="Tracking delta in display context")
    uppercase_boost: float = Field(0.0, ge=0.0, description="Tracking delta for all-caps text")
    weights: dict[int, WeightAdjustment] = Field(
        default_factory=dict, description="Per-weight adjustments"
    )

    @model_validator(mode="after")
    def validate_weight_table(self) -> "FontProfile":
        if not self.weights:
            return self
        for weight in self.weights:
            if not 100 <= weight <= 900:
                raise WeightOutOfRangeError(self.family, weight)
        baseline = self.weights.get(BASELINE_WEIGHT)
        if baseline is None:
            raise MissingBaselineWeightError(self.family)
        if baseline.line_height_adjust != 0 or baseline.tracking_adjust != 0:
            raise NonZeroBaselineWeightError(self.family)
        return self

    @property
    def sorted_weights(self) -> list[tuple[int, WeightAdjustment]]:
        """Weight table as ascending ``(weight, adjustment)`` pairs."""
        return sorted(self.weights.items())

    @property
    def is_fallback(self) -> bool:
        return self.family == FALLBACK_FAMILY


class TypographyInput(BaseModel):
    """Typographic configuration of one piece of text."""

    model_config = ConfigDict(frozen=True)

    font_family: str = Field(..., description="Font family name as reported by the host")
    font_size: float = Field(..., gt=0.0, description="Font size in px")
    font_weight: int = Field(400, description="Numeric font weight; out-of-table values clamp")
    font_style: str = Field("", description="Style label, e.g. 'Semi Bold Italic'")
    is_uppercase: bool = Field(False, description="Text is rendered in all caps")
    is_dark_bg: bool = Field(False, description="Text sits on a dark background")


class TypographyResult(BaseModel):
    """Calculated line-height and letter-spacing."""

    model_config = ConfigDict(frozen=True)

    line_height: float = Field(..., description="Line-height in px, snapped to grid")
    line_height_raw: float = Field(..., description="Line-height in px before grid snap")
    line_height_percent: float = Field(..., description="Line-height as percent of font size")
    letter_spacing: float = Field(..., description="Letter-spacing in px")
    letter_spacing_em: float = Field(..., description="Letter-spacing in em")
    letter_spacing_percent: float = Field(..., description="Letter-spacing in percent")
    font_info: str = Field(..., description="Human-readable descriptor")
    is_approximate: bool = Field(..., description="Fallback profile was used")

    def to_dict(self) -> dict[str, float | str | bool]:
        """Convert to dictionary for JSON output."""
        return self.model_dump()


class RGBColor(BaseModel):
    """Color with channels normalised to [0, 1]."""

    model_config = ConfigDict(frozen=True)

    r: float = Field(..., ge=0.0, le=1.0)
    g: float = Field(..., ge=0.0, le=1.0)
    b: float = Field(..., ge=0.0, le=1.0)
    a: float = Field(1.0, ge=0.0, le=1.0)


class GradientStop(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: float = Field(0.0, ge=0.0, le=1.0)
    color: RGBColor


class FillType(str, Enum):
    SOLID = "SOLID"
    GRADIENT_LINEAR = "GRADIENT_LINEAR"
    GRADIENT_RADIAL = "GRADIENT_RADIAL"
    GRADIENT_ANGULAR = "GRADIENT_ANGULAR"
    GRADIENT_DIAMOND = "GRADIENT_DIAMOND"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"


GRADIENT_FILL_TYPES = frozenset(
    {
        FillType.GRADIENT_LINEAR,
        FillType.GRADIENT_RADIAL,
        FillType.GRADIENT_ANGULAR,
        FillType.GRADIENT_DIAMOND,
    }
)


class Paint(BaseModel):
    """Fill descriptor reported by the host for a node."""

    model_config = ConfigDict(frozen=True)

    type: FillType
    visible: bool = True
    color: RGBColor | None = None
    gradient_stops: list[GradientStop] = Field(default_factory=list)


class LineHeightUnit(str, Enum):
    PIXELS = "PIXELS"
    PERCENT = "PERCENT"
    AUTO = "AUTO"


class LineHeight(BaseModel):
    """Line-height as stored by the host."""

    model_config = ConfigDict(frozen=True)

    value: float = 0.0
    unit: LineHeightUnit = LineHeightUnit.AUTO

    def to_pixels(self, font_size: float) -> float | None:
        """Convert to px, or None for auto line-height."""
        if self.unit == LineHeightUnit.PIXELS:
            return self.value
        if self.unit == LineHeightUnit.PERCENT:
            return font_size * self.value / 100
        return None

    def describe(self) -> str:
        if self.unit == LineHeightUnit.AUTO:
            return "auto"
        if self.unit == LineHeightUnit.PERCENT:
            return f"{self.value:g}%"
        return f"{self.value:g}px"


class LetterSpacingUnit(str, Enum):
    PIXELS = "PIXELS"
    PERCENT = "PERCENT"


class LetterSpacing(BaseModel):
    """Letter-spacing as stored by the host."""

    model_config = ConfigDict(frozen=True)

    value: float = 0.0
    unit: LetterSpacingUnit = LetterSpacingUnit.PIXELS

    def to_pixels(self, font_size: float) -> float:
        if self.unit == LetterSpacingUnit.PERCENT:
            return font_size * self.value / 100
        return self.value

    def describe(self) -> str:
        if self.value == 0:
            return "0"
        if self.unit == LetterSpacingUnit.PERCENT:
            return f"{self.value:g}%"
        return f"{self.value:g}px"


class TextItem(BaseModel):
    """One text item reported by the host, with its current spacing."""

    model_config = ConfigDict(frozen=True)

    item_id: str = Field(..., min_length=1, description="Host identifier")
    typography: TypographyInput
    current_line_height: LineHeight = Field(default_factory=LineHeight)
    current_letter_spacing: LetterSpacing = Field(default_factory=LetterSpacing)


GroupKey = tuple[str, int, float, bool, bool]


class DeduplicatedGroup(BaseModel):
    """Text items sharing one typographic configuration."""

    key: GroupKey
    typography: TypographyInput
    result: TypographyResult
    item_ids: list[str] = Field(default_factory=list)
    already_good: bool = False

    @property
    def count(self) -> int:
        return len(self.item_ids)

    @property
    def font_size(self) -> float:
        return self.typography.font_size

    @property
    def font_family(self) -> str:
        return self.typography.font_family


class GroupingReport(BaseModel):
    """Outcome of one grouping pass."""

    groups: list[DeduplicatedGroup] = Field(default_factory=list)
    total_items: int = Field(0, ge=0)

    @property
    def already_good_count(self) -> int:
        """Number of text items whose group needs no change."""
        return sum(group.count for group in self.groups if group.already_good)

    @property
    def needs_change_count(self) -> int:
        return sum(group.count for group in self.groups if not group.already_good)

    def groups_needing_change(self) -> list[DeduplicatedGroup]:
        return [group for group in self.groups if not group.already_good]
