"""
Code Exporter
=============

Renders a calculated result as CSS, fluid CSS, iOS (UIKit) or Android XML.
"""

from collections.abc import Callable

from ..core.exceptions import UnsupportedExportFormatError
from ..core.models import ExportFormat, TypographyResult
from ..utils.numbers import format_number, round_half_up

# Fluid type scales between these viewport widths (px)
MOBILE_VIEWPORT = 375
DESKTOP_VIEWPORT = 1440
MOBILE_SCALE = 0.875
DESKTOP_SCALE = 1.125


def _line_height_ratio(result: TypographyResult, font_size: float) -> float:
    # Zero-size text renders with a ratio of 0
    if font_size == 0:
        return 0.0
    return result.line_height / font_size


def _line_height_multiple(result: TypographyResult, font_size: float) -> float:
    return round_half_up(_line_height_ratio(result, font_size) * 100) / 100


def _fluid_terms(min_value: float, max_value: float) -> tuple[float, float]:
    """Slope in vw and intercept in px of the line through both breakpoints."""
    vw_coefficient = (
        round_half_up((max_value - min_value) / (DESKTOP_VIEWPORT - MOBILE_VIEWPORT) * 10000) / 100
    )
    base = round_half_up((min_value - vw_coefficient * (MOBILE_VIEWPORT / 100)) * 100) / 100
    return vw_coefficient, base


def export_css(result: TypographyResult, font_size: float) -> str:
    lines = [
        f"font-size: {format_number(font_size)}px;",
        f"line-height: {format_number(result.line_height)}px; "
        f"/* {format_number(result.line_height_percent)}% */",
    ]
    if result.letter_spacing != 0:
        lines.append(
            f"letter-spacing: {format_number(result.letter_spacing_em)}em; "
            f"/* Figma: {format_number(result.letter_spacing_percent)}% */"
        )
    return "\n".join(lines)


def export_css_fluid(result: TypographyResult, font_size: float) -> str:
    min_size = round_half_up(font_size * MOBILE_SCALE)
    max_size = round_half_up(font_size * DESKTOP_SCALE)
    ratio = _line_height_ratio(result, font_size)
    min_line_height = round_half_up(min_size * ratio)
    max_line_height = round_half_up(max_size * ratio)

    size_vw, size_base = _fluid_terms(min_size, max_size)
    line_vw, line_base = _fluid_terms(min_line_height, max_line_height)

    lines = [
        f"font-size: clamp({format_number(min_size)}px, "
        f"{format_number(size_vw)}vw + {format_number(size_base)}px, "
        f"{format_number(max_size)}px);",
        f"line-height: clamp({format_number(min_line_height)}px, "
        f"{format_number(line_vw)}vw + {format_number(line_base)}px, "
        f"{format_number(max_line_height)}px);",
    ]
    if result.letter_spacing != 0:
        lines.append(f"letter-spacing: {format_number(result.letter_spacing_em)}em;")
    return "\n".join(lines)


def export_ios(result: TypographyResult, font_size: float) -> str:
    multiple = format_number(_line_height_multiple(result, font_size))
    return (
        "let paragraphStyle = NSMutableParagraphStyle()\n"
        f"paragraphStyle.lineHeightMultiple = {multiple}\n"
        "let attributes: [NSAttributedString.Key: Any] = [\n"
        f"    .font: UIFont.systemFont(ofSize: {format_number(font_size)}),\n"
        f"    .kern: {format_number(result.letter_spacing)},\n"
        "    .paragraphStyle: paragraphStyle\n"
        "]"
    )


def export_android(result: TypographyResult, font_size: float) -> str:
    multiple = format_number(_line_height_multiple(result, font_size))
    return (
        f'android:textSize="{format_number(font_size)}sp"\n'
        f'android:lineSpacingMultiplier="{multiple}"\n'
        f'android:letterSpacing="{format_number(result.letter_spacing_em)}"'
    )


EXPORTERS: dict[str, Callable[[TypographyResult, float], str]] = {
    "css": export_css,
    "css-fluid": export_css_fluid,
    "ios": export_ios,
    "android": export_android,
}

EXPORT_FORMATS: tuple[str, ...] = tuple(EXPORTERS)


def export_code(result: TypographyResult, font_size: float, format: ExportFormat) -> str:
    """
    Render a result as a code snippet.

    Raises:
        UnsupportedExportFormatError: If ``format`` is not a known format
    """
    exporter = EXPORTERS.get(format)
    if exporter is None:
        raise UnsupportedExportFormatError(str(format), EXPORT_FORMATS)
    return exporter(result, font_size)
