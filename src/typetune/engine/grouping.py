"""
Grouping & Tolerance Engine
===========================

Deduplicates text items into unique typographic configurations, calculates
each configuration once, and flags groups whose current spacing already
matches the target closely enough that no write is needed.
"""

import logging
from collections.abc import Iterable

from ..core.models import (
    ContextOverride,
    DeduplicatedGroup,
    GroupingReport,
    GroupKey,
    TextItem,
    TypographyInput,
    TypographyResult,
)
from ..fonts.database import FontDatabase
from .calculator import calculate

logger = logging.getLogger(__name__)

LINE_HEIGHT_RELATIVE_TOLERANCE = 0.05
LINE_HEIGHT_ZERO_TOLERANCE = 0.5
LETTER_SPACING_RELATIVE_TOLERANCE = 0.05
LETTER_SPACING_MIN_TOLERANCE = 0.2


def dedup_key(typography: TypographyInput) -> GroupKey:
    return (
        typography.font_family,
        typography.font_weight,
        typography.font_size,
        typography.is_dark_bg,
        typography.is_uppercase,
    )


def line_height_tolerance(target: float) -> float:
    if target == 0:
        return LINE_HEIGHT_ZERO_TOLERANCE
    return abs(target) * LINE_HEIGHT_RELATIVE_TOLERANCE


def letter_spacing_tolerance(target: float) -> float:
    return max(LETTER_SPACING_MIN_TOLERANCE, abs(target) * LETTER_SPACING_RELATIVE_TOLERANCE)


def is_within_tolerance(
    result: TypographyResult,
    current_line_height: float | None,
    current_letter_spacing: float,
) -> bool:
    """
    Check current px values against a calculated target.

    An unknown (auto) line-height never counts as within tolerance.
    """
    if current_line_height is None:
        return False
    line_height_ok = abs(current_line_height - result.line_height) <= line_height_tolerance(
        result.line_height
    )
    letter_spacing_ok = abs(
        current_letter_spacing - result.letter_spacing
    ) <= letter_spacing_tolerance(result.letter_spacing)
    return line_height_ok and letter_spacing_ok


def item_is_good(item: TextItem, result: TypographyResult) -> bool:
    font_size = item.typography.font_size
    return is_within_tolerance(
        result,
        item.current_line_height.to_pixels(font_size),
        item.current_letter_spacing.to_pixels(font_size),
    )


def build_groups(
    items: Iterable[TextItem],
    context_override: ContextOverride = "auto",
    grid_step: float = 4,
    database: FontDatabase | None = None,
) -> GroupingReport:
    """
    Group text items by configuration and classify each group.

    A group is already good only when every member is within tolerance.
    Groups are ordered by font size (largest first), then family name.

    Args:
        items: Text items with their current spacing
        context_override: Passed through to the calculator
        grid_step: Passed through to the calculator
        database: Profile database; defaults to the bundled table

    Returns:
        Grouping report
    """
    members: dict[GroupKey, list[TextItem]] = {}
    total = 0
    for item in items:
        members.setdefault(dedup_key(item.typography), []).append(item)
        total += 1

    groups = []
    for key, group_items in members.items():
        representative = group_items[0].typography
        result = calculate(representative, context_override, grid_step, database)
        already_good = all(item_is_good(item, result) for item in group_items)
        groups.append(
            DeduplicatedGroup(
                key=key,
                typography=representative,
                result=result,
                item_ids=[item.item_id for item in group_items],
                already_good=already_good,
            )
        )

    groups.sort(key=lambda group: (-group.font_size, group.font_family.lower()))

    report = GroupingReport(groups=groups, total_items=total)
    logger.info(
        f"Grouped {total} text items into {len(groups)} configurations "
        f"({report.already_good_count} already well-tuned)"
    )
    return report
