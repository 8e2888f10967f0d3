"""Utility modules for TypeTune."""

from .numbers import format_number, round_half_up

__all__ = [
    "format_number",
    "round_half_up",
]
