"""Numeric helpers shared by the calculator and the exporters."""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with ties going towards positive infinity.

    Python's built-in ``round`` uses banker's rounding, which would turn
    ``5.5`` into ``6`` but ``4.5`` into ``4``. Every rounding in the
    engine must use this helper instead.

    Args:
        value: Number to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value
    """
    if digits == 0:
        return float(math.floor(value + 0.5))
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Render a number the way it appears in exported code (``16.0`` -> ``16``)."""
    if isinstance(value, bool):
        return str(int(value))
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
