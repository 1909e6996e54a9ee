"""
Numeric coercion for values read from external tools (ffprobe output, env, CLI).
"""

from typing import Any, Callable, Optional
import pandas as pd


def coerce_number(
    value: Any,
    kind: Callable[[Any], Any] = float,
    default: Optional[Any] = None
) -> Optional[Any]:
    """
    Convert a loosely typed value to a number.

    Args:
        value: Raw value (str, number, None, NaN)
        kind: Target constructor, `float` or `int`
        default: Returned when the value is missing or not numeric

    Returns:
        The converted number or default
    """
    try:
        if value is None or pd.isna(value):
            return default
        if kind is int and isinstance(value, str):
            # "48000.0" style values from probes
            return int(float(value))
        return kind(value)
    except (ValueError, TypeError):
        return default
