"""
Date Utilities - parsing of the common date layouts and "now" formatting.
"""

from datetime import datetime
from typing import Optional, Union
import pandas as pd

from config.constants import (
    DATE_PATTERNS,
    COMPACT_DATETIME_FORMAT,
    DATE_FORMAT,
)


def parse_date(text: Optional[str]) -> Optional[datetime]:
    """
    Parse a date string against the supported layouts.

    Layouts are tried in order: `yyyy-MM-dd HH:mm:ss`, `yyyy-MM-dd HH:mm`,
    `yyyy-MM-dd HH`, `yyyy-MM-dd`, `yyyy/MM/dd`.

    Args:
        text: Date string to parse

    Returns:
        Datetime object, or None for blank input

    Raises:
        ValueError: If no layout matches
    """
    if text is None or not str(text).strip():
        return None

    value = str(text).strip()
    for pattern in DATE_PATTERNS:
        try:
            parsed = pd.to_datetime(value, format=pattern, exact=True)
        except (ValueError, TypeError):
            continue
        if pd.isna(parsed):
            continue
        return parsed.to_pydatetime()

    raise ValueError(f"Unable to parse date: {value!r}")


def truncate_to_date(value: Union[datetime, pd.Timestamp]) -> datetime:
    """Drop the time of day, keeping midnight of the same date."""
    if value is None:
        raise ValueError("Date must not be None.")
    return pd.Timestamp(value).normalize().to_pydatetime()


def now_time() -> datetime:
    return datetime.now()


def now_time_string() -> str:
    """Current time as yyyyMMddHHmmss."""
    return now_time().strftime(COMPACT_DATETIME_FORMAT)


def now_date_string() -> str:
    """Current date as yyyy-MM-dd."""
    return now_time().strftime(DATE_FORMAT)


def am_pm(hour: int) -> str:
    """'am' for hours up to 12, 'pm' afterwards."""
    return "am" if hour < 13 else "pm"
