"""
Fixed calendar tables for the countdown engine.
Curated per-year holiday dates and lunar new year dates, with generic fallbacks.
"""

from datetime import date
from typing import Dict, Tuple


# Days of the month on which salaries are paid
PAYDAYS: Tuple[int, ...] = (1, 5, 8, 10, 15, 20, 25, 30)

# Weekday names indexed by day of week, 0 = Sunday
WEEKDAY_NAMES: Tuple[str, ...] = (
    '星期日', '星期一', '星期二', '星期三', '星期四', '星期五', '星期六'
)

# Hand-entered (month, day) holiday dates, lunar holidays converted to Gregorian
CURATED_HOLIDAYS: Dict[int, Dict[str, Tuple[int, int]]] = {
    2025: {
        '元旦': (1, 1),
        '春节': (1, 29),
        '清明': (4, 5),
        '劳动节': (5, 1),
        '端午': (5, 31),
        '中秋': (10, 6),
        '国庆': (10, 1),
    },
    2026: {
        '元旦': (1, 1),
        '春节': (2, 17),
        '清明': (4, 5),
        '劳动节': (5, 1),
        '端午': (6, 19),
        '中秋': (9, 25),
        '国庆': (10, 1),
    },
    2027: {
        '元旦': (1, 1),
        '春节': (2, 6),
        '清明': (4, 5),
        '劳动节': (5, 1),
        '端午': (6, 9),
        '中秋': (9, 15),
        '国庆': (10, 1),
    },
}

# Gregorian-fixed holidays used for years missing from CURATED_HOLIDAYS
GENERIC_HOLIDAYS: Dict[str, Tuple[int, int]] = {
    '元旦': (1, 1),
    '劳动节': (5, 1),
    '国庆': (10, 1),
}

# Gregorian (month, day) of the first day of the lunar year
LUNAR_NEW_YEAR: Dict[int, Tuple[int, int]] = {
    2024: (2, 10),
    2025: (1, 29),
    2026: (2, 17),
    2027: (2, 6),
    2028: (1, 26),
    2029: (2, 13),
    2030: (2, 3),
}

# Estimate used when a year is missing from LUNAR_NEW_YEAR
LUNAR_NEW_YEAR_FALLBACK: Tuple[int, int] = (1, 29)


def holidays_for_year(year: int) -> Dict[str, date]:
    """
    Resolve the holiday dates of a year.

    The curated table wins when it has the year; otherwise the generic
    Gregorian-fixed holidays are used.

    Args:
        year: Calendar year (e.g., 2026)

    Returns:
        Dictionary mapping holiday name to its date, in table order
    """
    if year in CURATED_HOLIDAYS:
        source = CURATED_HOLIDAYS[year]
    else:
        source = GENERIC_HOLIDAYS

    return {name: date(year, month, day) for name, (month, day) in source.items()}


def is_curated_year(year: int) -> bool:
    """Check whether a year has hand-entered holiday dates."""
    return year in CURATED_HOLIDAYS


def lunar_new_year(year: int) -> date:
    """
    Get the Gregorian date of the lunar new year.

    Args:
        year: Calendar year

    Returns:
        Tabulated date, or the late-January estimate for untabulated years
    """
    if year in LUNAR_NEW_YEAR:
        month, day = LUNAR_NEW_YEAR[year]
    else:
        month, day = LUNAR_NEW_YEAR_FALLBACK
    return date(year, month, day)
