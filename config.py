"""
Settings for the 摸鱼办 reminder.
Reads Streamlit secrets first, then environment variables, then defaults.
"""

import logging
import os
from dataclasses import dataclass
from datetime import time
from typing import Any, Callable, Tuple

import streamlit as st

from tables import PAYDAYS

logger = logging.getLogger(__name__)

STRATEGY_NAMES = ('random', 'day_of_year')


@dataclass(frozen=True)
class Settings:
    paydays: Tuple[int, ...] = PAYDAYS
    payday_today_is_passed: bool = True
    lunar_today_is_passed: bool = True
    holiday_limit: int = 6
    work_start: time = time(9, 0)
    work_end: time = time(18, 0)
    opening_strategy: str = 'random'
    show_rating: bool = True
    refresh_seconds: int = 1


def get_secret(name: str, default=None):
    # prefer Streamlit secrets, fallback to env vars
    try:
        return st.secrets[name]
    except Exception:
        return os.getenv(name, default)


def parse_hhmm(value: Any) -> time:
    """Parse HH:MM into a time, raising ValueError on anything else."""
    if isinstance(value, time):
        return value
    parts = str(value).strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Time must be HH:MM, got {value!r}")
    hh, mm = int(parts[0]), int(parts[1])
    if not (0 <= hh <= 23 and 0 <= mm <= 59):
        raise ValueError(f"Time must be 00:00 - 23:59, got {value!r}")
    return time(hour=hh, minute=mm)


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ('1', 'true', 'yes', 'on'):
        return True
    if text in ('0', 'false', 'no', 'off'):
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def parse_positive_int(value: Any) -> int:
    number = int(value)
    if number < 1:
        raise ValueError(f"Must be at least 1, got {value!r}")
    return number


def parse_paydays(value: Any) -> Tuple[int, ...]:
    """
    Parse a payday list.

    Args:
        value: Comma separated string ("1,15,30") or a list of ints

    Returns:
        Tuple of days of the month, in the given order
    """
    if isinstance(value, str):
        items = [item for item in value.split(",") if item.strip()]
    else:
        items = list(value)

    days = tuple(int(item) for item in items)
    if not days:
        raise ValueError("Payday list is empty")
    for day in days:
        if not 1 <= day <= 31:
            raise ValueError(f"Payday out of range: {day}")
    if len(set(days)) != len(days):
        raise ValueError(f"Duplicate paydays: {value!r}")
    return days


def parse_strategy(value: Any) -> str:
    name = str(value).strip().lower()
    if name not in STRATEGY_NAMES:
        raise ValueError(f"Unknown opening strategy: {value!r}")
    return name


def _read(name: str, parser: Callable[[Any], Any], default: Any) -> Any:
    raw = get_secret(name)
    if raw is None or raw == '':
        return default
    try:
        return parser(raw)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid %s=%r, using default %r: %s", name, raw, default, e)
        return default


def load_settings() -> Settings:
    """
    Load settings from Streamlit secrets or environment variables.
    Invalid values are logged and replaced by their defaults.

    Returns:
        Settings instance
    """
    defaults = Settings()

    work_start = _read('WORK_START', parse_hhmm, defaults.work_start)
    work_end = _read('WORK_END', parse_hhmm, defaults.work_end)
    if work_start >= work_end:
        logger.warning("WORK_START %s is not before WORK_END %s, using defaults",
                       work_start, work_end)
        work_start, work_end = defaults.work_start, defaults.work_end

    return Settings(
        paydays=_read('PAYDAYS', parse_paydays, defaults.paydays),
        payday_today_is_passed=_read('PAYDAY_TODAY_IS_PASSED', parse_bool,
                                     defaults.payday_today_is_passed),
        lunar_today_is_passed=_read('LUNAR_TODAY_IS_PASSED', parse_bool,
                                    defaults.lunar_today_is_passed),
        holiday_limit=_read('HOLIDAY_LIMIT', parse_positive_int, defaults.holiday_limit),
        work_start=work_start,
        work_end=work_end,
        opening_strategy=_read('OPENING_STRATEGY', parse_strategy, defaults.opening_strategy),
        show_rating=_read('SHOW_RATING', parse_bool, defaults.show_rating),
        refresh_seconds=_read('REFRESH_SECONDS', parse_positive_int, defaults.refresh_seconds),
    )
