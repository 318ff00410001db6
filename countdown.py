"""
Calendar countdown engine for the 摸鱼办 reminder.
Pure functions computing day counts relative to a reference instant.
"""

import calendar
import math
from datetime import date, datetime, time, timedelta
from typing import Dict, List, NamedTuple, Optional, Sequence, Union

from tables import PAYDAYS, WEEKDAY_NAMES, holidays_for_year, lunar_new_year

Instant = Union[date, datetime]

WORK_START = time(9, 0)
WORK_END = time(18, 0)
HOLIDAY_LIMIT = 6
OFF_WORK_MESSAGE = "今日已下班，距离明日下班还有 18小时00分00秒"


class WeekendCountdown(NamedTuple):
    double_rest: int  # days until Saturday
    single_rest: int  # days until Sunday


class HolidayCountdown(NamedTuple):
    name: str
    days: int


class YearEndCountdown(NamedTuple):
    next_year: int
    next_lunar_new_year: int


def _as_datetime(instant: Optional[Instant]) -> datetime:
    if instant is None:
        return datetime.now()
    if isinstance(instant, datetime):
        return instant
    return datetime.combine(instant, time())


def _as_date(instant: Optional[Instant]) -> date:
    return _as_datetime(instant).date()


def _has_passed(target: date, today: date, today_is_passed: bool) -> bool:
    """Same-day policy: with today_is_passed, a target falling today counts as gone."""
    if today_is_passed:
        return target <= today
    return target < today


def _clamped_date(year: int, month: int, day: int) -> date:
    """Build a date, moving days past the end of a short month to its last day."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def format_date(instant: Optional[Instant] = None) -> str:
    """Format as YYYY年MM月DD日."""
    d = _as_date(instant)
    return f"{d.year}年{d.month:02d}月{d.day:02d}日"


def day_of_week(instant: Optional[Instant] = None) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (_as_date(instant).weekday() + 1) % 7


def weekday_name(instant: Optional[Instant] = None) -> str:
    return WEEKDAY_NAMES[day_of_week(instant)]


def day_of_year(instant: Optional[Instant] = None) -> int:
    return _as_date(instant).timetuple().tm_yday


def day_difference(first: Instant, second: Instant) -> int:
    """
    Count whole days between two instants.

    Time of day is dropped from both sides before differencing, so the
    result is order-independent and never fractional.

    Args:
        first: One endpoint
        second: The other endpoint

    Returns:
        Absolute number of days between the two calendar dates
    """
    return abs((_as_date(second) - _as_date(first)).days)


def payday_countdowns(instant: Optional[Instant] = None,
                      paydays: Sequence[int] = PAYDAYS,
                      today_is_passed: bool = True) -> Dict[str, int]:
    """
    Days until the next occurrence of every payday.

    A payday past the end of the month (e.g. the 30th in February) falls on
    the month's last day. Paydays already gone this month roll into the next
    month, December rolling into January of the following year.

    Args:
        instant: Reference instant (defaults to now)
        paydays: Days of the month salaries are paid on
        today_is_passed: Whether a payday falling today rolls to next month

    Returns:
        Dictionary mapping zero-padded day label ("01", "30") to day count,
        in payday order
    """
    today = _as_date(instant)

    if today.month == 12:
        next_year, next_month = today.year + 1, 1
    else:
        next_year, next_month = today.year, today.month + 1

    countdowns = {}
    for day in paydays:
        payday = _clamped_date(today.year, today.month, day)
        if _has_passed(payday, today, today_is_passed):
            payday = _clamped_date(next_year, next_month, day)
        countdowns[f"{day:02d}"] = day_difference(today, payday)

    return countdowns


def weekend_countdowns(instant: Optional[Instant] = None) -> WeekendCountdown:
    """Days until the next Saturday and the next Sunday, never 0."""
    dow = day_of_week(instant)
    to_saturday = 7 if dow == 6 else 6 - dow
    to_sunday = 7 if dow == 0 else 7 - dow
    return WeekendCountdown(double_rest=to_saturday, single_rest=to_sunday)


def holiday_countdowns(instant: Optional[Instant] = None,
                       limit: int = HOLIDAY_LIMIT) -> List[HolidayCountdown]:
    """
    Upcoming holidays, nearest first.

    Holidays still ahead this year are counted directly. A holiday from next
    year's table is only added when this year's holiday of the same name is
    missing or already over, so nothing is listed twice.

    Args:
        instant: Reference instant (defaults to now)
        limit: Maximum number of entries returned

    Returns:
        List of (name, days) sorted ascending by days
    """
    today = _as_date(instant)
    this_year = holidays_for_year(today.year)
    following_year = holidays_for_year(today.year + 1)

    countdowns = []
    for name, holiday in this_year.items():
        if holiday >= today:
            countdowns.append(HolidayCountdown(name, day_difference(today, holiday)))

    for name, holiday in following_year.items():
        current = this_year.get(name)
        if current is None or current < today:
            countdowns.append(HolidayCountdown(name, day_difference(today, holiday)))

    countdowns.sort(key=lambda entry: entry.days)
    return countdowns[:limit]


def year_end_countdowns(instant: Optional[Instant] = None,
                        today_is_passed: bool = True) -> YearEndCountdown:
    """
    Days until next New Year's Day and the next lunar new year.

    Args:
        instant: Reference instant (defaults to now)
        today_is_passed: Whether a lunar new year falling today counts as gone

    Returns:
        YearEndCountdown with both day counts
    """
    today = _as_date(instant)
    to_new_year = day_difference(today, date(today.year + 1, 1, 1))

    festival = lunar_new_year(today.year)
    if _has_passed(festival, today, today_is_passed):
        festival = lunar_new_year(today.year + 1)

    return YearEndCountdown(next_year=to_new_year,
                            next_lunar_new_year=day_difference(today, festival))


def work_progress_percent(instant: Optional[Instant] = None,
                          start: time = WORK_START,
                          end: time = WORK_END) -> int:
    """Share of today's work window already elapsed, floored to 0..100."""
    now = _as_datetime(instant)
    start_at = now.replace(hour=start.hour, minute=start.minute, second=0, microsecond=0)
    end_at = now.replace(hour=end.hour, minute=end.minute, second=0, microsecond=0)

    if now <= start_at:
        return 0
    if now >= end_at:
        return 100

    elapsed = (now - start_at).total_seconds()
    window = (end_at - start_at).total_seconds()
    return int(math.floor(elapsed / window * 100))


def format_clock(instant: Optional[Instant] = None) -> str:
    """Format time of day as HH:MM:SS."""
    return _as_datetime(instant).strftime("%H:%M:%S")


def time_until_work_end(instant: Optional[Instant] = None,
                        end: time = WORK_END) -> Optional[timedelta]:
    """Time left until today's end of work, or None once it has passed."""
    now = _as_datetime(instant)
    end_at = now.replace(hour=end.hour, minute=end.minute, second=0, microsecond=0)
    if now > end_at:
        return None
    return end_at - now


def format_work_end_countdown(instant: Optional[Instant] = None,
                              end: time = WORK_END) -> str:
    remaining = time_until_work_end(instant, end)
    if remaining is None:
        return OFF_WORK_MESSAGE

    seconds = int(remaining.total_seconds())
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"距离下班还有 {hours:02d}小时{minutes:02d}分{seconds:02d}秒"
