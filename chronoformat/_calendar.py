"""Proleptic Gregorian calendar arithmetic shared by the value types."""

from typing import Tuple

# Cumulative days before each month in a common year; index 0 is unused.
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)
_DAYS_IN_MONTH = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Day number of 1970-01-01, counting 0001-01-01 as day 1.
UNIX_EPOCH_DAY = 719_163

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_DAY = 86_400 * NANOS_PER_SECOND


def is_leap_year(year: int) -> bool:
    """Check whether the year has a February 29th."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    """Return 366 for leap years and 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the month of the given year."""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def ordinal_from_calendar(year: int, month: int, day: int) -> int:
    """Convert a month and day to the day of the year."""
    ordinal = _DAYS_BEFORE_MONTH[month] + day
    if month > 2 and is_leap_year(year):
        ordinal += 1
    return ordinal


def calendar_from_ordinal(year: int, ordinal: int) -> Tuple[int, int]:
    """Convert a day of the year to its month and day."""
    leap = 1 if is_leap_year(year) else 0
    for month in range(12, 0, -1):
        before = _DAYS_BEFORE_MONTH[month] + (leap if month > 2 else 0)
        if ordinal > before:
            return month, ordinal - before
    raise AssertionError("ordinal must be positive")


def day_number(year: int, ordinal: int) -> int:
    """Count days so that 0001-01-01 is day 1; earlier dates are zero or negative."""
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400 + ordinal


def from_day_number(number: int) -> Tuple[int, int]:
    """Invert `day_number`, returning the year and the day of the year."""
    n = number - 1
    n400, n = divmod(n, 146_097)
    year = n400 * 400 + 1
    n100, n = divmod(n, 36_524)
    n4, n = divmod(n, 1_461)
    n1, n = divmod(n, 365)
    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        return year - 1, 366
    return year, n + 1


def weekday_from_monday(year: int, ordinal: int) -> int:
    """Return the weekday as days since Monday (Monday is 0)."""
    return (day_number(year, ordinal) - 1) % 7


def weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks in the ISO year, 52 or 53."""
    jan_1 = weekday_from_monday(year, 1)
    if jan_1 == 3 or (jan_1 == 2 and is_leap_year(year)):
        return 53
    return 52


def iso_year_week(year: int, ordinal: int) -> Tuple[int, int]:
    """Return the ISO week-numbering year and week of a date."""
    weekday = weekday_from_monday(year, ordinal) + 1
    week = (ordinal - weekday + 10) // 7
    if week == 0:
        return year - 1, weeks_in_year(year - 1)
    if week > weeks_in_year(year):
        return year + 1, 1
    return year, week


def ordinal_from_iso_week(year: int, week: int, weekday: int) -> Tuple[int, int]:
    """Convert an ISO week date (weekday 1-7 from Monday) to a year and ordinal."""
    jan_4 = weekday_from_monday(year, 4) + 1
    ordinal = week * 7 + weekday - (jan_4 + 3)
    if ordinal < 1:
        return year - 1, ordinal + days_in_year(year - 1)
    if ordinal > days_in_year(year):
        return year + 1, ordinal - days_in_year(year)
    return year, ordinal
