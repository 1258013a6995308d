"""Formatters for each component."""

from typing import Callable, Dict, Optional, Type

from ..description import component as c
from ..description.modifier import Padding, SubsecondDigits, YearRange, YearRepr
from ..errors import FormatComponentRange, InsufficientTypeInformation
from ..values import Date, OffsetDateTime, Time, UtcOffset


def pad(value: int, width: int, padding: Padding) -> str:
    """Write a non-negative number padded to `width` characters."""
    if padding is Padding.ZERO:
        return f"{value:0{width}}"
    if padding is Padding.SPACE:
        return f"{value:>{width}}"
    return str(value)


def _need(value: Optional[object]) -> object:
    if value is None:
        raise InsufficientTypeInformation()
    return value


def _day(component: c.Day, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(_need(date).day, 2, component.padding)


def _month(component: c.Component, date: Date, time: Time, offset: UtcOffset) -> str:
    month = _need(date).month
    if isinstance(component, c.MonthNumerical):
        return pad(month.value, 2, component.padding)
    if isinstance(component, c.MonthLong):
        return month.long_name
    return month.short_name


def _ordinal(component: c.Ordinal, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(_need(date).ordinal, 3, component.padding)


def _weekday(component: c.Component, date: Date, time: Time, offset: UtcOffset) -> str:
    weekday = _need(date).weekday
    if isinstance(component, c.WeekdayLong):
        return weekday.long_name
    if isinstance(component, c.WeekdayShort):
        return weekday.short_name
    if isinstance(component, c.WeekdaySunday):
        number = weekday.number_days_from_sunday()
    else:
        number = weekday.number_days_from_monday()
    return str(number + 1 if component.one_indexed else number)


def _week_number(component: c.Component, date: Date, time: Time, offset: UtcOffset) -> str:
    date = _need(date)
    if isinstance(component, c.WeekNumberIso):
        week = date.iso_week
    elif isinstance(component, c.WeekNumberSunday):
        week = date.sunday_based_week
    else:
        week = date.monday_based_week
    return pad(week, 2, component.padding)


def _year(component: c.Year, date: Date, time: Time, offset: UtcOffset) -> str:
    date = _need(date)
    year = date.iso_year if component.iso_week_based else date.year
    standard = component.year_range is YearRange.STANDARD
    if component.year_repr is YearRepr.LAST_TWO:
        return pad(abs(year) % 100, 2, component.padding)
    if component.year_repr is YearRepr.FULL:
        value, width, limit = abs(year), 4, 9_999
    else:
        value, width, limit = abs(year) // 100, 2, 99
    if standard and value > limit:
        raise FormatComponentRange.conditional("year")
    if year < 0:
        sign = "-"
    elif component.sign_is_mandatory or (not standard and year >= 10_000):
        sign = "+"
    else:
        sign = ""
    return sign + pad(value, width, component.padding)


def _hour(component: c.Component, date: Date, time: Time, offset: UtcOffset) -> str:
    hour = _need(time).hour
    if isinstance(component, c.Hour12):
        hour = hour % 12 or 12
    return pad(hour, 2, component.padding)


def _minute(component: c.Minute, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(_need(time).minute, 2, component.padding)


def _period(component: c.Period, date: Date, time: Time, offset: UtcOffset) -> str:
    period = "PM" if _need(time).hour >= 12 else "AM"
    return period if component.is_uppercase else period.lower()


def _second(component: c.Second, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(_need(time).second, 2, component.padding)


def _subsecond(component: c.Subsecond, date: Date, time: Time, offset: UtcOffset) -> str:
    digits = f"{_need(time).nanosecond:09}"
    if component.digits is SubsecondDigits.ONE_OR_MORE:
        return digits.rstrip("0") or "0"
    return digits[:component.digits.count]


def _offset_hour(component: c.OffsetHour, date: Date, time: Time, offset: UtcOffset) -> str:
    offset = _need(offset)
    if offset.is_negative:
        sign = "-"
    elif component.sign_is_mandatory:
        sign = "+"
    else:
        sign = ""
    return sign + pad(abs(offset.whole_hours), 2, component.padding)


def _offset_minute(component: c.OffsetMinute, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(abs(_need(offset).minutes_past_hour), 2, component.padding)


def _offset_second(component: c.OffsetSecond, date: Date, time: Time, offset: UtcOffset) -> str:
    return pad(abs(_need(offset).seconds_past_minute), 2, component.padding)


def _unix_timestamp(
    component: c.UnixTimestamp, date: Date, time: Time, offset: UtcOffset
) -> str:
    instant = OffsetDateTime(_need(date), _need(time), _need(offset))
    value = instant.unix_timestamp_nanos() // component.nanos_per_unit
    if value < 0:
        return str(value)
    return ("+" if component.sign_is_mandatory else "") + str(value)


def _nothing(component: c.Component, date: Date, time: Time, offset: UtcOffset) -> str:
    return ""


_Formatter = Callable[[c.Component, Optional[Date], Optional[Time], Optional[UtcOffset]], str]

_FORMATTERS: Dict[Type[c.Component], _Formatter] = {
    c.Day: _day,
    c.MonthNumerical: _month,
    c.MonthShort: _month,
    c.MonthLong: _month,
    c.Ordinal: _ordinal,
    c.WeekdayShort: _weekday,
    c.WeekdayLong: _weekday,
    c.WeekdaySunday: _weekday,
    c.WeekdayMonday: _weekday,
    c.WeekNumberIso: _week_number,
    c.WeekNumberSunday: _week_number,
    c.WeekNumberMonday: _week_number,
    c.Hour12: _hour,
    c.Hour24: _hour,
    c.Minute: _minute,
    c.Period: _period,
    c.Second: _second,
    c.Subsecond: _subsecond,
    c.OffsetHour: _offset_hour,
    c.OffsetMinute: _offset_minute,
    c.OffsetSecond: _offset_second,
    c.Ignore: _nothing,
    c.End: _nothing,
}


def format_component(
    component: c.Component,
    date: Optional[Date],
    time: Optional[Time],
    offset: Optional[UtcOffset],
) -> str:
    """Format one component from whichever parts of the value are available.

    Raises `InsufficientTypeInformation` when the component needs a part that
    is None.
    """
    if isinstance(component, c.Year):
        return _year(component, date, time, offset)
    if isinstance(component, c.UnixTimestamp):
        return _unix_timestamp(component, date, time, offset)
    return _FORMATTERS[type(component)](component, date, time, offset)
