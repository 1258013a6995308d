"""Parsers for each component, and the code that stores their values."""

from typing import Callable, Dict, Optional, Tuple, Type

from ..description import component as c
from ..description.modifier import SubsecondDigits, TrailingInput, YearRange, YearRepr
from ..errors import InvalidComponent
from ..values import Month, Weekday
from .combinator import (
    ParsedItem,
    any_digit,
    exactly_n_digits,
    exactly_n_digits_padded,
    first_match,
    n_to_m_digits,
    n_to_m_digits_padded,
    sign,
)
from .parsed import Parsed

_MONTHS_LONG = tuple((month.long_name.encode(), month) for month in Month)
_MONTHS_SHORT = tuple((month.short_name.encode(), month) for month in Month)
_WEEKDAYS_LONG = tuple((weekday.long_name.encode(), weekday) for weekday in Weekday)
_WEEKDAYS_SHORT = tuple((weekday.short_name.encode(), weekday) for weekday in Weekday)

_NAME_PARSERS = {
    (table, case_sensitive): first_match(table, case_sensitive)
    for table in (_MONTHS_LONG, _MONTHS_SHORT, _WEEKDAYS_LONG, _WEEKDAYS_SHORT)
    for case_sensitive in (True, False)
}


def _signed(
    data: bytes, pos: int, digits: Callable, unsigned: Callable, sign_is_mandatory: bool
) -> Optional[ParsedItem]:
    signed = sign(data, pos)
    if signed is not None:
        item = digits(data, signed.pos)
        if item is None:
            return None
        return ParsedItem(item.pos, (signed.value * item.value, signed.value < 0))
    if sign_is_mandatory:
        return None
    item = unsigned(data, pos)
    if item is None:
        return None
    return ParsedItem(item.pos, (item.value, False))


def parse_year(data: bytes, pos: int, component: c.Year) -> Optional[ParsedItem]:
    """Parse any year component; the value is the number and whether it was negative."""
    padding = component.padding
    extended = component.year_range is YearRange.EXTENDED
    if component.year_repr is YearRepr.LAST_TWO:
        item = exactly_n_digits_padded(2, padding)(data, pos)
        return None if item is None else ParsedItem(item.pos, (item.value, False))
    if component.year_repr is YearRepr.FULL:
        if extended:
            digits = n_to_m_digits_padded(4, 6, padding)
        else:
            digits = exactly_n_digits_padded(4, padding)
        unsigned = exactly_n_digits_padded(4, padding)
    else:
        if extended:
            digits = n_to_m_digits_padded(2, 4, padding)
        else:
            digits = exactly_n_digits_padded(2, padding)
        unsigned = n_to_m_digits_padded(1, 2, padding)
    return _signed(data, pos, digits, unsigned, component.sign_is_mandatory)


def parse_month(data: bytes, pos: int, component: c.Component) -> Optional[ParsedItem]:
    if isinstance(component, c.MonthNumerical):
        item = exactly_n_digits_padded(2, component.padding)(data, pos)
        if item is None or not 1 <= item.value <= 12:
            return None
        return ParsedItem(item.pos, Month(item.value))
    table = _MONTHS_LONG if isinstance(component, c.MonthLong) else _MONTHS_SHORT
    return _NAME_PARSERS[(table, component.case_sensitive)](data, pos)


def parse_weekday(data: bytes, pos: int, component: c.Component) -> Optional[ParsedItem]:
    if isinstance(component, (c.WeekdayLong, c.WeekdayShort)):
        table = _WEEKDAYS_LONG if isinstance(component, c.WeekdayLong) else _WEEKDAYS_SHORT
        return _NAME_PARSERS[(table, component.case_sensitive)](data, pos)
    item = exactly_n_digits(1)(data, pos)
    if item is None:
        return None
    days = item.value - (1 if component.one_indexed else 0)
    if not 0 <= days <= 6:
        return None
    if isinstance(component, c.WeekdaySunday):
        return ParsedItem(item.pos, Weekday.from_sunday(days))
    return ParsedItem(item.pos, Weekday.from_monday(days))


def _nonzero(item: Optional[ParsedItem]) -> Optional[ParsedItem]:
    if item is None or item.value == 0:
        return None
    return item


def parse_ordinal(data: bytes, pos: int, component: c.Ordinal) -> Optional[ParsedItem]:
    return _nonzero(exactly_n_digits_padded(3, component.padding)(data, pos))


def parse_day(data: bytes, pos: int, component: c.Day) -> Optional[ParsedItem]:
    return _nonzero(exactly_n_digits_padded(2, component.padding)(data, pos))


def parse_two_digits(data: bytes, pos: int, component: c.Component) -> Optional[ParsedItem]:
    """Parse a two-digit field: hours, minutes, seconds, week numbers and offset parts."""
    return exactly_n_digits_padded(2, component.padding)(data, pos)


def parse_period(data: bytes, pos: int, component: c.Period) -> Optional[ParsedItem]:
    """Parse AM or PM; the value is True for PM."""
    head = data[pos:pos + 2]
    expected = (b"AM", b"PM") if component.is_uppercase else (b"am", b"pm")
    if not component.case_sensitive:
        head = head.upper()
        expected = (b"AM", b"PM")
    if head == expected[0]:
        return ParsedItem(pos + 2, False)
    if head == expected[1]:
        return ParsedItem(pos + 2, True)
    return None


def parse_subsecond(data: bytes, pos: int, component: c.Subsecond) -> Optional[ParsedItem]:
    """Parse the fraction of a second as nanoseconds."""
    if component.digits is not SubsecondDigits.ONE_OR_MORE:
        count = component.digits.count
        item = exactly_n_digits(count)(data, pos)
        if item is None:
            return None
        return ParsedItem(item.pos, item.value * 10 ** (9 - count))
    item = any_digit(data, pos)
    if item is None:
        return None
    value = item.value * 100_000_000
    multiplier = 10_000_000
    pos = item.pos
    item = any_digit(data, pos)
    while item is not None:
        # Digits past the ninth are accepted but do not change the value.
        value += item.value * multiplier
        multiplier //= 10
        pos = item.pos
        item = any_digit(data, pos)
    return ParsedItem(pos, value)


def parse_offset_hour(data: bytes, pos: int, component: c.OffsetHour) -> Optional[ParsedItem]:
    """Parse the signed offset hour; the value is the hour and whether it was negative."""
    hour = exactly_n_digits_padded(2, component.padding)
    return _signed(data, pos, hour, hour, component.sign_is_mandatory)


def parse_ignore(data: bytes, pos: int, component: c.Ignore) -> Optional[ParsedItem]:
    if pos + component.count > len(data):
        return None
    return ParsedItem(pos + component.count, None)


def parse_unix_timestamp(
    data: bytes, pos: int, component: c.UnixTimestamp
) -> Optional[ParsedItem]:
    """Parse a Unix timestamp of any precision as nanoseconds."""
    digits = n_to_m_digits(1, component.max_digits)
    item = _signed(data, pos, digits, digits, component.sign_is_mandatory)
    if item is None:
        return None
    value, _ = item.value
    return ParsedItem(item.pos, value * component.nanos_per_unit)


def parse_end(data: bytes, pos: int, component: c.End) -> Optional[ParsedItem]:
    if component.trailing_input is TrailingInput.DISCARD:
        return ParsedItem(len(data), None)
    if pos != len(data):
        return None
    return ParsedItem(pos, None)


def _set_year(parsed: Parsed, component: c.Year, value: Tuple[int, bool]) -> bool:
    year, is_negative = value
    prefix = "iso_year" if component.iso_week_based else "year"
    if component.year_repr is YearRepr.FULL:
        return parsed.set(prefix, year)
    if component.year_repr is YearRepr.LAST_TWO:
        return parsed.set(f"{prefix}_last_two", year)
    return parsed.set(f"{prefix}_century", abs(year)) and parsed.set(
        f"{prefix}_century_is_negative", is_negative
    )


def _set_offset_hour(parsed: Parsed, component: c.OffsetHour, value: Tuple[int, bool]) -> bool:
    hour, is_negative = value
    return parsed.set("offset_hour", hour) and parsed.set("offset_is_negative", is_negative)


def _field(name: str) -> Callable[[Parsed, c.Component, object], bool]:
    return lambda parsed, component, value: parsed.set(name, value)


def _ignored(parsed: Parsed, component: c.Component, value: object) -> bool:
    return True


_Parse = Callable[[bytes, int, c.Component], Optional[ParsedItem]]
_Store = Callable[[Parsed, c.Component, object], bool]

_COMPONENTS: Dict[Type[c.Component], Tuple[_Parse, _Store]] = {
    c.Day: (parse_day, _field("day")),
    c.MonthNumerical: (parse_month, _field("month")),
    c.MonthShort: (parse_month, _field("month")),
    c.MonthLong: (parse_month, _field("month")),
    c.Ordinal: (parse_ordinal, _field("ordinal")),
    c.WeekdayShort: (parse_weekday, _field("weekday")),
    c.WeekdayLong: (parse_weekday, _field("weekday")),
    c.WeekdaySunday: (parse_weekday, _field("weekday")),
    c.WeekdayMonday: (parse_weekday, _field("weekday")),
    c.WeekNumberIso: (parse_two_digits, _field("iso_week_number")),
    c.WeekNumberSunday: (parse_two_digits, _field("sunday_week_number")),
    c.WeekNumberMonday: (parse_two_digits, _field("monday_week_number")),
    c.Hour12: (parse_two_digits, _field("hour_12")),
    c.Hour24: (parse_two_digits, _field("hour_24")),
    c.Minute: (parse_two_digits, _field("minute")),
    c.Period: (parse_period, _field("hour_12_is_pm")),
    c.Second: (parse_two_digits, _field("second")),
    c.Subsecond: (parse_subsecond, _field("subsecond")),
    c.OffsetHour: (parse_offset_hour, _set_offset_hour),
    c.OffsetMinute: (parse_two_digits, _field("offset_minute")),
    c.OffsetSecond: (parse_two_digits, _field("offset_second")),
    c.Ignore: (parse_ignore, _ignored),
    c.End: (parse_end, _ignored),
}


def _lookup(component: c.Component) -> Tuple[_Parse, _Store]:
    if isinstance(component, c.Year):
        return parse_year, _set_year
    if isinstance(component, c.UnixTimestamp):
        return parse_unix_timestamp, _field("unix_timestamp_nanos")
    return _COMPONENTS[type(component)]


def parse_component(parsed: Parsed, data: bytes, pos: int, component: c.Component) -> int:
    """Parse one component at `pos` into `parsed`, returning the position after it.

    `parsed` is left untouched when the component does not match or its value
    is out of range.
    """
    parse, store = _lookup(component)
    item = parse(data, pos, component)
    if item is None:
        raise InvalidComponent(component.name)
    attempt = parsed.copy()
    if not store(attempt, component, item.value):
        raise InvalidComponent(component.name)
    parsed.assign(attempt)
    return item.pos
