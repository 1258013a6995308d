"""Parse text with a format description or one of the well-known formats."""

import logging
from typing import Any, Callable, Dict, Optional, Tuple, Union

import abnf

from ..description import component as c
from ..description.items import Compound, First, Literal, Optional as OptionalItem, StringLiteral
from ..description.well_known import Iso8601, Rfc2822, Rfc3339
from ..errors import (
    InvalidComponent,
    InvalidLiteral,
    ParsedComponentRange,
    ParseFromDescription,
    UnexpectedTrailingCharacters,
)
from ..grammars import rfc2822 as rfc2822_grammar
from ..grammars import rfc3339 as rfc3339_grammar
from ..values import (
    Date,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
)
from . import iso8601
from .combinator import ascii_char, exactly_n_digits, one_or_two_digits, opt, sign
from .component import parse_component, parse_month, parse_subsecond, parse_weekday
from .iso8601 import ExtendedKind
from .parsed import Parsed
from .rfc2822 import cfws, fws, zone_literal

logger = logging.getLogger(__name__)

_two_digits = exactly_n_digits(2)
_four_digits = exactly_n_digits(4)
_dash = ascii_char(b"-")
_colon = ascii_char(b":")
_comma = ascii_char(b",")
_opt_cfws = opt(cfws)

_SUBSECOND = c.Subsecond()
_RFC2822_WEEKDAY = c.WeekdayShort(case_sensitive=False)
_RFC2822_MONTH = c.MonthShort(case_sensitive=False)


def _as_bytes(text: Union[str, bytes]) -> bytes:
    return text.encode() if isinstance(text, str) else bytes(text)


def _set(parsed: Parsed, field: str, value: Any, name: str) -> None:
    if not parsed.set(field, value):
        raise InvalidComponent(name)


def _set_in_range(parsed: Parsed, field: str, value: Any, name: str) -> None:
    if not parsed.set(field, value):
        raise ParsedComponentRange(name)


def _set_utc(parsed: Parsed) -> None:
    parsed.set("offset_hour", 0)
    parsed.set("offset_minute", 0)
    parsed.set("offset_second", 0)
    parsed.set("offset_is_negative", False)


def _parse_item(item: Any, data: bytes, pos: int, parsed: Parsed) -> int:
    if isinstance(item, Literal):
        if not data.startswith(item.value, pos):
            raise InvalidLiteral()
        return pos + len(item.value)
    if isinstance(item, StringLiteral):
        return _parse_item(Literal(item.value.encode()), data, pos, parsed)
    if isinstance(item, c.Component):
        return parse_component(parsed, data, pos, item)
    if isinstance(item, Compound):
        return _parse_items(item.items, data, pos, parsed)
    if isinstance(item, OptionalItem):
        attempt = parsed.copy()
        try:
            end = _parse_item(item.item, data, pos, attempt)
        except ParseFromDescription as e:
            logger.debug("optional item skipped at byte %d: %s", pos, e)
            return pos
        parsed.assign(attempt)
        return end
    if isinstance(item, First):
        first_error: Optional[ParseFromDescription] = None
        for alternative in item.items:
            attempt = parsed.copy()
            try:
                end = _parse_item(alternative, data, pos, attempt)
            except ParseFromDescription as e:
                logger.debug("alternative rejected at byte %d: %s", pos, e)
                if first_error is None:
                    first_error = e
                continue
            parsed.assign(attempt)
            return end
        if first_error is not None:
            raise first_error
        return pos
    raise TypeError(f"{item!r} is not a format description item")


def _parse_items(items: Any, data: bytes, pos: int, parsed: Parsed) -> int:
    attempt = parsed.copy()
    for item in items:
        pos = _parse_item(item, data, pos, attempt)
    parsed.assign(attempt)
    return pos


def _parse_rfc3339(data: bytes, pos: int, parsed: Parsed) -> int:
    item = _four_digits(data, pos)
    if item is None:
        raise InvalidComponent("year")
    _set(parsed, "year", item.value, "year")
    pos = _expect(_dash, data, item.pos)
    pos = _two_digit_field(data, pos, parsed, "month", "month")
    pos = _expect(_dash, data, pos)
    pos = _two_digit_field(data, pos, parsed, "day", "day")

    # Any single byte separates the date and time, not only `T`.
    if pos >= len(data):
        raise InvalidComponent("separator")
    pos += 1

    pos = _two_digit_field(data, pos, parsed, "hour_24", "hour")
    pos = _expect(_colon, data, pos)
    pos = _two_digit_field(data, pos, parsed, "minute", "minute")
    pos = _expect(_colon, data, pos)
    pos = _two_digit_field(data, pos, parsed, "second", "second")
    if data[pos:pos + 1] == b".":
        item = parse_subsecond(data, pos + 1, _SUBSECOND)
        if item is None:
            raise InvalidComponent("subsecond")
        _set(parsed, "subsecond", item.value, "subsecond")
        pos = item.pos

    parsed.leap_second_allowed = True

    if data[pos:pos + 1] in (b"Z", b"z"):
        _set_utc(parsed)
        return pos + 1

    signed = sign(data, pos)
    if signed is None:
        raise InvalidComponent("offset hour")
    item = _two_digits(data, signed.pos)
    if item is None or item.value > 23:
        raise InvalidComponent("offset hour")
    _set(parsed, "offset_hour", signed.value * item.value, "offset hour")
    parsed.set("offset_is_negative", signed.value < 0)
    pos = _expect(_colon, data, item.pos)
    item = _two_digits(data, pos)
    if item is None:
        raise InvalidComponent("offset minute")
    _set_in_range(parsed, "offset_minute", signed.value * item.value, "offset minute")
    return item.pos


def _expect(parser: Callable, data: bytes, pos: int) -> int:
    item = parser(data, pos)
    if item is None:
        raise InvalidLiteral()
    return item.pos


def _two_digit_field(data: bytes, pos: int, parsed: Parsed, field: str, name: str) -> int:
    """Read two digits that must be present; a value out of range is a range error."""
    item = _two_digits(data, pos)
    if item is None:
        raise InvalidComponent(name)
    _set_in_range(parsed, field, item.value, name)
    return item.pos


def _parse_rfc2822(data: bytes, pos: int, parsed: Parsed) -> int:
    pos = _opt_cfws(data, pos).pos
    item = parse_weekday(data, pos, _RFC2822_WEEKDAY)
    if item is not None:
        _set(parsed, "weekday", item.value, "weekday")
        pos = _expect(_comma, data, item.pos)
        pos = _opt_cfws(data, pos).pos

    item = one_or_two_digits(data, pos)
    if item is None:
        raise InvalidComponent("day")
    _set(parsed, "day", item.value, "day")
    pos = _expect(cfws, data, item.pos)

    item = parse_month(data, pos, _RFC2822_MONTH)
    if item is None:
        raise InvalidComponent("month")
    _set(parsed, "month", item.value, "month")
    pos = _expect(cfws, data, item.pos)

    item = _four_digits(data, pos)
    if item is not None:
        if item.value < 1900:
            raise InvalidComponent("year")
        _set(parsed, "year", item.value, "year")
        pos = _expect(fws, data, item.pos)
    else:
        item = _two_digits(data, pos)
        if item is None:
            raise InvalidComponent("year")
        year = item.value + (2000 if item.value < 50 else 1900)
        _set(parsed, "year", year, "year")
        pos = _expect(cfws, data, item.pos)

    pos = _rfc2822_field(data, pos, parsed, "hour_24", "hour")
    pos = _opt_cfws(data, pos).pos
    pos = _expect(_colon, data, pos)
    pos = _opt_cfws(data, pos).pos
    pos = _rfc2822_field(data, pos, parsed, "minute", "minute")

    colon = _colon(data, _opt_cfws(data, pos).pos)
    if colon is not None:
        pos = _opt_cfws(data, colon.pos).pos
        pos = _rfc2822_field(data, pos, parsed, "second", "second")
    pos = _expect(cfws, data, pos)

    parsed.leap_second_allowed = True

    zone = zone_literal(data, pos)
    if zone is not None:
        _set(parsed, "offset_hour", zone.value, "offset hour")
        _set(parsed, "offset_minute", 0, "offset minute")
        _set(parsed, "offset_second", 0, "offset second")
        return zone.pos

    signed = sign(data, pos)
    if signed is None:
        raise InvalidComponent("offset hour")
    item = _two_digits(data, signed.pos)
    if item is None:
        raise InvalidComponent("offset hour")
    _set(parsed, "offset_hour", signed.value * item.value, "offset hour")
    parsed.set("offset_is_negative", signed.value < 0)
    pos = _rfc2822_field(data, item.pos, parsed, "offset_minute", "offset minute")
    return _opt_cfws(data, pos).pos


def _rfc2822_field(data: bytes, pos: int, parsed: Parsed, field: str, name: str) -> int:
    item = _two_digits(data, pos)
    if item is None:
        raise InvalidComponent(name)
    _set(parsed, field, item.value, name)
    return item.pos


def _grammar_parse(rule: Any, data: bytes, label: str) -> Any:
    """Apply an ABNF rule to the whole input; a mismatch is an invalid literal."""
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError as e:
        raise InvalidLiteral(f"{label} input must be ASCII") from e
    try:
        return rule.parse_all(text)
    except abnf.ParseError as e:
        logger.debug("%s grammar rejected %r: %s", label, text, e)
        raise InvalidLiteral(f"input does not match the {label} grammar") from e


def _find(node: Any, name: str) -> Any:
    """Find the first node named `name`, searching depth first."""
    if node.name == name:
        return node
    for child in node.children:
        found = _find(child, name)
        if found is not None:
            return found
    return None


def _parse_rfc3339_abnf(data: bytes, pos: int, parsed: Parsed) -> int:
    node = _grammar_parse(rfc3339_grammar.Rule("date-time"), data[pos:], "RFC 3339")

    _set(parsed, "year", int(_find(node, "date-fullyear").value), "year")
    _set_in_range(parsed, "month", int(_find(node, "date-month").value), "month")
    _set_in_range(parsed, "day", int(_find(node, "date-mday").value), "day")
    time = _find(node, "partial-time")
    _set_in_range(parsed, "hour_24", int(_find(time, "time-hour").value), "hour")
    _set_in_range(parsed, "minute", int(_find(time, "time-minute").value), "minute")
    _set_in_range(parsed, "second", int(_find(time, "time-second").value), "second")
    secfrac = _find(time, "time-secfrac")
    if secfrac is not None:
        item = parse_subsecond(secfrac.value.encode(), 1, _SUBSECOND)
        _set(parsed, "subsecond", item.value, "subsecond")

    parsed.leap_second_allowed = True

    offset = _find(node, "time-numoffset")
    if offset is None:
        _set_utc(parsed)
        return len(data)
    negative = offset.value.startswith("-")
    hour = int(_find(offset, "time-hour").value)
    if hour > 23:
        raise InvalidComponent("offset hour")
    minute = int(_find(offset, "time-minute").value)
    _set(parsed, "offset_hour", -hour if negative else hour, "offset hour")
    parsed.set("offset_is_negative", negative)
    _set_in_range(parsed, "offset_minute", -minute if negative else minute, "offset minute")
    return len(data)


def _parse_rfc2822_abnf(data: bytes, pos: int, parsed: Parsed) -> int:
    node = _grammar_parse(rfc2822_grammar.Rule("date-time"), data[pos:], "RFC 2822")

    day_name = _find(node, "day-name")
    if day_name is not None:
        weekday = parse_weekday(day_name.value.encode(), 0, _RFC2822_WEEKDAY).value
        _set(parsed, "weekday", weekday, "weekday")
    _set(parsed, "day", int(_find(node, "day").value.strip(" \t\r\n")), "day")
    month = parse_month(_find(node, "month-name").value.encode(), 0, _RFC2822_MONTH).value
    _set(parsed, "month", month, "month")
    year = int(_find(node, "year").value)
    if year < 1900:
        raise InvalidComponent("year")
    _set(parsed, "year", year, "year")
    _set(parsed, "hour_24", int(_find(node, "hour").value), "hour")
    _set(parsed, "minute", int(_find(node, "minute").value), "minute")
    second = _find(node, "second")
    if second is not None:
        _set(parsed, "second", int(second.value), "second")

    parsed.leap_second_allowed = True

    zone = _find(node, "zone")
    zone_hour = _find(zone, "zone-hour")
    if zone_hour is None:
        hours = zone_literal(zone.value.encode(), 0).value
        _set(parsed, "offset_hour", hours, "offset hour")
        _set(parsed, "offset_minute", 0, "offset minute")
        _set(parsed, "offset_second", 0, "offset second")
        return len(data)
    negative = zone.value.startswith("-")
    hour = int(zone_hour.value)
    minute = int(_find(zone, "zone-minute").value)
    _set(parsed, "offset_hour", -hour if negative else hour, "offset hour")
    parsed.set("offset_is_negative", negative)
    _set(parsed, "offset_minute", minute, "offset minute")
    return len(data)


def _iso_date(data: bytes, pos: int, parsed: Parsed, kind: ExtendedKind) -> Tuple[int, ExtendedKind]:
    item = iso8601.year(data, pos)
    if item is None:
        raise InvalidComponent("year")
    year = item.value
    pos = item.pos
    extended = data[pos:pos + 1] == b"-"
    if extended:
        pos += 1
    kind = ExtendedKind.EXTENDED if extended else ExtendedKind.BASIC

    try:
        return _iso_calendar_date(data, pos, parsed, year, extended), kind
    except ParseFromDescription as e:
        error = e

    item = iso8601.dayo(data, pos)
    if item is not None:
        _set(parsed, "year", year, "year")
        _set(parsed, "ordinal", item.value, "ordinal")
        return item.pos, kind

    if data[pos:pos + 1] == b"W":
        return _iso_week_date(data, pos + 1, parsed, year, extended), kind
    raise error


def _iso_calendar_date(data: bytes, pos: int, parsed: Parsed, year: int, extended: bool) -> int:
    attempt = parsed.copy()
    item = iso8601.month(data, pos)
    if item is None:
        raise InvalidComponent("month")
    _set(attempt, "year", year, "year")
    _set(attempt, "month", item.value, "month")
    pos = _expect(_dash, data, item.pos) if extended else item.pos
    item = iso8601.day(data, pos)
    if item is None:
        raise InvalidComponent("day")
    _set(attempt, "day", item.value, "day")
    parsed.assign(attempt)
    return item.pos


def _iso_week_date(data: bytes, pos: int, parsed: Parsed, year: int, extended: bool) -> int:
    item = iso8601.week(data, pos)
    if item is None:
        raise InvalidComponent("week")
    _set(parsed, "iso_year", year, "year")
    _set(parsed, "iso_week_number", item.value, "week")
    pos = _expect(_dash, data, item.pos) if extended else item.pos
    item = iso8601.dayk(data, pos)
    if item is None:
        raise InvalidComponent("weekday")
    _set(parsed, "weekday", item.value, "weekday")
    return item.pos


_NANOS_PER_MINUTE = 60_000_000_000
_NANOS_PER_HOUR = 60 * _NANOS_PER_MINUTE


def _set_clock(parsed: Parsed, minute: int, second: int, subsecond: int) -> None:
    _set(parsed, "minute", minute, "minute")
    _set(parsed, "second", second, "second")
    _set(parsed, "subsecond", subsecond, "subsecond")


def _split_nanos(nanos: int) -> Tuple[int, int, int]:
    minute, nanos = divmod(nanos, _NANOS_PER_MINUTE)
    second, subsecond = divmod(nanos, 1_000_000_000)
    return minute, second, subsecond


def _iso_next_field(
    data: bytes, pos: int, kind: ExtendedKind, name: str
) -> Tuple[Optional[Any], int, ExtendedKind]:
    """Read the minute or second, following the separator style already seen.

    Returns None as the item when the field is absent.
    """
    if data[pos:pos + 1] == b":":
        extended = kind.coerce_extended()
        if extended is None:
            raise InvalidLiteral()
        item = iso8601.fractional(data, pos + 1)
        if item is None:
            raise InvalidComponent(name)
        return item, item.pos, extended
    if kind is not ExtendedKind.EXTENDED:
        item = iso8601.fractional(data, pos)
        if item is not None:
            return item, item.pos, ExtendedKind.BASIC
    return None, pos, kind


def _iso_time(
    data: bytes, pos: int, parsed: Parsed, kind: ExtendedKind, date_is_present: bool
) -> Tuple[int, ExtendedKind]:
    if data[pos:pos + 1] in (b"T", b"t"):
        pos += 1
    elif date_is_present:
        raise InvalidLiteral()

    item = iso8601.fractional(data, pos)
    if item is None:
        raise InvalidComponent("hour")
    hour, fraction = item.value
    pos = item.pos
    _set(parsed, "hour_24", hour, "hour")
    if fraction is not None:
        _set_clock(parsed, *_split_nanos(int(fraction * _NANOS_PER_HOUR)))
        return pos, kind

    item, pos, kind = _iso_next_field(data, pos, kind, "minute")
    if item is None:
        _set_clock(parsed, 0, 0, 0)
        return pos, kind
    minute, fraction = item.value
    if fraction is not None:
        _, second, subsecond = _split_nanos(int(fraction * _NANOS_PER_MINUTE))
        _set_clock(parsed, minute, second, subsecond)
        return pos, kind

    item, pos, kind = _iso_next_field(data, pos, kind, "second")
    if item is None:
        _set_clock(parsed, minute, 0, 0)
        return pos, kind
    second, fraction = item.value
    subsecond = 0 if fraction is None else int(fraction * 1_000_000_000)
    _set_clock(parsed, minute, second, subsecond)
    return pos, kind


def _iso_offset(
    data: bytes, pos: int, parsed: Parsed, kind: ExtendedKind
) -> Tuple[int, ExtendedKind]:
    if data[pos:pos + 1] in (b"Z", b"z"):
        _set_utc(parsed)
        return pos + 1, kind

    signed = sign(data, pos)
    if signed is None:
        raise InvalidComponent("offset hour")
    item = _two_digits(data, signed.pos)
    if item is None:
        raise InvalidComponent("offset hour")
    _set(parsed, "offset_hour", signed.value * item.value, "offset hour")
    parsed.set("offset_is_negative", signed.value < 0)
    pos = item.pos

    minute = 0
    if data[pos:pos + 1] == b":" and kind.maybe_extended:
        item = _two_digits(data, pos + 1)
        if item is None:
            raise InvalidComponent("offset minute")
        minute, pos, kind = item.value, item.pos, ExtendedKind.EXTENDED
    elif kind is not ExtendedKind.EXTENDED:
        item = _two_digits(data, pos)
        if item is not None:
            minute, pos, kind = item.value, item.pos, ExtendedKind.BASIC
    _set(parsed, "offset_minute", signed.value * minute, "offset minute")
    return pos, kind


def _iso_section(section: Callable, data: bytes, pos: int, parsed: Parsed, *args: Any) -> Tuple:
    """Run one section on a copy of `parsed`, keeping its fields only if it matches."""
    attempt = parsed.copy()
    result = section(data, pos, attempt, *args)
    parsed.assign(attempt)
    return result


def _parse_iso8601(data: bytes, pos: int, parsed: Parsed) -> int:
    kind = ExtendedKind.UNKNOWN
    date_is_present = time_is_present = offset_is_present = False
    first_error: Optional[ParseFromDescription] = None

    parsed.leap_second_allowed = True

    try:
        pos, kind = _iso_section(_iso_date, data, pos, parsed, kind)
        date_is_present = True
    except ParseFromDescription as e:
        first_error = e

    try:
        pos, kind = _iso_section(_iso_time, data, pos, parsed, kind, date_is_present)
        time_is_present = True
    except ParseFromDescription as e:
        first_error = first_error or e

    # An offset may only follow a date if a time is present too.
    if not date_is_present or time_is_present:
        try:
            pos, kind = _iso_section(_iso_offset, data, pos, parsed, kind)
            offset_is_present = True
        except ParseFromDescription as e:
            first_error = first_error or e

    if not (date_is_present or time_is_present or offset_is_present):
        raise first_error
    return pos


def _parse_well_known(description: Any, data: bytes, pos: int, parsed: Parsed) -> int:
    if isinstance(description, Rfc3339):
        parse = _parse_rfc3339_abnf if description.abnf else _parse_rfc3339
    elif isinstance(description, Rfc2822):
        parse = _parse_rfc2822_abnf if description.abnf else _parse_rfc2822
    else:
        parse = _parse_iso8601
    attempt = parsed.copy()
    pos = parse(data, pos, attempt)
    parsed.assign(attempt)
    return pos


def parse_into(description: Any, text: Union[str, bytes], parsed: Parsed) -> bytes:
    """Parse as much of `text` as `description` covers into `parsed`.

    Returns the input that remains. On failure `parsed` is left as it was.
    """
    data = _as_bytes(text)
    if isinstance(description, (Rfc3339, Rfc2822, Iso8601)):
        pos = _parse_well_known(description, data, 0, parsed)
    elif isinstance(description, (list, tuple)):
        pos = _parse_items(description, data, 0, parsed)
    else:
        attempt = parsed.copy()
        pos = _parse_item(description, data, 0, attempt)
        parsed.assign(attempt)
    return data[pos:]


def parse(description: Any, text: Union[str, bytes]) -> Parsed:
    """Parse the whole of `text`, which must not have anything left over."""
    parsed = Parsed()
    remaining = parse_into(description, text, parsed)
    if remaining:
        raise UnexpectedTrailingCharacters(remaining)
    return parsed


def parse_date(description: Any, text: Union[str, bytes]) -> Date:
    return parse(description, text).to_date()


def parse_time(description: Any, text: Union[str, bytes]) -> Time:
    return parse(description, text).to_time()


def parse_offset(description: Any, text: Union[str, bytes]) -> UtcOffset:
    return parse(description, text).to_offset()


def parse_primitive_date_time(description: Any, text: Union[str, bytes]) -> PrimitiveDateTime:
    return parse(description, text).to_primitive_date_time()


def parse_offset_date_time(description: Any, text: Union[str, bytes]) -> OffsetDateTime:
    return parse(description, text).to_offset_date_time()


def parse_utc_date_time(description: Any, text: Union[str, bytes]) -> UtcDateTime:
    return parse(description, text).to_utc_date_time()


_PARSERS: Dict[type, Callable[[Any, Union[str, bytes]], Any]] = {
    Date: parse_date,
    Time: parse_time,
    UtcOffset: parse_offset,
    PrimitiveDateTime: parse_primitive_date_time,
    OffsetDateTime: parse_offset_date_time,
    UtcDateTime: parse_utc_date_time,
}


def parse_as(cls: type, text: Union[str, bytes], description: Any) -> Any:
    """Parse `text` into a value of the given value type."""
    return _PARSERS[cls](description, text)
