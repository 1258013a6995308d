"""Writing ISO 8601 values as described by an `Iso8601Config`."""

from typing import Optional

from ..description.well_known import DateKind, Iso8601Config, OffsetPrecision, TimePrecision
from ..errors import InsufficientTypeInformation, InvalidFormatComponent
from ..values import Date, Time, UtcOffset

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MINUTE = 60 * _NANOS_PER_SECOND
_NANOS_PER_HOUR = 60 * _NANOS_PER_MINUTE


def _fraction(nanos: int, unit: int, digits: Optional[int]) -> str:
    """Write the truncated fraction of `unit` that `nanos` represents."""
    if digits is None:
        return ""
    return f".{nanos * 10 ** digits // unit:0{digits}}"


def format_date(config: Iso8601Config, date: Date) -> str:
    separator = "-" if config.use_separators else ""
    year = date.iso_year if config.date_kind is DateKind.WEEK else date.year
    if config.year_is_six_digits:
        text = f"{'-' if year < 0 else '+'}{abs(year):06}"
    elif 0 <= year <= 9_999:
        text = f"{year:04}"
    else:
        raise InvalidFormatComponent("year")

    if config.date_kind is DateKind.CALENDAR:
        return f"{text}{separator}{date.month.value:02}{separator}{date.day:02}"
    if config.date_kind is DateKind.WEEK:
        weekday = date.weekday.value
        return f"{text}{separator}W{date.iso_week:02}{separator}{weekday}"
    return f"{text}{separator}{date.ordinal:03}"


def format_time(config: Iso8601Config, time: Time, date_is_formatted: bool) -> str:
    separator = ":" if config.use_separators else ""
    text = "T" if config.use_separators or date_is_formatted else ""
    hour, minute, second, nanosecond = time.as_hms_nano()
    digits = config.decimal_digits
    text += f"{hour:02}"
    if config.time_precision is TimePrecision.HOUR:
        nanos = time.nanos_since_midnight() - hour * _NANOS_PER_HOUR
        return text + _fraction(nanos, _NANOS_PER_HOUR, digits)
    text += f"{separator}{minute:02}"
    if config.time_precision is TimePrecision.MINUTE:
        nanos = second * _NANOS_PER_SECOND + nanosecond
        return text + _fraction(nanos, _NANOS_PER_MINUTE, digits)
    text += f"{separator}{second:02}"
    return text + _fraction(nanosecond, _NANOS_PER_SECOND, digits)


def format_offset(config: Iso8601Config, offset: UtcOffset, time_is_formatted: bool) -> str:
    if time_is_formatted and offset.is_utc:
        return "Z"
    hours, minutes, seconds = (abs(part) for part in offset.as_hms())
    if seconds:
        raise InvalidFormatComponent("offset_second")
    text = f"{'-' if offset.is_negative else '+'}{hours:02}"
    if config.offset_precision is OffsetPrecision.HOUR:
        if minutes:
            raise InvalidFormatComponent("offset_minute")
        return text
    separator = ":" if config.use_separators else ""
    return f"{text}{separator}{minutes:02}"


def format_iso8601(
    config: Iso8601Config,
    date: Optional[Date],
    time: Optional[Time],
    offset: Optional[UtcOffset],
) -> str:
    """Write the parts of the value that the configuration selects."""
    components = config.formatted_components
    text = ""
    if components.has_date:
        if date is None:
            raise InsufficientTypeInformation()
        text += format_date(config, date)
    if components.has_time:
        if time is None:
            raise InsufficientTypeInformation()
        text += format_time(config, time, components.has_date)
    if components.has_offset:
        if offset is None:
            raise InsufficientTypeInformation()
        text += format_offset(config, offset, components.has_time)
    return text


def max_bytes_needed(config: Iso8601Config) -> int:
    """The longest output the configuration can produce."""
    components = config.formatted_components
    separators = config.use_separators
    size = 0
    if components.has_date:
        size += 7 if config.year_is_six_digits else 4
        if config.date_kind is DateKind.ORDINAL:
            size += 3 + (1 if separators else 0)
        else:
            size += 4 + (2 if separators else 0)
    if components.has_time:
        size += 1 if separators or components.has_date else 0
        size += {TimePrecision.HOUR: 2, TimePrecision.MINUTE: 4, TimePrecision.SECOND: 6}[
            config.time_precision
        ]
        if separators:
            size += {TimePrecision.HOUR: 0, TimePrecision.MINUTE: 1, TimePrecision.SECOND: 2}[
                config.time_precision
            ]
        if config.decimal_digits is not None:
            size += 1 + config.decimal_digits
    if components.has_offset:
        if config.offset_precision is OffsetPrecision.HOUR:
            size += 3
        else:
            size += 6 if separators else 5
    return size
