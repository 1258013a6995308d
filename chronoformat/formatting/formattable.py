"""Format values with a format description or one of the well-known formats."""

import io
from datetime import date as _date
from datetime import datetime as _datetime
from datetime import time as _time
from typing import Any, BinaryIO, Iterator, Optional, Tuple

from ..description import component as c
from ..description.items import Compound, First, Literal, Optional as OptionalItem, StringLiteral
from ..description.well_known import Iso8601, Rfc2822, Rfc3339
from ..errors import InsufficientTypeInformation, InvalidFormatComponent, WriteError
from ..values import (
    Date,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
)
from .component import format_component
from .iso8601 import format_iso8601

_Parts = Tuple[Optional[Date], Optional[Time], Optional[UtcOffset]]


def _parts(value: Any) -> _Parts:
    """Split a value into its date, time and offset, any of which may be None."""
    if isinstance(value, _datetime):
        if value.utcoffset() is None:
            value = PrimitiveDateTime.from_py_datetime(value)
        else:
            value = OffsetDateTime.from_py_datetime(value)
    elif isinstance(value, _date):
        value = Date.from_py_date(value)
    elif isinstance(value, _time):
        value = Time.from_py_time(value)

    if isinstance(value, Date):
        return value, None, None
    if isinstance(value, Time):
        return None, value, None
    if isinstance(value, UtcOffset):
        return None, None, value
    if isinstance(value, (PrimitiveDateTime, UtcDateTime)):
        offset = value.offset if isinstance(value, UtcDateTime) else None
        return value.date, value.time, offset
    if isinstance(value, OffsetDateTime):
        return value.date, value.time, value.offset
    raise TypeError(f"cannot format {type(value).__name__} values")


def _format_item(item: Any, parts: _Parts) -> Iterator[bytes]:
    if isinstance(item, Literal):
        yield item.value
    elif isinstance(item, StringLiteral):
        yield item.value.encode()
    elif isinstance(item, c.Component):
        yield format_component(item, *parts).encode()
    elif isinstance(item, OptionalItem):
        yield from _format_item(item.item, parts)
    elif isinstance(item, First):
        if item.items:
            yield from _format_item(item.items[0], parts)
    elif isinstance(item, (Compound, list, tuple)):
        for part in getattr(item, "items", item):
            yield from _format_item(part, parts)
    elif isinstance(item, Rfc3339):
        yield _format_rfc3339(*parts).encode()
    elif isinstance(item, Rfc2822):
        yield _format_rfc2822(*parts).encode()
    elif isinstance(item, Iso8601):
        yield format_iso8601(item.config, *parts).encode()
    else:
        raise TypeError(f"{item!r} is not a format description")


def _require_all(date: Optional[Date], time: Optional[Time], offset: Optional[UtcOffset]):
    if date is None or time is None or offset is None:
        raise InsufficientTypeInformation()


def _format_rfc3339(date: Date, time: Time, offset: UtcOffset) -> str:
    _require_all(date, time, offset)
    year, month, day = date.to_calendar_date()
    if not 0 <= year <= 9_999:
        raise InvalidFormatComponent("year")
    hours, minutes, seconds = (abs(part) for part in offset.as_hms())
    if hours > 23:
        raise InvalidFormatComponent("offset_hour")
    if seconds:
        raise InvalidFormatComponent("offset_second")

    hour, minute, second, nanosecond = time.as_hms_nano()
    text = f"{year:04}-{month.value:02}-{day:02}T{hour:02}:{minute:02}:{second:02}"
    if nanosecond:
        text += f".{nanosecond:09}".rstrip("0")
    if offset.is_utc:
        return text + "Z"
    sign = "-" if offset.is_negative else "+"
    return f"{text}{sign}{hours:02}:{minutes:02}"


def _format_rfc2822(date: Date, time: Time, offset: UtcOffset) -> str:
    _require_all(date, time, offset)
    year, month, day = date.to_calendar_date()
    if not 1_900 <= year <= 9_999:
        raise InvalidFormatComponent("year")
    hours, minutes, seconds = (abs(part) for part in offset.as_hms())
    if seconds:
        raise InvalidFormatComponent("offset_second")

    sign = "-" if offset.is_negative else "+"
    return (
        f"{date.weekday.short_name}, {day:02} {month.short_name} {year:04} "
        f"{time.hour:02}:{time.minute:02}:{time.second:02} {sign}{hours:02}{minutes:02}"
    )


def format_into(output: BinaryIO, value: Any, description: Any) -> int:
    """Write `value` to a binary stream, returning the number of bytes written.

    Output written before an error is detected is not taken back.
    """
    parts = _parts(value)
    written = 0
    for chunk in _format_item(description, parts):
        try:
            output.write(chunk)
        except OSError as e:
            raise WriteError(str(e)) from e
        written += len(chunk)
    return written


def format(value: Any, description: Any) -> str:
    """Format `value` as text."""
    buffer = io.BytesIO()
    format_into(buffer, value, description)
    return buffer.getvalue().decode(errors="replace")
