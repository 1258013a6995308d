"""Accumulator for the fields found while parsing, and its conversions."""

from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

from .. import _calendar
from ..errors import ComponentRange, InsufficientInformation, ParsedComponentRange
from ..values import (
    Date,
    Month,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
    Weekday,
)


def _between(lower: int, upper: int) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, int) and not isinstance(value, bool) and (
        lower <= value <= upper
    )


def _instance(cls: type) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, cls)


_FIELDS: Dict[str, Callable[[Any], bool]] = {
    "year": _between(-999_999, 999_999),
    "year_century": _between(0, 9_999),
    "year_century_is_negative": _instance(bool),
    "year_last_two": _between(0, 99),
    "iso_year": _between(-999_999, 999_999),
    "iso_year_century": _between(0, 9_999),
    "iso_year_century_is_negative": _instance(bool),
    "iso_year_last_two": _between(0, 99),
    "month": _instance(Month),
    "sunday_week_number": _between(0, 53),
    "monday_week_number": _between(0, 53),
    "iso_week_number": _between(1, 53),
    "weekday": _instance(Weekday),
    "ordinal": _between(1, 366),
    "day": _between(1, 31),
    "hour_24": _between(0, 23),
    "hour_12": _between(1, 12),
    "hour_12_is_pm": _instance(bool),
    "minute": _between(0, 59),
    "second": _between(0, 60),
    "subsecond": _between(0, 999_999_999),
    "offset_hour": _between(-23, 23),
    "offset_minute": _between(-59, 59),
    "offset_second": _between(-59, 59),
    "offset_is_negative": _instance(bool),
    "unix_timestamp_nanos": _instance(int),
}


@contextmanager
def _component_range() -> Iterator[None]:
    """Report range failures of the value constructors as parse failures."""
    try:
        yield
    except ParsedComponentRange:
        raise
    except ComponentRange as e:
        raise ParsedComponentRange(e.name, e.is_conditional) from e


def _week_adjustment(jan_1_days_from_week_start: int) -> int:
    return jan_1_days_from_week_start or 7


class Parsed:
    """Fields collected while parsing, each None until a component sets it.

    Setting a field that is already set overwrites the earlier value. The
    conversions (`to_date`, `to_time`, ...) combine whichever fields are
    present into a value, raising `InsufficientInformation` when too few are.
    """

    __slots__ = tuple(_FIELDS) + ("leap_second_allowed",)

    def __init__(self) -> None:
        for field in _FIELDS:
            setattr(self, field, None)
        self.leap_second_allowed = False

    def set(self, field: str, value: Any) -> bool:
        """Store a value if it is in range for the field; False if it is rejected."""
        if field == "month" and isinstance(value, int) and not isinstance(value, Month):
            if not 1 <= value <= 12:
                return False
            value = Month(value)
        if not _FIELDS[field](value):
            return False
        setattr(self, field, value)
        return True

    def copy(self) -> "Parsed":
        """Return an independent copy of every field."""
        other = Parsed.__new__(Parsed)
        other.assign(self)
        return other

    def assign(self, other: "Parsed") -> None:
        """Overwrite every field with the values held by `other`."""
        for field in self.__slots__:
            setattr(self, field, getattr(other, field))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Parsed):
            return NotImplemented
        return all(getattr(self, field) == getattr(other, field) for field in self.__slots__)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{field}={getattr(self, field)!r}"
            for field in _FIELDS
            if getattr(self, field) is not None
        )
        return f"Parsed({fields})"

    @staticmethod
    def _combined_year(
        full: Optional[int], century: Optional[int], is_negative: Optional[bool],
        last_two: Optional[int],
    ) -> Optional[int]:
        if full is not None:
            return full
        if century is None or last_two is None:
            return None
        value = century * 100 + last_two
        return -value if is_negative else value

    @property
    def calendar_year(self) -> Optional[int]:
        """The calendar year, from the full year or its century and last two digits."""
        return self._combined_year(
            self.year, self.year_century, self.year_century_is_negative, self.year_last_two
        )

    @property
    def iso_week_year(self) -> Optional[int]:
        """The ISO week-numbering year, built like `calendar_year`."""
        return self._combined_year(
            self.iso_year,
            self.iso_year_century,
            self.iso_year_century_is_negative,
            self.iso_year_last_two,
        )

    def to_date(self) -> Date:
        year = self.calendar_year
        with _component_range():
            if year is not None and self.month is not None and self.day is not None:
                return Date.from_calendar_date(year, self.month, self.day)
            if year is not None and self.ordinal is not None:
                return Date.from_ordinal_date(year, self.ordinal)
            iso_year = self.iso_week_year
            if (
                iso_year is not None
                and self.iso_week_number is not None
                and self.weekday is not None
            ):
                return Date.from_iso_week_date(iso_year, self.iso_week_number, self.weekday)
            if year is not None and self.weekday is not None:
                jan_1 = _calendar.weekday_from_monday(year, 1)
                if self.sunday_week_number is not None:
                    adjustment = _week_adjustment((jan_1 + 1) % 7)
                    ordinal = (
                        self.sunday_week_number * 7
                        + self.weekday.number_days_from_sunday()
                        - adjustment
                        + 1
                    )
                    return Date.from_ordinal_date(year, ordinal)
                if self.monday_week_number is not None:
                    adjustment = _week_adjustment(jan_1)
                    ordinal = (
                        self.monday_week_number * 7
                        + self.weekday.number_days_from_monday()
                        - adjustment
                        + 1
                    )
                    return Date.from_ordinal_date(year, ordinal)
        raise InsufficientInformation()

    def _hour(self) -> int:
        if self.hour_24 is not None:
            return self.hour_24
        if self.hour_12 is None or self.hour_12_is_pm is None:
            raise InsufficientInformation()
        hour = self.hour_12 % 12
        return hour + 12 if self.hour_12_is_pm else hour

    def _minute_second_subsecond(self):
        if self.minute is None:
            if self.second is not None or self.subsecond is not None:
                raise InsufficientInformation()
            return 0, 0, 0
        if self.second is None:
            if self.subsecond is not None:
                raise InsufficientInformation()
            return self.minute, 0, 0
        return self.minute, self.second, self.subsecond or 0

    def to_time(self) -> Time:
        hour = self._hour()
        minute, second, subsecond = self._minute_second_subsecond()
        with _component_range():
            return Time.from_hms_nano(hour, minute, second, subsecond)

    def to_offset(self) -> UtcOffset:
        if self.offset_hour is None:
            raise InsufficientInformation()
        if self.offset_is_negative is not None:
            negative = self.offset_is_negative
        else:
            negative = self.offset_hour < 0
        minute = abs(self.offset_minute or 0)
        second = abs(self.offset_second or 0)
        if negative:
            minute, second = -minute, -second
        with _component_range():
            return UtcOffset.from_hms(self.offset_hour, minute, second)

    def to_primitive_date_time(self) -> PrimitiveDateTime:
        return PrimitiveDateTime(self.to_date(), self.to_time())

    def to_offset_date_time(self) -> OffsetDateTime:
        """Combine the fields into an instant.

        A Unix timestamp takes precedence over the calendar fields. A second of
        60 is accepted only when the format allows leap seconds, and then only
        where a leap second could occur.
        """
        if self.unix_timestamp_nanos is not None:
            with _component_range():
                value = OffsetDateTime.from_unix_timestamp_nanos(self.unix_timestamp_nanos)
                if self.subsecond is not None:
                    value = value.replace_nanosecond(self.subsecond)
            return value

        leap_second = self.leap_second_allowed and self.second == 60
        if not leap_second:
            return self.to_primitive_date_time().assume_offset(self.to_offset())

        standin = self.copy()
        standin.second = 59
        standin.subsecond = 999_999_999
        value = standin.to_primitive_date_time().assume_offset(self.to_offset())
        with _component_range():
            is_stand_in = value.is_valid_leap_second_stand_in()
        if not is_stand_in:
            raise ParsedComponentRange.conditional("second")
        return value

    def to_utc_date_time(self) -> UtcDateTime:
        value = self.to_offset_date_time()
        with _component_range():
            return value.to_utc()
