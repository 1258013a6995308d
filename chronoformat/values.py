"""Calendar value types with nanosecond precision and six-digit years."""

import enum
from datetime import date as _date
from datetime import datetime as _datetime
from datetime import time as _time
from datetime import timedelta, timezone
from typing import Any, Tuple, Union

from . import _calendar
from .errors import ComponentRange

MIN_YEAR = -999_999
MAX_YEAR = 999_999


class Month(enum.IntEnum):
    """Months of the year; the value is the month number."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> "Month":
        """Look up a month by number, rejecting anything outside 1-12."""
        if not 1 <= number <= 12:
            raise ComponentRange("month")
        return cls(number)

    @property
    def long_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.long_name[:3]


class Weekday(enum.Enum):
    """The days of the week; ``.value`` corresponds with ISO numbering."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_monday(cls, days: int) -> "Weekday":
        """Get the weekday that is the given number of days after a Monday."""
        return cls(days % 7 + 1)

    @classmethod
    def from_sunday(cls, days: int) -> "Weekday":
        """Get the weekday that is the given number of days after a Sunday."""
        return cls((days + 6) % 7 + 1)

    def number_days_from_monday(self) -> int:
        return self.value - 1

    def number_days_from_sunday(self) -> int:
        return self.value % 7

    @property
    def long_name(self) -> str:
        return self.name.capitalize()

    @property
    def short_name(self) -> str:
        return self.long_name[:3]


def _check(name: str, value: int, lower: int, upper: int, conditional: bool = False) -> int:
    if not lower <= value <= upper:
        raise ComponentRange(name, is_conditional=conditional)
    return value


class _ImmutableBase:
    __slots__ = ()

    def __copy__(self):
        return self

    def __deepcopy__(self, _):
        return self

    @classmethod
    def parse(cls, text: Union[str, bytes], description: Any):
        """Parse text with a format description or a well-known format."""
        from .parsing.parsable import parse_as

        return parse_as(cls, text, description)

    def format(self, description: Any) -> str:
        """Format the value with a format description or a well-known format."""
        from .formatting.formattable import format

        return format(self, description)


class Date(_ImmutableBase):
    """A proleptic Gregorian calendar date."""

    __slots__ = ("_year", "_ordinal")

    def __init__(self, year: int, month: int, day: int) -> None:
        _check("year", year, MIN_YEAR, MAX_YEAR)
        _check("month", int(month), 1, 12)
        _check("day", day, 1, 31)
        _check("day", day, 1, _calendar.days_in_month(year, int(month)), conditional=True)
        self._year = year
        self._ordinal = _calendar.ordinal_from_calendar(year, int(month), day)

    @classmethod
    def from_calendar_date(cls, year: int, month: int, day: int) -> "Date":
        """Create a date from its year, month and day."""
        return cls(year, month, day)

    @classmethod
    def from_ordinal_date(cls, year: int, ordinal: int) -> "Date":
        """Create a date from its year and day of the year."""
        _check("year", year, MIN_YEAR, MAX_YEAR)
        _check("ordinal", ordinal, 1, 366)
        _check("ordinal", ordinal, 1, _calendar.days_in_year(year), conditional=True)
        return cls._new(year, ordinal)

    @classmethod
    def from_iso_week_date(cls, year: int, week: int, weekday: Weekday) -> "Date":
        """Create a date from its ISO year, ISO week and weekday."""
        _check("year", year, MIN_YEAR, MAX_YEAR)
        _check("week", week, 1, 53)
        _check("week", week, 1, _calendar.weeks_in_year(year), conditional=True)
        actual_year, ordinal = _calendar.ordinal_from_iso_week(year, week, weekday.value)
        _check("year", actual_year, MIN_YEAR, MAX_YEAR)
        return cls._new(actual_year, ordinal)

    @classmethod
    def from_day_number(cls, number: int) -> "Date":
        """Create a date from a day count where 0001-01-01 is day 1."""
        year, ordinal = _calendar.from_day_number(number)
        _check("year", year, MIN_YEAR, MAX_YEAR)
        return cls._new(year, ordinal)

    @classmethod
    def from_py_date(cls, value: _date) -> "Date":
        """Create a date from a standard library date."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def _new(cls, year: int, ordinal: int) -> "Date":
        self = object.__new__(cls)
        self._year = year
        self._ordinal = ordinal
        return self

    @property
    def year(self) -> int:
        return self._year

    @property
    def ordinal(self) -> int:
        return self._ordinal

    @property
    def month(self) -> Month:
        return Month(_calendar.calendar_from_ordinal(self._year, self._ordinal)[0])

    @property
    def day(self) -> int:
        return _calendar.calendar_from_ordinal(self._year, self._ordinal)[1]

    @property
    def weekday(self) -> Weekday:
        return Weekday.from_monday(_calendar.weekday_from_monday(self._year, self._ordinal))

    @property
    def iso_year(self) -> int:
        return _calendar.iso_year_week(self._year, self._ordinal)[0]

    @property
    def iso_week(self) -> int:
        return _calendar.iso_year_week(self._year, self._ordinal)[1]

    @property
    def sunday_based_week(self) -> int:
        return (self._ordinal - self.weekday.number_days_from_sunday() + 6) // 7

    @property
    def monday_based_week(self) -> int:
        return (self._ordinal - self.weekday.number_days_from_monday() + 6) // 7

    def to_calendar_date(self) -> Tuple[int, Month, int]:
        """Get the year, month and day."""
        month, day = _calendar.calendar_from_ordinal(self._year, self._ordinal)
        return self._year, Month(month), day

    def to_day_number(self) -> int:
        """Get the day count where 0001-01-01 is day 1."""
        return _calendar.day_number(self._year, self._ordinal)

    def py_date(self) -> _date:
        """Convert to a standard library date, which only supports years 1-9999."""
        year, month, day = self.to_calendar_date()
        return _date(year, month, day)

    def _key(self) -> Tuple[int, int]:
        return self._year, self._ordinal

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Date") -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        year, month, day = self.to_calendar_date()
        sign = "-" if year < 0 else ("+" if year > 9999 else "")
        return f"{sign}{abs(year):04}-{month:02}-{day:02}"

    def __repr__(self) -> str:
        return f"Date({self})"


class Time(_ImmutableBase):
    """A wall clock time with nanosecond precision."""

    __slots__ = ("_hour", "_minute", "_second", "_nanosecond")

    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> None:
        self._hour = _check("hour", hour, 0, 23)
        self._minute = _check("minute", minute, 0, 59)
        self._second = _check("second", second, 0, 59)
        self._nanosecond = _check("nanosecond", nanosecond, 0, 999_999_999)

    @classmethod
    def from_hms_nano(cls, hour: int, minute: int, second: int, nanosecond: int) -> "Time":
        """Create a time from its hour, minute, second and nanosecond."""
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_nanos_since_midnight(cls, nanos: int) -> "Time":
        """Create a time from the number of nanoseconds since midnight."""
        seconds, nanosecond = divmod(nanos, _calendar.NANOS_PER_SECOND)
        minutes, second = divmod(seconds, 60)
        hour, minute = divmod(minutes, 60)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_py_time(cls, value: _time) -> "Time":
        """Create a time from a standard library time."""
        return cls(value.hour, value.minute, value.second, value.microsecond * 1_000)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def nanosecond(self) -> int:
        return self._nanosecond

    def as_hms_nano(self) -> Tuple[int, int, int, int]:
        """Get the hour, minute, second and nanosecond."""
        return self._hour, self._minute, self._second, self._nanosecond

    def nanos_since_midnight(self) -> int:
        """Get the number of nanoseconds since midnight."""
        seconds = self._hour * 3_600 + self._minute * 60 + self._second
        return seconds * _calendar.NANOS_PER_SECOND + self._nanosecond

    def py_time(self) -> _time:
        """Convert to a standard library time, truncating to microseconds."""
        return _time(self._hour, self._minute, self._second, self._nanosecond // 1_000)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.as_hms_nano() == other.as_hms_nano()

    def __lt__(self, other: "Time") -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self.as_hms_nano() < other.as_hms_nano()

    def __hash__(self) -> int:
        return hash(self.as_hms_nano())

    def __str__(self) -> str:
        text = f"{self._hour:02}:{self._minute:02}:{self._second:02}"
        if self._nanosecond:
            text += f".{self._nanosecond:09}".rstrip("0")
        return text

    def __repr__(self) -> str:
        return f"Time({self})"


Time.MIDNIGHT = Time()


class UtcOffset(_ImmutableBase):
    """A fixed offset from UTC, stored in whole seconds."""

    __slots__ = ("_seconds",)

    def __init__(self, seconds: int = 0) -> None:
        self._seconds = _check("offset", seconds, -(26 * 3_600 - 1), 26 * 3_600 - 1)

    @classmethod
    def from_hms(cls, hours: int, minutes: int = 0, seconds: int = 0) -> "UtcOffset":
        """Create an offset from its parts; smaller parts take the sign of larger ones."""
        _check("offset hour", hours, -25, 25)
        _check("offset minute", minutes, -59, 59)
        _check("offset second", seconds, -59, 59)
        if hours > 0 or (hours == 0 and minutes > 0):
            minutes, seconds = abs(minutes), abs(seconds)
        elif hours < 0 or minutes < 0:
            minutes, seconds = -abs(minutes), -abs(seconds)
        return cls(hours * 3_600 + minutes * 60 + seconds)

    @classmethod
    def from_py_timezone(cls, value: Union[timezone, timedelta]) -> "UtcOffset":
        """Create an offset from a standard library timezone or timedelta."""
        delta = value.utcoffset(None) if isinstance(value, timezone) else value
        return cls(int(delta.total_seconds()))

    @property
    def whole_seconds(self) -> int:
        return self._seconds

    @property
    def _sign(self) -> int:
        return -1 if self._seconds < 0 else 1

    @property
    def whole_hours(self) -> int:
        return self._sign * (abs(self._seconds) // 3_600)

    @property
    def minutes_past_hour(self) -> int:
        return self._sign * (abs(self._seconds) // 60 % 60)

    @property
    def seconds_past_minute(self) -> int:
        return self._sign * (abs(self._seconds) % 60)

    @property
    def is_negative(self) -> bool:
        return self._seconds < 0

    @property
    def is_utc(self) -> bool:
        return self._seconds == 0

    def as_hms(self) -> Tuple[int, int, int]:
        """Get the signed hours, minutes and seconds."""
        return self.whole_hours, self.minutes_past_hour, self.seconds_past_minute

    def py_timezone(self) -> timezone:
        """Convert to a standard library timezone."""
        return timezone(timedelta(seconds=self._seconds))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __str__(self) -> str:
        hours, minutes, seconds = (abs(part) for part in self.as_hms())
        sign = "-" if self._seconds < 0 else "+"
        return f"{sign}{hours:02}:{minutes:02}:{seconds:02}"

    def __repr__(self) -> str:
        return f"UtcOffset({self})"


UtcOffset.UTC = UtcOffset()


class PrimitiveDateTime(_ImmutableBase):
    """A date and time without an offset."""

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        self._date = date
        self._time = time

    @classmethod
    def from_py_datetime(cls, value: _datetime) -> "PrimitiveDateTime":
        """Create a value from a standard library datetime, ignoring its tzinfo."""
        return cls(Date.from_py_date(value.date()), Time.from_py_time(value.time()))

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    def assume_offset(self, offset: UtcOffset) -> "OffsetDateTime":
        """Attach an offset without changing the wall clock value."""
        return OffsetDateTime(self._date, self._time, offset)

    def assume_utc(self) -> "UtcDateTime":
        """Treat the wall clock value as UTC."""
        return UtcDateTime(self._date, self._time)

    def py_datetime(self) -> _datetime:
        """Convert to a naive standard library datetime."""
        return _datetime.combine(self._date.py_date(), self._time.py_time())

    def _key(self):
        return self._date._key(), self._time.as_hms_nano()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "PrimitiveDateTime") -> bool:
        if not isinstance(other, PrimitiveDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return f"{self._date} {self._time}"

    def __repr__(self) -> str:
        return f"PrimitiveDateTime({self})"


def _local_nanos(date: Date, time: Time) -> int:
    days = date.to_day_number() - _calendar.UNIX_EPOCH_DAY
    return days * _calendar.NANOS_PER_DAY + time.nanos_since_midnight()


def _split_local_nanos(nanos: int) -> Tuple[Date, Time]:
    days, nanos_of_day = divmod(nanos, _calendar.NANOS_PER_DAY)
    date = Date.from_day_number(days + _calendar.UNIX_EPOCH_DAY)
    return date, Time.from_nanos_since_midnight(nanos_of_day)


class OffsetDateTime(_ImmutableBase):
    """A date and time at a fixed offset from UTC; equality compares instants."""

    __slots__ = ("_date", "_time", "_offset")

    def __init__(self, date: Date, time: Time, offset: UtcOffset = UtcOffset.UTC) -> None:
        self._date = date
        self._time = time
        self._offset = offset

    @classmethod
    def from_unix_timestamp_nanos(cls, nanos: int) -> "OffsetDateTime":
        """Create a UTC value from nanoseconds since the Unix epoch."""
        try:
            date, time = _split_local_nanos(nanos)
        except ComponentRange:
            raise ComponentRange("timestamp") from None
        return cls(date, time, UtcOffset.UTC)

    @classmethod
    def from_unix_timestamp(cls, seconds: int) -> "OffsetDateTime":
        """Create a UTC value from seconds since the Unix epoch."""
        return cls.from_unix_timestamp_nanos(seconds * _calendar.NANOS_PER_SECOND)

    @classmethod
    def from_py_datetime(cls, value: _datetime) -> "OffsetDateTime":
        """Create a value from an aware standard library datetime."""
        offset = value.utcoffset()
        if offset is None:
            raise ValueError("datetime must be timezone-aware")
        return cls(
            Date.from_py_date(value.date()),
            Time.from_py_time(value.time()),
            UtcOffset.from_py_timezone(offset),
        )

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def offset(self) -> UtcOffset:
        return self._offset

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def unix_timestamp_nanos(self) -> int:
        """Get the number of nanoseconds since the Unix epoch."""
        return (
            _local_nanos(self._date, self._time)
            - self._offset.whole_seconds * _calendar.NANOS_PER_SECOND
        )

    def unix_timestamp(self) -> int:
        """Get the number of whole seconds since the Unix epoch."""
        return self.unix_timestamp_nanos() // _calendar.NANOS_PER_SECOND

    def to_offset(self, offset: UtcOffset) -> "OffsetDateTime":
        """Express the same instant at another offset."""
        local = self.unix_timestamp_nanos() + offset.whole_seconds * _calendar.NANOS_PER_SECOND
        date, time = _split_local_nanos(local)
        return OffsetDateTime(date, time, offset)

    def to_utc(self) -> "UtcDateTime":
        """Express the same instant in UTC."""
        shifted = self.to_offset(UtcOffset.UTC)
        return UtcDateTime(shifted.date, shifted.time)

    def replace_nanosecond(self, nanosecond: int) -> "OffsetDateTime":
        """Return a copy with the nanosecond replaced."""
        hour, minute, second, _ = self._time.as_hms_nano()
        return OffsetDateTime(self._date, Time(hour, minute, second, nanosecond), self._offset)

    def is_valid_leap_second_stand_in(self) -> bool:
        """Check whether this is 23:59:59.999999999 UTC on the last day of a month."""
        if self._time.nanosecond != 999_999_999:
            return False
        utc = self.to_utc()
        hour, minute, second, _ = utc.time.as_hms_nano()
        year, month, day = utc.date.to_calendar_date()
        return (
            (hour, minute, second) == (23, 59, 59)
            and day == _calendar.days_in_month(year, month)
        )

    def py_datetime(self) -> _datetime:
        """Convert to an aware standard library datetime, truncating to microseconds."""
        return _datetime.combine(
            self._date.py_date(), self._time.py_time(), tzinfo=self._offset.py_timezone()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() == other.unix_timestamp_nanos()

    def __lt__(self, other: "OffsetDateTime") -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() < other.unix_timestamp_nanos()

    def __hash__(self) -> int:
        return hash(self.unix_timestamp_nanos())

    def __str__(self) -> str:
        return f"{self._date} {self._time} {self._offset}"

    def __repr__(self) -> str:
        return f"OffsetDateTime({self})"


class UtcDateTime(_ImmutableBase):
    """A date and time in UTC."""

    __slots__ = ("_date", "_time")

    def __init__(self, date: Date, time: Time) -> None:
        self._date = date
        self._time = time

    @classmethod
    def from_unix_timestamp_nanos(cls, nanos: int) -> "UtcDateTime":
        """Create a value from nanoseconds since the Unix epoch."""
        return OffsetDateTime.from_unix_timestamp_nanos(nanos).to_utc()

    @property
    def date(self) -> Date:
        return self._date

    @property
    def time(self) -> Time:
        return self._time

    @property
    def offset(self) -> UtcOffset:
        return UtcOffset.UTC

    def to_offset(self, offset: UtcOffset) -> OffsetDateTime:
        """Express the same instant at another offset."""
        return OffsetDateTime(self._date, self._time, UtcOffset.UTC).to_offset(offset)

    def unix_timestamp_nanos(self) -> int:
        """Get the number of nanoseconds since the Unix epoch."""
        return _local_nanos(self._date, self._time)

    def py_datetime(self) -> _datetime:
        """Convert to an aware standard library datetime in UTC."""
        return _datetime.combine(self._date.py_date(), self._time.py_time(), tzinfo=timezone.utc)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() == other.unix_timestamp_nanos()

    def __lt__(self, other: "UtcDateTime") -> bool:
        if not isinstance(other, UtcDateTime):
            return NotImplemented
        return self.unix_timestamp_nanos() < other.unix_timestamp_nanos()

    def __hash__(self) -> int:
        return hash(self.unix_timestamp_nanos())

    def __str__(self) -> str:
        return f"{self._date} {self._time} +00"

    def __repr__(self) -> str:
        return f"UtcDateTime({self})"
