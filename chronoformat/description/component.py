"""Components of a format description and their modifiers."""

from typing import ClassVar, Dict, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from .modifier import (
    Padding,
    SubsecondDigits,
    TrailingInput,
    UnixTimestampPrecision,
    YearBase,
    YearRange,
    YearRepr,
)


class Component(BaseModel):
    """A single date-time field within a format description.

    The model fields are the component's modifiers.
    """

    model_config = ConfigDict(frozen=True)

    name: ClassVar[str]
    """Name of the component used in parse errors."""


class Day(Component):
    """Day of the month."""

    name: ClassVar[str] = "day"
    padding: Padding = Padding.ZERO


class MonthNumerical(Component):
    """Month of the year as a number, 1-12."""

    name: ClassVar[str] = "month"
    padding: Padding = Padding.ZERO


class MonthShort(Component):
    """Abbreviated English month name."""

    name: ClassVar[str] = "month"
    case_sensitive: bool = True


class MonthLong(Component):
    """Full English month name."""

    name: ClassVar[str] = "month"
    case_sensitive: bool = True


class Ordinal(Component):
    """Day of the year."""

    name: ClassVar[str] = "ordinal"
    padding: Padding = Padding.ZERO


class WeekdayShort(Component):
    """Abbreviated English weekday name."""

    name: ClassVar[str] = "weekday"
    case_sensitive: bool = True


class WeekdayLong(Component):
    """Full English weekday name."""

    name: ClassVar[str] = "weekday"
    case_sensitive: bool = True


class WeekdaySunday(Component):
    """Weekday as a number counted from Sunday."""

    name: ClassVar[str] = "weekday"
    one_indexed: bool = True


class WeekdayMonday(Component):
    """Weekday as a number counted from Monday."""

    name: ClassVar[str] = "weekday"
    one_indexed: bool = True


class WeekNumberIso(Component):
    """ISO week number, 1-53."""

    name: ClassVar[str] = "week number"
    padding: Padding = Padding.ZERO


class WeekNumberSunday(Component):
    """Week number where weeks start on Sunday, 0-53."""

    name: ClassVar[str] = "week number"
    padding: Padding = Padding.ZERO


class WeekNumberMonday(Component):
    """Week number where weeks start on Monday, 0-53."""

    name: ClassVar[str] = "week number"
    padding: Padding = Padding.ZERO


class Year(Component):
    """Base of the twelve year components."""

    name: ClassVar[str] = "year"
    year_repr: ClassVar[YearRepr]
    year_range: ClassVar[YearRange]
    iso_week_based: ClassVar[bool]

    padding: Padding = Padding.ZERO


class _SignedYear(Year):
    sign_is_mandatory: bool = False


class CalendarYearFullExtendedRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.FULL
    year_range: ClassVar[YearRange] = YearRange.EXTENDED
    iso_week_based: ClassVar[bool] = False


class CalendarYearFullStandardRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.FULL
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = False


class IsoYearFullExtendedRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.FULL
    year_range: ClassVar[YearRange] = YearRange.EXTENDED
    iso_week_based: ClassVar[bool] = True


class IsoYearFullStandardRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.FULL
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = True


class CalendarYearCenturyExtendedRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.CENTURY
    year_range: ClassVar[YearRange] = YearRange.EXTENDED
    iso_week_based: ClassVar[bool] = False


class CalendarYearCenturyStandardRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.CENTURY
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = False


class IsoYearCenturyExtendedRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.CENTURY
    year_range: ClassVar[YearRange] = YearRange.EXTENDED
    iso_week_based: ClassVar[bool] = True


class IsoYearCenturyStandardRange(_SignedYear):
    year_repr: ClassVar[YearRepr] = YearRepr.CENTURY
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = True


class CalendarYearLastTwo(Year):
    year_repr: ClassVar[YearRepr] = YearRepr.LAST_TWO
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = False


class IsoYearLastTwo(Year):
    year_repr: ClassVar[YearRepr] = YearRepr.LAST_TWO
    year_range: ClassVar[YearRange] = YearRange.STANDARD
    iso_week_based: ClassVar[bool] = True


_YEAR_VARIANTS: Dict[Tuple[bool, YearRepr, YearRange], Type[Year]] = {
    (False, YearRepr.FULL, YearRange.EXTENDED): CalendarYearFullExtendedRange,
    (False, YearRepr.FULL, YearRange.STANDARD): CalendarYearFullStandardRange,
    (True, YearRepr.FULL, YearRange.EXTENDED): IsoYearFullExtendedRange,
    (True, YearRepr.FULL, YearRange.STANDARD): IsoYearFullStandardRange,
    (False, YearRepr.CENTURY, YearRange.EXTENDED): CalendarYearCenturyExtendedRange,
    (False, YearRepr.CENTURY, YearRange.STANDARD): CalendarYearCenturyStandardRange,
    (True, YearRepr.CENTURY, YearRange.EXTENDED): IsoYearCenturyExtendedRange,
    (True, YearRepr.CENTURY, YearRange.STANDARD): IsoYearCenturyStandardRange,
}


def year(
    padding: Padding = Padding.ZERO,
    repr: YearRepr = YearRepr.FULL,
    range: YearRange = YearRange.EXTENDED,
    base: YearBase = YearBase.CALENDAR,
    sign_is_mandatory: bool = False,
) -> Year:
    """Build the year component for a combination of year modifiers."""
    iso_week_based = base is YearBase.ISO_WEEK
    if repr is YearRepr.LAST_TWO:
        cls = IsoYearLastTwo if iso_week_based else CalendarYearLastTwo
        return cls(padding=padding)
    cls = _YEAR_VARIANTS[(iso_week_based, repr, range)]
    return cls(padding=padding, sign_is_mandatory=sign_is_mandatory)


class Hour12(Component):
    """Hour on a 12-hour clock, 1-12."""

    name: ClassVar[str] = "hour"
    padding: Padding = Padding.ZERO


class Hour24(Component):
    """Hour on a 24-hour clock, 0-23."""

    name: ClassVar[str] = "hour"
    padding: Padding = Padding.ZERO


class Minute(Component):
    name: ClassVar[str] = "minute"
    padding: Padding = Padding.ZERO


class Period(Component):
    """AM/PM marker."""

    name: ClassVar[str] = "period"
    is_uppercase: bool = True
    case_sensitive: bool = True


class Second(Component):
    name: ClassVar[str] = "second"
    padding: Padding = Padding.ZERO


class Subsecond(Component):
    """Fractional part of the second."""

    name: ClassVar[str] = "subsecond"
    digits: SubsecondDigits = SubsecondDigits.ONE_OR_MORE


class OffsetHour(Component):
    """Hour part of the UTC offset, with its sign."""

    name: ClassVar[str] = "offset hour"
    sign_is_mandatory: bool = False
    padding: Padding = Padding.ZERO


class OffsetMinute(Component):
    """Minutes past the hour of the UTC offset."""

    name: ClassVar[str] = "offset minute"
    padding: Padding = Padding.ZERO


class OffsetSecond(Component):
    """Seconds past the minute of the UTC offset."""

    name: ClassVar[str] = "offset second"
    padding: Padding = Padding.ZERO


class Ignore(Component):
    """Skip a fixed number of bytes when parsing; writes nothing."""

    name: ClassVar[str] = "ignore"
    count: int = Field(ge=1, le=65_535)


class UnixTimestamp(Component):
    """Base of the four Unix timestamp components."""

    name: ClassVar[str] = "unix_timestamp"
    precision: ClassVar[UnixTimestampPrecision]
    nanos_per_unit: ClassVar[int]
    max_digits: ClassVar[int]

    sign_is_mandatory: bool = False


class UnixTimestampSecond(UnixTimestamp):
    precision: ClassVar[UnixTimestampPrecision] = UnixTimestampPrecision.SECOND
    nanos_per_unit: ClassVar[int] = 1_000_000_000
    max_digits: ClassVar[int] = 14


class UnixTimestampMillisecond(UnixTimestamp):
    precision: ClassVar[UnixTimestampPrecision] = UnixTimestampPrecision.MILLISECOND
    nanos_per_unit: ClassVar[int] = 1_000_000
    max_digits: ClassVar[int] = 17


class UnixTimestampMicrosecond(UnixTimestamp):
    precision: ClassVar[UnixTimestampPrecision] = UnixTimestampPrecision.MICROSECOND
    nanos_per_unit: ClassVar[int] = 1_000
    max_digits: ClassVar[int] = 20


class UnixTimestampNanosecond(UnixTimestamp):
    precision: ClassVar[UnixTimestampPrecision] = UnixTimestampPrecision.NANOSECOND
    nanos_per_unit: ClassVar[int] = 1
    max_digits: ClassVar[int] = 23


UNIX_TIMESTAMP_VARIANTS: Dict[UnixTimestampPrecision, Type[UnixTimestamp]] = {
    cls.precision: cls
    for cls in (
        UnixTimestampSecond,
        UnixTimestampMillisecond,
        UnixTimestampMicrosecond,
        UnixTimestampNanosecond,
    )
}


class End(Component):
    """End of input; writes nothing."""

    name: ClassVar[str] = "end"
    trailing_input: TrailingInput = TrailingInput.PROHIBIT
