"""Values accepted by component modifiers."""

from enum import Enum


class Padding(str, Enum):
    """How a numeric component is padded to its minimum width."""

    SPACE = "space"
    ZERO = "zero"
    NONE = "none"


class SubsecondDigits(str, Enum):
    """Number of digits written for the fractional second."""

    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ONE_OR_MORE = "1+"

    @property
    def count(self) -> int:
        """Exact digit count, or 9 for the variable width."""
        return 9 if self is SubsecondDigits.ONE_OR_MORE else int(self.value)


class TrailingInput(str, Enum):
    """What the `end` component does with input that remains."""

    PROHIBIT = "prohibit"
    DISCARD = "discard"


class YearRepr(str, Enum):
    FULL = "full"
    CENTURY = "century"
    LAST_TWO = "last_two"


class YearRange(str, Enum):
    STANDARD = "standard"
    EXTENDED = "extended"


class YearBase(str, Enum):
    CALENDAR = "calendar"
    ISO_WEEK = "iso_week"


class UnixTimestampPrecision(str, Enum):
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"
