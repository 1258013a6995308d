"""Field rules for ISO 8601 dates, times and offsets."""

import enum
from fractions import Fraction
from typing import Optional

from ..values import Month, Weekday
from .combinator import ParsedItem, any_digit, exactly_n_digits, sign

_two_digits = exactly_n_digits(2)
_three_digits = exactly_n_digits(3)
_four_digits = exactly_n_digits(4)
_six_digits = exactly_n_digits(6)


class ExtendedKind(enum.Enum):
    """Whether the input uses the basic or the extended format.

    Once a separator has been seen (or found missing) every later part of the
    input has to agree with it.
    """

    BASIC = "basic"
    EXTENDED = "extended"
    UNKNOWN = "unknown"

    @property
    def maybe_extended(self) -> bool:
        return self is not ExtendedKind.BASIC

    def coerce_extended(self) -> Optional["ExtendedKind"]:
        """Settle an unknown kind as extended; None if it is already basic."""
        return None if self is ExtendedKind.BASIC else ExtendedKind.EXTENDED


def year(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Four digits, or a sign followed by six digits for an expanded year."""
    signed = sign(data, pos)
    if signed is None:
        return _four_digits(data, pos)
    item = _six_digits(data, signed.pos)
    if item is None:
        return None
    return ParsedItem(item.pos, signed.value * item.value)


def month(data: bytes, pos: int) -> Optional[ParsedItem]:
    item = _two_digits(data, pos)
    if item is None or not 1 <= item.value <= 12:
        return None
    return ParsedItem(item.pos, Month(item.value))


def _nonzero(item: Optional[ParsedItem]) -> Optional[ParsedItem]:
    if item is None or item.value == 0:
        return None
    return item


def week(data: bytes, pos: int) -> Optional[ParsedItem]:
    return _nonzero(_two_digits(data, pos))


def day(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Day of the month; the upper bound is checked with the rest of the date."""
    return _nonzero(_two_digits(data, pos))


def dayk(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Day of the week, 1 for Monday through 7 for Sunday."""
    head = data[pos:pos + 1]
    if head and b"1" <= head <= b"7":
        return ParsedItem(pos + 1, Weekday(head[0] - ord("0")))
    return None


def dayo(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Day of the year."""
    return _nonzero(_three_digits(data, pos))


def fractional(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Two digits with an optional decimal fraction.

    The value is the integer part and the fraction as an exact `Fraction`, or
    None when no decimal sign is present. At least one digit has to follow the
    decimal sign, which may be a period or a comma.
    """
    item = _two_digits(data, pos)
    if item is None:
        return None
    integer = item.value
    pos = item.pos
    if data[pos:pos + 1] not in (b".", b","):
        return ParsedItem(pos, (integer, None))
    digit = any_digit(data, pos + 1)
    if digit is None:
        return None
    numerator = digit.value
    denominator = 10
    pos = digit.pos
    digit = any_digit(data, pos)
    while digit is not None:
        numerator = numerator * 10 + digit.value
        denominator *= 10
        pos = digit.pos
        digit = any_digit(data, pos)
    return ParsedItem(pos, (integer, Fraction(numerator, denominator)))
