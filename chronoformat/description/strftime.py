"""Translate `strftime` directives into format description items."""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ..errors import Expected, InvalidComponentName, NotSupported
from . import component as c
from .items import Compound, StringLiteral
from .modifier import Padding

logger = logging.getLogger(__name__)

_PADDING_FLAGS = {"_": Padding.SPACE, "-": Padding.NONE, "0": Padding.ZERO}


def _padded(factory: Callable[..., Any], default: Padding) -> Callable[[Optional[Padding]], Any]:
    return lambda padding: factory(padding=padding or default)


def _fixed(item: Any) -> Callable[[Optional[Padding]], Any]:
    return lambda padding: item


def _compound(*items: Any) -> Callable[[Optional[Padding]], Any]:
    return _fixed(
        Compound([StringLiteral(item) if isinstance(item, str) else item for item in items])
    )


_HOUR_MINUTE_SECOND = (c.Hour24(), ":", c.Minute(), ":", c.Second())
_MONTH_DAY_YEAR = (c.MonthNumerical(), "/", c.Day(), "/", c.CalendarYearLastTwo())

_DIRECTIVES: Dict[str, Callable[[Optional[Padding]], Any]] = {
    "%": _fixed(StringLiteral("%")),
    "a": _fixed(c.WeekdayShort()),
    "A": _fixed(c.WeekdayLong()),
    "b": _fixed(c.MonthShort()),
    "h": _fixed(c.MonthShort()),
    "B": _fixed(c.MonthLong()),
    "c": _compound(
        c.WeekdayShort(),
        " ",
        c.MonthShort(),
        " ",
        c.Day(padding=Padding.SPACE),
        " ",
        *_HOUR_MINUTE_SECOND,
        " ",
        c.CalendarYearFullExtendedRange(),
    ),
    "C": _padded(c.CalendarYearCenturyExtendedRange, Padding.ZERO),
    "d": _padded(c.Day, Padding.ZERO),
    "D": _compound(*_MONTH_DAY_YEAR),
    "e": _padded(c.Day, Padding.SPACE),
    "F": _compound(c.CalendarYearFullExtendedRange(), "-", c.MonthNumerical(), "-", c.Day()),
    "g": _padded(c.IsoYearLastTwo, Padding.ZERO),
    "G": _fixed(c.IsoYearFullExtendedRange()),
    "H": _padded(c.Hour24, Padding.ZERO),
    "I": _padded(c.Hour12, Padding.ZERO),
    "j": _padded(c.Ordinal, Padding.ZERO),
    "k": _padded(c.Hour24, Padding.SPACE),
    "l": _padded(c.Hour12, Padding.SPACE),
    "m": _padded(c.MonthNumerical, Padding.ZERO),
    "M": _padded(c.Minute, Padding.ZERO),
    "n": _fixed(StringLiteral("\n")),
    "p": _fixed(c.Period(is_uppercase=True)),
    "P": _fixed(c.Period(is_uppercase=False)),
    "r": _compound(c.Hour12(), ":", c.Minute(), ":", c.Second(), " ", c.Period()),
    "R": _compound(c.Hour24(), ":", c.Minute()),
    "s": _fixed(c.UnixTimestampSecond()),
    "S": _padded(c.Second, Padding.ZERO),
    "t": _fixed(StringLiteral("\t")),
    "T": _compound(*_HOUR_MINUTE_SECOND),
    "u": _fixed(c.WeekdayMonday(one_indexed=True)),
    "U": _padded(c.WeekNumberSunday, Padding.ZERO),
    "V": _padded(c.WeekNumberIso, Padding.ZERO),
    "w": _fixed(c.WeekdaySunday(one_indexed=False)),
    "W": _padded(c.WeekNumberMonday, Padding.ZERO),
    "x": _compound(*_MONTH_DAY_YEAR),
    "X": _compound(*_HOUR_MINUTE_SECOND),
    "y": _padded(c.CalendarYearLastTwo, Padding.ZERO),
    "Y": _fixed(c.CalendarYearFullExtendedRange()),
    "z": _compound(c.OffsetHour(sign_is_mandatory=True), c.OffsetMinute()),
}


def parse_strftime(text: str) -> List[Any]:
    """Parse a `strftime` format string into a list of items."""
    items: List[Any] = []
    literal_start = 0
    index = 0
    # Byte offsets are reported, so walk the encoded text.
    data = text.encode()
    while index < len(data):
        if data[index] != ord("%"):
            index += 1
            continue
        if index > literal_start:
            items.append(StringLiteral(data[literal_start:index].decode()))
        percent = index
        index += 1
        padding = None
        if index < len(data) and chr(data[index]) in _PADDING_FLAGS:
            padding = _PADDING_FLAGS[chr(data[index])]
            index += 1
        if index >= len(data):
            raise Expected("valid escape sequence", percent)
        items.append(_directive(data, index, padding))
        index += 1
        literal_start = index
    if literal_start < len(data):
        items.append(StringLiteral(data[literal_start:].decode()))
    logger.debug("compiled strftime description %r into %d items", text, len(items))
    return items


def _directive(data: bytes, index: int, padding: Optional[Padding]) -> Any:
    directive = chr(data[index])
    if directive == "O":
        raise NotSupported("modifier", "", index)
    if directive == "Z":
        raise NotSupported("component", "", index)
    if directive not in _DIRECTIVES:
        name = data[index:index + 1].decode(errors="replace")
        raise InvalidComponentName(name, index)
    return _DIRECTIVES[directive](padding)


def parse_strftime_owned(text: str) -> Union[Any, Compound]:
    """Parse a `strftime` format string into a single item."""
    items = parse_strftime(text)
    if len(items) == 1:
        return items[0]
    return Compound(items)
