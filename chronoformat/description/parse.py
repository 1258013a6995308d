"""Parser for the bracketed format description language."""

import logging
from typing import Any, Callable, Dict, List, Tuple, Union

from ..errors import (
    Expected,
    InvalidComponentName,
    InvalidModifier,
    MissingComponentName,
    MissingRequiredModifier,
    NotSupported,
    UnclosedOpeningBracket,
)
from . import component as c
from .items import Compound, First, Literal, Optional
from .modifier import (
    Padding,
    SubsecondDigits,
    TrailingInput,
    UnixTimestampPrecision,
    YearBase,
    YearRange,
    YearRepr,
)

logger = logging.getLogger(__name__)

_WHITESPACE = b" \t\n\r\x0b\x0c"
_TOKEN_END = b"[]" + _WHITESPACE
_DIGITS = {digits.value for digits in SubsecondDigits}

_RUNTIME_CONTEXT = "runtime-parsed format descriptions"


def _choices(**choices: Any) -> Callable[[str], Any]:
    return choices.get


def _count(value: str) -> Any:
    if not (value.isascii() and value.isdigit()):
        return None
    count = int(value)
    return count if 1 <= count <= 65_535 else None


_PADDING = _choices(space=Padding.SPACE, zero=Padding.ZERO, none=Padding.NONE)
_BOOL = _choices(true=True, false=False)
_SIGN = _choices(automatic=False, mandatory=True)

# Modifier keys accepted by each component, mapped to the keyword they set and
# the parser for their value. A parser returns None for an unknown value.
_MODIFIERS: Dict[str, Dict[str, Tuple[str, Callable[[str], Any]]]] = {
    "day": {"padding": ("padding", _PADDING)},
    "end": {
        "trailing_input": (
            "trailing_input",
            _choices(prohibit=TrailingInput.PROHIBIT, discard=TrailingInput.DISCARD),
        ),
    },
    "hour": {
        "padding": ("padding", _PADDING),
        "repr": ("repr", _choices(**{"24": c.Hour24, "12": c.Hour12})),
    },
    "ignore": {"count": ("count", _count)},
    "minute": {"padding": ("padding", _PADDING)},
    "month": {
        "padding": ("padding", _PADDING),
        "repr": (
            "repr",
            _choices(numerical=c.MonthNumerical, long=c.MonthLong, short=c.MonthShort),
        ),
        "case_sensitive": ("case_sensitive", _BOOL),
    },
    "offset_hour": {
        "sign": ("sign_is_mandatory", _SIGN),
        "padding": ("padding", _PADDING),
    },
    "offset_minute": {"padding": ("padding", _PADDING)},
    "offset_second": {"padding": ("padding", _PADDING)},
    "ordinal": {"padding": ("padding", _PADDING)},
    "period": {
        "case": ("is_uppercase", _choices(upper=True, lower=False)),
        "case_sensitive": ("case_sensitive", _BOOL),
    },
    "second": {"padding": ("padding", _PADDING)},
    "subsecond": {
        "digits": ("digits", lambda value: SubsecondDigits(value) if value in _DIGITS else None),
    },
    "unix_timestamp": {
        "precision": (
            "precision",
            _choices(
                second=UnixTimestampPrecision.SECOND,
                millisecond=UnixTimestampPrecision.MILLISECOND,
                microsecond=UnixTimestampPrecision.MICROSECOND,
                nanosecond=UnixTimestampPrecision.NANOSECOND,
            ),
        ),
        "sign": ("sign_is_mandatory", _SIGN),
    },
    "weekday": {
        "repr": (
            "repr",
            _choices(
                long=c.WeekdayLong,
                short=c.WeekdayShort,
                sunday=c.WeekdaySunday,
                monday=c.WeekdayMonday,
            ),
        ),
        "one_indexed": ("one_indexed", _BOOL),
        "case_sensitive": ("case_sensitive", _BOOL),
    },
    "week_number": {
        "padding": ("padding", _PADDING),
        "repr": (
            "repr",
            _choices(iso=c.WeekNumberIso, sunday=c.WeekNumberSunday, monday=c.WeekNumberMonday),
        ),
    },
    "year": {
        "padding": ("padding", _PADDING),
        "repr": (
            "repr",
            _choices(
                full=YearRepr.FULL, century=YearRepr.CENTURY, last_two=YearRepr.LAST_TWO
            ),
        ),
        "range": (
            "range",
            _choices(standard=YearRange.STANDARD, extended=YearRange.EXTENDED),
        ),
        "base": ("base", _choices(calendar=YearBase.CALENDAR, iso_week=YearBase.ISO_WEEK)),
        "sign": ("sign_is_mandatory", _SIGN),
    },
}


def _pick(modifiers: Dict[str, Any], *names: str) -> Dict[str, Any]:
    return {name: modifiers[name] for name in names if name in modifiers}


def _build_hour(modifiers: Dict[str, Any]) -> c.Component:
    cls = modifiers.get("repr", c.Hour24)
    return cls(**_pick(modifiers, "padding"))


def _build_month(modifiers: Dict[str, Any]) -> c.Component:
    cls = modifiers.get("repr", c.MonthNumerical)
    if cls is c.MonthNumerical:
        return cls(**_pick(modifiers, "padding"))
    return cls(**_pick(modifiers, "case_sensitive"))


def _build_weekday(modifiers: Dict[str, Any]) -> c.Component:
    cls = modifiers.get("repr", c.WeekdayLong)
    if cls in (c.WeekdaySunday, c.WeekdayMonday):
        return cls(**_pick(modifiers, "one_indexed"))
    return cls(**_pick(modifiers, "case_sensitive"))


def _build_week_number(modifiers: Dict[str, Any]) -> c.Component:
    cls = modifiers.get("repr", c.WeekNumberIso)
    return cls(**_pick(modifiers, "padding"))


def _build_unix_timestamp(modifiers: Dict[str, Any]) -> c.Component:
    precision = modifiers.get("precision", UnixTimestampPrecision.SECOND)
    cls = c.UNIX_TIMESTAMP_VARIANTS[precision]
    return cls(**_pick(modifiers, "sign_is_mandatory"))


_BUILDERS: Dict[str, Callable[[Dict[str, Any]], c.Component]] = {
    "day": lambda m: c.Day(**m),
    "end": lambda m: c.End(**m),
    "hour": _build_hour,
    "ignore": lambda m: c.Ignore(**m),
    "minute": lambda m: c.Minute(**m),
    "month": _build_month,
    "offset_hour": lambda m: c.OffsetHour(**m),
    "offset_minute": lambda m: c.OffsetMinute(**m),
    "offset_second": lambda m: c.OffsetSecond(**m),
    "ordinal": lambda m: c.Ordinal(**m),
    "period": lambda m: c.Period(**m),
    "second": lambda m: c.Second(**m),
    "subsecond": lambda m: c.Subsecond(**m),
    "unix_timestamp": _build_unix_timestamp,
    "weekday": _build_weekday,
    "week_number": _build_week_number,
    "year": lambda m: c.year(**m),
}

_REQUIRED: Dict[str, Tuple[str, ...]] = {"ignore": ("count",)}


class _Parser:
    """Recursive descent over the UTF-8 bytes of a description."""

    def __init__(self, text: Union[str, bytes], allow_nested: bool):
        self.data = text.encode() if isinstance(text, str) else bytes(text)
        self.pos = 0
        self.allow_nested = allow_nested

    def _peek(self) -> int:
        return self.data[self.pos] if self.pos < len(self.data) else -1

    def _skip_whitespace(self) -> bool:
        start = self.pos
        while self.pos < len(self.data) and self.data[self.pos] in _WHITESPACE:
            self.pos += 1
        return self.pos > start

    def _token(self) -> bytes:
        start = self.pos
        while self.pos < len(self.data) and self.data[self.pos] not in _TOKEN_END:
            self.pos += 1
        return self.data[start:self.pos]

    def items(self, nested_at: int = -1) -> List[Any]:
        """Parse items until the end of input, or the `]` closing a nested description."""
        items: List[Any] = []
        while self.pos < len(self.data):
            byte = self.data[self.pos]
            if byte == ord("["):
                if self.data[self.pos + 1:self.pos + 2] == b"[":
                    items.append(Literal(b"["))
                    self.pos += 2
                else:
                    items.append(self._component())
            elif byte == ord("]") and nested_at >= 0:
                self.pos += 1
                return items
            else:
                start = self.pos
                stop = b"[]" if nested_at >= 0 else b"["
                while self.pos < len(self.data) and self.data[self.pos] not in stop:
                    self.pos += 1
                items.append(Literal(self.data[start:self.pos]))
        if nested_at >= 0:
            raise UnclosedOpeningBracket(nested_at)
        return items

    def _component(self) -> Any:
        opening = self.pos
        self.pos += 1
        self._skip_whitespace()
        name_index = self.pos
        raw_name = self._token().decode(errors="replace")
        name = raw_name.lower()
        if not name:
            if self.pos >= len(self.data):
                raise UnclosedOpeningBracket(opening)
            raise MissingComponentName(opening)

        if name in ("optional", "first"):
            return self._nested(name, name_index, opening)

        if name not in _BUILDERS:
            raise InvalidComponentName(raw_name, name_index)

        modifiers: Dict[str, Any] = {}
        table = _MODIFIERS[name]
        while True:
            had_whitespace = self._skip_whitespace()
            if self.pos >= len(self.data):
                raise UnclosedOpeningBracket(opening)
            if self._peek() == ord("]"):
                self.pos += 1
                break
            if self._peek() == ord("[") or not had_whitespace:
                raise UnclosedOpeningBracket(opening)
            token_index = self.pos
            token = self._token().decode(errors="replace")
            key, colon, value = token.partition(":")
            if not colon:
                raise InvalidModifier(token, token_index)
            if not key:
                raise InvalidModifier("", token_index)
            if not value:
                raise InvalidModifier("", token_index + len(token.encode()))
            value_index = token_index + len(key.encode()) + 1
            if key.lower() not in table:
                raise InvalidModifier(key, token_index)
            field, parse_value = table[key.lower()]
            parsed = parse_value(value.lower())
            if parsed is None:
                raise InvalidModifier(value, value_index)
            modifiers[field] = parsed

        for required in _REQUIRED.get(name, ()):
            if required not in modifiers:
                raise MissingRequiredModifier(required, name_index)
        return _BUILDERS[name](modifiers)

    def _nested(self, name: str, name_index: int, opening: int) -> Any:
        if not self.allow_nested:
            what = "optional item" if name == "optional" else "'first' item"
            raise NotSupported(what, _RUNTIME_CONTEXT, name_index)

        alternatives = []
        while True:
            self._skip_whitespace()
            if self.pos >= len(self.data):
                raise UnclosedOpeningBracket(opening)
            if self._peek() == ord("]") and alternatives:
                self.pos += 1
                break
            if self._peek() != ord("["):
                raise Expected("opening bracket", self.pos)
            nested_at = self.pos
            self.pos += 1
            alternatives.append(_collapse(self.items(nested_at)))
            if name == "optional":
                self._skip_whitespace()
                if self.pos >= len(self.data):
                    raise UnclosedOpeningBracket(opening)
                if self._peek() != ord("]"):
                    raise Expected("closing bracket", self.pos)
                self.pos += 1
                return Optional(alternatives[0])
        return First(alternatives)


def _collapse(items: List[Any]) -> Any:
    if len(items) == 1:
        return items[0]
    return Compound(items)


def parse_description(text: Union[str, bytes]) -> List[Any]:
    """Parse a format description into a list of items.

    `optional` and `first` items are not available here; use `parse_owned`.
    """
    items = _Parser(text, allow_nested=False).items()
    logger.debug("compiled format description %r into %d items", text, len(items))
    return items


def parse_owned(text: Union[str, bytes]) -> Any:
    """Parse a format description into a single item, with `optional` and `first` support."""
    item = _collapse(_Parser(text, allow_nested=True).items())
    logger.debug("compiled owned format description %r", text)
    return item
