"""Upper bounds on the output of a format description."""

from typing import Any, Dict, Type

from pydantic import BaseModel, ConfigDict

from ..description import component as c
from ..description.items import Compound, First, Literal, Optional, StringLiteral
from ..description.modifier import YearRange, YearRepr
from ..description.well_known import Iso8601, Rfc2822, Rfc3339
from .iso8601 import max_bytes_needed


class Metadata(BaseModel):
    """How large formatted output can be, and whether it is always valid UTF-8."""

    model_config = ConfigDict(frozen=True)

    max_bytes_needed: int
    guaranteed_utf8: bool


_COMPONENT_BYTES: Dict[Type[c.Component], int] = {
    c.Day: 2,
    c.MonthNumerical: 2,
    c.MonthShort: 3,
    c.MonthLong: 9,
    c.Ordinal: 3,
    c.WeekdayShort: 3,
    c.WeekdayLong: 9,
    c.WeekdaySunday: 1,
    c.WeekdayMonday: 1,
    c.WeekNumberIso: 2,
    c.WeekNumberSunday: 2,
    c.WeekNumberMonday: 2,
    c.Hour12: 2,
    c.Hour24: 2,
    c.Minute: 2,
    c.Period: 2,
    c.Second: 2,
    c.OffsetHour: 3,
    c.OffsetMinute: 2,
    c.OffsetSecond: 2,
    c.Ignore: 0,
    c.End: 0,
}

_YEAR_BYTES = {
    (YearRepr.FULL, YearRange.EXTENDED): 7,
    (YearRepr.FULL, YearRange.STANDARD): 5,
    (YearRepr.CENTURY, YearRange.EXTENDED): 5,
    (YearRepr.CENTURY, YearRange.STANDARD): 3,
    (YearRepr.LAST_TWO, YearRange.STANDARD): 2,
}


def _component_bytes(component: c.Component) -> int:
    if isinstance(component, c.Year):
        return _YEAR_BYTES[(component.year_repr, component.year_range)]
    if isinstance(component, c.UnixTimestamp):
        # The sign, and every digit of the largest timestamp.
        return component.max_digits + 1
    if isinstance(component, c.Subsecond):
        return component.digits.count
    return _COMPONENT_BYTES[type(component)]


def _measure(item: Any) -> Metadata:
    if isinstance(item, Literal):
        return Metadata(max_bytes_needed=len(item.value), guaranteed_utf8=False)
    if isinstance(item, StringLiteral):
        return Metadata(max_bytes_needed=len(item.value.encode()), guaranteed_utf8=True)
    if isinstance(item, c.Component):
        return Metadata(max_bytes_needed=_component_bytes(item), guaranteed_utf8=True)
    if isinstance(item, Optional):
        return _measure(item.item)
    if isinstance(item, First):
        # Only the first alternative is ever written.
        if not item.items:
            return Metadata(max_bytes_needed=0, guaranteed_utf8=True)
        return _measure(item.items[0])
    if isinstance(item, (Compound, list, tuple)):
        parts = [_measure(part) for part in getattr(item, "items", item)]
        return Metadata(
            max_bytes_needed=sum(part.max_bytes_needed for part in parts),
            guaranteed_utf8=all(part.guaranteed_utf8 for part in parts),
        )
    if isinstance(item, Rfc3339):
        return Metadata(max_bytes_needed=35, guaranteed_utf8=True)
    if isinstance(item, Rfc2822):
        return Metadata(max_bytes_needed=31, guaranteed_utf8=True)
    if isinstance(item, Iso8601):
        return Metadata(max_bytes_needed=max_bytes_needed(item.config), guaranteed_utf8=True)
    raise TypeError(f"{item!r} is not a format description")


def metadata(description: Any) -> Metadata:
    """Compute the metadata for a description, list of items or well-known format."""
    return _measure(description)
