"""Markers for the well-known formats, which have fixed layouts."""

import enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rfc3339(BaseModel):
    """The format of RFC 3339 section 5.6, such as `1985-04-12T23:20:50.52Z`.

    With `abnf` set, input is checked against the RFC grammar first, which
    among other things requires `T` between the date and the time.
    """

    model_config = ConfigDict(frozen=True)

    abnf: bool = False


class Rfc2822(BaseModel):
    """The format of RFC 2822 section 3.3, such as `Sat, 02 Jan 2021 03:04:05 +0000`."""

    model_config = ConfigDict(frozen=True)

    abnf: bool = False


RFC3339 = Rfc3339()
RFC2822 = Rfc2822()


class FormattedComponents(enum.Enum):
    """Which of the date, time and offset are written."""

    NONE = "none"
    DATE = "date"
    TIME = "time"
    OFFSET = "offset"
    DATE_TIME = "date_time"
    DATE_TIME_OFFSET = "date_time_offset"
    TIME_OFFSET = "time_offset"

    @property
    def has_date(self) -> bool:
        return self in (
            FormattedComponents.DATE,
            FormattedComponents.DATE_TIME,
            FormattedComponents.DATE_TIME_OFFSET,
        )

    @property
    def has_time(self) -> bool:
        return self in (
            FormattedComponents.TIME,
            FormattedComponents.DATE_TIME,
            FormattedComponents.DATE_TIME_OFFSET,
            FormattedComponents.TIME_OFFSET,
        )

    @property
    def has_offset(self) -> bool:
        return self in (
            FormattedComponents.OFFSET,
            FormattedComponents.DATE_TIME_OFFSET,
            FormattedComponents.TIME_OFFSET,
        )


class DateKind(enum.Enum):
    CALENDAR = "calendar"
    WEEK = "week"
    ORDINAL = "ordinal"


class TimePrecision(enum.Enum):
    """The smallest time unit written; `decimal_digits` adds a fraction of it."""

    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"


class OffsetPrecision(enum.Enum):
    HOUR = "hour"
    MINUTE = "minute"


class Iso8601Config(BaseModel):
    """How ISO 8601 values are formatted. Parsing accepts any configuration."""

    model_config = ConfigDict(frozen=True)

    formatted_components: FormattedComponents = FormattedComponents.DATE_TIME_OFFSET
    use_separators: bool = True
    year_is_six_digits: bool = False
    date_kind: DateKind = DateKind.CALENDAR
    time_precision: TimePrecision = TimePrecision.SECOND
    decimal_digits: Optional[int] = Field(default=9, ge=1, le=9)
    offset_precision: OffsetPrecision = OffsetPrecision.MINUTE


class Iso8601(BaseModel):
    """ISO 8601, written as described by its configuration."""

    model_config = ConfigDict(frozen=True)

    config: Iso8601Config = Iso8601Config()

    DEFAULT: ClassVar["Iso8601"]
    PARSING: ClassVar["Iso8601"]
    DATE: ClassVar["Iso8601"]
    TIME: ClassVar["Iso8601"]
    OFFSET: ClassVar["Iso8601"]
    DATE_TIME: ClassVar["Iso8601"]
    DATE_TIME_OFFSET: ClassVar["Iso8601"]
    TIME_OFFSET: ClassVar["Iso8601"]


def _preset(components: FormattedComponents) -> Iso8601:
    return Iso8601(config=Iso8601Config(formatted_components=components))


Iso8601.DEFAULT = Iso8601()
Iso8601.PARSING = _preset(FormattedComponents.NONE)
Iso8601.DATE = _preset(FormattedComponents.DATE)
Iso8601.TIME = _preset(FormattedComponents.TIME)
Iso8601.OFFSET = _preset(FormattedComponents.OFFSET)
Iso8601.DATE_TIME = _preset(FormattedComponents.DATE_TIME)
Iso8601.DATE_TIME_OFFSET = _preset(FormattedComponents.DATE_TIME_OFFSET)
Iso8601.TIME_OFFSET = _preset(FormattedComponents.TIME_OFFSET)
