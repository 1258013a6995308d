"""Parse and format dates and times with format descriptions."""

import logging

# flake8: noqa: F401
from .description import (
    RFC2822,
    RFC3339,
    DateKind,
    FormattedComponents,
    Iso8601,
    Iso8601Config,
    OffsetPrecision,
    TimePrecision,
    parse_description,
    parse_owned,
    parse_strftime,
    parse_strftime_owned,
)
from .errors import (
    ComponentRange,
    Error,
    Expected,
    FormatComponentRange,
    FormatError,
    InsufficientInformation,
    InsufficientTypeInformation,
    InvalidComponent,
    InvalidComponentName,
    InvalidFormatComponent,
    InvalidFormatDescription,
    InvalidLiteral,
    InvalidModifier,
    MissingComponentName,
    MissingRequiredModifier,
    NotSupported,
    ParsedComponentRange,
    ParseError,
    ParseFromDescription,
    TryFromParsed,
    UnclosedOpeningBracket,
    UnexpectedTrailingCharacters,
    WriteError,
)
from .formatting import Metadata, format, format_into, metadata
from .parsing import (
    Parsed,
    parse,
    parse_date,
    parse_into,
    parse_offset,
    parse_offset_date_time,
    parse_primitive_date_time,
    parse_time,
    parse_utc_date_time,
)
from .values import (
    Date,
    Month,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
    Weekday,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
